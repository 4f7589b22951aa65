"""
Aplica as migrations do BlueBank no Supabase.

Uso:
    python migrations/apply.py

Requer: SUPABASE_URL e SUPABASE_SERVICE_KEY no .env e a funcao
exec_sql(sql text) criada no banco. Sem ela, execute os arquivos
manualmente no Supabase SQL Editor, na ordem abaixo.
"""
import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from postgrest.exceptions import APIError
from supabase import create_client

load_dotenv()

MIGRATIONS_DIR = Path(__file__).parent / "bluebank"

# Ordem das migrations
MIGRATIONS = [
    "001_schema.sql",
    "002_criar_correntista.sql",
    "003_seed.sql",
]


def apply_migrations(supabase) -> bool:
    """Aplica todas as migrations em ordem. Para no primeiro erro."""
    for migration_file in MIGRATIONS:
        path = MIGRATIONS_DIR / migration_file
        if not path.exists():
            print(f"[SKIP] {migration_file} nao encontrado")
            continue

        print(f"[APPLY] {migration_file}...")
        try:
            supabase.rpc("exec_sql", {"sql": path.read_text()}).execute()
        except APIError as e:
            print(f"[ERROR] {migration_file}: [{e.code}] {e.message}")
            return False
        print(f"[OK] {migration_file}")
    return True


if __name__ == "__main__":
    url = os.getenv("SUPABASE_URL")
    key = os.getenv("SUPABASE_SERVICE_KEY")
    if not url or not key:
        print("Erro: SUPABASE_URL e SUPABASE_SERVICE_KEY necessarios no .env")
        sys.exit(1)

    print("=== BlueBank Migrations ===")
    print(f"URL: {url}")
    print()

    if not apply_migrations(create_client(url, key)):
        print()
        print("Execute os SQLs restantes manualmente no Supabase SQL Editor:")
        for m in MIGRATIONS:
            print(f"  - migrations/bluebank/{m}")
        sys.exit(1)
