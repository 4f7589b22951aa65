"""
Repositories - Camada de acesso a dados.

Cada repository encapsula uma tabela do Supabase e devolve sempre um
QueryResult (OK, NAO_ENCONTRADO, CONFLITO ou FALHA); nenhuma exception do
postgrest chega na camada de servico.

Uso em testes:
    from app.repositories import CorrentistaRepository

    def test_buscar_correntista(fake_db):
        repo = CorrentistaRepository(fake_db)
        # Testar sem patches!

Entidades disponiveis:
- Correntista: titular de contas (raiz do agregado)
- Endereco / ContatoCliente: filhos do correntista
- Conta: conta bancaria (correntista + agencia)
- Agencia: agencia bancaria (somente leitura)
"""

from .base import BaseRepository, QueryResult, StatusQuery, Pagina
from .agencia import AgenciaRepository, Agencia
from .conta import ContaRepository, Conta
from .contato import ContatoRepository, ContatoCliente
from .correntista import CorrentistaRepository, Correntista
from .endereco import EnderecoRepository, Endereco

__all__ = [
    # Base
    "BaseRepository",
    "QueryResult",
    "StatusQuery",
    "Pagina",
    # Correntista e filhos
    "CorrentistaRepository",
    "Correntista",
    "EnderecoRepository",
    "Endereco",
    "ContatoRepository",
    "ContatoCliente",
    # Conta e agencia
    "ContaRepository",
    "Conta",
    "AgenciaRepository",
    "Agencia",
]
