"""
Dependency Injection para Repositories.

Todas as factories recebem o cliente de banco via get_db, entao basta
sobrescrever get_db para trocar o banco inteiro da aplicacao.

Uso em endpoints:
    from app.repositories.deps import get_correntista_repo

    @router.get("/correntistas/{id}")
    async def get_correntista(
        id: int,
        repo: CorrentistaRepository = Depends(get_correntista_repo)
    ):
        return await repo.buscar_por_id(id)

Uso em testes:
    app.dependency_overrides[get_db] = lambda: fake_db
    app.dependency_overrides[get_conector_db] = lambda: lambda: fake_db
"""
from typing import Any, Callable

from fastapi import Depends

from app.services.supabase import get_supabase_client
from .agencia import AgenciaRepository
from .conta import ContaRepository
from .contato import ContatoRepository
from .correntista import CorrentistaRepository
from .endereco import EnderecoRepository


def get_db() -> Any:
    """Retorna o cliente Supabase da aplicacao."""
    return get_supabase_client()


def get_conector_db() -> Callable[[], Any]:
    """
    Retorna a funcao que obtem o cliente de banco, sem chama-la.

    Para quem precisa tratar falha de configuracao (ex: readiness), que
    aconteceria antes do endpoint se o cliente viesse de get_db.
    """
    return get_db


def get_correntista_repo(db: Any = Depends(get_db)) -> CorrentistaRepository:
    return CorrentistaRepository(db)


def get_endereco_repo(db: Any = Depends(get_db)) -> EnderecoRepository:
    return EnderecoRepository(db)


def get_contato_repo(db: Any = Depends(get_db)) -> ContatoRepository:
    return ContatoRepository(db)


def get_conta_repo(db: Any = Depends(get_db)) -> ContaRepository:
    return ContaRepository(db)


def get_agencia_repo(db: Any = Depends(get_db)) -> AgenciaRepository:
    return AgenciaRepository(db)
