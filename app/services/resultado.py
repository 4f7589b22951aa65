"""
Traducao de QueryResult para erros de negocio.
"""
from typing import Optional, TypeVar

from app.core.exceptions import DatabaseError, NotFoundError
from app.repositories.base import QueryResult

T = TypeVar("T")


def exigir(
    resultado: QueryResult[T],
    recurso: str,
    identificador: Optional[int] = None,
) -> T:
    """
    Retorna o payload do resultado ou levanta o erro correspondente.

    Args:
        resultado: Resultado vindo do repository
        recurso: Nome do recurso para a mensagem de erro (ex: "Correntista")
        identificador: Id consultado, se houver

    Returns:
        resultado.data

    Raises:
        NotFoundError: Status NAO_ENCONTRADO
        DatabaseError: Status CONFLITO ou FALHA
    """
    if resultado.success:
        return resultado.data
    if resultado.nao_encontrado:
        raise NotFoundError(recurso, identificador)
    raise DatabaseError(
        f"Falha no banco ao acessar {recurso}",
        details={"erro": resultado.error, "codigo": resultado.codigo},
    )
