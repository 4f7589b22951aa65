"""
Schema generico de pagina de resultados.
"""
from typing import Generic, List, Type, TypeVar

from fastapi import Query
from pydantic import BaseModel

from app.core.config import settings
from app.repositories.base import Pagina

T = TypeVar("T", bound=BaseModel)


class PaginaSaida(BaseModel, Generic[T]):
    conteudo: List[T]
    pagina: int
    tamanho: int
    total: int
    total_paginas: int

    @classmethod
    def de_pagina(cls, pagina: Pagina, schema: Type[T]) -> "PaginaSaida[T]":
        """Converte Pagina de entidades do repository para o schema de saida."""
        return cls(
            conteudo=[schema.model_validate(item) for item in pagina.conteudo],
            pagina=pagina.pagina,
            tamanho=pagina.tamanho,
            total=pagina.total,
            total_paginas=pagina.total_paginas,
        )


class ParametrosPagina(BaseModel):
    pagina: int
    tamanho: int


def parametros_pagina(
    pagina: int = Query(0, ge=0, description="Pagina (comeca em 0)"),
    tamanho: int = Query(
        settings.PAGINA_TAMANHO_PADRAO,
        ge=1,
        le=settings.PAGINA_TAMANHO_MAXIMO,
        description="Itens por pagina",
    ),
) -> ParametrosPagina:
    """Dependency com os parametros de paginacao da query string."""
    return ParametrosPagina(pagina=pagina, tamanho=tamanho)
