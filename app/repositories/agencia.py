"""
Repository para Agencias (somente leitura).
"""

from typing import Optional
from dataclasses import dataclass

from .base import BaseRepository


@dataclass
class Agencia:
    """Agencia bancaria."""

    id: Optional[int] = None
    nome: Optional[str] = None
    numero: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Agencia":
        return cls(
            id=data.get("id"),
            nome=data.get("nome"),
            numero=data.get("numero"),
        )


class AgenciaRepository(BaseRepository[Agencia]):
    """Repository para consulta de agencias."""

    @property
    def table_name(self) -> str:
        return "agencias"

    def from_row(self, row: dict) -> Agencia:
        return Agencia.from_dict(row)
