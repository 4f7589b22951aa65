"""
Repository para Contatos de correntistas.
"""

from typing import List, Optional
from dataclasses import dataclass

from .base import BaseRepository, QueryResult


@dataclass
class ContatoCliente:
    """Contato (telefone/email) pertencente a um correntista."""

    id: Optional[int] = None
    id_correntista: Optional[int] = None
    telefone: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "ContatoCliente":
        """Cria ContatoCliente a partir de dict do banco."""
        return cls(
            id=data.get("id"),
            id_correntista=data.get("id_correntista"),
            telefone=data.get("telefone"),
            email=data.get("email"),
        )

    def to_dict(self) -> dict:
        """Converte para dict de insert (sem id, gerado pelo banco)."""
        return {
            k: v
            for k, v in {
                "id_correntista": self.id_correntista,
                "telefone": self.telefone,
                "email": self.email,
            }.items()
            if v is not None
        }


class ContatoRepository(BaseRepository[ContatoCliente]):
    """Repository para operacoes de ContatoCliente."""

    @property
    def table_name(self) -> str:
        return "contatos_cliente"

    def from_row(self, row: dict) -> ContatoCliente:
        return ContatoCliente.from_dict(row)

    async def listar_por_correntista(self, correntista_id: int) -> QueryResult[List[ContatoCliente]]:
        """Lista contatos do correntista, em ordem de criacao."""
        return await self.listar_por("id_correntista", correntista_id)
