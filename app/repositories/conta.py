"""
Repository para Contas.

Conta nao tem caminho de atualizacao: correntista e agencia sao
definidos na abertura e nao mudam mais.
"""

from typing import List, Optional
from dataclasses import dataclass

from .base import BaseRepository, QueryResult


@dataclass
class Conta:
    """Conta bancaria de um correntista em uma agencia."""

    num_conta: Optional[int] = None
    tipo_conta: Optional[str] = None
    id_correntista: Optional[int] = None
    id_agencia: Optional[int] = None
    data_cadastro: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Conta":
        """Cria Conta a partir de dict do banco."""
        return cls(
            num_conta=data.get("num_conta"),
            tipo_conta=data.get("tipo_conta"),
            id_correntista=data.get("id_correntista"),
            id_agencia=data.get("id_agencia"),
            data_cadastro=data.get("data_cadastro"),
        )


class ContaRepository(BaseRepository[Conta]):
    """Repository para operacoes de Conta."""

    id_column = "num_conta"

    @property
    def table_name(self) -> str:
        return "contas"

    def from_row(self, row: dict) -> Conta:
        return Conta.from_dict(row)

    async def abrir(self, conta: Conta) -> QueryResult[Conta]:
        """
        Insere conta nova; data_cadastro fica com o DEFAULT NOW() do banco.

        Returns:
            QueryResult com a Conta criada (num_conta gerado pelo banco)
        """
        return await self.criar({
            "tipo_conta": conta.tipo_conta,
            "id_correntista": conta.id_correntista,
            "id_agencia": conta.id_agencia,
        })

    async def listar_por_correntista(self, correntista_id: int) -> QueryResult[List[Conta]]:
        """Lista contas do correntista."""
        return await self.listar_por("id_correntista", correntista_id)
