"""
Repository para Enderecos de correntistas.
"""

from typing import List, Optional
from dataclasses import dataclass

from .base import BaseRepository, QueryResult


@dataclass
class Endereco:
    """Endereco pertencente a um correntista."""

    id: Optional[int] = None
    id_correntista: Optional[int] = None
    logradouro: Optional[str] = None
    numero: Optional[str] = None
    complemento: Optional[str] = None
    bairro: Optional[str] = None
    cidade: Optional[str] = None
    uf: Optional[str] = None
    cep: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Endereco":
        """Cria Endereco a partir de dict do banco."""
        return cls(
            id=data.get("id"),
            id_correntista=data.get("id_correntista"),
            logradouro=data.get("logradouro"),
            numero=data.get("numero"),
            complemento=data.get("complemento"),
            bairro=data.get("bairro"),
            cidade=data.get("cidade"),
            uf=data.get("uf"),
            cep=data.get("cep"),
        )

    def to_dict(self) -> dict:
        """Converte para dict de insert (sem id, gerado pelo banco)."""
        return {
            k: v
            for k, v in {
                "id_correntista": self.id_correntista,
                "logradouro": self.logradouro,
                "numero": self.numero,
                "complemento": self.complemento,
                "bairro": self.bairro,
                "cidade": self.cidade,
                "uf": self.uf,
                "cep": self.cep,
            }.items()
            if v is not None
        }


class EnderecoRepository(BaseRepository[Endereco]):
    """Repository para operacoes de Endereco."""

    @property
    def table_name(self) -> str:
        return "enderecos"

    def from_row(self, row: dict) -> Endereco:
        return Endereco.from_dict(row)

    async def listar_por_correntista(self, correntista_id: int) -> QueryResult[List[Endereco]]:
        """Lista enderecos do correntista, em ordem de criacao."""
        return await self.listar_por("id_correntista", correntista_id)
