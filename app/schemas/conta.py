"""
Schemas de contas e agencias.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from app.repositories.conta import Conta


class ContaEntrada(BaseModel):
    """Abertura de conta. Correntista e agencia nao mudam depois."""
    tipo_conta: str = Field(min_length=2, max_length=2)  # ex: "CC", "CP"
    id_correntista: int
    id_agencia: int

    def to_entidade(self) -> Conta:
        return Conta(**self.model_dump())


class ContaSaida(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    num_conta: int
    tipo_conta: str
    id_correntista: int
    id_agencia: int
    data_cadastro: Optional[str] = None


class AgenciaSaida(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: Optional[str] = None
    numero: Optional[str] = None
