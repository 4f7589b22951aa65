"""
Schemas de entrada/saida de correntistas, enderecos e contatos.
"""
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Optional

from app.repositories.contato import ContatoCliente
from app.repositories.correntista import Correntista
from app.repositories.endereco import Endereco


class EnderecoEntrada(BaseModel):
    """Endereco recebido na criacao do correntista ou em POST /enderecos."""
    logradouro: str = Field(min_length=1, max_length=120)
    numero: Optional[str] = Field(default=None, max_length=10)
    complemento: Optional[str] = Field(default=None, max_length=60)
    bairro: Optional[str] = Field(default=None, max_length=60)
    cidade: str = Field(min_length=1, max_length=60)
    uf: str = Field(min_length=2, max_length=2)
    cep: str = Field(min_length=8, max_length=9)  # 00000000 ou 00000-000

    def to_entidade(self) -> Endereco:
        return Endereco(**self.model_dump())


class EnderecoSaida(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    id_correntista: int
    logradouro: Optional[str] = None
    numero: Optional[str] = None
    complemento: Optional[str] = None
    bairro: Optional[str] = None
    cidade: Optional[str] = None
    uf: Optional[str] = None
    cep: Optional[str] = None


class ContatoEntrada(BaseModel):
    """Contato do correntista (ao menos telefone ou email)."""
    telefone: Optional[str] = Field(default=None, max_length=20)
    email: Optional[str] = Field(default=None, max_length=120)

    @model_validator(mode="after")
    def exigir_telefone_ou_email(self) -> "ContatoEntrada":
        if not self.telefone and not self.email:
            raise ValueError("Informe telefone ou email")
        return self

    def to_entidade(self) -> ContatoCliente:
        return ContatoCliente(**self.model_dump())


class ContatoSaida(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    id_correntista: int
    telefone: Optional[str] = None
    email: Optional[str] = None


class CorrentistaAtualizacao(BaseModel):
    """Dados cadastrais do correntista (PUT)."""
    nome: str = Field(min_length=1, max_length=120)
    cpf_cnpj: str = Field(min_length=11, max_length=18)
    tipo_pessoa: str = Field(pattern="^[fFjJ]$")  # F (fisica) ou J (juridica)

    def to_entidade(self, correntista_id: Optional[int] = None) -> Correntista:
        return Correntista(
            id=correntista_id,
            nome=self.nome,
            cpf_cnpj=self.cpf_cnpj,
            tipo_pessoa=self.tipo_pessoa,
        )


class CorrentistaEntrada(CorrentistaAtualizacao):
    """Correntista novo, com enderecos e contatos iniciais (POST)."""
    enderecos: List[EnderecoEntrada] = Field(default_factory=list)
    contatos: List[ContatoEntrada] = Field(default_factory=list)

    def to_entidade(self, correntista_id: Optional[int] = None) -> Correntista:
        correntista = super().to_entidade(correntista_id)
        correntista.enderecos = [e.to_entidade() for e in self.enderecos]
        correntista.contatos = [c.to_entidade() for c in self.contatos]
        return correntista


class CorrentistaResumo(BaseModel):
    """Correntista sem filhos (listagem paginada)."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    nome: Optional[str] = None
    cpf_cnpj: Optional[str] = None
    tipo_pessoa: Optional[str] = None
    bloqueado: bool = False
    data_cadastro: Optional[str] = None


class CorrentistaSaida(CorrentistaResumo):
    enderecos: List[EnderecoSaida] = Field(default_factory=list)
    contatos: List[ContatoSaida] = Field(default_factory=list)
