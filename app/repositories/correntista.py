"""
Repository para Correntistas.

O correntista e a raiz do agregado: enderecos e contatos referenciam o
correntista pelo id e sao carregados junto com ele pela camada de servico.
"""

import logging
from typing import List, Optional
from dataclasses import dataclass, field

from .base import BaseRepository, QueryResult, StatusQuery
from .contato import ContatoCliente
from .endereco import Endereco

logger = logging.getLogger(__name__)

# Funcao no banco que grava correntista + enderecos + contatos em uma transacao
RPC_CRIAR_CORRENTISTA = "criar_correntista"


@dataclass
class Correntista:
    """
    Entidade Correntista (titular de contas).

    tipo_pessoa: "F" (fisica) ou "J" (juridica), sempre maiusculo no banco.
    bloqueado: correntista protegido contra alteracao e exclusao.
    """

    id: Optional[int] = None
    nome: Optional[str] = None
    cpf_cnpj: Optional[str] = None
    tipo_pessoa: Optional[str] = None
    bloqueado: bool = False
    data_cadastro: Optional[str] = None
    enderecos: List[Endereco] = field(default_factory=list)
    contatos: List[ContatoCliente] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Correntista":
        """Cria Correntista a partir de dict do banco (filhos opcionais)."""
        return cls(
            id=data.get("id"),
            nome=data.get("nome"),
            cpf_cnpj=data.get("cpf_cnpj"),
            tipo_pessoa=data.get("tipo_pessoa"),
            bloqueado=bool(data.get("bloqueado", False)),
            data_cadastro=data.get("data_cadastro"),
            enderecos=[Endereco.from_dict(e) for e in data.get("enderecos") or []],
            contatos=[ContatoCliente.from_dict(c) for c in data.get("contatos") or []],
        )

    def to_dict(self) -> dict:
        """Converte para dict de escrita (sem filhos, sem flag de bloqueio)."""
        data = {
            "nome": self.nome,
            "cpf_cnpj": self.cpf_cnpj,
            "tipo_pessoa": self.tipo_pessoa,
        }
        if self.id is not None:
            data["id"] = self.id
        return {k: v for k, v in data.items() if v is not None}


class CorrentistaRepository(BaseRepository[Correntista]):
    """
    Repository para operacoes de Correntista.

    Uso:
        repo = CorrentistaRepository(supabase)
        resultado = await repo.buscar_por_id(10)
        if resultado.success:
            correntista = resultado.data
    """

    @property
    def table_name(self) -> str:
        return "correntistas"

    def from_row(self, row: dict) -> Correntista:
        return Correntista.from_dict(row)

    async def criar_com_filhos(self, correntista: Correntista) -> QueryResult[Correntista]:
        """
        Grava correntista, enderecos e contatos em uma unica transacao.

        A funcao criar_correntista do banco insere o correntista, carimba o
        id gerado em cada filho e devolve o agregado completo. Se qualquer
        insert falhar nada fica gravado.

        Args:
            correntista: Correntista com enderecos/contatos a criar

        Returns:
            QueryResult com o Correntista persistido (ids e data_cadastro
            preenchidos pelo banco)
        """
        params = {
            "p_correntista": correntista.to_dict(),
            "p_enderecos": [e.to_dict() for e in correntista.enderecos],
            "p_contatos": [c.to_dict() for c in correntista.contatos],
        }
        resultado = self._executar(
            "criar correntista com enderecos e contatos",
            lambda: self.db.rpc(RPC_CRIAR_CORRENTISTA, params).execute(),
        )
        if not resultado.success:
            return resultado
        if not resultado.data:
            return QueryResult(
                status=StatusQuery.FALHA,
                error=f"{RPC_CRIAR_CORRENTISTA} nao retornou dados",
            )

        dados = resultado.data[0] if isinstance(resultado.data, list) else resultado.data
        novo = Correntista.from_dict(dados)
        logger.info(
            f"Correntista criado: {novo.id} "
            f"({len(novo.enderecos)} enderecos, {len(novo.contatos)} contatos)"
        )
        return resultado.como(novo)
