"""
Servico de Contas e consulta de Agencias.
"""
import dataclasses
import logging
from typing import List

from app.core.exceptions import EntidadeEmUsoError, NotFoundError, ValidationError
from app.repositories.agencia import Agencia, AgenciaRepository
from app.repositories.base import Pagina
from app.repositories.conta import Conta, ContaRepository
from app.repositories.correntista import CorrentistaRepository
from app.services.resultado import exigir

logger = logging.getLogger(__name__)

TAMANHO_TIPO_CONTA = 2


class ContaService:
    """Abertura, consulta e encerramento de contas."""

    def __init__(
        self,
        contas: ContaRepository,
        correntistas: CorrentistaRepository,
        agencias: AgenciaRepository,
    ):
        self.contas = contas
        self.correntistas = correntistas
        self.agencias = agencias

    async def abrir(self, conta: Conta) -> Conta:
        """
        Abre conta para um correntista em uma agencia.

        Raises:
            ValidationError: tipo_conta sem exatamente 2 caracteres, ou
                correntista/agencia nao informados
            NotFoundError: Correntista ou agencia inexistente
        """
        tipo_conta = (conta.tipo_conta or "").strip()
        if len(tipo_conta) != TAMANHO_TIPO_CONTA:
            raise ValidationError(
                "Tipo da Conta deve ter 2 digitos",
                details={"tipo_conta": conta.tipo_conta},
            )
        if conta.id_correntista is None or conta.id_agencia is None:
            raise ValidationError("Correntista e agencia sao obrigatorios")

        exigir(await self.correntistas.buscar_por_id(conta.id_correntista), "Correntista", conta.id_correntista)
        exigir(await self.agencias.buscar_por_id(conta.id_agencia), "Agencia", conta.id_agencia)

        resultado = await self.contas.abrir(dataclasses.replace(conta, num_conta=None, tipo_conta=tipo_conta))
        if resultado.conflito:
            # Correntista/agencia removidos entre a checagem e o insert
            raise NotFoundError(
                "Correntista ou Agencia",
                message="Correntista ou agencia da conta nao existe mais",
            )
        nova = exigir(resultado, "Conta")
        logger.info(f"Conta {nova.num_conta} aberta para correntista {nova.id_correntista}")
        return nova

    async def buscar(self, num_conta: int) -> Conta:
        return exigir(await self.contas.buscar_por_id(num_conta), "Conta", num_conta)

    async def listar(self, pagina: int = 0, tamanho: int = 20) -> Pagina[Conta]:
        return exigir(await self.contas.listar(pagina=pagina, tamanho=tamanho), "Conta")

    async def listar_por_correntista(self, correntista_id: int) -> List[Conta]:
        """
        Raises:
            NotFoundError: Correntista inexistente
        """
        exigir(await self.correntistas.buscar_por_id(correntista_id), "Correntista", correntista_id)
        return exigir(await self.contas.listar_por_correntista(correntista_id), "Conta")

    async def encerrar(self, num_conta: int) -> None:
        """
        Exclui a conta.

        Raises:
            NotFoundError: Conta inexistente
            EntidadeEmUsoError: Conta referenciada por outro registro
        """
        await self.buscar(num_conta)

        resultado = await self.contas.deletar(num_conta)
        if resultado.conflito:
            raise EntidadeEmUsoError(
                f"Conta {num_conta} nao pode ser removida, pois esta em uso",
                identifier=num_conta,
            )
        exigir(resultado, "Conta", num_conta)
        logger.info(f"Conta encerrada: {num_conta}")


class AgenciaService:
    """Consulta de agencias."""

    def __init__(self, agencias: AgenciaRepository):
        self.agencias = agencias

    async def listar(self, pagina: int = 0, tamanho: int = 20) -> Pagina[Agencia]:
        return exigir(await self.agencias.listar(pagina=pagina, tamanho=tamanho), "Agencia")

    async def buscar(self, agencia_id: int) -> Agencia:
        return exigir(await self.agencias.buscar_por_id(agencia_id), "Agencia", agencia_id)
