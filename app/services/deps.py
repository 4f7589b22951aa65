"""
Dependency Injection para os servicos de negocio.
"""
from fastapi import Depends

from app.repositories.agencia import AgenciaRepository
from app.repositories.conta import ContaRepository
from app.repositories.contato import ContatoRepository
from app.repositories.correntista import CorrentistaRepository
from app.repositories.deps import (
    get_agencia_repo,
    get_conta_repo,
    get_contato_repo,
    get_correntista_repo,
    get_endereco_repo,
)
from app.repositories.endereco import EnderecoRepository
from app.services.bloqueio import PoliticaBloqueio
from app.services.conta import AgenciaService, ContaService
from app.services.correntista import CorrentistaService


def get_politica_bloqueio() -> PoliticaBloqueio:
    return PoliticaBloqueio()


def get_correntista_service(
    correntistas: CorrentistaRepository = Depends(get_correntista_repo),
    enderecos: EnderecoRepository = Depends(get_endereco_repo),
    contatos: ContatoRepository = Depends(get_contato_repo),
    politica: PoliticaBloqueio = Depends(get_politica_bloqueio),
) -> CorrentistaService:
    return CorrentistaService(correntistas, enderecos, contatos, politica)


def get_conta_service(
    contas: ContaRepository = Depends(get_conta_repo),
    correntistas: CorrentistaRepository = Depends(get_correntista_repo),
    agencias: AgenciaRepository = Depends(get_agencia_repo),
) -> ContaService:
    return ContaService(contas, correntistas, agencias)


def get_agencia_service(
    agencias: AgenciaRepository = Depends(get_agencia_repo),
) -> AgenciaService:
    return AgenciaService(agencias)
