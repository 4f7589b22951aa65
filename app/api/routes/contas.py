"""
Endpoints de contas e agencias.

Conta nao tem PUT: correntista e agencia sao fixos apos a abertura.
"""
from fastapi import APIRouter, Depends, Response, status

from app.schemas.conta import AgenciaSaida, ContaEntrada, ContaSaida
from app.schemas.paginacao import PaginaSaida, ParametrosPagina, parametros_pagina
from app.services.conta import AgenciaService, ContaService
from app.services.deps import get_agencia_service, get_conta_service

router = APIRouter(prefix="/contas", tags=["contas"])
agencias_router = APIRouter(prefix="/agencias", tags=["agencias"])


@router.post("", response_model=ContaSaida, status_code=status.HTTP_201_CREATED)
async def abrir_conta(
    dados: ContaEntrada,
    service: ContaService = Depends(get_conta_service),
):
    """Abre conta. 404 se correntista ou agencia nao existem."""
    return ContaSaida.model_validate(await service.abrir(dados.to_entidade()))


@router.get("", response_model=PaginaSaida[ContaSaida])
async def listar_contas(
    paginacao: ParametrosPagina = Depends(parametros_pagina),
    service: ContaService = Depends(get_conta_service),
):
    pagina = await service.listar(pagina=paginacao.pagina, tamanho=paginacao.tamanho)
    return PaginaSaida[ContaSaida].de_pagina(pagina, ContaSaida)


@router.get("/{num_conta}", response_model=ContaSaida)
async def buscar_conta(
    num_conta: int,
    service: ContaService = Depends(get_conta_service),
):
    return ContaSaida.model_validate(await service.buscar(num_conta))


@router.delete("/{num_conta}", status_code=status.HTTP_204_NO_CONTENT)
async def encerrar_conta(
    num_conta: int,
    service: ContaService = Depends(get_conta_service),
):
    await service.encerrar(num_conta)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@agencias_router.get("", response_model=PaginaSaida[AgenciaSaida])
async def listar_agencias(
    paginacao: ParametrosPagina = Depends(parametros_pagina),
    service: AgenciaService = Depends(get_agencia_service),
):
    pagina = await service.listar(pagina=paginacao.pagina, tamanho=paginacao.tamanho)
    return PaginaSaida[AgenciaSaida].de_pagina(pagina, AgenciaSaida)


@agencias_router.get("/{agencia_id}", response_model=AgenciaSaida)
async def buscar_agencia(
    agencia_id: int,
    service: AgenciaService = Depends(get_agencia_service),
):
    return AgenciaSaida.model_validate(await service.buscar(agencia_id))
