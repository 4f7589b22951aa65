"""
Endpoints de correntistas, enderecos e contatos.
"""
from fastapi import APIRouter, Depends, Response, status
from typing import List

from app.schemas.conta import ContaSaida
from app.schemas.correntista import (
    ContatoEntrada,
    ContatoSaida,
    CorrentistaAtualizacao,
    CorrentistaEntrada,
    CorrentistaResumo,
    CorrentistaSaida,
    EnderecoEntrada,
    EnderecoSaida,
)
from app.schemas.paginacao import PaginaSaida, ParametrosPagina, parametros_pagina
from app.services.conta import ContaService
from app.services.correntista import CorrentistaService
from app.services.deps import get_conta_service, get_correntista_service

router = APIRouter(prefix="/correntistas", tags=["correntistas"])


@router.post("", response_model=CorrentistaSaida, status_code=status.HTTP_201_CREATED)
async def criar_correntista(
    dados: CorrentistaEntrada,
    service: CorrentistaService = Depends(get_correntista_service),
):
    """Cria correntista com enderecos e contatos em uma unica transacao."""
    correntista = await service.criar(dados.to_entidade())
    return CorrentistaSaida.model_validate(correntista)


@router.get("", response_model=PaginaSaida[CorrentistaResumo])
async def listar_correntistas(
    paginacao: ParametrosPagina = Depends(parametros_pagina),
    service: CorrentistaService = Depends(get_correntista_service),
):
    pagina = await service.listar(pagina=paginacao.pagina, tamanho=paginacao.tamanho)
    return PaginaSaida[CorrentistaResumo].de_pagina(pagina, CorrentistaResumo)


@router.get("/{correntista_id}", response_model=CorrentistaSaida)
async def buscar_correntista(
    correntista_id: int,
    service: CorrentistaService = Depends(get_correntista_service),
):
    return CorrentistaSaida.model_validate(await service.buscar(correntista_id))


@router.put("/{correntista_id}", response_model=CorrentistaSaida)
async def atualizar_correntista(
    correntista_id: int,
    dados: CorrentistaAtualizacao,
    service: CorrentistaService = Depends(get_correntista_service),
):
    """Atualiza dados cadastrais. Correntistas bloqueados retornam 403."""
    correntista = await service.atualizar(dados.to_entidade(correntista_id))
    return CorrentistaSaida.model_validate(correntista)


@router.delete("/{correntista_id}", status_code=status.HTTP_204_NO_CONTENT)
async def excluir_correntista(
    correntista_id: int,
    service: CorrentistaService = Depends(get_correntista_service),
):
    """Exclui correntista. Retorna 409 se ainda houver contas."""
    await service.excluir(correntista_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Enderecos

@router.get("/{correntista_id}/enderecos", response_model=List[EnderecoSaida])
async def listar_enderecos(
    correntista_id: int,
    service: CorrentistaService = Depends(get_correntista_service),
):
    enderecos = await service.listar_enderecos(correntista_id)
    return [EnderecoSaida.model_validate(e) for e in enderecos]


@router.post(
    "/{correntista_id}/enderecos",
    response_model=List[EnderecoSaida],
    status_code=status.HTTP_201_CREATED,
)
async def adicionar_endereco(
    correntista_id: int,
    dados: EnderecoEntrada,
    service: CorrentistaService = Depends(get_correntista_service),
):
    """Adiciona endereco e retorna todos os enderecos do correntista."""
    enderecos = await service.adicionar_endereco(correntista_id, dados.to_entidade())
    return [EnderecoSaida.model_validate(e) for e in enderecos]


@router.delete(
    "/{correntista_id}/enderecos/{endereco_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def excluir_endereco(
    correntista_id: int,
    endereco_id: int,
    service: CorrentistaService = Depends(get_correntista_service),
):
    await service.excluir_endereco(correntista_id, endereco_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Contatos

@router.get("/{correntista_id}/contatos", response_model=List[ContatoSaida])
async def listar_contatos(
    correntista_id: int,
    service: CorrentistaService = Depends(get_correntista_service),
):
    contatos = await service.listar_contatos(correntista_id)
    return [ContatoSaida.model_validate(c) for c in contatos]


@router.post(
    "/{correntista_id}/contatos",
    response_model=List[ContatoSaida],
    status_code=status.HTTP_201_CREATED,
)
async def adicionar_contato(
    correntista_id: int,
    dados: ContatoEntrada,
    service: CorrentistaService = Depends(get_correntista_service),
):
    """Adiciona contato e retorna todos os contatos do correntista."""
    contatos = await service.adicionar_contato(correntista_id, dados.to_entidade())
    return [ContatoSaida.model_validate(c) for c in contatos]


@router.delete(
    "/{correntista_id}/contatos/{contato_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def excluir_contato(
    correntista_id: int,
    contato_id: int,
    service: CorrentistaService = Depends(get_correntista_service),
):
    await service.excluir_contato(correntista_id, contato_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Contas

@router.get("/{correntista_id}/contas", response_model=List[ContaSaida])
async def listar_contas_do_correntista(
    correntista_id: int,
    service: ContaService = Depends(get_conta_service),
):
    contas = await service.listar_por_correntista(correntista_id)
    return [ContaSaida.model_validate(c) for c in contas]
