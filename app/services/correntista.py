"""
Servico de Correntistas.

Orquestra o agregado correntista + enderecos + contatos. Cada metodo
publico e uma unidade de trabalho: ou uma unica instrucao no banco, ou a
funcao transacional criar_correntista.
"""
import dataclasses
import logging
from typing import List, Optional

from app.core.exceptions import (
    DatabaseError,
    EntidadeEmUsoError,
    NotFoundError,
    ValidationError,
)
from app.repositories.base import BaseRepository, Pagina, QueryResult
from app.repositories.contato import ContatoCliente, ContatoRepository
from app.repositories.correntista import Correntista, CorrentistaRepository
from app.repositories.endereco import Endereco, EnderecoRepository
from app.services.bloqueio import PoliticaBloqueio
from app.services.resultado import exigir

logger = logging.getLogger(__name__)

MSG_CORRENTISTA_EM_USO = "Correntista de id {id} nao pode ser removido, pois esta em uso"
MSG_FILHO_DE_OUTRO_CORRENTISTA = "O {recurso} especificado {filho_id} nao corresponde ao correntista {correntista_id}"


def normalizar_tipo_pessoa(tipo_pessoa: Optional[str]) -> Optional[str]:
    """'f' -> 'F'; None continua None."""
    if tipo_pessoa is None:
        return None
    return tipo_pessoa.strip().upper()


class CorrentistaService:
    """
    Regras de negocio de correntistas.

    Uso:
        service = CorrentistaService(
            CorrentistaRepository(db),
            EnderecoRepository(db),
            ContatoRepository(db),
        )
        correntista = await service.buscar(10)
    """

    def __init__(
        self,
        correntistas: CorrentistaRepository,
        enderecos: EnderecoRepository,
        contatos: ContatoRepository,
        politica: Optional[PoliticaBloqueio] = None,
    ):
        self.correntistas = correntistas
        self.enderecos = enderecos
        self.contatos = contatos
        self.politica = politica or PoliticaBloqueio()

    async def criar(self, correntista: Correntista) -> Correntista:
        """
        Cria correntista junto com seus enderecos e contatos.

        Todos os registros sao gravados de uma vez; se algum falhar,
        nenhum fica no banco.

        Returns:
            Correntista persistido, com ids gerados e filhos carimbados
        """
        novo = dataclasses.replace(
            correntista,
            id=None,
            bloqueado=False,
            tipo_pessoa=normalizar_tipo_pessoa(correntista.tipo_pessoa),
            enderecos=[dataclasses.replace(e, id=None, id_correntista=None) for e in correntista.enderecos],
            contatos=[dataclasses.replace(c, id=None, id_correntista=None) for c in correntista.contatos],
        )

        resultado = await self.correntistas.criar_com_filhos(novo)
        if resultado.conflito:
            raise ValidationError(
                "Correntista viola restricao de unicidade",
                details={"erro": resultado.error},
            )
        return exigir(resultado, "Correntista")

    async def atualizar(self, correntista: Correntista) -> Correntista:
        """
        Atualiza dados cadastrais do correntista.

        Enderecos e contatos nao sao alterados aqui; use os metodos
        especificos de cada filho. Id inexistente cria um correntista novo
        com id gerado pelo banco (o id informado e descartado).

        Raises:
            RecursoBloqueadoError: Correntista protegido
            ValidationError: Correntista sem id
        """
        if correntista.id is None:
            raise ValidationError("Id do correntista e obrigatorio para atualizacao")

        self.politica.verificar_id(correntista.id)

        existente = await self.correntistas.buscar_por_id(correntista.id)
        if existente.nao_encontrado:
            logger.info(f"Correntista {correntista.id} inexistente, criando novo")
            return await self.criar(
                dataclasses.replace(correntista, enderecos=[], contatos=[])
            )
        self.politica.verificar(exigir(existente, "Correntista", correntista.id))

        dados = dataclasses.replace(
            correntista,
            tipo_pessoa=normalizar_tipo_pessoa(correntista.tipo_pessoa),
        ).to_dict()

        resultado = await self.correntistas.salvar(dados)
        if resultado.conflito:
            raise ValidationError(
                "Correntista viola restricao de unicidade",
                details={"erro": resultado.error},
            )
        exigir(resultado, "Correntista", correntista.id)
        logger.info(f"Correntista atualizado: {correntista.id}")

        return await self.buscar(correntista.id)

    async def listar(self, pagina: int = 0, tamanho: int = 20) -> Pagina[Correntista]:
        """Pagina de correntistas (sem enderecos/contatos)."""
        return exigir(await self.correntistas.listar(pagina=pagina, tamanho=tamanho), "Correntista")

    async def buscar(self, correntista_id: int) -> Correntista:
        """
        Busca correntista com enderecos e contatos.

        Raises:
            NotFoundError: Correntista inexistente
        """
        correntista = exigir(
            await self.correntistas.buscar_por_id(correntista_id), "Correntista", correntista_id
        )
        correntista.enderecos = exigir(
            await self.enderecos.listar_por_correntista(correntista_id), "Endereco"
        )
        correntista.contatos = exigir(
            await self.contatos.listar_por_correntista(correntista_id), "Contato"
        )
        return correntista

    async def excluir(self, correntista_id: int) -> None:
        """
        Exclui correntista (enderecos e contatos vao junto).

        Raises:
            RecursoBloqueadoError: Correntista protegido
            NotFoundError: Correntista inexistente
            EntidadeEmUsoError: Correntista ainda tem contas
        """
        self.politica.verificar_id(correntista_id)

        correntista = await self.buscar(correntista_id)
        self.politica.verificar(correntista)

        resultado = await self.correntistas.deletar(correntista_id)
        if resultado.conflito:
            raise EntidadeEmUsoError(
                MSG_CORRENTISTA_EM_USO.format(id=correntista_id),
                identifier=correntista_id,
            )
        exigir(resultado, "Correntista", correntista_id)
        logger.info(f"Correntista excluido: {correntista_id}")

    # Enderecos

    async def listar_enderecos(self, correntista_id: int) -> List[Endereco]:
        return (await self.buscar(correntista_id)).enderecos

    async def adicionar_endereco(self, correntista_id: int, endereco: Endereco) -> List[Endereco]:
        """
        Adiciona endereco ao correntista.

        Returns:
            Lista atualizada de enderecos do correntista
        """
        await self._carregar_para_escrita(correntista_id)

        novo = dataclasses.replace(endereco, id=None, id_correntista=correntista_id)
        exigir(await self.enderecos.criar(novo.to_dict()), "Endereco")
        logger.info(f"Endereco adicionado ao correntista {correntista_id}")

        return await self.listar_enderecos(correntista_id)

    async def excluir_endereco(self, correntista_id: int, endereco_id: int) -> None:
        """
        Remove endereco do correntista.

        Raises:
            NotFoundError: Correntista ou endereco inexistente, ou endereco
                pertence a outro correntista
        """
        await self._excluir_filho(correntista_id, endereco_id, self.enderecos, "Endereco")

    # Contatos

    async def listar_contatos(self, correntista_id: int) -> List[ContatoCliente]:
        return (await self.buscar(correntista_id)).contatos

    async def adicionar_contato(self, correntista_id: int, contato: ContatoCliente) -> List[ContatoCliente]:
        """
        Adiciona contato ao correntista.

        Returns:
            Lista atualizada de contatos do correntista
        """
        await self._carregar_para_escrita(correntista_id)

        novo = dataclasses.replace(contato, id=None, id_correntista=correntista_id)
        exigir(await self.contatos.criar(novo.to_dict()), "Contato")
        logger.info(f"Contato adicionado ao correntista {correntista_id}")

        return await self.listar_contatos(correntista_id)

    async def excluir_contato(self, correntista_id: int, contato_id: int) -> None:
        """
        Remove contato do correntista.

        Raises:
            NotFoundError: Correntista ou contato inexistente, ou contato
                pertence a outro correntista
        """
        await self._excluir_filho(correntista_id, contato_id, self.contatos, "Contato")

    # Helpers

    async def _carregar_para_escrita(self, correntista_id: int) -> Correntista:
        """Checa bloqueio (id e flag) e existencia do correntista."""
        self.politica.verificar_id(correntista_id)
        correntista = exigir(
            await self.correntistas.buscar_por_id(correntista_id), "Correntista", correntista_id
        )
        self.politica.verificar(correntista)
        return correntista

    async def _excluir_filho(
        self,
        correntista_id: int,
        filho_id: int,
        repo: BaseRepository,
        recurso: str,
    ) -> None:
        await self._carregar_para_escrita(correntista_id)

        filho = exigir(await repo.buscar_por_id(filho_id), recurso, filho_id)
        if filho.id_correntista != correntista_id:
            raise NotFoundError(
                recurso,
                filho_id,
                message=MSG_FILHO_DE_OUTRO_CORRENTISTA.format(
                    recurso=recurso.lower(),
                    filho_id=filho_id,
                    correntista_id=correntista_id,
                ),
            )

        resultado: QueryResult[bool] = await repo.deletar(filho_id)
        if resultado.conflito:
            raise DatabaseError(
                f"{recurso} {filho_id} nao pode ser removido",
                details={"erro": resultado.error, "codigo": resultado.codigo},
            )
        exigir(resultado, recurso, filho_id)
        logger.info(f"{recurso} {filho_id} removido do correntista {correntista_id}")
