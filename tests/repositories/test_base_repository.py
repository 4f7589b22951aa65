"""
Testes para BaseRepository e QueryResult.

Garante que nenhuma exception do postgrest passa da camada de repository.
"""
import pytest
from unittest.mock import MagicMock

from postgrest.exceptions import APIError

from app.repositories.agencia import AgenciaRepository
from app.repositories.base import Pagina, QueryResult, StatusQuery


def criar_db_com_erro(erro: Exception) -> MagicMock:
    """Mock de cliente cujo execute() levanta o erro informado."""
    mock = MagicMock()
    mock.table.return_value = mock
    mock.select.return_value = mock
    mock.insert.return_value = mock
    mock.delete.return_value = mock
    mock.eq.return_value = mock
    mock.execute.side_effect = erro
    return mock


def api_error(codigo: str) -> APIError:
    return APIError({"message": f"erro {codigo}", "code": codigo, "hint": None, "details": None})


class TestQueryResult:

    def test_ok_por_padrao(self):
        resultado = QueryResult.ok([1, 2], count=2)

        assert resultado.success
        assert resultado.status == StatusQuery.OK
        assert resultado.count == 2

    def test_vazio_e_nao_encontrado(self):
        resultado = QueryResult.vazio("nada")

        assert resultado.nao_encontrado
        assert not resultado.success
        assert resultado.error == "nada"

    def test_como_preserva_status(self):
        original = QueryResult(status=StatusQuery.CONFLITO, error="fk", codigo="23503")

        convertido = original.como("outro")

        assert convertido.data == "outro"
        assert convertido.conflito
        assert convertido.codigo == "23503"


class TestPagina:

    @pytest.mark.parametrize("total,tamanho,esperado", [(0, 20, 0), (20, 20, 1), (21, 20, 2), (5, 2, 3)])
    def test_total_paginas(self, total, tamanho, esperado):
        assert Pagina(total=total, tamanho=tamanho).total_paginas == esperado


class TestClassificacaoDeErros:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("codigo", ["23503", "23505"])
    async def test_violacao_de_integridade_vira_conflito(self, codigo):
        repo = AgenciaRepository(criar_db_com_erro(api_error(codigo)))

        resultado = await repo.deletar(1)

        assert resultado.conflito
        assert resultado.codigo == codigo

    @pytest.mark.asyncio
    async def test_outro_erro_postgres_vira_falha(self):
        repo = AgenciaRepository(criar_db_com_erro(api_error("42P01")))

        resultado = await repo.buscar_por_id(1)

        assert resultado.falhou
        assert resultado.codigo == "42P01"

    @pytest.mark.asyncio
    async def test_erro_de_conexao_vira_falha(self):
        repo = AgenciaRepository(criar_db_com_erro(ConnectionError("timeout")))

        resultado = await repo.criar({"nome": "X", "numero": "9"})

        assert resultado.falhou
        assert "timeout" in resultado.error


class TestOperacoesPadrao:

    @pytest.mark.asyncio
    async def test_buscar_por_id_inexistente(self, fake_db):
        resultado = await AgenciaRepository(fake_db).buscar_por_id(999)

        assert resultado.nao_encontrado

    @pytest.mark.asyncio
    async def test_deletar_sem_linhas_afetadas_e_nao_encontrado(self, fake_db):
        resultado = await AgenciaRepository(fake_db).deletar(999)

        assert resultado.nao_encontrado

    @pytest.mark.asyncio
    async def test_listar_pagina(self, fake_db):
        for i in range(2, 8):
            fake_db.semear("agencias", nome=f"Agencia {i}", numero=f"000{i}")
        repo = AgenciaRepository(fake_db)

        resultado = await repo.listar(pagina=1, tamanho=3)

        assert resultado.success
        pagina = resultado.data
        assert pagina.total == 7
        assert pagina.total_paginas == 3
        assert [a.id for a in pagina.conteudo] == [4, 5, 6]

    @pytest.mark.asyncio
    async def test_listar_ultima_pagina_incompleta(self, fake_db):
        fake_db.semear("agencias", nome="Agencia 2", numero="0002")

        resultado = await AgenciaRepository(fake_db).listar(pagina=1, tamanho=1)

        assert [a.id for a in resultado.data.conteudo] == [2]
        assert resultado.data.total == 2


class TestChavePrimariaGerada:
    """O banco em memoria segue o BIGSERIAL do Postgres."""

    @pytest.mark.asyncio
    async def test_id_explicito_nao_avanca_sequencia(self, fake_db):
        repo = AgenciaRepository(fake_db)

        explicita = await repo.criar({"id": 5, "nome": "Agencia 5", "numero": "0005"})
        gerada = await repo.criar({"nome": "Agencia Nova", "numero": "0002"})

        assert explicita.data.id == 5
        assert gerada.data.id == 2

    @pytest.mark.asyncio
    async def test_id_gerado_que_colide_vira_conflito(self, fake_db):
        repo = AgenciaRepository(fake_db)
        await repo.criar({"id": 2, "nome": "Agencia 2", "numero": "0002"})

        resultado = await repo.criar({"nome": "Agencia 3", "numero": "0003"})

        assert resultado.conflito
        assert resultado.codigo == "23505"
        assert fake_db.linhas("agencias")[1]["nome"] == "Agencia 2"
