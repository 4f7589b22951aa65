"""
Base Repository - Interface comum para todos os repositories.

Todo acesso ao Supabase passa por BaseRepository._executar, que nunca deixa
exceptions do postgrest escaparem: o resultado vem sempre em um QueryResult
com status OK, NAO_ENCONTRADO, CONFLITO ou FALHA. A camada de servico decide
qual erro de negocio cada status representa.
"""
import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, List, Optional, TypeVar

from postgrest.exceptions import APIError

logger = logging.getLogger(__name__)

# Type variable para entidades
T = TypeVar('T')

# Codigos de erro do Postgres tratados como conflito de integridade
PG_FOREIGN_KEY_VIOLATION = "23503"
PG_UNIQUE_VIOLATION = "23505"
CODIGOS_CONFLITO = {PG_FOREIGN_KEY_VIOLATION, PG_UNIQUE_VIOLATION}


class StatusQuery(str, Enum):
    """Classificacao do resultado de uma operacao no banco."""

    OK = "ok"
    NAO_ENCONTRADO = "nao_encontrado"
    CONFLITO = "conflito"
    FALHA = "falha"


@dataclass
class QueryResult(Generic[T]):
    """Resultado padronizado de query."""
    data: Optional[T] = None
    status: StatusQuery = StatusQuery.OK
    error: Optional[str] = None
    count: Optional[int] = None
    codigo: Optional[str] = None  # SQLSTATE quando o erro veio do Postgres

    @property
    def success(self) -> bool:
        return self.status == StatusQuery.OK

    @property
    def nao_encontrado(self) -> bool:
        return self.status == StatusQuery.NAO_ENCONTRADO

    @property
    def conflito(self) -> bool:
        return self.status == StatusQuery.CONFLITO

    @property
    def falhou(self) -> bool:
        return self.status == StatusQuery.FALHA

    @classmethod
    def ok(cls, data: Optional[T] = None, count: Optional[int] = None) -> "QueryResult[T]":
        return cls(data=data, count=count)

    @classmethod
    def vazio(cls, error: Optional[str] = None) -> "QueryResult[T]":
        return cls(status=StatusQuery.NAO_ENCONTRADO, error=error)

    def como(self, data: Any) -> "QueryResult":
        """Mantem status/erro e troca o payload (ex: linhas -> entidade)."""
        return QueryResult(
            data=data,
            status=self.status,
            error=self.error,
            count=self.count,
            codigo=self.codigo,
        )


@dataclass
class Pagina(Generic[T]):
    """Pagina de resultados (pagina comeca em 0)."""
    conteudo: List[T] = field(default_factory=list)
    pagina: int = 0
    tamanho: int = 20
    total: int = 0

    @property
    def total_paginas(self) -> int:
        if self.tamanho <= 0:
            return 0
        return math.ceil(self.total / self.tamanho)


class BaseRepository(ABC, Generic[T]):
    """
    Interface base para repositories.

    Subclasses definem a tabela, a coluna de id e como converter uma
    linha do banco na entidade.

    Attributes:
        db: Cliente de banco de dados (Supabase ou dublê de teste)

    Example:
        class AgenciaRepository(BaseRepository[Agencia]):
            @property
            def table_name(self) -> str:
                return "agencias"

            def from_row(self, row: dict) -> Agencia:
                return Agencia.from_dict(row)
    """

    id_column: str = "id"

    def __init__(self, db_client: Any):
        """
        Inicializa o repository.

        Args:
            db_client: Cliente de banco de dados (Supabase, Mock, etc.)
        """
        self.db = db_client

    @property
    @abstractmethod
    def table_name(self) -> str:
        """Nome da tabela no banco."""
        pass

    @abstractmethod
    def from_row(self, row: dict) -> T:
        """Converte linha do banco na entidade."""
        pass

    def _executar(self, descricao: str, operacao: Callable[[], Any]) -> QueryResult[List[dict]]:
        """
        Executa operacao no banco e classifica o resultado.

        Args:
            descricao: Texto usado nos logs (ex: "buscar correntista 10")
            operacao: Funcao sem argumentos que chama .execute()

        Returns:
            QueryResult com as linhas retornadas em data. Linhas vazias
            continuam OK; cabe ao chamador decidir se isso e NAO_ENCONTRADO.
        """
        try:
            response = operacao()
        except APIError as e:
            codigo = str(e.code) if e.code else None
            if codigo in CODIGOS_CONFLITO:
                logger.warning(f"Conflito de integridade ao {descricao}: {e.message}")
                return QueryResult(status=StatusQuery.CONFLITO, error=e.message, codigo=codigo)
            logger.error(f"Erro ao {descricao}: [{codigo}] {e.message}")
            return QueryResult(status=StatusQuery.FALHA, error=e.message, codigo=codigo)
        except Exception as e:
            logger.error(f"Erro ao {descricao}: {e}")
            return QueryResult(status=StatusQuery.FALHA, error=str(e))

        return QueryResult.ok(response.data, getattr(response, "count", None))

    # Operacoes padrao

    async def buscar_por_id(self, id: int) -> QueryResult[T]:
        """
        Busca entidade por ID.

        Returns:
            QueryResult com a entidade, ou status NAO_ENCONTRADO
        """
        resultado = self._executar(
            f"buscar {self.table_name} {id}",
            lambda: self.db.table(self.table_name).select("*").eq(self.id_column, id).execute(),
        )
        if not resultado.success:
            return resultado
        if not resultado.data:
            return QueryResult.vazio()
        return resultado.como(self.from_row(resultado.data[0]))

    async def listar(
        self,
        pagina: int = 0,
        tamanho: int = 20,
        ordenar_por: Optional[str] = None,
    ) -> QueryResult[Pagina[T]]:
        """
        Lista entidades paginadas.

        Args:
            pagina: Numero da pagina (comeca em 0)
            tamanho: Itens por pagina
            ordenar_por: Coluna de ordenacao (default: coluna de id)

        Returns:
            QueryResult com Pagina das entidades
        """
        inicio = pagina * tamanho
        fim = inicio + tamanho - 1
        resultado = self._executar(
            f"listar {self.table_name}",
            lambda: (
                self.db.table(self.table_name)
                .select("*", count="exact")
                .order(ordenar_por or self.id_column)
                .range(inicio, fim)
                .execute()
            ),
        )
        if not resultado.success:
            return resultado
        linhas = resultado.data or []
        total = resultado.count if resultado.count is not None else len(linhas)
        return resultado.como(
            Pagina(
                conteudo=[self.from_row(row) for row in linhas],
                pagina=pagina,
                tamanho=tamanho,
                total=total,
            )
        )

    async def listar_por(self, coluna: str, valor: Any) -> QueryResult[List[T]]:
        """Lista entidades filtrando por uma coluna (ordenado por id)."""
        resultado = self._executar(
            f"listar {self.table_name} por {coluna}={valor}",
            lambda: (
                self.db.table(self.table_name)
                .select("*")
                .eq(coluna, valor)
                .order(self.id_column)
                .execute()
            ),
        )
        if not resultado.success:
            return resultado
        return resultado.como([self.from_row(row) for row in resultado.data or []])

    async def criar(self, data: dict) -> QueryResult[T]:
        """
        Cria nova entidade.

        Returns:
            QueryResult com a entidade criada (com ID)
        """
        resultado = self._executar(
            f"criar {self.table_name}",
            lambda: self.db.table(self.table_name).insert(data).execute(),
        )
        if not resultado.success:
            return resultado
        if not resultado.data:
            return QueryResult(status=StatusQuery.FALHA, error=f"Insert em {self.table_name} nao retornou dados")
        entidade = self.from_row(resultado.data[0])
        logger.info(f"{self.table_name}: registro criado {resultado.data[0].get(self.id_column)}")
        return resultado.como(entidade)

    async def salvar(self, data: dict) -> QueryResult[T]:
        """
        Insere ou atualiza entidade (upsert pela coluna de id).

        Returns:
            QueryResult com a entidade persistida
        """
        resultado = self._executar(
            f"salvar {self.table_name}",
            lambda: self.db.table(self.table_name).upsert(data).execute(),
        )
        if not resultado.success:
            return resultado
        if not resultado.data:
            return QueryResult(status=StatusQuery.FALHA, error=f"Upsert em {self.table_name} nao retornou dados")
        logger.info(f"{self.table_name}: registro salvo {resultado.data[0].get(self.id_column)}")
        return resultado.como(self.from_row(resultado.data[0]))

    async def deletar(self, id: int) -> QueryResult[bool]:
        """
        Deleta entidade.

        Returns:
            QueryResult(True) se deletou; NAO_ENCONTRADO se nenhuma linha
            foi afetada; CONFLITO se outra tabela referencia o registro
        """
        resultado = self._executar(
            f"deletar {self.table_name} {id}",
            lambda: self.db.table(self.table_name).delete().eq(self.id_column, id).execute(),
        )
        if not resultado.success:
            return resultado
        if not resultado.data:
            return QueryResult.vazio(f"Nenhuma linha removida em {self.table_name}")
        logger.info(f"{self.table_name}: registro removido {id}")
        return resultado.como(True)
