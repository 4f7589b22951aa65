"""
Configuração global de testes - Fixtures compartilhadas.

O FakeSupabase imita o cliente supabase-py o suficiente para exercitar os
repositories de verdade: chain .table().select().eq().order().range().execute(),
insert/upsert/update/delete, foreign keys com cascade/restrict, unicidade,
erros postgrest.APIError com os SQLSTATE do Postgres e a funcao
criar_correntista executada de forma transacional.

Usage:
    def test_algo(fake_db):
        repo = CorrentistaRepository(fake_db)
"""

import copy
from typing import Any

import pytest
from fastapi.testclient import TestClient
from postgrest.exceptions import APIError

from app.repositories.agencia import AgenciaRepository
from app.repositories.conta import ContaRepository
from app.repositories.contato import ContatoRepository
from app.repositories.correntista import CorrentistaRepository
from app.repositories.endereco import EnderecoRepository
from app.services.bloqueio import PoliticaBloqueio
from app.services.conta import AgenciaService, ContaService
from app.services.correntista import CorrentistaService


# =============================================================================
# FAKE SUPABASE - banco em memoria
# =============================================================================

CHAVES_PRIMARIAS = {"contas": "num_conta"}

# tabela -> [(coluna, tabela referenciada, on delete)]
FOREIGN_KEYS = {
    "enderecos": [("id_correntista", "correntistas", "cascade")],
    "contatos_cliente": [("id_correntista", "correntistas", "cascade")],
    "contas": [
        ("id_correntista", "correntistas", "restrict"),
        ("id_agencia", "agencias", "restrict"),
    ],
}

UNICOS = {"correntistas": ["cpf_cnpj"], "agencias": ["numero"]}

DEFAULTS = {
    "correntistas": {"bloqueado": False, "data_cadastro": "2024-01-15T10:00:00+00:00"},
    "contas": {"data_cadastro": "2024-01-15T10:00:00+00:00"},
}

OPERACOES_ESCRITA = {"insert", "upsert", "update", "delete", "rpc"}


def erro_postgres(codigo: str, mensagem: str) -> APIError:
    return APIError({"message": mensagem, "code": codigo, "hint": None, "details": None})


class FakeResponse:
    def __init__(self, data: Any, count: int | None = None):
        self.data = data
        self.count = count


class FakeQuery:
    """Query builder encadeavel, executado contra o FakeSupabase."""

    def __init__(self, db: "FakeSupabase", tabela: str):
        self.db = db
        self.tabela = tabela
        self._operacao = "select"
        self._payload: Any = None
        self._filtros: list[tuple[str, Any]] = []
        self._ordem: str | None = None
        self._desc = False
        self._range: tuple[int, int] | None = None
        self._limit: int | None = None
        self._count: str | None = None

    def select(self, *colunas, count=None):
        self._count = count
        return self

    def insert(self, data):
        self._operacao, self._payload = "insert", data
        return self

    def upsert(self, data):
        self._operacao, self._payload = "upsert", data
        return self

    def update(self, data):
        self._operacao, self._payload = "update", data
        return self

    def delete(self):
        self._operacao = "delete"
        return self

    def eq(self, coluna, valor):
        self._filtros.append((coluna, valor))
        return self

    def order(self, coluna, desc=False):
        self._ordem, self._desc = coluna, desc
        return self

    def range(self, inicio, fim):
        self._range = (inicio, fim)
        return self

    def limit(self, n):
        self._limit = n
        return self

    def execute(self) -> FakeResponse:
        self.db.registrar(self.tabela, self._operacao)
        if self.tabela in self.db.tabelas_com_falha:
            raise RuntimeError(f"Conexao perdida ao acessar {self.tabela}")

        if self._operacao == "insert":
            linhas = self._payload if isinstance(self._payload, list) else [self._payload]
            return FakeResponse([self.db.inserir(self.tabela, linha) for linha in linhas])
        if self._operacao == "upsert":
            return FakeResponse([self.db.upsert(self.tabela, self._payload)])
        if self._operacao == "update":
            return FakeResponse(self.db.atualizar(self.tabela, self._filtros, self._payload))
        if self._operacao == "delete":
            return FakeResponse(self.db.deletar(self.tabela, self._filtros))

        linhas = self.db.filtrar(self.tabela, self._filtros)
        total = len(linhas)
        if self._ordem:
            linhas.sort(key=lambda r: (r.get(self._ordem) is None, r.get(self._ordem)), reverse=self._desc)
        if self._range:
            inicio, fim = self._range
            linhas = linhas[inicio:fim + 1]
        if self._limit is not None:
            linhas = linhas[:self._limit]
        return FakeResponse(linhas, total if self._count else None)


class FakeRpc:
    def __init__(self, db: "FakeSupabase", nome: str, params: dict):
        self.db, self.nome, self.params = db, nome, params

    def execute(self) -> FakeResponse:
        self.db.registrar(self.nome, "rpc")
        if self.nome != "criar_correntista":
            raise erro_postgres("42883", f"function {self.nome} does not exist")
        return FakeResponse(self.db.criar_correntista(**self.params))


class FakeSupabase:
    """Cliente Supabase em memoria."""

    def __init__(self):
        self.tabelas: dict[str, dict[int, dict]] = {
            "correntistas": {},
            "enderecos": {},
            "contatos_cliente": {},
            "agencias": {},
            "contas": {},
        }
        self.sequencias: dict[str, int] = {nome: 0 for nome in self.tabelas}
        self.chamadas: list[tuple[str, str]] = []
        self.tabelas_com_falha: set[str] = set()

    # API do supabase-py

    def table(self, nome: str) -> FakeQuery:
        return FakeQuery(self, nome)

    def rpc(self, nome: str, params: dict) -> FakeRpc:
        return FakeRpc(self, nome, params)

    # Auxiliares de teste

    def registrar(self, tabela: str, operacao: str) -> None:
        self.chamadas.append((tabela, operacao))

    def escritas(self) -> list[tuple[str, str]]:
        return [c for c in self.chamadas if c[1] in OPERACOES_ESCRITA]

    def linhas(self, tabela: str) -> list[dict]:
        return [copy.deepcopy(r) for r in self.tabelas[tabela].values()]

    def semear(self, tabela: str, **linha) -> dict:
        """
        Insere registro direto, sem registrar chamada.

        Avanca a sequencia como o setval de migrations/bluebank/003_seed.sql.
        """
        criada = self.inserir(tabela, linha)
        pk = self._pk(tabela)
        self.sequencias[tabela] = max(self.sequencias[tabela], criada[pk])
        return criada

    # Motor do "banco"

    def _pk(self, tabela: str) -> str:
        return CHAVES_PRIMARIAS.get(tabela, "id")

    def filtrar(self, tabela: str, filtros) -> list[dict]:
        return [
            copy.deepcopy(r)
            for r in self.tabelas[tabela].values()
            if all(r.get(coluna) == valor for coluna, valor in filtros)
        ]

    def _validar(self, tabela: str, linha: dict, ignorar_id=None) -> None:
        for coluna, referenciada, _ in FOREIGN_KEYS.get(tabela, []):
            if linha.get(coluna) not in self.tabelas[referenciada]:
                raise erro_postgres(
                    "23503",
                    f'insert or update on table "{tabela}" violates foreign key constraint "{tabela}_{coluna}_fkey"',
                )
        for coluna in UNICOS.get(tabela, []):
            for pk, existente in self.tabelas[tabela].items():
                if pk != ignorar_id and linha.get(coluna) is not None and existente.get(coluna) == linha.get(coluna):
                    raise erro_postgres(
                        "23505",
                        f'duplicate key value violates unique constraint "{tabela}_{coluna}_key"',
                    )
        if tabela == "contatos_cliente" and not linha.get("telefone") and not linha.get("email"):
            raise erro_postgres(
                "23514",
                'new row for relation "contatos_cliente" violates check constraint "contatos_cliente_check"',
            )

    def inserir(self, tabela: str, dados: dict) -> dict:
        # Como no BIGSERIAL do Postgres: id explicito nao avanca a sequencia
        pk = self._pk(tabela)
        linha = {**DEFAULTS.get(tabela, {}), **copy.deepcopy(dados)}
        if linha.get(pk) is None:
            self.sequencias[tabela] += 1
            linha[pk] = self.sequencias[tabela]
        if linha[pk] in self.tabelas[tabela]:
            raise erro_postgres("23505", f'duplicate key value violates unique constraint "{tabela}_pkey"')
        self._validar(tabela, linha)
        self.tabelas[tabela][linha[pk]] = linha
        return copy.deepcopy(linha)

    def upsert(self, tabela: str, dados: dict) -> dict:
        pk = self._pk(tabela)
        existente = self.tabelas[tabela].get(dados.get(pk))
        if existente is None:
            return self.inserir(tabela, dados)
        linha = {**existente, **copy.deepcopy(dados)}
        self._validar(tabela, linha, ignorar_id=linha[pk])
        self.tabelas[tabela][linha[pk]] = linha
        return copy.deepcopy(linha)

    def atualizar(self, tabela: str, filtros, dados: dict) -> list[dict]:
        atualizadas = []
        for linha in self.filtrar(tabela, filtros):
            pk = linha[self._pk(tabela)]
            nova = {**linha, **dados}
            self._validar(tabela, nova, ignorar_id=pk)
            self.tabelas[tabela][pk] = nova
            atualizadas.append(copy.deepcopy(nova))
        return atualizadas

    def deletar(self, tabela: str, filtros) -> list[dict]:
        alvos = self.filtrar(tabela, filtros)
        ids = {linha[self._pk(tabela)] for linha in alvos}

        # RESTRICT primeiro: nada e removido se algo ainda referencia
        for filha, fks in FOREIGN_KEYS.items():
            for coluna, referenciada, acao in fks:
                if referenciada == tabela and acao == "restrict":
                    if any(r.get(coluna) in ids for r in self.tabelas[filha].values()):
                        raise erro_postgres(
                            "23503",
                            f'update or delete on table "{tabela}" violates foreign key constraint '
                            f'"{filha}_{coluna}_fkey" on table "{filha}"',
                        )

        for filha, fks in FOREIGN_KEYS.items():
            for coluna, referenciada, acao in fks:
                if referenciada == tabela and acao == "cascade":
                    for pk, r in list(self.tabelas[filha].items()):
                        if r.get(coluna) in ids:
                            del self.tabelas[filha][pk]

        for pk in ids:
            del self.tabelas[tabela][pk]
        return alvos

    def criar_correntista(self, p_correntista: dict, p_enderecos=None, p_contatos=None) -> dict:
        """Equivalente a migrations/bluebank/002_criar_correntista.sql."""
        snapshot = (copy.deepcopy(self.tabelas), dict(self.sequencias))
        try:
            correntista = self.inserir("correntistas", {
                "nome": p_correntista.get("nome"),
                "cpf_cnpj": p_correntista.get("cpf_cnpj"),
                "tipo_pessoa": (p_correntista.get("tipo_pessoa") or "").upper() or None,
            })
            for endereco in p_enderecos or []:
                self.inserir("enderecos", {**endereco, "id_correntista": correntista["id"]})
            for contato in p_contatos or []:
                self.inserir("contatos_cliente", {**contato, "id_correntista": correntista["id"]})
        except APIError:
            self.tabelas, self.sequencias = snapshot
            raise

        return {
            **correntista,
            "enderecos": sorted(self.filtrar("enderecos", [("id_correntista", correntista["id"])]), key=lambda r: r["id"]),
            "contatos": sorted(self.filtrar("contatos_cliente", [("id_correntista", correntista["id"])]), key=lambda r: r["id"]),
        }


def criar_fake_supabase() -> FakeSupabase:
    """
    Cria FakeSupabase com os dados de seed (migrations/bluebank/003_seed.sql).

    - correntista 1: BlueBank, bloqueado
    - agencia 1: Agencia Central
    """
    db = FakeSupabase()
    db.semear(
        "correntistas",
        id=1,
        nome="BlueBank S.A.",
        cpf_cnpj="00.000.000/0001-91",
        tipo_pessoa="J",
        bloqueado=True,
    )
    db.semear("agencias", id=1, nome="Agencia Central", numero="0001")
    return db


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def fake_db():
    """Banco em memoria com seed."""
    return criar_fake_supabase()


@pytest.fixture
def correntista_repo(fake_db):
    return CorrentistaRepository(fake_db)


@pytest.fixture
def correntista_service(fake_db):
    return CorrentistaService(
        CorrentistaRepository(fake_db),
        EnderecoRepository(fake_db),
        ContatoRepository(fake_db),
        PoliticaBloqueio({1}),
    )


@pytest.fixture
def conta_service(fake_db):
    return ContaService(
        ContaRepository(fake_db),
        CorrentistaRepository(fake_db),
        AgenciaRepository(fake_db),
    )


@pytest.fixture
def agencia_service(fake_db):
    return AgenciaService(AgenciaRepository(fake_db))


@pytest.fixture
def client(fake_db):
    """TestClient da app com o banco trocado pelo FakeSupabase."""
    from app.main import app
    from app.repositories.deps import get_conector_db, get_db

    app.dependency_overrides[get_db] = lambda: fake_db
    app.dependency_overrides[get_conector_db] = lambda: lambda: fake_db
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def correntista_data():
    """Payload de criacao de correntista pessoa fisica."""
    return {
        "nome": "Maria Souza",
        "cpf_cnpj": "123.456.789-09",
        "tipo_pessoa": "f",
        "enderecos": [
            {
                "logradouro": "Rua das Flores",
                "numero": "100",
                "bairro": "Centro",
                "cidade": "Sao Paulo",
                "uf": "SP",
                "cep": "01001-000",
            },
            {
                "logradouro": "Av. Paulista",
                "numero": "1500",
                "complemento": "Sala 12",
                "cidade": "Sao Paulo",
                "uf": "SP",
                "cep": "01310-100",
            },
        ],
        "contatos": [
            {"telefone": "11999990000"},
            {"email": "maria@email.com"},
            {"telefone": "1133334444", "email": "maria.trabalho@email.com"},
        ],
    }
