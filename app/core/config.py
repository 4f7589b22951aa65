"""
Configurações da aplicação.
Carrega variáveis de ambiente.
"""
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Configurações carregadas do .env"""

    # App
    APP_NAME: str = "BlueBank API"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Supabase
    SUPABASE_URL: str = ""
    SUPABASE_SERVICE_KEY: str = ""

    # CORS - origens permitidas (separadas por vírgula)
    CORS_ORIGINS: str = "*"  # "*" apenas para desenvolvimento

    # Correntistas bloqueados para alteracao/exclusao (ids separados por vírgula)
    # O correntista 1 e o proprio BlueBank e mantem a integridade da regra de negocio
    CORRENTISTAS_BLOQUEADOS: str = "1"

    # Paginação
    PAGINA_TAMANHO_PADRAO: int = 20
    PAGINA_TAMANHO_MAXIMO: int = 100

    # Documentação da API (OpenAPI)
    DOCS_CONTATO_NOME: str = "Squad 6Devs"
    DOCS_CONTATO_URL: str = "https://bluebank.6devs.com.br"
    DOCS_CONTATO_EMAIL: str = "faleconosco@bluebank.com.br"
    DOCS_LICENCA_NOME: str = "Apache License Version 2.0"
    DOCS_LICENCA_URL: str = "https://www.apache.org/licenses/LICENSE-2.0"

    @property
    def correntistas_bloqueados_ids(self) -> set[int]:
        """
        Retorna set de ids de correntistas bloqueados.

        Valores não numéricos são ignorados.
        """
        if not self.CORRENTISTAS_BLOQUEADOS:
            return set()
        return {
            int(valor.strip())
            for valor in self.CORRENTISTAS_BLOQUEADOS.split(",")
            if valor.strip().isdigit()
        }

    @property
    def is_production(self) -> bool:
        """Retorna True se está em produção."""
        return self.ENVIRONMENT.lower() == "production"

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Retorna lista de origens CORS permitidas.

        Em produção, deve ser configurado explicitamente.
        """
        if self.CORS_ORIGINS == "*":
            if self.is_production:
                import logging
                logging.warning(
                    "CORS_ORIGINS='*' em produção. "
                    "Configure origens específicas para maior segurança."
                )
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignora variáveis extras do .env


@lru_cache()
def get_settings() -> Settings:
    """Retorna instância cacheada das configurações."""
    return Settings()


settings = get_settings()
