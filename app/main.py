"""
BlueBank - API Principal
"""
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.logging import setup_logging
from app.api.error_handlers import register_exception_handlers
from app.api.middleware import TracingMiddleware
from app.api.routes import contas, correntistas, health

# Configurar logging
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gerencia startup e shutdown da aplicação."""
    logger.info(f"Iniciando {settings.APP_NAME} ({settings.ENVIRONMENT})")
    yield
    logger.info(f"Encerrando {settings.APP_NAME}")


app = FastAPI(
    title=settings.APP_NAME,
    description=(
        "API de back-office do BlueBank: correntistas, enderecos, contatos, "
        "contas e agencias."
    ),
    version=settings.APP_VERSION,
    contact={
        "name": settings.DOCS_CONTATO_NOME,
        "url": settings.DOCS_CONTATO_URL,
        "email": settings.DOCS_CONTATO_EMAIL,
    },
    license_info={
        "name": settings.DOCS_LICENCA_NOME,
        "url": settings.DOCS_LICENCA_URL,
    },
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(TracingMiddleware)

register_exception_handlers(app)

# Rotas
app.include_router(health.router, tags=["Health"])
app.include_router(correntistas.router)
app.include_router(contas.router)
app.include_router(contas.agencias_router)


@app.get("/")
async def root():
    """Endpoint raiz."""
    return {
        "app": settings.APP_NAME,
        "status": "running",
        "docs": "/docs",
    }
