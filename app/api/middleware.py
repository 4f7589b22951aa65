"""
Middlewares da API.
"""
import logging
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.core.tracing import (
    generate_trace_id,
    set_trace_id,
    clear_trace_id,
)

logger = logging.getLogger(__name__)

TRACE_HEADER = "X-Trace-ID"

# Probes de liveness/readiness nao poluem o log em INFO
PATHS_SILENCIOSOS = ("/health",)


class TracingMiddleware(BaseHTTPMiddleware):
    """
    Atribui um trace_id a cada request.

    - Usa o header X-Trace-ID quando enviado pelo cliente, senão gera um novo
    - Propaga via context var (app.core.tracing.get_trace_id)
    - Disponibiliza em request.state.trace_id
    - Retorna no header X-Trace-ID da response
    - Loga método, path, status e duração (4xx/5xx em WARNING)
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        trace_id = request.headers.get(TRACE_HEADER) or generate_trace_id()
        set_trace_id(trace_id)
        request.state.trace_id = trace_id

        inicio = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"{request.method} {request.url.path} → ERROR "
                f"({_duracao_ms(inicio)}ms): {e}"
            )
            raise
        finally:
            clear_trace_id()

        logger.log(
            _nivel(request.url.path, response.status_code),
            f"{request.method} {request.url.path} → {response.status_code} "
            f"({_duracao_ms(inicio)}ms)",
            extra={"trace_id": trace_id},
        )
        response.headers[TRACE_HEADER] = trace_id
        return response


def _duracao_ms(inicio: float) -> int:
    return int((time.perf_counter() - inicio) * 1000)


def _nivel(path: str, status_code: int) -> int:
    if status_code >= 400:
        return logging.WARNING
    if path.startswith(PATHS_SILENCIOSOS):
        return logging.DEBUG
    return logging.INFO
