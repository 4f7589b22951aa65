"""
Correlation ID por requisição.

O TracingMiddleware define o trace_id no início de cada request; qualquer
log emitido durante o request pode recuperá-lo via get_trace_id().
"""
import uuid
from contextvars import ContextVar
from typing import Optional

_trace_id_var: ContextVar[Optional[str]] = ContextVar("trace_id", default=None)


def generate_trace_id() -> str:
    """Gera trace ID de 8 caracteres hex."""
    return uuid.uuid4().hex[:8]


def set_trace_id(trace_id: str) -> None:
    _trace_id_var.set(trace_id)


def get_trace_id() -> Optional[str]:
    return _trace_id_var.get()


def clear_trace_id() -> None:
    """Limpa trace ID ao final do request."""
    _trace_id_var.set(None)
