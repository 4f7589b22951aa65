"""
Tratamento de timezone.

Datas são armazenadas no banco em UTC (timezone-aware).
"""

from datetime import datetime, timezone


TZ_UTC = timezone.utc


def agora_utc() -> datetime:
    """Retorna datetime atual em UTC (timezone-aware)."""
    return datetime.now(TZ_UTC)


def iso_utc(dt: datetime | None = None) -> str:
    """
    Retorna datetime em formato ISO 8601 UTC.

    Conveniente para inserir no banco de dados.

    Args:
        dt: datetime a formatar (padrão: agora). Naive é tratado como UTC.

    Returns:
        String ISO 8601 em UTC
    """
    if dt is None:
        dt = agora_utc()
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=TZ_UTC)
    return dt.astimezone(TZ_UTC).isoformat()
