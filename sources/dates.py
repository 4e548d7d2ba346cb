"""
Parse de datas de publicação nos vários formatos vistos nas fontes.
Tudo sai como datetime UTC com timezone.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

from models import now_utc

# Tentados em ordem depois de ISO 8601 e RFC 822
DATE_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d %H:%M",
    "%Y.%m.%d %H:%M",
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%Y.%m.%d",
    "%b %d, %Y %I:%M %p",
    "%B %d, %Y %I:%M %p",
    "%b %d, %Y",
    "%B %d, %Y",
    "%d %b %Y",
    "%d %B %Y",
)


def _as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_date(value) -> datetime | None:
    """
    Converte string, datetime, time.struct_time ou epoch (s/ms) em datetime UTC.
    Retorna None se nenhum formato servir.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, time.struct_time):
        try:
            return datetime(*value[:6], tzinfo=timezone.utc)
        except (TypeError, ValueError):
            return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        ts = value / 1000 if value > 1e11 else value
        try:
            return datetime.fromtimestamp(ts, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str):
        return None

    s = value.strip()
    if not s:
        return None
    if s.lower().startswith("published:"):
        s = s[len("published:") :].strip()
    try:
        return _as_utc(datetime.fromisoformat(s.replace("Z", "+00:00")))
    except ValueError:
        pass
    try:
        dt = parsedate_to_datetime(s)
    except (TypeError, ValueError, IndexError):
        dt = None
    if dt is not None:
        return _as_utc(dt)
    for fmt in DATE_FORMATS:
        try:
            return _as_utc(datetime.strptime(s, fmt))
        except ValueError:
            continue
    return None


def parse_date_or_now(value) -> datetime:
    """Como parse_date, mas cai para o horário atual (nunca None)."""
    return parse_date(value) or now_utc()
