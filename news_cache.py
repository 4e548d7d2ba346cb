"""
Cache em memória do último resultado do agregador, com TTL.

Local ao processo e sem lock: dois misses quase simultâneos podem rodar o
agregador duas vezes, o que só desperdiça trabalho.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable

from config import CACHE_TTL

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheRead:
    data: Any
    timestamp: float
    cached: bool = False
    stale: bool = False


@dataclass(frozen=True)
class _Entry:
    data: Any
    timestamp: float


class ResultCache:
    def __init__(self, ttl_seconds: float = CACHE_TTL, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, _Entry] = {}

    def _is_fresh(self, entry: _Entry, ttl: float) -> bool:
        return self._clock() - entry.timestamp < ttl

    def get_or_refresh(
        self,
        key: str,
        loader: Callable[[], Any],
        ttl: float | None = None,
        force: bool = False,
    ) -> CacheRead:
        """
        Dentro do TTL devolve o dado guardado sem chamar loader. Fora do TTL
        (ou com force) chama loader e só substitui o dado em caso de sucesso.
        Se loader falhar e houver dado anterior, devolve-o marcado como stale;
        sem dado anterior, a exceção sobe.
        """
        ttl = self.ttl_seconds if ttl is None else ttl
        entry = self._entries.get(key)
        if entry is not None and not force and self._is_fresh(entry, ttl):
            logger.debug("Cache hit: %s", key)
            return CacheRead(entry.data, entry.timestamp, cached=True)

        try:
            data = loader()
        except Exception as e:
            if entry is None:
                raise
            logger.warning("Falha ao atualizar %s; servindo cache antigo: %s", key, e)
            return CacheRead(entry.data, entry.timestamp, cached=True, stale=True)

        entry = _Entry(data, self._clock())
        self._entries[key] = entry
        return CacheRead(entry.data, entry.timestamp)

    def invalidate(self, key: str | None = None) -> None:
        if key is None:
            self._entries.clear()
        else:
            self._entries.pop(key, None)
