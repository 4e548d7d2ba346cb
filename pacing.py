"""
Política de intervalo mínimo entre requests (evita limite de uso das APIs e bloqueio dos sites).
"""

import time
from typing import Callable


class RequestPacer:
    """
    Garante pelo menos `min_interval` segundos entre chamadas sucessivas de wait().

    A primeira chamada não espera. sleep e clock são injetáveis para testes.
    """

    def __init__(
        self,
        min_interval: float,
        *,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.min_interval = max(0.0, float(min_interval))
        self._sleep = sleep
        self._clock = clock
        self._last: float | None = None

    def wait(self) -> float:
        """Dorme o necessário e retorna o tempo dormido."""
        slept = 0.0
        if self._last is not None and self.min_interval > 0:
            elapsed = self._clock() - self._last
            remaining = self.min_interval - elapsed
            if remaining > 0:
                self._sleep(remaining)
                slept = remaining
        self._last = self._clock()
        return slept

    def reset(self) -> None:
        self._last = None
