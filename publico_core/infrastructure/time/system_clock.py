"""Implementação concreta de ``Clock`` baseada no relógio do sistema."""

from __future__ import annotations

import time
from datetime import datetime, timezone

from publico_core.domain.contracts import Clock


class SystemClock(Clock):
    """Instantes em UTC e um contador monotónico para medir durações."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def monotonic(self) -> float:
        return time.monotonic()
