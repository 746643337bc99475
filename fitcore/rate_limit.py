"""Fixed-window request counter keyed by client identifier.

One RateLimiter instance owns its key table. Windows start on the first
request for a key and reset lazily once expired. The table is per-process;
multiple workers each enforce their own limit.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

DEFAULT_LIMIT = 50
DEFAULT_WINDOW_MS = 60_000
PROFILE_UPDATE_LIMIT = 10


def _now_ms() -> float:
    return time.time() * 1000.0


@dataclass
class RateLimitRecord:
    count: int
    reset_at_ms: float


@dataclass(frozen=True)
class RateLimitResult:
    allowed: bool
    remaining: int
    reset_at_ms: float = 0.0

    def retry_after_seconds(self, now_ms: float) -> int:
        return max(0, int((self.reset_at_ms - now_ms + 999) // 1000))


class RateLimiter:
    def __init__(self, clock: Callable[[], float] = _now_ms) -> None:
        self._clock = clock
        self._records: dict[str, RateLimitRecord] = {}
        self._lock = threading.Lock()

    def now_ms(self) -> float:
        return self._clock()

    def check(self, key: str, limit: int = DEFAULT_LIMIT, window_ms: int = DEFAULT_WINDOW_MS) -> RateLimitResult:
        """Count one request for key and report whether it is allowed."""
        now = self._clock()
        with self._lock:
            record = self._records.get(key)
            if record is None or now > record.reset_at_ms:
                record = RateLimitRecord(count=0, reset_at_ms=now + window_ms)
                self._records[key] = record

            if record.count >= limit:
                return RateLimitResult(allowed=False, remaining=0, reset_at_ms=record.reset_at_ms)

            record.count += 1
            return RateLimitResult(allowed=True, remaining=limit - record.count, reset_at_ms=record.reset_at_ms)

    def purge_expired(self) -> int:
        """Drop records whose window has passed. Returns how many were removed."""
        now = self._clock()
        with self._lock:
            expired = [k for k, r in self._records.items() if now > r.reset_at_ms]
            for k in expired:
                del self._records[k]
        return len(expired)

    def __len__(self) -> int:
        return len(self._records)
