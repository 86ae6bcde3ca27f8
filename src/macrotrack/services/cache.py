"""TTL cache for AI macro estimates."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol


class Cache(Protocol):
    """Key-value cache interface."""

    def get(self, key: str) -> object | None:
        """Return a cached value if present and not expired."""

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        """Store a value for ttl_seconds."""


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class InMemoryCache(Cache):
    """Process-local cache; estimates are lost on restart."""

    clock: Callable[[], datetime] = _utcnow
    _values: dict[str, tuple[object, datetime]] = field(
        default_factory=dict, repr=False
    )

    def get(self, key: str) -> object | None:
        """Return a cached value, evicting it once expired."""
        cached = self._values.get(key)
        if cached is None:
            return None
        value, expires_at = cached
        if self.clock() >= expires_at:
            del self._values[key]
            return None
        return value

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        expires_at = self.clock() + timedelta(seconds=ttl_seconds)
        self._values[key] = (value, expires_at)
