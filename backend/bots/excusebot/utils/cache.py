# File: /excusebot/utils/cache.py
"""
Process-lifetime URL cache keyed by caption pair.
No eviction, no expiry; entries live until the process exits.
"""

from __future__ import annotations
import threading
from typing import Dict, NamedTuple, Optional, Protocol


class CacheKey(NamedTuple):
    short: str
    long: str


class Cacher(Protocol):
    def get(self, key: CacheKey) -> Optional[str]: ...

    def set(self, key: CacheKey, url: str) -> None: ...


class InMemoryCache:
    """Thread-safe dict of CacheKey -> hosted image URL."""

    def __init__(self) -> None:
        self._images: Dict[CacheKey, str] = {}
        self._lock = threading.Lock()

    def get(self, key: CacheKey) -> Optional[str]:
        with self._lock:
            return self._images.get(key)

    def set(self, key: CacheKey, url: str) -> None:
        with self._lock:
            self._images[key] = url

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._images

    def __len__(self) -> int:
        with self._lock:
            return len(self._images)
