# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 23:12
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 进程内的翻译缓存，读取时惰性过期
"""
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from loguru import logger

from models import CacheKey


@dataclass(frozen=True)
class CacheEntry:
    translated_text: str
    created_at: float


class TranslationCache:
    """In-memory translation cache keyed by (text, target language)

    Entries expire lazily on read once `now - created_at >= ttl`. There is no
    size bound. Each entry is replaced as a whole, so concurrent coroutines never
    see a half-written entry.
    """

    def __init__(
        self,
        ttl: float = 24 * 60 * 60,
        enabled: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            ttl: seconds an entry stays valid
            enabled: a disabled cache never stores and never hits
            clock: time source, seconds
        """
        self.ttl = ttl
        self.enabled = enabled
        self._clock = clock
        self._entries: Dict[CacheKey, CacheEntry] = {}

    def get(self, key: CacheKey) -> Optional[str]:
        if not self.enabled:
            return None

        entry = self._entries.get(key)
        if entry is None:
            return None

        if self._clock() - entry.created_at >= self.ttl:
            self._entries.pop(key, None)
            logger.debug(f"Cache expired for key: {key}")
            return None

        logger.debug(f"Cache hit for key: {key}")
        return entry.translated_text

    def put(self, key: CacheKey, value: str) -> None:
        if not self.enabled:
            return

        self._entries[key] = CacheEntry(translated_text=value, created_at=self._clock())
        logger.debug(f"Cached translation for key: {key}")

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
