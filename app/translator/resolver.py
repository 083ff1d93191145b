# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/3 00:02
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 翻译的统一入口：语言检测 -> 缓存 -> 后端降级链 -> 写缓存
"""
import asyncio
from typing import Dict, Optional

from httpx import AsyncClient
from loguru import logger

from models import CacheKey, LanguageCode, SmartTranslation, TranslationRequest
from translator.cache import TranslationCache
from translator.exceptions import InvalidInputError
from translator.fallback_chain import ProviderFallbackChain
from translator.language_detector import classify, is_same_language, opposite_language
from translator.providers import create_default_registry


def _tag(language_code: LanguageCode | str) -> str:
    return str(getattr(language_code, "value", language_code))


class TranslationResolver:
    def __init__(
        self,
        chain: ProviderFallbackChain,
        cache: TranslationCache,
        *,
        single_flight: bool = False,
    ):
        self.chain = chain
        self.cache = cache
        self.single_flight = single_flight
        self._in_flight: Dict[CacheKey, asyncio.Future] = {}

    async def resolve(
        self,
        text: str,
        target_language: LanguageCode | str,
        source_language: LanguageCode | str | None = None,
    ) -> str:
        """
        Translate `text` into `target_language`

        Args:
            text: Text to translate
            target_language: e.g. `en`, `zh-CN`
            source_language: Detected from the text when omitted

        Returns:
            The translation, or `text` itself when source and target share a primary subtag

        Raises:
            InvalidInputError: `text` is empty
            AllProvidersFailedError: no provider produced a translation
        """
        if not text or not isinstance(text, str):
            logger.debug("Skip translation: nothing to translate")
            raise InvalidInputError("Nothing to translate")

        if not source_language:
            source_language = classify(text)
            logger.debug(f"Auto-detected source language as: {_tag(source_language)}")

        request = TranslationRequest(
            source_text=text,
            source_language=_tag(source_language),
            target_language=_tag(target_language),
        )

        if is_same_language(request.source_language, request.target_language):
            logger.debug(
                f"Source ({request.source_language}) and target ({request.target_language}) "
                f"languages are the same. Skipping translation."
            )
            return text

        if (cached := self.cache.get(request.cache_key)) is not None:
            return cached

        if self.single_flight:
            return await self._resolve_shared(request)
        return await self._resolve_and_cache(request)

    async def _resolve_and_cache(self, request: TranslationRequest) -> str:
        translated = await self.chain.translate(
            request.source_text, request.target_language, request.source_language
        )
        self.cache.put(request.cache_key, translated)
        return translated

    async def _resolve_shared(self, request: TranslationRequest) -> str:
        key = request.cache_key
        future = self._in_flight.get(key)
        if future is None:
            future = asyncio.ensure_future(self._resolve_and_cache(request))
            self._in_flight[key] = future
            future.add_done_callback(lambda _: self._in_flight.pop(key, None))
        else:
            logger.debug(f"Joining in-flight translation for key: {key}")
        return await asyncio.shield(future)

    async def smart_translate(self, text: str) -> SmartTranslation:
        """中文译为英文，其余译为中文"""
        source = classify(text)
        target = opposite_language(source)
        translated = await self.resolve(text, target, source)
        return SmartTranslation(
            original_text=text,
            translated_text=translated,
            source_language=source,
            target_language=target,
        )

    async def aclose(self) -> None:
        await self.chain.aclose()


def create_resolver(settings) -> TranslationResolver:
    """Wire a resolver from the application settings"""
    client = AsyncClient(timeout=settings.api_timeout_seconds, follow_redirects=True)
    registry = create_default_registry(
        client,
        timeout=settings.api_timeout_seconds,
        google_url=settings.GOOGLE_TRANSLATE_URL,
        libre_url=settings.LIBRETRANSLATE_URL,
        lingva_url=settings.LINGVA_URL,
    )
    chain = ProviderFallbackChain(registry, settings.providers, client=client)
    cache = TranslationCache(ttl=settings.cache_ttl_seconds, enabled=settings.ENABLE_CACHE)
    return TranslationResolver(chain, cache, single_flight=settings.ENABLE_SINGLE_FLIGHT)
