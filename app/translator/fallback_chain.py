# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 22:48
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 按优先级依次尝试翻译后端，第一个成功的结果即为最终结果
"""
from typing import List, Optional

from httpx import AsyncClient
from loguru import logger

from translator.exceptions import (
    AllProvidersFailedError,
    ProviderTransportError,
    UnknownProviderError,
)
from translator.providers import ProviderRegistry


class ProviderFallbackChain:

    def __init__(
        self,
        registry: ProviderRegistry,
        priority: List[str],
        client: Optional[AsyncClient] = None,
    ):
        """
        Args:
            registry: provider id -> provider
            priority: provider ids, highest priority first
            client: the http client shared by the registered providers, closed by `aclose`
        """
        self.registry = registry
        self.priority = list(priority)
        self._client = client
        logger.info(f"Translation service initialized. API priority: {', '.join(self.priority)}")

    async def translate(self, text: str, target: str, source: str) -> str:
        """Return the first non-empty translation

        Raises:
            AllProvidersFailedError: every provider failed, returned nothing or is unknown
        """
        attempted = []

        for provider_id in self.priority:
            try:
                provider = self.registry.get(provider_id)
            except UnknownProviderError as err:
                logger.warning(f"{err} - check API_PRIORITY, skipping")
                continue

            attempted.append(provider.provider_id)
            logger.info(f"Attempting translation with {provider_id} API: {source} → {target}")

            try:
                translated = await provider.invoke(text, target, source)
            except ProviderTransportError as err:
                logger.error(f"Translation API error - {err}")
                continue

            if translated:
                logger.success(
                    f"Translation successful with {provider_id}: "
                    f"\"{text[:30]}...\" → \"{translated[:30]}...\""
                )
                return translated

            logger.warning(
                f"Translation failed or returned nothing with {provider_id} for: \"{text[:30]}...\""
            )

        logger.error(f"All translation APIs failed for text: \"{text[:50]}...\"")
        raise AllProvidersFailedError(attempted)

    async def aclose(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
