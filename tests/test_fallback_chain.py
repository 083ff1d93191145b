# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/3 15:21
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Priority order and failure handling of the provider fallback chain
"""
from unittest.mock import AsyncMock, Mock

import pytest

from translator.exceptions import AllProvidersFailedError, ProviderTransportError
from translator.fallback_chain import ProviderFallbackChain
from translator.providers import BaseTranslationProvider, ProviderRegistry


def make_provider(provider_id: str, result=None, error: Exception | None = None) -> Mock:
    provider = Mock(spec=BaseTranslationProvider)
    provider.provider_id = provider_id
    provider.invoke = AsyncMock(return_value=result, side_effect=error)
    return provider


def make_registry(*providers) -> ProviderRegistry:
    registry = ProviderRegistry()
    for provider in providers:
        registry.register(provider)
    return registry


class TestProviderFallbackChain:

    @pytest.mark.asyncio
    async def test_first_success_wins(self):
        a = make_provider("a", "Hello")
        b = make_provider("b", "Hi")
        chain = ProviderFallbackChain(make_registry(a, b), ["a", "b"])

        assert await chain.translate("你好", "en", "zh-CN") == "Hello"
        a.invoke.assert_awaited_once_with("你好", "en", "zh-CN")
        b.invoke.assert_not_called()

    @pytest.mark.asyncio
    async def test_failed_provider_falls_through_and_later_ones_are_skipped(self):
        a = make_provider("a", error=ProviderTransportError("a", "timeout after 5s"))
        b = make_provider("b", "Hello")
        c = make_provider("c", "Hi")
        chain = ProviderFallbackChain(make_registry(a, b, c), ["a", "b", "c"])

        assert await chain.translate("你好", "en", "zh-CN") == "Hello"
        a.invoke.assert_awaited_once()
        b.invoke.assert_awaited_once()
        c.invoke.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_result_falls_through(self):
        a = make_provider("a", None)
        b = make_provider("b", "Hello")
        chain = ProviderFallbackChain(make_registry(a, b), ["a", "b"])

        assert await chain.translate("你好", "en", "zh-CN") == "Hello"

    @pytest.mark.asyncio
    async def test_priority_order_comes_from_configuration(self):
        a = make_provider("a", "from a")
        b = make_provider("b", "from b")
        chain = ProviderFallbackChain(make_registry(a, b), ["b", "a"])

        assert await chain.translate("你好", "en", "zh-CN") == "from b"
        a.invoke.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_provider_is_skipped(self):
        b = make_provider("b", "Hello")
        chain = ProviderFallbackChain(make_registry(b), ["deepl", "b"])

        assert await chain.translate("你好", "en", "zh-CN") == "Hello"

    @pytest.mark.asyncio
    async def test_exhaustion_raises_all_providers_failed(self):
        a = make_provider("a", error=ProviderTransportError("a", "HTTP 500"))
        b = make_provider("b", None)
        chain = ProviderFallbackChain(make_registry(a, b), ["a", "nope", "b"])

        with pytest.raises(AllProvidersFailedError) as exc_info:
            await chain.translate("你好", "en", "zh-CN")

        assert exc_info.value.attempted == ["a", "b"]

    @pytest.mark.asyncio
    async def test_empty_priority_raises(self):
        chain = ProviderFallbackChain(ProviderRegistry(), [])

        with pytest.raises(AllProvidersFailedError):
            await chain.translate("你好", "en", "zh-CN")

    @pytest.mark.asyncio
    async def test_aclose_closes_shared_client(self):
        client = AsyncMock()
        client.is_closed = False
        chain = ProviderFallbackChain(ProviderRegistry(), [], client=client)

        await chain.aclose()
        client.aclose.assert_awaited_once()
