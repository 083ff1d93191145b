# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 22:05
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 免费翻译后端（Google gtx / LibreTranslate / Lingva）及其注册表
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from urllib.parse import quote

import httpx
from httpx import AsyncClient
from loguru import logger

from translator.exceptions import ProviderTransportError, UnknownProviderError
from translator.language_detector import primary_subtag

DEFAULT_API_TIMEOUT = 5.0


class BaseTranslationProvider(ABC):
    """Abstract base class for translation backends

    Subclasses own the request shape and the response unwrapping. Callers only
    see `invoke(text, target, source)`, which returns a non-empty string or
    None, and raises ProviderTransportError for anything that went wrong on the wire.
    """

    # Identifier used in API_PRIORITY - must be overridden
    provider_id: str = ""

    def __init__(self, client: AsyncClient, endpoint: str, timeout: float = DEFAULT_API_TIMEOUT):
        self._client = client
        self.endpoint = endpoint.rstrip("/")
        self.timeout = timeout

    @abstractmethod
    async def _translate(self, text: str, to: str, from_: str) -> Optional[str]:
        """
        Call the backend with primary subtags

        Args:
            text: Text to translate
            to: Target primary subtag, e.g. `en`
            from_: Source primary subtag, e.g. `zh`

        Returns:
            Translated text, or None when the backend answered without one
        """
        pass

    async def invoke(self, text: str, target: str, source: str) -> Optional[str]:
        from_, to = primary_subtag(source), primary_subtag(target)
        logger.info(f"{self.__class__.__name__}: Translating from {from_} to {to}")

        try:
            translated = await self._translate(text, to, from_)
        except httpx.TimeoutException as err:
            raise ProviderTransportError(self.provider_id, f"timeout after {self.timeout:g}s") from err
        except httpx.HTTPStatusError as err:
            raise ProviderTransportError(
                self.provider_id, f"HTTP {err.response.status_code}"
            ) from err
        except httpx.HTTPError as err:
            raise ProviderTransportError(self.provider_id, repr(err)) from err
        except (ValueError, KeyError, IndexError, TypeError, AttributeError) as err:
            raise ProviderTransportError(self.provider_id, f"unreadable response: {err!r}") from err

        # 空字符串不算成功
        if not isinstance(translated, str) or not translated.strip():
            return None
        return translated


class GoogleTranslateProvider(BaseTranslationProvider):
    """translate.googleapis.com, `gtx` client"""

    provider_id = "google"

    async def _translate(self, text: str, to: str, from_: str) -> Optional[str]:
        params = {"client": "gtx", "sl": from_, "tl": to, "dt": "t", "q": text}
        response = await self._client.get(self.endpoint, params=params, timeout=self.timeout)
        response.raise_for_status()
        data = response.json()
        if data and isinstance(data[0], list):
            return "".join(chunk[0] for chunk in data[0] if chunk and chunk[0])
        return None


class LibreTranslateProvider(BaseTranslationProvider):
    provider_id = "libre"

    async def _translate(self, text: str, to: str, from_: str) -> Optional[str]:
        payload = {"q": text, "source": from_, "target": to, "format": "text"}
        response = await self._client.post(self.endpoint, json=payload, timeout=self.timeout)
        response.raise_for_status()
        return response.json().get("translatedText")


class LingvaProvider(BaseTranslationProvider):
    provider_id = "lingva"

    async def _translate(self, text: str, to: str, from_: str) -> Optional[str]:
        url = f"{self.endpoint}/{from_}/{to}/{quote(text, safe='')}"
        response = await self._client.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.json().get("translation")


class ProviderRegistry:
    """Registry mapping provider ids to provider instances"""

    def __init__(self):
        self._providers: Dict[str, BaseTranslationProvider] = {}

    def register(self, provider: BaseTranslationProvider) -> None:
        if not provider.provider_id:
            raise ValueError(f"Provider {provider.__class__.__name__} must define provider_id")

        self._providers[provider.provider_id] = provider
        logger.debug(f"Registered {provider.__class__.__name__} as `{provider.provider_id}`")

    def get(self, provider_id: str) -> BaseTranslationProvider:
        key = provider_id.strip().lower()
        if key not in self._providers:
            raise UnknownProviderError(provider_id)
        return self._providers[key]

    def __contains__(self, provider_id: str) -> bool:
        return provider_id.strip().lower() in self._providers

    def get_provider_ids(self) -> List[str]:
        return list(self._providers)


def create_default_registry(
    client: AsyncClient,
    *,
    timeout: float = DEFAULT_API_TIMEOUT,
    google_url: str = "https://translate.googleapis.com/translate_a/single",
    libre_url: str = "https://libretranslate.de/translate",
    lingva_url: str = "https://lingva.ml/api/v1",
) -> ProviderRegistry:
    """Register the built-in backends on a shared http client"""
    registry = ProviderRegistry()
    registry.register(GoogleTranslateProvider(client, google_url, timeout))
    registry.register(LibreTranslateProvider(client, libre_url, timeout))
    registry.register(LingvaProvider(client, lingva_url, timeout))
    return registry
