# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 21:10
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 翻译链路的异常类型
"""
from typing import List


class TranslationError(Exception):
    """Base class for every failure the translation pipeline reports"""


class ConfigurationError(TranslationError):
    """A required setting is missing, the bot must not start"""


class InvalidInputError(TranslationError):
    """Nothing to translate"""


class ProviderTransportError(TranslationError):
    """A single backend failed: timeout, transport, HTTP status or unreadable payload"""

    def __init__(self, provider_id: str, reason: str):
        self.provider_id = provider_id
        self.reason = reason
        super().__init__(f"{provider_id}: {reason}")


class UnknownProviderError(TranslationError):
    """A configured provider id has no registered implementation"""

    def __init__(self, provider_id: str):
        self.provider_id = provider_id
        super().__init__(f"Unknown translation API specified: {provider_id}")


class AllProvidersFailedError(TranslationError):
    """Every configured provider failed or returned nothing"""

    def __init__(self, attempted: List[str]):
        self.attempted = attempted
        super().__init__(f"All translation APIs failed (tried: {', '.join(attempted) or 'none'})")
