# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 21:02
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 中英互译链路
"""

from .cache import TranslationCache
from .exceptions import (
    TranslationError,
    ConfigurationError,
    InvalidInputError,
    ProviderTransportError,
    UnknownProviderError,
    AllProvidersFailedError,
)
from .fallback_chain import ProviderFallbackChain
from .language_detector import classify, is_chinese, primary_subtag
from .providers import BaseTranslationProvider, ProviderRegistry, create_default_registry
from .resolver import TranslationResolver, create_resolver

__all__ = [
    "TranslationCache",
    "TranslationError",
    "ConfigurationError",
    "InvalidInputError",
    "ProviderTransportError",
    "UnknownProviderError",
    "AllProvidersFailedError",
    "ProviderFallbackChain",
    "classify",
    "is_chinese",
    "primary_subtag",
    "BaseTranslationProvider",
    "ProviderRegistry",
    "create_default_registry",
    "TranslationResolver",
    "create_resolver",
]
