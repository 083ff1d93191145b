# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/2 21:24
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 语言检测模块，只区分中文与非中文
"""

import re
from enum import Enum

from loguru import logger

from models import LanguageCode

# CJK Unified Ideographs, Extension A, Compatibility Ideographs
CHINESE_PATTERN = re.compile(r"[\u4e00-\u9fff\u3400-\u4dbf\uf900-\ufaff]")

# 语言代码映射表
LANGUAGE_MAPPING = {
    "zh": "Chinese",
    "en": "English",
}


def primary_subtag(language_code: LanguageCode | str) -> str:
    """`zh-CN` -> `zh`, `en` -> `en`"""
    if isinstance(language_code, Enum):
        language_code = language_code.value
    return str(language_code).split("-")[0].strip().lower()


def is_same_language(source: LanguageCode | str, target: LanguageCode | str) -> bool:
    return primary_subtag(source) == primary_subtag(target)


def is_chinese(text: str) -> bool:
    """检查文本是否包含至少一个汉字"""
    if not text or not isinstance(text, str):
        return False
    return bool(CHINESE_PATTERN.search(text))


def classify(text: str) -> LanguageCode:
    """检测文本语言

    Args:
        text: 待检测的文本，空值或非字符串视为英文

    Returns:
        LanguageCode.ZH_CN 或 LanguageCode.EN
    """
    if not text or not isinstance(text, str) or not text.strip():
        return LanguageCode.EN

    if is_chinese(text):
        logger.debug(f"Detected Chinese characters - classifying as zh-CN (原文: {text[:30]}...)")
        return LanguageCode.ZH_CN

    logger.debug(f"No Chinese characters detected - classifying as en (原文: {text[:30]}...)")
    return LanguageCode.EN


def opposite_language(language_code: LanguageCode | str) -> LanguageCode:
    """中文 -> 英文，其余 -> 中文"""
    if primary_subtag(language_code) == primary_subtag(LanguageCode.ZH_CN):
        return LanguageCode.EN
    return LanguageCode.ZH_CN


def get_language_display_name(language_code: LanguageCode | str) -> str:
    """获取语言的显示名称"""
    subtag = primary_subtag(language_code)
    return LANGUAGE_MAPPING.get(subtag, subtag)
