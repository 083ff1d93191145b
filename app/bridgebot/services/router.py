# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/3 10:40
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Maps inbound messages and commands to translations and builds the replies.

Nothing here talks to Telegram: every route takes an `InboundMessage` and
returns an `OutgoingReply` (or None when the bot should stay silent).
"""
from loguru import logger
from telegram.constants import ParseMode

from bridgebot.prompts import (
    BOT_TRANSLATION_TEMPLATE,
    HELP_TEXT,
    SMART_TRANSLATION_ERROR_TEXT,
    SMART_TRANSLATION_USAGE,
    TO_CHINESE_ERROR_TEXT,
    TO_CHINESE_USAGE,
    TO_ENGLISH_ERROR_TEXT,
    TO_ENGLISH_USAGE,
    TRANSLATED_WITH_ORIGINAL_TEMPLATE,
    WELCOME_TEXT,
)
from models import InboundMessage, LanguageCode, OutgoingReply
from translator import TranslationError, TranslationResolver, is_chinese, primary_subtag


def extract_command_text(text: str) -> str:
    """`/tc@my_bot hello\\nworld` -> `hello\\nworld`"""
    if not text or not text.startswith("/"):
        return ""
    parts = text.split(maxsplit=1)
    return parts[1].strip() if len(parts) > 1 else ""


def format_direction(source: LanguageCode | str, target: LanguageCode | str) -> str:
    return f"{primary_subtag(source).upper()} → {primary_subtag(target).upper()}"


def _reply_in_place(message: InboundMessage, text: str, **kwargs) -> OutgoingReply:
    return OutgoingReply(chat_id=message.chat_id, text=text, thread_id=message.thread_id, **kwargs)


async def route_auto_translation(
    message: InboundMessage,
    resolver: TranslationResolver,
    *,
    enabled: bool,
    source_language: LanguageCode | str = LanguageCode.ZH_CN,
    target_language: LanguageCode | str = LanguageCode.EN,
) -> OutgoingReply | None:
    """Translate a Chinese group message and reply to it in the same topic"""
    if not enabled:
        return None

    text = message.text
    if not text or text.startswith("/"):
        return None

    if not is_chinese(text):
        return None

    logger.info(f"Detected Chinese message from {message.sender} in {message.location}: \"{text}\"")

    try:
        translated = await resolver.resolve(text, target_language, source_language)
    except TranslationError as err:
        logger.error(f"Auto-translation failed for \"{text[:50]}\" - {err}")
        return None

    return _reply_in_place(
        message,
        TRANSLATED_WITH_ORIGINAL_TEMPLATE.format(
            original=text,
            direction=format_direction(source_language, target_language),
            translated=translated,
        ),
        reply_to_message_id=message.message_id,
    )


async def _route_command(
    message: InboundMessage,
    command_text: str | None,
    resolver: TranslationResolver,
    *,
    command: str,
    source_language: LanguageCode,
    target_language: LanguageCode,
    usage: str,
    error_text: str,
) -> tuple[OutgoingReply | None, str | None, str | None]:
    """Shared flow of the translation commands

    Returns:
        A usage or error reply with no texts, or no reply with the original text
        and its translation
    """
    text_to_translate = command_text or message.reply_text
    if not text_to_translate:
        return _reply_in_place(message, usage), None, None

    direction = format_direction(source_language, target_language)
    logger.info(
        f"Processing /{command} command in {message.location}: {direction} "
        f"for text: \"{text_to_translate}\" by {message.sender}"
    )

    try:
        translated = await resolver.resolve(text_to_translate, target_language, source_language)
    except TranslationError as err:
        logger.error(f"Error handling /{command} command - {err}")
        return _reply_in_place(message, error_text), None, None

    return None, text_to_translate, translated


async def route_to_chinese(
    message: InboundMessage, command_text: str | None, resolver: TranslationResolver
) -> OutgoingReply:
    """/tc - English to Chinese"""
    reply, _, translated = await _route_command(
        message,
        command_text,
        resolver,
        command="tc",
        source_language=LanguageCode.EN,
        target_language=LanguageCode.ZH_CN,
        usage=TO_CHINESE_USAGE,
        error_text=TO_CHINESE_ERROR_TEXT,
    )
    if reply:
        return reply

    text = BOT_TRANSLATION_TEMPLATE.format(
        direction=format_direction(LanguageCode.EN, LanguageCode.ZH_CN), translated=translated
    )
    return _reply_in_place(message, text)


async def route_to_english(
    message: InboundMessage, command_text: str | None, resolver: TranslationResolver
) -> OutgoingReply:
    """/translatezh - Chinese to English"""
    reply, original, translated = await _route_command(
        message,
        command_text,
        resolver,
        command="translatezh",
        source_language=LanguageCode.ZH_CN,
        target_language=LanguageCode.EN,
        usage=TO_ENGLISH_USAGE,
        error_text=TO_ENGLISH_ERROR_TEXT,
    )
    if reply:
        return reply

    text = TRANSLATED_WITH_ORIGINAL_TEMPLATE.format(
        original=original,
        direction=format_direction(LanguageCode.ZH_CN, LanguageCode.EN),
        translated=translated,
    )
    return _reply_in_place(message, text)


async def route_smart_translation(
    message: InboundMessage, command_text: str | None, resolver: TranslationResolver
) -> OutgoingReply:
    """/translate - direction picked from the detected language"""
    text_to_translate = command_text or message.reply_text
    if not text_to_translate:
        return _reply_in_place(message, SMART_TRANSLATION_USAGE)

    logger.info(
        f"Processing /translate command in {message.location} "
        f"for text: \"{text_to_translate}\" by {message.sender}"
    )

    try:
        result = await resolver.smart_translate(text_to_translate)
    except TranslationError as err:
        logger.error(f"Error handling /translate command - {err}")
        return _reply_in_place(message, SMART_TRANSLATION_ERROR_TEXT)

    text = TRANSLATED_WITH_ORIGINAL_TEMPLATE.format(
        original=result.original_text,
        direction=format_direction(result.source_language, result.target_language),
        translated=result.translated_text,
    )
    return _reply_in_place(message, text)


def render_help(message: InboundMessage) -> OutgoingReply:
    return _reply_in_place(message, HELP_TEXT, parse_mode=ParseMode.MARKDOWN)


def render_start(message: InboundMessage) -> OutgoingReply:
    return _reply_in_place(message, WELCOME_TEXT, parse_mode=ParseMode.MARKDOWN)
