# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/3 17:32
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Telegram handler tests for the translation commands and auto translation
"""
from unittest.mock import AsyncMock, Mock, patch

import pytest
import pytest_asyncio
from telegram import Update, Message, Chat, User
from telegram.error import BadRequest
from telegram.ext import ContextTypes

from bridgebot.common import RESOLVER_KEY
from bridgebot.handlers import handle_message
from bridgebot.handlers.command_handler import (
    help_command,
    start_command,
    tc_command,
    translate_command,
    translatezh_command,
)
from bridgebot.prompts import GENERIC_ERROR_TEXT, TO_CHINESE_USAGE
from translator import TranslationResolver


def build_message(text: str, *, thread_id: int | None = 9, reply_text: str | None = None):
    message = Mock(spec=Message)
    message.message_id = 123
    message.text = text
    message.caption = None
    message.message_thread_id = thread_id
    message.is_topic_message = thread_id is not None

    user = Mock(spec=User)
    user.id = 456789
    user.username = "alice"
    user.is_bot = False
    message.from_user = user
    message.sender_chat = None

    chat = Mock(spec=Chat)
    chat.id = -987654
    chat.type = "supergroup"
    message.chat = chat

    if reply_text is not None:
        replied = Mock(spec=Message)
        replied.text = reply_text
        replied.caption = None
        message.reply_to_message = replied
    else:
        message.reply_to_message = None

    return message


def build_update(message) -> Update:
    update = AsyncMock(spec=Update)
    update.message = message
    update.effective_message = message
    update.effective_chat = message.chat if message else None
    return update


@pytest_asyncio.fixture
async def mock_resolver():
    resolver = AsyncMock(spec=TranslationResolver)
    resolver.resolve.return_value = "这是一个测试消息。"
    return resolver


@pytest_asyncio.fixture
async def mock_context(mock_resolver):
    context = AsyncMock(spec=ContextTypes.DEFAULT_TYPE)
    bot = AsyncMock()
    bot.username = "bridge_bot"
    bot.send_message = AsyncMock()
    context.bot = bot
    context.bot_data = {RESOLVER_KEY: mock_resolver}
    return context


async def run_handler(handler, update, context):
    """Background handlers return their task, wait for it"""
    task = await handler(update, context)
    if task is not None:
        await task


class TestTranslateCommands:

    @pytest.mark.asyncio
    async def test_tc_with_text(self, mock_context, mock_resolver):
        update = build_update(build_message("/tc This is a test message."))

        await run_handler(tc_command, update, mock_context)

        mock_resolver.resolve.assert_awaited_once()
        assert mock_resolver.resolve.await_args.args[0] == "This is a test message."
        mock_context.bot.send_message.assert_awaited_once_with(
            chat_id=-987654,
            text="🤖 Bot (EN → ZH):\n\n这是一个测试消息。",
            message_thread_id=9,
        )

    @pytest.mark.asyncio
    async def test_tc_replying_to_a_message(self, mock_context, mock_resolver):
        update = build_update(build_message("/tc@bridge_bot", reply_text="Good morning"))

        await run_handler(tc_command, update, mock_context)

        assert mock_resolver.resolve.await_args.args[0] == "Good morning"

    @pytest.mark.asyncio
    async def test_tc_without_text_sends_usage(self, mock_context, mock_resolver):
        update = build_update(build_message("/tc", thread_id=None))

        await run_handler(tc_command, update, mock_context)

        mock_resolver.resolve.assert_not_called()
        mock_context.bot.send_message.assert_awaited_once_with(
            chat_id=-987654, text=TO_CHINESE_USAGE
        )

    @pytest.mark.asyncio
    async def test_translatezh(self, mock_context, mock_resolver):
        mock_resolver.resolve.return_value = "Hello"
        update = build_update(build_message("/translatezh 你好"))

        await run_handler(translatezh_command, update, mock_context)

        call_kwargs = mock_context.bot.send_message.call_args.kwargs
        assert call_kwargs["text"] == "Original: 你好\n\n🔄 Translated (ZH → EN):\nHello"
        assert call_kwargs["message_thread_id"] == 9

    @pytest.mark.asyncio
    async def test_translate_uses_smart_translation(self, mock_context, mock_resolver):
        update = build_update(build_message("/translate 你好"))

        with patch("bridgebot.handlers.command_handler.translate_command.router") as mock_router:
            mock_router.extract_command_text.return_value = "你好"
            mock_router.route_smart_translation = AsyncMock(return_value=None)

            await run_handler(translate_command, update, mock_context)

            mock_router.route_smart_translation.assert_awaited_once()
            inbound, command_text, resolver = mock_router.route_smart_translation.await_args.args
            assert inbound.text == "/translate 你好"
            assert command_text == "你好"
            assert resolver is mock_resolver

    @pytest.mark.asyncio
    async def test_unexpected_error_is_reported_in_thread(self, mock_context, mock_resolver):
        mock_resolver.resolve.side_effect = RuntimeError("boom")
        update = build_update(build_message("/tc hi"))

        await run_handler(tc_command, update, mock_context)

        mock_context.bot.send_message.assert_awaited_once_with(
            chat_id=-987654, text=GENERIC_ERROR_TEXT, message_thread_id=9
        )

    @pytest.mark.asyncio
    async def test_no_message_is_ignored(self, mock_context, mock_resolver):
        update = build_update(None)

        await run_handler(tc_command, update, mock_context)

        mock_resolver.resolve.assert_not_called()
        mock_context.bot.send_message.assert_not_called()


class TestStaticCommands:

    @pytest.mark.asyncio
    async def test_help(self, mock_context):
        await help_command(build_update(build_message("/help")), mock_context)

        call_kwargs = mock_context.bot.send_message.call_args.kwargs
        assert "TranslationBot Help" in call_kwargs["text"]
        assert call_kwargs["parse_mode"] == "Markdown"
        assert call_kwargs["message_thread_id"] == 9

    @pytest.mark.asyncio
    async def test_start(self, mock_context):
        await start_command(build_update(build_message("/start", thread_id=None)), mock_context)

        call_kwargs = mock_context.bot.send_message.call_args.kwargs
        assert "Welcome to TranslationBot" in call_kwargs["text"]
        assert "message_thread_id" not in call_kwargs


class TestAutoTranslationHandler:

    @pytest.mark.asyncio
    async def test_chinese_message_gets_threaded_reply(self, mock_context, mock_resolver):
        mock_resolver.resolve.return_value = "Hello"
        update = build_update(build_message("你好"))

        with patch("bridgebot.handlers.message_handler.settings") as mock_settings:
            mock_settings.AUTO_TRANSLATE = True
            mock_settings.DEFAULT_SOURCE_LANGUAGE = "zh-CN"
            mock_settings.DEFAULT_TARGET_LANGUAGE = "en"

            await run_handler(handle_message, update, mock_context)

        mock_resolver.resolve.assert_awaited_once_with("你好", "en", "zh-CN")
        mock_context.bot.send_message.assert_awaited_once_with(
            chat_id=-987654,
            text="Original: 你好\n\n🔄 Translated (ZH → EN):\nHello",
            message_thread_id=9,
            reply_to_message_id=123,
        )

    @pytest.mark.asyncio
    async def test_auto_translation_disabled(self, mock_context, mock_resolver):
        update = build_update(build_message("你好"))

        with patch("bridgebot.handlers.message_handler.settings") as mock_settings:
            mock_settings.AUTO_TRANSLATE = False

            await run_handler(handle_message, update, mock_context)

        mock_resolver.resolve.assert_not_called()
        mock_context.bot.send_message.assert_not_called()

    @pytest.mark.asyncio
    async def test_english_message_is_ignored(self, mock_context, mock_resolver):
        update = build_update(build_message("hello everyone"))

        with patch("bridgebot.handlers.message_handler.settings") as mock_settings:
            mock_settings.AUTO_TRANSLATE = True
            mock_settings.DEFAULT_SOURCE_LANGUAGE = "zh-CN"
            mock_settings.DEFAULT_TARGET_LANGUAGE = "en"

            await run_handler(handle_message, update, mock_context)

        mock_context.bot.send_message.assert_not_called()

    @pytest.mark.asyncio
    async def test_deleted_original_falls_back_to_plain_message(self, mock_context, mock_resolver):
        mock_resolver.resolve.return_value = "Hello"
        mock_context.bot.send_message.side_effect = [BadRequest("Message to reply not found"), None]
        update = build_update(build_message("你好"))

        with patch("bridgebot.handlers.message_handler.settings") as mock_settings:
            mock_settings.AUTO_TRANSLATE = True
            mock_settings.DEFAULT_SOURCE_LANGUAGE = "zh-CN"
            mock_settings.DEFAULT_TARGET_LANGUAGE = "en"

            await run_handler(handle_message, update, mock_context)

        assert mock_context.bot.send_message.await_count == 2
        retry_kwargs = mock_context.bot.send_message.await_args_list[1].kwargs
        assert "reply_to_message_id" not in retry_kwargs
        assert retry_kwargs["message_thread_id"] == 9
