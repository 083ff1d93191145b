# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/3 12:06
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 手动翻译命令处理器（指令转发层）
"""
from typing import Awaitable, Callable

from telegram import Update
from telegram.ext import ContextTypes

from bridgebot.common import get_resolver, send_reply
from bridgebot.services import router
from bridgebot.task_manager import non_blocking_handler
from models import InboundMessage, OutgoingReply
from translator import TranslationResolver

ROUTE = Callable[[InboundMessage, str | None, TranslationResolver], Awaitable[OutgoingReply]]


async def _dispatch(update: Update, context: ContextTypes.DEFAULT_TYPE, route: ROUTE) -> None:
    message = update.effective_message
    if not message:
        return

    inbound = InboundMessage.from_telegram(message)
    command_text = router.extract_command_text(inbound.text)
    reply = await route(inbound, command_text, get_resolver(context))
    await send_reply(context, reply)


@non_blocking_handler("tc_command")
async def tc_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """/tc - English to Chinese"""
    await _dispatch(update, context, router.route_to_chinese)


@non_blocking_handler("translatezh_command")
async def translatezh_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """/translatezh - Chinese to English"""
    await _dispatch(update, context, router.route_to_english)


@non_blocking_handler("translate_command")
async def translate_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """/translate - auto-detected direction"""
    await _dispatch(update, context, router.route_smart_translation)
