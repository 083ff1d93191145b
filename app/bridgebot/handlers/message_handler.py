# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/3 11:40
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 群聊中文消息的自动翻译
"""
from telegram import Update
from telegram.ext import ContextTypes

from bridgebot.common import get_resolver, send_reply
from bridgebot.services import router
from bridgebot.task_manager import non_blocking_handler
from models import InboundMessage
from settings import settings


@non_blocking_handler("handle_message")
async def handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    message = update.effective_message
    if not message or not message.text:
        return

    # 跳过机器人发送的消息
    if message.from_user and message.from_user.is_bot:
        return

    reply = await router.route_auto_translation(
        InboundMessage.from_telegram(message),
        get_resolver(context),
        enabled=settings.AUTO_TRANSLATE,
        source_language=settings.DEFAULT_SOURCE_LANGUAGE,
        target_language=settings.DEFAULT_TARGET_LANGUAGE,
    )
    await send_reply(context, reply)
