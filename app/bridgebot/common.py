# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/3 11:26
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    :
"""
from loguru import logger
from telegram.error import BadRequest
from telegram.ext import ContextTypes

from models import OutgoingReply
from translator import TranslationResolver

RESOLVER_KEY = "resolver"


def get_resolver(context: ContextTypes.DEFAULT_TYPE) -> TranslationResolver:
    """The resolver is created once in main and shared through `bot_data`"""
    return context.bot_data[RESOLVER_KEY]


async def send_reply(context: ContextTypes.DEFAULT_TYPE, reply: OutgoingReply | None) -> None:
    if reply is None:
        return

    try:
        await context.bot.send_message(**reply.to_send_kwargs())
    except BadRequest as err:
        # 被回复的消息可能已被删除，去掉引用后重发
        if not reply.reply_to_message_id:
            raise
        logger.warning(f"Failed to reply to message {reply.reply_to_message_id}: {err}")
        fallback = reply.model_copy(update={"reply_to_message_id": None})
        await context.bot.send_message(**fallback.to_send_kwargs())
