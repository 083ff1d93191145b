# -*- coding: utf-8 -*-
from telegram import Update
from telegram.ext import ContextTypes

from bridgebot.common import send_reply
from bridgebot.services import router
from models import InboundMessage


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Send the command reference when the command /help is issued."""
    if not update.effective_message:
        return
    inbound = InboundMessage.from_telegram(update.effective_message)
    await send_reply(context, router.render_help(inbound))
