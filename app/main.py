# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/3 13:20
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : TranslationBot 入口，中英双语群聊桥接
"""
import json
import sys

from loguru import logger
from telegram import Update, BotCommand
from telegram.ext import Application, CommandHandler, MessageHandler, filters

from bridgebot.common import RESOLVER_KEY
from bridgebot.handlers import handle_message
from bridgebot.handlers.command_handler import (
    start_command,
    help_command,
    tc_command,
    translatezh_command,
    translate_command,
)
from bridgebot.task_manager import wait_for_all_tasks
from settings import settings, LOG_DIR
from translator import ConfigurationError, create_resolver
from utils import init_log

# 只响应新消息，编辑过的消息不再重复翻译
NEW_MESSAGES = filters.UpdateType.MESSAGE

COMMANDS = {
    "start": start_command,
    "help": help_command,
    "tc": tc_command,
    "translatezh": translatezh_command,
    "translate": translate_command,
}


async def setup_bot_commands(application: Application):
    """设置机器人的命令菜单"""
    commands = [
        BotCommand("tc", "Translate English to Chinese"),
        BotCommand("translatezh", "Translate Chinese to English"),
        BotCommand("translate", "Detect the language and translate"),
        BotCommand("help", "Show help"),
        BotCommand("start", "Show the welcome message"),
    ]

    try:
        await application.bot.set_my_commands(commands)
        logger.success(f"已设置机器人命令菜单: {[f'/{cmd.command}' for cmd in commands]}")
    except Exception as e:
        logger.error(f"设置机器人命令菜单失败: {e}")


async def shutdown_resolver(application: Application):
    await wait_for_all_tasks()
    if resolver := application.bot_data.get(RESOLVER_KEY):
        await resolver.aclose()
        logger.info("Translation http client closed")


def register_handlers(application: Application) -> None:
    for command, callback in COMMANDS.items():
        application.add_handler(CommandHandler(command, callback, filters=NEW_MESSAGES))

    # on non command i.e message - auto translation
    application.add_handler(
        MessageHandler(NEW_MESSAGES & filters.TEXT & ~filters.COMMAND, handle_message)
    )


def main() -> None:
    """Start the bot."""
    init_log(
        settings.LOG_LEVEL,
        runtime=LOG_DIR.joinpath("runtime.log"),
        error=LOG_DIR.joinpath("error.log"),
    )

    try:
        settings.validate_config()
    except ConfigurationError as err:
        logger.critical(f"CRITICAL ERROR: {err}")
        sys.exit(1)

    sp = settings.model_dump(mode="json")
    logger.debug(f"Loading settings: {json.dumps(sp, indent=2, ensure_ascii=False)}")

    application = settings.get_default_application()
    application.bot_data[RESOLVER_KEY] = create_resolver(settings)

    application.post_init = setup_bot_commands
    application.post_shutdown = shutdown_resolver

    register_handlers(application)

    # SIGINT / SIGTERM are handled by run_polling, which then runs post_shutdown
    logger.success("TranslationBot started, listening for messages (with topic support)...")
    application.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == "__main__":
    main()
