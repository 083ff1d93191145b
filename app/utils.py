# -*- coding: utf-8 -*-
# Time       : 2023/8/19 17:19
# Author     : QIN2DIM
# GitHub     : https://github.com/QIN2DIM
# Description: 日志初始化
from __future__ import annotations

import sys
from pathlib import Path
from zoneinfo import ZoneInfo

from loguru import logger

LOG_TIMEZONE = ZoneInfo("Asia/Shanghai")

STDOUT_FORMAT = (
    "<g>{time:YYYY-MM-DD HH:mm:ss}</g> | "
    "<lvl>{level:<8}</lvl>    | "
    "<c>{name}</c>:<c>{function}</c>:<c>{line}</c> | "
    "<n>{message}</n>"
)


def timezone_filter(record):
    """为日志记录添加东八区时区信息"""
    record["time"] = record["time"].astimezone(LOG_TIMEZONE)
    return record


def init_log(
    level: str = "DEBUG", *, runtime: Path | None = None, error: Path | None = None
):
    """
    Args:
        level: stdout 与 runtime 日志的级别，取自 `LOG_LEVEL`
        runtime: 运行日志文件，按 5 MB 轮转
        error: 仅记录 ERROR 及以上的日志文件
    """
    level = level.upper()

    logger.remove()
    logger.add(
        sink=sys.stdout,
        colorize=True,
        level=level,
        format=STDOUT_FORMAT,
        diagnose=False,
        filter=timezone_filter,
    )
    for sink, sink_level in ((runtime, level), (error, "ERROR")):
        if not sink:
            continue
        logger.add(
            sink=sink,
            level=sink_level,
            rotation="5 MB",
            retention="7 days",
            encoding="utf8",
            diagnose=False,
            filter=timezone_filter,
        )
    return logger
