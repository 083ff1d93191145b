# -*- coding: utf-8 -*-
"""
@Time    : 2025/9/3 11:52
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    :
"""
from .start_command import start_command
from .help_command import help_command
from .translate_command import tc_command, translatezh_command, translate_command

__all__ = [
    "start_command",
    "help_command",
    "tc_command",
    "translatezh_command",
    "translate_command",
]
