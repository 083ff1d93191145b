# -*- coding: utf-8 -*-
from . import router

__all__ = ["router"]
