#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Error handling infrastructure
Provides exception conversion, statistics and logging
"""

from .handler import (
    ErrorHandler,
    get_error_handler,
    handle_critical_error,
)

__all__ = [
    "ErrorHandler",
    "get_error_handler",
    "handle_critical_error",
]
