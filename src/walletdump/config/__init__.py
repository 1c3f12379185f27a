#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Configuration module
"""

from .settings import (
    AppConfig,
    LoggingSettings,
    OutputSettings,
    get_app_config,
    reload_app_config,
)

__all__ = [
    "AppConfig",
    "LoggingSettings",
    "OutputSettings",
    "get_app_config",
    "reload_app_config",
]
