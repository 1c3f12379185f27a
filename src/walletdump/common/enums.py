#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
walletdump enumeration definitions
"""

from enum import Enum, IntEnum


class LogLevel(IntEnum):
    """Log level enumeration"""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


class ErrorSeverity(IntEnum):
    """Error severity"""

    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4


class MarkerKind(str, Enum):
    """Record type tagged by a marker token"""

    MASTER_KEY = "master_key"
    CRYPTED_KEY = "crypted_key"


class OutputFormat(str, Enum):
    """Report output format"""

    TEXT = "text"
    JSON = "json"
