#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
walletdump logging system
Console output goes to stderr so that stdout carries only the key report.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from ...common.constants import FileConstants
from ...common.enums import LogLevel
from ...common.exceptions import WalletDumpError

ROOT_LOGGER_NAME = "walletdump"


class WalletDumpLogger:
    """Application log manager"""

    _instance: Optional["WalletDumpLogger"] = None
    _initialized: bool = False

    def __new__(cls) -> "WalletDumpLogger":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if WalletDumpLogger._initialized:
            return

        self._loggers: Dict[str, logging.Logger] = {}
        self._setup_root_logger()
        WalletDumpLogger._initialized = True

    def _setup_root_logger(self):
        """Set up the package root logger"""
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.setLevel(logging.DEBUG)

        # Avoid adding handlers twice
        if root_logger.handlers:
            return

        console_level = logging.WARNING
        log_to_file = False
        max_bytes = FileConstants.LOG_MAX_SIZE
        backup_count = FileConstants.LOG_BACKUP_COUNT
        try:
            from ...config import get_app_config

            config = get_app_config()
            console_level = getattr(logging, config.logging.log_level.upper(), logging.WARNING)
            log_to_file = config.logging.log_to_file
            max_bytes = config.logging.log_file_max_size
            backup_count = config.logging.log_backup_count
        except Exception:
            # Config unavailable, keep defaults
            pass

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(console_handler)

        if log_to_file:
            self._add_file_handler(root_logger, max_bytes, backup_count)

        self._loggers["root"] = root_logger

    def _add_file_handler(
        self,
        root_logger: logging.Logger,
        max_bytes: int = FileConstants.LOG_MAX_SIZE,
        backup_count: int = FileConstants.LOG_BACKUP_COUNT,
    ):
        try:
            log_dir = Path.home() / FileConstants.CONFIG_DIR_NAME
            log_dir.mkdir(exist_ok=True)
            log_file = log_dir / FileConstants.LOG_FILE_NAME

            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            root_logger.addHandler(file_handler)
        except Exception as e:
            # Console logging still works without the file
            root_logger.warning(f"Failed to setup file logging: {e}")

    def get_logger(self, name: str) -> logging.Logger:
        """Get a child logger of the package root"""
        if name not in self._loggers:
            if name.startswith(ROOT_LOGGER_NAME + ".") or name == ROOT_LOGGER_NAME:
                logger = logging.getLogger(name)
            else:
                logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
            self._loggers[name] = logger
        return self._loggers[name]

    def set_level(self, level: LogLevel):
        """Set the console level"""
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in root_logger.handlers:
            if type(handler) is logging.StreamHandler:
                handler.setLevel(int(level))

    def reconfigure_from_config(self, config=None):
        """Apply logging settings from the configuration"""
        try:
            if config is None:
                from ...config import get_app_config

                config = get_app_config()

            console_level = getattr(logging, config.logging.log_level.upper(), logging.WARNING)
            root_logger = logging.getLogger(ROOT_LOGGER_NAME)
            max_bytes = config.logging.log_file_max_size
            backup_count = config.logging.log_backup_count
            has_file_handler = False
            for handler in root_logger.handlers:
                if isinstance(handler, RotatingFileHandler):
                    has_file_handler = True
                    handler.maxBytes = max_bytes
                    handler.backupCount = backup_count
                elif isinstance(handler, logging.StreamHandler):
                    handler.setLevel(console_level)

            if config.logging.log_to_file and not has_file_handler:
                self._add_file_handler(root_logger, max_bytes, backup_count)

        except Exception as e:
            logging.getLogger(ROOT_LOGGER_NAME).warning(f"Failed to reconfigure logging system: {e}")

    def log_exception(
        self,
        logger_name: str,
        exc: Exception,
        context: Optional[Dict[str, Any]] = None,
        level: int = logging.ERROR,
    ):
        """Log an exception with optional context"""
        logger = self.get_logger(logger_name)
        context_str = ""
        if context:
            context_str = f" Context: {context}"
        logger.log(
            level,
            f"Exception occurred: {type(exc).__name__}: {exc}{context_str}",
            exc_info=None if isinstance(exc, WalletDumpError) else exc,
        )

    def log_performance(self, logger_name: str, operation: str, duration: float, **kwargs):
        """Log a timing measurement"""
        logger = self.get_logger(logger_name)
        extra_info = " ".join(f"{k}={v}" for k, v in kwargs.items())
        logger.info(f"Performance: {operation} took {duration:.3f}s {extra_info}".rstrip())


# Global log manager
_logger_manager = WalletDumpLogger()


def get_logger(name: str = "root") -> logging.Logger:
    """Convenience accessor for a logger"""
    return _logger_manager.get_logger(name)


def set_log_level(level: LogLevel):
    """Set the global console log level"""
    _logger_manager.set_level(level)


def reconfigure_logging(config=None):
    """Reconfigure logging from the current configuration"""
    _logger_manager.reconfigure_from_config(config)


def log_exception(
    exc: Exception,
    logger_name: str = "root",
    context: Optional[Dict[str, Any]] = None,
    level: int = logging.ERROR,
):
    """Convenience function for exception logging"""
    _logger_manager.log_exception(logger_name, exc, context, level)


def log_performance(operation: str, duration: float, logger_name: str = "performance", **kwargs):
    """Convenience function for timing logs"""
    _logger_manager.log_performance(logger_name, operation, duration, **kwargs)


def apply_env_log_level(variable: str = "WALLETDUMP_LOG_LEVEL") -> Optional[str]:
    """Override the console level from an environment variable

    Valid values: DEBUG, INFO, WARNING, ERROR, CRITICAL
    Example: WALLETDUMP_LOG_LEVEL=DEBUG walletdump dump-keys wallet.dat
    """
    env_log_level = os.environ.get(variable, "").upper()
    if env_log_level not in LogLevel.__members__:
        return None
    set_log_level(LogLevel[env_log_level])
    get_logger().debug(f"Log level set to {env_log_level} via {variable} environment variable")
    return env_log_level
