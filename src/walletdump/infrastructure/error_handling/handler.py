#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Unified error handler
Converts exceptions to walletdump errors, counts them and logs them with context
"""

import logging
from typing import Any, Dict, Optional

from ...common.enums import ErrorSeverity
from ...common.exceptions import WalletDumpError, create_error_from_exception
from ..logging import get_logger, log_exception

logger = get_logger(__name__)


class ErrorHandler:
    """Unified error handler"""

    def __init__(self):
        self.stats = self._empty_stats()
        logger.debug("Error handler initialized")

    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            "total_errors": 0,
            "handled_errors": 0,
            "severity_counts": {severity.name: 0 for severity in ErrorSeverity},
        }

    def handle_exception(
        self,
        exception: Exception,
        operation: Optional[str] = None,
        component: Optional[str] = None,
        custom_data: Optional[Dict[str, Any]] = None,
        level: int = logging.ERROR,
    ) -> WalletDumpError:
        """
        Main entry point for exception handling

        Args:
            exception: The exception that occurred
            operation: Current operation description
            component: Current component name
            custom_data: Additional context data
            level: Log level of the single record written for this error

        Returns:
            The exception converted to a WalletDumpError
        """
        self.stats["total_errors"] += 1

        error = create_error_from_exception(exception, custom_data)
        self.stats["severity_counts"][error.severity.name] += 1

        context_info = {
            "operation": operation,
            "component": component,
            "error_code": error.error_code,
            "severity": error.severity.name,
        }
        if custom_data:
            context_info["custom_data"] = custom_data

        log_exception(error, logger_name=component or "error_handler", context=context_info, level=level)

        self.stats["handled_errors"] += 1
        return error

    def handle_critical_error(self, error: Exception, context_data: Optional[Dict[str, Any]] = None) -> WalletDumpError:
        """Handle an error that aborts the run

        Returns a CRITICAL copy; the caller's exception keeps its own severity.
        """
        wd_error = create_error_from_exception(error, context_data).with_severity(ErrorSeverity.CRITICAL)
        return self.handle_exception(wd_error, custom_data=context_data, level=logging.CRITICAL)

    def get_error_stats(self) -> Dict[str, Any]:
        """Get error handling statistics"""
        return self.stats.copy()

    def reset_stats(self) -> None:
        """Reset statistics"""
        self.stats = self._empty_stats()
        logger.debug("Error handler statistics reset")


_error_handler = ErrorHandler()


def get_error_handler() -> ErrorHandler:
    """Get the global error handler"""
    return _error_handler


def handle_critical_error(error: Exception, context_data: Optional[Dict[str, Any]] = None) -> WalletDumpError:
    """Convenience function: handle critical error"""
    return _error_handler.handle_critical_error(error, context_data)

