#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
walletdump exception definitions
Unified management of all exception types in the application
"""

from typing import Any, Dict, Optional

from .enums import ErrorSeverity


class WalletDumpError(Exception):
    """Base exception for walletdump"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.severity = severity
        self.context = context or {}

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message

    def with_severity(self, severity: ErrorSeverity) -> "WalletDumpError":
        """Copy of this error with another severity; the original is left untouched"""
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone.args = self.args
        clone.context = dict(self.context)
        clone.severity = severity
        return clone

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception information to a dictionary"""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "severity": self.severity.name,
            "context": self.context,
        }


class SourceUnavailableError(WalletDumpError):
    """The wallet file cannot be opened or read at all

    Fatal for the run: no phase starts.
    """

    def __init__(self, message: str, file_path: Optional[str] = None, **kwargs):
        kwargs.setdefault("severity", ErrorSeverity.HIGH)
        super().__init__(message, error_code="SOURCE_UNAVAILABLE", **kwargs)
        self.file_path = file_path


class OutOfRangeError(WalletDumpError):
    """A seek or extraction target lies outside the source"""

    def __init__(self, message: str, offset: int, length: Optional[int] = None, **kwargs):
        kwargs.setdefault("severity", ErrorSeverity.LOW)
        super().__init__(message, error_code="OUT_OF_RANGE", **kwargs)
        self.offset = offset
        self.length = length


class TruncatedError(WalletDumpError):
    """Fewer bytes remain than a read requested"""

    def __init__(self, message: str, offset: int, requested: int, available: int, **kwargs):
        kwargs.setdefault("severity", ErrorSeverity.LOW)
        super().__init__(message, error_code="TRUNCATED", **kwargs)
        self.offset = offset
        self.requested = requested
        self.available = available


class ConfigurationError(WalletDumpError):
    """Configuration related error"""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        super().__init__(message, error_code="CONFIG_ERROR", **kwargs)
        self.config_key = config_key


def create_error_from_exception(exc: Exception, context: Optional[Dict[str, Any]] = None) -> WalletDumpError:
    """Create a walletdump exception from a standard exception"""
    if isinstance(exc, WalletDumpError):
        return exc

    if isinstance(exc, OSError):
        return SourceUnavailableError(str(exc), file_path=getattr(exc, "filename", None), context=context)

    return WalletDumpError(
        f"{type(exc).__name__}: {exc}",
        error_code="UNKNOWN_ERROR",
        context=context,
    )


def format_error_for_user(error: WalletDumpError) -> str:
    """Format an error message for display"""
    if isinstance(error, SourceUnavailableError) and error.file_path:
        return f"{error.message}\nFile: {error.file_path}"
    if isinstance(error, ConfigurationError) and error.config_key:
        return f"{error.message}\nConfig key: {error.config_key}"
    return error.message
