"""
Exception hierarchy and error handler tests
"""

import logging

import pytest

from walletdump.common.enums import ErrorSeverity
from walletdump.common.exceptions import (
    ConfigurationError,
    OutOfRangeError,
    SourceUnavailableError,
    TruncatedError,
    WalletDumpError,
    create_error_from_exception,
    format_error_for_user,
)
from walletdump.infrastructure.error_handling import ErrorHandler


@pytest.mark.unit
class TestExceptions:
    def test_recoverable_errors_are_low_severity(self):
        assert OutOfRangeError("x", offset=-1).severity == ErrorSeverity.LOW
        assert TruncatedError("x", offset=0, requested=4, available=1).severity == ErrorSeverity.LOW

    def test_source_unavailable_is_high_severity(self):
        error = SourceUnavailableError("gone", file_path="/tmp/w.dat")
        assert error.severity == ErrorSeverity.HIGH
        assert str(error) == "[SOURCE_UNAVAILABLE] gone"
        assert format_error_for_user(error) == "gone\nFile: /tmp/w.dat"

    def test_to_dict(self):
        data = TruncatedError("short", offset=3, requested=4, available=1).to_dict()
        assert data["type"] == "TruncatedError"
        assert data["error_code"] == "TRUNCATED"
        assert data["severity"] == "LOW"

    def test_os_error_maps_to_source_unavailable(self):
        error = create_error_from_exception(PermissionError(13, "denied", "w.dat"))
        assert isinstance(error, SourceUnavailableError)
        assert error.file_path == "w.dat"

    def test_other_errors_are_wrapped(self):
        error = create_error_from_exception(KeyError("k"))
        assert type(error) is WalletDumpError
        assert error.error_code == "UNKNOWN_ERROR"


@pytest.mark.unit
class TestErrorHandler:
    def test_counts_by_severity(self):
        handler = ErrorHandler()
        handler.handle_exception(OutOfRangeError("x", offset=-1))
        handler.handle_exception(SourceUnavailableError("y"))
        stats = handler.get_error_stats()
        assert stats["total_errors"] == 2
        assert stats["severity_counts"]["LOW"] == 1
        assert stats["severity_counts"]["HIGH"] == 1

    def test_critical_error(self):
        handler = ErrorHandler()
        error = handler.handle_critical_error(RuntimeError("boom"))
        assert error.severity == ErrorSeverity.CRITICAL
        assert handler.get_error_stats()["severity_counts"]["CRITICAL"] == 1

    def test_reset(self):
        handler = ErrorHandler()
        handler.handle_exception(ValueError("bad"))
        handler.reset_stats()
        assert handler.get_error_stats()["total_errors"] == 0

    def test_critical_error_leaves_original_untouched(self):
        handler = ErrorHandler()
        original = OutOfRangeError("past end", offset=99, length=10)

        critical = handler.handle_critical_error(original)

        assert critical is not original
        assert isinstance(critical, OutOfRangeError)
        assert critical.severity == ErrorSeverity.CRITICAL
        assert critical.offset == 99
        assert original.severity == ErrorSeverity.LOW

    def test_critical_error_logged_once(self, caplog):
        handler = ErrorHandler()
        with caplog.at_level(logging.DEBUG, logger="walletdump"):
            handler.handle_critical_error(RuntimeError("boom"), {"wallets": ["w.dat"]})

        reported = [r for r in caplog.records if r.levelno >= logging.ERROR]
        assert len(reported) == 1
        assert reported[0].levelno == logging.CRITICAL
        assert "boom" in reported[0].getMessage()


@pytest.mark.unit
class TestErrorCopies:
    def test_with_severity_copies_context(self):
        error = SourceUnavailableError("gone", file_path="w.dat", context={"attempt": 1})
        copy = error.with_severity(ErrorSeverity.CRITICAL)
        copy.context["attempt"] = 2
        assert error.context == {"attempt": 1}
        assert copy.file_path == "w.dat"
        assert str(copy) == str(error)

    def test_configuration_error_names_key(self):
        error = ConfigurationError("Invalid log level: LOUD", config_key="logging.log_level")
        assert error.error_code == "CONFIG_ERROR"
        assert format_error_for_user(error) == "Invalid log level: LOUD\nConfig key: logging.log_level"
