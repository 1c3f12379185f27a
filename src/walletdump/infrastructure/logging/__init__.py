"""
Logging infrastructure for walletdump
"""

from .logger import (
    WalletDumpLogger,
    apply_env_log_level,
    get_logger,
    log_exception,
    log_performance,
    reconfigure_logging,
    set_log_level,
)

__all__ = [
    "WalletDumpLogger",
    "apply_env_log_level",
    "get_logger",
    "log_performance",
    "log_exception",
    "set_log_level",
    "reconfigure_logging",
]
