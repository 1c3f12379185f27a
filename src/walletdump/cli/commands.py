#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CLI commands

dump-keys: recover the encrypted master key and crypted keys from one or
more wallet files.
config: show the effective configuration.
"""

from pathlib import Path
from typing import List, Optional

import typer

from ..common.enums import LogLevel, OutputFormat
from ..common.exceptions import ConfigurationError, format_error_for_user
from ..config import AppConfig, get_app_config, reload_app_config
from ..infrastructure.error_handling import handle_critical_error
from ..infrastructure.logging import apply_env_log_level, reconfigure_logging, set_log_level
from ..core.wallet_extractor import extract_many
from .formatters import ERROR_ICON, INFO_ICON, format_results_json, format_results_text


def _load_config(config_path: Optional[Path]) -> AppConfig:
    config = reload_app_config(config_path) if config_path else get_app_config()
    try:
        config.ensure_valid()
    except ConfigurationError as e:
        typer.echo(f"{ERROR_ICON} {format_error_for_user(e)}", err=True)
        raise typer.Exit(2)
    reconfigure_logging(config)
    apply_env_log_level()
    return config


def dump_keys_command(
    wallets: List[Path] = typer.Argument(..., help="wallet.dat file(s) to scan"),
    output_format: Optional[OutputFormat] = typer.Option(
        None, "--format", "-f", help="Output format (default from config: text)"
    ),
    show_offsets: bool = typer.Option(False, "--offsets", help="Append marker offsets to key lines"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show a summary and debug logging"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file"),
):
    """Dump the encrypted master key and crypted keys of legacy wallets"""
    config = _load_config(config_path)
    if verbose:
        set_log_level(LogLevel.DEBUG)

    fmt = output_format or OutputFormat(config.output.default_format)

    try:
        results = extract_many(wallets, performance_logging=config.logging.performance_logging)
    except Exception as e:
        # Logged once at CRITICAL by the handler
        handle_critical_error(e, {"wallets": [str(w) for w in wallets]})
        raise typer.Exit(1)

    if fmt == OutputFormat.JSON:
        format_results_json(results)
    else:
        format_results_text(
            results,
            show_offsets=show_offsets or config.output.show_offsets,
            show_summary=verbose or config.output.show_summary,
        )

    if not all(result.success for result in results):
        raise typer.Exit(1)


def config_command(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file"),
):
    """Display the effective configuration"""
    config = _load_config(config_path)
    source = config_path or AppConfig.get_default_config_path()
    typer.echo(f"{INFO_ICON} Configuration ({source}):")
    for key, value in config.get_summary().items():
        typer.echo(f"  {key}: {value}")
