#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CLI result formatters

Key lines go to stdout unchanged so the output can be piped; summaries
and errors are decorated.
"""

import json
from typing import List

import typer

from ..common.constants import ReportConstants
from ..common.exceptions import format_error_for_user
from ..core.models import ExtractionReport
from ..core.wallet_extractor import WalletResult

ERROR_ICON = "❌"
INFO_ICON = "ℹ️"


def format_report(report: ExtractionReport, show_offsets: bool = False, show_summary: bool = False):
    """Print one wallet's keys in the classic text layout"""
    for line in report.lines(show_offsets=show_offsets):
        typer.echo(line)

    if show_summary:
        _format_summary(report)


def _format_summary(report: ExtractionReport):
    header = "BerkeleyDB btree" if report.berkeleydb_header else "unknown format"
    typer.echo(f"{INFO_ICON} {report.source_name}: {report.source_length:,} bytes ({header})")
    typer.echo(f"   Master key: {'yes' if report.has_master_key else 'no'}")
    typer.echo(f"   Crypted keys: {len(report.crypted_keys)}")
    typer.echo(f"   Rejected candidates: {report.candidates_rejected}")
    typer.echo(f"   Duration: {report.duration_ms:.2f}ms")


def format_results_text(
    results: List[WalletResult],
    show_offsets: bool = False,
    show_summary: bool = False,
):
    """Print every result; a header separates wallets when there are several"""
    multiple = len(results) > 1
    for result in results:
        if multiple:
            typer.echo(ReportConstants.SOURCE_HEADER.format(name=result.path))
        if result.success:
            format_report(result.report, show_offsets=show_offsets, show_summary=show_summary)
        else:
            format_error(result)


def format_results_json(results: List[WalletResult]):
    """Print all results as one JSON array"""
    payload = []
    for result in results:
        if result.success:
            payload.append(result.report.to_dict())
        else:
            payload.append({"source": result.path, "error": result.error.to_dict()})
    typer.echo(json.dumps(payload, indent=2))


def format_error(result: WalletResult):
    typer.echo(f"{ERROR_ICON} {format_error_for_user(result.error)}", err=True)
