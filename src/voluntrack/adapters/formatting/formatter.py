# src/voluntrack/adapters/formatting/formatter.py
"""
Report Formatter - Text Formatting for Prompts and Summaries

This module turns activity records and estimates into the short Ukrainian
phrases embedded in report prompts and canned summaries.

Files that USE this module:
- voluntrack.application.report_generator (prompt lines and estimate notes)
- tests.test_formatter (unit tests)

Files that this module USES:
- voluntrack.domain.models (ActivityRecord)
- voluntrack.shared.language (translate)
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence

from voluntrack.domain.models import ActivityRecord
from voluntrack.shared.language import translate

SIGNATURE_PREFIX_LENGTH = 8


def truncate_signature(signature: str, length: int = SIGNATURE_PREFIX_LENGTH) -> str:
    """Shorten a transaction signature to its first characters followed by an ellipsis."""
    if len(signature) <= length:
        return signature
    return f"{signature[:length]}…"


def format_date_uk(timestamp: int) -> str:
    """
    Format a block time the way Ukrainian readers expect (dd.mm.yyyy HH:MM, UTC).

    Args:
        timestamp: Seconds since epoch; 0 or negative means unknown

    Returns:
        Formatted date, or a placeholder for unknown times
    """
    if not timestamp or timestamp <= 0:
        return translate("unknown_date")
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime("%d.%m.%Y %H:%M")


def format_usdc(value: float) -> str:
    """Format a destination amount with two decimals, e.g. '140.00 USDC'."""
    return f"{value:.2f} USDC"


def activity_lines(activity: Sequence[ActivityRecord]) -> list[str]:
    """
    Enumerate activity records as numbered prompt lines.

    Example:
        1. 5VERv8NM… — 14.11.2023 22:13 (UTC)
    """
    lines = []
    for index, record in enumerate(activity, start=1):
        line = f"{index}. {truncate_signature(record.signature)} — {format_date_uk(record.timestamp)}"
        if record.timestamp and record.timestamp > 0:
            line += " (UTC)"
        if record.amount:
            line += f", сума: {record.amount:g}"
            if record.mint:
                line += f" ({truncate_signature(record.mint)})"
        lines.append(line)
    return lines
