# src/voluntrack/adapters/formatting/__init__.py
"""
Formatting Adapters - Text Presentation

This package contains formatting functions for report prompts and summaries.
"""

from voluntrack.adapters.formatting.formatter import (
    activity_lines,
    format_date_uk,
    format_usdc,
    truncate_signature,
)

__all__ = [
    "activity_lines",
    "format_date_uk",
    "format_usdc",
    "truncate_signature",
]
