# src/voluntrack/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Cancellation tokens
- Ukrainian text and formatting helpers
- Logging configuration
"""

from voluntrack.shared.validators import (
    parse_amount,
    parse_limit,
    parse_slippage,
    require_address,
    validate_http_url,
    validate_quote_params,
    validate_solana_address,
)
from voluntrack.shared.cancellation import CancellationToken

__all__ = [
    "validate_solana_address",
    "validate_http_url",
    "validate_quote_params",
    "require_address",
    "parse_amount",
    "parse_limit",
    "parse_slippage",
    "CancellationToken",
]
