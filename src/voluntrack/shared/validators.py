# src/voluntrack/shared/validators.py
"""
Input Validation Utilities - Configuration and Request Validation

This module provides validation functions for wallet addresses, endpoint URLs
and the query parameters accepted by the quote endpoint. Request validation
raises ValidationError so that malformed input is rejected before any
upstream call is attempted.

Files that USE this module:
- voluntrack.config.settings (uses validation functions in Settings field validators)
- voluntrack.application.* (services validate caller input)
- voluntrack.adapters.http.api (quote endpoint query validation)

Files that this module USES:
- voluntrack.domain.errors (ValidationError)
"""
import math
import re
from typing import Optional

from voluntrack.domain.errors import ValidationError

# Base58 alphabet excludes 0, O, I and l
_BASE58_RE = re.compile(r"[1-9A-HJ-NP-Za-km-z]{32,44}")

MISSING_QUOTE_PARAMS = "Missing required params: inputAsset, outputAsset, amount"
INVALID_AMOUNT = "Invalid amount"
INVALID_SLIPPAGE = "Invalid slippageBasisPoints"
INVALID_LIMIT = "Invalid limit"


def validate_solana_address(address: str) -> bool:
    """
    Validate a Solana public key (wallet or mint) in base58 form.

    Args:
        address: Address string to validate

    Returns:
        True if valid, False otherwise
    """
    if not address or not isinstance(address, str):
        return False
    return bool(_BASE58_RE.fullmatch(address))


def validate_http_url(url: str) -> bool:
    """Return True for http(s) URLs with a host part."""
    if not url:
        return False
    return bool(re.match(r'^https?://[^\s/]+', url))


def require_address(address: str) -> str:
    """Return the address unchanged or raise ValidationError."""
    if not validate_solana_address(address):
        raise ValidationError("Invalid address")
    return address


def parse_amount(value) -> int:
    """
    Parse a base-unit amount the way the quote endpoint accepts it.

    Numeric strings are accepted in any float notation ("1e9", "12.7") and
    truncated towards negative infinity; the result must be a positive integer.

    Args:
        value: Raw amount (string or number)

    Returns:
        Amount as a positive integer

    Raises:
        ValidationError: If the value is not a finite number or is not positive after truncation
    """
    if isinstance(value, bool):
        raise ValidationError(INVALID_AMOUNT)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(INVALID_AMOUNT)
    if not math.isfinite(number):
        raise ValidationError(INVALID_AMOUNT)
    amount = math.floor(number)
    if amount <= 0:
        raise ValidationError(INVALID_AMOUNT)
    return amount


def parse_slippage(value, default: int = 50) -> int:
    """
    Parse slippage in basis points.

    Args:
        value: Raw value, or None/empty for the default
        default: Value used when nothing was supplied

    Returns:
        Non-negative integer basis points

    Raises:
        ValidationError: If the value is not a non-negative integer
    """
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise ValidationError(INVALID_SLIPPAGE)
    try:
        bps = int(str(value).strip())
    except ValueError:
        raise ValidationError(INVALID_SLIPPAGE)
    if bps < 0:
        raise ValidationError(INVALID_SLIPPAGE)
    return bps


def parse_limit(value, default: int = 5, maximum: int = 100) -> int:
    """
    Parse the activity page size.

    Returns:
        Integer in 1..maximum, or ``default`` when nothing was supplied

    Raises:
        ValidationError: If the value is not an integer in range
    """
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise ValidationError(INVALID_LIMIT)
    try:
        limit = int(str(value).strip())
    except ValueError:
        raise ValidationError(INVALID_LIMIT)
    if not 1 <= limit <= maximum:
        raise ValidationError(INVALID_LIMIT)
    return limit


def validate_quote_params(
    input_asset: Optional[str],
    output_asset: Optional[str],
    amount,
    slippage_bps=None,
    default_slippage_bps: int = 50,
) -> tuple[str, str, int, int]:
    """
    Validate the four quote parameters in the order the endpoint reports errors.

    Missing parameters are reported before an invalid amount.

    Returns:
        Tuple of (input_asset, output_asset, amount, slippage_bps)

    Raises:
        ValidationError: With the message returned to HTTP callers
    """
    if not input_asset or not output_asset or amount is None or amount == "":
        raise ValidationError(MISSING_QUOTE_PARAMS)
    parsed_amount = parse_amount(amount)
    bps = parse_slippage(slippage_bps, default_slippage_bps)
    return input_asset, output_asset, parsed_amount, bps
