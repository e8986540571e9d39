# src/voluntrack/application/quote_service.py
"""
Quote Service - Conversion Estimates with Deterministic Fallback

This module owns the timeout and fallback policy for swap quotes. A call
either returns the provider's quote or, when the provider fails for any
reason (network error, non-success status, malformed body, deadline
exceeded), a locally computed quote at a fixed demo rate. Exactly one of
the two is always produced; only malformed caller input raises.

Files that USE this module:
- voluntrack.application.agent (TreasuryAgent.estimate_conversion)
- voluntrack.adapters.http.api (GET /quote)
- tests.test_quote_service (unit tests)

Files that this module USES:
- voluntrack.adapters.providers (QuoteProvider, JupiterQuoteProvider)
- voluntrack.config (Settings for deadline, rate and decimals)
- voluntrack.domain (QuoteResult, ValidationError, UpstreamUnavailable)
- voluntrack.shared.cancellation (CancellationToken checks)
"""
from __future__ import annotations

import asyncio
import logging
import math
from typing import Any, Dict, Optional

from voluntrack.adapters.providers.base import QuoteProvider
from voluntrack.adapters.providers.jupiter import JupiterQuoteProvider
from voluntrack.config import Settings
from voluntrack.domain.errors import UpstreamUnavailable, ValidationError
from voluntrack.domain.models import QuoteResult
from voluntrack.shared import cancellation
from voluntrack.shared.cancellation import CancellationToken
from voluntrack.shared.validators import INVALID_AMOUNT, INVALID_SLIPPAGE, MISSING_QUOTE_PARAMS

log = logging.getLogger(__name__)


def fallback_out_amount(
    amount: int,
    rate: float = 140.0,
    input_decimals: int = 9,
    output_decimals: int = 6,
) -> int:
    """
    Compute the fallback destination amount in base units.

    floor((amount / 10**input_decimals) * rate * 10**output_decimals)

    Example:
        1_000_000_000 lamports (1 SOL) at 140 -> 140_000_000 (140 USDC)
    """
    return math.floor((amount / 10 ** input_decimals) * rate * 10 ** output_decimals)


def _require_positive_int(amount) -> int:
    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        raise ValidationError(INVALID_AMOUNT)
    return amount


class QuoteService:
    """
    Timeout-bounded quote lookup with a deterministic fallback.
    """

    def __init__(self, settings: Settings, provider: Optional[QuoteProvider] = None):
        """
        Initialize the quote service.

        Args:
            settings: Application settings (deadline, fallback rate, decimals)
            provider: Optional quote provider (defaults to JupiterQuoteProvider)
        """
        self.settings = settings
        self.provider = provider or JupiterQuoteProvider(settings)
        self.timeout = settings.quote_timeout_seconds

    def _validate(self, input_asset, destination_asset, amount, slippage_bps) -> None:
        if not input_asset or not destination_asset:
            raise ValidationError(MISSING_QUOTE_PARAMS)
        _require_positive_int(amount)
        if isinstance(slippage_bps, bool) or not isinstance(slippage_bps, int) or slippage_bps < 0:
            raise ValidationError(INVALID_SLIPPAGE)

    def fallback_amount(self, amount: int) -> int:
        return fallback_out_amount(
            amount,
            rate=self.settings.fallback_rate,
            input_decimals=self.settings.input_decimals,
            output_decimals=self.settings.output_decimals,
        )

    async def _request(
        self,
        input_asset: str,
        amount: int,
        destination_asset: str,
        slippage_bps: int,
    ) -> Dict[str, Any]:
        """
        Ask the provider for a quote within the deadline.

        Raises:
            UpstreamUnavailable: On any provider failure or when the deadline elapses
        """
        loop = asyncio.get_running_loop()
        try:
            # wait_for stops waiting at the deadline; the worker thread is left to finish on its own
            return await asyncio.wait_for(
                loop.run_in_executor(
                    None,
                    lambda: self.provider.get_quote(input_asset, destination_asset, amount, slippage_bps),
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            raise UpstreamUnavailable(f"quote provider did not answer within {self.timeout}s")
        except Exception as e:
            raise UpstreamUnavailable(str(e)) from e

    async def quote_raw(
        self,
        input_asset: str,
        amount: int,
        destination_asset: str,
        slippage_bps: int = 50,
        token: Optional[CancellationToken] = None,
    ) -> Dict[str, Any]:
        """
        Quote as the HTTP boundary returns it.

        Returns:
            The provider body unmodified on success, otherwise
            ``{"outAmount": "<fallback>", "isMock": True}``

        Raises:
            ValidationError: If the parameters are malformed (before any upstream call)
            OperationCancelled: If the token was cancelled
        """
        self._validate(input_asset, destination_asset, amount, slippage_bps)
        cancellation.check(token)

        try:
            body = await self._request(input_asset, amount, destination_asset, slippage_bps)
        except UpstreamUnavailable as e:
            fallback = self.fallback_amount(amount)
            log.warning("Quote provider unavailable, returning fallback outAmount=%d: %s", fallback, e)
            body = {"outAmount": str(fallback), "isMock": True}

        cancellation.check(token)
        return body

    async def quote(
        self,
        input_asset: str,
        amount_base_units: int,
        destination_asset: str,
        slippage_bps: int = 50,
        token: Optional[CancellationToken] = None,
    ) -> QuoteResult:
        """
        Estimate the destination amount for converting ``amount_base_units``.

        Args:
            input_asset: Source mint
            amount_base_units: Positive amount in source base units
            destination_asset: Destination mint
            slippage_bps: Slippage in basis points (passed through, never enforced)
            token: Optional cancellation token

        Returns:
            QuoteResult; ``is_fallback`` tells a live quote from a local estimate

        Raises:
            ValidationError: If the parameters are malformed
            OperationCancelled: If the token was cancelled
        """
        body = await self.quote_raw(input_asset, amount_base_units, destination_asset, slippage_bps, token)

        is_fallback = bool(body.get("isMock"))
        try:
            raw = int(str(body["outAmount"]))
        except (KeyError, ValueError) as e:
            # custom providers may return bodies without outAmount
            log.warning("Quote body has no usable outAmount, using fallback: %s", e)
            raw = self.fallback_amount(amount_base_units)
            is_fallback = True

        result = QuoteResult(
            output_amount=raw / 10 ** self.settings.output_decimals,
            raw_output_amount=str(raw),
            is_simulation=True,
            is_fallback=is_fallback,
        )
        log.info("Quote for %d base units of %s: %s (fallback=%s)",
                 amount_base_units, input_asset, result.raw_output_amount, result.is_fallback)
        return result
