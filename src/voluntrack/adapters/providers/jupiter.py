# src/voluntrack/adapters/providers/jupiter.py
"""
Jupiter Quote API Provider

This module implements the Jupiter V6 quote client. It only asks for a quote;
no swap transaction is ever built or sent. Anything other than a JSON body
with an integer ``outAmount`` is reported as RuntimeError so the quote
service can substitute its fallback.

Files that USE this module:
- voluntrack.application.quote_service (default provider)
- tests.test_providers (unit tests)

Files that this module USES:
- voluntrack.adapters.providers.base (QuoteProvider interface)
- voluntrack.config (Settings for API URL and timeout)
"""
import logging
from typing import Any, Dict, Optional

import requests

from voluntrack.adapters.providers.base import QuoteProvider
from voluntrack.config import Settings

log = logging.getLogger(__name__)


class JupiterQuoteProvider(QuoteProvider):

    def __init__(self, settings: Settings, base_url: Optional[str] = None, timeout: Optional[float] = None):
        """
        Initialize Jupiter quote provider.

        Args:
            settings: Application settings
            base_url: Optional quote endpoint (defaults to settings.quote_api_url)
            timeout: Optional HTTP timeout in seconds (defaults to the quote deadline)
        """
        self.url = base_url or settings.quote_api_url
        self.timeout = timeout or settings.quote_timeout_seconds

    def get_quote(self, input_mint: str, output_mint: str, amount: int, slippage_bps: int) -> Dict[str, Any]:
        """
        Request a quote for converting ``amount`` base units of ``input_mint``.

        Returns:
            Upstream JSON body, unmodified

        Raises:
            RuntimeError: On timeout, network error, non-success status, invalid JSON,
                or a body without an integer outAmount
        """
        params = {
            "inputMint": input_mint,
            "outputMint": output_mint,
            "amount": str(amount),
            "slippageBps": str(slippage_bps),
        }
        try:
            log.info("Requesting Jupiter quote: %s -> %s amount=%d slippageBps=%d",
                     input_mint, output_mint, amount, slippage_bps)
            resp = requests.get(
                self.url,
                params=params,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            if not resp.ok:
                log.warning("Jupiter quote API returned HTTP %d", resp.status_code)
                raise RuntimeError(f"Jupiter quote API returned HTTP {resp.status_code}")
            data = resp.json()
        except requests.exceptions.Timeout:
            log.warning("Jupiter quote API timeout after %s seconds", self.timeout)
            raise RuntimeError(f"Jupiter quote API timeout after {self.timeout}s")
        except requests.exceptions.RequestException as e:
            log.warning("Jupiter quote API request failed: %s", e)
            raise RuntimeError(f"Jupiter quote API request failed: {e}") from e
        except ValueError as e:
            log.error("Jupiter quote API returned invalid JSON: %s", e)
            raise RuntimeError(f"Jupiter quote API returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            log.error("Jupiter quote API unexpected response type: %r", type(data))
            raise RuntimeError("Jupiter quote API returned non-dict JSON")

        out_amount = data.get("outAmount")
        try:
            int(str(out_amount))
        except ValueError:
            log.error("Jupiter quote missing or invalid outAmount: %r", out_amount)
            raise RuntimeError("Jupiter quote response missing integer 'outAmount'")

        log.info("Jupiter quote received: outAmount=%s", out_amount)
        return data
