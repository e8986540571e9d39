# src/voluntrack/adapters/providers/base.py
"""
Base Provider Interface for Swap-Quote Providers

This module defines the abstract base class for quote providers.
A provider returns the upstream quote body or raises RuntimeError; it never
substitutes values of its own. Fallback policy belongs to QuoteService.

Files that USE this module:
- voluntrack.adapters.providers.jupiter (JupiterQuoteProvider implements QuoteProvider)
- voluntrack.application.quote_service (depends on the QuoteProvider interface)

Files that this module USES:
- None (pure interface definition)
"""
from abc import ABC, abstractmethod
from typing import Any, Dict


class QuoteProvider(ABC):
    @abstractmethod
    def get_quote(self, input_mint: str, output_mint: str, amount: int, slippage_bps: int) -> Dict[str, Any]:
        """Return the provider's quote body; it must contain an integer ``outAmount``."""
        raise NotImplementedError
