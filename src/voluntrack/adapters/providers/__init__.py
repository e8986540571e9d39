# src/voluntrack/adapters/providers/__init__.py
"""
Provider Adapters - External Quote APIs

This package contains adapters for external swap-quote APIs.
All providers implement the QuoteProvider interface.
"""

from voluntrack.adapters.providers.base import QuoteProvider
from voluntrack.adapters.providers.jupiter import JupiterQuoteProvider

__all__ = [
    "QuoteProvider",
    "JupiterQuoteProvider",
]
