# src/voluntrack/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains the immutable values produced by the agent:
- Wallet activity records
- Conversion quotes (real or fallback)
- Treasury reports
- Full agent cycle snapshots

Files that USE this module:
- voluntrack.application.* (all services produce domain models)
- voluntrack.adapters.http.api (serializes domain models to JSON)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import asdict, dataclass, field  # Decorators for creating data classes
from typing import Any, Optional  # Type hints


@dataclass(frozen=True)
class ActivityRecord:
    """
    One observed wallet event.

    Attributes:
        signature: Transaction signature (opaque unique identifier)
        amount: Signed amount; 0.0 until an enricher fills it in
        mint: Optional asset identifier
        timestamp: Block time in seconds since epoch, 0 if unknown
    """
    signature: str
    amount: float = 0.0
    mint: Optional[str] = None
    timestamp: int = 0


@dataclass(frozen=True)
class QuoteResult:
    """
    Outcome of a conversion estimate. No transaction is ever sent.

    Attributes:
        output_amount: Destination amount in human units (e.g. 140.0 USDC)
        raw_output_amount: Destination amount in base units, as returned by the provider
        is_simulation: Always True
        is_fallback: True when computed locally instead of returned by the provider
    """
    output_amount: float
    raw_output_amount: str
    is_simulation: bool = True
    is_fallback: bool = False


@dataclass(frozen=True)
class ReportResult:
    """Narrative treasury report in Ukrainian."""
    summary: str
    insights: tuple[str, ...] = ()
    period: str = ""


@dataclass(frozen=True)
class TreasurySnapshot:
    """
    Everything one agent cycle produced for a wallet.

    Attributes:
        address: Monitored wallet address
        activity: Recent activity, most recent first
        balance_base_units: Native balance in base units, None if the RPC failed
        quote: Conversion estimate of the balance, None when there was nothing to convert
        report: Generated (or degraded) report
    """
    address: str
    activity: tuple[ActivityRecord, ...] = field(default_factory=tuple)
    balance_base_units: Optional[int] = None
    quote: Optional[QuoteResult] = None
    report: Optional[ReportResult] = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
