# src/voluntrack/application/agent.py
"""
Treasury Agent - Facade over Activity, Quotes and Reports

This module contains the TreasuryAgent, the single entry point used by the
HTTP layer and by scripts. An agent is bound to one wallet for its whole
life; use ``with_wallet`` to get an agent for another address. Collaborators
(RPC client, reader, quote service, report generator) are built from the
settings unless supplied, and are shared by agents derived with
``with_wallet``.

Files that USE this module:
- voluntrack.adapters.http.api (wallet endpoints)
- tests.test_agent (unit tests)

Files that this module USES:
- voluntrack.application.activity_reader (AddressActivityReader)
- voluntrack.application.quote_service (QuoteService)
- voluntrack.application.report_generator (ReportGenerator)
- voluntrack.adapters.chain.solana_rpc (SolanaRpcClient)
- voluntrack.domain.models (QuoteResult, ReportResult, TreasurySnapshot)
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

from voluntrack.adapters.chain.solana_rpc import SolanaRpcClient
from voluntrack.application.activity_reader import ActivityEnricher, AddressActivityReader
from voluntrack.application.quote_service import QuoteService
from voluntrack.application.report_generator import ReportGenerator
from voluntrack.config import Settings
from voluntrack.domain.models import ActivityRecord, QuoteResult, ReportResult, TreasurySnapshot
from voluntrack.shared.cancellation import CancellationToken
from voluntrack.shared.validators import require_address

log = logging.getLogger(__name__)

Estimate = Union[QuoteResult, float, int, None]


def _estimate_value(estimate: Estimate) -> Optional[float]:
    if isinstance(estimate, QuoteResult):
        return estimate.output_amount
    return estimate


class TreasuryAgent:
    """
    Treasury agent bound to one donation wallet.
    """

    def __init__(
        self,
        settings: Settings,
        address: str,
        rpc_client: Optional[SolanaRpcClient] = None,
        reader: Optional[AddressActivityReader] = None,
        quote_service: Optional[QuoteService] = None,
        report_generator: Optional[ReportGenerator] = None,
        enricher: Optional[ActivityEnricher] = None,
    ):
        """
        Initialize the agent.

        Args:
            settings: Application settings
            address: Wallet address to monitor (validated, immutable)
            rpc_client: Optional connection handle (defaults to SolanaRpcClient(settings))
            reader: Optional activity reader (defaults to one over rpc_client)
            quote_service: Optional quote service
            report_generator: Optional report generator
            enricher: Optional activity enricher for the default reader

        Raises:
            ValidationError: If the address is not a valid public key
        """
        self.settings = settings
        self._address = require_address(address)
        self.rpc_client = rpc_client or SolanaRpcClient(settings)
        self.reader = reader or AddressActivityReader(self.rpc_client, enricher=enricher)
        self.quote_service = quote_service or QuoteService(settings)
        self.report_generator = report_generator or ReportGenerator(settings)

    @property
    def address(self) -> str:
        return self._address

    def with_wallet(self, address: str) -> "TreasuryAgent":
        """Return an agent for another wallet that shares this agent's collaborators."""
        return TreasuryAgent(
            self.settings,
            address,
            rpc_client=self.rpc_client,
            reader=self.reader,
            quote_service=self.quote_service,
            report_generator=self.report_generator,
        )

    async def fetch_recent_activity(
        self,
        limit: Optional[int] = None,
        token: Optional[CancellationToken] = None,
    ) -> list[ActivityRecord]:
        """Recent activity for the wallet; empty if the RPC node is unavailable."""
        return await self.reader.fetch_recent(
            self._address,
            self.settings.activity_limit if limit is None else limit,
            token=token,
        )

    async def fetch_balance(self, token: Optional[CancellationToken] = None) -> Optional[int]:
        """Native balance in base units, or None if the RPC node is unavailable."""
        return await self.reader.fetch_balance(self._address, token=token)

    async def estimate_conversion(
        self,
        amount_base_units: int,
        input_asset: Optional[str] = None,
        output_asset: Optional[str] = None,
        slippage_bps: Optional[int] = None,
        token: Optional[CancellationToken] = None,
    ) -> QuoteResult:
        """
        Estimate converting ``amount_base_units`` of the input asset (SOL by default) into USDC.

        Raises:
            ValidationError: If the amount is not a positive integer
        """
        return await self.quote_service.quote(
            input_asset or self.settings.default_input_mint,
            amount_base_units,
            output_asset or self.settings.default_output_mint,
            self.settings.default_slippage_bps if slippage_bps is None else slippage_bps,
            token=token,
        )

    async def generate_report(
        self,
        activity: Optional[Sequence[ActivityRecord]] = None,
        period_label: Optional[str] = None,
        estimate: Estimate = None,
        token: Optional[CancellationToken] = None,
    ) -> ReportResult:
        """
        Generate the treasury report.

        Args:
            activity: Activity to report on; fetched first when None
            period_label: Reporting window label
            estimate: Latest conversion estimate (QuoteResult or destination amount) to cite
            token: Optional cancellation token

        Returns:
            ReportResult (never raises for provider failures)
        """
        if activity is None:
            activity = await self.fetch_recent_activity(token=token)
        return await self.report_generator.generate(
            activity,
            period_label,
            self.settings.generation_api_key,
            _estimate_value(estimate),
            token=token,
        )

    async def run_cycle(
        self,
        period_label: Optional[str] = None,
        token: Optional[CancellationToken] = None,
    ) -> TreasurySnapshot:
        """
        One full monitoring pass: activity, balance, balance estimate, report.

        The balance estimate is skipped when the balance is unknown or zero and
        is otherwise threaded into the report as context.
        """
        activity = await self.fetch_recent_activity(token=token)
        balance = await self.fetch_balance(token=token)

        quote = None
        if balance is not None and balance > 0:
            quote = await self.estimate_conversion(balance, token=token)

        report = await self.generate_report(activity, period_label, estimate=quote, token=token)
        log.info("Cycle finished for %s: %d records, balance=%s, fallback_quote=%s",
                 self._address, len(activity), balance, quote.is_fallback if quote else None)
        return TreasurySnapshot(
            address=self._address,
            activity=tuple(activity),
            balance_base_units=balance,
            quote=quote,
            report=report,
        )
