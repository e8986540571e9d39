# src/voluntrack/application/activity_reader.py
"""
Address Activity Reader - Recent Wallet Activity

This module reads recent activity for a wallet through the RPC client and
normalizes it into ActivityRecord values. Monitoring must never block the
rest of the agent: any RPC failure yields an empty list (or no balance)
instead of an error. There are no retries; the caller decides whether to
ask again.

Files that USE this module:
- voluntrack.application.agent (TreasuryAgent.fetch_recent_activity / fetch_balance)
- tests.test_activity_reader (unit tests)

Files that this module USES:
- voluntrack.adapters.chain.solana_rpc (SolanaRpcClient)
- voluntrack.domain.models (ActivityRecord)
- voluntrack.shared.cancellation (CancellationToken checks)
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Mapping, Optional

from voluntrack.adapters.chain.solana_rpc import SolanaRpcClient
from voluntrack.domain.errors import ValidationError
from voluntrack.domain.models import ActivityRecord
from voluntrack.shared import cancellation
from voluntrack.shared.cancellation import CancellationToken

log = logging.getLogger(__name__)

# Hook for filling in amount/mint from richer transaction data.
# Receives the normalized record and the raw signature entry.
ActivityEnricher = Callable[[ActivityRecord, Mapping[str, Any]], ActivityRecord]


def _block_time(entry: Mapping[str, Any]) -> int:
    value = entry.get("blockTime")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return int(value)


class AddressActivityReader:
    """Turns RPC signature listings into activity records."""

    def __init__(self, rpc_client: SolanaRpcClient, enricher: Optional[ActivityEnricher] = None):
        self.rpc_client = rpc_client
        self.enricher = enricher

    def _to_record(self, entry: Mapping[str, Any]) -> Optional[ActivityRecord]:
        signature = entry.get("signature")
        if not isinstance(signature, str) or not signature:
            log.debug("Skipping signature entry without signature: %r", entry)
            return None

        record = ActivityRecord(signature=signature, timestamp=_block_time(entry))
        if self.enricher is None:
            return record
        try:
            return self.enricher(record, entry)
        except Exception as e:
            log.warning("Activity enricher failed for %s, keeping plain record: %s", signature, e)
            return record

    async def fetch_recent(
        self,
        address: str,
        limit: int = 5,
        token: Optional[CancellationToken] = None,
    ) -> list[ActivityRecord]:
        """
        Fetch the most recent activity for an address.

        Args:
            address: Validated wallet address
            limit: Maximum number of records (positive integer)
            token: Optional cancellation token checked before the result is returned

        Returns:
            Activity records, most recent first; empty if the RPC call failed

        Raises:
            ValidationError: If limit is not a positive integer
            OperationCancelled: If the token was cancelled
        """
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise ValidationError("limit must be a positive integer")
        cancellation.check(token)

        loop = asyncio.get_running_loop()
        try:
            entries = await loop.run_in_executor(
                None, lambda: self.rpc_client.get_signatures_for_address(address, limit)
            )
        except Exception as e:
            log.warning("Failed to fetch activity for %s, returning no records: %s", address, e)
            entries = []

        cancellation.check(token)

        records = []
        for entry in entries[:limit]:
            if not isinstance(entry, Mapping):
                continue
            record = self._to_record(entry)
            if record is not None:
                records.append(record)

        log.info("Fetched %d activity records for %s", len(records), address)
        return records

    async def fetch_balance(
        self,
        address: str,
        token: Optional[CancellationToken] = None,
    ) -> Optional[int]:
        """
        Fetch the native balance in base units.

        Returns:
            Balance, or None if the RPC call failed
        """
        cancellation.check(token)

        loop = asyncio.get_running_loop()
        try:
            balance = await loop.run_in_executor(None, lambda: self.rpc_client.get_balance(address))
        except Exception as e:
            log.warning("Failed to fetch balance for %s: %s", address, e)
            balance = None

        cancellation.check(token)
        return balance
