# src/voluntrack/adapters/chain/solana_rpc.py
"""
Solana JSON-RPC Client - Signatures and Balances

This module implements a minimal JSON-RPC 2.0 client for a Solana RPC node.
It covers the two calls the treasury agent needs: recent signatures for an
address and the native balance. Every failure is raised as RuntimeError;
deciding what a failure means is left to the application services.

Files that USE this module:
- voluntrack.application.activity_reader (AddressActivityReader wraps SolanaRpcClient)
- voluntrack.application.agent (builds the default client from settings)
- tests.test_providers (unit tests)

Files that this module USES:
- voluntrack.config (Settings for endpoint URL and timeout)
"""
import itertools
import logging
from typing import Any, Dict, List, Optional

import requests

from voluntrack.config import Settings

log = logging.getLogger(__name__)


class SolanaRpcClient:
    """
    JSON-RPC client bound to one RPC endpoint (the agent's connection handle).

    The client holds no per-wallet state and can be shared between agents.
    """

    _ids = itertools.count(1)

    def __init__(self, settings: Settings, endpoint_url: Optional[str] = None, timeout: Optional[int] = None):
        """
        Initialize the RPC client.

        Args:
            settings: Application settings
            endpoint_url: Optional RPC URL (defaults to settings.rpc_endpoint_url)
            timeout: Optional HTTP timeout in seconds (defaults to settings.rpc_timeout_seconds)
        """
        self.url = endpoint_url or settings.rpc_endpoint_url
        self.timeout = timeout or settings.rpc_timeout_seconds

    def _call(self, method: str, params: List[Any]) -> Any:
        """
        Perform one JSON-RPC call and return its ``result`` member.

        Raises:
            RuntimeError: On timeout, transport error, HTTP error, invalid JSON or RPC error
        """
        payload = {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params}
        try:
            log.debug("RPC %s -> %s", method, self.url)
            resp = requests.post(self.url, json=payload, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.exceptions.Timeout:
            log.warning("RPC %s timeout after %d seconds", method, self.timeout)
            raise RuntimeError(f"RPC {method} timeout after {self.timeout}s")
        except requests.exceptions.RequestException as e:
            log.warning("RPC %s request failed: %s", method, e)
            raise RuntimeError(f"RPC {method} request failed: {e}") from e
        except ValueError as e:
            log.error("RPC %s returned invalid JSON: %s", method, e)
            raise RuntimeError(f"RPC {method} returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            log.error("RPC %s unexpected response type: %r", method, type(data))
            raise RuntimeError(f"RPC {method} returned non-dict JSON")

        if data.get("error"):
            log.warning("RPC %s returned error: %s", method, data["error"])
            raise RuntimeError(f"RPC {method} error: {data['error']}")

        if "result" not in data:
            raise RuntimeError(f"RPC {method} response missing 'result' field")
        return data["result"]

    def get_signatures_for_address(self, address: str, limit: int) -> List[Dict[str, Any]]:
        """
        List recent signatures for an address, most recent first.

        Args:
            address: Base58 wallet address
            limit: Maximum number of signatures

        Returns:
            Raw signature entries (``signature``, ``blockTime``, ``slot``, ``err``, ...)

        Raises:
            RuntimeError: If the call fails or the result is not a list
        """
        result = self._call("getSignaturesForAddress", [address, {"limit": limit}])
        if not isinstance(result, list):
            raise RuntimeError("getSignaturesForAddress returned a non-list result")
        return result

    def get_balance(self, address: str) -> int:
        """
        Get the native balance in base units (lamports).

        Raises:
            RuntimeError: If the call fails or the value is not an integer
        """
        result = self._call("getBalance", [address])
        # Newer nodes wrap the value in {"context": ..., "value": ...}
        value = result.get("value") if isinstance(result, dict) else result
        if isinstance(value, bool) or not isinstance(value, int):
            raise RuntimeError(f"getBalance returned unexpected value: {value!r}")
        return value
