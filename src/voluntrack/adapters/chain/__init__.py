# src/voluntrack/adapters/chain/__init__.py
"""
Chain Adapters - Blockchain RPC Clients

This package contains the JSON-RPC client for the Solana node.
"""

from voluntrack.adapters.chain.solana_rpc import SolanaRpcClient

__all__ = ["SolanaRpcClient"]
