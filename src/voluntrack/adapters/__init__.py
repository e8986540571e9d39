# src/voluntrack/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Chain (Solana JSON-RPC)
- Providers (swap-quote APIs)
- AI (text generation)
- HTTP (FastAPI boundary)
- Formatting (prompt and summary text)
"""

__all__ = []
