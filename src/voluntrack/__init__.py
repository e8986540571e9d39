# src/voluntrack/__init__.py
"""
VolunTrack - Autonomous Treasury Agent for Donation Wallets

Monitors a Solana donation wallet, estimates the USDC value of its balance
through the Jupiter quote API, and writes Ukrainian-language treasury reports
with a generative-text model. Every external dependency is wrapped so that
the agent always returns a usable result.
"""

__version__ = "0.3.0"
