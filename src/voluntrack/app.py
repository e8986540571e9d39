# src/voluntrack/app.py
"""
Application Entry Point - Server Startup and One-off Cycles

This module serves as the composition root for VolunTrack. It builds the
settings once, configures logging, and either serves the HTTP API with
uvicorn or runs a single agent cycle for one wallet and prints it as JSON.

Usage:
  python -m voluntrack                    # serve the API
  python -m voluntrack cycle <ADDRESS>    # one monitoring pass, JSON on stdout

Files that USE this module:
- voluntrack.__main__ (python -m voluntrack)
- the ``voluntrack`` console script

Files that this module USES:
- voluntrack.shared.logging_conf (setup_logging for logging configuration)
- voluntrack.config (load_settings)
- voluntrack.adapters.http.api (create_app)
- voluntrack.application.agent (TreasuryAgent for one-off cycles)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import argparse  # Command line parsing
import asyncio  # Run a single agent cycle
import json  # Print cycle results
import logging  # Standard library for logging messages and errors
import os  # Working directory for startup logs
import sys  # Exit codes

import pydantic  # Settings validation errors
import uvicorn  # ASGI server for the HTTP API

from voluntrack.shared.logging_conf import setup_logging  # Configure logging with file rotation
from voluntrack.config import Settings, load_settings  # Application configuration
from voluntrack.domain.errors import ValidationError  # Invalid wallet address


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="voluntrack", description="Donation wallet treasury agent")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("serve", help="Serve the HTTP API (default)")
    cycle = sub.add_parser("cycle", help="Run one monitoring cycle for a wallet and print JSON")
    cycle.add_argument("address", help="Wallet address to monitor")
    cycle.add_argument("--period", default=None, help="Reporting period label")
    return parser.parse_args(argv)


def run_cycle(settings: Settings, address: str, period: str | None = None) -> dict:
    """Run one TreasuryAgent cycle and return it as a plain dict."""
    from voluntrack.application.agent import TreasuryAgent

    agent = TreasuryAgent(settings, address)
    snapshot = asyncio.run(agent.run_cycle(period_label=period))
    return snapshot.to_dict()


def serve(settings: Settings) -> None:
    """Serve the HTTP API with uvicorn."""
    from voluntrack.adapters.http.api import create_app

    app = create_app(settings)
    logging.getLogger(__name__).info("Starting HTTP API on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


def main(argv=None) -> None:
    """
    Initialize and start VolunTrack.

    This function:
    1. Loads and validates settings (exits with status 1 on invalid configuration)
    2. Sets up logging
    3. Serves the API or runs a single cycle
    """
    args = _parse_args(argv)

    try:
        settings = load_settings()
    except pydantic.ValidationError as e:
        setup_logging()
        logging.getLogger(__name__).error("Invalid configuration:\n%s", e)
        sys.exit(1)

    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )
    logger = logging.getLogger(__name__)
    logger.info("Working directory: %s", os.getcwd())
    logger.info("RPC endpoint: %s, generation configured: %s",
                settings.rpc_endpoint_url, settings.generation_configured)
    if not settings.generation_configured:
        logger.warning("GENERATION_API_KEY is not set - reports will contain instructions instead of AI text")

    if args.command == "cycle":
        try:
            result = run_cycle(settings, args.address, args.period)
        except ValidationError as e:
            logger.error("Cannot run cycle: %s", e)
            sys.exit(2)
        print(json.dumps(result, ensure_ascii=False, indent=2))
        return

    try:
        serve(settings)
    except KeyboardInterrupt:
        logger.info("Server stopped by user (KeyboardInterrupt)")


if __name__ == "__main__":
    main()
