# src/voluntrack/adapters/http/api.py
"""
HTTP API - FastAPI Boundary

This module exposes the quote endpoint and read-only wallet endpoints.
Quote degradation is itself a successful response: the endpoint never
answers 5xx because the quote provider is down, it answers 200 with a
fallback body marked ``isMock``. Only malformed input yields 400.

Endpoints:
- GET /healthz
- GET /quote?inputAsset=&outputAsset=&amount=&slippageBasisPoints=50
- GET /wallets/{address}/activity?limit=5
- GET /wallets/{address}/balance
- GET /wallets/{address}/report?period=&estimate=
- GET /wallets/{address}/summary

Files that USE this module:
- voluntrack.app (serves the application with uvicorn)
- tests.test_api (endpoint tests)

Files that this module USES:
- voluntrack.application (QuoteService, TreasuryAgent and collaborators)
- voluntrack.shared.validators (quote parameter validation)
"""
from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Annotated, Any, Optional

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse

from voluntrack import __version__
from voluntrack.adapters.chain.solana_rpc import SolanaRpcClient
from voluntrack.application.activity_reader import AddressActivityReader
from voluntrack.application.agent import TreasuryAgent
from voluntrack.application.quote_service import QuoteService
from voluntrack.application.report_generator import ReportGenerator
from voluntrack.config import Settings, load_settings
from voluntrack.domain.errors import ValidationError
from voluntrack.shared.validators import parse_limit, validate_quote_params

log = logging.getLogger(__name__)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_quote_service(request: Request) -> QuoteService:
    """Provide the shared quote service."""
    return request.app.state.quote_service


def get_agent_factory(request: Request):
    """Provide a callable building an agent for an address."""
    state = request.app.state

    def factory(address: str) -> TreasuryAgent:
        return TreasuryAgent(
            state.settings,
            address,
            rpc_client=state.rpc_client,
            reader=state.reader,
            quote_service=state.quote_service,
            report_generator=state.report_generator,
        )

    return factory


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application with collaborators created from settings.

    Args:
        settings: Application settings (loaded from the environment when omitted)

    Returns:
        Configured FastAPI application
    """
    settings = settings or load_settings()

    app = FastAPI(title="VolunTrack API", version=__version__)
    app.state.settings = settings
    app.state.rpc_client = SolanaRpcClient(settings)
    app.state.reader = AddressActivityReader(app.state.rpc_client)
    app.state.quote_service = QuoteService(settings)
    app.state.report_generator = ReportGenerator(settings)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        log.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.get("/healthz", tags=["system"])
    def healthcheck(settings: Settings = Depends(get_settings)) -> dict[str, Any]:
        """Readiness probe; also reports whether report generation is configured."""
        return {"status": "ok", "generation_configured": settings.generation_configured}

    @app.get("/quote", tags=["quotes"])
    async def quote(
        service: Annotated[QuoteService, Depends(get_quote_service)],
        settings: Annotated[Settings, Depends(get_settings)],
        input_asset: Annotated[Optional[str], Query(alias="inputAsset")] = None,
        output_asset: Annotated[Optional[str], Query(alias="outputAsset")] = None,
        amount: Annotated[Optional[str], Query()] = None,
        slippage_bps: Annotated[Optional[str], Query(alias="slippageBasisPoints")] = None,
    ) -> dict[str, Any]:
        """Simulated conversion quote; the upstream body is passed through unmodified."""
        input_asset, output_asset, parsed_amount, bps = validate_quote_params(
            input_asset, output_asset, amount, slippage_bps, settings.default_slippage_bps
        )
        return await service.quote_raw(input_asset, parsed_amount, output_asset, bps)

    @app.get("/wallets/{address}/activity", tags=["wallets"])
    async def wallet_activity(
        address: str,
        agent_factory=Depends(get_agent_factory),
        limit: Annotated[Optional[str], Query()] = None,
    ) -> dict[str, Any]:
        agent = agent_factory(address)
        records = await agent.fetch_recent_activity(
            parse_limit(limit, default=agent.settings.activity_limit)
        )
        return {"address": agent.address, "items": [asdict(r) for r in records]}

    @app.get("/wallets/{address}/balance", tags=["wallets"])
    async def wallet_balance(address: str, agent_factory=Depends(get_agent_factory)) -> dict[str, Any]:
        agent = agent_factory(address)
        balance = await agent.fetch_balance()
        return {"address": agent.address, "balance": balance}

    @app.get("/wallets/{address}/report", tags=["wallets"])
    async def wallet_report(
        address: str,
        agent_factory=Depends(get_agent_factory),
        period: Annotated[Optional[str], Query(max_length=100)] = None,
        estimate: Annotated[Optional[float], Query()] = None,
    ) -> dict[str, Any]:
        """Report on recent activity, citing ``estimate`` (USDC) when positive."""
        agent = agent_factory(address)
        report = await agent.generate_report(period_label=period, estimate=estimate)
        return asdict(report)

    @app.get("/wallets/{address}/summary", tags=["wallets"])
    async def wallet_summary(
        address: str,
        agent_factory=Depends(get_agent_factory),
        period: Annotated[Optional[str], Query(max_length=100)] = None,
    ) -> dict[str, Any]:
        """Run one full agent cycle for the wallet."""
        agent = agent_factory(address)
        snapshot = await agent.run_cycle(period_label=period)
        return snapshot.to_dict()

    return app
