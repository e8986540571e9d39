# tests/test_agent.py
"""
Treasury Agent Tests - Facade Composition

This module tests that TreasuryAgent delegates to its collaborators with
the configured defaults and threads quote results into report generation.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- voluntrack.application.agent (TreasuryAgent)
- unittest.mock (AsyncMock collaborators)
"""
import asyncio

import pytest

from unittest.mock import AsyncMock, Mock

from voluntrack.application.agent import TreasuryAgent
from voluntrack.application.activity_reader import AddressActivityReader
from voluntrack.application.quote_service import QuoteService
from voluntrack.application.report_generator import ReportGenerator
from voluntrack.domain.errors import ValidationError
from voluntrack.domain.models import ActivityRecord, QuoteResult, ReportResult
from voluntrack.shared.language import translate

from conftest import OTHER_WALLET, SIG_1, SOL_MINT, USDC_MINT, WALLET


def _agent(settings, activity=None, balance=None, quote=None, report=None):
    reader = Mock()
    reader.fetch_recent = AsyncMock(return_value=activity or [])
    reader.fetch_balance = AsyncMock(return_value=balance)
    quote_service = Mock()
    quote_service.quote = AsyncMock(return_value=quote)
    generator = Mock()
    generator.generate = AsyncMock(return_value=report or ReportResult(summary="ok", period="p"))
    agent = TreasuryAgent(
        settings,
        WALLET,
        rpc_client=Mock(),
        reader=reader,
        quote_service=quote_service,
        report_generator=generator,
    )
    return agent, reader, quote_service, generator


class TestConstruction:
    def test_invalid_address(self, settings):
        with pytest.raises(ValidationError):
            TreasuryAgent(settings, "not-an-address", rpc_client=Mock())

    def test_default_collaborators(self, settings):
        agent = TreasuryAgent(settings, WALLET)
        assert isinstance(agent.reader, AddressActivityReader)
        assert isinstance(agent.quote_service, QuoteService)
        assert isinstance(agent.report_generator, ReportGenerator)
        assert agent.reader.rpc_client is agent.rpc_client

    def test_with_wallet_returns_new_agent(self, settings):
        agent, reader, quote_service, generator = _agent(settings)

        other = agent.with_wallet(OTHER_WALLET)

        assert other is not agent
        assert agent.address == WALLET
        assert other.address == OTHER_WALLET
        assert other.reader is reader
        assert other.quote_service is quote_service
        assert other.report_generator is generator

    def test_address_is_read_only(self, settings):
        agent, *_ = _agent(settings)
        with pytest.raises(AttributeError):
            agent.address = OTHER_WALLET


class TestOperations:
    def test_fetch_recent_activity_uses_default_limit(self, settings):
        records = [ActivityRecord(signature=SIG_1, timestamp=1)]
        agent, reader, _, _ = _agent(settings, activity=records)

        assert asyncio.run(agent.fetch_recent_activity()) == records
        reader.fetch_recent.assert_awaited_once_with(WALLET, 5, token=None)

    @pytest.mark.parametrize("limit", [0, -1])
    def test_fetch_recent_activity_rejects_non_positive_limit(self, settings, limit):
        rpc = Mock()
        agent = TreasuryAgent(settings, WALLET, rpc_client=rpc)

        with pytest.raises(ValidationError):
            asyncio.run(agent.fetch_recent_activity(limit))

        rpc.get_signatures_for_address.assert_not_called()

    def test_estimate_conversion_defaults(self, settings):
        quote = QuoteResult(output_amount=140.0, raw_output_amount="140000000", is_fallback=True)
        agent, _, quote_service, _ = _agent(settings, quote=quote)

        result = asyncio.run(agent.estimate_conversion(1_000_000_000))

        assert result is quote
        quote_service.quote.assert_awaited_once_with(SOL_MINT, 1_000_000_000, USDC_MINT, 50, token=None)

    def test_estimate_conversion_explicit_zero_slippage(self, settings):
        agent, _, quote_service, _ = _agent(settings, quote=Mock())

        asyncio.run(agent.estimate_conversion(10, slippage_bps=0))

        assert quote_service.quote.await_args.args[3] == 0

    def test_generate_report_threads_quote(self, settings, activity):
        quote = QuoteResult(output_amount=72.5, raw_output_amount="72500000")
        agent, reader, _, generator = _agent(settings)

        asyncio.run(agent.generate_report(activity, "Тиждень", estimate=quote))

        generator.generate.assert_awaited_once_with(activity, "Тиждень", "", 72.5, token=None)
        reader.fetch_recent.assert_not_called()

    def test_generate_report_fetches_activity_when_missing(self, settings):
        records = [ActivityRecord(signature=SIG_1)]
        agent, reader, _, generator = _agent(settings, activity=records)

        asyncio.run(agent.generate_report(estimate=12.0))

        reader.fetch_recent.assert_awaited_once()
        generator.generate.assert_awaited_once_with(records, None, "", 12.0, token=None)

    def test_generate_report_passes_credential(self, keyed_settings, activity):
        agent, _, _, generator = _agent(keyed_settings)

        asyncio.run(agent.generate_report(activity))

        assert generator.generate.await_args.args[2] == "test-generation-key"


class TestRunCycle:
    def test_positive_balance_is_estimated_and_cited(self, settings, activity):
        quote = QuoteResult(output_amount=280.0, raw_output_amount="280000000", is_fallback=True)
        agent, _, quote_service, generator = _agent(settings, activity=activity, balance=2_000_000_000, quote=quote)

        snapshot = asyncio.run(agent.run_cycle())

        assert snapshot.address == WALLET
        assert snapshot.activity == tuple(activity)
        assert snapshot.balance_base_units == 2_000_000_000
        assert snapshot.quote is quote
        quote_service.quote.assert_awaited_once()
        assert generator.generate.await_args.args[3] == 280.0

    @pytest.mark.parametrize("balance", [None, 0])
    def test_no_estimate_without_balance(self, settings, balance):
        agent, _, quote_service, generator = _agent(settings, balance=balance)

        snapshot = asyncio.run(agent.run_cycle())

        assert snapshot.quote is None
        quote_service.quote.assert_not_called()
        assert generator.generate.await_args.args[3] is None

    def test_everything_down_still_produces_report(self, settings):
        rpc = Mock()
        rpc.get_signatures_for_address.side_effect = RuntimeError("RPC down")
        rpc.get_balance.side_effect = RuntimeError("RPC down")
        agent = TreasuryAgent(settings, WALLET, rpc_client=rpc)

        snapshot = asyncio.run(agent.run_cycle())

        assert snapshot.activity == ()
        assert snapshot.balance_base_units is None
        assert snapshot.quote is None
        assert snapshot.report.summary == translate("fallback_summary")
        assert len(snapshot.report.insights) == 1

    def test_quote_provider_down_uses_fallback_in_report(self, settings):
        rpc = Mock()
        rpc.get_signatures_for_address.return_value = []
        rpc.get_balance.return_value = 1_000_000_000
        provider = Mock()
        provider.get_quote.side_effect = RuntimeError("Jupiter quote API returned HTTP 504")
        agent = TreasuryAgent(settings, WALLET, rpc_client=rpc, quote_service=QuoteService(settings, provider))

        snapshot = asyncio.run(agent.run_cycle())

        assert snapshot.quote.is_fallback is True
        assert snapshot.quote.raw_output_amount == "140000000"
        assert "140.00 USDC" in snapshot.report.summary
