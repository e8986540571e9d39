# tests/test_api.py
"""
HTTP API Tests - Quote Boundary and Wallet Endpoints

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- voluntrack.adapters.http.api (create_app and its dependencies)
- fastapi.testclient (TestClient)
"""
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from voluntrack.adapters.http.api import create_app, get_agent_factory, get_quote_service
from voluntrack.application.agent import TreasuryAgent
from voluntrack.application.quote_service import QuoteService
from voluntrack.shared.language import translate

from conftest import SIG_1, SOL_MINT, USDC_MINT, WALLET


@pytest.fixture
def app(settings):
    application = create_app(settings)
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def provider(app, settings):
    """Quote provider mock wired into the /quote endpoint."""
    mock_provider = Mock()
    service = QuoteService(settings, provider=mock_provider)
    app.dependency_overrides[get_quote_service] = lambda: service
    return mock_provider


@pytest.fixture
def rpc(app, settings):
    """RPC client mock wired into the wallet endpoints."""
    mock_rpc = Mock()
    mock_rpc.get_signatures_for_address.return_value = [{"signature": SIG_1, "blockTime": 1700000000}]
    mock_rpc.get_balance.return_value = 1_000_000_000

    def factory():
        return lambda address: TreasuryAgent(settings, address, rpc_client=mock_rpc)

    app.dependency_overrides[get_agent_factory] = factory
    return mock_rpc


def _quote_params(**overrides):
    params = {"inputAsset": SOL_MINT, "outputAsset": USDC_MINT, "amount": "1000000000"}
    params.update(overrides)
    return {k: v for k, v in params.items() if v is not None}


class TestHealth:
    def test_healthcheck(self, client):
        response = client.get("/healthz")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "generation_configured": False}


class TestQuoteEndpoint:
    def test_upstream_success_passthrough(self, client, provider):
        body = {"outAmount": "139000000", "priceImpactPct": "0.0012", "routePlan": []}
        provider.get_quote.return_value = body

        response = client.get("/quote", params=_quote_params(slippageBasisPoints="75"))

        assert response.status_code == 200
        assert response.json() == body
        provider.get_quote.assert_called_once_with(SOL_MINT, USDC_MINT, 1_000_000_000, 75)

    def test_default_slippage(self, client, provider):
        provider.get_quote.return_value = {"outAmount": "1"}

        client.get("/quote", params=_quote_params())

        assert provider.get_quote.call_args.args[3] == 50

    def test_upstream_failure_returns_mock(self, client, provider):
        provider.get_quote.side_effect = RuntimeError("Jupiter quote API request failed")

        response = client.get("/quote", params=_quote_params())

        assert response.status_code == 200
        assert response.json() == {"outAmount": "140000000", "isMock": True}

    def test_fractional_amount_truncated(self, client, provider):
        provider.get_quote.side_effect = RuntimeError("down")

        response = client.get("/quote", params=_quote_params(amount="2000000000.9"))

        assert response.json() == {"outAmount": "280000000", "isMock": True}
        assert provider.get_quote.call_args.args[2] == 2_000_000_000

    @pytest.mark.parametrize("missing", ["inputAsset", "outputAsset", "amount"])
    def test_missing_params(self, client, provider, missing):
        params = _quote_params()
        del params[missing]

        response = client.get("/quote", params=params)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required params: inputAsset, outputAsset, amount"}
        provider.get_quote.assert_not_called()

    @pytest.mark.parametrize("amount", ["0", "-10", "abc", "0.4", "NaN", "Infinity"])
    def test_invalid_amount(self, client, provider, amount):
        response = client.get("/quote", params=_quote_params(amount=amount))

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid amount"}
        provider.get_quote.assert_not_called()

    def test_invalid_slippage(self, client, provider):
        response = client.get("/quote", params=_quote_params(slippageBasisPoints="lots"))

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid slippageBasisPoints"}


class TestWalletEndpoints:
    def test_activity(self, client, rpc):
        response = client.get(f"/wallets/{WALLET}/activity", params={"limit": 3})

        assert response.status_code == 200
        assert response.json() == {
            "address": WALLET,
            "items": [{"signature": SIG_1, "amount": 0.0, "mint": None, "timestamp": 1700000000}],
        }
        rpc.get_signatures_for_address.assert_called_once_with(WALLET, 3)

    def test_activity_default_limit(self, client, rpc):
        client.get(f"/wallets/{WALLET}/activity")
        rpc.get_signatures_for_address.assert_called_once_with(WALLET, 5)

    @pytest.mark.parametrize("limit", ["0", "101", "ten"])
    def test_activity_invalid_limit(self, client, rpc, limit):
        response = client.get(f"/wallets/{WALLET}/activity", params={"limit": limit})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid limit"}
        rpc.get_signatures_for_address.assert_not_called()

    def test_activity_rpc_down(self, client, rpc):
        rpc.get_signatures_for_address.side_effect = RuntimeError("RPC down")

        response = client.get(f"/wallets/{WALLET}/activity")

        assert response.status_code == 200
        assert response.json()["items"] == []

    def test_balance(self, client, rpc):
        response = client.get(f"/wallets/{WALLET}/balance")
        assert response.json() == {"address": WALLET, "balance": 1_000_000_000}

    def test_invalid_address(self, client, rpc):
        response = client.get("/wallets/not-a-wallet/balance")

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid address"}

    def test_report_without_credential(self, client, rpc):
        response = client.get(f"/wallets/{WALLET}/report", params={"period": "Тиждень"})

        assert response.status_code == 200
        assert response.json() == {
            "summary": translate("missing_credential_summary"),
            "insights": [],
            "period": "Тиждень",
        }

    def test_summary(self, client, rpc, settings):
        rpc.get_signatures_for_address.return_value = []

        with pytest.MonkeyPatch.context() as mp:
            mp.setattr(
                "voluntrack.adapters.providers.jupiter.JupiterQuoteProvider.get_quote",
                Mock(side_effect=RuntimeError("down")),
            )
            response = client.get(f"/wallets/{WALLET}/summary")

        assert response.status_code == 200
        data = response.json()
        assert data["address"] == WALLET
        assert data["balance_base_units"] == 1_000_000_000
        assert data["quote"] == {
            "output_amount": 140.0,
            "raw_output_amount": "140000000",
            "is_simulation": True,
            "is_fallback": True,
        }
        assert "140.00 USDC" in data["report"]["summary"]
