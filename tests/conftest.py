# tests/conftest.py
"""
Shared Test Fixtures

Settings are built with explicit overrides so that a developer's
environment (e.g. a real GENERATION_API_KEY) never leaks into tests.
"""
import pytest

from voluntrack.config import load_settings
from voluntrack.domain.models import ActivityRecord

WALLET = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"
OTHER_WALLET = "7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU"
SOL_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
SIG_1 = "5VERv8NMvzbJMEkV8xnrLkEaWRtSz9CosKDYjCJjBRnbJLgp8uirBgmQpjKhoR4tjF3ZpRzrFmBV6UjKdiSZkQUW"
SIG_2 = "4hXTCkRzt9WyecNzV1XPgCDfGAZzQKNxLXgynz5QDuWWPSAZBZSHptvWRL3BjCvzUXRdKvHL2b7yGrRQcWyaqsaBC"


@pytest.fixture
def settings():
    return load_settings(
        generation_api_key="",
        rpc_endpoint_url="https://rpc.test.invalid",
        quote_api_url="https://quote.test.invalid/v6/quote",
        log_file=None,
        log_dir=None,
    )


@pytest.fixture
def keyed_settings(settings):
    return settings.model_copy(update={"generation_api_key": "test-generation-key"})


@pytest.fixture
def activity():
    return [
        ActivityRecord(signature=SIG_1, timestamp=1700000000),
        ActivityRecord(signature=SIG_2, timestamp=0),
    ]
