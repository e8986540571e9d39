# src/voluntrack/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables (or a local .env file) and are
validated once; the resulting Settings object is passed explicitly into
each component constructor instead of being read at call sites.

Files that USE this module:
- voluntrack.app (builds settings at startup)
- voluntrack.adapters.* (RPC, quote and generation adapters read URLs and timeouts)
- voluntrack.application.* (services read policy constants such as the fallback rate)

Files that this module USES:
- voluntrack.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from voluntrack.shared.validators import (
    validate_http_url,  # Validate endpoint URLs
    validate_solana_address,  # Validate base58 mint addresses
)

WRAPPED_SOL_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Chain RPC ---
    rpc_endpoint_url: str = Field(default="https://api.devnet.solana.com", alias="RPC_ENDPOINT_URL")
    rpc_timeout_seconds: int = Field(default=10, alias="RPC_TIMEOUT_SECONDS", ge=1, le=60)
    activity_limit: int = Field(default=5, alias="ACTIVITY_LIMIT", ge=1, le=1000)

    # --- Swap quotes ---
    quote_api_url: str = Field(default="https://quote-api.jup.ag/v6/quote", alias="QUOTE_API_URL")
    quote_timeout_ms: int = Field(default=5000, alias="QUOTE_TIMEOUT_MS", ge=1, le=60000)
    # Demo conversion rate used when the quote API is unavailable (1 SOL ~ 140 USDC)
    fallback_rate: float = Field(default=140.0, alias="FALLBACK_RATE", gt=0.0)
    input_decimals: int = Field(default=9, alias="INPUT_DECIMALS", ge=0, le=18)
    output_decimals: int = Field(default=6, alias="OUTPUT_DECIMALS", ge=0, le=18)
    default_input_mint: str = Field(default=WRAPPED_SOL_MINT, alias="DEFAULT_INPUT_MINT")
    default_output_mint: str = Field(default=USDC_MINT, alias="DEFAULT_OUTPUT_MINT")
    default_slippage_bps: int = Field(default=50, alias="DEFAULT_SLIPPAGE_BPS", ge=0, le=10000)

    # --- Text generation (OpenAI-compatible endpoint) ---
    generation_api_key: str = Field(default="", alias="GENERATION_API_KEY")
    generation_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta/openai/",
        alias="GENERATION_BASE_URL",
    )
    generation_model: str = Field(default="gemini-2.0-flash", alias="GENERATION_MODEL")
    generation_timeout_seconds: float = Field(default=30.0, alias="GENERATION_TIMEOUT_SECONDS", gt=0.0, le=300.0)

    # --- HTTP server ---
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000, alias="PORT", ge=1, le=65535)

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @property
    def quote_timeout_seconds(self) -> float:
        return self.quote_timeout_ms / 1000.0

    @property
    def generation_configured(self) -> bool:
        """True when a generation credential is present."""
        return bool(self.generation_api_key)

    @field_validator("rpc_endpoint_url", "quote_api_url", "generation_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate endpoint URL format."""
        if not validate_http_url(v):
            raise ValueError(f"Invalid endpoint URL: {v!r}")
        return v

    @field_validator("default_input_mint", "default_output_mint")
    @classmethod
    def validate_mint(cls, v: str) -> str:
        if not validate_solana_address(v):
            raise ValueError(f"Invalid mint address: {v!r}")
        return v

    @field_validator("generation_api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        # A whitespace-only key counts as missing
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return level


def load_settings(**overrides) -> Settings:
    """
    Build the process-wide settings value.

    Called once by the composition root; keyword overrides take precedence
    over environment variables and are mostly useful in tests.

    Args:
        **overrides: Field values (by field name) to force

    Returns:
        Validated Settings instance
    """
    return Settings(**overrides)
