# src/voluntrack/application/report_generator.py
"""
Report Generator - Tiered Treasury Report Policy

This module decides which report a caller gets. The branches are evaluated
in strict order and exactly one of them produces the result:

1. No activity yet        -> canned summary (+ estimate note), one instructional insight
2. No generation key      -> instructional "add a key" summary, no insights
3. Key present            -> prompt the text-generation provider once
4. Provider failed/empty  -> canned summary, no insights
5. Provider answered      -> generated text, one AI-assistance insight

No exception escapes apart from caller cancellation, and the summary is
always non-empty Ukrainian text.

Files that USE this module:
- voluntrack.application.agent (TreasuryAgent.generate_report)
- tests.test_report_generator (unit tests)

Files that this module USES:
- voluntrack.adapters.ai.gemini (GeminiTextClient, default client factory)
- voluntrack.adapters.formatting.formatter (prompt lines, estimate formatting)
- voluntrack.shared.language (Ukrainian texts)
"""
from __future__ import annotations

import asyncio
import logging
import math
from typing import Callable, Optional, Protocol, Sequence

from voluntrack.adapters.ai.gemini import GeminiTextClient
from voluntrack.adapters.formatting.formatter import activity_lines, format_usdc
from voluntrack.config import Settings
from voluntrack.domain.errors import GenerationUnavailable, MissingCredential
from voluntrack.domain.models import ActivityRecord, ReportResult
from voluntrack.shared import cancellation
from voluntrack.shared.cancellation import CancellationToken
from voluntrack.shared.language import DEFAULT_PERIOD_LABEL, translate

log = logging.getLogger(__name__)


class TextClient(Protocol):
    async def generate(self, prompt: str, system_prompt: str) -> Optional[str]:
        ...


TextClientFactory = Callable[[str, Settings], TextClient]


def _positive_estimate(value: Optional[float]) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


def _require_credential(credential: Optional[str]) -> str:
    if not credential or not credential.strip():
        raise MissingCredential("GENERATION_API_KEY is not configured")
    return credential.strip()


def build_prompt(
    activity: Sequence[ActivityRecord],
    period_label: str,
    estimate_context: Optional[float] = None,
) -> str:
    """
    Build the user prompt for the generation provider.

    Args:
        activity: Non-empty activity records
        period_label: Reporting window label
        estimate_context: Positive estimated destination value, if any

    Returns:
        Prompt text in Ukrainian
    """
    parts = [
        translate("prompt_intro", period=period_label),
        "",
        translate("prompt_entries_header"),
        *activity_lines(activity),
    ]
    estimate = _positive_estimate(estimate_context)
    if estimate is not None:
        parts += ["", translate("prompt_estimate", value=format_usdc(estimate))]
    parts += ["", translate("prompt_outro")]
    return "\n".join(parts)


class ReportGenerator:
    """Produces a ReportResult for every input, degrading instead of failing."""

    def __init__(self, settings: Settings, client_factory: Optional[TextClientFactory] = None):
        """
        Args:
            settings: Application settings (generation timeout, model)
            client_factory: Builds a text client for a credential (defaults to GeminiTextClient)
        """
        self.settings = settings
        self.client_factory = client_factory or GeminiTextClient
        self.timeout = settings.generation_timeout_seconds
        self._clients: dict[str, TextClient] = {}

    def _client_for(self, credential: str) -> TextClient:
        """Return the text client for a credential, building it on first use."""
        client = self._clients.get(credential)
        if client is None:
            client = self.client_factory(credential, self.settings)
            self._clients[credential] = client
        return client

    def _no_history_report(self, period: str, estimate_context: Optional[float]) -> ReportResult:
        summary = translate("fallback_summary")
        estimate = _positive_estimate(estimate_context)
        if estimate is not None:
            summary = f"{summary} {translate('estimate_note', value=format_usdc(estimate))}"
        return ReportResult(
            summary=summary,
            insights=(translate("no_history_insight"),),
            period=period,
        )

    async def _generate_text(self, credential: str, prompt: str) -> str:
        """
        Call the provider once within the generation deadline.

        Raises:
            GenerationUnavailable: On failure, timeout or empty text
        """
        try:
            client = self._client_for(credential)
            text = await asyncio.wait_for(
                client.generate(prompt, translate("system_prompt")),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            raise GenerationUnavailable(f"generation did not finish within {self.timeout}s")
        except Exception as e:
            raise GenerationUnavailable(str(e)) from e

        if not text or not text.strip():
            raise GenerationUnavailable("generation returned empty text")
        return text

    async def generate(
        self,
        activity: Sequence[ActivityRecord],
        period_label: Optional[str] = None,
        credential: Optional[str] = None,
        estimate_context: Optional[float] = None,
        token: Optional[CancellationToken] = None,
    ) -> ReportResult:
        """
        Produce a treasury report.

        Args:
            activity: Recent activity records
            period_label: Reporting window label (defaults to "Останні транзакції")
            credential: Generation API key; None or blank disables generation
            estimate_context: Estimated destination value (e.g. USDC) to cite, if positive
            token: Optional cancellation token

        Returns:
            ReportResult with a non-empty Ukrainian summary

        Raises:
            OperationCancelled: If the token was cancelled
        """
        period = period_label or DEFAULT_PERIOD_LABEL
        cancellation.check(token)

        if not activity:
            log.info("No activity yet, returning no-history report")
            return self._no_history_report(period, estimate_context)

        try:
            api_key = _require_credential(credential)
        except MissingCredential as e:
            log.warning("Report generation disabled: %s", e)
            return ReportResult(summary=translate("missing_credential_summary"), insights=(), period=period)

        prompt = build_prompt(activity, period, estimate_context)
        try:
            text = await self._generate_text(api_key, prompt)
        except GenerationUnavailable as e:
            log.warning("Generation unavailable, returning canned summary: %s", e)
            cancellation.check(token)
            return ReportResult(summary=translate("fallback_summary"), insights=(), period=period)

        cancellation.check(token)
        return ReportResult(summary=text, insights=(translate("ai_insight"),), period=period)
