# src/voluntrack/adapters/ai/gemini.py
"""
Gemini Text Generation Service - Treasury Report Generation

This module talks to Gemini through its OpenAI-compatible chat completions
endpoint, using the OpenAI SDK. It sends the report prompt built by the
report generator and returns the generated Ukrainian text.

Files that USE this module:
- voluntrack.application.report_generator (default text client factory)

Files that this module USES:
- voluntrack.config (Settings for base URL, model and timeout)
"""
import asyncio
import logging
from typing import Optional

from openai import OpenAI

from voluntrack.config import Settings

log = logging.getLogger(__name__)


class GeminiTextClient:
    """
    Generative-text client for treasury reports.

    Failures and empty completions are logged and reported as None;
    the caller decides what text to show instead.
    """

    def __init__(self, api_key: str, settings: Settings):
        """
        Initialize the text client.

        Args:
            api_key: Generation credential
            settings: Application settings (base URL, model, timeout)
        """
        self.base_url = settings.generation_base_url
        self.model = settings.generation_model
        self.client = OpenAI(
            api_key=api_key,
            base_url=self.base_url,
            timeout=settings.generation_timeout_seconds,
            max_retries=0,
        )
        log.debug("Generation client initialized with base_url=%s, model=%s, api_key_length=%d",
                  self.base_url, self.model, len(api_key))

    async def generate(self, prompt: str, system_prompt: str) -> Optional[str]:
        """
        Generate text for a prompt.

        Args:
            prompt: User prompt
            system_prompt: System framing for the model

        Returns:
            Generated text as returned by the provider, or None if the call
            fails or returns nothing
        """
        try:
            log.info("Requesting report from generation API (base_url=%s, model=%s)", self.base_url, self.model)
            log.debug("Prompt length: %d characters", len(prompt))

            # Run synchronous OpenAI client call in executor to make it async-friendly
            loop = asyncio.get_running_loop()
            completion = await loop.run_in_executor(
                None,
                lambda: self.client.chat.completions.create(
                    model=self.model,
                    messages=[
                        {"role": "system", "content": system_prompt},
                        {"role": "user", "content": prompt},
                    ],
                ),
            )

            text = completion.choices[0].message.content if completion.choices else None
            if text and text.strip():
                log.info("Received report from generation API (length=%d chars)", len(text))
                return text

            log.warning("Generation API returned empty content")
            return None

        except Exception as e:
            log.error("Failed to generate report: %s", e, exc_info=True)
            log.error("Exception type: %s, Exception args: %s", type(e).__name__, e.args)
            return None
