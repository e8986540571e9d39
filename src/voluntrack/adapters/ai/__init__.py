# src/voluntrack/adapters/ai/__init__.py
"""
AI Adapters - Text Generation Integrations

This package contains adapters for generative-text services.
"""

from voluntrack.adapters.ai.gemini import GeminiTextClient

__all__ = ["GeminiTextClient"]
