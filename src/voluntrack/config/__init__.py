# src/voluntrack/config/__init__.py
"""
Configuration Module

Provides centralized configuration management using Pydantic Settings.
A single Settings value is built at process start and handed to every component.
"""

from voluntrack.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
