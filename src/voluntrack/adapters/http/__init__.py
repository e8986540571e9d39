# src/voluntrack/adapters/http/__init__.py
"""
HTTP Adapters - Web Boundary

This package contains the FastAPI application factory.
"""

from voluntrack.adapters.http.api import create_app

__all__ = ["create_app"]
