# src/voluntrack/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains the services that wrap the external dependencies
and the TreasuryAgent facade that composes them.
"""

from voluntrack.application.activity_reader import ActivityEnricher, AddressActivityReader
from voluntrack.application.quote_service import QuoteService, fallback_out_amount
from voluntrack.application.report_generator import ReportGenerator, build_prompt
from voluntrack.application.agent import TreasuryAgent

__all__ = [
    "ActivityEnricher",
    "AddressActivityReader",
    "QuoteService",
    "fallback_out_amount",
    "ReportGenerator",
    "build_prompt",
    "TreasuryAgent",
]
