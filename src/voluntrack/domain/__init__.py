# src/voluntrack/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and the error taxonomy.
No dependencies on infrastructure or external systems.
"""

from voluntrack.domain.models import (
    ActivityRecord,
    QuoteResult,
    ReportResult,
    TreasurySnapshot,
)
from voluntrack.domain.errors import (
    DomainError,
    GenerationUnavailable,
    MissingCredential,
    OperationCancelled,
    UpstreamUnavailable,
    ValidationError,
)

__all__ = [
    "ActivityRecord",
    "QuoteResult",
    "ReportResult",
    "TreasurySnapshot",
    "DomainError",
    "ValidationError",
    "UpstreamUnavailable",
    "GenerationUnavailable",
    "MissingCredential",
    "OperationCancelled",
]
