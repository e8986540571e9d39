# src/voluntrack/domain/errors.py
"""
Domain Errors - Business Logic Exceptions

This module defines the failure taxonomy of the agent. Only ValidationError
(and OperationCancelled, which the caller asked for) ever reaches a caller;
the other categories are raised internally and converted into clearly
marked degraded results by the application services.
"""


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class ValidationError(DomainError):
    """Raised when caller input is malformed (a programming error, never retried)."""
    pass


class UpstreamUnavailable(DomainError):
    """Raised when the quote provider fails, times out or returns a malformed body."""
    pass


class GenerationUnavailable(DomainError):
    """Raised when the text-generation provider fails, times out or returns no text."""
    pass


class MissingCredential(DomainError):
    """Raised when no generation credential is configured."""
    pass


class OperationCancelled(DomainError):
    """Raised when the caller cancelled the operation's token before its result was applied."""
    pass
