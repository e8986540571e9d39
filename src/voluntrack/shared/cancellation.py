# src/voluntrack/shared/cancellation.py
"""
Cancellation Tokens - Discarding Stale Results

A caller that re-invokes an operation before the previous call finished
(a dashboard refresh, a newer report request) cancels the old token. Each
component checks the token before applying its result, so a stale result
is never returned to a caller that no longer wants it.

Cancellation only stops the caller from waiting; an upstream request that
is already running in a worker thread is not interrupted.

Files that USE this module:
- voluntrack.application.* (every async operation accepts an optional token)

Files that this module USES:
- voluntrack.domain.errors (OperationCancelled)
"""
from __future__ import annotations

import threading
from typing import Optional

from voluntrack.domain.errors import OperationCancelled


class CancellationToken:
    """Thread-safe one-way cancellation flag."""

    def __init__(self) -> None:
        self._event = threading.Event()
        self.reason: Optional[str] = None

    def cancel(self, reason: Optional[str] = None) -> None:
        if not self._event.is_set():
            self.reason = reason
            self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        """Raise OperationCancelled if cancel() has been called."""
        if self._event.is_set():
            raise OperationCancelled(self.reason or "operation cancelled by caller")


def check(token: Optional[CancellationToken]) -> None:
    """Raise OperationCancelled when a token was supplied and cancelled."""
    if token is not None:
        token.raise_if_cancelled()
