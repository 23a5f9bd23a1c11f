"""
Error Taxonomy

Fatal errors abort a run and are reported by the CLI as a one-line message.
StepError is never raised out of a search: it only travels inside a
StepResult for best-effort UI steps.
"""

from __future__ import annotations


class StayScoutError(Exception):
    """Base class for every error the CLI reports to the user."""


class InvalidDateError(StayScoutError, ValueError):
    """Check-in date is malformed or outside the booking policy."""


class NoResultError(StayScoutError):
    """No hotel result could be opened for the query city."""

    def __init__(self, city: str, reason: str = ""):
        self.city = city
        self.reason = reason
        message = f'Could not open a hotel result for "{city}".'
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class DependencyMissingError(StayScoutError):
    """Playwright or its Chromium browser is not installed."""


class StepError(StayScoutError):
    """A best-effort page step that failed or timed out."""

    def __init__(self, step: str, cause: BaseException | None = None):
        self.step = step
        self.cause = cause
        detail = f"{type(cause).__name__}: {cause}" if cause is not None else "failed"
        super().__init__(f"{step}: {detail}")


class SearchFailedError(StayScoutError):
    """The browser session failed outside any guarded page step."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Search failed: {type(cause).__name__}: {cause}")
