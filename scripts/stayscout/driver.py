"""
Page Driver Interface

The search only talks to the browser through PageDriver. Elements are
addressed with Target values, and every page action is run through
with_timeout, which turns failures and timeouts into a StepResult instead
of an exception.
"""

from __future__ import annotations

import asyncio
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Awaitable, Optional, Union

from .errors import StepError


TextPattern = Union[str, "re.Pattern[str]"]


@dataclass(frozen=True)
class Target:
    """
    How to locate a group of elements on the page.

    Either an ARIA role (optionally with an accessible-name pattern) or a
    CSS selector, narrowed by an optional has-text pattern. `key` names the
    target in logs and test fakes.
    """

    key: str
    role: Optional[str] = None
    name: Optional[TextPattern] = None
    selector: Optional[str] = None
    has_text: Optional[TextPattern] = None


@dataclass(frozen=True)
class StepResult:
    """Outcome of one page action: a value on success, a StepError otherwise."""

    step: str
    value: Any = None
    error: Optional[StepError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def pattern(source: str) -> re.Pattern:
    """Case-insensitive pattern for accessible names and row text."""
    return re.compile(source, re.IGNORECASE)


class PageDriver(ABC):
    """
    Abstract page-automation collaborator.

    Implementations may raise anything from their actions; callers go
    through with_timeout to get a StepResult back.
    """

    @property
    @abstractmethod
    def url(self) -> str:
        """Current page URL."""
        ...

    @abstractmethod
    async def navigate(self, url: str) -> None:
        ...

    @abstractmethod
    async def count(self, target: Target) -> int:
        ...

    @abstractmethod
    async def click(self, target: Target, nth: int = 0) -> None:
        ...

    @abstractmethod
    async def inner_text(self, target: Target, nth: int = 0) -> str:
        ...

    @abstractmethod
    async def attribute(
        self, target: Target, name: str, nth: int = 0, child: Optional[str] = None
    ) -> Optional[str]:
        """
        Read an attribute of the nth match, or of its first `child` match.

        Returns None when the attribute or the child is absent.
        """
        ...

    @abstractmethod
    async def wait(self, ms: int) -> None:
        ...

    async def with_timeout(
        self, step: str, operation: Awaitable[Any], timeout: float
    ) -> StepResult:
        """Await `operation` for at most `timeout` seconds."""
        try:
            value = await asyncio.wait_for(operation, timeout)
        except Exception as e:
            return StepResult(step=step, error=StepError(step, e))
        return StepResult(step=step, value=value)
