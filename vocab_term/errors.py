"""Error hierarchy for vocabulary term resolution.

Every error raised by this package is a ContextError. A ContextError can
wrap another exception, and produces a level-numbered report of the whole
chain so that a renderer can show a meaningful developer-facing diagnostic.

Each concrete kind also derives from the matching builtin exception, so
callers can catch ``ValueError`` or ``LookupError`` without importing us.
"""

from __future__ import annotations

import os
import time
import traceback
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .context import LocaleContext

ENVIRONMENT_VARIABLE = "VOCAB_TERM_ENV"


def _include_traceback() -> bool:
    return os.environ.get(ENVIRONMENT_VARIABLE) != "production"


class ContextError(Exception):
    """An error raised within (and optionally carrying) a LocaleContext."""

    def __init__(
        self,
        message: str,
        context: LocaleContext | None = None,
        wrapped: BaseException | None = None,
    ) -> None:
        if wrapped is not None:
            if isinstance(wrapped, ContextError):
                message = f"{message}\nContains context error: {wrapped.message}"
            elif isinstance(wrapped, BaseException):
                message = f"{message}\nContains error: {wrapped}"
            else:
                raise TypeError(
                    f"Context error can only wrap ContextErrors or exceptions, "
                    f"but got [{wrapped!r}] (message was [{message}])."
                )
        super().__init__(message)
        self.message = message
        self.context = context
        self.wrapped = wrapped
        self.created_at = time.time()

    def count_levels(self) -> int:
        """Number of exceptions in the chain, including this one."""
        levels = 1
        current: BaseException | None = self.wrapped
        while current is not None:
            levels += 1
            current = current.wrapped if isinstance(current, ContextError) else None
        return levels

    @staticmethod
    def report(level: int, total_levels: int, exc: BaseException) -> str:
        text = exc.message if isinstance(exc, ContextError) else str(exc)
        if _include_traceback():
            # format_tb only: formatting the exception itself would call __str__
            trace = "".join(traceback.format_tb(exc.__traceback__))
            text += f"\nLevel {level} of {total_levels}:\n{trace}"
        return text

    def unwrap_exception(self) -> str:
        total = self.count_levels()
        parts = []
        level = 1
        current: BaseException | None = self
        while current is not None:
            parts.append(self.report(level, total, current))
            level += 1
            current = current.wrapped if isinstance(current, ContextError) else None
        return "".join(f"\n\n{part}" for part in parts)

    def contains(self, *fragments: str) -> bool:
        """True if every fragment appears somewhere in the unwrapped report."""
        report = self.unwrap_exception()
        return all(fragment in report for fragment in fragments)

    def __str__(self) -> str:
        return self.unwrap_exception()


class ConfigurationError(ContextError, ValueError):
    """A required constructor argument or setting is missing or invalid."""


class ValidationError(ContextError, ValueError):
    """A metadata value was added without its value or its language."""


class TermLookupError(ContextError, LookupError):
    """No value exists for a mandatory read, or no language was selected."""


class ArityError(TermLookupError):
    """A message template needs a different number of parameters than given."""


class MalformedIriError(ContextError, ValueError):
    """No local name can be extracted from an IRI."""
