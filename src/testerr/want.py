"""
The Want protocol — anything that can judge an observed error.

A Want compares an error to an expected value or property. Returning the
empty string means the error was as expected; any other string is the
diff describing the mismatch (see diff_message for the canonical form).

Any object with an ``err_diff(got)`` method satisfies the protocol via
structural typing, no inheritance needed. Plain functions become Wants
through the Func adaptor:

    def no_timeouts(got: BaseException | None) -> str:
        if isinstance(got, TimeoutError):
            return diff_message(got, "anything but a timeout")
        return ""

    diff(err, Func(no_timeouts))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class Want(Protocol):
    """Protocol for expected-error descriptions."""

    def err_diff(self, got: BaseException | None) -> str:
        """Return "" if got is acceptable, otherwise a diagnostic."""
        ...


@dataclass(frozen=True, slots=True)
class Func:
    """Adaptor turning an ordinary function into a Want by calling it in lieu of err_diff()."""

    fn: Callable[[BaseException | None], str]

    def __post_init__(self) -> None:
        if not callable(self.fn):
            raise TypeError(f"Func requires a callable, got {type(self.fn).__name__}")

    def err_diff(self, got: BaseException | None) -> str:
        return self.fn(got)
