"""
Test assertions built on diff().

diff() only computes the message; these helpers turn a non-empty diff into
an AssertionError for suites that prefer plain asserts to explicit
``if d := diff(...)`` checks.

Usage in tests:
    from testerr import ErrAssertions, capture, contains, is_

    def test_rejects_negative_age():
        err = capture(validate_age, -1)
        ErrAssertions.assert_no_diff(err, contains("non-negative"))

    def test_wraps_connection_error():
        ErrAssertions.assert_raises_want(fetch, is_(ERR_OFFLINE), "https://example.test")
"""

from __future__ import annotations

from typing import Any, Callable

from testerr.diff import diff
from testerr.want import Want


def capture(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Exception | None:
    """
    Call fn and return the exception it raised, or None.

    Only Exception subclasses are captured; KeyboardInterrupt, SystemExit
    and other BaseExceptions propagate.
    """
    try:
        fn(*args, **kwargs)
    except Exception as e:
        return e
    return None


class ErrAssertions:
    """Expressive assertions for observed errors."""

    @staticmethod
    def assert_no_diff(
        got: BaseException | None,
        want: Want | None,
        message: str = "",
    ) -> None:
        """
        Assert that got satisfies want.

            ErrAssertions.assert_no_diff(err, None)  # no error expected
        """
        d = diff(got, want)
        context = f"{message}: " if message else ""
        assert not d, f"{context}{d}"

    @staticmethod
    def assert_raises_want(
        fn: Callable[..., Any],
        want: Want | None,
        *args: Any,
        **kwargs: Any,
    ) -> Exception | None:
        """Call fn(*args, **kwargs), assert its error satisfies want, and return that error."""
        err = capture(fn, *args, **kwargs)
        name = getattr(fn, "__name__", repr(fn))
        ErrAssertions.assert_no_diff(err, want, f"{name}()")
        return err
