"""
Diffing an observed error against a Want.

    err = capture(parse, "not a number")
    if d := diff(err, is_(ERR_NOT_A_NUMBER)):
        pytest.fail(f"parse('not a number') {d}")

Every diagnostic has the same shape, built by diff_message:

    got error <str(got) or <nil>>; want <description>

so failure output reads uniformly whichever matcher produced it.
"""

from __future__ import annotations

from typing import Any

import structlog
from pydantic import ValidationError

from testerr.config import DEFAULT_NIL_TOKEN, get_settings
from testerr.want import Func, Want


def error_text(err: BaseException) -> str | None:
    """str(err), or None when the exception cannot be printed."""
    try:
        return str(err)
    except Exception as e:
        structlog.get_logger(__name__).warning(
            "testerr.unprintable_error",
            error_type=type(err).__qualname__,
            str_error=type(e).__qualname__,
        )
        return None


def nil_token() -> str:
    """Configured rendering of an absent error; "<nil>" if settings are invalid."""
    try:
        return get_settings().nil_token
    except ValidationError as e:
        structlog.get_logger(__name__).warning(
            "testerr.bad_settings",
            error_count=e.error_count(),
        )
        return DEFAULT_NIL_TOKEN


def render(got: BaseException | None) -> str:
    """Text a human would see printing the error; the nil token if absent."""
    if got is None:
        return nil_token()
    text = error_text(got)
    if text is None:
        return f"<{type(got).__qualname__} str() failed>"
    return text


def diff_message(got: BaseException | None, want_format: str, *args: Any) -> str:
    """
    Construct the canonical diff message for use in test failures.

    want_format is a printf-style template filled with args, exactly like
    a logging call: without args it is used verbatim, so a literal ``%``
    needs no escaping.

        diff_message(err, "status %d", 404)  # "got error ...; want status 404"

    Never raises. A template that rejects its args degrades to the template
    followed by the args, and a warning is logged.
    """
    description = want_format
    if args:
        try:
            description = want_format % args
        except (TypeError, ValueError, KeyError) as e:
            structlog.get_logger(__name__).warning(
                "testerr.bad_format",
                want_format=want_format,
                arg_count=len(args),
                error=str(e),
            )
            description = " ".join([want_format, *(str(a) for a in args)])
    return f"got error {render(got)}; want {description}"


def diff(got: BaseException | None, want: Want | None) -> str:
    """
    Compare the error with what is wanted.

    A None Want corresponds to a None error: no error expected, none
    occurred. Otherwise the Want decides and its result is returned as-is.
    A bare callable is accepted as shorthand for Func(callable).
    """
    if want is None:
        if got is None:
            return ""
        return diff_message(got, "nil")
    if not isinstance(want, Want):
        if not callable(want):
            raise TypeError(
                f"want must be a Want, a callable or None, got {type(want).__name__}"
            )
        want = Func(want)
    return want.err_diff(got)
