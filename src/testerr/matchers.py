"""
Built-in Wants.

    equals(err)          got == err, exactly; prefer is_()
    is_(err)             err is got or is wrapped somewhere in got's tree
    contains("timeout")  str(got) contains the substring (got must not be None)
    as_(T, match)        an instance of T is in got's tree and match() accepts it

as_ is the extension point for domain errors. The matcher does the
extraction and formatting; the caller only inspects the payload:

    want_404 = as_(HTTPStatusError, lambda e: "" if e.status == 404 else "status 404")

or, for longer checks, as a decorator:

    @as_(HTTPStatusError)
    def want_404(e: HTTPStatusError) -> str:
        if e.status != 404:
            return f"HTTP status 404, not {e.status}"
        return ""

A non-empty string from match() becomes the whole "want" clause, so there
is no need to repeat the got error in it.
"""

from __future__ import annotations

import json
from typing import Callable, TypeVar, overload

from testerr.chain import find_as, is_in_chain, type_name
from testerr.diff import diff_message, error_text, render
from testerr.want import Func, Want

E = TypeVar("E", bound=BaseException)


def _require_error(value: object, factory: str) -> None:
    if value is None or isinstance(value, BaseException):
        return
    if isinstance(value, type) and issubclass(value, BaseException):
        raise TypeError(
            f"{factory}() takes an exception instance, got the class "
            f"{value.__name__}; use as_() to match on type"
        )
    raise TypeError(f"{factory}() takes an exception instance or None, got {type(value).__name__}")


def equals(want: BaseException | None) -> Want:
    """
    Check that ``got == want``.

    Not chain aware: an error that wraps ``want`` does not match.
    is_() SHOULD be used instead; equals() remains for callers that need
    the exact object.
    """
    _require_error(want, "equals")

    def err_diff(got: BaseException | None) -> str:
        if got == want:
            return ""
        return diff_message(got, "== %s", render(want))

    return Func(err_diff)


def is_(target: BaseException | None) -> Want:
    """Check that got is, or wraps, target (see testerr.chain.is_in_chain)."""
    _require_error(target, "is_")

    def err_diff(got: BaseException | None) -> str:
        if is_in_chain(got, target):
            return ""
        return diff_message(got, "error that Is() %s", render(target))

    return Func(err_diff)


def contains(substr: str) -> Want:
    """
    Check that str(got) contains substr.

    The empty substring is NOT the same as no error: it matches any error
    but never None. Use a None Want to expect success. An error whose
    str() raises never matches.

    The substring is shown JSON-quoted in diagnostics, so control
    characters appear as \\u escapes ("\\u0001"), not hex ("\\x01").
    """
    if not isinstance(substr, str):
        raise TypeError(f"contains() takes a str, got {type(substr).__name__}")
    quoted = json.dumps(substr, ensure_ascii=False)

    def err_diff(got: BaseException | None) -> str:
        text = None if got is None else error_text(got)
        if text is not None and substr in text:
            return ""
        return diff_message(got, "containing substring %s", quoted)

    return Func(err_diff)


@overload
def as_(error_type: type[E], match: Callable[[E], str | None], /) -> Want: ...
@overload
def as_(error_type: type[E], /) -> Callable[[Callable[[E], str | None]], Want]: ...


def as_(error_type, match=None, /):
    """
    Find the first error of error_type in got's tree and pass it to match().

    match() returns the expected-value description on mismatch and ""
    (or None) when the error is acceptable. If no error of error_type is
    present, match() is not called and the diagnostic names the type.
    """
    if not (isinstance(error_type, type) and issubclass(error_type, BaseException)):
        raise TypeError(f"as_() takes an exception class, got {error_type!r}")

    def build(fn: Callable[[E], str | None]) -> Want:
        if not callable(fn):
            raise TypeError(f"as_() match must be callable, got {type(fn).__name__}")

        def err_diff(got: BaseException | None) -> str:
            found = find_as(got, error_type)
            if found is None:
                return diff_message(got, "error tree containing type %s", type_name(error_type))
            if d := fn(found):
                return diff_message(got, "%s", d)
            return ""

        return Func(err_diff)

    if match is None:
        return build
    return build(match)
