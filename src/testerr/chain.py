"""
Wrapped-chain traversal — the unwrap protocol for Python exceptions.

An exception "wraps" another when it was raised with an explicit cause:

    try:
        load()
    except OSError as e:
        raise ConfigError("cannot load settings") from e   # wraps e

Exception groups wrap every member of ``.exceptions``. Together these
relations form a tree, walked depth-first in pre-order. Implicit context
(``__context__``, the "during handling of the above exception" link) is
NOT wrapping: it records an accident of control flow, not a decoration.

Custom equality: an exception may define ``is_(target) -> bool`` to claim
equivalence with a target it is not equal to (e.g. a sentinel).
"""

from __future__ import annotations

import builtins
from typing import Iterator, TypeVar

E = TypeVar("E", bound=BaseException)


def children(err: BaseException) -> list[BaseException]:
    """Direct wrapped errors of err, cause first."""
    wrapped: list[BaseException] = []
    if err.__cause__ is not None:
        wrapped.append(err.__cause__)
    if isinstance(err, BaseExceptionGroup):
        wrapped.extend(err.exceptions)
    return wrapped


def walk(err: BaseException | None) -> Iterator[BaseException]:
    """
    Yield err and everything it wraps, depth-first, pre-order.

    Each exception object is yielded at most once, so hand-built cycles
    (``e.__cause__ = e``) terminate.
    """
    if err is None:
        return
    seen: set[int] = set()
    stack = [err]
    while stack:
        current = stack.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield current
        stack.extend(reversed(children(current)))


def is_in_chain(err: BaseException | None, target: BaseException | None) -> bool:
    """Report whether any error in err's tree matches target."""
    if target is None:
        return err is None
    for node in walk(err):
        if node == target:
            return True
        hook = getattr(node, "is_", None)
        if callable(hook) and hook(target):
            return True
    return False


def find_as(err: BaseException | None, error_type: type[E]) -> E | None:
    """First error in err's tree that is an instance of error_type."""
    for node in walk(err):
        if isinstance(node, error_type):
            return node
    return None


def type_name(cls: type) -> str:
    """Qualified name used in diagnostics: ``module.QualName``, builtins bare."""
    if cls.__module__ == builtins.__name__:
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"
