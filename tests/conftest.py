"""
Shared test fixtures and helpers for the testerr test suite.

Provides a small family of errors mirroring how application code wraps
failures, and isolates cached settings between tests.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from testerr.config import get_settings


class StatusError(Exception):
    """Domain error carrying a payload field, like an HTTP or gRPC status."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status

    def __str__(self) -> str:
        return f"status {self.status}"


class SentinelAware(Exception):
    """Error that claims equivalence with a sentinel through the is_() hook."""

    def __init__(self, message: str, sentinel: BaseException) -> None:
        super().__init__(message)
        self._sentinel = sentinel

    def is_(self, target: BaseException) -> bool:
        return target is self._sentinel


def wrap(message: str, cause: BaseException) -> Exception:
    """Return a RuntimeError raised explicitly from cause."""
    try:
        raise RuntimeError(message) from cause
    except RuntimeError as e:
        return e


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop cached settings and TESTERR_ env vars around every test."""
    monkeypatch.delenv("TESTERR_NIL_TOKEN", raising=False)
    monkeypatch.delenv("TESTERR_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
