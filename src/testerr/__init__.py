"""
testerr — specify the error a test expects, get a readable diff when it differs.

    from testerr import capture, diff, is_

    def test_lookup_missing_key():
        err = capture(store.get, "nope")
        if d := diff(err, is_(ERR_NOT_FOUND)):
            pytest.fail(f"store.get('nope') {d}")

A Want returns "" when the observed error is acceptable and a message of
the form "got error <err>; want <description>" otherwise. A None Want means
no error is expected.
"""

from testerr.assertions import ErrAssertions, capture
from testerr.config import TesterrSettings, get_settings
from testerr.diff import diff, diff_message
from testerr.log import configure_structlog
from testerr.matchers import as_, contains, equals, is_
from testerr.want import Func, Want

__all__ = [
    "Want",
    "Func",
    "diff",
    "diff_message",
    "equals",
    "is_",
    "contains",
    "as_",
    "capture",
    "ErrAssertions",
    "TesterrSettings",
    "get_settings",
    "configure_structlog",
]

__version__ = "0.1.0"
