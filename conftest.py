"""Global test configuration and shared fixtures."""

from __future__ import annotations

import logging
import typing as t

import pytest

if t.TYPE_CHECKING:
    import collections.abc as cabc


@pytest.fixture
def debug_messages(
    caplog: pytest.LogCaptureFixture,
) -> cabc.Iterator[cabc.Callable[[], list[str]]]:
    """Yield a callable returning ``url_path`` debug messages logged so far."""

    def collect() -> list[str]:
        return [
            record.getMessage()
            for record in caplog.records
            if record.name.startswith("url_path")
        ]

    with caplog.at_level(logging.DEBUG, logger="url_path"):
        yield collect
