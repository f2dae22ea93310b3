"""Normalize URL-style paths by text manipulation alone.

Nothing is looked up on disk or over the network, so the paths need not
exist anywhere. Useful for comparing, caching or routing on logical paths.
"""

from __future__ import annotations

from ._segments import (
    CURRENT_DIR,
    PARENT_DIR,
    SEPARATOR,
    join_segments,
    resolve_segments,
    split_segments,
)
from .path import UrlPath, normalize

__all__ = [
    "CURRENT_DIR",
    "PARENT_DIR",
    "SEPARATOR",
    "UrlPath",
    "join_segments",
    "normalize",
    "resolve_segments",
    "split_segments",
]
