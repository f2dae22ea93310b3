"""The split, resolve and join steps behind URL path normalization.

Each step is a pure function so callers needing only part of the pipeline
(for example the resolved segments of a path) can reuse it directly.
"""

from __future__ import annotations

import typing as t

if t.TYPE_CHECKING:
    import collections.abc as cabc

SEPARATOR: t.Final[str] = "/"
CURRENT_DIR: t.Final[str] = "."
PARENT_DIR: t.Final[str] = ".."


def split_segments(path: str) -> list[str]:
    """Split *path* on ``/`` keeping empty segments.

    ``""`` yields ``[""]`` and ``"/"`` yields ``["", ""]``; empty entries are
    discarded later by :func:`resolve_segments`.
    """
    return path.split(SEPARATOR)


def resolve_segments(segments: cabc.Iterable[str], *, absolute: bool) -> list[str]:
    """Fold *segments* left to right into their resolved form.

    Parameters
    ----------
    segments : Iterable[str]
        Raw segments as produced by :func:`split_segments`.
    absolute : bool
        Whether the path is anchored at the root. A ``..`` with nothing left
        to pop is dropped for absolute paths and kept for relative ones.

    Returns
    -------
    list[str]
        Segments free of empty and ``.`` entries. Any ``..`` entries are
        leading and only present for relative paths.
    """
    resolved: list[str] = []
    for segment in segments:
        if not segment or segment == CURRENT_DIR:
            continue
        if segment != PARENT_DIR:
            resolved.append(segment)
        elif resolved and resolved[-1] != PARENT_DIR:
            resolved.pop()
        elif not absolute:
            resolved.append(PARENT_DIR)
    return resolved


def join_segments(
    resolved: cabc.Sequence[str], *, absolute: bool, trailing_slash: bool
) -> str:
    """Reassemble *resolved* segments into a canonical path string.

    A trailing slash is only restored when there is a segment to attach it
    to. An empty relative result is spelled ``.`` and an empty absolute one
    ``/``.
    """
    joined = SEPARATOR.join(resolved)
    if absolute:
        joined = SEPARATOR + joined
    if trailing_slash and resolved:
        joined += SEPARATOR
    return joined or CURRENT_DIR


__all__ = [
    "CURRENT_DIR",
    "PARENT_DIR",
    "SEPARATOR",
    "join_segments",
    "resolve_segments",
    "split_segments",
]
