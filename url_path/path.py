"""Immutable URL path value type and its normalization entry points."""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as t

from ._segments import SEPARATOR, join_segments, resolve_segments, split_segments
from ._validators import validate_path_string

logger = logging.getLogger(__name__)

# Prefixes marking a link to another server. Detection only; such paths are
# still normalized as plain text.
_EXTERNAL_PREFIXES: t.Final[tuple[str, ...]] = ("http:", "https:")


@dc.dataclass(frozen=True, slots=True)
class UrlPath:
    """A URL path string that can be normalized without touching any server.

    The raw string is stored unchanged; construction neither validates the
    path structure nor normalizes it.

    Examples
    --------
    >>> UrlPath("src/md/./../../README.md").normalize()
    'README.md'
    >>> UrlPath("/a/b/../c").normalize()
    '/a/c'
    """

    raw: str

    def __post_init__(self) -> None:
        """Reject non-string inputs."""
        validate_path_string(self.raw)

    def __str__(self) -> str:
        """Return the raw path."""
        return self.raw

    @property
    def is_absolute(self) -> bool:
        """Return ``True`` when the path is anchored at the root."""
        return self.raw.startswith(SEPARATOR)

    @property
    def has_trailing_slash(self) -> bool:
        """Return ``True`` when a trailing ``/`` follows at least one character."""
        return len(self.raw) > 1 and self.raw.endswith(SEPARATOR)

    @property
    def is_external(self) -> bool:
        """Return ``True`` if the raw string starts with an HTTP(S) scheme.

        Detection only: :attr:`segments`, :attr:`last`, :attr:`parent` and
        :meth:`normalize` still treat such strings as plain text paths, so
        ``https://host/a`` has ``last == "a"`` rather than ``None``.
        """
        return self.raw.startswith(_EXTERNAL_PREFIXES)

    @property
    def segments(self) -> tuple[str, ...]:
        """Return the resolved segments of the path."""
        return tuple(
            resolve_segments(split_segments(self.raw), absolute=self.is_absolute)
        )

    @property
    def last(self) -> str | None:
        """Return the final resolved segment, or ``None`` if there is none."""
        segments = self.segments
        return segments[-1] if segments else None

    @property
    def parent(self) -> str | None:
        """Return the resolved segments before :attr:`last`, joined with ``/``."""
        segments = self.segments
        if len(segments) < 2:
            return None
        return SEPARATOR.join(segments[:-1])

    def normalize(self) -> str:
        """Return the canonical form of the path.

        Empty and ``.`` segments are removed and ``..`` consumes the segment
        before it. Excess ``..`` is dropped at the root of an absolute path
        and retained for a relative one. Absolute and trailing-slash markers
        of the input are preserved. A relative path that resolves to nothing
        yields ``"."``.
        """
        normalized = join_segments(
            self.segments,
            absolute=self.is_absolute,
            trailing_slash=self.has_trailing_slash,
        )
        logger.debug("Normalized URL path %r -> %r", self.raw, normalized)
        return normalized


def normalize(path: str) -> str:
    """Return the canonical form of *path*; see :meth:`UrlPath.normalize`."""
    return UrlPath(path).normalize()


__all__ = ["UrlPath", "normalize"]
