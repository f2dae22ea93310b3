"""Shared validation helpers."""

from __future__ import annotations


def validate_path_string(path: object) -> None:
    """Ensure *path* is a text string suitable for normalization."""
    if not isinstance(path, str):
        msg = f"path must be a str, not {type(path).__name__}"
        raise TypeError(msg)
