# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for reasoning about diagnostic paths."""

from __future__ import annotations

import os
from os import PathLike
from pathlib import Path

from ..errors import LocationResolutionError

_Pathish = str | PathLike[str] | Path


def _best_effort_resolve(path: Path) -> Path:
    """Return ``path`` resolved where possible without raising.

    Args:
        path: Candidate path to resolve.

    Returns:
        Path: Absolute variant when resolution succeeds; otherwise the closest
        achievable approximation.

    """

    try:
        return path.resolve(strict=False)
    except (OSError, RuntimeError):
        return path.absolute() if not path.is_absolute() else path


def resolve_location_path(path: _Pathish, *, root: _Pathish) -> Path:
    """Return the absolute path of an existing diagnostic file.

    Args:
        path: File path as reported by the tool, absolute or relative to ``root``.
        root: Directory the tool ran in.

    Returns:
        Path: Absolute path of the file.

    Raises:
        LocationResolutionError: If the file no longer exists.
    """

    raw_path = Path(path).expanduser()
    candidate = raw_path if raw_path.is_absolute() else Path(root).expanduser() / raw_path
    resolved = _best_effort_resolve(candidate)
    if not resolved.is_absolute() or not resolved.exists():
        raise LocationResolutionError(str(path))
    return resolved


def display_path(path: _Pathish, *, root: _Pathish) -> str:
    """Return ``path`` as shown in reports: relative to ``root`` when inside it.

    Args:
        path: File path as reported by the tool.
        root: Directory the tool ran in.

    Returns:
        str: POSIX-style path relative to ``root`` when ``path`` lies within
        it, otherwise ``path`` unchanged.
    """

    raw_path = Path(path)
    if not raw_path.is_absolute():
        return raw_path.as_posix()
    base = _best_effort_resolve(Path(root).expanduser())
    try:
        return _best_effort_resolve(raw_path).relative_to(base).as_posix()
    except ValueError:
        return raw_path.as_posix()


def file_uri(path: Path, *, line: int | None = None, column: int | None = None) -> str:
    """Return a ``file://`` URI for ``path`` with optional ``:line:column`` suffix.

    Args:
        path: Absolute file path.
        line: Optional one-based line number.
        column: Optional one-based column number.

    Returns:
        str: URI understood by terminals that support hyperlinks.
    """

    uri = path.as_uri() if path.is_absolute() else f"file://{os.fspath(path)}"
    if line is None:
        return uri
    if column is None:
        return f"{uri}:{line}"
    return f"{uri}:{line}:{column}"


__all__ = ["display_path", "file_uri", "resolve_location_path"]
