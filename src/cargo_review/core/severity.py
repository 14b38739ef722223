# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity levels surfaced in review reports."""

    WARNING = "warning"
    ERROR = "error"


_SEVERITY_ALIASES: Final[dict[str, Severity]] = {
    "warning": Severity.WARNING,
    "warn": Severity.WARNING,
    "error": Severity.ERROR,
    "err": Severity.ERROR,
    "deny": Severity.ERROR,
}


def severity_from_label(
    label: object,
    *,
    mapping: Mapping[str, Severity] | None = None,
) -> Severity | None:
    """Return the :class:`Severity` matching ``label`` or ``None`` when unknown.

    Args:
        label: Severity label emitted by a tool. Matching is case-insensitive.
        mapping: Optional alias table overriding the default vocabulary.

    Returns:
        Severity | None: Matching severity, or ``None`` when the label is not
        recognised or is not a string.
    """

    if not isinstance(label, str):
        return None
    aliases = mapping if mapping is not None else _SEVERITY_ALIASES
    return aliases.get(label.strip().lower())


SEVERITY_MARKERS: Final[dict[Severity, str]] = {
    Severity.WARNING: "warning",
    Severity.ERROR: "error",
}

SEVERITY_STYLES: Final[dict[Severity, str]] = {
    Severity.WARNING: "yellow",
    Severity.ERROR: "red",
}


__all__ = ["SEVERITY_MARKERS", "SEVERITY_STYLES", "Severity", "severity_from_label"]
