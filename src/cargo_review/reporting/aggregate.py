# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Group diagnostics into a report ordered by category."""

from __future__ import annotations

from collections.abc import Iterable

from ..core.models import CATEGORY_ORDER, Category, Diagnostic, MalformedRecord, Report, ReportSection


def build_report(
    diagnostics: Iterable[Diagnostic],
    *,
    skipped: Iterable[MalformedRecord] = (),
) -> Report:
    """Group ``diagnostics`` by category.

    Sections follow :data:`CATEGORY_ORDER` and only non-empty categories
    appear. Within a section diagnostics keep their emission order; repeated
    identical findings are kept.

    Args:
        diagnostics: Findings in emission order.
        skipped: Notes for records the parser could not decode.

    Returns:
        Report: Grouped report; clean when ``diagnostics`` is empty.
    """

    buckets: dict[Category, list[Diagnostic]] = {category: [] for category in CATEGORY_ORDER}
    for diagnostic in diagnostics:
        buckets[diagnostic.category].append(diagnostic)
    sections = tuple(
        ReportSection(category=category, diagnostics=tuple(buckets[category]))
        for category in CATEGORY_ORDER
        if buckets[category]
    )
    return Report(sections=sections, skipped=tuple(skipped))


__all__ = ["build_report"]
