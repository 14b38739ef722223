# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reporting helpers: aggregation, link rendering and console output."""

from __future__ import annotations

from .aggregate import build_report
from .links import LinkRenderer, LinkTarget, location_reference
from .render import NO_ISSUES_MESSAGE, format_report, render_report

__all__ = [
    "NO_ISSUES_MESSAGE",
    "LinkRenderer",
    "LinkTarget",
    "build_report",
    "format_report",
    "location_reference",
    "render_report",
]
