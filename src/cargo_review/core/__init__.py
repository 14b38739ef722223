# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models and helpers shared across cargo_review."""

from __future__ import annotations

from .models import Category, Diagnostic, Location, MalformedRecord, Report, ReportSection
from .severity import Severity

__all__ = [
    "Category",
    "Diagnostic",
    "Location",
    "MalformedRecord",
    "Report",
    "ReportSection",
    "Severity",
]
