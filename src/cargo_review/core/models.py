# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the cargo_review package."""

from __future__ import annotations

import re
from collections import Counter
from enum import Enum
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .severity import Severity

_LABEL_NOISE: Final[re.Pattern[str]] = re.compile(r"[^a-z]")


class Category(str, Enum):
    """Closed set of finding categories, declared in report order."""

    LINT = "Lint"
    MANIFEST_ISSUE = "ManifestIssue"
    TEST_FAILURE = "TestFailure"
    BENCHMARK_FAILURE = "BenchmarkFailure"

    @property
    def heading(self) -> str:
        """Return the section heading used when rendering this category."""

        return CATEGORY_TITLES[self]

    @classmethod
    def from_label(cls, label: object) -> Category | None:
        """Return the category matching ``label`` ignoring case and separators.

        Args:
            label: Category label such as ``"Lint"``, ``"manifest_issue"`` or
                ``"TestFailure"``.

        Returns:
            Category | None: Matching category, or ``None`` when unknown.
        """

        if not isinstance(label, str):
            return None
        key = _LABEL_NOISE.sub("", label.lower())
        for member in cls:
            if _LABEL_NOISE.sub("", member.value.lower()) == key:
                return member
        return None


CATEGORY_TITLES: Final[dict[Category, str]] = {
    Category.LINT: "Lint",
    Category.MANIFEST_ISSUE: "Manifest issues",
    Category.TEST_FAILURE: "Test failures",
    Category.BENCHMARK_FAILURE: "Benchmark failures",
}

CATEGORY_ORDER: Final[tuple[Category, ...]] = tuple(Category)


class Location(BaseModel):
    """Source location attached to a diagnostic.

    Manifest findings only carry ``file_path``; lint and test findings usually
    also carry a line and column.
    """

    model_config = ConfigDict(frozen=True)

    file_path: str
    line: int | None = None
    column: int | None = None

    @field_validator("file_path")
    @classmethod
    def _require_path(cls, value: str) -> str:
        """Reject blank paths so every location names a file."""

        if not value.strip():
            raise ValueError("file_path must not be blank")
        return value

    @property
    def is_file_level(self) -> bool:
        """Return ``True`` when the location has no line information."""

        return self.line is None


class Diagnostic(BaseModel):
    """A single normalised finding reported by an external tool."""

    model_config = ConfigDict(frozen=True)

    category: Category
    severity: Severity
    message: str
    location: Location | None = None
    code: str | None = None
    help: tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("message")
    @classmethod
    def _require_message(cls, value: str) -> str:
        """Strip the message and reject empty values."""

        stripped = value.strip()
        if not stripped:
            raise ValueError("message must not be empty")
        return stripped


class MalformedRecord(BaseModel):
    """Note describing a raw record that could not be decoded."""

    model_config = ConfigDict(frozen=True)

    line_number: int
    text: str
    reason: str


class ReportSection(BaseModel):
    """Diagnostics of one category in their emission order."""

    model_config = ConfigDict(frozen=True)

    category: Category
    diagnostics: tuple[Diagnostic, ...]


class Report(BaseModel):
    """Grouped diagnostics for a single review run."""

    model_config = ConfigDict(frozen=True)

    sections: tuple[ReportSection, ...] = Field(default_factory=tuple)
    skipped: tuple[MalformedRecord, ...] = Field(default_factory=tuple)

    @property
    def is_clean(self) -> bool:
        """Return ``True`` when no diagnostics were reported."""

        return not self.sections

    @property
    def is_incomplete(self) -> bool:
        """Return ``True`` when malformed records were skipped."""

        return bool(self.skipped)

    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Return all diagnostics in report order."""

        return tuple(diagnostic for section in self.sections for diagnostic in section.diagnostics)

    def severity_counts(self) -> dict[Severity, int]:
        """Return the number of diagnostics per severity, including zero counts."""

        counts = Counter(diagnostic.severity for diagnostic in self.diagnostics())
        return {severity: counts.get(severity, 0) for severity in Severity}


__all__ = [
    "CATEGORY_ORDER",
    "CATEGORY_TITLES",
    "Category",
    "Diagnostic",
    "Location",
    "MalformedRecord",
    "Report",
    "ReportSection",
]
