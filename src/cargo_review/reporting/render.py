# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console rendering for review reports."""

from __future__ import annotations

from typing import Final

from rich.console import Console
from rich.text import Text

from ..core.models import Report
from ..core.severity import Severity
from .links import LinkRenderer

NO_ISSUES_MESSAGE: Final[str] = "No issues found."
SECTION_STYLE: Final[str] = "bold"
NOTE_STYLE: Final[str] = "dim"


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def summary_line(report: Report) -> Text:
    """Return the closing summary for ``report``."""

    if report.is_clean:
        return Text(NO_ISSUES_MESSAGE, style="green")
    counts = report.severity_counts()
    total = sum(counts.values())
    return Text(
        f"Found {_plural(total, 'issue')}: "
        f"{_plural(counts[Severity.ERROR], 'error')}, {_plural(counts[Severity.WARNING], 'warning')}.",
        style="bold",
    )


def incomplete_note(report: Report) -> Text | None:
    """Return the note shown when malformed records were skipped."""

    if not report.is_incomplete:
        return None
    return Text(
        f"Skipped {_plural(len(report.skipped), 'malformed record')}; the report may be incomplete.",
        style=NOTE_STYLE,
    )


def format_report(report: Report, renderer: LinkRenderer) -> list[Text]:
    """Return every line of ``report`` in display order.

    Sections are introduced by their heading and diagnostic count, followed by
    one line per diagnostic. A summary line always closes the report, and a
    clean report states that no issues were found.

    Args:
        report: Grouped diagnostics to render.
        renderer: Link renderer anchored at the tool's working directory.

    Returns:
        list[Text]: Rendered lines; formatting is pure and repeatable.
    """

    lines: list[Text] = []
    for section in report.sections:
        lines.append(Text(f"{section.category.heading} ({len(section.diagnostics)})", style=SECTION_STYLE))
        lines.extend(renderer.render(diagnostic) for diagnostic in section.diagnostics)
        lines.append(Text())
    lines.append(summary_line(report))
    note = incomplete_note(report)
    if note is not None:
        lines.append(note)
    return lines


def render_report(report: Report, *, console: Console, renderer: LinkRenderer) -> None:
    """Print ``report`` to ``console``.

    Args:
        report: Grouped diagnostics to render.
        console: Rich console receiving the output.
        renderer: Link renderer anchored at the tool's working directory.
    """

    for line in format_report(report, renderer):
        console.print(line)


__all__ = ["NO_ISSUES_MESSAGE", "format_report", "incomplete_note", "render_report", "summary_line"]
