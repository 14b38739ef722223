# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for report aggregation, link rendering and console output."""

from __future__ import annotations

from io import StringIO
from pathlib import Path

from rich.console import Console
from rich.style import Style
from rich.text import Text

from cargo_review.core.models import Category, Diagnostic, Location, MalformedRecord
from cargo_review.core.severity import Severity
from cargo_review.reporting import (
    NO_ISSUES_MESSAGE,
    LinkRenderer,
    build_report,
    format_report,
    location_reference,
    render_report,
)


def _diag(
    category: Category,
    message: str,
    *,
    severity: Severity = Severity.WARNING,
    location: Location | None = None,
) -> Diagnostic:
    return Diagnostic(category=category, severity=severity, message=message, location=location)


def _links(text: Text) -> list[str]:
    links: list[str] = []
    for span in text.spans:
        style = span.style
        if isinstance(style, Style) and style.link:
            links.append(style.link)
    return links


def test_sections_follow_category_order() -> None:
    diagnostics = [
        _diag(Category.TEST_FAILURE, "t1", severity=Severity.ERROR),
        _diag(Category.LINT, "l1"),
        _diag(Category.MANIFEST_ISSUE, "m1"),
        _diag(Category.LINT, "l2"),
    ]
    report = build_report(diagnostics)
    assert [section.category for section in report.sections] == [
        Category.LINT,
        Category.MANIFEST_ISSUE,
        Category.TEST_FAILURE,
    ]
    assert [diag.message for diag in report.sections[0].diagnostics] == ["l1", "l2"]


def test_grouping_keeps_emission_order_and_duplicates() -> None:
    first = _diag(Category.LINT, "same")
    report = build_report([first, _diag(Category.LINT, "other"), first])
    assert [diag.message for diag in report.diagnostics()] == ["same", "other", "same"]


def test_empty_input_renders_no_issues(tmp_path: Path) -> None:
    report = build_report([])
    assert report.is_clean
    lines = format_report(report, LinkRenderer(tmp_path))
    assert [line.plain for line in lines] == [NO_ISSUES_MESSAGE]


def test_severity_counts_and_summary(tmp_path: Path) -> None:
    report = build_report(
        [
            _diag(Category.LINT, "a"),
            _diag(Category.LINT, "b", severity=Severity.ERROR),
            _diag(Category.BENCHMARK_FAILURE, "c", severity=Severity.ERROR),
        ],
    )
    assert report.severity_counts() == {Severity.WARNING: 1, Severity.ERROR: 2}
    plain = [line.plain for line in format_report(report, LinkRenderer(tmp_path))]
    assert plain == [
        "Lint (2)",
        "warning a",
        "error b",
        "",
        "Benchmark failures (1)",
        "error c",
        "",
        "Found 3 issues: 2 errors, 1 warning.",
    ]


def test_incomplete_report_note(tmp_path: Path) -> None:
    report = build_report(
        [_diag(Category.MANIFEST_ISSUE, "no 'license' found")],
        skipped=[MalformedRecord(line_number=1, text="{not json", reason="invalid JSON")],
    )
    assert report.is_incomplete
    plain = [line.plain for line in format_report(report, LinkRenderer(tmp_path))]
    assert plain[-1] == "Skipped 1 malformed record; the report may be incomplete."


def test_rendering_is_idempotent(tmp_path: Path) -> None:
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "lib.rs").write_text("fn main() {}\n", encoding="utf-8")
    report = build_report([_diag(Category.LINT, "unwrap used", location=Location(file_path="src/lib.rs", line=10, column=5))])
    renderer = LinkRenderer(tmp_path)
    first = [line.plain for line in format_report(report, renderer)]
    second = [line.plain for line in format_report(report, renderer)]
    assert first == second


def test_location_reference_links_existing_file(tmp_path: Path) -> None:
    source = tmp_path / "src" / "lib.rs"
    source.parent.mkdir()
    source.write_text("fn main() {}\n", encoding="utf-8")
    target = location_reference(Location(file_path="src/lib.rs", line=10, column=5), root=tmp_path)
    assert target.text == "src/lib.rs:10:5"
    assert target.resolved
    assert target.url == f"{source.resolve().as_uri()}:10:5"


def test_location_reference_falls_back_without_file(tmp_path: Path) -> None:
    target = location_reference(Location(file_path="src/gone.rs", line=3, column=1), root=tmp_path)
    assert target.text == "src/gone.rs:3:1"
    assert target.url is None


def test_absolute_path_inside_root_is_shown_relative(tmp_path: Path) -> None:
    manifest = tmp_path / "Cargo.toml"
    manifest.write_text("[package]\n", encoding="utf-8")
    target = location_reference(Location(file_path=str(manifest)), root=tmp_path)
    assert target.text == "Cargo.toml"
    assert target.url == manifest.resolve().as_uri()


def test_render_line_carries_hyperlink(tmp_path: Path) -> None:
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "lib.rs").write_text("\n", encoding="utf-8")
    diagnostic = Diagnostic(
        category=Category.LINT,
        severity=Severity.ERROR,
        message="used `unwrap()` on an `Option` value",
        location=Location(file_path="src/lib.rs", line=10, column=5),
        code="clippy::unwrap_used",
        help=("consider using `expect()`",),
    )
    line = LinkRenderer(tmp_path).render(diagnostic)
    assert line.plain == (
        "error clippy::unwrap_used used `unwrap()` on an `Option` value "
        "help: consider using `expect()` at src/lib.rs:10:5"
    )
    assert _links(line) == [f"{(tmp_path / 'src' / 'lib.rs').resolve().as_uri()}:10:5"]


def test_render_line_without_resolvable_file_has_no_link(tmp_path: Path) -> None:
    diagnostic = _diag(Category.TEST_FAILURE, "it_works failed", location=Location(file_path="src/gone.rs", line=1))
    line = LinkRenderer(tmp_path).render(diagnostic)
    assert line.plain == "warning it_works failed at src/gone.rs:1"
    assert _links(line) == []


def test_render_report_writes_to_console(tmp_path: Path) -> None:
    buffer = StringIO()
    console = Console(file=buffer, color_system=None, width=200, emoji=False)
    report = build_report([_diag(Category.MANIFEST_ISSUE, "pallet: no 'authors' found")])
    render_report(report, console=console, renderer=LinkRenderer(tmp_path))
    output = buffer.getvalue()
    assert "Manifest issues (1)" in output
    assert "warning pallet: no 'authors' found" in output
    assert "Found 1 issue: 0 errors, 1 warning." in output
