# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run one review: invoke cargo, parse its output, aggregate a report."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager, nullcontext
from dataclasses import dataclass
from pathlib import Path

from .config import ReviewConfig
from .core.models import Diagnostic, Report
from .errors import ToolInvocationError
from .invoker import SubprocessInvoker, ToolInvoker
from .modes import ReviewMode, ToolCommand, build_command, decoder_for
from .parsers import ClippyDecoder, DiagnosticParser, RecordDecoder
from .reporting.aggregate import build_report
from .runtime.process import ProcessResult
from .workspace import locate_workspace_root, temporary_clippy_config


@dataclass(slots=True, frozen=True)
class ReviewRun:
    """Outcome of a single review invocation.

    ``anchor`` is the directory relative diagnostic paths resolve against.
    ``compile_errors`` lists build failures that kept part of the code from
    being linted.
    """

    mode: ReviewMode
    command: ToolCommand
    process: ProcessResult
    report: Report
    anchor: Path
    compile_errors: tuple[str, ...] = ()


@contextmanager
def _prepared_workspace(mode: ReviewMode, config: ReviewConfig) -> Iterator[None]:
    context = temporary_clippy_config(config.root, config.lint) if mode is ReviewMode.CODE else nullcontext()
    with context:
        yield


def _compile_errors(decoder: RecordDecoder) -> tuple[str, ...]:
    if isinstance(decoder, ClippyDecoder):
        return decoder.compile_errors
    return ()


def _has_relative_location(diagnostics: Sequence[Diagnostic]) -> bool:
    return any(
        diagnostic.location is not None and not Path(diagnostic.location.file_path).is_absolute()
        for diagnostic in diagnostics
    )


def run_review(
    mode: ReviewMode,
    *,
    config: ReviewConfig,
    forwarded: Sequence[str] = (),
    invoker: ToolInvoker | None = None,
) -> ReviewRun:
    """Execute ``mode`` and return the grouped report.

    A tool that exits non-zero while reporting findings still yields a
    report. A run that fails without producing any finding counts as an
    invocation failure, including a build stopped by compile errors.

    Args:
        mode: Review mode selecting the cargo subcommand and decoder.
        config: Review configuration.
        forwarded: Arguments forwarded verbatim to cargo.
        invoker: Tool invoker; defaults to :class:`SubprocessInvoker`.

    Returns:
        ReviewRun: Command, captured process output and report.

    Raises:
        ToolInvocationError: If cargo could not start or failed outright.
        WorkspaceError: If the temporary clippy configuration cannot be written.
    """

    command = build_command(mode, config, forwarded)
    active_invoker = invoker if invoker is not None else SubprocessInvoker()
    with _prepared_workspace(mode, config):
        process = active_invoker(command)

    decoder = decoder_for(mode, config)
    parser = DiagnosticParser(decoder)
    diagnostics = list(parser.parse(process.stdout_lines))
    compile_errors = _compile_errors(decoder)
    if not process.ok and not diagnostics:
        reason = None
        if compile_errors:
            reason = f"'{' '.join(command.args[:2])}' stopped on {len(compile_errors)} compile error(s)"
        raise ToolInvocationError(
            command.args,
            returncode=process.returncode,
            stderr="\n".join([process.stderr, *compile_errors]),
            reason=reason,
        )

    anchor = locate_workspace_root(config, active_invoker) if _has_relative_location(diagnostics) else config.root
    report = build_report(diagnostics, skipped=parser.skipped)
    return ReviewRun(
        mode=mode,
        command=command,
        process=process,
        report=report,
        anchor=anchor,
        compile_errors=compile_errors,
    )


__all__ = ["ReviewRun", "run_review"]
