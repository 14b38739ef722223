# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Review subcommands: ``code``, ``manifest``, ``tests`` and ``benchmarks``."""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

import typer

from ..errors import ReviewError, ToolInvocationError
from ..invoker import SubprocessInvoker
from ..modes import ReviewMode
from ..pipeline import ReviewRun, run_review
from ..reporting.links import LinkRenderer
from ..reporting.render import render_report
from .shared import CLILogger, CLIState, require_state
from .typer_ext import PassthroughCommand, forwarded_args

TOOL_FAILURE_EXIT_CODE: Final[int] = 1

COMMAND_HELP: Final[dict[ReviewMode, str]] = {
    ReviewMode.CODE: "Analyses code for known issues via cargo clippy.",
    ReviewMode.MANIFEST: "Analyses the manifest for known issues via cargo metadata.",
    ReviewMode.TESTS: "Runs the test suite and reports failing tests.",
    ReviewMode.BENCHMARKS: "Runs benchmark tests and reports failing benchmarks.",
}


def _log_run(logger: CLILogger, run: ReviewRun) -> None:
    logger.debug(f"command={run.command.display()!r} returncode={run.process.returncode} anchor={run.anchor}")
    for error in run.compile_errors:
        logger.debug(f"compile_error={error!r}")
    for record in run.report.skipped:
        logger.debug(f'skipped line={record.line_number} reason="{record.reason}" record={record.text!r}')


def execute_mode(ctx: typer.Context, mode: ReviewMode) -> None:
    """Run ``mode`` and print its report, exiting non-zero on tool failure.

    Args:
        ctx: Typer context carrying the :class:`CLIState`.
        mode: Review mode to execute.

    Raises:
        typer.Exit: With status ``1`` when cargo could not run or the
            workspace could not be prepared.
    """

    state: CLIState = require_state(ctx)
    logger = state.logger
    logger.info(mode.description)
    try:
        run = run_review(
            mode,
            config=state.config,
            forwarded=forwarded_args(ctx),
            invoker=SubprocessInvoker(),
        )
    except ReviewError as exc:
        logger.fail(f"{type(exc).__name__}: {exc}")
        if isinstance(exc, ToolInvocationError):
            for line in exc.stderr_tail():
                logger.echo(f"  {line}")
        raise typer.Exit(code=TOOL_FAILURE_EXIT_CODE) from exc

    _log_run(logger, run)
    if run.compile_errors:
        logger.warn(f"{len(run.compile_errors)} compile error(s) kept part of the code from being linted.")
    render_report(run.report, console=logger.console, renderer=LinkRenderer(run.anchor))


def _command_for(mode: ReviewMode) -> Callable[[typer.Context], None]:
    def command(ctx: typer.Context) -> None:
        execute_mode(ctx, mode)

    command.__name__ = f"{mode.value}_command"
    command.__doc__ = COMMAND_HELP[mode]
    return command


def register_commands(app: typer.Typer) -> None:
    """Register one passthrough command per review mode on ``app``.

    Args:
        app: Typer application receiving the command registrations.
    """

    for mode in ReviewMode:
        app.command(name=mode.value, cls=PassthroughCommand, help=COMMAND_HELP[mode])(_command_for(mode))


__all__ = ["execute_mode", "register_commands"]
