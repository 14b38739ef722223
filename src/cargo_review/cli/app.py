# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""The ``cargo-review`` Typer application and its global options."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .. import __version__
from ..config import build_config
from ..errors import ConfigError
from .commands import register_commands
from .shared import CLIState, build_cli_logger
from .typer_ext import create_typer

app = create_typer(help="Reformat cargo lint, manifest, test and benchmark output for code-submission audits.")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"cargo-review {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    root: Annotated[
        Path,
        typer.Option(
            "--root",
            exists=True,
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
            help="Crate or workspace directory cargo runs in.",
        ),
    ] = Path(),
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")] = False,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in log output.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Print the executed command and skipped records.")] = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Prepare configuration and logging shared by every subcommand."""

    del version
    try:
        config = build_config(
            root=root,
            output={"color": not no_color, "emoji": not no_emoji, "debug": debug},
        )
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc
    logger = build_cli_logger(emoji=not no_emoji, debug=debug, no_color=no_color)
    ctx.obj = CLIState(config=config, logger=logger)


register_commands(app)

__all__ = ["app", "main"]
