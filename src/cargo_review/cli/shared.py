# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Per-invocation CLI state: configuration, console and logger."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

import typer
from rich.console import Console
from rich.text import Text

from ..config import ReviewConfig
from ..core import logging as review_logging
from ..runtime.console import get_console_manager

_KEY_VALUE_PATTERN: Final[re.Pattern[str]] = re.compile(r"([\w-]+)=('.*?'|\".*?\"|\S+)")
_COMMAND_KEYS: Final[frozenset[str]] = frozenset({"command", "args"})


class CLIError(RuntimeError):
    """Failure that should end the CLI with ``exit_code``."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def highlight_pairs(message: str) -> Text:
    """Return ``message`` with ``key=value`` pairs emphasised.

    Args:
        message: Debug payload such as ``command='cargo test' returncode=0``.

    Returns:
        Text: Styled text whose plain form equals ``message``.
    """

    text = Text()
    cursor = 0
    for match in _KEY_VALUE_PATTERN.finditer(message):
        start, end = match.span()
        text.append(message[cursor:start], style="dim")
        key, value = match.groups()
        text.append(key, style="bold magenta")
        text.append("=", style="dim")
        text.append(value, style="bold blue" if key in _COMMAND_KEYS else "bold green")
        cursor = end
    text.append(message[cursor:], style="dim")
    return text


@dataclass(slots=True)
class CLILogger:
    """Status logger bound to the console and flags chosen on the command line."""

    console: Console
    use_emoji: bool
    use_color: bool = True
    debug_enabled: bool = False

    def info(self, message: str) -> None:
        review_logging.info(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        review_logging.ok(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        review_logging.warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def fail(self, message: str) -> None:
        review_logging.fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def echo(self, message: str) -> None:
        """Write ``message`` unstyled through Typer."""

        typer.echo(message)

    def debug(self, message: str) -> None:
        """Print ``message`` with a ``[debug]`` prefix when ``--debug`` is set."""

        if not self.debug_enabled:
            return
        line = Text("[debug] ", style="bold cyan")
        line.append_text(highlight_pairs(message))
        self.console.print(line)


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a :class:`CLILogger` for the given command-line flags.

    Args:
        emoji: Whether log lines may carry emoji.
        debug: Whether ``debug`` lines are printed.
        no_color: Whether colour output was disabled.

    Returns:
        CLILogger: Logger sharing the process-wide console.
    """

    console = get_console_manager().get(color=not no_color, emoji=emoji)
    return CLILogger(console=console, use_emoji=emoji, use_color=not no_color, debug_enabled=debug)


@dataclass(slots=True)
class CLIState:
    """State the application callback hands to every subcommand."""

    config: ReviewConfig
    logger: CLILogger


def require_state(ctx: typer.Context) -> CLIState:
    """Return the :class:`CLIState` created by the application callback.

    Raises:
        CLIError: If the callback did not run.
    """

    state = ctx.find_object(CLIState)
    if state is None:
        raise CLIError("cargo-review was not initialised", exit_code=2)
    return state


__all__ = ["CLIError", "CLILogger", "CLIState", "build_cli_logger", "highlight_pairs", "require_state"]
