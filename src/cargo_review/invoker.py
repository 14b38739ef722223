# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""External tool invocation behind an injectable interface."""

from __future__ import annotations

from typing import Protocol

from .errors import ToolInvocationError
from .modes import ToolCommand
from .runtime.process import CommandOptions, ProcessResult, run_command


class ToolInvoker(Protocol):
    """Run a :class:`ToolCommand` and return its captured output."""

    def __call__(self, command: ToolCommand) -> ProcessResult:
        """Execute ``command`` to completion.

        Raises:
            ToolInvocationError: If the command could not be started.
        """
        ...


class SubprocessInvoker:
    """Invoke commands as subprocesses, buffering their output."""

    def __call__(self, command: ToolCommand) -> ProcessResult:
        """Run ``command`` in its working directory.

        Args:
            command: Invocation produced by :func:`cargo_review.modes.build_command`.

        Returns:
            ProcessResult: Exit status and captured streams.

        Raises:
            ToolInvocationError: If the executable is missing or cannot start.
        """

        options = CommandOptions(cwd=command.cwd, env=command.env or None)
        try:
            return run_command(command.args, options=options)
        except FileNotFoundError as exc:
            raise ToolInvocationError(command.args, reason=str(exc)) from exc
        except OSError as exc:
            raise ToolInvocationError(
                command.args,
                reason=f"'{command.args[0]}' could not be started: {exc}",
            ) from exc


__all__ = ["SubprocessInvoker", "ToolInvoker"]
