# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run external commands to completion and capture their output."""

from __future__ import annotations

import os
import shutil

# Bandit: commands are always argument lists; ``shell=True`` is never used.
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True, frozen=True)
class CommandOptions:
    """Working directory and environment overrides for one command."""

    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    discard_stdin: bool = True

    def merged_env(self) -> dict[str, str] | None:
        """Return ``os.environ`` with ``env`` applied, or ``None`` to inherit it."""

        if self.env is None:
            return None
        return {**os.environ, **self.env}


@dataclass(slots=True, frozen=True)
class ProcessResult:
    """Exit status and buffered streams of a finished command."""

    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""
    stdout_lines: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "stdout_lines", tuple(self.stdout.splitlines()))

    @classmethod
    def from_completed(cls, args: Sequence[str], completed: subprocess.CompletedProcess[str]) -> ProcessResult:
        """Return the result for a finished :class:`subprocess.CompletedProcess`."""

        return cls(
            args=tuple(args),
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

    @property
    def ok(self) -> bool:
        """Return ``True`` for a zero exit status."""

        return self.returncode == 0


def resolve_executable(args: Sequence[str]) -> list[str]:
    """Return ``args`` with the executable resolved to an absolute path.

    Args:
        args: Command and arguments.

    Returns:
        list[str]: Argument list whose first entry is absolute.

    Raises:
        ValueError: If ``args`` is empty.
        FileNotFoundError: If the executable is not on ``PATH``.
    """

    if not args:
        raise ValueError("cannot run an empty command")
    executable, *rest = args
    if Path(executable).is_absolute():
        return [executable, *rest]
    located = shutil.which(executable)
    if located is None:
        raise FileNotFoundError(f"Executable '{executable}' was not found on PATH")
    return [located, *rest]


def run_command(args: Sequence[str], *, options: CommandOptions | None = None) -> ProcessResult:
    """Run ``args`` to completion, capturing stdout and stderr as text.

    Undecodable bytes are replaced rather than raising.

    Args:
        args: Command and arguments.
        options: Working directory and environment; defaults to inheriting both.

    Returns:
        ProcessResult: Exit status and captured streams.

    Raises:
        FileNotFoundError: If the executable is not on ``PATH``.
        OSError: If the process cannot be started.
    """

    opts = options or CommandOptions()
    completed = subprocess.run(  # nosec B603 - argument list, no shell
        resolve_executable(args),
        cwd=opts.cwd,
        env=opts.merged_env(),
        check=False,
        capture_output=True,
        text=True,
        errors="replace",
        stdin=subprocess.DEVNULL if opts.discard_stdin else None,
    )
    return ProcessResult.from_completed(args, completed)


__all__ = ["CommandOptions", "ProcessResult", "resolve_executable", "run_command"]
