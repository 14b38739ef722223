# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by the review pipeline."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

_STDERR_TAIL_LINES: Final[int] = 20


class ReviewError(Exception):
    """Base class for errors raised by cargo_review."""


class ConfigError(ReviewError):
    """Raised when configuration input is invalid."""


class ToolInvocationError(ReviewError):
    """Raised when the external tool could not run or failed outright.

    This is distinct from a tool that ran successfully and reported findings:
    those produce a report, never this error.
    """

    def __init__(
        self,
        command: Sequence[str],
        *,
        returncode: int | None = None,
        stderr: str | None = None,
        reason: str | None = None,
    ) -> None:
        """Initialise the error with the failed command and its exit metadata.

        Args:
            command: Command sequence that was executed.
            returncode: Exit status, or ``None`` when the process never started.
            stderr: Captured standard error stream, if any.
            reason: Optional explanation overriding the default message.
        """

        self.command = tuple(command)
        self.returncode = returncode
        self.stderr = stderr or ""
        head = " ".join(self.command[:2]) if self.command else "<empty command>"
        if reason is None:
            reason = (
                f"'{head}' could not be started"
                if returncode is None
                else f"'{head}' exited with status {returncode} without reporting findings"
            )
        super().__init__(reason)

    def stderr_tail(self, limit: int = _STDERR_TAIL_LINES) -> list[str]:
        """Return the last ``limit`` non-blank stderr lines."""

        lines = [line for line in self.stderr.splitlines() if line.strip()]
        return lines[-limit:]


class WorkspaceError(ReviewError):
    """Raised when the working directory cannot be prepared for a tool run."""


class MalformedRecordError(ReviewError):
    """Raised when a single raw record cannot be decoded."""

    def __init__(self, reason: str, *, text: str = "", line_number: int = 0) -> None:
        """Initialise the error with the offending record.

        Args:
            reason: Why the record could not be decoded.
            text: Raw record text.
            line_number: One-based line number within the tool output.
        """

        super().__init__(reason)
        self.reason = reason
        self.text = text
        self.line_number = line_number


class LocationResolutionError(ReviewError):
    """Raised when a diagnostic path cannot be resolved to an existing absolute path."""

    def __init__(self, path: str) -> None:
        """Initialise the error with the unresolved ``path``."""

        super().__init__(f"could not resolve '{path}' to an absolute path")
        self.path = path


__all__ = [
    "ConfigError",
    "LocationResolutionError",
    "MalformedRecordError",
    "ReviewError",
    "ToolInvocationError",
    "WorkspaceError",
]
