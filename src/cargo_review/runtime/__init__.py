# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime helpers for console output and subprocess execution."""

from __future__ import annotations

from .console import RichConsoleManager, detect_tty, get_console_manager
from .process import CommandOptions, ProcessResult, run_command

__all__ = [
    "CommandOptions",
    "ProcessResult",
    "RichConsoleManager",
    "detect_tty",
    "get_console_manager",
    "run_command",
]
