# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Progress and status lines printed around a review run."""

from __future__ import annotations

from enum import Enum

from rich.text import Text

from ..runtime.console import detect_tty, get_console_manager


class LogLevel(Enum):
    """Status levels with their emoji prefix and colour."""

    INFO = ("ℹ️ ", "cyan")
    OK = ("✅ ", "green")
    WARN = ("⚠️ ", "yellow")
    FAIL = ("❌ ", "red")

    @property
    def glyph(self) -> str:
        return self.value[0]

    @property
    def style(self) -> str:
        return self.value[1]


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, else an empty string."""

    return symbol if enable else ""


def log(level: LogLevel, msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print ``msg`` at ``level`` on the shared console.

    Args:
        level: Status level selecting the prefix and colour.
        msg: Message text.
        use_emoji: Whether to prefix the level's emoji.
        use_color: Explicit colour preference; defaults to TTY detection.
    """

    color = detect_tty() if use_color is None else use_color
    console = get_console_manager().get(color=color, emoji=use_emoji)
    line = Text(emoji(level.glyph, use_emoji) + msg, style=level.style if color else "")
    console.print(line)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    log(LogLevel.INFO, msg, use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    log(LogLevel.OK, msg, use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    log(LogLevel.WARN, msg, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    log(LogLevel.FAIL, msg, use_emoji=use_emoji, use_color=use_color)


__all__ = ["LogLevel", "emoji", "fail", "info", "log", "ok", "warn"]
