# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared Rich consoles for log lines and review reports."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import lru_cache

from rich.console import Console


def detect_tty() -> bool:
    """Return ``True`` when stdout is attached to a terminal."""

    isatty = getattr(sys.stdout, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        return False


@dataclass(slots=True, frozen=True)
class ConsoleSettings:
    """Presentation flags a console is built for."""

    color: bool
    emoji: bool
    tty: bool

    @property
    def styled(self) -> bool:
        """Return ``True`` when ANSI styling and hyperlinks should be emitted."""

        return self.color and self.tty

    def build(self) -> Console:
        """Return a console honouring these settings.

        Consoles never bind a file, so output follows whatever ``sys.stdout``
        is at print time.
        """

        return Console(
            color_system="auto" if self.styled else None,
            force_terminal=self.tty,
            no_color=not self.styled,
            emoji=self.emoji,
            highlight=False,
            soft_wrap=True,
        )


class RichConsoleManager:
    """Hand out one cached :class:`Console` per :class:`ConsoleSettings`."""

    def __init__(self) -> None:
        self._consoles: dict[ConsoleSettings, Console] = {}

    def get(self, *, color: bool, emoji: bool) -> Console:
        """Return the console for ``color``/``emoji`` on the current stdout.

        Args:
            color: Whether colour output was requested.
            emoji: Whether emoji glyphs may be rendered.

        Returns:
            Console: Shared console for the resulting settings.
        """

        settings = ConsoleSettings(color=color, emoji=emoji, tty=detect_tty())
        console = self._consoles.get(settings)
        if console is None:
            console = self._consoles[settings] = settings.build()
        return console


@lru_cache(maxsize=1)
def get_console_manager() -> RichConsoleManager:
    """Return the process-wide console manager."""

    return RichConsoleManager()


__all__ = ["ConsoleSettings", "RichConsoleManager", "detect_tty", "get_console_manager"]
