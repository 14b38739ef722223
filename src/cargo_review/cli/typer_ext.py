# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Custom Typer helpers for commands that forward their arguments verbatim."""

from __future__ import annotations

from typing import Any, Final

import typer
from click.core import Context
from typer.core import TyperCommand, TyperGroup

FORWARDED_ARGS_KEY: Final[str] = "cargo_review.forwarded_args"


class PassthroughCommand(TyperCommand):
    """Typer command that stores its raw arguments instead of parsing them.

    Click drops a literal ``--`` while parsing, which would lose the boundary
    between cargo arguments and harness arguments. The raw list is kept in
    ``ctx.meta`` under :data:`FORWARDED_ARGS_KEY`; only a leading help flag is
    handled by Click itself.
    """

    def parse_args(self, ctx: Context, args: list[str]) -> list[str]:
        """Stash ``args`` for the command callback and parse nothing else.

        Args:
            ctx: Click context for the command invocation.
            args: Raw arguments following the command name.

        Returns:
            list[str]: Remaining arguments as reported by Click.
        """

        if args and args[0] in ctx.help_option_names:
            return super().parse_args(ctx, args)
        ctx.meta[FORWARDED_ARGS_KEY] = tuple(args)
        return super().parse_args(ctx, [])


def forwarded_args(ctx: typer.Context) -> tuple[str, ...]:
    """Return the arguments stashed by :class:`PassthroughCommand`."""

    return tuple(ctx.meta.get(FORWARDED_ARGS_KEY, ()))


def create_typer(*, cls: type[TyperGroup] | None = None, **kwargs: Any) -> typer.Typer:
    """Return a Typer application with the project's defaults applied.

    Args:
        cls: Optional Typer group subclass controlling command creation.
        **kwargs: Additional arguments forwarded to :class:`typer.Typer`.

    Returns:
        typer.Typer: Configured application.
    """

    kwargs.setdefault("no_args_is_help", True)
    kwargs.setdefault("add_completion", False)
    kwargs.setdefault("context_settings", {"help_option_names": ["-h", "--help"]})
    if cls is not None:
        kwargs["cls"] = cls
    return typer.Typer(**kwargs)


__all__ = ["FORWARDED_ARGS_KEY", "PassthroughCommand", "create_typer", "forwarded_args"]
