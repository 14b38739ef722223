# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Review modes and the cargo invocation pattern behind each one."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Final

from .config import ReviewConfig
from .core.models import Category
from .parsers import ClippyDecoder, LibtestDecoder, ManifestDecoder, RecordDecoder

CARGO: Final[str] = "cargo"
ARGUMENT_SEPARATOR: Final[str] = "--"
LIBTEST_JSON_FLAGS: Final[tuple[str, ...]] = ("-Z", "unstable-options", "--format", "json")
BOOTSTRAP_ENV: Final[dict[str, str]] = {"RUSTC_BOOTSTRAP": "1"}


class ReviewMode(str, Enum):
    """The four review subcommands."""

    CODE = "code"
    MANIFEST = "manifest"
    TESTS = "tests"
    BENCHMARKS = "benchmarks"

    @property
    def description(self) -> str:
        """Return the progress message shown before the tool runs."""

        return MODE_DESCRIPTIONS[self]


MODE_DESCRIPTIONS: Final[dict[ReviewMode, str]] = {
    ReviewMode.CODE: "Analysing code via clippy...",
    ReviewMode.MANIFEST: "Analysing manifest via metadata...",
    ReviewMode.TESTS: "Running tests...",
    ReviewMode.BENCHMARKS: "Running benchmark tests...",
}


@dataclass(slots=True, frozen=True)
class ToolCommand:
    """A fully specified external tool invocation."""

    args: tuple[str, ...]
    cwd: Path
    env: dict[str, str] = field(default_factory=dict)

    def display(self) -> str:
        """Return the command as a single shell-like string."""

        return " ".join(self.args)


def split_forwarded(args: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split forwarded arguments at the first literal ``--``.

    Args:
        args: Arguments forwarded from the command line.

    Returns:
        tuple[list[str], list[str]]: Arguments for cargo itself and arguments
        for the tool behind cargo (clippy or the test harness).
    """

    items = list(args)
    if ARGUMENT_SEPARATOR not in items:
        return items, []
    index = items.index(ARGUMENT_SEPARATOR)
    return items[:index], items[index + 1 :]


def build_command(mode: ReviewMode, config: ReviewConfig, forwarded: Sequence[str] = ()) -> ToolCommand:
    """Return the cargo invocation for ``mode``.

    Args:
        mode: Selected review mode.
        config: Review configuration supplying lint levels and harness options.
        forwarded: Arguments forwarded verbatim from the command line.

    Returns:
        ToolCommand: Invocation to hand to a :class:`ToolInvoker`.
    """

    cargo_args, tool_args = split_forwarded(forwarded)
    env: dict[str, str] = {}
    match mode:
        case ReviewMode.CODE:
            args = [
                CARGO,
                "clippy",
                "--message-format=json",
                *cargo_args,
                ARGUMENT_SEPARATOR,
                *tool_args,
                *config.lint.clippy_flags(),
            ]
        case ReviewMode.MANIFEST:
            args = [CARGO, "metadata", "--no-deps", "--format-version", "1", *cargo_args]
            if tool_args:
                args.extend([ARGUMENT_SEPARATOR, *tool_args])
        case ReviewMode.TESTS | ReviewMode.BENCHMARKS:
            args = [CARGO, "test"]
            if mode is ReviewMode.BENCHMARKS and config.harness.benchmark_features:
                args.extend(["--features", ",".join(config.harness.benchmark_features)])
            args.extend([*cargo_args, ARGUMENT_SEPARATOR, *tool_args, *LIBTEST_JSON_FLAGS])
            if config.harness.bootstrap_unstable:
                env.update(BOOTSTRAP_ENV)
    return ToolCommand(args=tuple(args), cwd=config.root, env=env)


def workspace_root_command(config: ReviewConfig) -> ToolCommand:
    """Return the query for the manifest of the enclosing cargo workspace."""

    return ToolCommand(
        args=(CARGO, "locate-project", "--workspace", "--message-format", "plain"),
        cwd=config.root,
    )


def decoder_for(mode: ReviewMode, config: ReviewConfig) -> RecordDecoder:
    """Return the record decoder interpreting ``mode``'s output."""

    match mode:
        case ReviewMode.CODE:
            return ClippyDecoder()
        case ReviewMode.MANIFEST:
            return ManifestDecoder(config.manifest)
        case ReviewMode.TESTS:
            return LibtestDecoder(Category.TEST_FAILURE)
        case ReviewMode.BENCHMARKS:
            return LibtestDecoder(Category.BENCHMARK_FAILURE)


__all__ = [
    "ReviewMode",
    "ToolCommand",
    "build_command",
    "decoder_for",
    "split_forwarded",
    "workspace_root_command",
]
