# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Workspace preparation around external tool runs."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Final

from .config import LintConfig, ReviewConfig
from .errors import WorkspaceError
from .invoker import ToolInvoker
from .modes import workspace_root_command

CARGO_MANIFEST: Final[str] = "Cargo.toml"


@contextmanager
def temporary_clippy_config(root: Path, lint: LintConfig) -> Iterator[Path | None]:
    """Provide a ``clippy.toml`` for the duration of a lint run.

    An existing configuration is left untouched. Otherwise a file holding the
    configured thresholds is written and removed again on exit, even when the
    run fails.

    Args:
        root: Crate or workspace root clippy runs in.
        lint: Lint configuration supplying the file name and thresholds.

    Yields:
        Path | None: Path of the temporary file, or ``None`` when the
        project already ships its own configuration.

    Raises:
        WorkspaceError: If the temporary file cannot be written.
    """

    config_path = root / lint.clippy_config_name
    if config_path.exists():
        yield None
        return
    try:
        config_path.write_text(lint.clippy_config_text(), encoding="utf-8")
    except OSError as exc:
        raise WorkspaceError(f"could not write {config_path}: {exc.strerror or exc}") from exc
    try:
        yield config_path
    finally:
        config_path.unlink(missing_ok=True)


def locate_workspace_root(config: ReviewConfig, invoker: ToolInvoker) -> Path:
    """Return the directory cargo reports source paths against.

    Cargo prints span and panic paths relative to the workspace root, which
    differs from ``config.root`` when the run starts inside a member crate.
    Unusable ``cargo locate-project`` output falls back to ``config.root``.

    Args:
        config: Review configuration supplying the working directory.
        invoker: Tool invoker used to query cargo.

    Returns:
        Path: Absolute workspace root directory.
    """

    result = invoker(workspace_root_command(config))
    if not result.ok:
        return config.root
    manifest = next((line.strip() for line in result.stdout_lines if line.strip()), "")
    manifest_path = Path(manifest)
    if not manifest_path.is_absolute() or manifest_path.name != CARGO_MANIFEST:
        return config.root
    return manifest_path.parent


__all__ = ["locate_workspace_root", "temporary_clippy_config"]
