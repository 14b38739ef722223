# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for subprocess helpers and the default tool invoker."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from cargo_review.errors import ToolInvocationError
from cargo_review.invoker import SubprocessInvoker
from cargo_review.modes import ToolCommand
from cargo_review.runtime.process import CommandOptions, ProcessResult, run_command


def test_run_command_captures_streams(tmp_path: Path) -> None:
    script = "import os, sys; print('one'); print('two'); print(os.environ['REVIEW_FLAG'], file=sys.stderr)"
    result = run_command(
        [sys.executable, "-c", script],
        options=CommandOptions(cwd=tmp_path, env={"REVIEW_FLAG": "set"}),
    )
    assert result.ok
    assert result.stdout_lines == ("one", "two")
    assert result.stderr.strip() == "set"


def test_run_command_reports_exit_status(tmp_path: Path) -> None:
    result = run_command([sys.executable, "-c", "raise SystemExit(3)"], options=CommandOptions(cwd=tmp_path))
    assert result.returncode == 3
    assert not result.ok


def test_run_command_requires_arguments() -> None:
    with pytest.raises(ValueError):
        run_command([])


def test_process_result_splits_lines() -> None:
    result = ProcessResult(args=("cargo",), returncode=0, stdout="a\n\nb\n")
    assert result.stdout_lines == ("a", "", "b")


def test_merged_env_layers_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARGO_REVIEW_BASE", "base")
    merged = CommandOptions(env={"RUSTC_BOOTSTRAP": "1"}).merged_env()
    assert merged is not None
    assert merged["CARGO_REVIEW_BASE"] == "base"
    assert merged["RUSTC_BOOTSTRAP"] == "1"
    assert CommandOptions().merged_env() is None


def test_invoker_reports_missing_executable(tmp_path: Path) -> None:
    command = ToolCommand(args=("cargo-review-definitely-missing", "clippy"), cwd=tmp_path)
    with pytest.raises(ToolInvocationError) as excinfo:
        SubprocessInvoker()(command)
    assert excinfo.value.returncode is None
    assert "was not found on PATH" in str(excinfo.value)


def test_invoker_runs_command(tmp_path: Path) -> None:
    command = ToolCommand(args=(sys.executable, "-c", "print('{}')"), cwd=tmp_path)
    result = SubprocessInvoker()(command)
    assert result.stdout_lines == ("{}",)
