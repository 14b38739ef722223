# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for configuration models."""

from __future__ import annotations

from pathlib import Path

import pytest

from cargo_review.config import DEFAULT_DENY_LINTS, LintConfig, ManifestPolicy, build_config
from cargo_review.errors import ConfigError


def test_defaults(tmp_path: Path) -> None:
    config = build_config(root=tmp_path)
    assert config.root == tmp_path
    assert config.lint.deny == DEFAULT_DENY_LINTS
    assert "polkadot-v1.0.0" in config.manifest.supported_branches
    assert config.harness.benchmark_features == ("runtime-benchmarks",)
    assert config.output.color


def test_bare_lint_names_are_qualified() -> None:
    lint = LintConfig(warn=("too-many-lines",), deny=("rustc::unused", " unwrap_used "))
    assert lint.warn == ("clippy::too-many-lines",)
    assert lint.deny == ("rustc::unused", "clippy::unwrap_used")
    assert lint.clippy_flags() == ["-Wclippy::too-many-lines", "-Drustc::unused", "-Dclippy::unwrap_used"]


def test_threshold_sets_clippy_config_text() -> None:
    assert LintConfig(too_many_lines_threshold=50).clippy_config_text() == "too-many-lines-threshold=50\n"


@pytest.mark.parametrize(
    "overrides",
    [
        {"lint": {"too_many_lines_threshold": 0}},
        {"lint": {"deny": ["  "]}},
        {"manifest": {"required_fields": ["homepage"]}},
    ],
)
def test_invalid_overrides_raise_config_error(tmp_path: Path, overrides: dict[str, object]) -> None:
    with pytest.raises(ConfigError):
        build_config(root=tmp_path, **overrides)


def test_tracked_repositories_drop_trailing_slash() -> None:
    policy = ManifestPolicy(tracked_repositories=("https://github.com/paritytech/substrate/",))
    assert policy.tracked_repositories == ("https://github.com/paritytech/substrate",)
