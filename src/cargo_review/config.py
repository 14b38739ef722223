# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the cargo_review pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

CLIPPY_LINT_PREFIX: Final[str] = "clippy::"

DEFAULT_WARN_LINTS: Final[tuple[str, ...]] = ("clippy::too-many-lines",)
DEFAULT_DENY_LINTS: Final[tuple[str, ...]] = (
    "clippy::expect_used",
    "clippy::unwrap_used",
    "clippy::ok_expect",
    "clippy::integer_division",
    "clippy::indexing_slicing",
    "clippy::arithmetic_side_effects",
    "clippy::match_on_vec_items",
    "clippy::manual_strip",
    "clippy::await_holding_refcell_ref",
)
DEFAULT_TRACKED_REPOSITORIES: Final[tuple[str, ...]] = (
    "https://github.com/paritytech/substrate",
    "https://github.com/paritytech/cumulus",
    "https://github.com/paritytech/polkadot",
    "https://github.com/paritytech/polkadot-sdk",
)
DEFAULT_SUPPORTED_BRANCHES: Final[tuple[str, ...]] = (
    "polkadot-v0.9.42",
    "polkadot-v0.9.43",
    "polkadot-v1.0.0",
)
DEFAULT_REQUIRED_FIELDS: Final[tuple[str, ...]] = ("authors", "description", "license", "rust_version")
KNOWN_REQUIRED_FIELDS: Final[frozenset[str]] = frozenset(DEFAULT_REQUIRED_FIELDS)


class LintConfig(BaseModel):
    """Clippy lint levels and the temporary clippy configuration."""

    model_config = ConfigDict(validate_assignment=True)

    warn: tuple[str, ...] = DEFAULT_WARN_LINTS
    deny: tuple[str, ...] = DEFAULT_DENY_LINTS
    too_many_lines_threshold: int = Field(default=30, ge=1)
    clippy_config_name: str = "clippy.toml"

    @field_validator("warn", "deny")
    @classmethod
    def _qualify_lints(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Prefix bare lint names with ``clippy::`` and reject blanks.

        Args:
            value: Lint names supplied by the caller.

        Returns:
            tuple[str, ...]: Fully qualified lint names.

        Raises:
            ValueError: If a lint name is blank.
        """

        qualified: list[str] = []
        for raw in value:
            name = raw.strip()
            if not name:
                raise ValueError("lint names must not be blank")
            qualified.append(name if "::" in name else f"{CLIPPY_LINT_PREFIX}{name}")
        return tuple(qualified)

    def clippy_flags(self) -> list[str]:
        """Return the ``-W``/``-D`` flags passed to clippy."""

        return [f"-W{lint}" for lint in self.warn] + [f"-D{lint}" for lint in self.deny]

    def clippy_config_text(self) -> str:
        """Return the contents of the temporary ``clippy.toml``."""

        return f"too-many-lines-threshold={self.too_many_lines_threshold}\n"


class ManifestPolicy(BaseModel):
    """Rules applied to ``cargo metadata`` packages."""

    model_config = ConfigDict(validate_assignment=True)

    tracked_repositories: tuple[str, ...] = DEFAULT_TRACKED_REPOSITORIES
    supported_branches: frozenset[str] = frozenset(DEFAULT_SUPPORTED_BRANCHES)
    required_fields: tuple[str, ...] = DEFAULT_REQUIRED_FIELDS

    @field_validator("required_fields")
    @classmethod
    def _known_fields(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Reject required fields the manifest checks do not understand."""

        unknown = sorted(set(value) - KNOWN_REQUIRED_FIELDS)
        if unknown:
            raise ValueError(f"unknown manifest field(s): {', '.join(unknown)}")
        return value

    @field_validator("tracked_repositories")
    @classmethod
    def _strip_trailing_slash(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(repo.rstrip("/") for repo in value)


class HarnessConfig(BaseModel):
    """Settings for test and benchmark runs."""

    model_config = ConfigDict(validate_assignment=True)

    bootstrap_unstable: bool = True
    benchmark_features: tuple[str, ...] = ("runtime-benchmarks",)


class OutputConfig(BaseModel):
    """Console rendering preferences."""

    model_config = ConfigDict(validate_assignment=True)

    color: bool = True
    emoji: bool = True
    debug: bool = False


class ReviewConfig(BaseModel):
    """Top-level configuration for a review run."""

    model_config = ConfigDict(validate_assignment=True)

    root: Path = Field(default_factory=Path.cwd)
    lint: LintConfig = Field(default_factory=LintConfig)
    manifest: ManifestPolicy = Field(default_factory=ManifestPolicy)
    harness: HarnessConfig = Field(default_factory=HarnessConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def build_config(**overrides: object) -> ReviewConfig:
    """Return a validated :class:`ReviewConfig` built from ``overrides``.

    Args:
        **overrides: Field values passed to :class:`ReviewConfig`.

    Returns:
        ReviewConfig: Validated configuration.

    Raises:
        ConfigError: If validation fails.
    """

    try:
        return ReviewConfig.model_validate(overrides)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


__all__ = [
    "DEFAULT_DENY_LINTS",
    "DEFAULT_SUPPORTED_BRANCHES",
    "DEFAULT_TRACKED_REPOSITORIES",
    "DEFAULT_WARN_LINTS",
    "LintConfig",
    "ManifestPolicy",
    "OutputConfig",
    "ReviewConfig",
    "HarnessConfig",
    "build_config",
]
