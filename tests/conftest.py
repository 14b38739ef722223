# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from cargo_review.config import ReviewConfig, build_config
from tests.helpers.cargo_output import FakeInvoker


@pytest.fixture
def review_config(tmp_path: Path) -> ReviewConfig:
    """Return a default configuration rooted at ``tmp_path``."""

    return build_config(root=tmp_path)


@pytest.fixture
def fake_invoker() -> FakeInvoker:
    """Return an invoker that succeeds with no output."""

    return FakeInvoker()
