# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem helpers."""

from __future__ import annotations

from .paths import display_path, file_uri, resolve_location_path

__all__ = ["display_path", "file_uri", "resolve_location_path"]
