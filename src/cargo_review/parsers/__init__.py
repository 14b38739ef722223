# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Public parser exports for converting cargo output into diagnostics."""

from __future__ import annotations

from .base import DiagnosticParser, RecordDecoder, load_record
from .clippy import ClippyDecoder
from .libtest import LibtestDecoder, extract_panic
from .manifest import ManifestDecoder, parse_git_source
from .normalized import decode_normalized_record

__all__ = [
    "ClippyDecoder",
    "DiagnosticParser",
    "LibtestDecoder",
    "ManifestDecoder",
    "RecordDecoder",
    "decode_normalized_record",
    "extract_panic",
    "load_record",
    "parse_git_source",
]
