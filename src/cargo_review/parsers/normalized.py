# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Decoder for records already expressed in the normalised diagnostic schema.

The schema is a flat JSON object::

    {"category": "Lint", "severity": "Warning", "message": "unwrap used",
     "file": "src/lib.rs", "line": 10, "column": 5,
     "code": "clippy::unwrap_used", "help": ["use `?`"]}

``category``, ``severity`` and ``message`` are required; the rest is optional.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from pydantic import ValidationError

from ..core.models import Category, Diagnostic, Location
from ..core.serialization import JsonValue, coerce_optional_int, coerce_optional_str, string_sequence
from ..core.severity import severity_from_label
from ..errors import MalformedRecordError

NORMALIZED_CATEGORY_KEY: Final[str] = "category"


def decode_normalized_record(record: Mapping[str, JsonValue]) -> Diagnostic:
    """Return the diagnostic described by a normalised ``record``.

    Args:
        record: JSON object following the normalised schema.

    Returns:
        Diagnostic: Decoded finding.

    Raises:
        MalformedRecordError: If a required field is missing or invalid.
    """

    category = Category.from_label(record.get(NORMALIZED_CATEGORY_KEY))
    if category is None:
        raise MalformedRecordError(f"unknown category {record.get(NORMALIZED_CATEGORY_KEY)!r}")
    severity = severity_from_label(record.get("severity"))
    if severity is None:
        raise MalformedRecordError(f"unknown severity {record.get('severity')!r}")
    message = record.get("message")
    if not isinstance(message, str) or not message.strip():
        raise MalformedRecordError("record has no message")

    file_path = coerce_optional_str(record.get("file"))
    location = None
    if file_path and file_path.strip():
        location = Location(
            file_path=file_path,
            line=coerce_optional_int(record.get("line")),
            column=coerce_optional_int(record.get("column")),
        )
    try:
        return Diagnostic(
            category=category,
            severity=severity,
            message=message,
            location=location,
            code=coerce_optional_str(record.get("code")),
            help=tuple(string_sequence(record.get("help"))),
        )
    except ValidationError as exc:
        raise MalformedRecordError(f"invalid record: {exc.error_count()} validation error(s)") from exc


__all__ = ["NORMALIZED_CATEGORY_KEY", "decode_normalized_record"]
