# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Decoder for ``cargo clippy --message-format=json`` records."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Final

from ..core.models import Category, Diagnostic, Location
from ..core.serialization import (
    JsonValue,
    coerce_optional_int,
    coerce_optional_str,
    first_mapping,
    mapping_sequence,
)
from ..core.severity import Severity
from ..errors import MalformedRecordError

CARGO_CLIPPY_DIAGNOSTIC_REASON: Final[str] = "compiler-message"
CLIPPY_SEVERITY_MAP: Final[dict[str, Severity]] = {
    "warning": Severity.WARNING,
    "error": Severity.ERROR,
}
HELP_LEVEL: Final[str] = "help"
FURTHER_INFORMATION_PREFIX: Final[str] = "for further information"
# rustc closes every build with span-less summaries such as
# "aborting due to 2 previous errors" or "3 warnings emitted".
_SUMMARY_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(aborting due to|\d+ warnings? emitted|could not compile)",
)
# rustc hard errors carry an `E` code or no code at all; lints always carry their lint name.
_RUSTC_ERROR_CODE: Final[re.Pattern[str]] = re.compile(r"^E\d{4}$")


def _primary_span(spans: list[dict[str, JsonValue]]) -> dict[str, JsonValue] | None:
    if not spans:
        return None
    return next((span for span in spans if span.get("is_primary")), spans[0])


def _span_location(span: Mapping[str, JsonValue] | None) -> Location | None:
    if span is None:
        return None
    file_name = coerce_optional_str(span.get("file_name"))
    if not file_name or not file_name.strip():
        return None
    return Location(
        file_path=file_name,
        line=coerce_optional_int(span.get("line_start")),
        column=coerce_optional_int(span.get("column_start")),
    )


def _help_messages(children: list[dict[str, JsonValue]]) -> tuple[str, ...]:
    collected: list[str] = []
    for child in children:
        if child.get("level") != HELP_LEVEL:
            continue
        text = (coerce_optional_str(child.get("message")) or "").strip()
        if text and not text.startswith(FURTHER_INFORMATION_PREFIX):
            collected.append(text)
    return tuple(collected)


def is_compile_error(severity: Severity, code: str | None) -> bool:
    """Return ``True`` for a rustc error that stops the build rather than a lint."""

    if severity is not Severity.ERROR:
        return False
    return code is None or _RUSTC_ERROR_CODE.match(code) is not None


class ClippyDecoder:
    """Translate cargo ``compiler-message`` records into lint diagnostics.

    Compile errors are not findings: they block lint collection. They are
    kept in :attr:`compile_errors` so the caller can tell a broken build from
    a lint run.
    """

    category: Final[Category] = Category.LINT

    def __init__(self) -> None:
        self._compile_errors: list[str] = []

    @property
    def compile_errors(self) -> tuple[str, ...]:
        """Return one line per compile error seen so far."""

        return tuple(self._compile_errors)

    def decode(self, record: Mapping[str, JsonValue]) -> Iterable[Diagnostic]:
        """Return the lint diagnostic carried by ``record``, if any.

        Args:
            record: One cargo JSON message.

        Returns:
            Iterable[Diagnostic]: Zero or one diagnostic. Records with other
            ``reason`` values describe build progress and carry no finding.

        Raises:
            MalformedRecordError: If the record is not a cargo message or a
                compiler message lacks its payload.
        """

        reason = record.get("reason")
        if not isinstance(reason, str):
            raise MalformedRecordError("record has no 'reason' field")
        if reason != CARGO_CLIPPY_DIAGNOSTIC_REASON:
            return ()
        message = first_mapping(record.get("message"))
        text = coerce_optional_str(message.get("message"))
        if not text or not text.strip():
            raise MalformedRecordError("compiler message has no text")

        level = str(message.get("level", "")).lower()
        severity = CLIPPY_SEVERITY_MAP.get(level)
        if severity is None:
            return ()
        spans = mapping_sequence(message.get("spans"))
        code = coerce_optional_str(first_mapping(message.get("code")).get("code"))
        if not spans and code is None and _SUMMARY_PATTERN.match(text.strip()):
            return ()

        location = _span_location(_primary_span(spans))
        if is_compile_error(severity, code):
            where = f" at {location.file_path}:{location.line}" if location is not None else ""
            prefix = f"{code}: " if code else ""
            self._compile_errors.append(f"{prefix}{text.strip()}{where}")
            return ()

        return (
            Diagnostic(
                category=self.category,
                severity=severity,
                message=text,
                location=location,
                code=code,
                help=_help_messages(mapping_sequence(message.get("children"))),
            ),
        )


__all__ = ["CARGO_CLIPPY_DIAGNOSTIC_REASON", "ClippyDecoder", "is_compile_error"]
