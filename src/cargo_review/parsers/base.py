# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared parser infrastructure for line-delimited JSON tool output."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from typing import Final, Protocol, TypeAlias

from pydantic import ValidationError

from ..core.models import Diagnostic, MalformedRecord
from ..core.serialization import JsonValue
from ..errors import MalformedRecordError
from .normalized import NORMALIZED_CATEGORY_KEY, decode_normalized_record

JsonRecord: TypeAlias = "dict[str, JsonValue]"

_PREVIEW_LIMIT: Final[int] = 120


class RecordDecoder(Protocol):
    """Turn one decoded JSON record into zero or more diagnostics."""

    def decode(self, record: JsonRecord) -> Iterable[Diagnostic]:
        """Return the diagnostics carried by ``record``.

        Raises:
            MalformedRecordError: If ``record`` does not match the pinned schema.
        """
        ...


def load_record(text: str, *, line_number: int) -> JsonRecord:
    """Decode ``text`` as a JSON object.

    Args:
        text: Raw record text.
        line_number: One-based position of the record in the tool output.

    Returns:
        JsonRecord: The decoded object.

    Raises:
        MalformedRecordError: If ``text`` is not valid JSON or not an object.
    """

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedRecordError(f"invalid JSON: {exc.msg}", text=text, line_number=line_number) from exc
    if not isinstance(payload, dict):
        raise MalformedRecordError("record is not a JSON object", text=text, line_number=line_number)
    return {str(key): value for key, value in payload.items()}


def _preview(text: str) -> str:
    if len(text) <= _PREVIEW_LIMIT:
        return text
    return f"{text[: _PREVIEW_LIMIT - 1]}…"


class DiagnosticParser:
    """Decode a tool's output stream into diagnostics, one record per line.

    Records carrying a ``category`` key use the normalised record schema and
    bypass the tool decoder. Malformed records are skipped and collected in
    :attr:`skipped` so one bad line never hides the remaining findings.
    """

    def __init__(self, decoder: RecordDecoder) -> None:
        """Initialise the parser with the tool-specific ``decoder``."""

        self._decoder = decoder
        self._skipped: list[MalformedRecord] = []

    @property
    def skipped(self) -> tuple[MalformedRecord, ...]:
        """Return notes for records skipped so far."""

        return tuple(self._skipped)

    def parse(self, lines: Iterable[str]) -> Iterator[Diagnostic]:
        """Yield diagnostics lazily from ``lines``.

        Args:
            lines: Raw output lines from one tool execution.

        Yields:
            Diagnostic: Findings in the order the tool emitted them.
        """

        for line_number, raw_line in enumerate(lines, start=1):
            text = raw_line.strip()
            if not text:
                continue
            try:
                decoded = self._decode_line(text, line_number=line_number)
            except MalformedRecordError as exc:
                self._skipped.append(
                    MalformedRecord(
                        line_number=exc.line_number or line_number,
                        text=_preview(exc.text or text),
                        reason=exc.reason,
                    ),
                )
                continue
            yield from decoded

    def _decode_line(self, text: str, *, line_number: int) -> list[Diagnostic]:
        record = load_record(text, line_number=line_number)
        try:
            if NORMALIZED_CATEGORY_KEY in record:
                return [decode_normalized_record(record)]
            return list(self._decoder.decode(record))
        except ValidationError as exc:
            raise MalformedRecordError(
                f"invalid record: {exc.error_count()} validation error(s)",
                text=text,
                line_number=line_number,
            ) from exc


__all__ = ["DiagnosticParser", "JsonRecord", "RecordDecoder", "load_record"]
