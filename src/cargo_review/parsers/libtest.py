# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Decoder for libtest ``--format json`` events emitted by ``cargo test``."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Final

from ..core.models import Category, Diagnostic, Location
from ..core.serialization import JsonValue, coerce_optional_str
from ..core.severity import Severity
from ..errors import MalformedRecordError

TEST_RECORD_TYPES: Final[frozenset[str]] = frozenset({"test", "bench"})
FAILED_EVENT: Final[str] = "failed"
TIMEOUT_EVENT: Final[str] = "timeout"
NOTE_PREFIX: Final[str] = "note:"

# Covers both panic formats:
#   thread 'x' panicked at src/lib.rs:10:5:
#   thread 'x' panicked at 'boom', src/lib.rs:10:5
_PANIC_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"panicked at (?:'(?P<quoted>.*)', )?(?P<file>[^\s:'][^:]*):(?P<line>\d+):(?P<column>\d+):?",
)


@dataclass(slots=True, frozen=True)
class PanicDetails:
    """Panic message and location extracted from captured test output."""

    message: str | None
    location: Location | None


def extract_panic(output: str | None) -> PanicDetails:
    """Return the first panic message and location found in ``output``.

    Args:
        output: Captured stdout of a failed test.

    Returns:
        PanicDetails: Empty details when no panic line is present.
    """

    if not output:
        return PanicDetails(message=None, location=None)
    lines = output.splitlines()
    for index, line in enumerate(lines):
        match = _PANIC_PATTERN.search(line)
        if match is None:
            continue
        location = Location(
            file_path=match.group("file"),
            line=int(match.group("line")),
            column=int(match.group("column")),
        )
        message = match.group("quoted")
        if message is None:
            message = next(
                (
                    candidate.strip()
                    for candidate in lines[index + 1 :]
                    if candidate.strip() and not candidate.strip().startswith(NOTE_PREFIX)
                ),
                None,
            )
        return PanicDetails(message=message, location=location)
    return PanicDetails(message=None, location=None)


class LibtestDecoder:
    """Translate failed test events into diagnostics of one ``category``."""

    def __init__(self, category: Category) -> None:
        """Initialise the decoder for test or benchmark failures."""

        self.category = category

    def decode(self, record: Mapping[str, JsonValue]) -> Iterable[Diagnostic]:
        """Return the diagnostic carried by a libtest event, if any.

        Args:
            record: One libtest JSON event.

        Returns:
            Iterable[Diagnostic]: One diagnostic for ``failed`` and ``timeout``
            test events, nothing for suite events and passing tests.

        Raises:
            MalformedRecordError: If the event lacks ``type`` or a test name.
        """

        record_type = record.get("type")
        if not isinstance(record_type, str):
            raise MalformedRecordError("record has no 'type' field")
        event = record.get("event")
        if record_type not in TEST_RECORD_TYPES or event not in (FAILED_EVENT, TIMEOUT_EVENT):
            return ()
        name = coerce_optional_str(record.get("name"))
        if not name:
            raise MalformedRecordError("test event has no name")

        if event == TIMEOUT_EVENT:
            return (
                Diagnostic(
                    category=self.category,
                    severity=Severity.WARNING,
                    message=f"{name} has been running for over 60 seconds",
                ),
            )
        output = coerce_optional_str(record.get("stdout")) or coerce_optional_str(record.get("message"))
        panic = extract_panic(output)
        message = f"{name} failed"
        if panic.message:
            message = f"{message}: {panic.message}"
        return (
            Diagnostic(
                category=self.category,
                severity=Severity.ERROR,
                message=message,
                location=panic.location,
            ),
        )


__all__ = ["LibtestDecoder", "PanicDetails", "extract_panic"]
