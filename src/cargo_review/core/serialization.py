# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""JSON value aliases and coercion helpers used by the record decoders."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TypeAlias

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = "JsonScalar | list[JsonValue] | dict[str, JsonValue]"


def coerce_optional_int(value: JsonValue) -> int | None:
    """Return ``value`` as an integer; booleans and unparsable values give ``None``."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def coerce_optional_str(value: JsonValue) -> str | None:
    """Return ``value`` as text, keeping ``None``."""
    if value is None:
        return None
    return str(value)


def first_mapping(value: JsonValue | None) -> dict[str, JsonValue]:
    """Return ``value`` as a mapping, or an empty mapping for other payloads."""

    if isinstance(value, Mapping):
        return {str(key): entry for key, entry in value.items()}
    return {}


def mapping_sequence(value: JsonValue | None) -> list[dict[str, JsonValue]]:
    """Return the mapping entries of ``value`` when it is a JSON array.

    Args:
        value: Candidate JSON array.

    Returns:
        list[dict[str, JsonValue]]: Mapping items in their original order;
        non-mapping items are ignored.
    """

    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        return []
    return [first_mapping(item) for item in value if isinstance(item, Mapping)]


def string_sequence(value: JsonValue | None) -> list[str]:
    """Return the string entries of ``value`` when it is a JSON array."""

    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        return []
    return [item for item in value if isinstance(item, str)]


__all__ = [
    "JsonScalar",
    "JsonValue",
    "coerce_optional_int",
    "coerce_optional_str",
    "first_mapping",
    "mapping_sequence",
    "string_sequence",
]
