# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Manifest checks over ``cargo metadata --format-version 1`` documents."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Final
from urllib.parse import parse_qs, urlsplit

from ..config import ManifestPolicy
from ..core.models import Category, Diagnostic, Location
from ..core.serialization import JsonValue, coerce_optional_str, mapping_sequence, string_sequence
from ..core.severity import Severity
from ..errors import MalformedRecordError

GIT_SOURCE_PREFIX: Final[str] = "git+"
GIT_SUFFIX: Final[str] = ".git"
REF_PARAMETERS: Final[tuple[str, ...]] = ("branch", "tag")
FIELD_LABELS: Final[dict[str, str]] = {
    "authors": "authors",
    "description": "description",
    "license": "license",
    "rust_version": "rust-version",
}


@dataclass(slots=True, frozen=True)
class GitReference:
    """Repository and branch (or tag) named by a git dependency source."""

    repository: str
    ref: str | None


def parse_git_source(source: str) -> GitReference | None:
    """Return the repository and ref named by a cargo ``source`` string.

    Args:
        source: Dependency source such as
            ``git+https://github.com/paritytech/substrate?branch=polkadot-v1.0.0``.

    Returns:
        GitReference | None: ``None`` for registry and path sources.
    """

    if not source.startswith(GIT_SOURCE_PREFIX):
        return None
    parts = urlsplit(source.removeprefix(GIT_SOURCE_PREFIX))
    if not parts.scheme or not parts.netloc:
        return None
    path = parts.path.rstrip("/").removesuffix(GIT_SUFFIX)
    query = parse_qs(parts.query)
    ref = next((query[name][0] for name in REF_PARAMETERS if query.get(name)), None)
    return GitReference(repository=f"{parts.scheme}://{parts.netloc}{path}", ref=ref)


def _missing_fields(package: Mapping[str, JsonValue], required: Iterable[str]) -> Iterator[str]:
    for field in required:
        if field == "authors":
            if not string_sequence(package.get("authors")):
                yield field
        elif field == "license":
            if not _has_text(package.get("license")) and not _has_text(package.get("license_file")):
                yield field
        elif not _has_text(package.get(field)):
            yield field


def _has_text(value: JsonValue | None) -> bool:
    return isinstance(value, str) and bool(value.strip())


class ManifestDecoder:
    """Check every package of a metadata document against a :class:`ManifestPolicy`."""

    category: Final[Category] = Category.MANIFEST_ISSUE

    def __init__(self, policy: ManifestPolicy) -> None:
        """Initialise the decoder with the manifest ``policy``."""

        self.policy = policy

    def decode(self, record: Mapping[str, JsonValue]) -> Iterable[Diagnostic]:
        """Return manifest issues for every package in ``record``.

        Args:
            record: Decoded ``cargo metadata`` document.

        Returns:
            Iterable[Diagnostic]: Issues in package order, then field order,
            then dependency order.

        Raises:
            MalformedRecordError: If the document has no ``packages`` array.
        """

        if not isinstance(record.get("packages"), list):
            raise MalformedRecordError("metadata document has no 'packages' array")
        diagnostics: list[Diagnostic] = []
        for package in mapping_sequence(record.get("packages")):
            diagnostics.extend(self.check_package(package))
        return diagnostics

    def check_package(self, package: Mapping[str, JsonValue]) -> list[Diagnostic]:
        """Return the manifest issues of a single ``package`` entry."""

        name = coerce_optional_str(package.get("name")) or "<unnamed>"
        manifest_path = coerce_optional_str(package.get("manifest_path"))
        location = Location(file_path=manifest_path) if manifest_path and manifest_path.strip() else None

        issues = [
            f"{name}: no '{FIELD_LABELS[field]}' found"
            for field in _missing_fields(package, self.policy.required_fields)
        ]
        issues.extend(self._dependency_issues(name, package))
        return [
            Diagnostic(
                category=self.category,
                severity=Severity.WARNING,
                message=message,
                location=location,
            )
            for message in issues
        ]

    def _dependency_issues(self, name: str, package: Mapping[str, JsonValue]) -> list[str]:
        issues: list[str] = []
        refs: list[str] = []
        for dependency in mapping_sequence(package.get("dependencies")):
            source = coerce_optional_str(dependency.get("source"))
            reference = parse_git_source(source) if source else None
            if reference is None or reference.repository not in self.policy.tracked_repositories:
                continue
            if reference.ref is None:
                continue
            if reference.ref not in refs:
                refs.append(reference.ref)
            if reference.ref not in self.policy.supported_branches:
                dependency_name = coerce_optional_str(dependency.get("name")) or "<unnamed>"
                issues.append(f"{name}: {reference.ref} for '{dependency_name}' is out of date")
        if len(refs) > 1:
            issues.append(f"{name}: tracked dependencies use mismatched branches: {', '.join(refs)}")
        return issues


__all__ = ["GitReference", "ManifestDecoder", "parse_git_source"]
