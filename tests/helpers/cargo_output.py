# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Builders for captured cargo output and a fake tool invoker."""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from cargo_review.modes import ToolCommand
from cargo_review.runtime.process import ProcessResult


def clippy_message(
    message: str,
    *,
    level: str = "warning",
    code: str | None = "clippy::unwrap_used",
    file_name: str | None = "src/lib.rs",
    line: int = 10,
    column: int = 5,
    children: Sequence[dict[str, object]] = (),
) -> str:
    """Return one ``compiler-message`` line as cargo prints it."""

    spans = []
    if file_name is not None:
        spans.append(
            {
                "file_name": file_name,
                "line_start": line,
                "line_end": line,
                "column_start": column,
                "column_end": column + 8,
                "is_primary": True,
            },
        )
    return json.dumps(
        {
            "reason": "compiler-message",
            "package_id": "pallet-example 0.1.0 (path+file:///work/pallet-example)",
            "message": {
                "$message_type": "diagnostic",
                "message": message,
                "code": {"code": code, "explanation": None} if code else None,
                "level": level,
                "spans": spans,
                "children": list(children),
                "rendered": f"{level}: {message}",
            },
        },
    )


def libtest_event(name: str, event: str, *, stdout: str | None = None, kind: str = "test") -> str:
    """Return one libtest JSON event line."""

    payload: dict[str, object] = {"type": kind, "event": event, "name": name}
    if stdout is not None:
        payload["stdout"] = stdout
    return json.dumps(payload)


def metadata_document(*packages: dict[str, object]) -> str:
    """Return a ``cargo metadata`` document for ``packages``."""

    return json.dumps({"packages": list(packages), "workspace_members": [], "version": 1})


def metadata_package(name: str = "pallet-example", **overrides: object) -> dict[str, object]:
    """Return a complete package entry; ``overrides`` replace individual fields."""

    package: dict[str, object] = {
        "name": name,
        "version": "0.1.0",
        "authors": ["Parity Technologies <admin@parity.io>"],
        "description": "An example pallet",
        "license": "Apache-2.0",
        "license_file": None,
        "rust_version": "1.70",
        "edition": "2021",
        "manifest_path": f"/work/{name}/Cargo.toml",
        "dependencies": [],
    }
    package.update(overrides)
    return package


def git_dependency(name: str, repository: str = "substrate", branch: str = "polkadot-v1.0.0") -> dict[str, object]:
    """Return a dependency entry pointing at a paritytech git repository."""

    return {
        "name": name,
        "source": f"git+https://github.com/paritytech/{repository}?branch={branch}",
        "req": "*",
        "kind": None,
    }


@dataclass
class FakeInvoker:
    """Tool invoker returning canned output and recording the commands it saw."""

    stdout: str = ""
    stderr: str = ""
    returncode: int = 0
    calls: list[ToolCommand] = field(default_factory=list)
    seen_files: list[bool] = field(default_factory=list)
    watch: Path | None = None
    workspace_manifest: Path | None = None

    def __call__(self, command: ToolCommand) -> ProcessResult:
        self.calls.append(command)
        if command.args[1:2] == ("locate-project",) and self.workspace_manifest is not None:
            return ProcessResult(args=command.args, returncode=0, stdout=f"{self.workspace_manifest}\n")
        if self.watch is not None:
            self.seen_files.append(self.watch.exists())
        return ProcessResult(
            args=command.args,
            returncode=self.returncode,
            stdout=self.stdout,
            stderr=self.stderr,
        )

