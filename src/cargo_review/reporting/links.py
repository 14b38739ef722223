# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Render diagnostics as single lines with clickable source references."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from rich.style import Style
from rich.text import Text

from ..core.models import Diagnostic, Location
from ..core.severity import SEVERITY_MARKERS, SEVERITY_STYLES
from ..errors import LocationResolutionError
from ..filesystem.paths import display_path, file_uri, resolve_location_path

LOCATION_SEPARATOR: Final[str] = ":"
LOCATION_STYLE: Final[str] = "cyan"
CODE_STYLE: Final[str] = "color(105)"
HELP_LABEL: Final[str] = "help:"


@dataclass(slots=True, frozen=True)
class LinkTarget:
    """Display text and optional hyperlink for a diagnostic location."""

    text: str
    url: str | None

    @property
    def resolved(self) -> bool:
        """Return ``True`` when the location resolved to an absolute path."""

        return self.url is not None


def location_reference(location: Location, *, root: Path) -> LinkTarget:
    """Return the textual reference and hyperlink for ``location``.

    The text uses the conventional ``path:line:column`` form, relative to
    ``root`` when possible. When the file cannot be resolved any more the
    relative text is kept and no hyperlink is attached.

    Args:
        location: Location attached to a diagnostic.
        root: Directory the external tool ran in.

    Returns:
        LinkTarget: Reference text plus the ``file://`` URL when resolvable.
    """

    parts = [display_path(location.file_path, root=root)]
    if location.line is not None:
        parts.append(str(location.line))
        if location.column is not None:
            parts.append(str(location.column))
    text = LOCATION_SEPARATOR.join(parts)
    try:
        absolute = resolve_location_path(location.file_path, root=root)
    except LocationResolutionError:
        return LinkTarget(text=text, url=None)
    return LinkTarget(text=text, url=file_uri(absolute, line=location.line, column=location.column))


class LinkRenderer:
    """Format diagnostics as rich text lines anchored at ``root``."""

    def __init__(self, root: Path) -> None:
        """Initialise the renderer with the directory the tool ran in."""

        self.root = root

    def render(self, diagnostic: Diagnostic) -> Text:
        """Return one report line for ``diagnostic``.

        The line holds the severity marker, the optional rule code, the
        message, help hints and, when a location is known, an ``at``
        reference. Rendering never raises for unresolvable paths.

        Args:
            diagnostic: Finding to render.

        Returns:
            Text: Styled line; plain text is available via ``Text.plain``.
        """

        text = Text()
        text.append(SEVERITY_MARKERS[diagnostic.severity], style=SEVERITY_STYLES[diagnostic.severity])
        if diagnostic.code:
            text.append(" ")
            text.append(diagnostic.code, style=CODE_STYLE)
        text.append(" ")
        text.append(diagnostic.message)
        for hint in diagnostic.help:
            text.append(" ")
            text.append(HELP_LABEL, style="bold")
            text.append(f" {hint}")
        if diagnostic.location is not None:
            target = location_reference(diagnostic.location, root=self.root)
            text.append(" at ")
            style = Style(color=LOCATION_STYLE, link=target.url) if target.resolved else Style(color=LOCATION_STYLE)
            text.append(target.text, style=style)
        return text


__all__ = ["LinkRenderer", "LinkTarget", "location_reference"]
