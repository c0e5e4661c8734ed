"""Rich console handler rendering provisioning events.

Where: platform/logging/handlers.py
What: Style ``provision_event`` records with icons and compact paths.
Why: Keep formatting concerns apart from logger bootstrap.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class ProvisioningRichHandler(RichHandler):
    """Rich handler that renders provisioning events with compact paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "provision.directory.created": ("📁", "cyan", "Created directory "),
        "provision.file.created": ("✅", "green", "Wrote default config "),
        "provision.file.exists": ("↪️", "yellow", "Kept existing config "),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Render ``path`` keeping only its trailing segments.

        Args:
            path: Absolute or relative path string to format.

        Returns:
            Text: Styled path with magenta separators and ellipsis truncation.
        """
        pure_path = self._to_pure_path(path)
        is_windows = isinstance(pure_path, PureWindowsPath)
        separator = "\\" if is_windows else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display = ""
        if anchor:
            display = anchor.rstrip("\\/") + separator if is_windows else separator
        if truncated:
            display += "…" + separator
        display += separator.join(body_parts)
        return self._style_path_string(display or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        text = Text()
        for char in path_string:
            if char == separator or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_provision_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured provisioning events, or ``None`` for plain records."""

        event = getattr(record, "provision_event", None)
        if not isinstance(event, str):
            return None

        icon, color, prefix = self._EVENT_STYLES.get(event, ("ℹ️", "blue", ""))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(prefix)
        path = getattr(record, "path", None)
        if path:
            _ = body.append_text(self._format_path(str(path)))

        format_name = getattr(record, "serialization_format", None)
        if isinstance(format_name, str) and format_name:
            _ = body.append(f" ({format_name})")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        provision_text = self._render_provision_message(record)
        if provision_text is not None:
            return provision_text
        return super().render_message(record, message)


__all__ = ["ProvisioningRichHandler"]
