"""Rich console handler aware of file-system log extras.

Where: platform/logging/handlers.py
What: Render ``fs_operation`` / ``fs_path`` record extras after the message.
Why: Keep provider log calls terse while paths stay readable on the console.
"""

from __future__ import annotations

import logging
from typing import Final

from rich.logging import RichHandler
from rich.text import Text

OPERATION_STYLE: Final[str] = "cyan"
PATH_STYLE: Final[str] = "bold white"


class PathRichHandler(RichHandler):
    """``RichHandler`` that appends the operation and path carried by a record."""

    def render_message(self, record: logging.LogRecord, message: str) -> Text:  # pyright: ignore[reportIncompatibleMethodOverride]
        rendered = super().render_message(record, message)
        text = rendered if isinstance(rendered, Text) else Text(str(rendered))

        operation = getattr(record, "fs_operation", None)
        path = getattr(record, "fs_path", None)
        if operation is None and path is None:
            return text

        suffix = Text(" ")
        if operation is not None:
            _ = suffix.append(f"[{operation}]", style=OPERATION_STYLE)
        if path is not None:
            if operation is not None:
                _ = suffix.append(" ")
            _ = suffix.append(str(path), style=PATH_STYLE)
        return text + suffix


__all__ = ["PathRichHandler"]
