"""Banner-style log formatters."""

import logging
import os
import sys
import textwrap
from datetime import datetime
from pathlib import Path


class _BannerFormatter(logging.Formatter):
    """Base for formatters that frame each record between separator lines."""

    def __init__(self, *, max_width: int = 88) -> None:
        super().__init__()
        self.max_width = max_width

    def _wrap(self, text: str) -> list[str]:
        """Wrap `text` with a one-space indent, keeping explicit newlines."""
        lines: list[str] = []
        for line in text.split("\n"):
            lines.extend(textwrap.wrap(line, width=self.max_width - 2) or [""])
        return [" " + line for line in lines]

    def _separator(self, label: str | None = None) -> str:
        if not label:
            return "─" * self.max_width
        label = f" {label} "
        left = (self.max_width - len(label)) // 2
        return "─" * left + label + "─" * (self.max_width - left - len(label))


class KeyedCollectionBannerFormatter(_BannerFormatter):
    """
    Formatter for regular package log records.

    The top separator reads "{LEVEL}" or "{LEVEL} - {title_desc}". A
    "[HH:MM:SS] module:lineno" line precedes the message unless the record
    sets `omit_origin`. Both are passed through `extra=`.
    """

    def format(self, record: logging.LogRecord) -> str:
        custom = getattr(record, "title_desc", None)
        lines = [self._separator(f"{record.levelname} - {custom}" if custom else record.levelname)]
        if not getattr(record, "omit_origin", False):
            timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
            lines.extend(self._wrap(f"[{timestamp}] {record.module}:{record.lineno}"))
        lines.extend(self._wrap(record.getMessage()))
        lines.append(self._separator())
        return "\n".join(lines)


class WarningFormatter(_BannerFormatter):
    """
    Formatter for records logged by :func:`keyedcollection.utils.logging.warnings.warn`.

    Reads the `warning_*` attributes set by `warn`. Separators are red on
    color-capable terminals.
    """

    def _red(self, text: str) -> str:
        if not sys.stdout.isatty() or os.environ.get("TERM") in (None, "dumb"):
            return text
        return f"\033[31m{text}\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        lines = [
            self._red(self._separator(record.warning_category.__name__)),
            f" Location: {Path(record.warning_filename).name}:{record.warning_lineno}",
            "",
            *self._wrap(record.warning_message),
        ]
        hints = record.warning_hints
        if hints:
            lines.append("")
            for hint in [hints] if isinstance(hints, str) else hints:
                lines.extend(self._wrap(hint))
        lines.append(self._red(self._separator()))
        return "\n".join(lines)
