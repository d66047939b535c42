"""Helpers for rendering nested summaries into ASCII boxes."""

from __future__ import annotations

from collections.abc import Iterable

SummaryRow = tuple[str, str | Iterable["SummaryRow"]]


def _truncate(line: str, max_width: int) -> str:
    """Truncate `line` to `max_width`, adding ellipses when necessary."""
    if len(line) <= max_width:
        return line
    if max_width <= 3:
        return "." * max_width
    return line[: max_width - 3] + "..."


def _is_leaf(value: object) -> bool:
    return isinstance(value, str) or not hasattr(value, "__len__")


def _try_inline(key: str, rows: list[SummaryRow]) -> str | None:
    """
    Render child rows on a single line, or return None if any child is nested.

    `(k, "")` renders as `k`; `(k, v)` renders as `k=v`.
    """
    parts: list[str] = []
    for row in rows:
        if not isinstance(row, tuple) or len(row) != 2:
            return None
        k, v = row
        if not _is_leaf(v):
            return None
        parts.append(k if v == "" else f"{k}={v}")
    return f"{key} : [{', '.join(parts)}]"


def _flatten_rows(
    rows: Iterable[SummaryRow],
    *,
    max_width: int,
    indent: int = 0,
    indent_str: str = "  ",
) -> list[str]:
    """
    Flatten nested summary rows into width-restricted lines.

    Raises:
        ValueError: If a row is not a `(key, value)` pair.

    """
    out: list[str] = []
    prefix = indent_str * indent

    for row in rows:
        if not isinstance(row, tuple) or len(row) != 2:
            msg = f"Invalid SummaryRow: {row!r}"
            raise ValueError(msg)
        key, value = row

        if _is_leaf(value):
            if value == "":
                out.append(prefix + _truncate(key, max_width))
                continue
            inline = f"{key} : {value}"
            if len(prefix + inline) <= max_width:
                out.append(prefix + inline)
            else:
                out.append(prefix + f"{key} :")
                out.append(_truncate(prefix + indent_str + str(value), max_width))
            continue

        children = list(value)
        inline = _try_inline(key, children)
        if inline and len(prefix + inline) <= max_width:
            out.append(prefix + inline)
            continue

        out.append(prefix + f"{key} :")
        out.extend(
            _flatten_rows(
                children,
                max_width=max_width,
                indent=indent + 1,
                indent_str=indent_str,
            ),
        )

    return out


def format_summary_box(
    *,
    title: str,
    rows: Iterable[SummaryRow],
    max_width: int = 88,
) -> str:
    """
    Format summary rows into a bordered, width-limited box.

    Args:
        title (str): Box title shown in the header.
        rows (Iterable[SummaryRow]): Rows to render.
        max_width (int): Maximum line width including borders.

    Returns:
        str: Rendered summary box.

    """
    flat = _flatten_rows(rows, max_width=max_width) or ["(no data)"]

    content_width = min(
        max(max(len(r) for r in flat), len(title) + 1),
        max_width - 4,
    )

    def fmt_line(line: str) -> str:
        return f"│ {_truncate(line, content_width).ljust(content_width)} │"

    top = f"┌─ {title} " + "─" * max(0, content_width - len(title) - 1) + "┐"
    body = "\n".join(fmt_line(r) for r in flat)
    bottom = "└" + "─" * (content_width + 2) + "┘"
    return f"{top}\n{body}\n{bottom}"


class Summarizable:
    """Mixin that provides a summary box rendering helper."""

    def _summary_title(self) -> str:
        return self.__class__.__name__

    def _summary_rows(self) -> list[SummaryRow]:  # pragma: no cover
        """Return rows used by :meth:`summary`."""
        raise NotImplementedError

    def summary(self, max_width: int = 88) -> str:
        """
        Render a formatted summary box for this object.

        Args:
            max_width (int): Maximum width for the rendered box.

        Returns:
            str: Summary box string.

        """
        return format_summary_box(
            title=self._summary_title(),
            rows=self._summary_rows(),
            max_width=max_width,
        )
