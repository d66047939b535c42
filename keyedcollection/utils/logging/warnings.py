"""Warnings that are both logged as banners and raised through `warnings`."""

from __future__ import annotations

import sys
import warnings
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

from .logger import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

_logger = get_logger("warnings")

WarningPayload = dict[str, object]

# Set by `catch_warnings`; returns True when it consumed the payload
_WARNING_HOOK: ContextVar[Callable[[WarningPayload], bool] | None] = ContextVar(
    "_WARNING_HOOK",
    default=None,
)


def _call_site(stacklevel: int) -> tuple[str, int]:
    """Filename and line number `stacklevel` frames above the caller of `warn`."""
    try:
        frame = sys._getframe(stacklevel + 1)
    except ValueError:
        return "<unknown>", 0
    return frame.f_code.co_filename, frame.f_lineno


def warn(
    message: str,
    *,
    category: type[Warning] = UserWarning,
    hints: str | Iterable[str] | None = None,
    stacklevel: int = 1,
) -> None:
    """
    Emit a keyedcollection warning.

    The warning is logged through the `warnings` logger and then issued with
    :func:`warnings.warn`, so `pytest.warns` and warning filters see it.
    Inside :func:`catch_warnings` it is only captured.

    Args:
        message (str): Warning message text.
        category (type[Warning]): Warning category class.
        hints (str | Iterable[str] | None): Optional corrective hint(s).
        stacklevel (int): 1 attributes the warning to the caller of `warn`,
            2 to that caller's caller, and so on.

    """
    filename, lineno = _call_site(stacklevel)
    payload = {
        "category": category,
        "filename": filename,
        "lineno": lineno,
        "message": message,
        "hints": hints,
    }

    hook = _WARNING_HOOK.get()
    if hook is not None and hook(payload):
        return

    _logger.warning(message, extra={f"warning_{k}": v for k, v in payload.items()})
    warnings.warn(message, category=category, stacklevel=stacklevel + 1)


@contextmanager
def catch_warnings():
    """
    Capture warnings emitted through :func:`warn` within the block.

    Captured warnings are neither logged nor issued.

    Yields:
        WarningInterceptor: Accessor for the captured payloads.

    """
    captured: list[WarningPayload] = []

    def hook(payload: WarningPayload) -> bool:
        captured.append(payload)
        return True

    token = _WARNING_HOOK.set(hook)
    try:
        yield WarningInterceptor(captured)
    finally:
        _WARNING_HOOK.reset(token)


class WarningInterceptor:
    """Read-only view of payloads captured by :func:`catch_warnings`."""

    def __init__(self, captured: list[WarningPayload]):
        self._captured = captured

    def __len__(self) -> int:
        return len(self._captured)

    @property
    def payloads(self) -> list[WarningPayload]:
        return list(self._captured)

    def match(self, text: str) -> bool:
        """Return True if any captured message contains `text`."""
        return any(text in w["message"] for w in self._captured)
