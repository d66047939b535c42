"""Rejection policies applied when a value fails a collection constraint."""

from enum import Enum


class ErrorMode(str, Enum):
    """Strategies for responding to rejected insertions."""

    RAISE = "raise"
    WARN = "warn"
    IGNORE = "ignore"

    @classmethod
    def from_value(cls, value):
        """
        Cast a string or enum value to :class:`ErrorMode`.

        Args:
            value (str | ErrorMode): Source value.

        Returns:
            ErrorMode: Normalized mode.

        Raises:
            ValueError: If the provided value cannot be mapped to a mode.

        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            v = value.strip().lower()
            for mode in cls:
                if mode.value == v:
                    return mode
        msg = f"Invalid error mode: {value!r}. Expected one of: {[m.value for m in cls]}"
        raise ValueError(msg)
