"""Sentinel marking "not present" and "rejected" outcomes."""

from __future__ import annotations

from enum import Enum
from typing import Literal


class _AbsentType(Enum):
    """
    Singleton type of :data:`ABSENT`.

    Description:
        Lookups and insertions on a :class:`KeyedCollection` return `ABSENT`
        instead of `None` so that a legitimately stored `None` (or any other
        falsy value) is never confused with a missing entry. `ABSENT` is falsy
        and should be compared by identity (`result is ABSENT`).
    """

    ABSENT = "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _AbsentType.ABSENT
Absent = Literal[_AbsentType.ABSENT]
