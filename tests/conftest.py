"""Shared fixtures and utilities for unit tests."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
import pytest

from keyedcollection.core.collection import KeyedCollection


@dataclass(eq=False)
class Wrapped:
    """Number-like wrapper used as a constrained value type."""

    x: int


@dataclass(eq=False)
class Command:
    """Minimal stand-in for a framework command."""

    label: str
    subcommands: KeyedCollection | None = None

    @property
    def has_subcommands(self) -> bool:
        return self.subcommands is not None and self.subcommands.size > 0


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(seed=42)


@pytest.fixture
def wrapped_collection() -> KeyedCollection[str, Wrapped]:
    """Collection constrained to :class:`Wrapped` values."""
    return KeyedCollection(Wrapped)


@pytest.fixture
def filled_collection() -> KeyedCollection[str, Wrapped]:
    """Collection holding values with x in [-1, 0, 1, 2], keyed "a" to "d"."""
    coll = KeyedCollection(Wrapped)
    for key, x in zip("abcd", [-1, 0, 1, 2]):
        coll.add(key, Wrapped(x))
    return coll


@pytest.fixture
def capture_logs():
    """
    Attach a recording handler to a keyedcollection logger.

    Package loggers do not propagate to the root logger, so `caplog`
    cannot see their records.
    """
    attached: list[tuple[logging.Logger, _ListHandler, int]] = []

    def _attach(name: str) -> _ListHandler:
        logger = logging.getLogger(f"keyedcollection.{name}")
        handler = _ListHandler()
        attached.append((logger, handler, logger.level))
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        return handler

    yield _attach

    for logger, handler, level in attached:
        logger.removeHandler(handler)
        logger.setLevel(level)
