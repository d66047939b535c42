"""Insertion-ordered keyed container with an optional value constraint."""

from __future__ import annotations

from collections.abc import Callable, Hashable, ItemsView, Iterator, KeysView, ValuesView
from typing import Any, Generic, TypeVar

import numpy as np

from keyedcollection.core.constraints import ConstraintDescriptor, ValueConstraint
from keyedcollection.core.sentinels import ABSENT, Absent
from keyedcollection.utils.errors.error_handling import ErrorMode
from keyedcollection.utils.errors.exceptions import (
    ConstraintViolationError,
    ConstraintViolationWarning,
)
from keyedcollection.utils.logging.logger import get_logger
from keyedcollection.utils.logging.warnings import warn
from keyedcollection.utils.representation.summary import Summarizable, SummaryRow

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
R = TypeVar("R")

logger = get_logger("collection")

_DEFAULT_RNG = np.random.default_rng()


class KeyedCollection(Summarizable, Generic[K, V]):
    """
    Mapping of unique keys to values, optionally restricted to one value type.

    Description:
        Values are held in an internal insertion-ordered dict. Only the
        methods defined here can mutate it, so every insertion passes the
        value constraint. A missing or rejected entry is reported with the
        :data:`ABSENT` sentinel rather than `None`.

        Replacing the value of an existing key keeps the key's position;
        removing a key and adding it again moves it to the end.

    Attributes:
        base_object (ConstraintDescriptor | None):
            Descriptor the value constraint was built from, or None.
        on_reject (ErrorMode):
            What :meth:`add` does when a value fails the constraint.

    Example:
    ```python
        commands = KeyedCollection(Command)
        commands.add("ping", Command("ping"))
        commands.add("ping", Command("pong"))        # existing value returned
        commands.add("oops", "not a command")        # ABSENT
        commands.find(lambda c: c.label == "ping")
    ```

    """

    def __init__(
        self,
        base_object: ValueConstraint | ConstraintDescriptor | None = None,
        *,
        on_reject: ErrorMode | str = ErrorMode.IGNORE,
    ):
        """
        Create an empty collection.

        Args:
            base_object (ValueConstraint | ConstraintDescriptor | None, optional):
                Class, tuple of classes, or predicate every value must satisfy.
                No validation is done when omitted.
            on_reject (ErrorMode | str, optional):
                Policy applied to rejected insertions: "ignore" returns
                ABSENT, "warn" also emits a warning, "raise" raises
                :class:`ConstraintViolationError`. Defaults to "ignore".

        Raises:
            ConstraintDefinitionError: If `base_object` is not a valid descriptor.
            ValueError: If `on_reject` is not a known policy.

        """
        self._constraint = ValueConstraint.from_descriptor(base_object)
        self.on_reject = ErrorMode.from_value(on_reject)
        self._store: dict[K, V] = {}

    # ================================================
    # Constraint
    # ================================================
    @property
    def base_object(self) -> ConstraintDescriptor | None:
        if self._constraint is None:
            return None
        return self._constraint.descriptor

    @property
    def constraint(self) -> ValueConstraint | None:
        return self._constraint

    @property
    def constraint_name(self) -> str:
        """Name of the value constraint, or "any" when unconstrained."""
        if self._constraint is None:
            return "any"
        return self._constraint.name

    def accepts(self, value: Any) -> bool:
        """Return True if `value` could be stored in this collection."""
        return self._constraint is None or self._constraint.accepts(value)

    # ================================================
    # Core accessors
    # ================================================
    @property
    def size(self) -> int:
        """Number of entries."""
        return len(self._store)

    def get(self, key: K, default: Any = ABSENT) -> V | Absent:
        return self._store.get(key, default)

    def has(self, key: K) -> bool:
        return key in self._store

    def keys(self) -> KeysView[K]:
        """Live view of keys in insertion order."""
        return self._store.keys()

    def values(self) -> ValuesView[V]:
        """Live view of values in insertion order."""
        return self._store.values()

    def entries(self) -> ItemsView[K, V]:
        """Live view of `(key, value)` pairs in insertion order."""
        return self._store.items()

    def to_array(self) -> list[V]:
        """Snapshot of all values in insertion order."""
        return list(self._store.values())

    # ================================================
    # Mutation
    # ================================================
    def add(self, key: K, value: V, replace: bool = False) -> V | Absent:
        """
        Store `value` under `key`.

        Args:
            key (K): Entry key.
            value (V): Value to store.
            replace (bool, optional):
                Overwrite an existing entry. Defaults to False.

        Returns:
            V | Absent:
                The existing value if `key` is present and `replace` is False;
                ABSENT if the value fails the constraint; otherwise `value`.

        Raises:
            ConstraintViolationError:
                If the value fails the constraint and `on_reject` is "raise".

        """
        return self._insert(key, value, replace=replace)

    def update(self, key: K, value: V) -> V | Absent:
        """Store `value` under `key`, overwriting any existing entry."""
        return self._insert(key, value, replace=True)

    def remove(self, key: K) -> V | Absent:
        """Delete the entry for `key` and return its value, or ABSENT if missing."""
        return self._store.pop(key, ABSENT)

    def _insert(self, key: K, value: V, *, replace: bool) -> V | Absent:
        # Called directly by `add` and `update` so both sit at the same
        # stack depth when a rejection warning resolves its call site.
        if not replace and key in self._store:
            return self._store[key]

        if not self.accepts(value):
            return self._reject(key, value)

        self._store[key] = value
        return value

    def _reject(self, key: K, value: Any) -> Absent:
        logger.debug(
            "Rejected value of type %s for key %r (constraint: %s).",
            type(value).__name__,
            key,
            self.constraint_name,
        )
        if self.on_reject == ErrorMode.RAISE:
            raise ConstraintViolationError(key, value, self.constraint_name)
        if self.on_reject == ErrorMode.WARN:
            msg = (
                f"Value for key {key!r} of type {type(value).__name__} does not "
                f"satisfy constraint '{self.constraint_name}' and was not stored."
            )
            hint = "Check the return value of `add`/`update` for ABSENT."
            warn(msg, category=ConstraintViolationWarning, hints=hint, stacklevel=4)
        return ABSENT

    # ================================================
    # Query helpers
    # ================================================
    def find(self, predicate: Callable[[V], Any]) -> V | Absent:
        """Return the first value for which `predicate` is truthy, or ABSENT."""
        for item in self._store.values():
            if predicate(item):
                return item
        return ABSENT

    def filter(self, predicate: Callable[[V], Any]) -> list[V]:
        """Return all values for which `predicate` is truthy, in order."""
        return [item for item in self._store.values() if predicate(item)]

    def map(self, transform: Callable[[V], R]) -> list[R]:
        """Apply `transform` to every value, in order."""
        return [transform(item) for item in self._store.values()]

    def some(self, predicate: Callable[[V], Any]) -> bool:
        """True if any value satisfies `predicate`. False when empty."""
        return any(predicate(item) for item in self._store.values())

    def every(self, predicate: Callable[[V], Any]) -> bool:
        """True if all values satisfy `predicate`. True when empty."""
        return all(predicate(item) for item in self._store.values())

    def random(self, rng: np.random.Generator | None = None) -> V | Absent:
        """
        Return a uniformly chosen value, or ABSENT when empty.

        Args:
            rng (np.random.Generator | None, optional):
                Generator used for the draw. A shared module-level generator
                is used when omitted.

        """
        if not self._store:
            return ABSENT
        rng = _DEFAULT_RNG if rng is None else rng
        items = list(self._store.values())
        return items[int(rng.integers(len(items)))]

    # ================================================
    # Representation
    # ================================================
    def to_display_string(self) -> str:
        """Return `[Collection<Name>]`, using "any" when unconstrained."""
        return f"[Collection<{self.constraint_name}>]"

    def _summary_title(self) -> str:
        return self.to_display_string()

    def _summary_rows(self) -> list[SummaryRow]:
        return [
            ("constraint", self.constraint_name),
            ("on_reject", self.on_reject.value),
            ("size", str(self.size)),
            ("keys", [(str(k), "") for k in self._store]),
        ]

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"KeyedCollection(constraint={self.constraint_name}, size={self.size})"

    # ================================================
    # Container protocol
    # ================================================
    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __iter__(self) -> Iterator[K]:
        return iter(self._store)

    def __getitem__(self, key: K) -> V:
        return self._store[key]
