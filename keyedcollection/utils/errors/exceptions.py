"""Custom exception hierarchy for keyedcollection."""

from __future__ import annotations

from typing import Any


class KeyedCollectionError(Exception):
    """Base class for all keyedcollection-specific exceptions."""


class ConstraintDefinitionError(KeyedCollectionError):
    """Raised when a value constraint cannot be built from the given descriptor."""

    def __init__(self, descriptor: Any, message: str | None = None):
        """
        Initialize error with the offending descriptor.

        Args:
            descriptor (Any): Object that was passed as `base_object`.
            message (str | None, optional): Custom message override.

        """
        if message is None:
            message = (
                f"Invalid value constraint {descriptor!r}. Expected a class, "
                "a tuple of classes, or a predicate callable."
            )
        super().__init__(message)
        self.descriptor = descriptor


class ConstraintViolationError(KeyedCollectionError):
    """
    Raised when a value fails the collection's constraint and rejection is strict.

    Attributes:
        key (Any): Key the value was going to be stored under.
        value (Any): Rejected value.
        constraint (str): Display name of the violated constraint.

    """

    def __init__(
        self,
        key: Any,
        value: Any,
        constraint: str,
        message: str | None = None,
    ):
        """
        Initialize violation error.

        Args:
            key (Any): Key of the rejected insertion.
            value (Any): Rejected value.
            constraint (str): Name of the violated constraint.
            message (str | None, optional): Custom message override.

        """
        if message is None:
            message = (
                f"Value for key {key!r} does not satisfy constraint "
                f"'{constraint}': got {type(value).__name__}."
            )
        super().__init__(message)
        self.key = key
        self.value = value
        self.constraint = constraint


class ConstraintViolationWarning(UserWarning):
    """Warning emitted when an insertion is rejected under the `warn` policy."""
