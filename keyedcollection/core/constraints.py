"""Value constraints restricting what a KeyedCollection may hold."""

from __future__ import annotations

import types
from collections.abc import Callable
from typing import Any

from keyedcollection.utils.errors.exceptions import ConstraintDefinitionError

ConstraintDescriptor = (
    type | tuple[type, ...] | types.UnionType | Callable[[Any], bool]
)


class ValueConstraint:
    """
    Runtime check applied to every value inserted into a collection.

    Description:
        Wraps one of three descriptor forms behind a single :meth:`accepts`
        check:

        - a class: values must be instances of it (subclasses included)
        - a tuple of classes or a union (`int | str`): values must be an
          instance of any member
        - a predicate callable: values must make it return a truthy result

        Classes are callable, so they are always treated as type checks,
        never as predicates.

    Attributes:
        descriptor (ConstraintDescriptor): The descriptor as provided.

    """

    __slots__ = ("_check", "descriptor")

    def __init__(self, descriptor: ConstraintDescriptor):
        """
        Build a constraint from a descriptor.

        Args:
            descriptor (ConstraintDescriptor):
                Class, tuple of classes, union of classes, or predicate callable.

        Raises:
            ConstraintDefinitionError: If `descriptor` has none of those forms.

        """
        if isinstance(descriptor, type):
            self._check = lambda v: isinstance(v, descriptor)
        elif isinstance(descriptor, tuple):
            if not descriptor or not all(isinstance(t, type) for t in descriptor):
                raise ConstraintDefinitionError(descriptor)
            self._check = lambda v: isinstance(v, descriptor)
        elif isinstance(descriptor, types.UnionType):
            self._check = lambda v: isinstance(v, descriptor)
        elif callable(descriptor):
            self._check = lambda v: bool(descriptor(v))
        else:
            raise ConstraintDefinitionError(descriptor)
        self.descriptor = descriptor

    @classmethod
    def from_descriptor(
        cls,
        descriptor: ValueConstraint | ConstraintDescriptor | None,
    ) -> ValueConstraint | None:
        """
        Normalize an optional descriptor into a constraint.

        Returns `None` for `None`, the same object for an existing
        :class:`ValueConstraint`, and a new constraint otherwise.
        """
        if descriptor is None or isinstance(descriptor, ValueConstraint):
            return descriptor
        return cls(descriptor)

    @property
    def name(self) -> str:
        """Display name: class name, `A|B` for tuples and unions, or the predicate's name."""
        d = self.descriptor
        if isinstance(d, types.UnionType):
            d = d.__args__
        if isinstance(d, tuple):
            return "|".join(t.__name__ for t in d)
        return getattr(d, "__name__", type(d).__name__)

    def accepts(self, value: Any) -> bool:
        """Return True if `value` satisfies the constraint."""
        return self._check(value)

    def __repr__(self) -> str:
        return f"ValueConstraint({self.name})"
