from keyedcollection.utils.errors.error_handling import ErrorMode
from keyedcollection.utils.errors.exceptions import (
    ConstraintDefinitionError,
    ConstraintViolationError,
    ConstraintViolationWarning,
    KeyedCollectionError,
)

__all__ = [
    "ConstraintDefinitionError",
    "ConstraintViolationError",
    "ConstraintViolationWarning",
    "ErrorMode",
    "KeyedCollectionError",
]
