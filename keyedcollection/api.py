# ================================================
# Core
# ================================================
from keyedcollection.core.collection import KeyedCollection
from keyedcollection.core.constraints import ValueConstraint
from keyedcollection.core.sentinels import ABSENT


# ================================================
# Errors
# ================================================
from keyedcollection.utils.errors.error_handling import ErrorMode
from keyedcollection.utils.errors.exceptions import (
    ConstraintDefinitionError,
    ConstraintViolationError,
    ConstraintViolationWarning,
    KeyedCollectionError,
)


# ================================================
# Logging
# ================================================
from keyedcollection.utils.logging.logger import get_logger
from keyedcollection.utils.logging.loaders import (
    report_command_loaded,
    report_module_loaded,
    report_subcommand_loaded,
)

__all__ = [
    "ABSENT",
    "ConstraintDefinitionError",
    "ConstraintViolationError",
    "ConstraintViolationWarning",
    "ErrorMode",
    "KeyedCollection",
    "KeyedCollectionError",
    "ValueConstraint",
    "get_logger",
    "report_command_loaded",
    "report_module_loaded",
    "report_subcommand_loaded",
]
