from keyedcollection.api import (
    ABSENT,
    ConstraintDefinitionError,
    ConstraintViolationError,
    ConstraintViolationWarning,
    ErrorMode,
    KeyedCollection,
    KeyedCollectionError,
    ValueConstraint,
    get_logger,
    report_command_loaded,
    report_module_loaded,
    report_subcommand_loaded,
)

# Alias matching the name used throughout the command framework
Collection = KeyedCollection
