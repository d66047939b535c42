from keyedcollection.utils.logging.loaders import (
    report_command_loaded,
    report_module_loaded,
    report_subcommand_loaded,
)
from keyedcollection.utils.logging.logger import get_logger
from keyedcollection.utils.logging.warnings import catch_warnings, warn

__all__ = [
    "catch_warnings",
    "get_logger",
    "report_command_loaded",
    "report_module_loaded",
    "report_subcommand_loaded",
    "warn",
]
