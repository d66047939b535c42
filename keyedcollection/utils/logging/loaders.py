"""
Log helpers for reporting loaded modules, commands, and subcommands.

The reported objects are duck-typed: a module exposes `label` and a
`commands` collection; a command or subcommand exposes `label`,
`has_subcommands`, and a `subcommands` collection.
"""

from __future__ import annotations

from typing import Any

from .logger import get_logger

logger = get_logger("loaders")


def _count(items: Any) -> int:
    """Number of entries in a collection-like object (`.size` or `len()`)."""
    size = getattr(items, "size", None)
    if isinstance(size, int):
        return size
    return len(items)


def _describe(obj: Any) -> str:
    msg = f"{obj.label} Initialised!"
    if getattr(obj, "has_subcommands", False):
        msg += f" Subcommands loaded -{_count(obj.subcommands)}-"
    return msg


def report_module_loaded(module: Any) -> str:
    """
    Log that a module finished loading, with its command count.

    Args:
        module (Any): Object exposing `label` and `commands`.

    Returns:
        str: The logged message.

    """
    msg = f"[{module.label}] Initialised! Commands loaded -{_count(module.commands)}-"
    logger.info(msg, extra={"title_desc": "module", "omit_origin": True})
    return msg


def report_command_loaded(command: Any) -> str:
    """Log that a command finished loading. Returns the logged message."""
    msg = _describe(command)
    logger.info(msg, extra={"title_desc": "command", "omit_origin": True})
    return msg


def report_subcommand_loaded(subcommand: Any) -> str:
    """Log that a subcommand finished loading. Returns the logged message."""
    msg = _describe(subcommand)
    logger.info(msg, extra={"title_desc": "subcmd", "omit_origin": True})
    return msg
