from __future__ import annotations

import logging

from .formatters import KeyedCollectionBannerFormatter, WarningFormatter

"""
Example usage of logging:

```python
from keyedcollection.utils.logging import get_logger

logger = get_logger("registry")
logger.info("Commands loaded")
```
"""


_LOGGER_NAME = "keyedcollection"


def get_logger(
    name: str | None = None,
    level: int = logging.INFO,
) -> logging.Logger:
    """
    Return a configured keyedcollection logger instance.

    Args:
        name (str | None):
            Optional child logger name (e.g., "collection", "loaders").
        level (int):
            Logging level applied the first time the logger is configured.

    Returns:
        logging.Logger:
            Configured logger instance.

    """
    logger_name = _LOGGER_NAME if name is None else f"{_LOGGER_NAME}.{name}"
    logger = logging.getLogger(logger_name)

    # Configure only once
    if not logger.handlers:
        logger.setLevel(level)
        logger.propagate = False

        handler = logging.StreamHandler()
        if name == "warnings":
            handler.setFormatter(WarningFormatter())
        else:
            handler.setFormatter(KeyedCollectionBannerFormatter())
        logger.addHandler(handler)

    return logger
