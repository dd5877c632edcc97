"""Package-level logging for tool dispatch.

Every module logs under the ``tool_dispatch`` namespace. The package installs
only a ``NullHandler``; routing records anywhere is left to the host.
"""

import logging
import sys
from typing import Optional, TextIO

_LOGGER_NAME = "tool_dispatch"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the ``tool_dispatch`` logger or one of its children.

    ``__name__`` of a module inside the package maps to itself; any other name
    is nested under the package namespace.
    """
    if not name:
        return logging.getLogger(_LOGGER_NAME)
    if name == _LOGGER_NAME or name.startswith(f"{_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")


def setup_logging(
    level: int = logging.INFO,
    format_str: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream: Optional[TextIO] = None,
) -> None:
    """Print dispatch diagnostics, for scripts and applications that want them.

    Args:
        level: Threshold applied to the ``tool_dispatch`` logger.
        format_str: Record format.
        stream: Destination, ``sys.stdout`` by default.
    """
    package_logger = logging.getLogger(_LOGGER_NAME)

    # Repeated calls keep the first real handler.
    if any(not isinstance(handler, logging.NullHandler) for handler in package_logger.handlers):
        return

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(format_str))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)


logging.getLogger(_LOGGER_NAME).addHandler(logging.NullHandler())
