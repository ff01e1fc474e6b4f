"""
Loggers for the mastering package.

Tuning decisions are logged at TRACE, one line per stage and parameter set;
chain assembly and model resolution at DEBUG; pass results at INFO. The
package root logger carries a ``NullHandler``, so nothing is printed unless
the application configures logging.
"""

import logging
from typing import Any

PACKAGE_LOGGER = "speech_mastering"

# Below DEBUG: per-stage tuning output
TRACE_LEVEL = 5


def add_trace_level() -> None:
    """Register the TRACE level name and a ``Logger.trace`` method."""
    logging.addLevelName(TRACE_LEVEL, "TRACE")

    def trace(self: logging.Logger, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a tuning decision with severity 'TRACE'."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, message, args, **kwargs)

    logging.Logger.trace = trace  # type: ignore[attr-defined]
    logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger with ``trace`` support.

    Args:
        name: Logger name, normally the calling module's ``__name__``

    Returns:
        The named logger
    """
    if not hasattr(logging.Logger, "trace"):
        add_trace_level()
    return logging.getLogger(name)


def set_log_level(level: int | str) -> None:
    """
    Set the verbosity of every logger in the package.

    Args:
        level: A logging level number or name; ``"trace"`` shows tuning decisions

    Raises:
        ValueError: If ``level`` is not a known level name
    """
    package_logger = get_logger(PACKAGE_LOGGER)
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    package_logger.setLevel(level)
