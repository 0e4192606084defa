"""mdcorpus logging configuration."""

import logging
import sys

_CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_component_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Args:
        name: Component name

    Returns:
        Logger under the ``mdcorpus`` namespace
    """
    return logging.getLogger(f"mdcorpus.{name}")


def configure_logging(level: str = "INFO") -> None:
    """Configure console logging for the ``mdcorpus`` namespace.

    Safe to call more than once; later calls replace the console handler with
    one writing to the current ``sys.stderr``.

    Args:
        level: Log level name, e.g. ``DEBUG`` or ``INFO``
    """
    logger = logging.getLogger("mdcorpus")
    logger.setLevel(level.upper())
    for old in [h for h in logger.handlers if getattr(h, "_mdcorpus_console", False)]:
        logger.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    handler._mdcorpus_console = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
