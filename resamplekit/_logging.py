"""
Logging configuration for resamplekit.

Every module gets a logger under the ``resamplekit`` namespace. Nothing is
emitted unless the user configures logging.

Usage:
    from resamplekit._logging import get_logger

    logger = get_logger(__name__)
    logger.debug("vfold_cv: 10 splits over 32 units")

Configuration (by user):
    import logging

    logging.getLogger("resamplekit").setLevel(logging.DEBUG)
    logging.getLogger("resamplekit.data.strata").setLevel(logging.INFO)
"""

import logging

DEFAULT_FORMAT = "%(levelname)s [%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Get logger for a resamplekit module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance

    Example:
        >>> logger = get_logger("splitters.vfold")
        >>> logger.name
        'resamplekit.splitters.vfold'
    """
    if not name.startswith("resamplekit"):
        name = "resamplekit" if name == "__main__" else f"resamplekit.{name}"

    return logging.getLogger(name)


def setup_basic_logging(level: int = logging.INFO, fmt: str | None = None) -> None:
    """
    Attach a console handler to the resamplekit logger.

    Args:
        level: Logging level (default: INFO)
        fmt: Log message format (default: DEFAULT_FORMAT)
    """
    if fmt is None:
        fmt = DEFAULT_FORMAT

    logger = logging.getLogger("resamplekit")
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)

    # Avoid duplicate records through the root logger
    logger.propagate = False


def disable_logging() -> None:
    """Silence all resamplekit logging."""
    logging.getLogger("resamplekit").setLevel(logging.CRITICAL + 1)
