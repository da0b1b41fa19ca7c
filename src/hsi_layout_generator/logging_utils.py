"""
Centralized logging utilities for the layout generator.

Defines a shared logger instance and setup function so every generator,
the controller and the CLI log through the same configured handler.
"""

import logging


def setup_logger(
        name: str = __name__,
        level: int = logging.INFO,
        formatter: logging.Formatter | None = None,
        handler: logging.Handler | None = None,
) -> logging.Logger:
    """
    Configure a logger with optional custom formatting and handler.

    The handler is attached only once per logger name, so repeated calls
    return the same configured instance.

    Args:
        name: Logger name, typically set to __name__.
        level: Logging level (e.g., logging.INFO, logging.DEBUG).
        formatter: Optional custom formatter.
        handler: Optional custom handler.

    Returns:
        A configured logger instance.

    """
    logger_instance = logging.getLogger(name)
    logger_instance.setLevel(level)
    if not logger_instance.handlers:
        if formatter is None:
            formatter = logging.Formatter(
                "%(asctime)s [%(levelname)s] %(message)s")
        if handler is None:
            handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger_instance.addHandler(handler)
        logger_instance.propagate = False
    return logger_instance


def set_verbosity(*, verbose: bool) -> None:
    """Switch the shared logger between INFO and DEBUG."""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


# Shared logger used across modules
logger = setup_logger("hsi_layout")
