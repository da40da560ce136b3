"""
Logger setup

Applies LoggingConfig to the project's logger namespaces. Modules keep using
``logging.getLogger(__name__)``; this only decides levels and handlers.
"""
import logging
from typing import Optional

from core.config import LoggingConfig

# Top-level packages whose module loggers are configured here
LOGGER_NAMESPACES = ("core", "services")


def setup_service_logger(
    name: str,
    level: Optional[str] = None,
    config: Optional[LoggingConfig] = None,
) -> logging.Logger:
    """
    Configure and return a named logger.

    Args:
        name: Logger name (a module path or one of LOGGER_NAMESPACES)
        level: Level override, e.g. "DEBUG"
        config: Logging configuration; read from the environment if omitted

    Returns:
        The configured logger
    """
    config = config or LoggingConfig.from_env()
    logger = logging.getLogger(name)
    logger.setLevel((level or config.log_level).upper())

    # Re-running setup must not stack duplicate handlers
    if getattr(logger, "_booker_configured", False):
        return logger

    formatter = logging.Formatter(config.log_format)

    if config.enable_console:
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        logger.addHandler(console)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger._booker_configured = True
    return logger


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """Configure every project logger namespace"""
    config = config or LoggingConfig.from_env()
    for namespace in LOGGER_NAMESPACES:
        setup_service_logger(namespace, config=config)


__all__ = ["setup_service_logger", "setup_logging", "LOGGER_NAMESPACES"]
