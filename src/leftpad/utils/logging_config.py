"""
Centralized logging configuration for leftpad.
Ensures all logging goes to files and never to stdout/stderr, so padded
output printed by the CLI is never interleaved with log lines.

Only the ``leftpad`` package logger owns a handler. Module loggers
propagate to it, so reconfiguring the package logger redirects all of them.
"""
import logging

from leftpad.config import LOG_FILE_NAME, LOG_FORMAT, get_logs_dir

PACKAGE_LOGGER_NAME = 'leftpad'


def _create_file_handler(level: int = None) -> logging.FileHandler:
    logs_dir = get_logs_dir()
    logs_dir.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(logs_dir / LOG_FILE_NAME)
    if level is not None:
        file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    file_handler.leftpad_owned = True
    return file_handler


def _replace_handlers(logger: logging.Logger, handlers: list):
    """Swap the handlers of a logger, closing the leftpad handlers it drops."""
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        if getattr(handler, "leftpad_owned", False) and handler not in handlers:
            handler.close()
    for handler in handlers:
        logger.addHandler(handler)


def setup_logging(verbose: bool = False):
    """Setup centralized logging for the entire application.

    Args:
        verbose: Enable debug level logging if True
    """
    level = logging.DEBUG if verbose else logging.INFO
    file_handler = _create_file_handler(level)

    # Root gets the file handler too, so nothing falls back to stderr
    logging.root.setLevel(level)
    _replace_handlers(logging.root, [file_handler])

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.propagate = False
    _replace_handlers(package_logger, [file_handler])


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance that's guaranteed to only log to files.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance configured for file-only output
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not package_logger.handlers:
        package_logger.propagate = False
        package_logger.addHandler(_create_file_handler())

    if name != PACKAGE_LOGGER_NAME and not name.startswith(PACKAGE_LOGGER_NAME + '.'):
        name = f"{PACKAGE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
