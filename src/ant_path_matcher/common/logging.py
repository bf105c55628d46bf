"""Structured logging for the matcher package using structlog.

Loggers are structlog wrappers around standard library loggers in the
``ant_path_matcher`` namespace. Nothing here touches the root logger or the
global structlog configuration: a host application routes or silences the
package's records through ``logging`` as it does for any other library.
"""

import logging
import sys

import structlog
from structlog.typing import Processor

PACKAGE_LOGGER_NAME = "ant_path_matcher"

SHARED_PROCESSORS: list[Processor] = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]

# Handlers attached by setup_logging, replaced on the next call
_installed_handlers: list[logging.Handler] = []


def _formatter(json_format: bool, colors: bool) -> structlog.stdlib.ProcessorFormatter:
    renderer: Processor
    if json_format:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=colors)

    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=SHARED_PROCESSORS,
    )


def setup_logging(
    level: str = "INFO",
    json_format: bool = False,
    log_file: str | None = None,
) -> None:
    """Send the package's log records to stdout and optionally a file.

    Only the ``ant_path_matcher`` logger is configured. Handlers installed
    by the host application, on the root logger or anywhere else, are left
    in place; handlers from a previous call to this function are replaced.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: If True, render records as JSON
        log_file: Optional file path to write records to
    """
    log_level = getattr(logging, level.upper())
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    while _installed_handlers:
        handler = _installed_handlers.pop()
        package_logger.removeHandler(handler)
        handler.close()

    package_logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(_formatter(json_format, colors=not json_format))
    _installed_handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(_formatter(json_format, colors=False))
        _installed_handlers.append(file_handler)

    for handler in _installed_handlers:
        package_logger.addHandler(handler)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to a standard library logger.

    Args:
        name: Logger name (usually __name__)

    Returns:
        structlog logger whose records go through ``logging.getLogger(name)``
    """
    return structlog.wrap_logger(  # type: ignore[no-any-return]
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
    )
