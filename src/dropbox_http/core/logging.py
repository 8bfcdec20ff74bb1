"""
Loguru integration for the client.

The package logs through loguru but stays silent until the host
application opts in (``dropbox_http/__init__.py`` disables it). Nothing
here touches sinks the application registered itself.

Applications can either:
- call ``logger.enable("dropbox_http")`` and keep their own sinks, or
- call ``configure_logger()`` to add a sink for this package's records
  formatted with the trace id of the current Dropbox call.
"""

import logging
import sys
from typing import Any, TextIO

from loguru import logger

from dropbox_http.config import Settings, get_settings
from dropbox_http.core.trace_context import trace_id_context

PACKAGE = "dropbox_http"

__all__ = [
    "logger",
    "InterceptHandler",
    "add_trace_id",
    "configure_logger",
    "intercept_standard_logging",
]


def add_trace_id(record: dict[str, Any]) -> bool:
    """
    Adds the trace_id to the log record.

    Args:
        record: Loguru record

    Returns:
        True to indicate that the filter passed
    """
    trace_id = trace_id_context.get()
    record["extra"]["trace_id"] = trace_id if trace_id else "N/A"
    return True


def _package_filter(record: dict[str, Any]) -> bool:
    if not (record["name"] or "").startswith(PACKAGE):
        return False
    return add_trace_id(record)


def configure_logger(
    settings: Settings | None = None,
    sink: TextIO | Any = sys.stderr,
    **kwargs: Any,
) -> int:
    """
    Adds a sink for this package's log records and enables them.

    Sinks already registered by the application are left untouched.

    Args:
        settings: Level and format source, cached settings if omitted
        sink: Any loguru sink (stream, path, callable)
        **kwargs: Extra ``logger.add`` options overriding the defaults

    Returns:
        Handler id, to pass to ``logger.remove`` when done
    """
    settings = settings or get_settings()
    options: dict[str, Any] = {
        "level": settings.log_level.upper(),
        "format": settings.log_format,
        "filter": _package_filter,
        "colorize": None,
        "backtrace": True,
        "diagnose": False,
        "enqueue": settings.logger_enqueue,
    }
    options.update(kwargs)

    handler_id = logger.add(sink, **options)
    logger.enable(PACKAGE)
    return handler_id


class InterceptHandler(logging.Handler):
    """
    Handler to redirect standard logging logs to loguru.

    httpx and httpcore log through the standard library; this handler
    makes those records show up next to the client's own logs.
    """

    def emit(self, record: logging.LogRecord) -> None:
        """
        Redirects a standard logging record to loguru.

        Args:
            record: logging.LogRecord record
        """
        loguru_logger = logger.opt(depth=6, exception=record.exc_info)
        loguru_logger.log(record.levelname, record.getMessage())


def intercept_standard_logging(level: int = logging.INFO) -> None:
    """
    Configures redirection of httpx/httpcore logging to loguru.

    Args:
        level: Minimum standard logging level to forward
    """
    for logger_name in ["httpx", "httpcore"]:
        logging_logger = logging.getLogger(logger_name)
        logging_logger.handlers = [InterceptHandler()]
        logging_logger.setLevel(level)
        logging_logger.propagate = False
