"""
evelib Structured Logging

Every module logs through get_logger(__name__). Loggers share one stderr
handler and take their level from settings, so a single EVELIB_LOG_LEVEL
controls the request and token refresh chatter of all clients.

Usage:
    from evelib.core.logging import get_logger

    logger = get_logger(__name__)
    logger.debug("GET %s", url)
    logger.info("Access token refreshed")

Environment Variables:
    EVELIB_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL
    EVELIB_DEBUG: Raise the default WARNING level to DEBUG
    EVELIB_LOG_JSON: Emit one JSON object per record
"""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Optional

from .config import get_settings

# Attributes every LogRecord carries; anything else came in through extra=
_STANDARD_RECORD_FIELDS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "taskName"}

_loggers: dict[str, logging.Logger] = {}
_handler: Optional[logging.Handler] = None


def _exception_text(record: logging.LogRecord) -> str:
    return "".join(traceback.format_exception(*record.exc_info))


class EveLibFormatter(logging.Formatter):
    """
    Renders records as ``[EVELIB LEVEL] [module] message`` or as JSON.

    The module tag is the last dotted component of the logger name.
    In JSON mode any ``extra=`` fields are copied into the object.
    """

    def __init__(self, json_output: bool = False) -> None:
        super().__init__()
        self.json_output = json_output

    def format(self, record: logging.LogRecord) -> str:
        if self.json_output:
            return self._as_json(record)
        return self._as_text(record)

    def _as_text(self, record: logging.LogRecord) -> str:
        module = record.name.rsplit(".", 1)[-1]
        line = f"[EVELIB {record.levelname}] [{module}] {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{_exception_text(record)}"
        return line

    def _as_json(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(timespec="seconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _STANDARD_RECORD_FIELDS
        )
        if record.exc_info:
            payload["exception"] = _exception_text(record)
        return json.dumps(payload, default=str)


def _shared_handler() -> logging.Handler:
    global _handler
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(EveLibFormatter(json_output=get_settings().log_json))
    return _handler


def get_logger(name: str) -> logging.Logger:
    """
    Return the evelib logger for a module, configuring it on first use.

    Args:
        name: Dotted module name, normally ``__name__``

    Returns:
        A non-propagating logger writing to the shared stderr handler
    """
    logger = _loggers.get(name)
    if logger is not None:
        return logger

    logger = logging.getLogger(name)
    logger.setLevel(get_settings().log_level_int)
    logger.addHandler(_shared_handler())
    logger.propagate = False
    _loggers[name] = logger
    return logger


def set_log_level(level: int) -> None:
    """Apply a logging level to every logger handed out so far."""
    for logger in _loggers.values():
        logger.setLevel(level)


def debug_enabled() -> bool:
    return get_settings().log_level_int <= logging.DEBUG


def reset_logging() -> None:
    """
    Return evelib loggers to stock behaviour between tests.

    Each ``evelib`` logger propagates again with level NOTSET and loses the
    shared handler, so pytest's caplog captures its records.
    """
    global _handler

    registered = logging.Logger.manager.loggerDict
    for name, entry in list(registered.items()):
        # PlaceHolder entries stand in for loggers that were never created
        if isinstance(entry, logging.Logger) and (name == "evelib" or name.startswith("evelib.")):
            entry.propagate = True
            entry.setLevel(logging.NOTSET)

    if _handler is not None:
        for logger in _loggers.values():
            logger.removeHandler(_handler)
    _handler = None
