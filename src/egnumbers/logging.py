"""
Logging configuration for egnumbers.

The library only creates loggers; it never installs handlers on import.
Applications (or tests) call ``setup_logging`` once.

Every record the library emits goes through a ContextLogger bound to the
kind of identifier it is about ("national_id", "bank_card" or "phone").
The formatters render that kind next to the logger name, and the
redaction filter installed by ``setup_logging`` masks any long digit run
that would otherwise reach a handler.

Usage:
    from egnumbers.logging import ContextLogger, setup_logging

    setup_logging(level="DEBUG")

    logger = ContextLogger(__name__, "national_id", strict_mode=True)
    logger.debug("Parsed national ID batch", total=10, valid=8)
"""

import json
import logging
import re
import sys
from datetime import datetime, timezone
from typing import Any, Optional

IDENTIFIER_KINDS = frozenset({"national_id", "bank_card", "phone"})

# Standard LogRecord attributes; anything else on a record came from ``extra``
_RESERVED_ATTRS = frozenset({
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "stack_info", "exc_info", "exc_text", "thread", "threadName",
    "taskName", "message", "identifier",
})

# Ten or more digits in a row, ASCII or Arabic-Indic/Eastern
_DIGIT_RUN = re.compile(r"[0-9٠-٩۰-۹]{10,}")


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RESERVED_ATTRS and not key.startswith("_")
    }


def redact_digits(text: str) -> str:
    """Mask every run of ten or more digits, keeping its last four."""
    return _DIGIT_RUN.sub(lambda m: "•" * (len(m.group()) - 4) + m.group()[-4:], text)


class IdentifierRedactionFilter(logging.Filter):
    """
    Masks long digit runs in the message, its arguments and string extras.

    National IDs (14 digits), card numbers (12-19) and phone numbers (11)
    all trip the ten-digit threshold.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = redact_digits(record.msg)

        if record.args and isinstance(record.args, tuple):
            record.args = tuple(
                redact_digits(arg) if isinstance(arg, str) else arg
                for arg in record.args
            )

        for key, value in _extra_fields(record).items():
            if isinstance(value, str):
                setattr(record, key, redact_digits(value))

        return True


class JSONFormatter(logging.Formatter):
    """
    JSON log formatter for structured logging.

    Output format:
    {
        "timestamp": "2024-01-15T10:30:00.123456+00:00",
        "level": "DEBUG",
        "logger": "egnumbers.bank_card",
        "identifier": "bank_card",
        "message": "Card rejected",
        "reason": "LUHN_CHECK_FAILED",
        ...
    }
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
        }

        identifier = getattr(record, "identifier", None)
        if identifier:
            log_data["identifier"] = identifier

        log_data["message"] = record.getMessage()

        # Source location for warnings and errors
        if record.levelno >= logging.WARNING:
            log_data["source"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in _extra_fields(record).items():
            try:
                json.dumps(value)
                log_data[key] = value
            except (TypeError, ValueError):
                log_data[key] = str(value)

        # Arabic labels stay readable in the output
        return json.dumps(log_data, default=str, ensure_ascii=False)


class DevelopmentFormatter(logging.Formatter):
    """
    Human-readable log formatter for development.

    Output format:
    2024-01-15 10:30:00 DEBUG    [egnumbers.bank_card:bank_card] Card rejected reason=LUHN_CHECK_FAILED
    """

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname

        if self.use_colors:
            color = self.COLORS.get(level, "")
            level = f"{color}{level}{self.RESET}"

        source = record.name
        identifier = getattr(record, "identifier", None)
        if identifier:
            source = f"{source}:{identifier}"

        extras = " ".join(f"{key}={value}" for key, value in _extra_fields(record).items())
        extra_str = f" {extras}" if extras else ""

        message = f"{timestamp} {level:8} [{source}] {record.getMessage()}{extra_str}"

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


def setup_logging(
    level: str = "INFO",
    json_format: bool = False,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure logging for the application.

    Every handler gets an ``IdentifierRedactionFilter``.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: Use JSON formatting (for production)
        log_file: Optional file path to write logs
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if json_format:
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = DevelopmentFormatter(use_colors=sys.stdout.isatty())

    redaction = IdentifierRedactionFilter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(redaction)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        # Always use JSON for file logs
        file_handler.setFormatter(JSONFormatter())
        file_handler.addFilter(redaction)
        root_logger.addHandler(file_handler)


def setup_logging_from_settings(settings=None) -> None:
    """Configure logging from ``Settings.logging`` (defaults to ``get_settings()``)."""
    if settings is None:
        from .config import get_settings
        settings = get_settings()

    setup_logging(
        level=settings.logging.level,
        json_format=settings.logging.json_format,
        log_file=settings.logging.file,
    )


class ContextLogger:
    """
    Logger wrapper bound to an identifier kind plus fixed context fields.

    Usage:
        logger = ContextLogger(__name__, "bank_card", mask_char="*")
        logger.debug("Card analysed", network="Visa")
    """

    def __init__(self, name: str, identifier: str, **context: Any) -> None:
        if identifier not in IDENTIFIER_KINDS:
            raise ValueError(
                f"identifier must be one of {sorted(IDENTIFIER_KINDS)}, got {identifier!r}"
            )
        self._logger = logging.getLogger(name)
        self.identifier = identifier
        self._context = context

    @property
    def context(self) -> dict[str, Any]:
        return dict(self._context)

    def is_enabled_for(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def _log(self, level: int, msg: str, **kwargs: Any) -> None:
        extra = {**self._context, **kwargs, "identifier": self.identifier}
        self._logger.log(level, msg, extra=extra)

    def debug(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, **kwargs)
