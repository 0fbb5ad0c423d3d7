"""
Structured Logging Configuration

All lungcare loggers hang off the ``lungcare`` package logger. The mapping
pipeline logs per-entity decisions at DEBUG and batch summaries at INFO;
the risk aggregator logs unrecognised diagnosis labels at DEBUG. Individual
modules can be raised or lowered through ``module_levels`` (configured from
LUNGCARE_LOG_MODULE_LEVELS) without touching the package level.
"""
import logging
import sys
from typing import Dict, Optional
from datetime import datetime, timezone

from lungcare.config import LOG_FILE, LOG_LEVEL, LOG_MODULE_LEVELS

PACKAGE_LOGGER = "lungcare"

# Loggers given an explicit level by the last setup_logging call
_module_overrides: set = set()


class StructuredFormatter(logging.Formatter):
    """Console formatter: UTC timestamp, padded level, logger name."""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m'
    }

    def format(self, record: logging.LogRecord) -> str:
        record.timestamp = datetime.now(timezone.utc).isoformat()

        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset = self.COLORS['RESET']

        # "lungcare.core.mapping.merger" → "mapping.merger"
        name = record.name
        if name.startswith(f"{PACKAGE_LOGGER}.core."):
            name = name[len(f"{PACKAGE_LOGGER}.core."):]

        log_message = (
            f"{color}[{record.timestamp}] "
            f"{record.levelname:8} "
            f"[{name}] "
            f"{record.getMessage()}{reset}"
        )

        if record.exc_info:
            log_message += f"\n{self.formatException(record.exc_info)}"

        return log_message


def _level(name: str) -> int:
    return getattr(logging, str(name).upper(), logging.INFO)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    module_levels: Optional[Dict[str, str]] = None,
) -> None:
    """
    Configure logging for the ``lungcare`` logger tree.

    Args:
        level: Package logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
        module_levels: Optional per-logger levels, e.g.
            {"lungcare.core.mapping.merger": "DEBUG"}
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(_level(level))

    # Reconfiguring replaces earlier handlers rather than stacking them
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    # Earlier overrides fall back to inheriting the package level
    for name in _module_overrides:
        logging.getLogger(name).setLevel(logging.NOTSET)
    _module_overrides.clear()

    for name, module_level in (module_levels or {}).items():
        logging.getLogger(name).setLevel(_level(module_level))
        _module_overrides.add(name)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(StructuredFormatter())
    package_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(name)s | %(message)s'
        ))
        package_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


setup_logging(LOG_LEVEL, LOG_FILE, LOG_MODULE_LEVELS)
