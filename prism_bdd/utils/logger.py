"""Logging configuration and the scenario-aware logger.

``setup_logging`` installs a console handler plus two rotating log files:
``test-execution.log`` with everything and ``errors.log`` with ERROR and above.
It is safe to call more than once; handlers are only added when missing.
"""

from __future__ import annotations

import logging
import threading
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, MutableMapping, Optional, Union

__all__ = [
    "LOG_FORMAT",
    "ScenarioLogger",
    "setup_logging",
]

LOG_FORMAT = "%(asctime)s [%(levelname)s]: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

EXECUTION_LOG = "test-execution.log"
ERROR_LOG = "errors.log"
MAX_BYTES = 5 * 1024 * 1024
BACKUP_COUNT = 5

ROOT_LOGGER_NAME = "prism_bdd"

_logging_lock = threading.Lock()


def _has_rotating_handler(logger: logging.Logger, path: Path) -> bool:
    return any(
        isinstance(h, RotatingFileHandler) and h.baseFilename == str(path.absolute())
        for h in logger.handlers
    )


def setup_logging(
    log_dir: Union[str, Path] = "logs",
    level: Optional[str] = None,
    max_bytes: int = MAX_BYTES,
    backup_count: int = BACKUP_COUNT,
) -> logging.Logger:
    """Configure the ``prism_bdd`` logger hierarchy.

    Args:
        log_dir: Directory for the rotating log files, created if missing
        level: Level name (e.g. ``"debug"``); defaults to the LOG_LEVEL setting
        max_bytes: Maximum size of a log file before it is rotated
        backup_count: Number of rotated files to keep

    Returns:
        The configured ``prism_bdd`` logger
    """
    if level is None:
        from prism_bdd.config import environment

        level = environment.get("log_level")

    with _logging_lock:
        logger = logging.getLogger(ROOT_LOGGER_NAME)
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))

        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        has_console_handler = any(
            isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
            for h in logger.handlers
        )
        if not has_console_handler:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        execution_log = log_path / EXECUTION_LOG
        if not _has_rotating_handler(logger, execution_log):
            file_handler = RotatingFileHandler(
                execution_log, maxBytes=max_bytes, backupCount=backup_count
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        error_log = log_path / ERROR_LOG
        if not _has_rotating_handler(logger, error_log):
            error_handler = RotatingFileHandler(
                error_log, maxBytes=max_bytes, backupCount=backup_count
            )
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(formatter)
            logger.addHandler(error_handler)

        return logger


class ScenarioLogger(logging.LoggerAdapter):
    """Logger that prefixes every message with its context, e.g. ``[LoginPage]``.

    Adds ``step``, ``action`` and ``assertion`` helpers used throughout the
    page objects and step definitions.
    """

    def __init__(self, context: str = "DEFAULT"):
        super().__init__(logging.getLogger(f"{ROOT_LOGGER_NAME}.scenario"), {})
        self.context = context

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        return f"[{self.context}] {msg}", kwargs

    def step(self, step_name: str) -> None:
        self.info(f"Executing step: {step_name}")

    def action(self, action: str, element: Optional[str] = None) -> None:
        if element:
            self.info(f"Action: {action} on element: {element}")
        else:
            self.info(f"Action: {action}")

    def assertion(self, assertion: str, result: bool) -> None:
        if result:
            self.info(f"✓ Assertion passed: {assertion}")
        else:
            self.error(f"✗ Assertion failed: {assertion}")
