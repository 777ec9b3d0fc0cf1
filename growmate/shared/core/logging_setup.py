"""Logging configuration for GrowMate entry points.

File handler: everything at the configured level to ``<log_dir>/growmate.log``.
Console handler: only WARNING and ERROR.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from .configuration import LoggingConfig

LOG_FILE_NAME = "growmate.log"

log_level_map = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def configure_logging(config: LoggingConfig, base_dir: Optional[Path] = None) -> Optional[Path]:
    """Install file and console handlers on the root logger.

    Args:
        config: Logging section of the system configuration
        base_dir: Directory a relative ``log_dir`` is resolved against

    Returns:
        Path of the log file, or None when file logging is disabled
    """
    file_log_level = log_level_map.get(config.level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(file_log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    log_file_path: Optional[Path] = None
    if config.file_enabled:
        logs_dir = Path(config.log_dir)
        if not logs_dir.is_absolute():
            logs_dir = (base_dir or Path.cwd()) / logs_dir
        logs_dir.mkdir(parents=True, exist_ok=True)
        log_file_path = logs_dir / LOG_FILE_NAME

        file_handler = logging.handlers.RotatingFileHandler(
            log_file_path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(file_log_level)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    ))
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).info(
        f"Logging configured: file={log_file_path}, console=WARNING+"
    )
    return log_file_path
