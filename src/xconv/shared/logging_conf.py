"""
Logging Configuration - Logging Setup and Configuration

This module provides centralized logging configuration for the application.
Log records go to stderr (stdout carries only command results) and,
optionally, to a rotating log file.

Files that USE this module:
- xconv.app (setup_logging function for logging initialization)

Files that this module USES:
- None (pure configuration module)
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union
from logging.handlers import RotatingFileHandler


def setup_logging(
    level=logging.WARNING,
    log_file: Optional[Union[str, Path]] = None,
    log_dir: Optional[Union[str, Path]] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    to_stream: bool = True,
) -> None:
    """
    Configure application-wide logging settings.

    Args:
        level: Logging level (default: logging.WARNING)
              Options: logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR
        log_file: Optional path to log file (enables file logging)
        log_dir: Optional directory for log files (file is named xconv.log)
        max_bytes: Maximum size per log file before rotation (default: 10MB)
        backup_count: Number of backup log files to keep (default: 5)
        to_stream: Whether to log to stderr
    """
    log_format = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    handlers: list[logging.Handler] = []

    if to_stream:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(logging.Formatter(log_format, date_format))
        handlers.append(stream_handler)

    log_file_path: Optional[Path] = None
    if log_file or log_dir:
        if log_dir:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file_path = log_dir / "xconv.log"
        else:
            log_file_path = Path(log_file)
            log_file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(log_format, date_format))
        handlers.append(file_handler)

    # Keep logging quiet rather than falling back to lastResort
    if not handlers:
        handlers = [logging.NullHandler()]

    logging.basicConfig(
        level=level,
        format=log_format,
        datefmt=date_format,
        handlers=handlers,
        force=True,
    )

    # httpx logs every request at INFO, including the API key in the URL
    logging.getLogger("httpx").setLevel(max(logging.WARNING, level))

    logger = logging.getLogger(__name__)
    if log_file_path:
        logger.debug("Logging configured: file=%s, level=%s", log_file_path, level)
    else:
        logger.debug("Logging configured: stderr, level=%s", level)
