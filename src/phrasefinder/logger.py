"""Logging configuration for the phrasefinder command line."""
from __future__ import annotations

import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

__all__ = ["LOG_FORMAT", "setup_logger"]

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
        log_dir: Optional[Union[str, Path]] = None,
        *,
        level: int = logging.INFO,
        filename_prefix: str = "phrasefinder",
        console: bool = True,
        rotate: bool = False,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 3,
        force: bool = False,
) -> Optional[Path]:
    """
    Configure root logging for a phrasefinder session.

    With ``log_dir`` set, a timestamped log file is created there
    (directory is created if needed). Console output goes to stderr.

    Args:
        log_dir: Directory for the log file; None disables file logging
        level: Logging level (default: INFO)
        filename_prefix: Prefix for the log filename
        console: If True, also log to stderr
        rotate: If True, use RotatingFileHandler instead of FileHandler
        max_bytes: Maximum log file size before rotation (if rotate=True)
        backup_count: Number of backup files to keep (if rotate=True)
        force: If True, remove existing root handlers first

    Returns:
        Path to the log file, or None when no directory was given

    Examples:
        >>> setup_logger("~/.phrasefinder/logs", console=False)
        PosixPath('/home/me/.phrasefinder/logs/phrasefinder_20250929_175430.log')
    """
    root = logging.getLogger()
    if force:
        for handler in list(root.handlers):
            root.removeHandler(handler)

    root.setLevel(level)
    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    log_path: Optional[Path] = None
    if log_dir is not None:
        directory = Path(log_dir).expanduser().resolve()
        directory.mkdir(parents=True, exist_ok=True)

        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = directory / f"{filename_prefix}_{ts}.log"

        if rotate:
            fhandler: logging.Handler = RotatingFileHandler(
                log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
            )
        else:
            fhandler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
        fhandler.setLevel(level)
        fhandler.setFormatter(fmt)
        root.addHandler(fhandler)

    if console:
        shandler = logging.StreamHandler()
        shandler.setLevel(level)
        shandler.setFormatter(fmt)
        root.addHandler(shandler)

    if log_path is not None:
        root.info("Logging to: %s", log_path)
    return log_path
