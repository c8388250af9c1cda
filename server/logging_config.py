"""
Logging setup shared by the server entry points.

- console: LOG_LEVEL (default INFO)
- optional file: <log_dir>/companion.log, rotating
"""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str = "INFO", log_dir: Optional[str] = None,
                  max_mb: int = 10, backups: int = 5) -> Optional[Path]:
    """Resets root handlers; returns the log file path when file logging is on."""
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    fmt = logging.Formatter(LOG_FORMAT)

    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    root.addHandler(ch)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    if not log_dir:
        return None
    path = Path(log_dir) / "companion.log"
    path.parent.mkdir(parents=True, exist_ok=True)
    fh = RotatingFileHandler(str(path), maxBytes=max_mb * 1024 * 1024,
                             backupCount=backups, encoding="utf-8")
    fh.setFormatter(fmt)
    root.addHandler(fh)
    return path
