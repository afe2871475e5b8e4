from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler, QueueHandler, QueueListener
from queue import Queue
from pathlib import Path
from typing import Optional

from .levels import register_levels, to_level
from .formatter import ConsoleFormatter, JSONFormatter

_listener: QueueListener | None = None


def bootstrap_logging(
    *,
    service: str = "kvdel",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "kvdel.jsonl",
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    """Configure the root logger.

    The console handler is off unless LOG_CONSOLE=true, so command output on
    stdout stays clean. With ``log_dir`` set, records are also written as JSON
    lines to a rotating file through a background queue listener.
    """
    global _listener
    shutdown_logging()
    register_levels()
    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)

    if os.getenv("LOG_CONSOLE", "false").strip().lower() == "true":
        console = logging.StreamHandler()
        console_level_str = os.getenv("LOG_CONSOLE_LEVEL", "")
        console.setLevel(to_level(console_level_str) if console_level_str else lvl)
        console.setFormatter(ConsoleFormatter())
        root.addHandler(console)

    if log_dir:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            json_handler = RotatingFileHandler(str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count)
        except OSError as e:
            # an unwritable log directory must not stop the command itself
            logging.getLogger(__name__).warning("file logging disabled: %s", e)
        else:
            json_handler.setLevel(lvl)
            json_handler.setFormatter(JSONFormatter())
            q: Queue[logging.LogRecord] = Queue(-1)
            root.addHandler(QueueHandler(q))
            _listener = QueueListener(q, json_handler, respect_handler_level=True)
            _listener.start()

    if not root.handlers:
        root.addHandler(logging.NullHandler())
    logging.getLogger(__name__).debug("logging ready service=%s level=%s", service, logging.getLevelName(lvl))


def shutdown_logging() -> None:
    """Flush and stop the file listener, if any."""
    global _listener
    if _listener:
        _listener.stop()
        _listener = None
