from __future__ import annotations

"""
Logging Setup for the CLI.

The root logger gets dirtree's handlers exactly once per configuration:
a stderr stream and, when --log-file is given, a rotating file. Both sit
behind a QueueListener thread so file writes never block the walk.
"""

import atexit
import logging
import os
import queue
import sys
from dataclasses import dataclass
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from typing import List, Optional

# Markers stored on the root logger and on each handler we install
_CONFIGURED_FLAG_ATTR: str = "_dirtree_configured"
_QUEUE_LISTENER_ATTR: str = "_dirtree_queue_listener"
_HANDLER_TAG_ATTR: str = "_dirtree_handler"

_CONSOLE_FORMAT = "%(levelname)s | %(message)s"
_FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_FILE_MAX_BYTES = 1024 * 1024
_FILE_BACKUPS = 3

_atexit_registered = False


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings the CLI passes to configure_logging.

    Attributes:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        console: Write records to stderr.
        log_file: Optional path of a rotating log file.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once.

    Args:
        cfg: Handler selection and level.
        force: If True, tear down and re-create dirtree's handlers.

    Returns:
        logging.Logger: The root logger.
    """
    global _atexit_registered

    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    _teardown(root)

    level = logging.getLevelName(str(cfg.level or "WARNING").strip().upper())
    if not isinstance(level, int):
        level = logging.WARNING
    root.setLevel(level)

    handlers: List[logging.Handler] = []
    if cfg.console:
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
        handlers.append(sh)
    if cfg.log_file:
        fh = _open_log_file(cfg.log_file)
        if fh is not None:
            handlers.append(fh)

    if not handlers:
        return root

    for h in handlers:
        h.setLevel(level)
        setattr(h, _HANDLER_TAG_ATTR, True)

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    queue_handler = QueueHandler(log_queue)
    setattr(queue_handler, _HANDLER_TAG_ATTR, True)

    listener = QueueListener(log_queue, *handlers, respect_handler_level=True)
    listener.start()

    root.addHandler(queue_handler)
    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)

    if not _atexit_registered:
        atexit.register(shutdown_logging)
        _atexit_registered = True

    return root


def get_logger(name: str) -> logging.Logger:
    """Acquire a named logger (usually __name__)."""
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """Flush queued records, detach dirtree's handlers and allow reconfiguration."""
    _teardown(logging.getLogger())


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _teardown(root: logging.Logger) -> None:
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()
    setattr(root, _QUEUE_LISTENER_ATTR, None)

    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG_ATTR, False):
            root.removeHandler(h)
            h.close()

    if listener is not None:
        # The queue listener owns the stream and file handlers
        for h in listener.handlers:
            h.close()

    setattr(root, _CONFIGURED_FLAG_ATTR, False)


def _open_log_file(path: str) -> Optional[RotatingFileHandler]:
    """Open a rotating log file, warning on stderr when that is impossible."""
    try:
        parent = os.path.dirname(os.path.abspath(path))
        os.makedirs(parent, exist_ok=True)
        fh = RotatingFileHandler(
            path,
            maxBytes=_FILE_MAX_BYTES,
            backupCount=_FILE_BACKUPS,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: cannot open log file '{path}': {e}\n")
        return None

    fh.setFormatter(logging.Formatter(_FILE_FORMAT))
    return fh
