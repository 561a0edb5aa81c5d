# -*- coding: utf-8 -*-
"""
Logging configuration for the feedback relay.

Routes logs by severity so the hosting platform classifies them correctly:
- DEBUG, INFO, WARNING → STDOUT
- ERROR, CRITICAL → STDERR

Records are handed to a QueueListener thread, so request handlers never
block on stdout/stderr writes.
"""

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class MaxLevelFilter(logging.Filter):
    """Allows only records up to max_level (inclusive)."""

    def __init__(self, max_level):
        super().__init__()
        self.max_level = max_level

    def filter(self, record):
        return record.levelno <= self.max_level


_log_listener: Optional[QueueListener] = None


def setup_logging(level: Union[int, str] = logging.INFO):
    """
    Install a QueueHandler on the root logger and start the listener thread.

    Safe to call more than once: the previous listener is stopped and the
    root handlers are replaced.
    """
    global _log_listener

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    _stop_log_listener()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(level)
    stdout_handler.addFilter(MaxLevelFilter(logging.WARNING))
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.ERROR)
    stderr_handler.setFormatter(formatter)

    log_queue = queue.Queue()
    root_logger.addHandler(QueueHandler(log_queue))

    _log_listener = QueueListener(
        log_queue,
        stdout_handler,
        stderr_handler,
        respect_handler_level=True,
    )
    _log_listener.start()
    atexit.register(_stop_log_listener)


def _stop_log_listener():
    """Stop the queue listener (called at exit and on reconfiguration)."""
    global _log_listener
    if _log_listener is not None:
        _log_listener.stop()
        _log_listener = None
