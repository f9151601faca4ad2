"""Detecting whether standard input carries data to read."""

from __future__ import annotations

import logging
import os
import stat
import sys

logger = logging.getLogger(__name__)


def is_readable_stdin() -> bool:
    """Heuristic: stdin is not a terminal and is a file, pipe or socket."""
    stream = sys.stdin
    if stream is None:
        return False
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        logger.debug("stdin has no usable file descriptor")
        return False
    try:
        if os.isatty(fd):
            return False
        mode = os.fstat(fd).st_mode
    except OSError as error:
        logger.debug("could not inspect stdin: %s", error)
        return False
    return stat.S_ISREG(mode) or stat.S_ISFIFO(mode) or stat.S_ISSOCK(mode)