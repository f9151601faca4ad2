"""Building command lines that run through the user's shell."""

from __future__ import annotations

import logging
import os

from television.shell import Shell

logger = logging.getLogger(__name__)

_IS_UNIX = os.name == "posix"


def shell_command(interactive: bool) -> list[str]:
    """The argv prefix for running a command string in the user's shell.

    The command string itself is to be appended by the caller.
    """
    try:
        shell = Shell.from_env()
    except ValueError:
        shell = Shell.default()

    match shell:
        case Shell.POWERSHELL:
            flag = "-Command"
        case Shell.CMD:
            flag = "/C"
        case _:
            flag = "-c"

    argv = [shell.executable(), flag]
    if interactive:
        if _IS_UNIX:
            argv.append("-i")
        else:
            logger.warning("Interactive mode is not supported on Windows.")
    return argv