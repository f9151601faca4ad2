"""System clipboard access through external tools, with a local fallback."""

from __future__ import annotations

import asyncio
import base64
import logging
import os
import sys
import threading

from television.rocell import RoCell

logger = logging.getLogger(__name__)

_IS_UNIX = os.name == "posix"

_PASTE_COMMANDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("pbpaste", ()),
    ("termux-clipboard-get", ()),
    ("wl-paste", ()),
    ("xclip", ("-o", "-selection", "clipboard")),
    ("xsel", ("-ob",)),
)

_COPY_COMMANDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("pbcopy", ()),
    ("termux-clipboard-set", ()),
    ("wl-copy", ()),
    ("xclip", ("-selection", "clipboard")),
    ("xsel", ("-ib",)),
)


def osc52_sequence(content: str) -> str:
    """The OSC 52 escape sequence that asks the terminal to set its clipboard."""
    encoded = base64.b64encode(os.fsencode(content)).decode("ascii")
    return f"\x1b]52;c;{encoded}\x1b\\"


def _kill(process: asyncio.subprocess.Process) -> None:
    try:
        process.kill()
    except ProcessLookupError:
        pass


class Clipboard:
    """Clipboard that uses the first working system tool.

    The last value set is kept locally and returned when no tool works.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._content = ""

    async def get(self) -> str:
        """The clipboard content, or the last value set if no tool works."""
        if _IS_UNIX:
            for program, args in _PASTE_COMMANDS:
                output = await self._run_paste(program, args)
                if output is not None:
                    return os.fsdecode(output)
        with self._lock:
            return self._content

    async def set(self, content: str) -> None:
        """Put ``content`` on the clipboard."""
        with self._lock:
            self._content = content
        if not _IS_UNIX:
            return
        try:
            sys.stderr.write(osc52_sequence(content))
            sys.stderr.flush()
        except (OSError, ValueError, AttributeError):
            pass
        data = os.fsencode(content)
        for program, args in _COPY_COMMANDS:
            if await self._run_copy(program, args, data):
                break

    @staticmethod
    async def _run_paste(program: str, args: tuple[str, ...]) -> bytes | None:
        try:
            process = await asyncio.create_subprocess_exec(
                program,
                *args,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError:
            return None
        try:
            stdout, _ = await process.communicate()
        except asyncio.CancelledError:
            _kill(process)
            raise
        except OSError:
            _kill(process)
            return None
        if process.returncode == 0:
            return stdout
        return None

    @staticmethod
    async def _run_copy(program: str, args: tuple[str, ...], data: bytes) -> bool:
        try:
            process = await asyncio.create_subprocess_exec(
                program,
                *args,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.DEVNULL,
            )
        except OSError:
            return False
        try:
            await process.communicate(input=data)
        except asyncio.CancelledError:
            _kill(process)
            raise
        except OSError as error:
            logger.debug("could not write to %s: %s", program, error)
            _kill(process)
            return False
        return process.returncode == 0


CLIPBOARD: RoCell[Clipboard] = RoCell(Clipboard())