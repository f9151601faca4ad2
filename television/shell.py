"""Supported shells and shell-integration helpers."""

from __future__ import annotations

import enum
import logging
import os

logger = logging.getLogger(__name__)

SHELL_ENV_VAR = "SHELL"

_IS_WINDOWS = os.name == "nt"


class Shell(enum.Enum):
    """A shell that commands can be run with."""

    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"
    POWERSHELL = "powershell"
    CMD = "cmd"

    @classmethod
    def parse(cls, value: str) -> Shell:
        """Recognise a shell from a name or path; raise ValueError if unknown."""
        for shell in (cls.BASH, cls.ZSH, cls.FISH, cls.POWERSHELL, cls.CMD):
            if shell.value in value:
                return shell
        raise ValueError(f"Unsupported shell: {value}")

    @classmethod
    def default(cls) -> Shell:
        """PowerShell on Windows, bash elsewhere."""
        return cls.POWERSHELL if _IS_WINDOWS else cls.BASH

    @classmethod
    def from_env(cls) -> Shell:
        """The shell named by ``$SHELL``, or the default if it is unset."""
        value = os.environ.get(SHELL_ENV_VAR)
        if value is None:
            logger.debug("Environment variable %s not set", SHELL_ENV_VAR)
            return cls.default()
        return cls.parse(value)

    def executable(self) -> str:
        """The program name used to start this shell."""
        return self.value

    def __str__(self) -> str:
        return self.value


def ctrl_keybinding(shell: Shell, character: str) -> str:
    """The Ctrl+``character`` key binding in the syntax of ``shell``."""
    match shell:
        case Shell.BASH:
            return rf"\C-{character}"
        case Shell.ZSH:
            return f"^{character}"
        case Shell.FISH:
            return rf"\c{character}"
    raise ValueError(f"This shell is not yet supported: {shell!r}")


def render_autocomplete_script_template(
    shell: Shell,
    template: str,
    autocomplete_character: str,
    history_character: str,
) -> str:
    """Fill the key-binding placeholders of a shell integration script."""
    return template.replace(
        "{tv_smart_autocomplete_keybinding}",
        ctrl_keybinding(shell, autocomplete_character),
    ).replace(
        "{tv_shell_history_keybinding}",
        ctrl_keybinding(shell, history_character),
    )