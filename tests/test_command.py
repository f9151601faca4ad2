import logging

import pytest

from television import command
from television.command import shell_command
from television.shell import Shell


@pytest.fixture
def unix(monkeypatch):
    monkeypatch.setattr(command, "_IS_UNIX", True)


@pytest.fixture
def windows(monkeypatch):
    monkeypatch.setattr(command, "_IS_UNIX", False)


def test_zsh_non_interactive(monkeypatch, unix):
    monkeypatch.setenv("SHELL", "/bin/zsh")
    assert shell_command(False) == ["zsh", "-c"]


def test_zsh_interactive_on_unix(monkeypatch, unix):
    monkeypatch.setenv("SHELL", "/bin/zsh")
    assert shell_command(True) == ["zsh", "-c", "-i"]


def test_interactive_ignored_off_unix(monkeypatch, windows, caplog):
    monkeypatch.setenv("SHELL", "/bin/zsh")
    with caplog.at_level(logging.WARNING, logger="television.command"):
        argv = shell_command(True)
    assert argv == ["zsh", "-c"]
    assert "Interactive mode is not supported" in caplog.text


def test_powershell_flag(monkeypatch, unix):
    monkeypatch.setenv("SHELL", "powershell")
    assert shell_command(False) == ["powershell", "-Command"]


def test_cmd_flag(monkeypatch, unix):
    monkeypatch.setenv("SHELL", "cmd.exe")
    assert shell_command(False) == ["cmd", "/C"]


def test_unsupported_shell_falls_back_to_default(monkeypatch, unix):
    monkeypatch.setenv("SHELL", "/usr/bin/nu")
    argv = shell_command(False)
    assert argv[0] == Shell.default().executable()
    assert len(argv) == 2


def test_unset_shell_uses_default(monkeypatch, unix):
    monkeypatch.delenv("SHELL", raising=False)
    assert shell_command(False)[0] == Shell.default().executable()