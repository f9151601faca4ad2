import pytest

from television.shell import Shell, ctrl_keybinding, render_autocomplete_script_template


def test_bash_ctrl_keybinding():
    assert ctrl_keybinding(Shell.BASH, "s") == "\\C-s"


def test_zsh_ctrl_keybinding():
    assert ctrl_keybinding(Shell.ZSH, "s") == "^s"


def test_fish_ctrl_keybinding():
    assert ctrl_keybinding(Shell.FISH, "s") == "\\cs"


def test_powershell_ctrl_keybinding():
    with pytest.raises(ValueError):
        ctrl_keybinding(Shell.POWERSHELL, "s")


def test_cmd_ctrl_keybinding():
    with pytest.raises(ValueError):
        ctrl_keybinding(Shell.CMD, "s")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("/bin/bash", Shell.BASH),
        ("/usr/bin/zsh", Shell.ZSH),
        ("/usr/local/bin/fish", Shell.FISH),
        ("powershell.exe", Shell.POWERSHELL),
        ("cmd.exe", Shell.CMD),
        ("/opt/fishbash", Shell.BASH),
    ],
)
def test_parse(value, expected):
    assert Shell.parse(value) is expected


def test_parse_unsupported():
    with pytest.raises(ValueError, match="Unsupported shell"):
        Shell.parse("/usr/bin/nu")


def test_from_env_set(monkeypatch):
    monkeypatch.setenv("SHELL", "/bin/zsh")
    assert Shell.from_env() is Shell.ZSH


def test_from_env_unset(monkeypatch):
    monkeypatch.delenv("SHELL", raising=False)
    assert Shell.from_env() is Shell.default()


def test_from_env_unsupported(monkeypatch):
    monkeypatch.setenv("SHELL", "/bin/tcsh-like-nothing")
    with pytest.raises(ValueError):
        Shell.from_env()


def test_default_is_bash_or_powershell():
    assert Shell.default() in {Shell.BASH, Shell.POWERSHELL}


@pytest.mark.parametrize("shell", list(Shell))
def test_executable_and_str(shell):
    assert shell.executable() == str(shell) == shell.value
    assert Shell.parse(shell.executable()) is shell


def test_render_template_zsh():
    template = "bindkey '{tv_smart_autocomplete_keybinding}' a; bindkey '{tv_shell_history_keybinding}' b"
    rendered = render_autocomplete_script_template(Shell.ZSH, template, "t", "r")
    assert rendered == "bindkey '^t' a; bindkey '^r' b"


def test_render_template_bash():
    template = "{tv_smart_autocomplete_keybinding}|{tv_shell_history_keybinding}"
    rendered = render_autocomplete_script_template(Shell.BASH, template, "t", "r")
    assert rendered == "\\C-t|\\C-r"


def test_render_template_unsupported_shell():
    with pytest.raises(ValueError):
        render_autocomplete_script_template(Shell.CMD, "x", "t", "r")