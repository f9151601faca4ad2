import os
import sys

from television.stdin import is_readable_stdin


def test_regular_file_is_readable(monkeypatch, tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("line\n")
    with open(path) as handle:
        monkeypatch.setattr(sys, "stdin", handle)
        assert is_readable_stdin() is True


def test_pipe_is_readable(monkeypatch):
    read_fd, write_fd = os.pipe()
    try:
        with os.fdopen(read_fd) as reader:
            monkeypatch.setattr(sys, "stdin", reader)
            assert is_readable_stdin() is True
    finally:
        os.close(write_fd)


def test_missing_stdin_is_not_readable(monkeypatch):
    monkeypatch.setattr(sys, "stdin", None)
    assert is_readable_stdin() is False


def test_stdin_without_descriptor_is_not_readable(monkeypatch):
    class NoFileno:
        def fileno(self):
            raise OSError("no descriptor")

    monkeypatch.setattr(sys, "stdin", NoFileno())
    assert is_readable_stdin() is False


def test_closed_stdin_is_not_readable(monkeypatch, tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("x")
    handle = open(path)
    handle.close()
    monkeypatch.setattr(sys, "stdin", handle)
    assert is_readable_stdin() is False