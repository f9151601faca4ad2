import os

import pytest

from television.threads import default_num_threads


@pytest.fixture
def only_cpu_count(monkeypatch):
    monkeypatch.delattr(os, "process_cpu_count", raising=False)
    monkeypatch.delattr(os, "sched_getaffinity", raising=False)

    def set_count(value):
        monkeypatch.setattr(os, "cpu_count", lambda: value)

    return set_count


def test_within_bounds():
    assert 1 <= default_num_threads() <= 32


def test_unknown_count_defaults_to_one(only_cpu_count):
    only_cpu_count(None)
    assert default_num_threads() == 1


def test_capped_at_32(only_cpu_count):
    only_cpu_count(128)
    assert default_num_threads() == 32


def test_uses_available_count(only_cpu_count):
    only_cpu_count(4)
    assert default_num_threads() == 4