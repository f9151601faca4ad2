"""Helpers for mappings."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from typing import TypeVar

K = TypeVar("K")
V = TypeVar("V", bound=Hashable)


def invert_mapping(mapping: Mapping[K, Iterable[V]]) -> dict[V, K]:
    """Map every value of each key's collection back to that key.

    When a value appears under several keys, the last key wins.
    """
    return {value: key for key, values in mapping.items() for value in values}