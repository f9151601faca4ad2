"""A write-once cell for values that are set up once and then only read."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")

_UNSET: object = object()


class RoCell(Generic[T]):
    """Holds a value that is initialised once and read afterwards.

    Reading an empty cell or initialising a full one raises ``RuntimeError``.
    """

    def __init__(self, value: T | object = _UNSET) -> None:
        self._value: T | object = value

    def init(self, value: T) -> None:
        """Store ``value``; the cell must be empty."""
        if self.initialized():
            raise RuntimeError("cell is already initialised")
        self._value = value

    def init_with(self, factory: Callable[[], T]) -> None:
        """Store the value built by ``factory``; the cell must be empty."""
        self.init(factory())

    def take(self) -> T:
        """Remove and return the value, leaving the cell empty."""
        value = self.get()
        self._value = _UNSET
        return value

    def get(self) -> T:
        """The stored value."""
        if not self.initialized():
            raise RuntimeError("cell is not initialised")
        return self._value  # type: ignore[return-value]

    def initialized(self) -> bool:
        """Whether the cell holds a value."""
        return self._value is not _UNSET

    def __str__(self) -> str:
        return str(self.get())

    def __repr__(self) -> str:
        if self.initialized():
            return f"RoCell({self._value!r})"
        return "RoCell(<empty>)"