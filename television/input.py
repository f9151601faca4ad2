"""A single-line text input buffer with cursor support."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from itertools import dropwhile

from wcwidth import wcwidth


class InputAction(enum.Enum):
    """The kinds of change an input buffer can be asked to make."""

    SET_CURSOR = enum.auto()
    INSERT_CHAR = enum.auto()
    GO_TO_PREV_CHAR = enum.auto()
    GO_TO_NEXT_CHAR = enum.auto()
    GO_TO_PREV_WORD = enum.auto()
    GO_TO_NEXT_WORD = enum.auto()
    GO_TO_START = enum.auto()
    GO_TO_END = enum.auto()
    DELETE_PREV_CHAR = enum.auto()
    DELETE_NEXT_CHAR = enum.auto()
    DELETE_PREV_WORD = enum.auto()
    DELETE_NEXT_WORD = enum.auto()
    DELETE_LINE = enum.auto()
    DELETE_TILL_END = enum.auto()


@dataclass(frozen=True)
class InputRequest:
    """A request to change the state of an :class:`Input`.

    ``position`` is used by ``SET_CURSOR`` and ``char`` by ``INSERT_CHAR``.
    """

    action: InputAction
    position: int = 0
    char: str = ""

    def __post_init__(self) -> None:
        if self.action is InputAction.INSERT_CHAR and len(self.char) != 1:
            raise ValueError("INSERT_CHAR needs exactly one character")
        if self.position < 0:
            raise ValueError("cursor position cannot be negative")

    @classmethod
    def set_cursor(cls, position: int) -> InputRequest:
        return cls(InputAction.SET_CURSOR, position=position)

    @classmethod
    def insert_char(cls, char: str) -> InputRequest:
        return cls(InputAction.INSERT_CHAR, char=char)


@dataclass(frozen=True)
class StateChanged:
    """Which parts of the input state a request changed."""

    value: bool
    cursor: bool


def _char_width(char: str) -> int:
    return max(wcwidth(char), 0)


def _strip_prev_word(prefix: str) -> str:
    """Drop trailing separators, then the trailing word, from ``prefix``."""
    reversed_chars = dropwhile(lambda c: not c.isalnum(), reversed(prefix))
    remaining = list(dropwhile(str.isalnum, reversed_chars))
    return "".join(reversed(remaining))


class Input:
    """An input buffer holding a value and a cursor (in characters)."""

    def __init__(self, value: str = "") -> None:
        self._value = value
        self._cursor = len(value)

    def with_value(self, value: str) -> Input:
        """Replace the value and move the cursor to its end."""
        self._value = value
        self._cursor = len(value)
        return self

    def with_cursor(self, cursor: int) -> Input:
        """Move the cursor, clamped to the length of the value."""
        self._cursor = min(cursor, len(self._value))
        return self

    def reset(self) -> None:
        """Clear the value and put the cursor at the start."""
        self._value = ""
        self._cursor = 0

    def handle(self, request: InputRequest) -> StateChanged | None:
        """Apply a request; return what changed, or None if nothing did."""
        value, cursor = self._value, self._cursor
        length = len(value)
        moved = StateChanged(value=False, cursor=True)
        edited = StateChanged(value=True, cursor=True)
        edited_in_place = StateChanged(value=True, cursor=False)

        match request.action:
            case InputAction.SET_CURSOR:
                position = min(request.position, length)
                if position == cursor:
                    return None
                self._cursor = position
                return moved

            case InputAction.INSERT_CHAR:
                self._value = value[:cursor] + request.char + value[cursor:]
                self._cursor = cursor + 1
                return edited

            case InputAction.DELETE_PREV_CHAR:
                if cursor == 0:
                    return None
                self._cursor = cursor - 1
                self._value = value[: cursor - 1] + value[cursor:]
                return edited

            case InputAction.DELETE_NEXT_CHAR:
                if cursor == length:
                    return None
                self._value = value[:cursor] + value[cursor + 1 :]
                return edited_in_place

            case InputAction.GO_TO_PREV_CHAR:
                if cursor == 0:
                    return None
                self._cursor = cursor - 1
                return moved

            case InputAction.GO_TO_NEXT_CHAR:
                if cursor == length:
                    return None
                self._cursor = cursor + 1
                return moved

            case InputAction.GO_TO_PREV_WORD:
                if cursor == 0:
                    return None
                self._cursor = len(_strip_prev_word(value[:cursor]))
                return moved

            case InputAction.GO_TO_NEXT_WORD:
                if cursor == length:
                    return None
                after_word = dropwhile(
                    lambda pair: pair[1].isalnum(),
                    enumerate(value[cursor:], start=cursor),
                )
                self._cursor = next(
                    (i for i, c in after_word if c.isalnum()), length
                )
                return moved

            case InputAction.DELETE_LINE:
                if not value:
                    return None
                self._value = ""
                self._cursor = 0
                return StateChanged(value=True, cursor=cursor == 0)

            case InputAction.DELETE_PREV_WORD:
                if cursor == 0:
                    return None
                kept = _strip_prev_word(value[:cursor])
                self._value = kept + value[cursor:]
                self._cursor = len(kept)
                return edited

            case InputAction.DELETE_NEXT_WORD:
                if cursor == length:
                    return None
                rest = dropwhile(str.isalnum, value[cursor:])
                rest = dropwhile(lambda c: not c.isalnum(), rest)
                self._value = value[:cursor] + "".join(rest)
                return edited_in_place

            case InputAction.GO_TO_START:
                if cursor == 0:
                    return None
                self._cursor = 0
                return moved

            case InputAction.GO_TO_END:
                if cursor == length:
                    return None
                self._cursor = length
                return moved

            case InputAction.DELETE_TILL_END:
                self._value = value[:cursor]
                return edited_in_place

        raise ValueError(f"unknown input action: {request.action!r}")

    def value(self) -> str:
        """The current value."""
        return self._value

    def cursor(self) -> int:
        """The cursor position, in characters."""
        return self._cursor

    def visual_cursor(self) -> int:
        """The cursor position in terminal columns."""
        return sum(_char_width(c) for c in self._value[: self._cursor])

    def visual_scroll(self, width: int) -> int:
        """How many columns to scroll so the cursor fits in ``width``."""
        scroll = max(self.visual_cursor(), width) - width
        scrolled = 0
        for char in self._value:
            if scrolled >= scroll:
                break
            scrolled += _char_width(char)
        return scrolled

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Input(value={self._value!r}, cursor={self._cursor})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Input):
            return NotImplemented
        return (self._value, self._cursor) == (other._value, other._cursor)