"""Helpers for match indices and highlighted-string truncation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from wcwidth import wcwidth

ELLIPSIS = "…"
_ELLIPSIS_WIDTH = 1

Range = tuple[int, int]


def _char_width(char: str) -> int:
    return max(wcwidth(char), 0)


def sep_name_and_value_indices(
    indices: Iterable[int], name_len: int
) -> tuple[list[int], list[int], bool, bool]:
    """Split match indices into those in the name and those in the value.

    Value indices are made relative to the start of the value. Returns the
    sorted, deduplicated name and value indices and whether each got any.
    """
    name_indices: set[int] = set()
    value_indices: set[int] = set()
    for index in indices:
        if index < name_len:
            name_indices.add(index)
        else:
            value_indices.add(index - name_len)
    return (
        sorted(name_indices),
        sorted(value_indices),
        bool(name_indices),
        bool(value_indices),
    )


def _shift_ranges(ranges: Sequence[Range], skipped: int) -> list[Range]:
    shifted = (
        (max(start - skipped, 0) + _ELLIPSIS_WIDTH, max(end - skipped, 0) + _ELLIPSIS_WIDTH)
        for start, end in ranges
    )
    return [(start, end) for start, end in shifted if start != end]


def truncate_highlighted_string(
    s: str, highlighted_ranges: Sequence[Range], max_width: int
) -> tuple[str, list[Range]]:
    """Truncate ``s`` to ``max_width`` columns, keeping highlights visible.

    Truncates from the end, the start or both sides depending on where the
    highlighted characters are, and shifts the ranges to match. Ranges are
    character indices, exclusive on the right, sorted and non-overlapping.
    """
    if max_width < 0:
        raise ValueError("max_width cannot be negative")
    ranges = list(highlighted_ranges)
    widths = [_char_width(c) for c in s]
    str_width = sum(widths)

    if str_width <= max_width:
        return s, ranges

    last_highlighted = max((ranges[-1][1] if ranges else 0) - 1, 0)
    width_to_last_highlighted = sum(widths[: last_highlighted + 1])

    # Highlights (if any) fit on the left: cut the end.
    if not ranges or width_to_last_highlighted < max_width:
        budget = max(max_width - _ELLIPSIS_WIDTH, 0)
        cumulative = 0
        kept = 0
        for width in widths:
            cumulative += width
            if cumulative > budget:
                break
            kept += 1
        return s[:kept] + ELLIPSIS, ranges

    # Highlights are near the end: cut the start.
    start_width_offset = max(str_width - max_width, 0) + _ELLIPSIS_WIDTH
    if width_to_last_highlighted > start_width_offset:
        remaining_width = str_width
        skipped = 0
        for width in widths:
            if remaining_width < max_width:
                break
            remaining_width -= width
            skipped += 1
        return ELLIPSIS + s[skipped:], _shift_ranges(ranges, skipped)

    # Otherwise cut both sides, keeping the last highlight near the end.
    inner = max(max_width - 2 * _ELLIPSIS_WIDTH, 0)
    start_width_offset = max(width_to_last_highlighted - inner, 0)
    cumulated = 0
    skipped = 0
    for width in widths:
        if cumulated >= start_width_offset:
            break
        cumulated += width
        skipped += 1
    truncated = ELLIPSIS + s[skipped : skipped + inner] + ELLIPSIS
    return truncated, _shift_ranges(ranges, skipped)