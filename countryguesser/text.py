"""String helpers and a plain ASCII table renderer."""

from __future__ import annotations

import re
import string
import sys
from typing import Optional, Sequence, TextIO

from .colors import RESET, YEL

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def to_lowercase(text: str) -> str:
    """Lower-case ASCII letters only, leaving every other character as is."""
    return text.translate(_ASCII_LOWER)


def remove_spaces(text: str) -> str:
    """Drop every space character."""
    return text.replace(" ", "")


def split_by(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on any character of ``delimiter``, dropping empty pieces.

    If ``delimiter`` as a whole does not occur in ``text``, nothing is
    returned: a list is only produced when there is something to split.
    """
    if delimiter not in text:
        return []
    if not delimiter:
        return [text] if text else []
    pattern = "[" + "".join(re.escape(ch) for ch in delimiter) + "]+"
    return [piece for piece in re.split(pattern, text) if piece]


def _separator(widths: Sequence[int]) -> str:
    return YEL + "+" + "".join("-" * (width + 2) + "+" for width in widths) + "\n"


def _row(cells: Sequence[str], widths: Sequence[int]) -> str:
    return "|" + "".join(f" {cell.ljust(width)} |" for cell, width in zip(cells, widths)) + "\n"


def ascii_table(rows: Sequence[Sequence[Optional[str]]], header: bool) -> str:
    """Render ``rows`` as a boxed table; ``None`` cells print empty.

    When ``header`` is true a separator follows the first row.
    """
    columns = max((len(row) for row in rows), default=0)
    grid = [
        [(row[i] if i < len(row) and row[i] is not None else "") for i in range(columns)]
        for row in rows
    ]
    widths = [max((len(row[i]) for row in grid), default=0) for i in range(columns)]

    parts = [_separator(widths)]
    for index, row in enumerate(grid):
        parts.append(_row(row, widths))
        if header and index == 0:
            parts.append(_separator(widths))
    parts.append(_separator(widths))
    return "".join(parts)


def print_table(rows: Sequence[Sequence[Optional[str]]], out: Optional[TextIO] = None) -> None:
    """Write ``rows`` as a table with a header row, then reset the colour."""
    stream = sys.stdout if out is None else out
    stream.write(ascii_table(rows, header=True))
    stream.write(RESET)