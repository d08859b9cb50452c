"""Text puzzles: locating word concatenations and justifying lines of words."""

from __future__ import annotations

from collections import Counter
from typing import Sequence


def find_substring(s: str, words: Sequence[str]) -> list[int]:
    """Return the start indices in s of every concatenation of all of words.

    The words may be concatenated in any order, each used as many times as
    it appears in words. Indices are returned in ascending order. The chunk
    length is taken from the first word, so a list of words of differing
    lengths never matches.
    """
    if not words:
        raise ValueError("words must not be empty")
    size = len(words[0])
    if size == 0:
        raise ValueError("words must not be empty strings")
    total = size * len(words)
    target = Counter(words)
    return [
        start
        for start in range(len(s) - total + 1)
        if Counter(s[offset : offset + size] for offset in range(start, start + total, size))
        == target
    ]


def _justify(row: Sequence[str], max_width: int) -> str:
    """Spread the words of a full line so that it spans max_width exactly."""
    if len(row) == 1:
        return row[0].ljust(max_width)
    gaps = len(row) - 1
    spaces = max_width - sum(len(word) for word in row)
    base, extra = divmod(spaces, gaps)
    parts: list[str] = []
    for position, word in enumerate(row[:-1]):
        parts.append(word)
        parts.append(" " * (base + (1 if position < extra else 0)))
    parts.append(row[-1])
    return "".join(parts)


def full_justify(words: Sequence[str], max_width: int) -> list[str]:
    """Pack words greedily into lines of exactly max_width characters.

    Inner lines spread their spaces evenly, giving leftover spaces to the
    leftmost gaps; a line holding a single word, and the last line, are
    left-justified with single spaces and padded on the right.
    """
    lines: list[str] = []
    row: list[str] = []
    used = 0
    for word in words:
        if len(word) > max_width:
            raise ValueError(f"word {word!r} is longer than the width {max_width}")
        if row and used + len(row) + len(word) > max_width:
            lines.append(_justify(row, max_width))
            row = []
            used = 0
        row.append(word)
        used += len(word)
    if row:
        lines.append(" ".join(row).ljust(max_width))
    return lines