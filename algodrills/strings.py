"""String puzzles: word order, paths, subsequences, brackets, patterns and zigzags."""

from __future__ import annotations

from collections import Counter
from itertools import cycle
from typing import Iterable

_BRACKET_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_BRACKET_PAIRS.values())


def reverse_words(s: str) -> str:
    """Return the space-separated words of s in reverse order, one space apart."""
    words = [word for word in s.split(" ") if word]
    return " ".join(reversed(words))


def simplify_path(path: str) -> str:
    """Return the canonical form of an absolute Unix-style path.

    Repeated slashes collapse, "." segments vanish and ".." steps up one
    directory (never above the root). Any other run of dots is a name.
    """
    directories: list[str] = []
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if directories:
                directories.pop()
            continue
        directories.append(segment)
    return "/" + "/".join(directories)


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether s can be obtained from t by deleting characters."""
    remaining = iter(t)
    return all(char in remaining for char in s)


def is_anagram(s: str, t: str) -> bool:
    """Tell whether t uses exactly the same characters as s."""
    if len(s) != len(t):
        return False
    return sorted(s) == sorted(t)


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in s is closed by its match in the right order.

    Any character other than the six brackets makes the string invalid.
    """
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
        elif stack and _BRACKET_PAIRS.get(char) == stack[-1]:
            stack.pop()
        else:
            return False
    return not stack


def is_palindrome(s: str) -> bool:
    """Tell whether s reads the same both ways, ignoring case and non-alphanumerics."""
    cleaned = [char.lower() for char in s if char.isascii() and char.isalnum()]
    return cleaned == cleaned[::-1]


def word_pattern(pattern: str, s: str) -> bool:
    """Tell whether the words of s follow pattern one-to-one, letter for word."""
    words = s.split()
    if len(pattern) != len(words):
        return False
    mapping: dict[str, str] = {}
    used: set[str] = set()
    for letter, word in zip(pattern, words):
        if letter in mapping:
            if mapping[letter] != word:
                return False
        elif word in used:
            return False
        else:
            mapping[letter] = word
            used.add(word)
    return True


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Tell whether s can be split into a sequence of words from word_dict."""
    words = set(word_dict)
    reachable = [True] + [False] * len(s)
    for end in range(1, len(s) + 1):
        reachable[end] = any(
            reachable[start] and s[start:end] in words for start in range(end)
        )
    return reachable[len(s)]


def zigzag_convert(s: str, num_rows: int) -> str:
    """Write s in a zigzag over num_rows rows and read it back row by row."""
    if num_rows < 1:
        raise ValueError(f"num_rows must be positive, got {num_rows}")
    if num_rows == 1:
        return s
    order = list(range(num_rows - 1)) + list(range(num_rows - 1, 0, -1))
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    for char, row in zip(s, cycle(order)):
        rows[row].append(char)
    return "".join("".join(row) for row in rows)


def _same_letters(first: str, second: str) -> bool:
    return Counter(first) == Counter(second)