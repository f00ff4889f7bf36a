"""Bracket balance checks for expressions."""

from __future__ import annotations

_PAIRS = {"(": ")", "{": "}", "[": "]"}
_CLOSERS = frozenset(_PAIRS.values())


def matches(opening: str, closing: str) -> bool:
    """Return True if ``opening`` and ``closing`` form a bracket pair."""
    return _PAIRS.get(opening) == closing


def is_balanced(expression: str) -> bool:
    """Return True if the round parentheses in ``expression`` are balanced."""
    depth = 0
    for char in expression:
        if char == "(":
            depth += 1
        elif char == ")":
            if depth == 0:
                return False
            depth -= 1
    return depth == 0


def is_balanced_multi(expression: str) -> bool:
    """Return True if (), {} and [] in ``expression`` are balanced and nested."""
    open_brackets: list[str] = []
    for char in expression:
        if char in _PAIRS:
            open_brackets.append(char)
        elif char in _CLOSERS:
            if not open_brackets or not matches(open_brackets.pop(), char):
                return False
    return not open_brackets