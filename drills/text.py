"""String checks: last word length and bracket balancing."""

from __future__ import annotations

_OPENING = frozenset("([{")
_MATCHING = {")": "(", "]": "[", "}": "{"}


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word in ``s``."""
    return len(s.rstrip(" ").rsplit(" ", 1)[-1])


def is_valid_brackets(s: str) -> bool:
    """Return whether every bracket in ``s`` is closed in the right order.

    Any character that is not an opening bracket consumes one open bracket.
    """
    stack: list[str] = []
    for char in s:
        if char in _OPENING:
            stack.append(char)
            continue
        if not stack:
            return False
        top = stack.pop()
        expected = _MATCHING.get(char)
        if expected is not None and top != expected:
            return False
    return not stack