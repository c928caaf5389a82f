"""Recursive generation of strings: decodings, keypad words, subsequences and paths."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import product

_DIGITS = frozenset("0123456789")
_KEYPAD = (".", "#", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")
_DICE_FACES = range(1, 7)


def _check_digits(digits: str) -> None:
    if not set(digits) <= _DIGITS:
        raise ValueError(f"not a string of decimal digits: {digits!r}")


def _letter(number: int) -> str:
    return chr(ord("A") + number - 1)


def mapped_strings(digits: str) -> list[str]:
    """List every reading of ``digits`` with 1 as A up to 26 as Z.

    Each step reads one digit, then, where the pair is below 27, two. A
    zero read on its own maps to ``@``.
    """
    _check_digits(digits)

    def decode(rest: str, prefix: str) -> Iterator[str]:
        if not rest:
            yield prefix
            return
        first = int(rest[0])
        yield from decode(rest[1:], prefix + _letter(first))
        if len(rest) > 1:
            pair = first * 10 + int(rest[1])
            if pair < 27:
                yield from decode(rest[2:], prefix + _letter(pair))

    return list(decode(digits, ""))


def move_x_to_end(text: str) -> str:
    """Move every lowercase ``x`` to the end, keeping the other characters in order."""
    return "".join(ch for ch in text if ch != "x") + "x" * text.count("x")


def replace_pi(text: str) -> str:
    """Replace every ``pi`` with ``3.14``."""
    return text.replace("pi", "3.14")


def keypad_combinations(digits: str) -> list[str]:
    """List the words a phone keypad can spell from ``digits``."""
    _check_digits(digits)
    return ["".join(letters) for letters in product(*(_KEYPAD[int(d)] for d in digits))]


def subsequences(text: str) -> list[str]:
    """List every subsequence of ``text``, those without the first character first."""
    if not text:
        return [""]
    rest = subsequences(text[1:])
    return rest + [text[0] + tail for tail in rest]


def maze_paths(end_row: int, end_col: int) -> list[str]:
    """List the paths from (0, 0) to the end cell as ``V`` (down) and ``H`` (right) moves."""

    def walk(row: int, col: int, path: str) -> Iterator[str]:
        if row == end_row and col == end_col:
            yield path
            return
        if row > end_row or col > end_col:
            return
        yield from walk(row + 1, col, path + "V")
        yield from walk(row, col + 1, path + "H")

    return list(walk(0, 0, ""))


def board_paths(start: int, end: int) -> list[str]:
    """List the die throws, as digit strings, that lead from ``start`` exactly to ``end``."""

    def walk(position: int, path: str) -> Iterator[str]:
        if position == end:
            yield path
            return
        if position > end:
            return
        for face in _DICE_FACES:
            yield from walk(position + face, path + str(face))

    return list(walk(start, ""))