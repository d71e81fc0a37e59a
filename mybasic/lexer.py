"""Splitting BASIC source text into tokens."""

from __future__ import annotations

from collections.abc import Sequence

from .util import OPERATOR, SPACE, BasicSyntaxError, include_letter

_OPENING = frozenset("([{")
_CLOSING = frozenset(")]}")
_QUOTES = frozenset("\"'`")
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}


def _match_at(candidates: Sequence[str], chars: list[str], index: int) -> str | None:
    return next((item for item in candidates if include_letter(item, chars, index)), None)


def tokenize(text: str, delimiters: Sequence[str] = SPACE, is_expr: bool = False) -> list[str]:
    """Split ``text`` on ``delimiters``, keeping brackets and quotes intact.

    When ``is_expr`` is true, operators become tokens of their own.
    Raises BasicSyntaxError on unbalanced brackets, quotes or a dangling escape.
    """
    if any(not delimiter for delimiter in delimiters):
        raise ValueError("delimiters must not be empty strings")

    chars = list(text)
    tokens: list[str] = []
    current: list[str] = []
    depth = 0
    in_quote = False
    escaping = False

    def flush() -> None:
        if current:
            tokens.append("".join(current))
            current.clear()

    index = 0
    while index < len(chars):
        char = chars[index]
        if escaping:
            current.append(_ESCAPES.get(char, char))
            escaping = False
            index += 1
            continue
        if char in _OPENING:
            current.append(char)
            depth += 1
            index += 1
            continue
        if char in _CLOSING:
            current.append(char)
            if depth == 0:
                raise BasicSyntaxError(f"unmatched {char!r} in {text!r}")
            depth -= 1
            index += 1
            continue
        if char in _QUOTES:
            in_quote = not in_quote
            current.append(char)
            index += 1
            continue
        if char == "\\":
            current.append(char)
            escaping = True
            index += 1
            continue

        free = depth == 0 and not in_quote
        if is_expr and free:
            operator = _match_at(OPERATOR, chars, index)
            if operator is not None:
                flush()
                tokens.append(operator)
                index += len(operator)
                continue
        if free:
            delimiter = _match_at(delimiters, chars, index)
            if delimiter is not None:
                flush()
                index += len(delimiter)
                continue
        current.append(char)
        index += 1

    if escaping:
        raise BasicSyntaxError(f"dangling escape in {text!r}")
    if in_quote:
        raise BasicSyntaxError(f"unterminated quote in {text!r}")
    if depth != 0:
        raise BasicSyntaxError(f"unclosed bracket in {text!r}")
    flush()
    return tokens