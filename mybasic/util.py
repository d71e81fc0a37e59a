"""Shared constants, errors and small helpers for the compiler."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

SPACE: tuple[str, ...] = (" ", "\u3000", "\n", "\t", "\r")
OPERATOR: tuple[str, ...] = (
    "+", "-", "*", "/", "%", "^", "==", "!=", "<", ">", "<=", ">=", "&&", "||", "!",
)


class BasicSyntaxError(ValueError):
    """Raised when BASIC source text cannot be parsed."""


class CompileError(ValueError):
    """Raised when a parsed program cannot be turned into assembly."""


def include_letter(query: str, chars: Sequence[str], idx: int) -> bool:
    """Tell whether ``query`` occurs in ``chars`` starting exactly at ``idx``."""
    end = idx + len(query)
    if idx < 0 or end > len(chars):
        return False
    return "".join(chars[idx:end]) == query


def join_tokens(tokens: Iterable[str]) -> str:
    """Join tokens back into source text, separated by single spaces."""
    return SPACE[0].join(tokens)


def cond(code: str) -> str:
    """Load the value produced by ``code`` into the condition register."""
    if "\n" in code:
        return f"{code}\tmov cr, ar\n"
    return f"\tmov cr, {code}\n"