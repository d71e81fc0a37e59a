"""Expressions: parsing and code generation."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from .lexer import tokenize
from .util import SPACE, BasicSyntaxError, CompileError, join_tokens

_NUMBER = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def _format_number(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class Expr:
    """Base class of all expressions."""

    def compile(self, ctx: Any) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class Value(Expr):
    """A numeric literal; booleans are stored as 1 and 0."""

    number: float

    def compile(self, ctx: Any) -> str:
        return _format_number(self.number)


@dataclass(frozen=True)
class Refer(Expr):
    """A reference to a variable."""

    name: str

    def compile(self, ctx: Any) -> str:
        try:
            address = ctx.variables[self.name]
        except KeyError:
            raise CompileError(f"undefined variable {self.name!r}") from None
        return f"\tlda ar, {address}\n"


class OperKind(Enum):
    """Binary operators and the opcode each compiles to."""

    ADD = "add"
    MUL = "mul"
    EQL = "eql"
    LES = "les"


@dataclass(frozen=True)
class Oper(Expr):
    """A binary operation."""

    kind: OperKind
    lhs: Expr
    rhs: Expr

    def compile(self, ctx: Any) -> str:
        lhs = self.lhs.compile(ctx)
        rhs = self.rhs.compile(ctx)
        opcode = self.kind.value
        lhs_code = "\n" in lhs
        rhs_code = "\n" in rhs
        if lhs_code and rhs_code:
            return f"{lhs}\tpsh ar\n{rhs}\tmov dr, ar\n\tpop ar\n\t{opcode} ar, dr\n"
        if lhs_code:
            return f"{lhs}\t{opcode} ar, {rhs}\n"
        if rhs_code:
            return f"{rhs}\tmov dr, ar\n\tmov ar, {lhs}\n\t{opcode} ar, dr\n"
        return f"\tmov ar, {lhs}\n\t{opcode} ar, {rhs}\n"


_OPERATORS = {
    "+": OperKind.ADD,
    "*": OperKind.MUL,
    "=": OperKind.EQL,
    "<": OperKind.LES,
}


def parse_expr(source: str) -> Expr:
    """Parse an expression; raises BasicSyntaxError if it is malformed."""
    source = source.strip()
    tokens = tokenize(source, SPACE, True)
    if len(tokens) >= 2:
        return parse_oper(source)
    if not tokens:
        raise BasicSyntaxError("empty expression")
    token = tokens[-1].strip()
    if _NUMBER.fullmatch(token):
        return Value(float(token))
    if token == "true":
        return Value(1.0)
    if token == "false":
        return Value(0.0)
    if token.startswith("(") and token.endswith(")") and len(token) >= 2:
        return parse_expr(token[1:-1].strip())
    return Refer(token)


def parse_oper(source: str) -> Oper:
    """Parse a left-associative binary operation on its last operator."""
    tokens = tokenize(source, SPACE, True)
    if not tokens:
        raise BasicSyntaxError("empty expression")
    rhs = parse_expr(tokens[-1])
    if len(tokens) < 2:
        raise BasicSyntaxError(f"missing operator in {source!r}")
    operator = tokens[-2]
    if operator == ">":
        return Oper(OperKind.LES, rhs, parse_expr(join_tokens(tokens[:-2])))
    kind = _OPERATORS.get(operator)
    if kind is None:
        raise BasicSyntaxError(f"unsupported operator {operator!r}")
    return Oper(kind, parse_expr(join_tokens(tokens[:-2])), rhs)