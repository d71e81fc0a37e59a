"""Statements: parsing and code generation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from .expr import Expr, parse_expr
from .util import BasicSyntaxError, CompileError, cond


class StmtKind(Enum):
    """The kinds of statement the language knows."""

    LET = auto()
    IF = auto()
    ELSE = auto()
    END_IF = auto()
    WHILE = auto()
    END_WHILE = auto()
    EXIT_WHILE = auto()
    GOTO = auto()
    CALL = auto()
    SUB = auto()
    RETURN = auto()
    EXIT_PROGRAM = auto()


@dataclass(frozen=True)
class Stmt:
    """A single statement, with its name and expression where it has them."""

    kind: StmtKind
    name: str = ""
    expr: Expr | None = None

    def compile(self, ctx: Any) -> str:
        """Generate assembly, updating label counters and variables on ``ctx``."""
        match self.kind:
            case StmtKind.LET:
                address = ctx.variables.get(self.name, len(ctx.variables))
                ctx.variables[self.name] = address
                code = self._expr().compile(ctx)
                if "\n" in code:
                    return f"{code}\tsta {address}, ar\n"
                return f"\tsta {address}, {code}\n"
            case StmtKind.IF:
                code = cond(self._expr().compile(ctx))
                label = ctx.if_label_index
                ctx.if_label_index += 1
                return (
                    f"{code}\tjmp cr, if_then_{label}\n\tjmp 1, if_else_{label}\n"
                    f"\tjmp 1, if_end_{label}\nif_then_{label}:\n"
                )
            case StmtKind.ELSE:
                label = _enclosing(ctx.if_label_index, "else")
                return f"\tjmp 1, if_end_{label}\nif_else_{label}:\n"
            case StmtKind.END_IF:
                ctx.if_label_index = _enclosing(ctx.if_label_index, "end if")
                return f"if_end_{ctx.if_label_index}:\n"
            case StmtKind.WHILE:
                code = cond(self._expr().compile(ctx))
                label = ctx.while_label_index
                ctx.while_label_index += 1
                return (
                    f"while_start_{label}:\n{code}\tnor cr, cr\n"
                    f"\tjmp cr, while_end_{label}\n"
                )
            case StmtKind.END_WHILE:
                label = _enclosing(ctx.while_label_index, "end while")
                return f"\tjmp 1, while_start_{label}\nwhile_end_{label}:\n"
            case StmtKind.EXIT_WHILE:
                label = _enclosing(ctx.while_label_index, "exit while")
                return f"\tjmp 1, while_end_{label}\n"
            case StmtKind.GOTO:
                return f"\tjmp 1, line_{self.name}\n"
            case StmtKind.SUB:
                return f"subroutine_{self.name}:\n"
            case StmtKind.CALL:
                return f"cal subroutine_{self.name}\n"
            case StmtKind.RETURN:
                return "\tret\n"
            case StmtKind.EXIT_PROGRAM:
                return "\thlt\n"
        raise CompileError(f"unknown statement kind {self.kind!r}")

    def _expr(self) -> Expr:
        if self.expr is None:
            raise CompileError(f"{self.kind.name.lower()} statement needs an expression")
        return self.expr


def _enclosing(index: int, keyword: str) -> int:
    if index == 0:
        raise CompileError(f"{keyword!r} outside of its block")
    return index - 1


_EXACT = {
    "exit program": StmtKind.EXIT_PROGRAM,
    "exit while": StmtKind.EXIT_WHILE,
}
_EXACT_LATE = {
    "end while": StmtKind.END_WHILE,
    "end sub": StmtKind.RETURN,
    "exit sub": StmtKind.RETURN,
    "else": StmtKind.ELSE,
    "end if": StmtKind.END_IF,
}
_NAMED = (("goto", StmtKind.GOTO), ("sub", StmtKind.SUB), ("call", StmtKind.CALL))


def parse_stmt(source: str) -> Stmt:
    """Parse one statement; raises BasicSyntaxError if it is not recognised."""
    source = source.strip()
    for prefix, kind in _NAMED:
        if source.startswith(prefix):
            return Stmt(kind, name=source[len(prefix):].strip())
    if source.startswith("if"):
        return Stmt(StmtKind.IF, expr=parse_expr(source[2:]))
    if source.startswith("let"):
        name, sep, code = source[3:].partition("=")
        if not sep:
            raise BasicSyntaxError(f"missing '=' in {source!r}")
        return Stmt(StmtKind.LET, name=name.strip(), expr=parse_expr(code))
    if source in _EXACT:
        return Stmt(_EXACT[source])
    if source.startswith("while"):
        return Stmt(StmtKind.WHILE, expr=parse_expr(source[5:]))
    if source in _EXACT_LATE:
        return Stmt(_EXACT_LATE[source])
    raise BasicSyntaxError(f"unknown statement {source!r}")