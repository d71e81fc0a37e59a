"""Compiling whole BASIC programs to assembly, and the command line."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .stmt import parse_stmt
from .util import BasicSyntaxError, CompileError

_LINE_NUMBER = re.compile(r"\+?\d+")


@dataclass
class Compiler:
    """Compilation state: label counters and variable addresses."""

    if_label_index: int = 0
    while_label_index: int = 0
    variables: dict[str, int] = field(default_factory=dict)

    def build(self, source: str) -> str:
        """Compile a BASIC program to assembly text."""
        parts: list[str] = []
        text = source.strip().lower()
        lines = text.split("\n") if text else []
        for index, raw in enumerate(lines):
            raw = raw.removesuffix("\r")
            number, code = index, raw
            head, sep, rest = raw.strip().partition(" ")
            if sep and _LINE_NUMBER.fullmatch(head):
                number, code = int(head), rest
            if not code or code.strip().startswith("rem"):
                continue
            stmt = parse_stmt(code).compile(self)
            parts.append(f"line_{number}:\n{stmt}\n")
        return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Compile a BASIC file and print the assembly."""
    parser = argparse.ArgumentParser(prog="mybasic", description="Compile BASIC to assembly.")
    parser.add_argument("source", help="BASIC source file, or '-' for standard input")
    args = parser.parse_args(argv)
    try:
        if args.source == "-":
            text = sys.stdin.read()
        else:
            text = Path(args.source).read_text(encoding="utf-8")
        assembly = Compiler().build(text.strip())
    except (OSError, BasicSyntaxError, CompileError) as error:
        print(f"mybasic: {error}", file=sys.stderr)
        return 1
    print(assembly)
    return 0


if __name__ == "__main__":
    sys.exit(main())