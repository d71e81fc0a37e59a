# mybasic

`mybasic` compiles a small, line-numbered BASIC dialect into text assembly
for a simple register machine (registers `ar`, `cr`, `dr`; instructions such
as `mov`, `add`, `mul`, `eql`, `les`, `lda`, `sta`, `psh`, `pop`, `nor`,
`jmp`, `cal`, `ret` and `hlt`).

## Installing

```
pip install .
```

## Command line

```
mybasic program.bas
mybasic -
```

The command reads the program from the named file (or from standard input
when the argument is `-`), compiles it and prints the generated assembly.
If the file cannot be read or the program has an error, it prints
`mybasic: <message>` to standard error and exits with status 1.

## The language

Source text is lower-cased before compiling. A line may begin with a line
number followed by a space; the line then gets the label `line_<n>`, which
`goto <n>` jumps to. A line without a number is labelled by its position,
counting from 0. Blank lines and lines starting with `rem` are skipped.

Statements:

- `let <name> = <expr>` — assign to a variable; variables get memory
  addresses 0, 1, 2, … in order of first assignment
- `if <expr>` / `else` / `end if`
- `while <expr>` / `exit while` / `end while`
- `goto <line>`
- `sub <name>` / `exit sub` / `end sub`, and `call <name>`
- `exit program`

Expressions are numbers, `true` and `false` (1 and 0), variable names,
parenthesised expressions and the binary operators `+`, `*`, `<`, `>` and
`=` (equality; write it with spaces around it). Operators have no
precedence among themselves: an expression is split at its last operator,
so use parentheses to group. Other operator symbols such as `-` or `/` are
recognised by the tokenizer but rejected as unsupported.

## Using it from Python

```python
from mybasic.compiler import Compiler

program = """
10 let x = 0
20 while x < 10
30 let x = x + 1
40 end while
50 exit program
"""

assembly = Compiler().build(program)
print(assembly)
```

A `Compiler` keeps its state (`variables`, `if_label_index`,
`while_label_index`) between calls to `build`.

Errors raise `mybasic.util.BasicSyntaxError` for text that cannot be parsed
(unknown statements, unbalanced brackets or quotes, unsupported operators)
or `mybasic.util.CompileError` for a program that cannot be compiled (a
reference to a variable that was never assigned, or `else`, `end if`,
`end while` or `exit while` outside their block). Both are subclasses of
`ValueError`.

The lower-level pieces are available too: `mybasic.lexer.tokenize`,
`mybasic.expr.parse_expr`, `mybasic.expr.parse_oper` (producing `Value`,
`Refer` and `Oper` expressions) and `mybasic.stmt.parse_stmt` (producing
`Stmt` objects). Each expression and statement has a `compile(ctx)` method
that takes a `Compiler`.

## What it does not do

`mybasic` only produces assembly text. It does not assemble that text into
bytecode and has no virtual machine to run it, so programs cannot be
executed with this package.

## Running the tests

```
pip install .[test]
pytest
```