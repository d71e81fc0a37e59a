from types import SimpleNamespace

import pytest

from mybasic.expr import Oper, OperKind, Refer, Value, parse_expr, parse_oper
from mybasic.util import BasicSyntaxError, CompileError


def _ctx(**variables):
    return SimpleNamespace(variables=dict(variables))


def test_number_literal():
    assert parse_expr("42") == Value(42.0)


def test_fraction_literal():
    assert parse_expr(" 2.5 ") == Value(2.5)


@pytest.mark.parametrize(("text", "number"), [("true", 1.0), ("false", 0.0)])
def test_boolean_literals(text, number):
    assert parse_expr(text) == Value(number)


def test_variable_reference():
    assert parse_expr("x") == Refer("x")


def test_parenthesised_literal():
    assert parse_expr("(7)") == Value(7.0)


def test_addition():
    assert parse_expr("1 + 2") == Oper(OperKind.ADD, Value(1.0), Value(2.0))


def test_greater_than_swaps_operands():
    assert parse_expr("a > b") == Oper(OperKind.LES, Refer("b"), Refer("a"))


def test_single_equals_is_equality():
    assert parse_expr("a = 1") == Oper(OperKind.EQL, Refer("a"), Value(1.0))


def test_left_associative_without_precedence():
    expected = Oper(OperKind.MUL, Oper(OperKind.ADD, Value(1.0), Value(2.0)), Value(3.0))
    assert parse_expr("1 + 2 * 3") == expected


def test_parentheses_group():
    expected = Oper(OperKind.ADD, Value(1.0), Oper(OperKind.MUL, Value(2.0), Value(3.0)))
    assert parse_expr("1 + (2 * 3)") == expected


def test_parse_oper_directly():
    assert parse_oper("x * 4") == Oper(OperKind.MUL, Refer("x"), Value(4.0))


@pytest.mark.parametrize("text", ["", "a - b", "()", "1 +", "a == b"])
def test_parse_errors(text):
    with pytest.raises(BasicSyntaxError):
        parse_expr(text)


def test_value_compiles_integer_without_fraction():
    assert Value(3.0).compile(_ctx()) == "3"


def test_value_round_trip():
    assert parse_expr(Value(2.5).compile(_ctx())) == Value(2.5)


def test_refer_compiles_to_load():
    assert Refer("x").compile(_ctx(x=0)) == "\tlda ar, 0\n"


def test_refer_undefined():
    with pytest.raises(CompileError):
        Refer("missing").compile(_ctx())


def test_oper_both_literals():
    code = Oper(OperKind.ADD, Value(1.0), Value(2.0)).compile(_ctx())
    assert code == "\tmov ar, 1\n\tadd ar, 2\n"


def test_oper_lhs_is_code():
    ctx = _ctx(x=0)
    code = Oper(OperKind.MUL, Refer("x"), Value(3.0)).compile(ctx)
    assert code.startswith(Refer("x").compile(ctx))
    assert code.endswith("\tmul ar, 3\n")


def test_oper_rhs_is_code():
    ctx = _ctx(x=0)
    code = Oper(OperKind.LES, Value(3.0), Refer("x")).compile(ctx)
    assert code.startswith(Refer("x").compile(ctx))
    assert "\tmov dr, ar\n" in code
    assert code.endswith("\tles ar, dr\n")


def test_oper_both_code_uses_stack():
    ctx = _ctx(x=0, y=1)
    code = Oper(OperKind.EQL, Refer("x"), Refer("y")).compile(ctx)
    assert code.index("\tpsh ar\n") < code.index("\tpop ar\n")
    assert code.endswith("\teql ar, dr\n")