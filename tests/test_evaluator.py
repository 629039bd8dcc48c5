# tests/test_evaluator.py
import pytest

from monkey.ast_nodes import Identifier, LetStatement, IntegerLiteral, Program
from monkey.evaluator import (
    DivisionByZero,
    EvaluationError,
    TypeMismatch,
    UnsupportedNode,
    UnsupportedOperator,
    evaluate,
)
from monkey.objects import FALSE, TRUE, Boolean, Integer
from monkey.parser import parse_text


def run(src):
    program, errors = parse_text(src)
    assert errors == [], errors
    return evaluate(program)


@pytest.mark.parametrize(
    "src, expected",
    [
        ("5", 5),
        ("10", 10),
        ("-5", -5),
        ("-10", -10),
        ("5 + 5 + 5 + 5 - 10", 10),
        ("2 * 2 * 2 * 2 * 2", 32),
        ("-50 + 100 + -50", 0),
        ("5 * 2 + 10", 20),
        ("5 + 5 * 2", 15),
        ("20 + 2 * -10", 0),
        ("50 / 2 * 2 + 10", 60),
        ("2 * (5 + 10)", 30),
        ("3 * 3 * 3 + 10", 37),
        ("3 * (3 * 3) + 10", 37),
        ("(5 + 10 * 2 + 15 / 3) * 2 + -10", 50),
    ],
)
def test_integer_expressions(src, expected):
    assert run(src) == Integer(expected)


@pytest.mark.parametrize(
    "src, expected",
    [
        ("true", True),
        ("false", False),
        ("1 < 2", True),
        ("1 > 2", False),
        ("1 < 1", False),
        ("1 == 1", True),
        ("1 != 1", False),
        ("1 == 2", False),
        ("1 != 2", True),
        ("true == true", True),
        ("false == false", True),
        ("true == false", False),
        ("true != false", True),
        ("(1 < 2) == true", True),
        ("(1 > 2) == true", False),
    ],
)
def test_boolean_expressions(src, expected):
    assert run(src) == Boolean(expected)


def test_bang_operator():
    assert run("!true") == FALSE
    assert run("!false") == TRUE
    assert run("!!true") == TRUE
    assert run("!!false") == FALSE


def test_bang_treats_any_non_boolean_as_truthy():
    assert run("!5") == FALSE
    assert run("!0") == FALSE
    assert run("!!5") == TRUE


def test_minus_on_boolean_is_type_mismatch():
    with pytest.raises(TypeMismatch) as ex:
        run("-true")
    assert str(ex.value) == "unknown operator: -BOOLEAN"


def test_mixed_operand_types_are_type_mismatch():
    with pytest.raises(TypeMismatch) as ex:
        run("5 + true")
    assert str(ex.value) == "type mismatch: INTEGER + BOOLEAN"
    with pytest.raises(TypeMismatch):
        run("1 == true")


def test_arithmetic_on_booleans_is_unsupported():
    with pytest.raises(UnsupportedOperator) as ex:
        run("true + false")
    assert "BOOLEAN + BOOLEAN" in str(ex.value)
    with pytest.raises(UnsupportedOperator):
        run("true < false")


def test_failure_is_fatal_for_the_whole_program():
    # Later statements are never reached.
    with pytest.raises(EvaluationError):
        run("1; -true; 2")


@pytest.mark.parametrize(
    "src, expected",
    [("7 / 2", 3), ("-7 / 2", -3), ("7 / -2", -3), ("-7 / -2", 3), ("6 / 3", 2)],
)
def test_division_truncates_toward_zero(src, expected):
    assert run(src) == Integer(expected)


def test_division_by_zero():
    with pytest.raises(DivisionByZero):
        run("1 / 0")
    # Also catchable as the Python builtin.
    with pytest.raises(ZeroDivisionError):
        run("5 / (2 - 2)")


def test_integers_do_not_overflow():
    assert run("9223372036854775807 + 1") == Integer(9223372036854775808)


def test_program_value_is_last_statement():
    assert run("1; 2; 3 * 3") == Integer(9)


def test_empty_program_evaluates_to_none():
    assert evaluate(Program(())) is None


def test_return_value_evaluates():
    program, _ = parse_text("return 10;")
    assert evaluate(program.statements[0].return_value) == Integer(10)


def test_return_stops_the_program():
    assert run("1; return 2 * 5; 3") == Integer(10)


def test_identifiers_and_let_are_outside_the_core():
    with pytest.raises(UnsupportedNode):
        evaluate(Identifier(None, "x"))
    with pytest.raises(UnsupportedNode):
        evaluate(Program((LetStatement(None, Identifier(None, "x"), IntegerLiteral(None, 1)),)))


def test_value_inspect():
    assert Integer(15).inspect() == "15"
    assert TRUE.inspect() == "true"
    assert FALSE.type_name == "BOOLEAN"
