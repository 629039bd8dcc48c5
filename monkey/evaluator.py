# monkey/evaluator.py
# Tree-walking evaluator for Monkey literal and operator expressions.
#
# Unlike the parser, evaluation fails fast: the first type mismatch or unknown
# operator raises an EvaluationError subclass and no partial result is kept.

from __future__ import annotations
import logging
from typing import Optional

from .ast_nodes import (
    BooleanLiteral,
    ExpressionStatement,
    InfixExpression,
    IntegerLiteral,
    Node,
    PrefixExpression,
    Program,
    ReturnStatement,
)
from .objects import FALSE, TRUE, Boolean, Integer, Value, native_bool_to_boolean

logger = logging.getLogger(__name__)


class EvaluationError(Exception):
    pass


class UnsupportedOperator(EvaluationError):
    """Operator outside the closed set for its operand types."""


class TypeMismatch(EvaluationError, TypeError):
    """Operand of the wrong type, e.g. `-true` or `1 + true`."""


class DivisionByZero(EvaluationError, ZeroDivisionError):
    pass


class UnsupportedNode(EvaluationError):
    """Node kind this core cannot evaluate (identifiers, let bindings)."""


def _int_div(left: int, right: int) -> int:
    # Truncates toward zero; Python's // floors.
    q = abs(left) // abs(right)
    return -q if (left < 0) != (right < 0) else q


class Evaluator:
    def eval(self, node: Node) -> Optional[Value]:
        if isinstance(node, Program):
            return self.eval_program(node)
        if isinstance(node, ExpressionStatement):
            return self.eval(node.expression)
        if isinstance(node, ReturnStatement):
            return self.eval(node.return_value)
        if isinstance(node, IntegerLiteral):
            return Integer(node.value)
        if isinstance(node, BooleanLiteral):
            return native_bool_to_boolean(node.value)
        if isinstance(node, PrefixExpression):
            right = self.eval(node.right)
            return self.eval_prefix_expression(node.operator, right)
        if isinstance(node, InfixExpression):
            left = self.eval(node.left)
            right = self.eval(node.right)
            return self.eval_infix_expression(node.operator, left, right)
        raise UnsupportedNode(f"cannot evaluate {type(node).__name__}")

    def eval_program(self, program: Program) -> Optional[Value]:
        """Value of the last statement; a `return` stops the program early.

        An empty program evaluates to None.
        """
        result: Optional[Value] = None
        for stmt in program.statements:
            result = self.eval(stmt)
            if isinstance(stmt, ReturnStatement):
                logger.debug("return stops program with %r", result)
                break
        return result

    def eval_prefix_expression(self, operator: str, right: Value) -> Value:
        if operator == "!":
            return self.eval_bang_operator_expression(right)
        if operator == "-":
            return self.eval_minus_prefix_operator_expression(right)
        raise UnsupportedOperator(f"unknown operator: {operator}{right.type_name}")

    def eval_bang_operator_expression(self, right: Value) -> Boolean:
        # Anything that is not a Boolean counts as truthy.
        if right == TRUE:
            return FALSE
        if right == FALSE:
            return TRUE
        return FALSE

    def eval_minus_prefix_operator_expression(self, right: Value) -> Integer:
        if not isinstance(right, Integer):
            raise TypeMismatch(f"unknown operator: -{right.type_name}")
        return Integer(-right.value)

    def eval_infix_expression(self, operator: str, left: Value, right: Value) -> Value:
        if type(left) is not type(right):
            raise TypeMismatch(f"type mismatch: {left.type_name} {operator} {right.type_name}")
        if isinstance(left, Integer):
            return self.eval_integer_infix_expression(operator, left, right)
        if operator == "==":
            return native_bool_to_boolean(left == right)
        if operator == "!=":
            return native_bool_to_boolean(left != right)
        raise UnsupportedOperator(f"unknown operator: {left.type_name} {operator} {right.type_name}")

    def eval_integer_infix_expression(self, operator: str, left: Integer, right: Integer) -> Value:
        lv, rv = left.value, right.value
        if operator == "+":
            return Integer(lv + rv)
        if operator == "-":
            return Integer(lv - rv)
        if operator == "*":
            return Integer(lv * rv)
        if operator == "/":
            if rv == 0:
                raise DivisionByZero(f"division by zero: {lv} / {rv}")
            return Integer(_int_div(lv, rv))
        if operator == "<":
            return native_bool_to_boolean(lv < rv)
        if operator == ">":
            return native_bool_to_boolean(lv > rv)
        if operator == "==":
            return native_bool_to_boolean(lv == rv)
        if operator == "!=":
            return native_bool_to_boolean(lv != rv)
        raise UnsupportedOperator(f"unknown operator: {left.type_name} {operator} {right.type_name}")


def evaluate(node: Node) -> Optional[Value]:
    return Evaluator().eval(node)
