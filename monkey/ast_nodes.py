# monkey/ast_nodes.py
# AST produced by the parser and consumed by the evaluator.
#
# Nodes are frozen dataclasses. Each node keeps the token that began it for
# diagnostics; that token is excluded from equality, so `==` compares shape,
# operators and literal values only.
#
#   str(node)      -> Monkey source text (fully parenthesised expressions)
#   node.to_dict() -> JSON-ready dict tagged with "type"

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Union

from .tokens import Token


def _token_field() -> Any:
    return field(compare=False, repr=False)


@dataclass(frozen=True)
class Identifier:
    token: Token = _token_field()
    value: str

    def __str__(self) -> str:
        return self.value

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "Identifier", "value": self.value}


@dataclass(frozen=True)
class IntegerLiteral:
    token: Token = _token_field()
    value: int

    def __str__(self) -> str:
        return str(self.value)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "IntegerLiteral", "value": self.value}


@dataclass(frozen=True)
class BooleanLiteral:
    token: Token = _token_field()
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "BooleanLiteral", "value": self.value}


@dataclass(frozen=True)
class PrefixExpression:
    token: Token = _token_field()
    operator: str
    right: Expression

    def __str__(self) -> str:
        return f"({self.operator}{self.right})"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "PrefixExpression", "operator": self.operator, "right": self.right.to_dict()}


@dataclass(frozen=True)
class InfixExpression:
    token: Token = _token_field()
    left: Expression
    operator: str
    right: Expression

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "InfixExpression",
            "left": self.left.to_dict(),
            "operator": self.operator,
            "right": self.right.to_dict(),
        }


Expression = Union[Identifier, IntegerLiteral, BooleanLiteral, PrefixExpression, InfixExpression]


@dataclass(frozen=True)
class LetStatement:
    token: Token = _token_field()
    name: Identifier
    value: Expression

    def __str__(self) -> str:
        return f"let {self.name} = {self.value};"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "LetStatement", "name": self.name.to_dict(), "value": self.value.to_dict()}


@dataclass(frozen=True)
class ReturnStatement:
    token: Token = _token_field()
    return_value: Expression

    def __str__(self) -> str:
        return f"return {self.return_value};"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "ReturnStatement", "returnValue": self.return_value.to_dict()}


@dataclass(frozen=True)
class ExpressionStatement:
    token: Token = _token_field()
    expression: Expression

    def __str__(self) -> str:
        return f"{self.expression};"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "ExpressionStatement", "expression": self.expression.to_dict()}


Statement = Union[LetStatement, ReturnStatement, ExpressionStatement]


@dataclass(frozen=True)
class Program:
    statements: Tuple[Statement, ...] = ()

    def __str__(self) -> str:
        return " ".join(str(s) for s in self.statements)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "Program", "statements": [s.to_dict() for s in self.statements]}


Node = Union[Program, Statement, Expression]
