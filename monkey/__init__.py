# monkey/__init__.py
# Monkey language core: lexer, Pratt parser, AST and tree-walking evaluator.

from .tokens import Token, TokenType
from .lexer import tokenize
from .parser import Parser, parse, parse_text
from .evaluator import (
    DivisionByZero,
    EvaluationError,
    Evaluator,
    TypeMismatch,
    UnsupportedNode,
    UnsupportedOperator,
    evaluate,
)
from .objects import Boolean, Integer, FALSE, TRUE

__all__ = [
    "Token", "TokenType", "tokenize",
    "Parser", "parse", "parse_text",
    "Evaluator", "evaluate", "EvaluationError", "UnsupportedOperator",
    "TypeMismatch", "DivisionByZero", "UnsupportedNode",
    "Integer", "Boolean", "TRUE", "FALSE",
]

__version__ = "0.1.0"
