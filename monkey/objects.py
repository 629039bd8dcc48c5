# monkey/objects.py
# Runtime values produced by the evaluator: a closed set of Integer and Boolean.

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union

INTEGER_OBJ = "INTEGER"
BOOLEAN_OBJ = "BOOLEAN"


@dataclass(frozen=True)
class Integer:
    value: int

    @property
    def type_name(self) -> str:
        return INTEGER_OBJ

    def inspect(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Boolean:
    value: bool

    @property
    def type_name(self) -> str:
        return BOOLEAN_OBJ

    def inspect(self) -> str:
        return "true" if self.value else "false"


Value = Union[Integer, Boolean]

TRUE = Boolean(True)
FALSE = Boolean(False)


def native_bool_to_boolean(b: bool) -> Boolean:
    return TRUE if b else FALSE


def to_native(value: Optional[Value]) -> Union[int, bool, None]:
    """Plain Python form of a value (for receipts/JSON); None stays None."""
    if value is None:
        return None
    return value.value
