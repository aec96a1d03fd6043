# Author:   LemonScript developers
# Date:     10/19/2026

import abc
import enum
from dataclasses import dataclass


class OpCode(enum.Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    POW = "^"

    def __str__(self) -> str:
        return self.value


class ErrorKind(enum.Enum):
    DIVIDE_BY_ZERO = "Error: Division By Zero!"
    MODULO_BY_ZERO = "Error: Modulus By Zero!"
    INVALID_NUMBER = "Error: Invalid Number!"
    UNDEFINED_VARIABLE = "Error: Undefined Variable!"
    BAD_OPERATOR = "Error: Invalid Operator!"
    CIRCULAR_REFERENCE = "Error: Circular Variable Reference!"
    INVALID_OPERAND = "Error: Invalid Operand!"

    def __str__(self) -> str:
        return self.value


class Value(abc.ABC):
    @classmethod
    @abc.abstractmethod
    def type_name(cls) -> str:
        ...


@dataclass(frozen=True)
class Number(Value):
    value: int

    @classmethod
    def type_name(cls) -> str:
        return "Number"

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class OperatorCode(Value):
    """An operator waiting to be applied inside a chain; never printed to the user."""

    op: OpCode

    @classmethod
    def type_name(cls) -> str:
        return "Operator"

    def __str__(self) -> str:
        return str(self.op)


@dataclass(frozen=True)
class VariableRef(Value):
    name: str

    @classmethod
    def type_name(cls) -> str:
        return "Variable"

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Error(Value):
    kind: ErrorKind

    @classmethod
    def type_name(cls) -> str:
        return "Error"

    def __str__(self) -> str:
        return str(self.kind)


@dataclass(frozen=True)
class ListValue(Value):
    items: tuple

    @classmethod
    def type_name(cls) -> str:
        return "List"

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self.items) + "]"
