# Author:   LemonScript developers
# Date:     10/19/2026

"""Binary operator semantics for LemonScript chains.

All results are signed 64-bit integers: anything that leaves the range wraps
around the same way C's two's complement `long` does.
"""

from typing import Callable, Iterable, Optional, Tuple, Union

from lemonscript.values import Error, ErrorKind, Number, OpCode, OperatorCode, Value

INT_BITS = 64
INT_MIN = -(2 ** (INT_BITS - 1))
INT_MAX = 2 ** (INT_BITS - 1) - 1
INT_DIGITS = len(str(INT_MAX))
_MODULUS = 2**INT_BITS


def wrap(n: int) -> int:
    return (n - INT_MIN) % _MODULUS + INT_MIN


def in_range(n: int) -> bool:
    return INT_MIN <= n <= INT_MAX


def literal_value(literal: str) -> Optional[int]:
    """Reads a decimal literal such as `-0042`, or None when it is outside the 64-bit range.

    Only the significant digits are converted, so zero padding of any length is fine.
    """
    negative = literal.startswith("-")
    digits = literal.lstrip("-").lstrip("0") or "0"
    if len(digits) > INT_DIGITS:
        return None
    value = -int(digits) if negative else int(digits)
    return value if in_range(value) else None


def _truncdiv(x, y):
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


def _div(x, y):
    if y == 0:
        return Error(ErrorKind.DIVIDE_BY_ZERO)
    return _truncdiv(x, y)


def _mod(x, y):
    if y == 0:
        return Error(ErrorKind.MODULO_BY_ZERO)
    return x - y * _truncdiv(x, y)


def _pow(x, y):
    if y >= 0:
        return pow(x, y, _MODULUS)
    # negative exponents truncate toward zero, same as division
    if x == 0:
        return Error(ErrorKind.DIVIDE_BY_ZERO)
    if x == 1:
        return 1
    if x == -1:
        return 1 if y % 2 == 0 else -1
    return 0


OperationImpl = Callable[[int, int], Union[int, Error]]

OPERATIONS: dict[OpCode, OperationImpl] = {
    OpCode.ADD: lambda x, y: x + y,
    OpCode.SUB: lambda x, y: x - y,
    OpCode.MUL: lambda x, y: x * y,
    OpCode.DIV: _div,
    OpCode.MOD: _mod,
    OpCode.POW: _pow,
}


def apply(left: Value, op: Value, right: Value) -> Value:
    """Combines a running total with the next operand of a chain.

    Errors short-circuit and the left one wins when both operands are errors.
    """
    if isinstance(left, Error):
        return left
    if isinstance(right, Error):
        return right

    impl = OPERATIONS.get(op.op) if isinstance(op, OperatorCode) else None
    if impl is None:
        return Error(ErrorKind.BAD_OPERATOR)

    if not isinstance(left, Number) or not isinstance(right, Number):
        return Error(ErrorKind.INVALID_OPERAND)

    result = impl(left.value, right.value)
    if isinstance(result, Error):
        return result
    return Number(wrap(result))


def fold_chain(links: Iterable[Tuple[Value, Value]], evaluate_last: Callable[[], Value]) -> Value:
    """Left-folds `a op b op ... op z` given the `(operand, operator)` links and the final operand.

    The final operand is only evaluated if no error has been seen yet.
    """
    total = None
    pending = None
    for operand, operator in links:
        total = operand if pending is None else apply(total, pending, operand)
        if isinstance(total, Error):
            return total
        pending = operator

    last = evaluate_last()
    if pending is None:
        return last
    return apply(total, pending, last)
