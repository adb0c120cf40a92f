"""Pure arithmetic operations over validated floats.

Every function returns an :class:`Outcome`; expected failures such as a
zero divisor come back as values, never as raised exceptions.
"""

import math
from typing import Callable, NamedTuple

from .exceptions import DivisionByZeroError, NegativeRadicandError
from .outcome import Outcome

DIVISION_BY_ZERO = "Division by zero is not allowed"
MODULO_BY_ZERO = "Modulo by zero is not allowed"


def add(a: float, b: float) -> Outcome:
    return Outcome.success(a + b)


def subtract(a: float, b: float) -> Outcome:
    return Outcome.success(a - b)


def multiply(a: float, b: float) -> Outcome:
    return Outcome.success(a * b)


def divide(a: float, b: float) -> Outcome:
    """Divide ``a`` by ``b``; only an exact zero divisor is refused."""
    if b == 0:
        return Outcome.failure(DivisionByZeroError(DIVISION_BY_ZERO, a))
    return Outcome.success(a / b)


def _is_odd_integer(value: float) -> bool:
    return value.is_integer() and value % 2 == 1


def power(base: float, exponent: float) -> Outcome:
    """Raise ``base`` to ``exponent`` with IEEE 754 results instead of errors.

    ``math.pow`` raises where IEEE arithmetic yields a value: overflow
    becomes an infinity, zero to a negative power becomes an infinity,
    and a negative base with a fractional exponent becomes NaN. Odd
    integer exponents keep the sign of the base.
    """
    try:
        result = math.pow(base, exponent)
    except OverflowError:
        result = math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
    except ValueError:
        if base == 0:
            result = math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
        else:
            result = math.nan
    return Outcome.success(result)


def square_root(a: float) -> Outcome:
    if a < 0:
        return Outcome.failure(NegativeRadicandError(a))
    return Outcome.success(math.sqrt(a))


def modulo(dividend: float, divisor: float) -> Outcome:
    """Floating-point remainder whose sign follows the dividend."""
    if divisor == 0:
        return Outcome.failure(DivisionByZeroError(MODULO_BY_ZERO, dividend))
    return Outcome.success(math.fmod(dividend, divisor))


class Operation(NamedTuple):
    """Registry entry describing one operation.
    
    Attributes:
        name: Operation name, also its URL path segment.
        handler: The pure function computing it.
        arity: Number of operands (1 or 2).
        symbol: Operator used when logging the expression.
    """
    
    name: str
    handler: Callable[..., Outcome]
    arity: int
    symbol: str
    
    def describe(self, operands: tuple[float, ...], result: float) -> str:
        """Render ``a <symbol> b = result`` (or ``symbol(a) = result``)."""
        if self.arity == 1:
            return f"{self.symbol}({operands[0]}) = {result}"
        return f"{operands[0]} {self.symbol} {operands[1]} = {result}"


OPERATIONS: dict[str, Operation] = {
    op.name: op
    for op in (
        Operation("add", add, 2, "+"),
        Operation("subtract", subtract, 2, "-"),
        Operation("multiply", multiply, 2, "*"),
        Operation("divide", divide, 2, "/"),
        Operation("power", power, 2, "^"),
        Operation("sqrt", square_root, 1, "sqrt"),
        Operation("modulo", modulo, 2, "%"),
    )
}
