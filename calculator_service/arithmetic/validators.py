"""Parsing of untyped query parameters into validated numbers."""

import math
import re

from .exceptions import InvalidNumberError, MissingInputError
from .outcome import Outcome

NUMERIC_RE = re.compile(r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")

BOTH_REQUIRED = "Both numbers are required"
BOTH_INVALID = "Invalid input - Both parameters must be numbers"
SINGLE_REQUIRED = "Number is required"
SINGLE_INVALID = "Invalid input - Parameter must be a number"


def parse_number(raw: str) -> float | None:
    """Parse a decimal string into a finite float.

    Surrounding whitespace is ignored. Only ASCII digits count, so
    Arabic-Indic or fullwidth digits are rejected along with empty
    strings, ``nan``/``inf`` spellings, digit separators and values that
    overflow to infinity.

    Args:
        raw: Candidate numeric token.

    Returns:
        The parsed value, or None when the token is not a finite number.
    """
    token = raw.strip()
    if not NUMERIC_RE.match(token):
        return None
    value = float(token)
    if not math.isfinite(value):
        return None
    return value


def validate_pair(raw1: str | None, raw2: str | None) -> Outcome:
    """Validate the two operands of a binary operation.

    Args:
        raw1: First raw query value (``num1``), None when absent.
        raw2: Second raw query value (``num2``), None when absent.

    Returns:
        Outcome holding ``(a, b)`` in input order, or a MissingInputError /
        InvalidNumberError.
    """
    if raw1 is None or raw2 is None:
        return Outcome.failure(MissingInputError(BOTH_REQUIRED))

    a = parse_number(raw1)
    b = parse_number(raw2)
    if a is None or b is None:
        return Outcome.failure(InvalidNumberError(BOTH_INVALID, raw1, raw2))

    return Outcome.success((a, b))


def validate_single(raw: str | None) -> Outcome:
    """Validate the operand of a unary operation."""
    if raw is None:
        return Outcome.failure(MissingInputError(SINGLE_REQUIRED))

    value = parse_number(raw)
    if value is None:
        return Outcome.failure(InvalidNumberError(SINGLE_INVALID, raw))

    return Outcome.success(value)
