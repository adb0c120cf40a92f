"""Arithmetic module - input validation, operations and endpoints."""

from .exceptions import (
    CalculatorError,
    MissingInputError,
    InvalidNumberError,
    DivisionByZeroError,
    NegativeRadicandError,
)
from .outcome import Outcome
from .validators import parse_number, validate_pair, validate_single
from .operations import (
    OPERATIONS,
    Operation,
    add,
    subtract,
    multiply,
    divide,
    power,
    square_root,
    modulo,
)
from .schemas import ResultResponse, ErrorResponse
from .router import router


__all__ = [
    # Exceptions
    "CalculatorError",
    "MissingInputError",
    "InvalidNumberError",
    "DivisionByZeroError",
    "NegativeRadicandError",
    # Validation
    "Outcome",
    "parse_number",
    "validate_pair",
    "validate_single",
    # Operations
    "OPERATIONS",
    "Operation",
    "add",
    "subtract",
    "multiply",
    "divide",
    "power",
    "square_root",
    "modulo",
    # Schemas
    "ResultResponse",
    "ErrorResponse",
    # Router
    "router",
]
