"""Domain failures for arithmetic requests."""

from calculator_service.exceptions import CalculatorServiceError


class CalculatorError(CalculatorServiceError):
    """Base exception for expected failures, answered with HTTP 400."""
    pass


class MissingInputError(CalculatorError):
    """Raised when a required query parameter is absent."""
    
    def __init__(self, message: str):
        super().__init__(message=message, code="MISSING_INPUT")


class InvalidNumberError(CalculatorError):
    """Raised when a parameter does not parse as a finite number.
    
    Attributes:
        raw_values: The offending raw tokens.
    """
    
    def __init__(self, message: str, *raw_values: str | None):
        super().__init__(message=message, code="INVALID_NUMBER")
        self.raw_values = raw_values


class DivisionByZeroError(CalculatorError):
    """Raised when dividing (or taking a remainder) by exactly zero.
    
    Attributes:
        dividend: The left-hand operand.
    """
    
    def __init__(self, message: str, dividend: float):
        super().__init__(message=message, code="DIVISION_BY_ZERO")
        self.dividend = dividend


class NegativeRadicandError(CalculatorError):
    """Raised when asked for the square root of a negative number.
    
    Attributes:
        radicand: The negative input.
    """
    
    def __init__(self, radicand: float):
        super().__init__(
            message="Cannot calculate square root of a negative number",
            code="NEGATIVE_RADICAND"
        )
        self.radicand = radicand
