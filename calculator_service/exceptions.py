"""Base exception for the calculator service."""


class CalculatorServiceError(Exception):
    """Base exception for all calculator service errors."""
    
    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)
