"""Tagged success/failure value for validators and operations."""

from typing import Any, NamedTuple

from .exceptions import CalculatorError


class Outcome(NamedTuple):
    """Result of a validation or an arithmetic operation.
    
    Exactly one of ``value`` and ``error`` is meaningful: ``error`` is
    ``None`` on success.
    
    Attributes:
        value: Parsed number(s) or computed result on success.
        error: The domain failure otherwise.
    """
    
    value: Any = None
    error: CalculatorError | None = None
    
    @property
    def ok(self) -> bool:
        """Whether this outcome carries a value."""
        return self.error is None
    
    @classmethod
    def success(cls, value: Any) -> "Outcome":
        return cls(value=value)
    
    @classmethod
    def failure(cls, error: CalculatorError) -> "Outcome":
        return cls(error=error)
    
    def unwrap(self) -> Any:
        """Return the value, or raise the carried error.
        
        Raises:
            CalculatorError: If this outcome is a failure.
        """
        if self.error is not None:
            raise self.error
        return self.value
