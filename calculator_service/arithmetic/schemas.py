"""Pydantic schemas for calculator responses."""

import math
from typing import Any

from pydantic import BaseModel, Field, field_serializer

# Integers up to 2**53 are exact in a float and print identically as ints.
MAX_EXACT_INTEGER = 2 ** 53


class ResultResponse(BaseModel):
    """Successful computation.
    
    Attributes:
        result: Computed value. Integral values within the exact integer
            range are written without a fraction (``4`` rather than
            ``4.0``). NaN and infinities are serialized as null, JSON
            having no literal for them.
    """
    
    result: float | None = Field(..., description="Computed value")
    
    @field_serializer("result")
    def serialize_result(self, value: float | None) -> Any:
        if value is None or not math.isfinite(value):
            return None
        if value.is_integer() and abs(value) <= MAX_EXACT_INTEGER:
            return int(value)
        return value


class ErrorResponse(BaseModel):
    """Failed computation.
    
    Attributes:
        error: Human-readable message.
    """
    
    error: str = Field(..., description="Error message")
