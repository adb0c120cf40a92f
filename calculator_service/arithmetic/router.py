"""FastAPI router for the arithmetic endpoints."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends

from calculator_service.dependencies import get_logger

from .operations import OPERATIONS
from .outcome import Outcome
from .schemas import ErrorResponse, ResultResponse
from .validators import validate_pair, validate_single


router = APIRouter(
    tags=["arithmetic"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)

Logger = Annotated[structlog.stdlib.BoundLogger, Depends(get_logger)]


def _unwrap(outcome: Outcome, logger: structlog.stdlib.BoundLogger, operation: str):
    if not outcome.ok:
        logger.error(
            "operation_failed",
            operation=operation,
            code=outcome.error.code,
            message=outcome.error.message,
        )
    return outcome.unwrap()


def compute(
    name: str,
    logger: structlog.stdlib.BoundLogger,
    num1: str | None,
    num2: str | None = None,
) -> ResultResponse:
    """Validate the raw operands, run the named operation and log the result.
    
    Args:
        name: Key into OPERATIONS.
        logger: Request-bound logger.
        num1: Raw ``num1`` query value.
        num2: Raw ``num2`` query value, ignored by unary operations.
        
    Returns:
        ResultResponse with the computed value.
        
    Raises:
        CalculatorError: On missing or invalid input, or a domain failure.
    """
    operation = OPERATIONS[name]
    
    if operation.arity == 1:
        operands = (_unwrap(validate_single(num1), logger, name),)
    else:
        operands = _unwrap(validate_pair(num1, num2), logger, name)
    
    result = _unwrap(operation.handler(*operands), logger, name)
    
    logger.info(
        "operation_computed",
        operation=name,
        operands=list(operands),
        expression=operation.describe(operands, result),
        result=result,
    )
    return ResultResponse(result=result)


@router.get("/add", response_model=ResultResponse)
def add_endpoint(logger: Logger, num1: str | None = None, num2: str | None = None) -> ResultResponse:
    """Return ``num1 + num2``."""
    return compute("add", logger, num1, num2)


@router.get("/subtract", response_model=ResultResponse)
def subtract_endpoint(logger: Logger, num1: str | None = None, num2: str | None = None) -> ResultResponse:
    """Return ``num1 - num2``."""
    return compute("subtract", logger, num1, num2)


@router.get("/multiply", response_model=ResultResponse)
def multiply_endpoint(logger: Logger, num1: str | None = None, num2: str | None = None) -> ResultResponse:
    """Return ``num1 * num2``."""
    return compute("multiply", logger, num1, num2)


@router.get("/divide", response_model=ResultResponse)
def divide_endpoint(logger: Logger, num1: str | None = None, num2: str | None = None) -> ResultResponse:
    """Return ``num1 / num2``; 400 when ``num2`` is zero."""
    return compute("divide", logger, num1, num2)


@router.get("/power", response_model=ResultResponse)
def power_endpoint(logger: Logger, num1: str | None = None, num2: str | None = None) -> ResultResponse:
    """Return ``num1`` (base) raised to ``num2`` (exponent)."""
    return compute("power", logger, num1, num2)


@router.get("/sqrt", response_model=ResultResponse)
def sqrt_endpoint(logger: Logger, num1: str | None = None) -> ResultResponse:
    """Return the square root of ``num1``; 400 when negative."""
    return compute("sqrt", logger, num1)


@router.get("/modulo", response_model=ResultResponse)
def modulo_endpoint(logger: Logger, num1: str | None = None, num2: str | None = None) -> ResultResponse:
    """Return the remainder of ``num1 / num2``; 400 when ``num2`` is zero."""
    return compute("modulo", logger, num1, num2)
