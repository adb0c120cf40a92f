"""Global dependencies for the application."""

import structlog
from fastapi import Request


def get_logger(request: Request) -> structlog.stdlib.BoundLogger:
    """Dependency providing a logger bound to the current request.
    
    Handlers take their logger from here instead of a module global, so
    tests can swap it out through ``app.dependency_overrides``.
    
    Args:
        request: The FastAPI request object.
        
    Returns:
        A structlog logger bound with the request method and path.
    """
    return structlog.get_logger("calculator").bind(
        method=request.method,
        path=request.url.path,
    )
