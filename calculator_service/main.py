import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from .config import get_settings
from .logs import configure_logging, RequestLoggingMiddleware
from .arithmetic import router as arithmetic_router
from .arithmetic.exceptions import CalculatorError

settings = get_settings()
configure_logging(settings)

logger = structlog.get_logger("calculator")

INTERNAL_SERVER_ERROR = "Internal Server Error"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("service_started", app=settings.APP_NAME, port=settings.PORT)
    yield
    logger.info("service_stopped", app=settings.APP_NAME)

app = FastAPI(
    title=settings.APP_NAME,
    lifespan=lifespan,
    debug=settings.DEBUG
)

app.add_middleware(RequestLoggingMiddleware)


# Global exception handlers
@app.exception_handler(CalculatorError)
async def calculator_exception_handler(request: Request, exc: CalculatorError):
    return JSONResponse(
        status_code=400,
        content={"error": exc.message}
    )

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        "unhandled_error",
        message=str(exc),
        path=request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content={"error": INTERNAL_SERVER_ERROR}
    )

@app.get("/health")
async def health_check():
    return {"status": "ok", "app": settings.APP_NAME}

# Include routers
app.include_router(arithmetic_router)


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)
