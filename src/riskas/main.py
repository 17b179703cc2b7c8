"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from riskas import __version__
from riskas.config.settings import get_settings
from riskas.config.logging_config import setup_logging
from riskas.repositories.sqlalchemy.database import init_db
from riskas.api.routers import transactions_router, summary_router
from riskas.core.exceptions import AppError, StoreFailure

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    init_db()
    yield
    # Shutdown (nothing to clean up)


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Personal income and expense ledger",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(transactions_router)
app.include_router(summary_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    if isinstance(exc, StoreFailure):
        logger.error(
            "%s %s failed: store error during %s",
            request.method,
            request.url.path,
            exc.operation,
        )
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "message": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed requests as 400 in the same shape as ValidationError."""
    errors = exc.errors()
    if any(err.get("loc", ())[:1] == ("path",) for err in errors):
        message = "Invalid transaction ID"
    else:
        fields = [
            ".".join(str(part) for part in err.get("loc", ())[1:]) or "body"
            for err in errors
        ]
        message = f"Missing or invalid fields: {', '.join(dict.fromkeys(fields))}"
    logger.info("%s %s rejected: %s", request.method, request.url.path, message)
    return JSONResponse(
        status_code=400,
        content={"error": "VALIDATION_ERROR", "message": message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": __version__,
        "docs": "/docs",
    }
