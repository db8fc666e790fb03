"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api import auth, health
from src.config import get_settings
from src.services.errors import (
    AuthenticationError,
    AuthServiceError,
    DependencyError,
    ValidationError,
)
from src.services.passwords import get_password_hasher
from src.services.tokens import get_token_service

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s  %(levelname)-8s  %(name)s - %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    # Build the signing and hashing services up front so bad config fails startup
    get_token_service()
    get_password_hasher()
    logger.info(f"Auth service started ({settings.environment})")
    yield


app = FastAPI(
    title="Investment Tracker API",
    description="User registration, login and bearer-token authentication",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AuthServiceError)
async def auth_service_error_handler(request: Request, exc: AuthServiceError) -> JSONResponse:
    """Map service errors to their HTTP responses."""
    if isinstance(exc, DependencyError):
        # Already logged with detail where it was raised
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": "Internal server error"},
        )

    content = {"detail": exc.message}
    headers = None
    if isinstance(exc, ValidationError):
        content["reason"] = exc.reason.value
    elif isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=exc.status_code, content=content, headers=headers)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report unparseable request bodies as plain 400s."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request body"},
    )


# Register routers
app.include_router(health.router)
app.include_router(auth.router)
