"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from account_api.api import auth, user
from account_api.config import get_settings
from account_api.schemas.auth import ApiResponse
from account_api.services.errors import AuthError, DependencyFailure

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info(f"Starting account API ({settings.environment})")
    yield


app = FastAPI(
    title="Account API",
    description="User registration, login, email verification and password reset",
    version="0.1.0",
    lifespan=lifespan,
)

# The session travels in a cookie, so cross-origin callers need credentials
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _failure(message: str, code: str) -> JSONResponse:
    body = ApiResponse(success=False, message=message, code=code)
    # Clients branch on ``success``, so account failures keep a 200 status
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


@app.exception_handler(AuthError)
async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} failed: {exc.code}")
    return _failure(exc.message, exc.code)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    field = errors[0]["loc"][-1] if errors and errors[0].get("loc") else None
    if field == "email":
        message = "Please provide a valid email"
    else:
        message = "Invalid request body"
    return _failure(message, "validation_error")


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"{request.method} {request.url.path} raised an unexpected error")
    return _failure(DependencyFailure.default_message, DependencyFailure.code)


# Register routers
app.include_router(auth.router)
app.include_router(user.router)


@app.get("/", response_class=PlainTextResponse)
async def root():
    return "API Working"


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
