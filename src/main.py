"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api import auth, tips, users
from src.config import get_settings
from src.database import dispose_engine, init_db
from src.schemas.common import ErrorResponse
from src.services.errors import AppError

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    init_db()
    logger.info("Database initialized")
    yield
    dispose_engine()


app = FastAPI(
    title="Tips Share API",
    description="Share tips, read comments and vote, with token-based authentication",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def envelope(status_code: int, body: ErrorResponse) -> JSONResponse:
    """Render an error envelope."""
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body, exclude_none=True),
    )


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Convert application errors to the response envelope."""
    return envelope(exc.status_code, ErrorResponse(status=exc.status, message=exc.message))


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies as validation failures."""
    return envelope(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(status="fail", message="Invalid request body"),
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Wrap framework HTTP errors (unknown route, wrong method) in the envelope."""
    return envelope(
        exc.status_code,
        ErrorResponse(
            status="error" if exc.status_code >= 500 else "fail",
            message=str(exc.detail),
        ),
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    """Report store failures as internal errors."""
    logger.exception(f"Database error on {request.method} {request.url.path}")
    return envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(
            status="error",
            message="An error occurred while processing the request",
            error=str(exc),
        ),
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    """Report anything else as an internal error."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(
            status="error",
            message="An unexpected error occurred",
            error=str(exc),
        ),
    )


# Register routers
app.include_router(auth.router)
app.include_router(tips.router)
app.include_router(users.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
