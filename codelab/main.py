"""
Code Lab - Main Application Entry Point.

Backend for the browser coding sandbox: runs student code on a remote
runtime and asks a hosted language model for pedagogical hints.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from codelab.api import run_router, tutor_router
from codelab.api.tutor import hint_for_error
from codelab.config import get_settings
from codelab.execution import ExecutionFailedError, UnsupportedLanguageError
from codelab.services import proxy_lifespan
from codelab.tutor import TutorError, TutorErrorKind

settings = get_settings()

# Configure structured logging
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer() if settings.environment == "production"
        else structlog.dev.ConsoleRenderer()
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        0 if settings.debug else 20
    )
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    async with proxy_lifespan(app):
        yield


app = FastAPI(
    title=settings.app_name,
    description="""
Backend for an educational coding sandbox.

## Endpoints

- **POST /run**: execute Python, Java or C# code remotely with optional stdin
- **POST /tutor**: get progressive hints about the code, never the full solution
- **GET /languages**: languages and the runtimes they map to
    """,
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.server.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _payload_too_large(request: Request, size: int) -> JSONResponse:
    logger.warning("Request body too large", path=request.url.path, size=size)
    return JSONResponse(
        status_code=413,
        content={"error": "Request body too large", "code": "PAYLOAD_TOO_LARGE"}
    )


@app.middleware("http")
async def limit_body_size(request: Request, call_next):
    """
    Reject bodies larger than the configured limit.

    The declared Content-Length is checked first; chunked bodies carry none,
    so the bytes actually received are counted as well.
    """
    limit = settings.server.max_body_bytes
    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > limit:
        return _payload_too_large(request, int(content_length))

    if request.method in ("POST", "PUT", "PATCH"):
        body = await request.body()
        if len(body) > limit:
            return _payload_too_large(request, len(body))

    return await call_next(request)


# Exception handlers
@app.exception_handler(UnsupportedLanguageError)
async def unsupported_language_handler(
    request: Request, exc: UnsupportedLanguageError
) -> JSONResponse:
    logger.info("Unsupported language", path=request.url.path, language=exc.language)
    return JSONResponse(
        status_code=400,
        content={"error": "Unsupported language", "code": "UNSUPPORTED_LANGUAGE"}
    )


@app.exception_handler(ExecutionFailedError)
async def execution_failed_handler(
    request: Request, exc: ExecutionFailedError
) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={
            "error": "Execution failed",
            "code": "EXECUTION_FAILED",
            "details": str(exc)
        }
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies: a hint for /tutor, a 400 everywhere else."""
    if request.url.path == "/tutor":
        error = TutorError(kind=TutorErrorKind.INVALID_REQUEST, message="invalid request body")
        return JSONResponse(status_code=200, content={"hint": hint_for_error(error)})
    return JSONResponse(
        status_code=400,
        content={
            "error": "Invalid request",
            "code": "INVALID_REQUEST",
            "details": jsonable_errors(exc)
        }
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler."""
    logger.error(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=True
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "code": "INTERNAL_ERROR",
            "details": str(exc) if settings.debug else None
        }
    )


app.include_router(run_router)
app.include_router(tutor_router)


# Liveness probe used by the front end
@app.get("/", tags=["root"], response_class=PlainTextResponse)
async def root() -> str:
    return "Backend OK"


@app.get("/health", tags=["health"])
async def health_check() -> dict:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.environment
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "codelab.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.debug
    )
