"""FastAPI application entrypoint. No business logic; only wiring, middleware and error mapping."""

import logging

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import router as api_router
from app.core.errors import ServiceError

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error"
INVALID_BODY_MESSAGE = "Invalid request body"

app = FastAPI(
    title="Orderdesk API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Map account/order/auth errors to their status code with a {message} body."""
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Unparseable JSON or ill-typed fields are a bad request, not 422."""
    logger.debug(
        "Request validation failed on %s: %s",
        request.url.path,
        [err.get("loc") for err in exc.errors()],
    )
    return JSONResponse(status_code=400, content={"message": INVALID_BODY_MESSAGE})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Framework errors (404, 405, ...) use the same {message} envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all for store, hashing and other unexpected failures.

    The exception is logged with its traceback; the client only sees a fixed message.
    """
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": SERVER_ERROR_MESSAGE})


@app.get("/", response_class=PlainTextResponse)
def root() -> str:
    """Liveness check."""
    return "Backend is running"
