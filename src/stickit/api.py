"""FastAPI application serving the bulletin board pages."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from prometheus_client import Counter
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings
from .controllers import auth, categories, home, post_its, users
from .controllers.rendering import show_error
from .database import init_db
from .errors import StickItError
from .rate_limit import limiter

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"

# Prometheus counter to track requests by method, endpoint and status code
REQUEST_COUNTER = Counter(
    "api_requests_total",
    "Total API requests",
    ["method", "endpoint", "status"],
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("creating app")
    init_db(reset=settings.reset_database)
    yield


app = FastAPI(title=settings.api_title, lifespan=lifespan)
app.state.limiter = limiter
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

for controller in (home, auth, users, categories, post_its):
    app.include_router(controller.router)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log incoming requests and their outcomes while updating metrics."""
    logger.info("request %s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
        REQUEST_COUNTER.labels(
            method=request.method,
            endpoint=request.url.path,
            status=str(response.status_code),
        ).inc()
        logger.info(
            "response %s %s status %s",
            request.method,
            request.url.path,
            response.status_code,
        )
        return response
    except Exception:
        REQUEST_COUNTER.labels(
            method=request.method,
            endpoint=request.url.path,
            status="500",
        ).inc()
        logger.exception(
            "error handling %s %s", request.method, request.url.path
        )
        raise


@app.exception_handler(StickItError)
async def handle_stickit_error(request: Request, exc: StickItError):
    logger.info(
        "%s %s failed with %s: %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.message,
    )
    return show_error(request, exc.message, exc.status_code)


@app.exception_handler(RateLimitExceeded)
async def handle_rate_limit(request: Request, exc: RateLimitExceeded):
    logger.info("rate limit hit on %s %s: %s", request.method, request.url.path, exc.detail)
    return show_error(request, "Too many attempts, try again later.", 429)


@app.exception_handler(StarletteHTTPException)
async def handle_http_error(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return show_error(request, "Invalid URL entered. Please try again.", 404)
    return show_error(request, str(exc.detail), exc.status_code)


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError):
    fields = ", ".join(str(err["loc"][-1]) for err in exc.errors())
    return show_error(request, f"Invalid request: check {fields}.", 400)


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception("unexpected error on %s %s", request.method, request.url.path, exc_info=exc)
    return show_error(request, "Unexpected error.", 500)
