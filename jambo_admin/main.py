"""FastAPI application entry point"""
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from jambo_admin import __version__
from jambo_admin.api import admins, auth, dashboard, health, transactions, users
from jambo_admin.config import settings
from jambo_admin.exceptions import AppError
from jambo_admin.middleware.rate_limit import limiter
from jambo_admin.schemas.common import ErrorDetail, ErrorResponse
from jambo_admin.utils.logger import logger, setup_logging

# Setup logging
setup_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    logger.info("Credit Jambo admin API starting up", extra={
        "version": __version__,
        "environment": settings.ENVIRONMENT,
        "log_level": settings.LOG_LEVEL,
        "rate_limiting": settings.RATE_LIMIT_ENABLED,
        "monitoring": settings.METRICS_ENABLED
    })
    yield
    logger.info("Credit Jambo admin API shutting down")


app = FastAPI(
    title="Credit Jambo Admin API",
    description="Back-office API for Credit Jambo administrators",
    version=__version__,
    docs_url="/api-docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# ===== Middleware Setup =====

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

if settings.METRICS_ENABLED:
    from prometheus_fastapi_instrumentator import Instrumentator

    from jambo_admin.middleware.monitoring import MonitoringMiddleware
    app.add_middleware(MonitoringMiddleware)

    instrumentator = Instrumentator(
        should_group_status_codes=True,
        should_ignore_untemplated=True,
        should_respect_env_var=True,
        should_instrument_requests_inprogress=True,
        excluded_handlers=["/metrics", "/health", "/health/ready", "/health/live"],
        inprogress_name="jambo_admin_requests_inprogress",
        inprogress_labels=True
    )
    instrumentator.instrument(app)
    instrumentator.expose(app, endpoint=settings.METRICS_PATH, include_in_schema=False)

# Rate limiting: per-route limits use the decorator, the API-wide default
# comes from the middleware.
app.state.limiter = limiter
if settings.RATE_LIMIT_ENABLED:
    app.add_middleware(SlowAPIMiddleware)

# ===== Route Setup =====

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(admins.router)
app.include_router(users.router)
app.include_router(transactions.router)
app.include_router(dashboard.router)


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "Credit Jambo Admin API",
        "status": "running",
        "version": __version__,
        "docs": "/api-docs",
        "health": "/health",
    }


# ===== Error Handlers =====

def error_response(status_code: int, message: str, exc: BaseException = None) -> JSONResponse:
    """Build the ``{"success": false, "error": {...}}`` envelope.

    The traceback is only included outside production.
    """
    stack = None
    if exc is not None and not settings.is_production:
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    body = ErrorResponse(error=ErrorDetail(message=message, stack=stack))
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _request_extra(request: Request, status_code: int) -> dict:
    return {
        "path": request.url.path,
        "method": request.method,
        "status_code": status_code,
        "request_id": getattr(request.state, "request_id", None),
    }


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Serialize typed domain errors"""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(exc.message, extra=_request_extra(request, exc.status_code))
    return error_response(exc.status_code, exc.message, exc)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed or missing input is a 400, not FastAPI's default 422"""
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'] if part != 'body')}: {err['msg']}"
        for err in exc.errors()
    )
    message = f"Validation failed: {details}"
    logger.warning(message, extra=_request_extra(request, 400))
    return error_response(400, message)


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    """Handle rate limit exceeded errors"""
    logger.warning(
        "Rate limit exceeded",
        extra={
            **_request_extra(request, 429),
            "client_ip": request.client.host if request.client else "unknown",
        },
    )
    return error_response(429, f"Too many requests, please try again later ({exc.detail}).")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Framework-level HTTP errors (unknown routes, wrong methods)"""
    if exc.status_code == 404:
        message = f"Route {request.method} {request.url.path} not found"
    else:
        message = str(exc.detail)
    return error_response(exc.status_code, message)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for uncaught errors"""
    logger.error(
        f"Unhandled exception: {str(exc)}",
        extra=_request_extra(request, 500),
        exc_info=True
    )
    message = "Internal server error" if settings.is_production else str(exc)
    return error_response(500, message, exc)
