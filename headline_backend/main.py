"""
FastAPI application entry point for the Headline Analyzer backend.

This module creates the FastAPI app instance, installs the boundary
middleware (security headers, origin gate, CORS, rate limiting) and
registers all routers.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from headline_backend.config import settings
from headline_backend.routes.headlines import router as headlines_router
from headline_backend.routes.health import router as health_router
from headline_backend.services.errors import HeadlineServiceError, InputValidationError
from headline_backend.utils.rate_limit import FixedWindowRateLimiter, RateLimitMiddleware

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "Cross-Origin-Opener-Policy": "same-origin",
    "X-DNS-Prefetch-Control": "off",
}


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins from settings.

    Only the listed origins may call the API from a browser. Requests without
    an Origin header (curl, server-to-server) are not affected by CORS.

    Returns:
        List of allowed origin URLs.
    """
    origins = list(settings.CORS_ALLOWED_ORIGINS)
    if not origins:
        logger.warning(
            "CORS_ALLOWED_ORIGINS is empty. "
            "No web origins allowed. Set CORS_ALLOWED_ORIGINS for web clients."
        )
    else:
        logger.info(f"CORS configured with {len(origins)} allowed origins")
    return origins


# Create FastAPI app
app = FastAPI(
    title="Headline Analyzer API",
    description="Relay between the headline analyzer frontend and the OpenAI completion API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

cors_origins = _get_cors_origins()

# Shared per-process limiter (exposed so tests can reset it)
rate_limiter = FixedWindowRateLimiter(
    max_requests=settings.RATE_LIMIT_MAX_REQUESTS,
    window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
)


# Custom validation error handler: malformed bodies get the same 400 contract
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Log detailed validation errors and answer with the fixed 400 body.

    Reached when the body is not a JSON object or a field is not a string.
    """
    logger.warning(
        f"Validation error on {request.method} {request.url.path}: {exc.errors()}"
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": InputValidationError.default_message}
    )


@app.exception_handler(HeadlineServiceError)
async def headline_service_exception_handler(request: Request, exc: HeadlineServiceError):
    """Render service errors as {"error": message}; details stay in the logs."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message}
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Last-resort handler for anything the service layer did not anticipate."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Something went wrong!"}
    )


# Middleware (last added runs first)
app.add_middleware(RateLimitMiddleware, limiter=rate_limiter)
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


@app.middleware("http")
async def reject_disallowed_origins(request: Request, call_next):
    """Reject browser requests from origins outside the allow list."""
    origin = request.headers.get("origin")
    if origin is not None and origin not in cors_origins:
        logger.warning(f"Rejected request from disallowed origin: {origin}")
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={"error": "Not allowed by CORS"}
        )
    return await call_next(request)


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    """Attach standard hardening headers to every response."""
    response = await call_next(request)
    for header, value in SECURITY_HEADERS.items():
        response.headers.setdefault(header, value)
    return response


# Register routers
app.include_router(health_router)
app.include_router(headlines_router)

logger.info("FastAPI app initialized successfully")
