import logging as _logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response as StarletteResponse

from . import __version__
from .components.scoring.errors import DefensiveInvariantError, ValidationError
from .platform.brand import BRAND_APP_DESCRIPTION, BRAND_CORE_VALUES, BRAND_NAME, BRAND_PRODUCT_NAME
from .platform.config import settings
from .platform.logging import setup_logging
from .platform.middleware import RequestLoggingMiddleware
from .shared.utils import isoformat_z, utcnow

# Set up logging
logger = setup_logging()

_is_production = settings.is_production

# ---------------------------------------------------------------------------
# Disable interactive API docs in production (information disclosure)
# ---------------------------------------------------------------------------
_docs_url = None if _is_production else "/api/docs"
_openapi_url = None if _is_production else "/api/openapi.json"


@asynccontextmanager
async def _lifespan(_app: FastAPI):
    logger.info(
        "%s %s started | env=%s | email=%s | sheets=%s",
        BRAND_NAME,
        BRAND_PRODUCT_NAME,
        settings.DEPLOYMENT_ENV,
        settings.email_configured,
        settings.sheets_configured,
    )
    yield


app = FastAPI(
    title=f"{BRAND_NAME} {BRAND_PRODUCT_NAME}",
    description=BRAND_APP_DESCRIPTION,
    version=__version__,
    docs_url=_docs_url,
    openapi_url=_openapi_url,
    lifespan=_lifespan,
)

_val_logger = _logging.getLogger("interview_assistant.validation")
_invariant_logger = _logging.getLogger("interview_assistant.invariants")


def _sanitize_errors(errors: list) -> list:
    """Ensure validation error details are JSON-serializable."""

    def _json_safe(value):
        if isinstance(value, (str, int, float, bool)) or value is None:
            return value
        if isinstance(value, bytes):
            return value.decode("utf-8", errors="replace")
        if isinstance(value, dict):
            return {str(k): _json_safe(v) for k, v in value.items()}
        if isinstance(value, (list, tuple, set)):
            return [_json_safe(v) for v in value]
        return str(value)

    return [_json_safe(err) for err in errors]


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    _val_logger.warning(
        "Request validation error on %s %s: %s",
        request.method,
        request.url.path,
        exc.errors(),
    )
    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "message": "Request body is malformed",
            "detail": _sanitize_errors(exc.errors()),
        },
    )


@app.exception_handler(ValidationError)
async def scoring_validation_exception_handler(request: Request, exc: ValidationError):
    _val_logger.warning(
        "Rejected submission on %s %s: %s",
        request.method,
        request.url.path,
        exc.message,
        extra={"error_type": type(exc).__name__},
    )
    return JSONResponse(status_code=400, content={"success": False, "message": exc.message})


@app.exception_handler(DefensiveInvariantError)
async def invariant_exception_handler(request: Request, exc: DefensiveInvariantError):
    _invariant_logger.error(
        "Invariant violated on %s %s: %s",
        request.method,
        request.url.path,
        exc.message,
        extra={"error_type": type(exc).__name__},
    )
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "Internal configuration error"},
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    detail = exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": detail if isinstance(detail, str) else "Request failed", "detail": detail},
    )


# ---------------------------------------------------------------------------
# Security headers middleware
# ---------------------------------------------------------------------------
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security-hardening HTTP headers to every response."""

    async def dispatch(self, request: Request, call_next):
        response: StarletteResponse = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Permissions-Policy"] = "camera=(), microphone=(), geolocation=()"
        if _is_production:
            response.headers["Strict-Transport-Security"] = "max-age=63072000; includeSubDomains"
        return response


app.add_middleware(SecurityHeadersMiddleware)

# CORS: frontend URL + localhost + any extra origins
_cors_origins = [
    settings.FRONTEND_URL,
    "http://localhost:5173",
    "http://localhost:3000",
]
if settings.CORS_EXTRA_ORIGINS:
    _cors_origins.extend(o.strip() for o in settings.CORS_EXTRA_ORIGINS.split(",") if o.strip())
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o for o in _cors_origins if o],
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Requested-With", "X-Request-ID"],
)

# Request logging
app.add_middleware(RequestLoggingMiddleware)

# Sentry (optional)
if settings.SENTRY_DSN and settings.SENTRY_DSN.startswith("https://"):
    import sentry_sdk
    from sentry_sdk.integrations.fastapi import FastApiIntegration
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        traces_sample_rate=0.1,
        environment=settings.DEPLOYMENT_ENV,
        integrations=[FastApiIntegration()],
    )

# Include routers
from .api.v1.assessment import router as assessment_router
from .api.v1.interview import router as interview_router
from .api.v1.reviews import router as reviews_router
from .api.v1.scenarios import router as scenarios_router
from .api.v1.sheets import router as sheets_router

app.include_router(assessment_router, prefix="/api")
app.include_router(scenarios_router, prefix="/api")
app.include_router(interview_router, prefix="/api")
app.include_router(reviews_router, prefix="/api")
app.include_router(sheets_router, prefix="/api")


@app.get("/api/health")
def health_check():
    return {
        "status": "healthy",
        "system": f"{BRAND_NAME} {BRAND_PRODUCT_NAME}",
        "version": __version__,
        "timestamp": isoformat_z(utcnow()),
        "coreValues": list(BRAND_CORE_VALUES),
        "integrations": {
            "email_configured": settings.email_configured and not settings.mvp_flags.disable_email,
            "sheets_configured": settings.sheets_configured and not settings.mvp_flags.disable_sheets,
        },
    }
