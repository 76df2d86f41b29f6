"""
FastAPI Application.

Study quiz service:
- Document upload with summary and quiz generation
- Quiz scoring with per-topic weak-spot analysis
- Retake quizzes and revision notes for weak topics
- Study bundles (notes, videos, web resources) per topic
"""

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.lifespan import lifespan
from api.routers import (
    health_router,
    documents_router,
    quiz_router,
    study_router,
)
from utils.monitoring import (
    RequestTimer,
    clear_correlation_id,
    get_correlation_id,
    get_logger,
    set_correlation_id,
    setup_logging,
)
from utils.errors import BaseApplicationError, get_error_handler
from config import settings

setup_logging()
logger = get_logger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


# ============================================================================
# FastAPI Application
# ============================================================================

app = FastAPI(
    title=settings.app_name,
    description="""
    **AI Study Companion API**

    - `POST /upload`: summarize a document and generate a multiple-choice quiz
    - `POST /evaluate`: score a quiz and get revision notes for weak topics
    - `POST /retake`: generate a new quiz focused on weak topics
    - `GET /study`: notes, videos and web resources for a topic
    """,
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ============================================================================
# Middleware Stack
# ============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", CORRELATION_HEADER],
    expose_headers=[CORRELATION_HEADER],
)


@app.middleware("http")
async def correlation_and_timing(request: Request, call_next):
    """Tag each request with a correlation id and record its latency."""
    correlation_id = request.headers.get(CORRELATION_HEADER)
    if correlation_id:
        set_correlation_id(correlation_id)
    else:
        clear_correlation_id()
        correlation_id = get_correlation_id()

    try:
        with RequestTimer(request.url.path) as timer:
            response = await call_next(request)
            timer.success = response.status_code < 500
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
    finally:
        clear_correlation_id()


# ============================================================================
# Exception Handlers
# ============================================================================

def _request_context(request: Request) -> dict:
    return {
        "path": request.url.path,
        "method": request.method,
        "correlation_id": get_correlation_id(),
    }


@app.exception_handler(BaseApplicationError)
async def application_error_handler(request: Request, exc: BaseApplicationError):
    """Handle application errors."""
    get_error_handler().log_error(exc, context=_request_context(request))
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies get the same error shape as every other 4xx."""
    logger.warning("Request validation failed", errors=exc.errors(), **_request_context(request))
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body"}
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Routing errors (404, 405) in the service's error shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors."""
    get_error_handler().log_error(exc, context=_request_context(request))
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"}
    )


# ============================================================================
# Routers
# ============================================================================

app.include_router(health_router)
app.include_router(documents_router)
app.include_router(quiz_router)
app.include_router(study_router)


# ============================================================================
# Static File Serving (frontend assets)
# ============================================================================

app.mount(
    "/static",
    StaticFiles(directory=settings.static_dir, check_dir=False),
    name="static"
)


# ============================================================================
# Application Entry Point
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower()
    )
