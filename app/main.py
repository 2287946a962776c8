"""
Branch Content Engine API

FastAPI application that turns a news article into branch-level social
media content through Google Gemini and keeps the results in Redis.

Architecture:
- POST /api/generate builds the prompt, calls Gemini, validates and stores the job
- GET /api/history lists stored jobs, newest first
- GET /api/content returns the most recent job
- GET /admin serves the admin page that drives the two routes above
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import List

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from app import __version__
from app.config import get_settings
from app.constants.branches import POLITICAL_BRANCHES
from app.db.repositories.job_repository import JobRepository, get_job_repository
from app.models.domain import GenerationJob
from app.models.requests import GenerateContentRequest
from app.models.responses import (
    ErrorResponse,
    GenerateContentResponse,
    HealthCheckResponse,
)
from app.services.content_generator_service import (
    ContentGeneratorService,
    get_content_generator_service,
)
from app.services.redis_service import get_redis_service
from app.utils.exceptions import ContentEngineError
from app.utils.logging import get_logger, setup_logging


# Initialize settings and logging
settings = get_settings()
logger = get_logger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

INVALID_INPUT_MESSAGE = 'Invalid input. "url" and "stance" (PRO/ANTI) are required.'
INVALID_REQUEST_MESSAGE = "Invalid request."
INTERNAL_ERROR_MESSAGE = "An internal server error occurred."
NO_CONTENT_MESSAGE = "No content has been generated yet."
JOB_NOT_FOUND_MESSAGE = "Job not found."


def _error(status_code: int, message: str) -> JSONResponse:
    """Build a JSON error response."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Handles startup and shutdown events.
    """
    # Startup
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    logger.info("application_starting", version=__version__)

    try:
        redis_service = get_redis_service()
        await redis_service.connect()
        logger.info("redis_service_initialized")
    except Exception as e:
        logger.warning("redis_service_failed_to_initialize", error=str(e))

    yield

    # Shutdown
    logger.info("application_shutting_down")

    try:
        redis_service = get_redis_service()
        await redis_service.disconnect()
        logger.info("redis_service_closed")
    except Exception as e:
        logger.warning("redis_service_close_failed", error=str(e))


# Create FastAPI application
app = FastAPI(
    title="Branch Content Engine API",
    description="""
    Generates one Facebook post and one tweet for each of the 13 political
    branches from a news article URL, using Google Gemini.

    - **POST /api/generate** - Generate and store content for a URL and stance
    - **GET /api/history** - All generated jobs, newest first
    - **GET /api/content** - The most recent job
    - **GET /admin** - Admin page
    """,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Answer malformed input with 400 instead of FastAPI's default 422."""
    # Only the generate route takes a body; other routes get a generic message
    if request.url.path == "/api/generate":
        message = INVALID_INPUT_MESSAGE
    else:
        message = INVALID_REQUEST_MESSAGE
    logger.info(
        "invalid_request",
        path=request.url.path,
        errors=[e.get("msg") for e in exc.errors()],
    )
    return _error(400, message)


@app.exception_handler(ContentEngineError)
async def content_engine_error_handler(
    request: Request,
    exc: ContentEngineError,
) -> JSONResponse:
    """Handle custom errors that escape a route."""
    logger.error(
        "content_engine_error",
        path=request.url.path,
        error_code=exc.code,
        message=exc.message,
        details=exc.details,
    )
    return _error(500, INTERNAL_ERROR_MESSAGE)


@app.exception_handler(Exception)
async def general_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Handle unexpected errors."""
    logger.error(
        "unexpected_error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return _error(500, INTERNAL_ERROR_MESSAGE)


# =============================================================================
# API Routes
# =============================================================================


@app.post(
    "/api/generate",
    status_code=201,
    response_model=GenerateContentResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Generate Content",
    description="Generate social media content for every branch from a news article URL.",
)
async def generate_content(
    request: GenerateContentRequest,
    service: ContentGeneratorService = Depends(get_content_generator_service),
):
    """
    Generate and store a content job.

    Request Body:
    - url: News article URL
    - stance: PRO or ANTI (case-insensitive)

    Returns:
    - The ID of the stored job
    """
    logger.info("generate_content_request", source_url=request.url, stance=request.stance)

    try:
        job = await service.generate(request.url, request.parsed_stance)
    except Exception as e:
        logger.error(
            "generate_content_error",
            error=str(e),
            error_type=type(e).__name__,
            details=e.details if isinstance(e, ContentEngineError) else None,
        )
        return _error(500, INTERNAL_ERROR_MESSAGE)

    return GenerateContentResponse(job_id=job.id)


@app.get(
    "/api/history",
    response_model=List[GenerationJob],
    responses={500: {"model": ErrorResponse}},
    summary="Generation History",
    description="List every generated job, newest first.",
)
async def get_history(
    repository: JobRepository = Depends(get_job_repository),
):
    """Get all previously generated content jobs."""
    logger.info("history_request")

    try:
        return await repository.list_recent()
    except Exception as e:
        logger.error("history_error", error=str(e), error_type=type(e).__name__)
        return _error(500, INTERNAL_ERROR_MESSAGE)


@app.get(
    "/api/history/{job_id}",
    response_model=GenerationJob,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Generation Job",
    description="Get a single generated job by ID.",
)
async def get_job(
    job_id: str,
    repository: JobRepository = Depends(get_job_repository),
):
    """Get one job by its ID."""
    logger.info("job_request", job_id=job_id)

    try:
        job = await repository.get_by_id(job_id)
    except Exception as e:
        logger.error("job_error", job_id=job_id, error=str(e), error_type=type(e).__name__)
        return _error(500, INTERNAL_ERROR_MESSAGE)

    if job is None:
        return _error(404, JOB_NOT_FOUND_MESSAGE)
    return job


@app.get(
    "/api/content",
    response_model=GenerationJob,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Latest Content",
    description="Get the most recently generated content set.",
)
async def get_latest_content(
    repository: JobRepository = Depends(get_job_repository),
):
    """Get the single most recent content job for the user-facing app."""
    logger.info("latest_content_request")

    try:
        job = await repository.get_latest()
    except Exception as e:
        logger.error("latest_content_error", error=str(e), error_type=type(e).__name__)
        return _error(500, INTERNAL_ERROR_MESSAGE)

    if job is None:
        return _error(404, NO_CONTENT_MESSAGE)
    return job


@app.get(
    "/api/health",
    response_model=HealthCheckResponse,
    summary="Health Check",
    description="Check API health and Redis connectivity.",
)
async def health_check() -> HealthCheckResponse:
    """Health check endpoint with dependency status."""
    redis_ok = await get_redis_service().health_check()

    return HealthCheckResponse(
        status="healthy" if redis_ok else "degraded",
        version=__version__,
        dependencies={"redis": redis_ok},
    )


@app.get(
    "/admin",
    response_class=HTMLResponse,
    summary="Admin Page",
    include_in_schema=False,
)
async def admin_page(request: Request):
    """Serve the admin page for generating content and browsing history."""
    return templates.TemplateResponse(
        request,
        "admin.html",
        {
            "api_base_url": settings.API_BASE_URL,
            "branch_count": len(POLITICAL_BRANCHES),
        },
    )


@app.get(
    "/",
    summary="Root",
    description="API root endpoint with basic information.",
)
async def root():
    """Root endpoint with API information."""
    return {
        "service": "Branch Content Engine API",
        "version": __version__,
        "status": "running",
        "docs": "/docs",
        "health": "/api/health",
        "admin": "/admin",
        "endpoints": {
            "generate": "/api/generate",
            "history": "/api/history",
            "content": "/api/content",
        },
    }


# =============================================================================
# Application Entry Point
# =============================================================================


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=True,
        log_level=settings.LOG_LEVEL.lower(),
    )
