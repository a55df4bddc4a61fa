"""
FastAPI backend for quiz grading.

This service implements:
- Service layer around the grading core
- Structured logging
- Comprehensive error handling
- Dependency injection

It is stateless: the caller sends the quiz with the answers and persists the
returned grade itself.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware

from .core import (
    settings,
    setup_logging,
    get_logger,
    register_error_handlers,
)
from .models import GradeSubmission, GradeResponse
from .services import GradingService

# Setup logging
setup_logging()
logger = get_logger(__name__)


# Lifecycle management
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    logger.info(
        "Starting quiz grading API",
        extra_data={
            "environment": settings.ENVIRONMENT,
            "debug": settings.DEBUG
        }
    )
    yield
    logger.info("Shutting down quiz grading API")


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="REST API for deterministic quiz attempt grading",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

# Register error handlers
register_error_handlers(app)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)


# Dependency injection
def get_grading_service_dep() -> GradingService:
    """Get grading service instance"""
    return GradingService(settings)


# API Routes

@app.get("/")
async def read_root():
    """API root endpoint"""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "endpoints": {
            "grade": f"{settings.API_PREFIX}/grade",
            "health": "/health"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT
    }


@app.post(f"{settings.API_PREFIX}/grade", response_model=GradeResponse)
async def grade_attempt(
    submission: GradeSubmission,
    grading_service: GradingService = Depends(get_grading_service_dep)
):
    """
    Grade a learner's answers for a quiz.

    Args:
        submission: Quiz questions, answers by question index, and optional
            passing score and time taken

    Returns:
        Attempt grade with per-question results and a summary
    """
    return grading_service.grade_submission(submission)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "quiz_api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
