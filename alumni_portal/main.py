"""
Alumni Portal - Main Application

FastAPI backend with:
- PostgreSQL (or SQLite) through SQLAlchemy
- Users, professional information, interview experiences, society members
- Uniform {"status": ..., "item"/"items"/"message": ...} envelopes

Run: uvicorn alumni_portal.main:app --reload
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from alumni_portal.api.routes import api_router
from alumni_portal.core.config import get_settings
from alumni_portal.core.exceptions import AppError
from alumni_portal.core.logging_config import setup_logging
from alumni_portal.db.session import init_db, test_database_connection
from alumni_portal.schemas.schemas import ErrorEnvelope, HealthResponse

settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Alumni Portal",
    description="""
    Backend for the alumni and society management platform.

    ## Resources
    - **Users**: students and alumni, approved by moderators
    - **Professional Information**: job history, current company lookup
    - **Interview Experiences**: write-ups shared by users
    - **Society Members**: society rosters keyed by enrollment number
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes; errors are documented as ErrorEnvelope
ERROR_RESPONSES = {code: {"model": ErrorEnvelope} for code in (400, 404, 409, 500)}

app.include_router(api_router, prefix="/api", responses=ERROR_RESPONSES)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorEnvelope(message=message).model_dump())


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return _error(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg", "Invalid request")
    else:
        message = "Invalid request"
    return _error(400, message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return _error(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return _error(500, "Internal server error")


# Startup event
@app.on_event("startup")
def startup_event():
    """Create missing tables when enabled."""
    if not settings.create_tables:
        return
    try:
        init_db()
        logger.info("Database tables ready")
    except Exception as e:
        logger.error("Table creation failed: %s", e)


@app.get("/health", response_model=HealthResponse, tags=["Health"])
def health_check():
    """Detailed health check."""
    connected = test_database_connection()
    return HealthResponse(
        status="healthy" if connected else "degraded",
        database="connected" if connected else "disconnected",
    )
