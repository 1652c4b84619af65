"""
Main FastAPI application.
"""
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from cryptopoll.api import api_router
from cryptopoll.core.choices import LABELS, Characteristic, Cryptocurrency, Frequency
from cryptopoll.core.config import settings
from cryptopoll.core.exceptions import PersistenceError, SurveyError
from cryptopoll.db.base import engine
from cryptopoll.db.init_db import init_db
from cryptopoll.schemas.common import HealthStatus
import logging

# Configure logging BEFORE creating the app
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(levelname)s:\t%(name)s\t%(message)s',
    handlers=[
        logging.StreamHandler()  # Output to console
    ]
)
logging.getLogger("uvicorn").setLevel(logging.INFO)
logger = logging.getLogger(__name__)

# Create database tables
init_db(engine)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Cryptocurrency preferences survey",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


# Global exception handlers
@app.exception_handler(SurveyError)
async def survey_exception_handler(request: Request, exc: SurveyError):
    """
    Turn submission errors into ``{"error": ...}`` bodies.

    Persistence failures also carry the driver message under ``details``
    unless EXPOSE_ERROR_DETAILS is off.
    """
    content = {"error": exc.message}
    if isinstance(exc, PersistenceError) and settings.EXPOSE_ERROR_DETAILS and exc.details:
        content["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Handle all unhandled exceptions without leaking internals.
    """
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error."},
    )


@app.get("/", response_class=HTMLResponse, include_in_schema=False)
async def survey_form(request: Request):
    """
    Render the survey form.
    """
    return templates.TemplateResponse(
        request,
        "survey.html",
        {
            "cryptocurrencies": list(Cryptocurrency),
            "frequencies": list(Frequency),
            "characteristics": list(Characteristic),
            "labels": LABELS,
        },
    )


@app.get("/health", response_model=HealthStatus, tags=["Health"])
async def health_check():
    """
    Health check endpoint.

    Returns:
        Health status
    """
    return {"status": "healthy"}


# Include API routers; /submit is also reachable under the API prefix
app.include_router(api_router)
app.include_router(api_router, prefix=settings.API_PREFIX, include_in_schema=False)
