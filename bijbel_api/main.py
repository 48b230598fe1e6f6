"""Bijbel API FastAPI application."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bijbel_api.config import get_settings
from bijbel_api.context import initialize_bible_context
from bijbel_api.middleware.request_logging import RequestLoggingMiddleware
from bijbel_api.models.schemas import HealthCheck
from bijbel_api.routers import books, crossrefs

# Get settings
settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

logger.info(f"CORS allowed origins: {settings.allowed_origins}")
app = FastAPI(
    title=settings.app_name,
    description="Bible text and cross references",
    version=settings.app_version,
)

app.add_middleware(RequestLoggingMiddleware)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=False,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Accept", "Authorization", "Content-Type"],
    expose_headers=["Link"],
    max_age=300,
)


@app.on_event("startup")
async def startup_event():
    """Load the bundled data before serving requests."""
    logger.info("Loading bundled Bible data...")
    try:
        initialize_bible_context()
        logger.info("Application startup complete")
    except Exception as e:
        logger.error(f"Failed to initialize application: {e}")
        raise


app.include_router(books.router)
app.include_router(crossrefs.router)


@app.get("/health", response_model=HealthCheck)
async def health_check():
    """Health check endpoint."""
    return HealthCheck(status="healthy", service=settings.app_name, version=settings.app_version)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("bijbel_api.main:app", host="0.0.0.0", port=3000)
