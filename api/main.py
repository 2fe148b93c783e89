# Main FastAPI application file
# File: api/main.py

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging
from api.utils.auth import auth_dependency
from api.utils.config import Config
from api.endpoints.junctions import router as junctions_router
from wall_gap_adjuster import __version__
from wall_gap_adjuster.utils.logging_config import WallGapLogger
from typing import Dict

logger = logging.getLogger("wall_gap.api")

# Define lifespan context manager (replaces on_event)
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup code (runs before application starts)
    log_file = WallGapLogger.configure(debug_mode=Config.DEBUG, log_dir=Config.LOG_DIR)
    logger.info("Run on application startup (environment=%s)", Config.ENVIRONMENT)
    if log_file:
        logger.info("Writing logs to %s", log_file)

    Config.validate()

    yield  # This is where the application runs

    # Shutdown code (runs when application is shutting down)
    logger.info("Application shutting down.")

# Create FastAPI application with lifespan
app = FastAPI(
    title="Wall Gap Adjuster API",
    description="""
    # Wall Gap Adjuster API

    Classifies how walls meet and computes new wall centerlines that open a
    gap at each junction.

    ## Features

    - Junction classification (inline, corner, T-shape, tri-shape)
    - Gap adjustment for a single junction
    - Batch adjustment of a whole wall layout

    ## Authentication

    All `/junctions` endpoints require an API key in the `X-API-Key` header.

    ## Units

    Gaps are always given in millimeters (`gap_mm`). `units` names the unit of
    the wall coordinates and thicknesses; the gap is converted into it.
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {
            "name": "Junctions",
            "description": "Junction classification and gap adjustment"
        },
        {
            "name": "Status",
            "description": "API status and health check endpoints"
        },
    ],
    lifespan=lifespan,
)

# Root endpoint
@app.get("/", tags=["Status"])
async def root():
    return {"status": "online", "message": "Wall Gap Adjuster API is running"}

# Health check endpoint (general API health)
@app.get("/health", tags=["Status"], response_model=Dict[str, str])
async def health_check():
    """Check if the API service is healthy."""
    logger.debug("Health check requested")
    return {"status": "healthy", "version": __version__}

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict this in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers with dependencies
app.include_router(
    junctions_router,
    prefix="/junctions",
    tags=["Junctions"],
    dependencies=[auth_dependency()]
)

# Run with: uvicorn api.main:app --reload
if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host="0.0.0.0", port=Config.PORT, reload=Config.DEBUG)
