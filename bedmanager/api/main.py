"""
FastAPI main application for the bed management backend.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bedmanager import __version__
from bedmanager.core.config import Config
from bedmanager.db import connection
from bedmanager.api.errors import register_error_handlers
from bedmanager.api.routes import beds, patients, transfers, discharges, waitlist, dashboard

# Configure logging
logging.basicConfig(
    level=Config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting bed management backend...")

    if connection.engine is None:
        connection.init_db()

    logger.info(f"Server is running on port {Config.PORT}")

    yield

    logger.info("Shutting down bed management backend...")
    if connection.engine is not None:
        connection.engine.dispose()
    logger.info("Backend shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Ward Bed Manager API",
    description="Bed inventory, admission, transfer, discharge and waitlist management",
    version=__version__,
    docs_url="/api-docs",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "Ward Bed Manager API",
        "version": __version__,
        "timestamp": datetime.now().isoformat()
    }


@app.get("/api/health")
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "components": {
            "database": "connected" if connection.engine is not None else "not initialized"
        },
        "config": {
            "debug": Config.DEBUG
        }
    }


app.include_router(beds.router)
app.include_router(patients.router)
app.include_router(transfers.router)
app.include_router(discharges.router)
app.include_router(waitlist.router)
app.include_router(dashboard.router)
