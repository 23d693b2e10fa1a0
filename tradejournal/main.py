"""
TradeJournal Calculator - FastAPI Application

Main entry point for the calculator API.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tradejournal.core.config import settings
from tradejournal.api.v1 import router as api_v1_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")
    yield
    logger.info("Shutting down...")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Trade setup calculator for a personal trading journal.

    ## Architecture
    - **Form Schemas**: Structural checks on trade, calculator and settings forms
    - **Setup Engine**: Weighted prices, distances, risk/reward, position sizing
    - **Validators**: Allocation sums and trade rules, returned as data

    ## Core Principles
    - Pure computation: nothing is fetched or stored
    - Every problem is reported at once
    - Incomplete setups are pending, not errors
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware - desktop shell and dev server
cors_origins = [
    "http://localhost:1420",
    "tauri://localhost",
]
# Add any additional origins from settings
if settings.allowed_origins:
    cors_origins.extend([o for o in settings.allowed_origins if o not in cors_origins])

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "TradeJournal Calculator API",
        "docs": "/docs",
        "health": "/health",
    }
