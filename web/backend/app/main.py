"""FastAPI application exposing the moderasi moderation engine.

Provides REST API endpoints for:
- Checking titles/descriptions and image filenames
- Gating showcase submissions (allow / flag / block)
- Browsing the moderation event log and dashboard counts
- Inspecting the keyword catalog
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from moderasi import __version__
from moderasi.config import load_settings
from moderasi.logging import configure_logging
from web.backend.app.routers import moderation

configure_logging(load_settings().log_level)

app = FastAPI(
    title="moderasi API",
    description=(
        "REST API for showcase content moderation. "
        "Provides endpoints for text and filename checks, the submission gate, "
        "and the moderation event log."
    ),
    version=__version__,
)

# ---------------------------------------------------------------------------
# CORS middleware (allow all origins for development)
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(moderation.router)


# ---------------------------------------------------------------------------
# Root and health-check endpoints
# ---------------------------------------------------------------------------


@app.get("/", tags=["meta"])
async def root():
    """Return basic API information."""
    return {
        "name": "moderasi API",
        "version": __version__,
        "description": "Showcase content moderation REST API",
        "docs": "/docs",
        "openapi": "/openapi.json",
    }


@app.get("/health", tags=["meta"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
