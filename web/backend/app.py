#!/usr/bin/env python3
"""
JobAZ CV API - FastAPI Application

Scores CVs, stores the user's CV and imports documents for proofreading.

Usage:
    uv run python -m web.backend.app
    
Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging

from fastapi import FastAPI

from core.config_loader import get_config
from .exceptions import register_exception_handlers
from .models.responses import HealthResponse
from .routers import (
    cv_router,
    proofreading_router,
    guidance_router
)
from .routers.proofreading import add_rate_limit_handlers

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Load configuration
config = get_config()

# Create FastAPI app
app = FastAPI(
    title="JobAZ CV API",
    description="API for CV scoring, CV storage and document import",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure rate limiting
add_rate_limit_handlers(app)

# Register exception handlers
register_exception_handlers(app)

# Include routers
app.include_router(cv_router)
app.include_router(proofreading_router)
app.include_router(guidance_router)


@app.get("/health", response_model=HealthResponse)
def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", service="jobaz-cv")


def main():
    """Run the web server."""
    import uvicorn
    
    logger.info(f"Starting JobAZ CV API on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")
    
    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
