"""
Late Delivery and Penalty Clause - FastAPI Backend

Entry point for the HTTP surface over the penalty evaluator:
- Clause evaluation (penalty amount and termination right)
- Data file browsing
"""

from dotenv import load_dotenv

# Load environment variables FIRST - before importing modules that need them
load_dotenv()

from fastapi import FastAPI
from typing import Dict
import logging

from api.penalty import router as penalty_router
from config import Config

config = Config.from_env()

# Configure logging
logging.basicConfig(level=config.log_level)
logger = logging.getLogger(__name__)


# Initialize FastAPI application
app = FastAPI(
    title="Late Delivery and Penalty API",
    description="Evaluates late delivery penalties and termination rights for a smart legal clause",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Register API routers
app.include_router(penalty_router)


@app.get("/", response_model=Dict[str, str])
async def root() -> Dict[str, str]:
    """
    Root endpoint with API information.

    Returns:
        Dict containing API name, version, and documentation links
    """
    return {
        "service": "Late Delivery and Penalty API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
        "status": "running",
    }


@app.get("/health", response_model=Dict[str, str])
async def health_check() -> Dict[str, str]:
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        Dict with health status and service information
    """
    return {
        "status": "healthy",
        "service": "late-delivery-penalty",
        "version": "1.0.0",
    }


if __name__ == "__main__":
    import uvicorn

    # Run with: python main.py
    # Or use: uvicorn main:app --reload --port 8000
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
