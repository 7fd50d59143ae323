"""
FastAPI application entry point.

Assembles the FastAPI app with the research router.
"""

import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from deep_research.graph.orchestrator_api import router as research_router


# ============================================================================
# Logging configuration (single source of truth for all agents)
# ============================================================================
LOG_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)-45s | %(message)s"
)

logging.basicConfig(
    level=logging.INFO,
    format=LOG_FORMAT,
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[logging.StreamHandler(sys.stdout)],
    force=True,  # Override any prior basicConfig calls
)

# Quiet noisy third-party loggers
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("openai").setLevel(logging.WARNING)


app = FastAPI(
    title="Deep Research",
    description="Multi-agent research supervisor built with LangGraph",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(research_router)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Deep Research",
        "version": "0.1.0",
        "agents": {
            "scoping": {"status": "active", "endpoints": "/api/research"},
            "supervisor": {"status": "active", "endpoints": "/api/research"},
            "researcher": {"status": "active", "endpoints": "/api/research"},
        },
    }


@app.get("/health")
async def health():
    """Global health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
