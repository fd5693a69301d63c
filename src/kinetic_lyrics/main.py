"""FastAPI application entry point."""

import logging

from fastapi import FastAPI

from . import __version__
from .config import settings
from .routes import health, lyrics

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Kinetic Lyrics Service",
    version=__version__,
)

app.include_router(health.router, prefix="/api/v1")
app.include_router(lyrics.router, prefix="/api/v1")


@app.get("/")
async def root() -> dict:
    """Root endpoint.

    Returns:
        Service info
    """
    return {
        "message": "Kinetic Lyrics Service",
        "version": __version__,
    }


def main(host: str = "0.0.0.0", port: int = 8000) -> None:
    """Entry point for running the service directly."""
    import uvicorn

    uvicorn.run(
        "kinetic_lyrics.main:app",
        host=host,
        port=port,
        reload=False,
    )


if __name__ == "__main__":
    main()
