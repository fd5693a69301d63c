"""Health check endpoint."""

import logging

from fastapi import APIRouter

from .. import __version__
from ..config import settings

logger = logging.getLogger(__name__)
router = APIRouter()


def check_llm_config() -> dict:
    """Check if the oracle is configured. No request is made.

    Returns:
        Status dictionary
    """
    if not settings.LLM_BASE_URL:
        return {"status": "not_configured", "error": "KINETIC_LLM_BASE_URL not set"}
    if not settings.LLM_API_KEY:
        return {"status": "missing_credentials", "error": "KINETIC_LLM_API_KEY not set"}
    if not settings.LLM_MODEL:
        return {"status": "missing_model", "error": "KINETIC_LLM_MODEL not set"}
    return {"status": "configured", "model": settings.LLM_MODEL}


@router.get("/health")
async def health_check() -> dict:
    """Health check endpoint.

    Returns:
        Service health status
    """
    return {
        "status": "healthy",
        "version": __version__,
        "services": {
            "llm": check_llm_config(),
        },
        "strict_styles": settings.STRICT_STYLES,
    }
