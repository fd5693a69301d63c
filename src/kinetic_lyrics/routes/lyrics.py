"""Lyric generation and style analysis endpoints."""

import asyncio
import logging
from functools import partial

from fastapi import APIRouter, Depends, Header, HTTPException

from ..config import settings
from ..models import AnalyzeStyleRequest, GenerateLyricsRequest, LyricsResponse
from ..services.media import MediaError, MediaTooLargeError, validate_media
from ..services.oracle import LyricsOracle, OracleConfigError, OracleError
from ..services.pipeline import analyze_styles, generate_lyrics

logger = logging.getLogger(__name__)
router = APIRouter()


def verify_api_key(authorization: str | None = Header(None)) -> None:
    """Verify the Bearer token when KINETIC_API_KEY is set.

    Raises:
        HTTPException: 401 if the token is missing or wrong
    """
    if not settings.API_KEY:
        return
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Missing or invalid Authorization header")
    token = authorization[7:]
    if token != settings.API_KEY:
        raise HTTPException(status_code=401, detail="Invalid API key")


def get_oracle() -> LyricsOracle:
    """Oracle client dependency."""
    return LyricsOracle()


@router.post("/lyrics", response_model=LyricsResponse, response_model_by_alias=True)
async def create_lyrics(
    request: GenerateLyricsRequest,
    _auth: None = Depends(verify_api_key),
    oracle: LyricsOracle = Depends(get_oracle),
) -> LyricsResponse:
    """Transcribe, or align to reference text, the lyrics of uploaded media.

    Raises:
        HTTPException: 400 bad media, 413 oversize media, 500 oracle not
            configured, 502 oracle failure
    """
    try:
        validate_media(request.media, settings.MAX_MEDIA_MB)
    except MediaTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except MediaError as e:
        raise HTTPException(status_code=400, detail=str(e))

    loop = asyncio.get_running_loop()
    try:
        lyrics = await loop.run_in_executor(
            None,
            partial(
                generate_lyrics,
                request.media,
                reference_lyrics=request.reference_lyrics,
                oracle=oracle,
            ),
        )
    except OracleConfigError as e:
        logger.error(f"Oracle not configured: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    except OracleError as e:
        logger.error(f"Lyric generation failed: {e}")
        raise HTTPException(status_code=502, detail=f"Lyric generation failed: {e}")

    return LyricsResponse(lyrics=lyrics)


@router.post("/styles", response_model=LyricsResponse, response_model_by_alias=True)
async def restyle_lyrics(
    request: AnalyzeStyleRequest,
    _auth: None = Depends(verify_api_key),
    oracle: LyricsOracle = Depends(get_oracle),
) -> LyricsResponse:
    """Assign oracle-picked styles to existing lyrics.

    Always succeeds for a valid request; on oracle failure the lyrics
    come back unchanged.
    """
    loop = asyncio.get_running_loop()
    lyrics = await loop.run_in_executor(
        None, partial(analyze_styles, request.lyrics, oracle=oracle)
    )
    return LyricsResponse(lyrics=lyrics)
