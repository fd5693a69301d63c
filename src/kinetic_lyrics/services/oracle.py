"""OpenAI-compatible client for the lyric and style oracle.

The oracle is a multimodal LLM reached through an OpenAI-compatible
chat completions endpoint. It returns loosely typed JSON; this module
only checks that a JSON object came back and leaves field-level
validation to ``kinetic_lyrics.core``.
"""

import json
import logging
import re
from typing import Any, List, Optional

from openai import OpenAI

from ..config import settings
from ..models import MediaPart
from .media import media_content_part

logger = logging.getLogger(__name__)


class OracleError(Exception):
    """Base exception for oracle errors."""

    pass


class OracleConfigError(OracleError):
    """Raised when the oracle API key is missing."""

    pass


class OracleResponseError(OracleError):
    """Raised when the oracle fails or returns unusable output after retries."""

    pass


def parse_json_object(response_text: Optional[str]) -> dict:
    """Parse an oracle reply into a JSON object.

    Markdown code fences around the JSON are stripped.

    Args:
        response_text: Raw completion text

    Returns:
        Parsed JSON object

    Raises:
        ValueError: If the text is empty, not JSON, or not a JSON object
    """
    if not response_text:
        raise ValueError("Empty response")

    text = response_text.strip()
    if text.startswith("```"):
        # Remove opening code block (with optional language tag)
        text = re.sub(r"^```(?:json)?\s*\n?", "", text)
        # Remove closing code block
        text = re.sub(r"\n?```\s*$", "", text)

    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("Expected JSON object")
    return data


def extract_list(data: dict, key: str) -> List[Any]:
    """Return ``data[key]`` when it is a list, else an empty list."""
    value = data.get(key)
    if not isinstance(value, list):
        if value is not None:
            logger.warning(f"Oracle field '{key}' is {type(value).__name__}, expected list")
        return []
    return value


class LyricsOracle:
    """Client for transcription, alignment and style suggestions."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize the oracle client.

        Args:
            api_key: API key (default: KINETIC_LLM_API_KEY)
            base_url: OpenAI-compatible base URL (default: KINETIC_LLM_BASE_URL)
            model: Model identifier (default: KINETIC_LLM_MODEL)
            temperature: Sampling temperature (default: KINETIC_LLM_TEMPERATURE)
            timeout: Request timeout in seconds (default: KINETIC_LLM_TIMEOUT)
        """
        self.api_key = api_key if api_key is not None else settings.LLM_API_KEY
        self.base_url = base_url or settings.LLM_BASE_URL
        self.model = model or settings.LLM_MODEL
        self.temperature = settings.LLM_TEMPERATURE if temperature is None else temperature
        self.timeout = settings.LLM_TIMEOUT if timeout is None else timeout
        self._client: Optional[OpenAI] = None

    def _require_api_key(self) -> None:
        if not self.api_key:
            raise OracleConfigError(
                "KINETIC_LLM_API_KEY environment variable not set. "
                "Set this to your OpenRouter/OpenAI-compatible API key."
            )

    @property
    def client(self) -> OpenAI:
        """Get or create the OpenAI client.

        Raises:
            OracleConfigError: If no API key is configured
        """
        if self._client is None:
            self._require_api_key()
            self._client = OpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
            )
        return self._client

    def _complete(self, content: List[dict]) -> Optional[str]:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": content}],
            temperature=self.temperature,
            response_format={"type": "json_object"},
        )
        return response.choices[0].message.content

    def request_json(self, content: List[dict], max_retries: int = 1) -> dict:
        """Send one user message and parse the reply as a JSON object.

        Args:
            content: Chat message content parts
            max_retries: Maximum attempts on API or parse failure

        Returns:
            Parsed JSON object

        Raises:
            OracleConfigError: If no API key is configured
            OracleResponseError: If every attempt fails
        """
        self._require_api_key()
        attempts = max(1, max_retries)

        last_error: Optional[Exception] = None
        for attempt in range(attempts):
            try:
                logger.info(f"Oracle request attempt {attempt + 1}/{attempts} ({self.model})")
                return parse_json_object(self._complete(content))
            except json.JSONDecodeError as e:
                last_error = e
                logger.warning(f"Oracle response parse error (attempt {attempt + 1}): {e}")
            except ValueError as e:
                last_error = e
                logger.warning(f"Oracle response validation error (attempt {attempt + 1}): {e}")
            except Exception as e:
                last_error = e
                logger.warning(f"Oracle API error (attempt {attempt + 1}): {e}")

        raise OracleResponseError(
            f"Oracle request failed after {attempts} attempts: {last_error}"
        )

    def transcribe(
        self, media: MediaPart, prompt: str, max_retries: Optional[int] = None
    ) -> List[Any]:
        """Ask the oracle for timed lyric lines for a media file.

        Args:
            media: Inline media payload
            prompt: Alignment or transcription prompt
            max_retries: Attempts (default: KINETIC_LLM_MAX_RETRIES)

        Returns:
            The raw, unvalidated ``lyrics`` array
        """
        retries = settings.LLM_MAX_RETRIES if max_retries is None else max_retries
        data = self.request_json(
            [media_content_part(media), {"type": "text", "text": prompt}],
            max_retries=retries,
        )
        lyrics = extract_list(data, "lyrics")
        logger.info(f"Oracle returned {len(lyrics)} raw lyric lines")
        return lyrics

    def suggest_styles(self, prompt: str, max_retries: int = 1) -> List[Any]:
        """Ask the oracle for per-line styles.

        Args:
            prompt: Style prompt including the simplified lyric list
            max_retries: Attempts; styling is best-effort so one by default

        Returns:
            The raw, unvalidated ``styles`` array
        """
        data = self.request_json([{"type": "text", "text": prompt}], max_retries=max_retries)
        styles = extract_list(data, "styles")
        logger.info(f"Oracle returned {len(styles)} style suggestions")
        return styles
