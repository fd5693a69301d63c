"""Total coercion functions for untrusted oracle fields.

Every function here accepts any JSON value and returns a fully typed
result. None of them raise.
"""

import math
import re
from enum import Enum
from typing import Any, List, Optional, Type

_ENUM_NOISE = re.compile(r"[-_]")


def canonical_token(value: str) -> str:
    """Lowercase a token and strip hyphens and underscores.

    Args:
        value: Raw token, e.g. "Slide_Up"

    Returns:
        Canonical token, e.g. "slideup"
    """
    return _ENUM_NOISE.sub("", value.lower())


def match_enum(value: Any, enum_cls: Type[Enum]) -> Optional[Enum]:
    """Find the enumeration member matching a loosely formatted string.

    Matching ignores case, hyphens and underscores, so "Slide_Up",
    "slide-up" and "SLIDEUP" all match AnimationType.SLIDE_UP.

    Args:
        value: Raw value from the oracle
        enum_cls: str-valued Enum to match against

    Returns:
        The matching member, or None when nothing matches
    """
    if not isinstance(value, str) or not value:
        return None
    wanted = canonical_token(value)
    for member in enum_cls:
        if canonical_token(member.value) == wanted:
            return member
    return None


def sanitize_enum(value: Any, enum_cls: Type[Enum], default: str, strict: bool = False) -> str:
    """Resolve an enum-like field to a string value.

    Missing, empty and non-string values resolve to ``default``. A string
    that matches a member resolves to that member's canonical value. An
    unmatched string is kept as-is, unless ``strict`` is set in which
    case it resolves to ``default``.
    """
    if not isinstance(value, str) or not value:
        return default
    member = match_enum(value, enum_cls)
    if member is not None:
        return member.value
    return default if strict else value


def sanitize_time(value: Any) -> float:
    """Coerce a timestamp to non-negative finite seconds, 0.0 otherwise."""
    # bool is an int subclass but never a valid timestamp
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    try:
        seconds = float(value)
    except OverflowError:
        return 0.0
    if not math.isfinite(seconds) or seconds < 0:
        return 0.0
    return seconds


def sanitize_str(value: Any, default: str) -> str:
    """Return a non-blank string value or ``default``."""
    if isinstance(value, str) and value.strip():
        return value
    return default


def sanitize_text(value: Any) -> str:
    """Coerce lyric text to a string. Numbers are stringified, anything else is empty."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def sanitize_mapping(value: Any) -> dict:
    """Return ``value`` when it is a JSON object, else an empty dict."""
    return value if isinstance(value, dict) else {}
