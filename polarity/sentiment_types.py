from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


SentimentLabel = Literal["POSITIVE", "NEGATIVE", "NEUTRAL"]
Language = Literal["ko", "en"]

SUPPORTED_LANGUAGES: tuple[Language, ...] = ("ko", "en")
DEFAULT_LANGUAGE: Language = "en"


@dataclass(frozen=True)
class SentimentResult:
    """
    Standardized classifier output.

    - label: POSITIVE|NEGATIVE|NEUTRAL
    - score: confidence in [0, 1], unsigned
    """

    label: SentimentLabel
    score: float


def resolve_language(tag: str | None) -> Language:
    """Map a caller-supplied tag to a supported language; unknown tags fall back to English."""
    if tag in SUPPORTED_LANGUAGES:
        return tag  # type: ignore[return-value]
    return DEFAULT_LANGUAGE
