from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Sequence

from polarity.lexicon_classifier import SentimentClassifier
from polarity.sentiment_types import SentimentResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalyzedText:
    """
    Output record for downstream storage / API responses.

    sentiment_score carries the sign (negative for NEGATIVE, 0 for NEUTRAL);
    confidence is the classifier's unsigned score.
    """
    text: str
    language: str
    sentiment_label: str  # positive|negative|neutral
    sentiment_score: float
    confidence: float
    analyzed_at: str  # ISO8601 UTC


@dataclass(frozen=True)
class BatchAnalysis:
    total_items: int
    processed_items: int
    summary: dict[str, int]
    results: list[AnalyzedText]


def to_analyzed(text: str, language: str, result: SentimentResult, analyzed_at: Optional[str] = None) -> AnalyzedText:
    """
    Apply the storage sign convention to a classifier result.

    Rules:
    - POSITIVE: +score
    - NEGATIVE: -score
    - NEUTRAL: 0.0
    """
    if result.label == "POSITIVE":
        signed = result.score
    elif result.label == "NEGATIVE":
        signed = -result.score
    else:
        signed = 0.0

    return AnalyzedText(
        text=text,
        language=language,
        sentiment_label=result.label.lower(),
        sentiment_score=signed,
        confidence=result.score,
        analyzed_at=analyzed_at or datetime.now(timezone.utc).isoformat(),
    )


def analyze_text(text: Optional[str], classifier: SentimentClassifier, language: str = "ko") -> AnalyzedText:
    """
    Analyze a single text.

    Raises:
        ValueError: if text is missing or blank
    """
    if text is None or not text.strip():
        raise ValueError("Text to analyze must not be empty.")

    return to_analyzed(text, language, classifier.classify(text, language))


def analyze_texts(
        texts: Sequence[Optional[str]],
        classifier: SentimentClassifier,
        language: str = "ko",
        max_items: int = 10,
) -> BatchAnalysis:
    """
    Analyze a batch of texts.

    - Keeps ordering
    - Only the first `max_items` texts are analyzed
    - Blank items are skipped (logged), not counted as processed

    Raises:
        ValueError: if texts is empty or max_items <= 0
    """
    if not texts:
        raise ValueError("Batch must contain at least one text.")
    if max_items <= 0:
        raise ValueError("max_items must be > 0")

    if len(texts) > max_items:
        logger.info("Batch truncated: total=%s max_items=%s", len(texts), max_items)

    analyzed_at = datetime.now(timezone.utc).isoformat()

    out: list[AnalyzedText] = []
    for idx, text in enumerate(texts[:max_items]):
        if text is None or not text.strip():
            logger.warning("Skipping blank text in batch: index=%s", idx)
            continue
        res = classifier.classify(text, language)
        out.append(to_analyzed(text, language, res, analyzed_at=analyzed_at))

    summary = summarize(out)
    logger.info(
        "Batch analyzed: total=%s processed=%s summary=%s", len(texts), len(out), summary
    )
    return BatchAnalysis(
        total_items=len(texts),
        processed_items=len(out),
        summary=summary,
        results=out,
    )


def summarize(results: Sequence[AnalyzedText]) -> dict[str, int]:
    counts: dict[str, int] = {"positive": 0, "negative": 0, "neutral": 0}
    for r in results:
        counts[r.sentiment_label] += 1
    return counts
