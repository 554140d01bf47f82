from __future__ import annotations

import logging
import random
import re
from dataclasses import dataclass
from typing import Callable, Optional, Pattern, Protocol, Sequence

from polarity.lexicons import EN_NEGATIVE, EN_POSITIVE, KO_NEGATIVE, KO_POSITIVE
from polarity.sentiment_types import Language, SentimentResult, resolve_language

logger = logging.getLogger(__name__)

SCORE_BASE = 0.6
SCORE_CAP = 0.95


class RandomSource(Protocol):
    def random(self) -> float: ...


_SYSTEM_RANDOM: RandomSource = random.Random()


def _count_presence(text: str, markers: Sequence[str]) -> int:
    # One hit per marker found anywhere in the text, however often it repeats.
    return sum(1 for m in markers if m in text)


def _count_whole_words(text: str, patterns: Sequence[Pattern[str]]) -> int:
    lowered = text.lower()
    return sum(len(p.findall(lowered)) for p in patterns)


def _word_patterns(words: Sequence[str]) -> tuple[Pattern[str], ...]:
    # ASCII word boundaries: "badger" must not match "bad".
    return tuple(re.compile(rf"\b{re.escape(w)}\b", re.ASCII) for w in words)


@dataclass(frozen=True)
class LexiconStrategy:
    """
    Density-based lexicon scoring for one language.

    hits / max(1, whitespace tokens) gives a density per polarity; the denser side
    wins if it also clears `threshold`. Otherwise the text is NEUTRAL with a
    randomized confidence in [0.6, 0.7).
    """

    language: Language
    positive: tuple
    negative: tuple
    count_hits: Callable[[str, Sequence], int]
    threshold: float
    multiplier: float

    def evaluate(self, text: str, rng: RandomSource) -> SentimentResult:
        pos_hits = self.count_hits(text, self.positive)
        neg_hits = self.count_hits(text, self.negative)

        total_words = max(1, len(text.split()))
        pos_density = pos_hits / total_words
        neg_density = neg_hits / total_words

        if pos_density > neg_density and pos_density > self.threshold:
            return SentimentResult(label="POSITIVE", score=self._score(pos_density))
        if neg_density > pos_density and neg_density > self.threshold:
            return SentimentResult(label="NEGATIVE", score=self._score(neg_density))
        return SentimentResult(label="NEUTRAL", score=_neutral_score(rng))

    def _score(self, density: float) -> float:
        return min(SCORE_BASE + density * self.multiplier, SCORE_CAP)


def _neutral_score(rng: RandomSource) -> float:
    return max(0.5 + rng.random() * 0.2, SCORE_BASE)


KOREAN = LexiconStrategy(
    language="ko",
    positive=KO_POSITIVE,
    negative=KO_NEGATIVE,
    count_hits=_count_presence,
    threshold=0.1,
    multiplier=2.0,
)

ENGLISH = LexiconStrategy(
    language="en",
    positive=_word_patterns(EN_POSITIVE),
    negative=_word_patterns(EN_NEGATIVE),
    count_hits=_count_whole_words,
    threshold=0.05,
    multiplier=3.0,
)

STRATEGIES: dict[Language, LexiconStrategy] = {
    KOREAN.language: KOREAN,
    ENGLISH.language: ENGLISH,
}


def classify(
        text: Optional[str],
        language: Optional[str] = "ko",
        rng: Optional[RandomSource] = None,
) -> SentimentResult:
    """
    Classify `text` as POSITIVE / NEGATIVE / NEUTRAL with a confidence score.

    Never raises for string input. Unknown language tags use the English strategy.
    `rng` only feeds the NEUTRAL confidence; pass a seeded `random.Random` to pin it.
    """
    strategy = STRATEGIES[resolve_language(language)]
    result = strategy.evaluate(text or "", rng or _SYSTEM_RANDOM)
    logger.debug(
        "Classified: language=%s label=%s score=%.4f", strategy.language, result.label, result.score
    )
    return result


@dataclass(frozen=True)
class SentimentClassifierConfig:
    random_seed: Optional[int] = None


class SentimentClassifier:
    """
    Stateless wrapper around `classify` holding the randomness provider.

    - seeded config -> reproducible NEUTRAL scores
    - predict() keeps input ordering
    """

    def __init__(self, cfg: SentimentClassifierConfig = SentimentClassifierConfig(),
                 rng: Optional[RandomSource] = None):
        self._cfg = cfg
        if rng is not None:
            self._rng = rng
        elif cfg.random_seed is not None:
            self._rng = random.Random(cfg.random_seed)
        else:
            self._rng = _SYSTEM_RANDOM

        logger.info(
            "Sentiment classifier ready: languages=%s seeded=%s",
            ",".join(STRATEGIES),
            cfg.random_seed is not None or rng is not None,
        )

    def classify(self, text: Optional[str], language: Optional[str] = "ko") -> SentimentResult:
        return classify(text, language, rng=self._rng)

    def predict(self, texts: Sequence[Optional[str]], language: Optional[str] = "ko") -> list[SentimentResult]:
        return [self.classify(t, language) for t in texts]
