from __future__ import annotations

import pytest

from polarity.lexicon_classifier import SentimentClassifier
from polarity.sentiment_pipeline import analyze_text, analyze_texts, summarize, to_analyzed
from polarity.sentiment_types import SentimentResult


class _FixedRandom:
    def random(self) -> float:
        return 0.0


def _classifier() -> SentimentClassifier:
    return SentimentClassifier(rng=_FixedRandom())


def test_to_analyzed_positive_keeps_sign():
    a = to_analyzed("t", "ko", SentimentResult(label="POSITIVE", score=0.8), analyzed_at="2026-01-01T00:00:00+00:00")
    assert a.sentiment_label == "positive"
    assert a.sentiment_score == 0.8
    assert a.confidence == 0.8
    assert a.analyzed_at == "2026-01-01T00:00:00+00:00"


def test_to_analyzed_negative_flips_sign():
    a = to_analyzed("t", "en", SentimentResult(label="NEGATIVE", score=0.7))
    assert a.sentiment_label == "negative"
    assert a.sentiment_score == -0.7
    assert a.confidence == 0.7


def test_to_analyzed_neutral_zero_score():
    a = to_analyzed("t", "en", SentimentResult(label="NEUTRAL", score=0.65))
    assert a.sentiment_label == "neutral"
    assert a.sentiment_score == 0.0
    assert a.confidence == 0.65


def test_analyze_text_korean():
    a = analyze_text("이 제품 정말 좋다", _classifier(), language="ko")
    assert a.sentiment_label == "positive"
    assert a.sentiment_score == pytest.approx(0.95)
    assert a.language == "ko"
    assert a.text == "이 제품 정말 좋다"


def test_analyze_text_english_negative():
    a = analyze_text("This is bad", _classifier(), language="en")
    assert a.sentiment_label == "negative"
    assert a.sentiment_score == pytest.approx(-0.95)


@pytest.mark.parametrize("text", [None, "", "   \n"])
def test_analyze_text_rejects_blank(text):
    with pytest.raises(ValueError):
        analyze_text(text, _classifier())


def test_analyze_texts_caps_items_and_summarizes():
    texts = ["좋다", "나쁘다", "", "그냥 그래요"] + ["최악"] * 8
    batch = analyze_texts(texts, _classifier(), language="ko", max_items=10)

    assert batch.total_items == 12
    # 10 analyzed slots, one blank skipped
    assert batch.processed_items == 9
    assert batch.summary == {"positive": 1, "negative": 7, "neutral": 1}
    assert [r.text for r in batch.results[:3]] == ["좋다", "나쁘다", "그냥 그래요"]


def test_analyze_texts_rejects_empty_batch():
    with pytest.raises(ValueError):
        analyze_texts([], _classifier())


def test_analyze_texts_rejects_bad_max_items():
    with pytest.raises(ValueError):
        analyze_texts(["좋다"], _classifier(), max_items=0)


def test_summarize_has_all_keys():
    assert summarize([]) == {"positive": 0, "negative": 0, "neutral": 0}
