from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from typing import Optional, Sequence

from polarity.lexicon_classifier import SentimentClassifier, SentimentClassifierConfig
from polarity.sentiment_pipeline import analyze_text, analyze_texts
from polarity.settings import load_settings

logger = logging.getLogger(__name__)


def _read_texts(args: argparse.Namespace) -> list[str]:
    if args.texts:
        return list(args.texts)
    return [ln.strip() for ln in sys.stdin if ln.strip()]


def main(argv: Optional[Sequence[str]] = None) -> int:
    s = load_settings()

    logging.basicConfig(
        level=s.sentiment_log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Classify text sentiment with the built-in lexicons.")
    parser.add_argument("texts", nargs="*", help="Texts to analyze (default: one per stdin line)")
    parser.add_argument("--language", default=s.sentiment_default_language, help="ko | en")
    args = parser.parse_args(argv)

    texts = _read_texts(args)

    classifier = SentimentClassifier(SentimentClassifierConfig(random_seed=s.sentiment_random_seed))

    try:
        if len(texts) == 1:
            payload = asdict(analyze_text(texts[0], classifier, language=args.language))
        else:
            payload = asdict(
                analyze_texts(
                    texts,
                    classifier,
                    language=args.language,
                    max_items=s.sentiment_batch_max_items,
                )
            )
    except ValueError as e:
        logger.error("Invalid input: %s", e)
        return 2

    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
