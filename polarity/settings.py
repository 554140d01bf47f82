from __future__ import annotations

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class SentimentSettings(BaseSettings):
    """
    Environment-driven settings for lexicon sentiment analysis.
    """

    model_config = SettingsConfigDict(env_prefix="", env_file=".env", extra="ignore")

    # "ko" | "en"; anything else is classified with the English lexicon
    sentiment_default_language: str = Field(default="ko", alias="SENTIMENT_DEFAULT_LANGUAGE")

    # Batch runs analyze at most this many texts (the rest are counted, not analyzed)
    sentiment_batch_max_items: int = Field(default=10, alias="SENTIMENT_BATCH_MAX_ITEMS")

    # Pins the NEUTRAL confidence draw when set
    sentiment_random_seed: Optional[int] = Field(default=None, alias="SENTIMENT_RANDOM_SEED")

    sentiment_log_level: str = Field(default="INFO", alias="SENTIMENT_LOG_LEVEL")


def load_settings() -> SentimentSettings:
    return SentimentSettings()
