"""
Configuration management for the DirectDrive authority engine
Environment-based settings with safe defaults
"""

from functools import lru_cache
from typing import Optional, Tuple

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Engine settings loaded from environment variables"""

    # Application
    APP_NAME: str = "directdrive-authority"
    APP_ENV: str = "development"  # development, staging, production
    DEBUG: bool = False

    # Lexicon
    DEFAULT_LANGUAGE: str = "english"
    LEXICON_PATH: Optional[str] = None  # Alternative lexicon YAML, packaged one if unset

    # Rank inference
    RANK_PROXIMITY_WINDOW: int = 200  # characters
    LIST_SCAN_LINES: int = 10

    # Competitive analysis
    UNRANKED_POSITION: int = 10
    MARKET_LEADERS_LIMIT: int = 5
    THREAT_LEADERS_LIMIT: int = 3

    # Competitor matching
    FUZZY_COMPETITOR_MATCHING: bool = False
    FUZZY_MATCH_THRESHOLD: int = 85

    @field_validator("DEFAULT_LANGUAGE", mode="before")
    @classmethod
    def normalize_language(cls, v: str) -> str:
        return v.strip().lower()

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == "production"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Cached settings loader"""
    return Settings()


# Citation confidence weights
CONFIDENCE_WEIGHTS = {
    "base": 0.3,
    "per_extra_mention": 0.1,
    "extra_mentions_cap": 0.2,
    "full_name_bonus": 0.2,
    "context_length_divisor": 500,
    "context_cap": 0.2,
    "positive_sentiment": 0.1,
}

# Citation quality weights
QUALITY_WEIGHTS = {
    "context_length_divisor": 200,
    "context_cap": 0.4,
    "positive_sentiment": 0.3,
    "competitor_presence": 0.2,
    "per_business_keyword": 0.02,
    "business_keyword_cap": 0.1,
}

# Relative-offset cutoffs for the fallback rank estimate (ranks 1..5).
# Per-model calibrations live in data/monitoring_profiles.yaml.
DEFAULT_POSITION_THRESHOLDS: Tuple[float, ...] = (0.1, 0.25, 0.5, 0.75)

# Composite competitor score (used for ranking market leaders)
COMPETITOR_SCORE_WEIGHTS = {
    "per_mention": 10,
    "mention_cap": 40,
    "position_base": 30,
    "per_position": 3,
    "sentiment": 10,
    "market_share_cap": 10,
}
