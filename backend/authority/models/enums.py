"""
Shared enumerations
"""

from enum import Enum
from typing import Union

from authority.utils.validation import UnknownLanguageError


class Language(str, Enum):
    """Languages with a lexicon profile"""
    ENGLISH = "english"
    ARABIC = "arabic"
    KURDISH = "kurdish"
    FARSI = "farsi"

    @classmethod
    def parse(cls, value: Union["Language", str]) -> "Language":
        """Coerce a language name, failing fast on anything unknown"""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnknownLanguageError(f"Language must be a string, got {type(value).__name__}")
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise UnknownLanguageError(
                f"Unsupported language: {value}. Must be one of {[l.value for l in cls]}"
            ) from None


class SentimentPolarity(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class MonitoringFrequency(str, Enum):
    """Cadence tiers of the monitoring schedule"""
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class MatchType(str, Enum):
    EXACT = "exact"
    FUZZY = "fuzzy"
