"""
Sentiment Analyzer
Word-count polarity for the text around a mention
"""

from dataclasses import dataclass
from typing import List

from authority.models import SentimentPolarity


@dataclass
class SentimentResult:
    """Result of sentiment analysis"""
    polarity: SentimentPolarity
    score: float  # -1.0 to 1.0
    confidence: float  # 0.0 to 1.0
    matched_indicators: List[str]  # Words that contributed


class SentimentAnalyzer:
    """
    Rule-based sentiment for citation contexts.

    Each listed word counts once when it appears anywhere in the text
    (case-insensitive substring). Score = (positive - negative) / NORMALIZER,
    clamped to [-1, 1]. Downstream dashboards depend on these ranges.
    """

    POSITIVE_WORDS = [
        "best", "excellent", "top", "leading", "reliable", "trusted", "professional",
        "outstanding", "premier", "quality", "efficient", "recommended", "superior",
        "exceptional", "proven", "established", "reputable", "experienced",
    ]

    NEGATIVE_WORDS = [
        "poor", "bad", "worst", "unreliable", "slow", "expensive", "problems",
        "issues", "complaints", "avoid", "disappointing", "subpar", "inadequate",
    ]

    NORMALIZER = 5.0

    def analyze(self, text: str) -> SentimentResult:
        """
        Analyze sentiment of text.

        Args:
            text: Context to analyze

        Returns:
            SentimentResult with polarity and score
        """
        if not text:
            return SentimentResult(
                polarity=SentimentPolarity.NEUTRAL,
                score=0.0,
                confidence=0.0,
                matched_indicators=[],
            )

        text_lower = text.lower()
        positive = [w for w in self.POSITIVE_WORDS if w in text_lower]
        negative = [w for w in self.NEGATIVE_WORDS if w in text_lower]

        raw = (len(positive) - len(negative)) / self.NORMALIZER
        score = max(-1.0, min(1.0, raw))

        if score > 0:
            polarity = SentimentPolarity.POSITIVE
        elif score < 0:
            polarity = SentimentPolarity.NEGATIVE
        else:
            polarity = SentimentPolarity.NEUTRAL

        matched = positive + [f"-{w}" for w in negative]
        return SentimentResult(
            polarity=polarity,
            score=score,
            confidence=min(1.0, len(matched) / 5.0),
            matched_indicators=matched,
        )

    def score(self, text: str) -> float:
        return self.analyze(text).score


class CompetitorSentimentAnalyzer(SentimentAnalyzer):
    """Lighter lexicon used to re-estimate sentiment around competitor mentions"""

    POSITIVE_WORDS = ["best", "excellent", "top", "leading", "reliable", "trusted"]
    NEGATIVE_WORDS = ["poor", "bad", "unreliable", "expensive", "slow"]
    NORMALIZER = 3.0
