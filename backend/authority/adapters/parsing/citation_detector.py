"""
Citation Detector
Decides whether, how confidently and how prominently the target company
is mentioned in an AI model response
"""

from dataclasses import dataclass, field
from typing import List, Optional, Pattern, Sequence, Tuple, Union

from authority.config import (
    get_settings,
    CONFIDENCE_WEIGHTS,
    QUALITY_WEIGHTS,
    DEFAULT_POSITION_THRESHOLDS,
)
from authority.models import KeywordSet, Language, get_keyword_set
from authority.utils.text import extract_sentence_window, is_list_item, count_present
from authority.utils.validation import require_text
from .brand_matcher import BrandMatcher, CompetitorMention, KeywordHit
from .sentiment_analyzer import SentimentAnalyzer


@dataclass(frozen=True)
class PositionThresholds:
    """
    Relative-offset cutoffs for the fallback rank estimate.
    A first mention at offset/length below cutoffs[i] is rank i + 1,
    anything later is rank len(cutoffs) + 1.
    """
    cutoffs: Tuple[float, ...] = DEFAULT_POSITION_THRESHOLDS

    def __post_init__(self):
        if not self.cutoffs:
            raise ValueError("PositionThresholds needs at least one cutoff")
        if any(b <= a for a, b in zip(self.cutoffs, self.cutoffs[1:])):
            raise ValueError(f"Cutoffs must be strictly ascending: {self.cutoffs}")

    def rank_for(self, relative_position: float) -> int:
        for rank, cutoff in enumerate(self.cutoffs, 1):
            if relative_position < cutoff:
                return rank
        return len(self.cutoffs) + 1


@dataclass
class CitationAnalysis:
    """Structured result for one (query, response) pair"""
    cited: bool
    confidence: float                       # 0.0 - 1.0
    context: str
    sentiment_score: float                  # -1.0 - 1.0
    competitor_mentions: List[CompetitorMention]
    quality_score: float                    # 0.0 - 1.0
    position: Optional[int] = None          # Inferred rank, None without a signal
    matched_keywords: List[str] = field(default_factory=list)
    mention_count: int = 0


@dataclass
class PositionAnalysis:
    """Target standing among the companies named in one response"""
    directdrive_position: Optional[int]
    total_companies: int
    market_share: float                     # 0 - 100
    confidence: float


class CitationDetector:
    """
    Canonical detector shared by every model-response adapter.

    Pipeline per response:
    1. Locate target keyword hits (offsets into the original text)
    2. Extract the sentence window around the first hit
    3. Infer rank from ranking words, list markers, then relative offset
    4. Score sentiment, confidence and quality with fixed linear heuristics
    5. Report competitor mentions whether or not the target is cited
    """

    BUSINESS_KEYWORDS = ["services", "logistics", "shipping", "freight", "transport", "company"]

    def __init__(
        self,
        keyword_set: Optional[KeywordSet] = None,
        thresholds: Optional[PositionThresholds] = None,
        proximity_window: Optional[int] = None,
        list_scan_lines: Optional[int] = None,
        matcher: Optional[BrandMatcher] = None,
        sentiment_analyzer: Optional[SentimentAnalyzer] = None,
    ):
        settings = get_settings()
        self.keyword_set = keyword_set or get_keyword_set()
        self.thresholds = thresholds or PositionThresholds()
        self.proximity_window = proximity_window if proximity_window is not None else settings.RANK_PROXIMITY_WINDOW
        self.list_scan_lines = list_scan_lines if list_scan_lines is not None else settings.LIST_SCAN_LINES
        self.default_language = Language.parse(settings.DEFAULT_LANGUAGE)
        self.matcher = matcher or BrandMatcher(self.keyword_set)
        self.sentiment_analyzer = sentiment_analyzer or SentimentAnalyzer()

    def detect_citation(
        self,
        text: str,
        language: Union[Language, str, None] = None,
        thresholds: Optional[PositionThresholds] = None,
    ) -> CitationAnalysis:
        """
        Analyze one AI response for target-company citations.

        Args:
            text: Raw response text
            language: Language whose ranking indicators apply (default from settings)
            thresholds: Override for the fallback rank buckets

        Returns:
            CitationAnalysis; an uncited result is ordinary data, not an error

        Raises:
            InvalidInputError: text is not a string
            UnknownLanguageError: language is not supported
        """
        require_text(text)
        patterns = self.keyword_set.ranking_indicators(language or self.default_language)

        hits = self.matcher.find_target_hits(text)
        competitor_mentions = self.matcher.find_competitor_mentions(text)

        if not hits:
            return CitationAnalysis(
                cited=False,
                confidence=0.0,
                context="",
                sentiment_score=0.0,
                competitor_mentions=competitor_mentions,
                quality_score=0.0,
            )

        context = extract_sentence_window(text, hits[0].start)
        position = self._infer_position(text, hits, patterns, thresholds or self.thresholds)
        sentiment_score = self.sentiment_analyzer.score(context)

        return CitationAnalysis(
            cited=True,
            confidence=self._calculate_confidence(hits, context, sentiment_score),
            context=context,
            sentiment_score=sentiment_score,
            competitor_mentions=competitor_mentions,
            quality_score=self._calculate_quality_score(context, sentiment_score, competitor_mentions),
            position=position,
            matched_keywords=list(dict.fromkeys(h.keyword for h in hits)),
            mention_count=len(hits),
        )

    def infer_position(
        self,
        text: str,
        language: Union[Language, str, None] = None,
        thresholds: Optional[PositionThresholds] = None,
    ) -> Optional[int]:
        """Rank of the target in text, None when it is not mentioned"""
        require_text(text)
        patterns = self.keyword_set.ranking_indicators(language or self.default_language)
        hits = self.matcher.find_target_hits(text)
        if not hits:
            return None
        return self._infer_position(text, hits, patterns, thresholds or self.thresholds)

    def _infer_position(
        self,
        text: str,
        hits: List[KeywordHit],
        patterns: Sequence[Pattern],
        thresholds: PositionThresholds,
    ) -> int:
        # Ranking words near a mention; lower ranks win
        for rank, pattern in enumerate(patterns, 1):
            for match in pattern.finditer(text):
                if any(abs(hit.start - match.start()) <= self.proximity_window for hit in hits):
                    return rank

        # Numbered or bulleted lines near the top
        for index, line in enumerate(text.split("\n")[:self.list_scan_lines], 1):
            if self.matcher.line_has_target(line) and is_list_item(line):
                return index

        return thresholds.rank_for(hits[0].start / len(text))

    def _calculate_confidence(
        self,
        hits: List[KeywordHit],
        context: str,
        sentiment_score: float,
    ) -> float:
        w = CONFIDENCE_WEIGHTS
        confidence = w["base"]
        confidence += min((len(hits) - 1) * w["per_extra_mention"], w["extra_mentions_cap"])

        if any(h.is_full_name for h in hits):
            confidence += w["full_name_bonus"]

        confidence += min(len(context) / w["context_length_divisor"], w["context_cap"])

        if sentiment_score > 0:
            confidence += sentiment_score * w["positive_sentiment"]

        return min(confidence, 1.0)

    def _calculate_quality_score(
        self,
        context: str,
        sentiment_score: float,
        competitor_mentions: List[CompetitorMention],
    ) -> float:
        w = QUALITY_WEIGHTS
        quality = min(len(context) / w["context_length_divisor"], w["context_cap"])

        if sentiment_score > 0:
            quality += sentiment_score * w["positive_sentiment"]

        # Mentioned alongside competitors
        if competitor_mentions:
            quality += w["competitor_presence"]

        business_matches = count_present(context, self.BUSINESS_KEYWORDS)
        quality += min(business_matches * w["per_business_keyword"], w["business_keyword_cap"])

        return min(quality, 1.0)

    def analyze_competitive_position(
        self,
        text: str,
        language: Union[Language, str, None] = None,
    ) -> PositionAnalysis:
        """Target rank and naive share among companies named in one response"""
        analysis = self.detect_citation(text, language)
        total_companies = len(analysis.competitor_mentions) + (1 if analysis.cited else 0)
        market_share = 100.0 / total_companies if analysis.cited else 0.0

        return PositionAnalysis(
            directdrive_position=analysis.position,
            total_companies=total_companies,
            market_share=market_share,
            confidence=analysis.confidence,
        )
