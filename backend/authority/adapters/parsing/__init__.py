"""
Response Parsing Adapters
"""

from .brand_matcher import BrandMatcher, CompetitorMention, KeywordHit
from .citation_detector import (
    CitationAnalysis,
    CitationDetector,
    PositionAnalysis,
    PositionThresholds,
)
from .sentiment_analyzer import CompetitorSentimentAnalyzer, SentimentAnalyzer, SentimentResult
from .source_extractor import ExtractedSource, SourceExtractor

__all__ = [
    "BrandMatcher",
    "CompetitorMention",
    "KeywordHit",
    "CitationAnalysis",
    "CitationDetector",
    "PositionAnalysis",
    "PositionThresholds",
    "CompetitorSentimentAnalyzer",
    "SentimentAnalyzer",
    "SentimentResult",
    "ExtractedSource",
    "SourceExtractor",
]
