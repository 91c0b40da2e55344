"""
Analysis Services
"""

from .competitive_analyzer import (
    AIResponse,
    CompetitiveAnalyzer,
    CompetitiveMetrics,
    CompetitorProfile,
    MarketAnalysis,
)
from .query_variations import (
    QuerySet,
    QueryVariation,
    QueryVariationGenerator,
    ScheduleEntry,
)

__all__ = [
    "AIResponse",
    "CompetitiveAnalyzer",
    "CompetitiveMetrics",
    "CompetitorProfile",
    "MarketAnalysis",
    "QuerySet",
    "QueryVariation",
    "QueryVariationGenerator",
    "ScheduleEntry",
]
