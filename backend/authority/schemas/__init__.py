"""
Pydantic Schemas for analysis output serialization
"""

from .analysis import (
    CompetitorMentionSchema,
    CitationAnalysisSchema,
    PositionAnalysisSchema,
    CompetitorProfileSchema,
    MarketAnalysisSchema,
    CompetitiveMetricsSchema,
    QueryVariationSchema,
    QuerySetSchema,
    ScheduleEntrySchema,
    MonitoringResultSchema,
)

__all__ = [
    # Citation
    "CompetitorMentionSchema",
    "CitationAnalysisSchema",
    "PositionAnalysisSchema",
    # Competitive
    "CompetitorProfileSchema",
    "MarketAnalysisSchema",
    "CompetitiveMetricsSchema",
    # Queries
    "QueryVariationSchema",
    "QuerySetSchema",
    "ScheduleEntrySchema",
    # Monitoring
    "MonitoringResultSchema",
]
