"""
Analysis Output Schemas
Serializable mirrors of the analysis dataclasses
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from authority.models import Language, MatchType, MonitoringFrequency


class CompetitorMentionSchema(BaseModel):
    """Competitor mention in an AI response"""
    company: str
    context: str
    confidence: float = Field(ge=0.0, le=1.0)
    position: Optional[int] = None
    character_offset: int = 0
    match_type: MatchType = MatchType.EXACT

    class Config:
        from_attributes = True


class CitationAnalysisSchema(BaseModel):
    """Citation analysis of one response"""
    cited: bool
    confidence: float = Field(ge=0.0, le=1.0)
    context: str
    sentiment_score: float = Field(ge=-1.0, le=1.0)
    competitor_mentions: List[CompetitorMentionSchema] = []
    quality_score: float = Field(ge=0.0, le=1.0)
    position: Optional[int] = None
    matched_keywords: List[str] = []
    mention_count: int = 0

    class Config:
        from_attributes = True


class PositionAnalysisSchema(BaseModel):
    directdrive_position: Optional[int] = None
    total_companies: int
    market_share: float
    confidence: float

    class Config:
        from_attributes = True


class CompetitorProfileSchema(BaseModel):
    """Aggregated standing of one company"""
    name: str
    mention_frequency: int
    average_position: float
    sentiment_score: float
    market_share: float
    strengths: List[str] = []
    weaknesses: List[str] = []

    class Config:
        from_attributes = True


class MarketAnalysisSchema(BaseModel):
    """Competitive landscape report"""
    market_leaders: List[CompetitorProfileSchema]
    directdrive_profile: CompetitorProfileSchema
    market_gaps: List[str] = []
    opportunities: List[str] = []
    threats: List[str] = []
    recommendations: List[str] = []

    class Config:
        from_attributes = True


class CompetitiveMetricsSchema(BaseModel):
    directdrive_rank: Optional[int] = None
    total_competitors: int
    market_visibility: float = Field(ge=0.0, le=100.0)
    competitive_gap: int
    dominance_score: float = Field(ge=0.0, le=100.0)
    improvement_potential: float = Field(ge=0.0, le=100.0)

    class Config:
        from_attributes = True


class QueryVariationSchema(BaseModel):
    original: str
    variations: List[str]
    language: Language
    priority: int
    region: str

    class Config:
        from_attributes = True


class QuerySetSchema(BaseModel):
    """All variations generated for one base query"""
    base_query: str
    variations: List[QueryVariationSchema] = []
    total_queries: int = 0

    class Config:
        from_attributes = True


class ScheduleEntrySchema(BaseModel):
    query: str
    frequency: MonitoringFrequency
    language: str

    class Config:
        from_attributes = True


class MonitoringResultSchema(BaseModel):
    """Per-model monitoring outcome (raw response text omitted)"""
    cited: bool
    citation_context: Optional[str] = None
    position: Optional[int] = None
    sources: List[str] = []
    analysis: Optional[CitationAnalysisSchema] = None

    class Config:
        from_attributes = True
