"""
Competitive Analysis Service
Aggregates per-response citation analyses into market-level reports
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from authority.adapters.parsing import (
    CitationDetector,
    CompetitorSentimentAnalyzer,
)
from authority.config import get_settings, COMPETITOR_SCORE_WEIGHTS
from authority.models import KeywordSet, get_keyword_set
from authority.utils.validation import InvalidInputError

logger = logging.getLogger(__name__)


@dataclass
class AIResponse:
    """One answer from an AI model to a monitoring query"""
    query: str
    response: str
    ai_model: str = "unknown"


@dataclass
class CompetitorProfile:
    """Per-run aggregate for one tracked company"""
    name: str
    mention_frequency: int = 0
    average_position: float = 10.0     # 10 = effectively unranked
    sentiment_score: float = 0.0
    market_share: float = 0.0          # Percent of all tracked mentions
    strengths: List[str] = field(default_factory=list)
    weaknesses: List[str] = field(default_factory=list)


@dataclass
class MarketAnalysis:
    market_leaders: List[CompetitorProfile]
    directdrive_profile: CompetitorProfile
    market_gaps: List[str]
    opportunities: List[str]
    threats: List[str]
    recommendations: List[str]


@dataclass
class CompetitiveMetrics:
    directdrive_rank: Optional[int]
    total_competitors: int
    market_visibility: float
    competitive_gap: int
    dominance_score: float
    improvement_potential: float


@dataclass
class _EntityStats:
    mentions: int = 0
    positions: List[int] = field(default_factory=list)
    sentiments: List[float] = field(default_factory=list)
    contexts: List[str] = field(default_factory=list)


class CompetitiveAnalyzer:
    """
    Builds the competitive landscape from a batch of AI responses:
    - Mention frequency, average rank and sentiment per company
    - Market share of all tracked mentions
    - Keyword-derived strengths and weaknesses
    - Gaps, opportunities, threats and recommendations for the target
    """

    STRENGTH_INDICATORS = {
        "Customer Service": ["service", "support", "helpful", "responsive"],
        "Pricing": ["affordable", "competitive", "value", "cost-effective"],
        "Reliability": ["reliable", "dependable", "consistent", "on-time"],
        "Experience": ["experienced", "established", "years", "expertise"],
        "Technology": ["modern", "technology", "digital", "advanced"],
        "Speed": ["fast", "quick", "rapid", "express"],
        "Coverage": ["wide", "extensive", "network", "coverage"],
    }
    MIN_STRENGTH_MATCHES = 2

    WEAKNESS_INDICATORS = {
        "Pricing": ["expensive", "costly", "overpriced"],
        "Speed": ["slow", "delayed", "late"],
        "Service": ["poor service", "bad support", "unresponsive"],
        "Reliability": ["unreliable", "inconsistent", "problems"],
    }

    LOW_VISIBILITY_POSITION = 5

    WEAKNESS_MITIGATIONS = {
        "Low visibility": "Optimize content for AI model queries and citations",
        "Pricing": "Publish transparent pricing and value comparisons to counter cost concerns",
        "Speed": "Highlight delivery times and shipment tracking to address speed concerns",
        "Service": "Showcase customer service responsiveness with case studies and testimonials",
        "Reliability": "Document on-time delivery performance to strengthen reliability perception",
    }

    def __init__(
        self,
        keyword_set: Optional[KeywordSet] = None,
        detector: Optional[CitationDetector] = None,
    ):
        settings = get_settings()
        self.keyword_set = keyword_set or get_keyword_set()
        self.detector = detector or CitationDetector(self.keyword_set)
        self.competitor_sentiment = CompetitorSentimentAnalyzer()
        self.unranked_position = settings.UNRANKED_POSITION
        self.leaders_limit = settings.MARKET_LEADERS_LIMIT
        self.threat_limit = settings.THREAT_LEADERS_LIMIT

    @property
    def target_name(self) -> str:
        return self.keyword_set.target_name

    def _normalize_responses(self, responses: Any) -> List[AIResponse]:
        """Validate the batch and coerce mappings into AIResponse records"""
        if not isinstance(responses, (list, tuple)):
            raise InvalidInputError(
                f"responses must be a list of responses, got {type(responses).__name__}"
            )

        records = []
        for i, item in enumerate(responses):
            if isinstance(item, AIResponse):
                record = item
            elif isinstance(item, Mapping):
                record = AIResponse(
                    query=item.get("query"),
                    response=item.get("response"),
                    ai_model=item.get("ai_model", item.get("aiModel", "unknown")),
                )
            else:
                raise InvalidInputError(
                    f"responses[{i}] must be an AIResponse or mapping, got {type(item).__name__}"
                )

            if not isinstance(record.query, str) or not isinstance(record.response, str):
                raise InvalidInputError(f"responses[{i}] needs string 'query' and 'response' fields")
            records.append(record)

        return records

    def analyze_competitive_landscape(self, responses: Sequence[Any]) -> MarketAnalysis:
        """
        Analyze the competitive landscape from AI responses.

        Args:
            responses: AIResponse records or mappings with query, response
                and ai_model (or aiModel) keys

        Returns:
            MarketAnalysis with ranked leaders and qualitative findings

        Raises:
            InvalidInputError: batch or record is malformed
        """
        records = self._normalize_responses(responses)

        stats: Dict[str, _EntityStats] = {name: _EntityStats() for name in self.keyword_set.competitor_names}
        stats[self.target_name] = _EntityStats()

        for record in records:
            analysis = self.detector.detect_citation(record.response)

            if analysis.cited:
                target_stats = stats[self.target_name]
                target_stats.mentions += 1
                if analysis.position:
                    target_stats.positions.append(analysis.position)
                target_stats.sentiments.append(analysis.sentiment_score)
                target_stats.contexts.append(analysis.context)

            for mention in analysis.competitor_mentions:
                competitor_stats = stats.get(mention.company)
                if competitor_stats is None:
                    continue
                competitor_stats.mentions += 1
                if mention.position:
                    competitor_stats.positions.append(mention.position)
                competitor_stats.contexts.append(mention.context)
                competitor_stats.sentiments.append(self.competitor_sentiment.score(mention.context))

        total_mentions = sum(s.mentions for s in stats.values())
        logger.debug(f"Analyzed {len(records)} responses with {total_mentions} tracked mentions")

        market_leaders: List[CompetitorProfile] = []
        directdrive_profile = None

        for name, entity_stats in stats.items():
            profile = self._build_profile(name, entity_stats, total_mentions)
            if name == self.target_name:
                directdrive_profile = profile
            elif entity_stats.mentions > 0:
                market_leaders.append(profile)

        market_leaders.sort(key=self.calculate_competitor_score, reverse=True)

        opportunities = self._identify_opportunities(directdrive_profile, market_leaders)

        return MarketAnalysis(
            market_leaders=market_leaders[:self.leaders_limit],
            directdrive_profile=directdrive_profile,
            market_gaps=self._identify_market_gaps(records),
            opportunities=opportunities,
            threats=self._identify_threats(market_leaders),
            recommendations=self._generate_recommendations(directdrive_profile, market_leaders, opportunities),
        )

    def _build_profile(self, name: str, stats: _EntityStats, total_mentions: int) -> CompetitorProfile:
        average_position = (
            sum(stats.positions) / len(stats.positions) if stats.positions else float(self.unranked_position)
        )
        return CompetitorProfile(
            name=name,
            mention_frequency=stats.mentions,
            average_position=average_position,
            sentiment_score=sum(stats.sentiments) / len(stats.sentiments) if stats.sentiments else 0.0,
            market_share=(stats.mentions / total_mentions) * 100 if total_mentions > 0 else 0.0,
            strengths=self._identify_strengths(stats.contexts),
            weaknesses=self._identify_weaknesses(stats.contexts, average_position),
        )

    def calculate_competitive_metrics(self, responses: Sequence[Any]) -> CompetitiveMetrics:
        """
        Lightweight metrics: best target rank, widest competitor field and
        the target's share of all mentions.

        Args:
            responses: AIResponse records or mappings with query and response keys

        Returns:
            CompetitiveMetrics
        """
        records = self._normalize_responses(responses)

        directdrive_rank: Optional[int] = None
        total_competitors = 0
        directdrive_mentions = 0
        competitor_mentions = 0

        for record in records:
            analysis = self.detector.detect_citation(record.response)

            if analysis.cited:
                directdrive_mentions += 1
                if analysis.position and (directdrive_rank is None or analysis.position < directdrive_rank):
                    directdrive_rank = analysis.position

            competitors = len(analysis.competitor_mentions)
            total_competitors = max(total_competitors, competitors)
            competitor_mentions += competitors

        total_mentions = directdrive_mentions + competitor_mentions
        market_visibility = (directdrive_mentions / total_mentions) * 100 if total_mentions > 0 else 0.0

        # Distance from the top spot
        competitive_gap = max(0, directdrive_rank - 1) if directdrive_rank else self.unranked_position

        dominance_score = max(0.0, 100 - competitive_gap * 10 - (100 - market_visibility))

        return CompetitiveMetrics(
            directdrive_rank=directdrive_rank,
            total_competitors=total_competitors,
            market_visibility=market_visibility,
            competitive_gap=competitive_gap,
            dominance_score=dominance_score,
            improvement_potential=min(100.0, 100 - dominance_score),
        )

    def _identify_strengths(self, contexts: List[str]) -> List[str]:
        combined = " ".join(contexts).lower()
        strengths = []
        for strength, indicators in self.STRENGTH_INDICATORS.items():
            matches = sum(1 for indicator in indicators if indicator in combined)
            if matches >= self.MIN_STRENGTH_MATCHES:
                strengths.append(strength)
        return strengths

    def _identify_weaknesses(self, contexts: List[str], average_position: float) -> List[str]:
        weaknesses = []

        if average_position > self.LOW_VISIBILITY_POSITION:
            weaknesses.append("Low visibility")
        if not contexts:
            weaknesses.append("Brand awareness")

        combined = " ".join(contexts).lower()
        for weakness, indicators in self.WEAKNESS_INDICATORS.items():
            if any(indicator in combined for indicator in indicators):
                weaknesses.append(weakness)

        return weaknesses

    def calculate_competitor_score(self, profile: CompetitorProfile) -> float:
        """Composite 0-100 score used to rank market leaders"""
        w = COMPETITOR_SCORE_WEIGHTS
        score = min(profile.mention_frequency * w["per_mention"], w["mention_cap"])
        score += max(0, w["position_base"] - profile.average_position * w["per_position"])
        score += (profile.sentiment_score + 1) * w["sentiment"]
        score += min(profile.market_share, w["market_share_cap"])
        return score

    def _identify_market_gaps(self, records: List[AIResponse]) -> List[str]:
        gaps: Dict[str, None] = {}

        for record in records:
            response = record.response.lower()

            if "no reliable" in response or "limited options" in response:
                gaps["Market reliability gap"] = None

            if "expensive" in response or "costly" in response:
                gaps["Pricing competitiveness gap"] = None

            if "technology" in record.query and "digital" not in response:
                gaps["Technology adoption gap"] = None

        return list(gaps)

    def _identify_opportunities(
        self,
        directdrive: CompetitorProfile,
        competitors: List[CompetitorProfile],
    ) -> List[str]:
        opportunities = []

        if directdrive.market_share < 10:
            opportunities.append("Significant market share growth potential")

        if directdrive.average_position > 3:
            opportunities.append("Improve AI visibility and ranking")

        competitor_weaknesses = dict.fromkeys(w for c in competitors for w in c.weaknesses)
        for weakness in competitor_weaknesses:
            if weakness not in directdrive.weaknesses:
                opportunities.append(f"Capitalize on competitor {weakness.lower()}")

        for strength in directdrive.strengths:
            opportunities.append(f"Leverage {strength.lower()} advantage")

        return opportunities

    def _identify_threats(self, competitors: List[CompetitorProfile]) -> List[str]:
        threats = []

        for competitor in competitors[:self.threat_limit]:
            if competitor.market_share > 20:
                threats.append(f"{competitor.name} market dominance")
            if competitor.average_position <= 2:
                threats.append(f"{competitor.name} high AI visibility")

        return threats

    def _generate_recommendations(
        self,
        directdrive: CompetitorProfile,
        competitors: List[CompetitorProfile],
        opportunities: List[str],
    ) -> List[str]:
        recommendations = []

        if directdrive.average_position > self.LOW_VISIBILITY_POSITION:
            recommendations.append("Increase high-quality content production targeting key logistics queries")

        top_competitor = competitors[0] if competitors else None
        if top_competitor and top_competitor.market_share > directdrive.market_share * 2:
            recommendations.append(f"Study and differentiate from {top_competitor.name} market approach")

        for strength in directdrive.strengths:
            recommendations.append(f"Amplify {strength.lower()} in content and messaging")

        for weakness in directdrive.weaknesses:
            if weakness == "Brand awareness":
                recommendations.append(
                    f"Implement targeted brand awareness campaign in {self.keyword_set.region} market"
                )
            elif weakness in self.WEAKNESS_MITIGATIONS:
                recommendations.append(self.WEAKNESS_MITIGATIONS[weakness])

        for opportunity in opportunities:
            if "growth potential" in opportunity:
                recommendations.append("Develop market penetration strategy focusing on underserved segments")

        return recommendations
