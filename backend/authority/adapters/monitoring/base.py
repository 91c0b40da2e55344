"""
Model Response Adapter
Every AI model's answer goes through the shared CitationDetector; per-model
differences are configuration carried by a MonitoringProfile
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from authority.adapters.parsing import (
    CitationAnalysis,
    CitationDetector,
    PositionThresholds,
    SourceExtractor,
)
from authority.models import Language
from authority.utils.validation import require_text


@dataclass(frozen=True)
class MonitoringProfile:
    """Calibration for one AI model"""
    model: str                                   # "chatgpt", "google-ai", "perplexity"
    thresholds: PositionThresholds
    language: Language                           # Language the model is prompted in
    fallback_prompt: str                         # Template with a {query} placeholder
    prompts: Mapping[str, str] = field(default_factory=dict)
    system_prompt: Optional[str] = None

    def build_prompt(self, query: str) -> str:
        """Curated prompt for a known query, the fallback template otherwise"""
        require_text(query, "query")
        return self.prompts.get(query) or self.fallback_prompt.format(query=query)


@dataclass
class MonitoringResult:
    """What a monitoring client reports for one query"""
    cited: bool
    response_text: str
    citation_context: Optional[str] = None
    position: Optional[int] = None
    sources: List[str] = field(default_factory=list)
    analysis: Optional[CitationAnalysis] = None


class ResponseAnalyzer:
    """
    Turns one model's raw answer into a MonitoringResult.
    Detection is delegated to the shared CitationDetector with this
    model's rank thresholds.
    """

    def __init__(
        self,
        profile: MonitoringProfile,
        detector: Optional[CitationDetector] = None,
        source_extractor: Optional[SourceExtractor] = None,
    ):
        self.profile = profile
        self.detector = detector or CitationDetector(thresholds=profile.thresholds)
        self.source_extractor = source_extractor or SourceExtractor()

    @property
    def model(self) -> str:
        return self.profile.model

    def analyze(
        self,
        query: str,
        response_text: str,
        sources: Optional[Sequence[str]] = None,
    ) -> MonitoringResult:
        """
        Analyze a model response.

        Args:
            query: Monitoring query the response answers
            response_text: Raw model output
            sources: Source URLs returned next to the text; when empty, links in the text are used

        Returns:
            MonitoringResult with the full CitationAnalysis attached
        """
        require_text(query, "query")
        require_text(response_text, "response_text")

        analysis = self.detector.detect_citation(
            response_text,
            language=self.profile.language,
            thresholds=self.profile.thresholds,
        )

        if sources:
            extracted = self.source_extractor.extract_listed_sources(response_text, sources)
        else:
            extracted = self.source_extractor.extract_sources(response_text)

        return MonitoringResult(
            cited=analysis.cited,
            response_text=response_text,
            citation_context=analysis.context if analysis.cited else None,
            position=analysis.position,
            sources=[s.url for s in extracted],
            analysis=analysis,
        )

    def create_citation_record(
        self,
        query: str,
        result: MonitoringResult,
        content_id: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Row for the citation store"""
        return {
            "content_id": content_id,
            "ai_model": self.model,
            "query_text": query,
            "cited": result.cited,
            "citation_context": result.citation_context,
            "position": result.position,
        }
