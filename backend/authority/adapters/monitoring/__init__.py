"""
Model Response Adapters - one shared detector, per-model calibration
"""

from typing import Dict, Mapping, Optional, Sequence

from authority.adapters.parsing import CitationDetector
from authority.models import KeywordSet
from .base import MonitoringProfile, MonitoringResult, ResponseAnalyzer
from .profiles import get_monitoring_profiles, load_monitoring_profiles


def get_response_analyzer(
    model: str,
    keyword_set: Optional[KeywordSet] = None,
) -> ResponseAnalyzer:
    """
    Factory function to get the analyzer for an AI model.

    Args:
        model: One of "chatgpt", "google-ai", "perplexity"
        keyword_set: Optional lexicon override

    Returns:
        ResponseAnalyzer calibrated for the model

    Raises:
        ValueError: If the model has no profile
    """
    profiles = get_monitoring_profiles()
    if model not in profiles:
        raise ValueError(f"Unsupported model: {model}. Must be one of {list(profiles.keys())}")

    profile = profiles[model]
    detector = CitationDetector(keyword_set, thresholds=profile.thresholds) if keyword_set else None
    return ResponseAnalyzer(profile, detector=detector)


def analyze_all_models(
    query: str,
    responses: Mapping[str, str],
    sources: Optional[Mapping[str, Sequence[str]]] = None,
) -> Dict[str, MonitoringResult]:
    """
    Analyze one query's answers from several models.

    Args:
        query: Monitoring query
        responses: {model: response_text}
        sources: Optional {model: source URLs} for models that return them

    Returns:
        {model: MonitoringResult}
    """
    sources = sources or {}
    return {
        model: get_response_analyzer(model).analyze(query, text, sources.get(model))
        for model, text in responses.items()
    }


__all__ = [
    # Factory
    "get_response_analyzer",
    "analyze_all_models",
    # Profiles
    "MonitoringProfile",
    "get_monitoring_profiles",
    "load_monitoring_profiles",
    # Analysis
    "MonitoringResult",
    "ResponseAnalyzer",
]
