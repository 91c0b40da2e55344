"""
Output schema tests: analysis dataclasses serialize through pydantic.
"""

import pytest

from authority.adapters.monitoring import get_response_analyzer
from authority.schemas import (
    CitationAnalysisSchema,
    CompetitiveMetricsSchema,
    MarketAnalysisSchema,
    MonitoringResultSchema,
    PositionAnalysisSchema,
    QuerySetSchema,
    ScheduleEntrySchema,
)


class TestAnalysisSchemas:
    def test_citation_analysis(self, detector):
        analysis = detector.detect_citation(
            "DirectDrive Logistics is the top choice. Erbil Transport Company is second."
        )
        data = CitationAnalysisSchema.model_validate(analysis).model_dump(mode="json")
        assert data["cited"] is True
        assert data["position"] == 1
        assert data["competitor_mentions"][0]["company"] == "Erbil Transport Company"
        assert data["competitor_mentions"][0]["match_type"] == "exact"

    def test_position_analysis(self, detector):
        position = detector.analyze_competitive_position("DirectDrive alone.")
        data = PositionAnalysisSchema.model_validate(position).model_dump()
        assert data["total_companies"] == 1
        assert data["market_share"] == pytest.approx(100.0)

    def test_market_analysis(self, analyzer):
        analysis = analyzer.analyze_competitive_landscape([
            {"query": "q", "response": "1. Baghdad Express\n2. DirectDrive Logistics"},
        ])
        data = MarketAnalysisSchema.model_validate(analysis).model_dump()
        assert data["directdrive_profile"]["name"] == "DirectDrive Logistics"
        assert [p["name"] for p in data["market_leaders"]] == ["Baghdad Express"]

    def test_competitive_metrics(self, analyzer):
        metrics = analyzer.calculate_competitive_metrics([])
        data = CompetitiveMetricsSchema.model_validate(metrics).model_dump()
        assert data["directdrive_rank"] is None
        assert data["improvement_potential"] == 100

    def test_query_set(self, generator):
        query_set = generator.generate_variations("weather forecast")
        data = QuerySetSchema.model_validate(query_set).model_dump(mode="json")
        assert data["variations"][0]["language"] == "english"
        assert data["total_queries"] == 4

    def test_schedule_entry(self, generator):
        entry = generator.generate_monitoring_schedule()[0]
        data = ScheduleEntrySchema.model_validate(entry).model_dump(mode="json")
        assert data["frequency"] == "daily"

    def test_monitoring_result_omits_response_text(self):
        result = get_response_analyzer("chatgpt").analyze("q", "DirectDrive Logistics is reliable.")
        data = MonitoringResultSchema.model_validate(result).model_dump()
        assert "response_text" not in data
        assert data["analysis"]["cited"] is True
