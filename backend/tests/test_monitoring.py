"""
Model response adapter tests.
"""

import pytest

from authority.adapters.monitoring import (
    MonitoringProfile,
    ResponseAnalyzer,
    analyze_all_models,
    get_monitoring_profiles,
    get_response_analyzer,
    load_monitoring_profiles,
)
from authority.adapters.parsing import PositionThresholds
from authority.models import Language
from authority.utils.validation import InvalidInputError, LexiconError


# Target at 18% of the text with no ranking signal
OFFSET_ONLY = "x" * 17 + " DirectDrive " + "z" * 70


class TestProfiles:
    def test_builtin_models(self):
        assert set(get_monitoring_profiles()) == {"chatgpt", "google-ai", "perplexity"}

    @pytest.mark.parametrize("model,cutoffs,language", [
        ("chatgpt", (0.2, 0.4, 0.6, 0.8), Language.ENGLISH),
        ("google-ai", (0.15, 0.35, 0.55, 0.75), Language.ARABIC),
        ("perplexity", (0.1, 0.25, 0.5, 0.75), Language.ENGLISH),
    ])
    def test_calibration(self, model, cutoffs, language):
        profile = get_monitoring_profiles()[model]
        assert profile.thresholds.cutoffs == cutoffs
        assert profile.language == language

    def test_curated_prompt(self):
        profile = get_monitoring_profiles()["chatgpt"]
        assert profile.build_prompt("DirectDrive logistics") == (
            "Tell me about DirectDrive logistics company. What services do they offer?"
        )

    def test_fallback_prompt(self):
        profile = get_monitoring_profiles()["perplexity"]
        prompt = profile.build_prompt("cold storage Duhok")
        assert prompt.startswith("Please provide current, factual information about cold storage Duhok.")

    def test_google_ai_has_no_system_prompt(self):
        assert get_monitoring_profiles()["google-ai"].system_prompt is None

    def test_missing_profiles_file(self, tmp_path):
        with pytest.raises(LexiconError):
            load_monitoring_profiles(tmp_path / "absent.yaml")

    def test_profile_needs_thresholds(self, tmp_path):
        path = tmp_path / "profiles.yaml"
        path.write_text("profiles:\n  bard:\n    fallback_prompt: '{query}'\n", encoding="utf-8")
        with pytest.raises(LexiconError):
            load_monitoring_profiles(path)


class TestResponseAnalyzer:
    def test_unknown_model(self):
        with pytest.raises(ValueError):
            get_response_analyzer("claude-9")

    def test_thresholds_differ_per_model(self):
        assert get_response_analyzer("chatgpt").analyze("q", OFFSET_ONLY).position == 1
        assert get_response_analyzer("perplexity").analyze("q", OFFSET_ONLY).position == 2
        assert get_response_analyzer("google-ai").analyze("q", OFFSET_ONLY).position == 2

    def test_cited_result(self):
        result = get_response_analyzer("chatgpt").analyze(
            "best logistics company Kurdistan",
            "DirectDrive Logistics is the top choice in Erbil.",
        )
        assert result.cited is True
        assert result.position == 1
        assert "DirectDrive" in result.citation_context
        assert result.analysis.mention_count == 2
        assert result.sources == []

    def test_uncited_result_has_no_context(self):
        result = get_response_analyzer("chatgpt").analyze("q", "Erbil Transport Company is fine.")
        assert result.cited is False
        assert result.citation_context is None
        assert result.position is None
        assert result.response_text == "Erbil Transport Company is fine."

    def test_sources_extracted_from_text(self):
        text = "DirectDrive Logistics [site](https://directdrive.com/about) ranks well."
        result = get_response_analyzer("chatgpt").analyze("q", text)
        assert result.sources == ["https://directdrive.com/about"]

    def test_listed_sources(self):
        result = get_response_analyzer("perplexity").analyze(
            "q",
            "DirectDrive Logistics is trusted [1].",
            sources=["https://directdrive.com/about", "https://krg.org/transport."],
        )
        assert result.sources == ["https://directdrive.com/about", "https://krg.org/transport"]

    def test_empty_source_list_uses_links_in_text(self):
        text = "DirectDrive Logistics [site](https://directdrive.com/about) ranks well."
        result = get_response_analyzer("perplexity").analyze("q", text, sources=[])
        assert result.sources == ["https://directdrive.com/about"]

    def test_non_string_response(self):
        with pytest.raises(InvalidInputError):
            get_response_analyzer("chatgpt").analyze("q", None)

    def test_custom_keyword_set(self, keyword_set):
        analyzer = get_response_analyzer("chatgpt", keyword_set=keyword_set)
        assert analyzer.detector.keyword_set is keyword_set
        assert analyzer.detector.thresholds.cutoffs == (0.2, 0.4, 0.6, 0.8)

    def test_citation_record(self):
        analyzer = get_response_analyzer("google-ai")
        result = analyzer.analyze("q", "1. DirectDrive Logistics\n2. Baghdad Express")
        record = analyzer.create_citation_record("q", result, content_id=7)
        assert record == {
            "content_id": 7,
            "ai_model": "google-ai",
            "query_text": "q",
            "cited": True,
            "citation_context": result.citation_context,
            "position": 1,
        }

    def test_explicit_profile(self, detector):
        profile = MonitoringProfile(
            model="local",
            thresholds=PositionThresholds((0.5,)),
            language=Language.ENGLISH,
            fallback_prompt="Tell me about {query}",
        )
        analyzer = ResponseAnalyzer(profile, detector=detector)
        assert analyzer.model == "local"
        assert analyzer.analyze("q", "z" * 80 + " DirectDrive").position == 2
        assert profile.build_prompt("freight") == "Tell me about freight"


class TestAnalyzeAllModels:
    def test_one_result_per_model(self):
        results = analyze_all_models("q", {"chatgpt": OFFSET_ONLY, "perplexity": OFFSET_ONLY})
        assert set(results) == {"chatgpt", "perplexity"}
        assert results["chatgpt"].position == 1
        assert results["perplexity"].position == 2

    def test_sources_per_model(self):
        results = analyze_all_models(
            "q",
            {"chatgpt": "No mention here.", "perplexity": "DirectDrive [1]"},
            sources={"perplexity": ["https://directdrive.com"]},
        )
        assert results["perplexity"].sources == ["https://directdrive.com"]
        assert results["chatgpt"].sources == []

    def test_unknown_model_in_batch(self):
        with pytest.raises(ValueError):
            analyze_all_models("q", {"gemini-ultra": "text"})
