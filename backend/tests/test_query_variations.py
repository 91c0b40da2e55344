"""
Query variation generator tests.
"""

import pytest

from authority.models import Language, MonitoringFrequency
from authority.utils.validation import InvalidInputError


class TestGenerateVariations:
    def test_languages_follow_lexicon_order(self, generator):
        query_set = generator.generate_variations("best logistics company Kurdistan")
        assert [v.language for v in query_set.variations] == [
            Language.ENGLISH,
            Language.ARABIC,
            Language.KURDISH,
            Language.FARSI,
        ]
        assert [v.priority for v in query_set.variations] == [1, 2, 2, 3]
        assert all(v.region == "Kurdistan" for v in query_set.variations)
        assert all(v.original == "best logistics company Kurdistan" for v in query_set.variations)

    def test_english_substitutions_and_templates(self, generator):
        query_set = generator.generate_variations("best logistics company Kurdistan")
        english = query_set.variations[0].variations

        # Case-sensitive regional substitution keeps the original casing
        assert "best logistics company Kurdistan Region" in english
        assert "best logistics company KRG" in english
        # Case-insensitive service substitution works on the lowercased query
        assert "best shipping company kurdistan" in english
        assert "best logistics provider kurdistan" in english
        assert "What is the best best logistics company Kurdistan?" in english
        assert "Reliable best logistics company Kurdistan options" in english
        assert len(english) == 16

    def test_variations_exclude_the_original(self, generator):
        query_set = generator.generate_variations("best logistics company Kurdistan")
        for variation in query_set.variations:
            assert "best logistics company Kurdistan" not in variation.variations

    def test_variations_are_unique(self, generator):
        query_set = generator.generate_variations("shipping services Erbil")
        for variation in query_set.variations:
            assert len(variation.variations) == len(set(variation.variations))

    def test_arabic_renders_triggers_and_corpus(self, generator):
        query_set = generator.generate_variations("shipping services Erbil")
        arabic = next(v for v in query_set.variations if v.language == Language.ARABIC)
        assert "أفضل الشحن في كردستان" in arabic.variations
        assert "أربيل موثوقة في أربيل" in arabic.variations
        assert "أفضل شركة شحن في كردستان" in arabic.variations

    def test_total_queries_is_the_sum(self, generator):
        query_set = generator.generate_variations("Kurdistan freight services")
        assert query_set.total_queries == sum(len(v.variations) for v in query_set.variations)
        assert query_set.total_queries > 0

    def test_unrelated_query_gets_english_templates_only(self, generator):
        query_set = generator.generate_variations("weather forecast")
        assert [v.language for v in query_set.variations] == [Language.ENGLISH]
        assert query_set.variations[0].variations == [
            "What is the best weather forecast?",
            "Who provides weather forecast?",
            "Top weather forecast recommendations",
            "Reliable weather forecast options",
        ]
        assert query_set.total_queries == 4

    def test_non_string_query_fails_fast(self, generator):
        with pytest.raises(InvalidInputError):
            generator.generate_variations(None)


class TestQueryCatalogs:
    def test_all_query_sets_cover_english_corpus(self, generator, keyword_set):
        query_sets = generator.get_all_query_sets()
        assert len(query_sets) == len(keyword_set.regional_query_corpus(Language.ENGLISH))
        assert "english_best_logistics_company_Kurdistan" in query_sets
        assert query_sets["english_DirectDrive_logistics"].base_query == "DirectDrive logistics"

    def test_high_priority_queries_are_multilingual(self, generator):
        queries = generator.get_high_priority_queries()
        assert queries[0] == "best logistics company Kurdistan"
        assert "أفضل شركة شحن في كردستان" in queries
        assert len(queries) == 9

    def test_monitoring_schedule(self, generator):
        schedule = generator.generate_monitoring_schedule()
        daily = [e for e in schedule if e.frequency == MonitoringFrequency.DAILY]
        weekly = [e for e in schedule if e.frequency == MonitoringFrequency.WEEKLY]
        monthly = [e for e in schedule if e.frequency == MonitoringFrequency.MONTHLY]

        assert [e.query for e in daily] == [
            "best logistics company Kurdistan",
            "DirectDrive logistics",
            "shipping services Erbil",
        ]
        assert {e.language for e in weekly} == {"arabic", "kurdish", "english"}
        assert len(monthly) == 3
        assert len(schedule) == 10
