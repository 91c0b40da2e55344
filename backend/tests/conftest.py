"""
Shared fixtures. Run with: pytest
"""

import pytest

from authority.adapters.parsing import BrandMatcher, CitationDetector
from authority.models import load_keyword_set
from authority.services import CompetitiveAnalyzer, QueryVariationGenerator


# ─── Fixtures ────────────────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def keyword_set():
    return load_keyword_set()


@pytest.fixture
def matcher(keyword_set):
    return BrandMatcher(keyword_set, fuzzy=False)


@pytest.fixture
def fuzzy_matcher(keyword_set):
    return BrandMatcher(keyword_set, fuzzy=True, fuzzy_threshold=85)


@pytest.fixture
def detector(keyword_set, matcher):
    return CitationDetector(keyword_set, matcher=matcher)


@pytest.fixture
def analyzer(keyword_set, detector):
    return CompetitiveAnalyzer(keyword_set, detector=detector)


@pytest.fixture
def generator(keyword_set):
    return QueryVariationGenerator(keyword_set)


@pytest.fixture
def minimal_lexicon():
    """Smallest lexicon build_keyword_set accepts"""
    return {
        "version": "0.1.0",
        "region": "Testland",
        "target": {
            "name": "Acme Freight",
            "keywords": ["acme", "acme freight"],
            "full_names": ["acme freight"],
        },
        "competitors": ["Rival Haulage"],
        "languages": {
            "english": {
                "priority": 1,
                "strategy": "substitute",
                "ranking_indicators": [["first", "top"], ["second"]],
                "substitutions": [{"trigger": "freight", "terms": ["cargo"]}],
                "templates": ["Who offers {query}?"],
                "query_corpus": ["freight Testland"],
            },
        },
    }
