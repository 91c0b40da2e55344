"""
Query Variation Engine
Expands canonical monitoring queries into regional and multilingual variants
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from authority.models import (
    KeywordSet,
    Language,
    LanguageProfile,
    MonitoringFrequency,
    get_keyword_set,
)
from authority.utils.validation import require_text

logger = logging.getLogger(__name__)


@dataclass
class QueryVariation:
    """Variants of one query in one language"""
    original: str
    variations: List[str]
    language: Language
    priority: int                # Lower number = monitored more often
    region: str


@dataclass
class QuerySet:
    base_query: str
    variations: List[QueryVariation] = field(default_factory=list)
    total_queries: int = 0


@dataclass
class ScheduleEntry:
    query: str
    frequency: MonitoringFrequency
    language: str


class QueryVariationGenerator:
    """
    Generates query variants from the lexicon's per-language tables.

    Strategies:
    - substitute: rewrite the query itself (regional and service synonyms)
      and add question-form templates
    - translate: render matched trigger terms through phrase templates in the
      target language and pull in related corpus queries
    """

    def __init__(self, keyword_set: Optional[KeywordSet] = None):
        self.keyword_set = keyword_set or get_keyword_set()

    def generate_variations(self, base_query: str) -> QuerySet:
        """
        Generate query variations for comprehensive monitoring.

        Args:
            base_query: Canonical query, normally English

        Returns:
            QuerySet with one QueryVariation per language that produced variants
        """
        require_text(base_query, "base_query")
        variations = []

        for language, profile in self.keyword_set.languages.items():
            if profile.strategy == "substitute":
                generated = self._substitute_variations(base_query, profile)
            else:
                generated = self._translated_variations(base_query, profile)

            if generated:
                variations.append(QueryVariation(
                    original=base_query,
                    variations=generated,
                    language=language,
                    priority=profile.priority,
                    region=self.keyword_set.region,
                ))

        total = sum(len(v.variations) for v in variations)
        logger.debug(f"Generated {total} variations for '{base_query}' in {len(variations)} languages")

        return QuerySet(base_query=base_query, variations=variations, total_queries=total)

    def _substitute_variations(self, base_query: str, profile: LanguageProfile) -> List[str]:
        variations: Dict[str, None] = {}
        lowered = base_query.lower()

        for rule in profile.substitutions:
            if not rule.matches(base_query):
                continue
            for term in rule.terms:
                if rule.case_sensitive:
                    variations[base_query.replace(rule.trigger, term, 1)] = None
                else:
                    variations[lowered.replace(rule.trigger.lower(), term, 1)] = None

        for template in profile.templates:
            variations[template.format(query=base_query)] = None

        return [v for v in variations if v != base_query]

    def _translated_variations(self, base_query: str, profile: LanguageProfile) -> List[str]:
        variations: Dict[str, None] = {}

        for rule in profile.substitutions:
            if not rule.matches(base_query):
                continue
            for term in rule.terms:
                for template in profile.templates:
                    variations[template.format(term=term)] = None

        if self._is_related(base_query, profile):
            for query in profile.query_corpus:
                variations[query] = None

        return list(variations)

    def _is_related(self, base_query: str, profile: LanguageProfile) -> bool:
        """Base query names a logistics or region concept known to the language"""
        words = base_query.lower().split()
        return any(term in word for word in words for term in profile.related_terms)

    def get_all_query_sets(self) -> Dict[str, QuerySet]:
        """Variations for every English corpus query, keyed english_<query>"""
        query_sets = {}
        for query in self.keyword_set.regional_query_corpus(Language.ENGLISH):
            key = "english_" + re.sub(r"\s+", "_", query)
            query_sets[key] = self.generate_variations(query)
        return query_sets

    def get_high_priority_queries(self) -> List[str]:
        """Curated multilingual seed set for the most frequent monitoring cadence"""
        return list(self.keyword_set.high_priority_queries)

    def generate_monitoring_schedule(self) -> List[ScheduleEntry]:
        """Static daily / weekly / monthly monitoring table"""
        return [
            ScheduleEntry(query=entry.query, frequency=entry.frequency, language=entry.language)
            for entry in self.keyword_set.schedule
        ]
