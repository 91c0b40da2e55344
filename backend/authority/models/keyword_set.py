"""
Keyword Registry
Immutable multilingual lexicon of target names, competitors and ranking patterns
"""

import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Pattern, Tuple, Union

import yaml

from authority.config import get_settings
from authority.models.enums import Language, MonitoringFrequency
from authority.utils.validation import LexiconError

logger = logging.getLogger(__name__)

DEFAULT_LEXICON_PATH = Path(__file__).parent.parent / "data" / "lexicon.yaml"


@dataclass(frozen=True)
class SubstitutionRule:
    """Trigger word and the terms it expands to"""
    trigger: str
    terms: Tuple[str, ...]
    case_sensitive: bool = False

    def matches(self, query: str) -> bool:
        if self.case_sensitive:
            return self.trigger in query
        return self.trigger.lower() in query.lower()


@dataclass(frozen=True)
class LanguageProfile:
    """Per-language detection and query-variation data"""
    language: Language
    priority: int
    strategy: str                                # "substitute" or "translate"
    ranking_indicators: Tuple[Pattern, ...]      # index i -> rank i + 1
    substitutions: Tuple[SubstitutionRule, ...]
    templates: Tuple[str, ...]
    related_terms: Tuple[str, ...]
    query_corpus: Tuple[str, ...]


@dataclass(frozen=True)
class ScheduledQuery:
    query: str
    frequency: MonitoringFrequency
    language: str


@dataclass(frozen=True)
class KeywordSet:
    """
    Process-wide lexicon. Built once by get_keyword_set() and passed to
    every component that needs it.
    """
    target_name: str
    target_keywords: Tuple[str, ...]
    target_variations: Tuple[str, ...]
    target_full_names: Tuple[str, ...]
    competitor_names: Tuple[str, ...]
    languages: Mapping[Language, LanguageProfile]
    region: str = "Kurdistan"
    high_priority_queries: Tuple[str, ...] = ()
    schedule: Tuple[ScheduledQuery, ...] = ()
    version: str = "1.0.0"
    _lowered_full_names: frozenset = field(default=frozenset(), repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(
            self, "_lowered_full_names", frozenset(n.lower() for n in self.target_full_names)
        )

    @property
    def all_target_keywords(self) -> Tuple[str, ...]:
        return self.target_keywords + self.target_variations

    def is_full_name(self, keyword: str) -> bool:
        return keyword.lower() in self._lowered_full_names

    def profile(self, language: Union[Language, str]) -> LanguageProfile:
        lang = Language.parse(language)
        try:
            return self.languages[lang]
        except KeyError:
            raise LexiconError(f"Lexicon has no profile for language {lang.value}") from None

    def ranking_indicators(self, language: Union[Language, str]) -> Tuple[Pattern, ...]:
        return self.profile(language).ranking_indicators

    def regional_query_corpus(self, language: Union[Language, str]) -> Tuple[str, ...]:
        return self.profile(language).query_corpus


def compile_ranking_pattern(alternatives: List[str]) -> Pattern:
    """
    Build one rank's pattern from its literal alternatives.
    Lookarounds are used instead of \\b so tokens like "#1" still anchor.
    """
    escaped = [re.escape(str(a)) for a in alternatives]
    return re.compile(r"(?<!\w)(?:" + "|".join(escaped) + r")(?!\w)", re.IGNORECASE)


def _require(data: Mapping[str, Any], key: str, source: str) -> Any:
    if key not in data or data[key] is None:
        raise LexiconError(f"Lexicon {source} is missing required key '{key}'")
    return data[key]


def _build_language_profile(language: Language, data: Mapping[str, Any], source: str) -> LanguageProfile:
    strategy = data.get("strategy", "translate")
    if strategy not in ("substitute", "translate"):
        raise LexiconError(f"Lexicon {source}: unknown strategy '{strategy}' for {language.value}")

    rules = tuple(
        SubstitutionRule(
            trigger=str(rule["trigger"]),
            terms=tuple(str(t) for t in rule.get("terms", [])),
            case_sensitive=bool(rule.get("case_sensitive", False)),
        )
        for rule in data.get("substitutions", [])
    )

    return LanguageProfile(
        language=language,
        priority=int(_require(data, "priority", source)),
        strategy=strategy,
        ranking_indicators=tuple(
            compile_ranking_pattern(alts) for alts in _require(data, "ranking_indicators", source)
        ),
        substitutions=rules,
        templates=tuple(str(t) for t in data.get("templates", [])),
        related_terms=tuple(str(t).lower() for t in data.get("related_terms", [])),
        query_corpus=tuple(str(q) for q in data.get("query_corpus", [])),
    )


def build_keyword_set(data: Mapping[str, Any], source: str = "<memory>") -> KeywordSet:
    """Build a KeywordSet from already-parsed lexicon data"""
    if not isinstance(data, Mapping):
        raise LexiconError(f"Lexicon {source} must be a mapping at the top level")

    target = _require(data, "target", source)
    languages: Dict[Language, LanguageProfile] = {}
    for name, lang_data in _require(data, "languages", source).items():
        language = Language.parse(name)
        languages[language] = _build_language_profile(language, lang_data, source)

    if Language.ENGLISH not in languages:
        raise LexiconError(f"Lexicon {source} must define an english profile")

    monitoring = data.get("monitoring") or {}
    schedule = []
    for frequency in MonitoringFrequency:
        for entry in (monitoring.get("schedule") or {}).get(frequency.value, []):
            schedule.append(ScheduledQuery(
                query=str(entry["query"]),
                frequency=frequency,
                language=str(entry.get("language", "english")),
            ))

    return KeywordSet(
        target_name=str(_require(target, "name", source)),
        target_keywords=tuple(str(k) for k in _require(target, "keywords", source)),
        target_variations=tuple(str(k) for k in target.get("variations", [])),
        target_full_names=tuple(str(k) for k in target.get("full_names", [])),
        competitor_names=tuple(str(c) for c in data.get("competitors", [])),
        languages=MappingProxyType(languages),
        region=str(data.get("region", "Kurdistan")),
        high_priority_queries=tuple(str(q) for q in monitoring.get("high_priority", [])),
        schedule=tuple(schedule),
        version=str(data.get("version", "1.0.0")),
    )


def load_keyword_set(path: Optional[Union[str, Path]] = None) -> KeywordSet:
    """Load a lexicon YAML file"""
    lexicon_path = Path(path) if path else DEFAULT_LEXICON_PATH
    if not lexicon_path.exists():
        raise LexiconError(f"Lexicon file {lexicon_path} not found")

    with open(lexicon_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise LexiconError(f"Lexicon file {lexicon_path} is not valid YAML: {e}") from e

    keyword_set = build_keyword_set(data, source=str(lexicon_path))
    logger.debug(
        f"Loaded lexicon {keyword_set.version} from {lexicon_path.name}: "
        f"{len(keyword_set.all_target_keywords)} target keywords, "
        f"{len(keyword_set.competitor_names)} competitors, "
        f"{len(keyword_set.languages)} languages"
    )
    return keyword_set


@lru_cache()
def get_keyword_set() -> KeywordSet:
    """Cached process-wide lexicon"""
    return load_keyword_set(get_settings().LEXICON_PATH)
