"""
Domain models: enumerations and the keyword registry
"""

from .enums import Language, SentimentPolarity, MonitoringFrequency, MatchType
from .keyword_set import (
    KeywordSet,
    LanguageProfile,
    SubstitutionRule,
    ScheduledQuery,
    build_keyword_set,
    load_keyword_set,
    get_keyword_set,
    compile_ranking_pattern,
    DEFAULT_LEXICON_PATH,
)

__all__ = [
    "Language",
    "SentimentPolarity",
    "MonitoringFrequency",
    "MatchType",
    "KeywordSet",
    "LanguageProfile",
    "SubstitutionRule",
    "ScheduledQuery",
    "build_keyword_set",
    "load_keyword_set",
    "get_keyword_set",
    "compile_ranking_pattern",
    "DEFAULT_LEXICON_PATH",
]
