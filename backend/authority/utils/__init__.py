"""
Utility modules for the authority engine
"""

from .validation import (
    AnalysisError,
    InvalidInputError,
    UnknownLanguageError,
    LexiconError,
    require_text,
)
from .text import (
    Sentence,
    split_sentences,
    extract_sentence_window,
    is_list_item,
    count_present,
)

__all__ = [
    # Errors
    "AnalysisError",
    "InvalidInputError",
    "UnknownLanguageError",
    "LexiconError",
    "require_text",
    # Text
    "Sentence",
    "split_sentences",
    "extract_sentence_window",
    "is_list_item",
    "count_present",
]
