"""
Input contracts and error types for the analysis core
"""

from typing import Any


class AnalysisError(Exception):
    """Base exception for the analysis core"""
    pass


class InvalidInputError(AnalysisError, TypeError):
    """An operation was called with input that violates its contract"""
    pass


class UnknownLanguageError(AnalysisError, ValueError):
    """Language has no lexicon profile"""
    pass


class LexiconError(AnalysisError, ValueError):
    """Lexicon file is missing or malformed"""
    pass


def require_text(value: Any, name: str = "text") -> str:
    """Return value if it is a string, raise InvalidInputError otherwise"""
    if not isinstance(value, str):
        raise InvalidInputError(f"{name} must be a str, got {type(value).__name__}")
    return value
