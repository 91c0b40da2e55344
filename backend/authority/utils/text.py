"""
Text helpers shared by the parsing adapters
"""

import re
from dataclasses import dataclass
from typing import List, Optional

SENTENCE_PATTERN = re.compile(r"[^.!?]+")
LIST_MARKER_PATTERN = re.compile(r"^\s*(?:[1-9]\.|[-*•])")


@dataclass(frozen=True)
class Sentence:
    """A sentence and its character span in the source text"""
    text: str     # Trimmed, without the closing punctuation
    start: int
    end: int


def split_sentences(text: str) -> List[Sentence]:
    """
    Split text on runs of . ! ? and drop blank pieces.
    Spans refer to the untrimmed piece so every non-delimiter offset
    falls inside exactly one sentence.
    """
    sentences = []
    for match in SENTENCE_PATTERN.finditer(text):
        stripped = match.group().strip()
        if stripped:
            sentences.append(Sentence(stripped, match.start(), match.end()))
    return sentences


def _sentence_index(sentences: List[Sentence], offset: int) -> Optional[int]:
    for i, sentence in enumerate(sentences):
        if sentence.start <= offset < sentence.end:
            return i
    # Offset sits on a delimiter: use the sentence that follows it
    for i, sentence in enumerate(sentences):
        if sentence.start > offset:
            return i
    return len(sentences) - 1 if sentences else None


def extract_sentence_window(text: str, offset: int) -> str:
    """Sentence containing offset plus at most one neighbour on each side"""
    sentences = split_sentences(text)
    index = _sentence_index(sentences, offset)
    if index is None:
        return ""

    window = sentences[max(0, index - 1):index + 2]
    return ". ".join(s.text for s in window).strip()


def is_list_item(line: str) -> bool:
    """True when a line opens with a numbered (1. - 9.) or bullet marker"""
    return bool(LIST_MARKER_PATTERN.match(line))


def count_present(text: str, words) -> int:
    """Number of distinct words present in text (case-insensitive substring)"""
    lowered = text.lower()
    return sum(1 for word in words if word in lowered)
