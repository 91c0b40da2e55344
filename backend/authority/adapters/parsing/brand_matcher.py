"""
Brand Matching Engine
Finds target-company keyword hits and competitor mentions
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Set, Tuple

from rapidfuzz import fuzz, process, utils

from authority.config import get_settings
from authority.models import KeywordSet, MatchType, get_keyword_set
from authority.utils.text import extract_sentence_window


@dataclass
class KeywordHit:
    """One occurrence of a target keyword"""
    keyword: str
    start: int                   # Character offset in the original text
    length: int
    is_variation: bool           # Matched a loose variant, not a primary keyword
    is_full_name: bool           # Matched the full company name

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass
class CompetitorMention:
    """A detected competitor mention"""
    company: str                 # Registered competitor name
    context: str                 # Sentence window around the mention
    confidence: float            # 0.0 - 1.0
    position: Optional[int] = None
    character_offset: int = 0
    match_type: MatchType = MatchType.EXACT


class BrandMatcher:
    """
    Matches the target company and its competitors in text:
    1. Target keywords and variations (case-insensitive substring)
    2. Competitor names (case-insensitive substring of the full name)
    3. Optional fuzzy competitor match for shortened names
    """

    EXACT_CONTEXT_CONFIDENCE = 0.8
    EMPTY_CONTEXT_CONFIDENCE = 0.5

    # Capitalised phrases, kept on one line
    CANDIDATE_PATTERN = re.compile(r"\b[A-Z][a-zA-Z0-9]*(?:[ \t]+[A-Z][a-zA-Z0-9]*)+\b")

    def __init__(
        self,
        keyword_set: Optional[KeywordSet] = None,
        fuzzy: Optional[bool] = None,
        fuzzy_threshold: Optional[int] = None,
    ):
        settings = get_settings()
        self.keyword_set = keyword_set or get_keyword_set()
        self.fuzzy = settings.FUZZY_COMPETITOR_MATCHING if fuzzy is None else fuzzy
        self.fuzzy_threshold = settings.FUZZY_MATCH_THRESHOLD if fuzzy_threshold is None else fuzzy_threshold
        self._build_match_index()

    def _build_match_index(self):
        """Compile one pattern per keyword and per competitor"""
        ks = self.keyword_set
        self._target_patterns: List[Tuple[str, Pattern, bool]] = []
        for keyword in ks.target_keywords:
            self._target_patterns.append((keyword, re.compile(re.escape(keyword), re.IGNORECASE), False))
        for keyword in ks.target_variations:
            self._target_patterns.append((keyword, re.compile(re.escape(keyword), re.IGNORECASE), True))

        self._competitor_patterns: List[Tuple[str, Pattern]] = [
            (name, re.compile(re.escape(name), re.IGNORECASE)) for name in ks.competitor_names
        ]

    def find_target_hits(self, text: str) -> List[KeywordHit]:
        """
        Every occurrence of every target keyword and variation,
        ordered by offset (registry order on ties).
        """
        hits = []
        for keyword, pattern, is_variation in self._target_patterns:
            for match in pattern.finditer(text):
                hits.append(KeywordHit(
                    keyword=keyword,
                    start=match.start(),
                    length=match.end() - match.start(),
                    is_variation=is_variation,
                    is_full_name=self.keyword_set.is_full_name(keyword),
                ))

        hits.sort(key=lambda h: h.start)
        return hits

    def line_has_target(self, line: str) -> bool:
        return any(pattern.search(line) for _, pattern, _ in self._target_patterns)

    def _mention_confidence(self, context: str, scale: float = 1.0) -> float:
        base = self.EXACT_CONTEXT_CONFIDENCE if context else self.EMPTY_CONTEXT_CONFIDENCE
        return base * scale

    def find_competitor_mentions(self, text: str) -> List[CompetitorMention]:
        """
        First occurrence of each registered competitor, in order of
        appearance in the text.
        """
        mentions = []
        for name, pattern in self._competitor_patterns:
            match = pattern.search(text)
            if not match:
                continue
            context = extract_sentence_window(text, match.start())
            mentions.append(CompetitorMention(
                company=name,
                context=context,
                confidence=self._mention_confidence(context),
                character_offset=match.start(),
                match_type=MatchType.EXACT,
            ))

        if self.fuzzy:
            mentions.extend(self._find_fuzzy_mentions(text, mentions))

        mentions.sort(key=lambda m: m.character_offset)
        return mentions

    def _find_fuzzy_mentions(
        self,
        text: str,
        exact_mentions: List[CompetitorMention],
    ) -> List[CompetitorMention]:
        """Shortened competitor names, e.g. "Kurdistan Express" for "Kurdistan Express Logistics" """
        matched: Set[str] = {m.company for m in exact_mentions}
        exclude: List[Tuple[int, int]] = [
            (m.character_offset, m.character_offset + len(m.company)) for m in exact_mentions
        ]
        exclude += [(h.start, h.end) for h in self.find_target_hits(text)]

        names = [n for n in self.keyword_set.competitor_names if n not in matched]
        mentions = []

        for match in self.CANDIDATE_PATTERN.finditer(text):
            if not names:
                break
            start, end = match.span()
            if any(s < end and start < e for s, e in exclude):
                continue

            result = process.extractOne(
                match.group(),
                names,
                scorer=fuzz.token_set_ratio,
                processor=utils.default_process,
                score_cutoff=self.fuzzy_threshold,
            )
            if not result:
                continue

            name, score, _ = result
            context = extract_sentence_window(text, start)
            mentions.append(CompetitorMention(
                company=name,
                context=context,
                confidence=self._mention_confidence(context, score / 100.0),
                character_offset=start,
                match_type=MatchType.FUZZY,
            ))
            names.remove(name)

        return mentions
