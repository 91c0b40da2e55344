"""
Source Extractor
Pulls the source URLs an AI model attached to its answer
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence
from urllib.parse import urlparse

from authority.utils.validation import require_text


@dataclass
class ExtractedSource:
    """A source URL found in, or attached to, a response"""
    url: str
    domain: str                  # Normalized domain
    anchor_text: Optional[str]   # Link text for markdown links
    context_snippet: str         # Surrounding context
    position: int                # Order in response (1-indexed)
    is_valid_url: bool           # Syntactically valid
    is_suspicious: bool = False  # Placeholder domain, likely hallucinated


class SourceExtractor:
    """
    Extracts URLs from responses.
    Handles markdown links, bare URLs and numbered reference lists.
    """

    CONTEXT_WINDOW = 100

    MARKDOWN_LINK_PATTERN = re.compile(r"\[([^\]]+)\]\((https?://[^)]+)\)")
    PLAIN_URL_PATTERN = re.compile(r"https?://[^\s<>\"')\]]+|(?<![/@])www\.[^\s<>\"')\]]+")

    # Domains models commonly invent
    SUSPICIOUS_DOMAINS = [
        "example.com",
        "placeholder.com",
        "yoursite.com",
        "company.com",
        "brandname.com",
    ]

    def _normalize_domain(self, url: str) -> str:
        """Extract and normalize domain from URL"""
        try:
            domain = urlparse(url).netloc.lower()
        except ValueError:
            return ""

        if domain.startswith("www."):
            domain = domain[4:]
        if ":" in domain:
            domain = domain.split(":")[0]

        return domain

    def _get_context(self, text: str, start: int, end: int) -> str:
        """Extract context around a source"""
        context_start = max(0, start - self.CONTEXT_WINDOW)
        context_end = min(len(text), end + self.CONTEXT_WINDOW)

        context = text[context_start:context_end]

        if context_start > 0:
            context = "..." + context
        if context_end < len(text):
            context = context + "..."

        return context.strip()

    def _clean_url(self, url: str) -> str:
        """Strip trailing punctuation and add a scheme to www. URLs"""
        url = re.sub(r"[.,;:!?'\")\]]+$", "", url.strip())
        if url.startswith("www."):
            url = "https://" + url
        return url

    def _is_valid_url(self, url: str) -> bool:
        try:
            result = urlparse(url)
        except ValueError:
            return False
        return bool(result.scheme and result.netloc)

    def _build_source(
        self,
        url: str,
        position: int,
        context: str,
        anchor_text: Optional[str] = None,
    ) -> ExtractedSource:
        domain = self._normalize_domain(url)
        return ExtractedSource(
            url=url,
            domain=domain,
            anchor_text=anchor_text,
            context_snippet=context,
            position=position,
            is_valid_url=self._is_valid_url(url),
            is_suspicious=domain in self.SUSPICIOUS_DOMAINS,
        )

    def extract_sources(self, text: str) -> List[ExtractedSource]:
        """
        Extract all source URLs from text, markdown links first.

        Args:
            text: Response text

        Returns:
            List of ExtractedSource, deduplicated by URL
        """
        require_text(text)
        sources = []
        found_urls = set()
        covered = []

        for match in self.MARKDOWN_LINK_PATTERN.finditer(text):
            covered.append(match.span())
            url = self._clean_url(match.group(2))
            if url in found_urls:
                continue
            found_urls.add(url)
            sources.append(self._build_source(
                url,
                len(sources) + 1,
                self._get_context(text, match.start(), match.end()),
                anchor_text=match.group(1),
            ))

        for match in self.PLAIN_URL_PATTERN.finditer(text):
            if any(s <= match.start() < e for s, e in covered):
                continue
            url = self._clean_url(match.group())
            if url in found_urls:
                continue
            found_urls.add(url)
            sources.append(self._build_source(
                url,
                len(sources) + 1,
                self._get_context(text, match.start(), match.end()),
            ))

        return sources

    def extract_listed_sources(self, text: str, urls: Sequence[str]) -> List[ExtractedSource]:
        """
        Sources returned as a separate list and referenced in the text
        as [1], [2], ...

        Args:
            text: Response text
            urls: URLs in reference order

        Returns:
            List of ExtractedSource, one per URL
        """
        require_text(text)
        sources = []

        for i, raw_url in enumerate(urls, 1):
            url = self._clean_url(require_text(raw_url, "source url"))
            ref_match = re.search(rf"\[{i}\]", text)
            context = self._get_context(text, ref_match.start(), ref_match.end()) if ref_match else ""
            sources.append(self._build_source(url, i, context))

        return sources
