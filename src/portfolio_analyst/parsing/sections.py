"""Anchor-header vocabulary and section slicing for model replies."""

from __future__ import annotations

import re
from enum import StrEnum


class Section(StrEnum):
    """Sections the analysis prompt asks the model to produce."""

    EXECUTIVE_SUMMARY = "EXECUTIVE SUMMARY"
    DETAILED_ANALYSIS = "DETAILED ANALYSIS"
    STOCK_RECOMMENDATIONS = "INDIVIDUAL STOCK RECOMMENDATIONS"
    RISK_ASSESSMENT = "RISK ASSESSMENT"
    MARKET_CONDITIONS = "MARKET CONDITIONS ANALYSIS"
    PERFORMANCE_ANALYSIS = "PERFORMANCE ANALYSIS"

    @property
    def header(self) -> str:
        """Exact header token, including the trailing colon."""

        return f"{self.value}:"


ANCHOR_HEADERS: tuple[str, ...] = tuple(section.header for section in Section)

# Title patterns accepted for each section. Markdown emphasis between the title
# and the colon is tolerated ("**RISK ASSESSMENT**:"). The short aliases of the
# two longest titles only count at the start of a line, so prose such as
# "given current market conditions:" does not open a section.
_TITLE_PATTERNS: dict[Section, str] = {
    Section.EXECUTIVE_SUMMARY: r"\bEXECUTIVE\s+SUMMARY",
    Section.DETAILED_ANALYSIS: r"\bDETAILED\s+ANALYSIS",
    Section.STOCK_RECOMMENDATIONS: (
        r"\bINDIVIDUAL\s+STOCK\s+RECOMMENDATIONS|^[ \t*_#]*STOCK\s+RECOMMENDATIONS"
    ),
    Section.RISK_ASSESSMENT: r"\bRISK\s+ASSESSMENT",
    Section.MARKET_CONDITIONS: (
        r"\bMARKET\s+CONDITIONS\s+ANALYSIS|^[ \t*_#]*MARKET\s+CONDITIONS"
    ),
    Section.PERFORMANCE_ANALYSIS: r"\bPERFORMANCE\s+ANALYSIS",
}

_HEADER_RE = re.compile(
    "|".join(
        rf"(?P<{section.name}>{pattern})[ \t*_#]*:"
        for section, pattern in _TITLE_PATTERNS.items()
    ),
    re.IGNORECASE | re.MULTILINE,
)


def header_starts(text: str) -> list[int]:
    """Return the offsets at which recognised headers begin, in text order."""

    return [match.start() for match in _HEADER_RE.finditer(text)]


def extract_sections(text: str) -> dict[Section, str]:
    """Split ``text`` into trimmed section bodies keyed by section.

    The first occurrence of a header wins; its body runs until the next
    recognised header of any kind or the end of the text. Sections whose
    header never appears are absent from the mapping.
    """

    matches = list(_HEADER_RE.finditer(text))
    sections: dict[Section, str] = {}
    for index, match in enumerate(matches):
        section = next(candidate for candidate in Section if match.group(candidate.name))
        if section in sections:
            continue
        end = matches[index + 1].start() if index + 1 < len(matches) else len(text)
        sections[section] = text[match.end() : end].strip()
    return sections


def section_content(text: str, section: Section) -> str:
    """Return the body of ``section`` or an empty string when it is missing."""

    return extract_sections(text).get(section, "")


__all__ = [
    "ANCHOR_HEADERS",
    "Section",
    "extract_sections",
    "header_starts",
    "section_content",
]
