from __future__ import annotations

import re
from dataclasses import dataclass, field

from app.core.config.scoring import get_scoring_float, get_scoring_int
from app.taxonomy.vocabulary import SECTION_HEADER_KEYWORDS, SECTION_HEADER_MODIFIERS

_HEADER_TOKEN_RE = re.compile(r"[a-z]+|&")
_INLINE_LABEL_RE = re.compile(r"^\s*([^:]{2,40}):\s*(.*)$")
_DIGIT_RE = re.compile(r"\d")
BULLET_RE = re.compile(r"^\s*(?:[•◦▪▫●○■□·*]\s*|[-–—]\s+)")


@dataclass(frozen=True)
class HeaderMatch:
    section: str
    coverage: float
    inline_content: str = ""


@dataclass(frozen=True)
class SectionSegment:
    """A contiguous run of lines owned by one section; end is exclusive."""

    section: str
    header: str
    start: int
    end: int


@dataclass(frozen=True)
class DocumentSegments:
    lines: tuple[str, ...]
    segments: tuple[SectionSegment, ...] = field(default_factory=tuple)

    def lines_for(self, section: str) -> list[str]:
        collected: list[str] = []
        for segment in self.segments:
            if segment.section == section:
                collected.extend(self.lines[segment.start:segment.end])
        return collected

    def segments_for(self, section: str) -> list[list[str]]:
        return [
            list(self.lines[segment.start:segment.end])
            for segment in self.segments
            if segment.section == section
        ]

    def has_section(self, section: str) -> bool:
        return any(segment.section == section for segment in self.segments)

    @property
    def preamble(self) -> list[str]:
        first_header = self.segments[0].start - 1 if self.segments else len(self.lines)
        return list(self.lines[:max(first_header, 0)])


def split_lines(text: str) -> list[str]:
    """Trimmed, non-blank lines in document order."""
    return [line.strip() for line in (text or "").split("\n") if line.strip()]


def _token_family(token: str) -> str | None:
    for section, stems in SECTION_HEADER_KEYWORDS.items():
        if any(token.startswith(stem) for stem in stems):
            return section
    return None


def _score_header(text: str) -> HeaderMatch | None:
    stripped = text.strip().rstrip(":").strip()
    if not stripped or "@" in stripped or _DIGIT_RE.search(stripped):
        return None
    if len(stripped) > get_scoring_int("segmentation.header_max_chars", 40):
        return None
    if len(stripped.split()) > get_scoring_int("segmentation.header_max_words", 5):
        return None

    tokens = _HEADER_TOKEN_RE.findall(stripped.lower())
    if not tokens:
        return None

    total_letters = sum(len(token) for token in tokens)
    covered_letters = 0
    section: str | None = None
    for token in tokens:
        family = _token_family(token)
        if family is not None:
            covered_letters += len(token)
            # The head noun comes last: "Academic Projects" is a projects header.
            section = family
        elif token in SECTION_HEADER_MODIFIERS:
            covered_letters += len(token)

    if section is None:
        return None
    coverage = covered_letters / total_letters
    if coverage < get_scoring_float("segmentation.header_min_coverage", 0.7):
        return None
    return HeaderMatch(section=section, coverage=coverage)


def classify_header(line: str) -> HeaderMatch | None:
    """Return the section a line opens, or None when it is ordinary content.

    A header must dominate a short line ("Work Experience", "SKILLS:"), or be the
    label of an inline "Skills: Python, SQL" line. A keyword buried in prose
    never counts, and neither does a bulleted line: "• Key project: ..." is
    list content of the section it sits in.
    """
    if BULLET_RE.match(line):
        return None
    match = _score_header(line)
    if match is not None:
        return match

    inline = _INLINE_LABEL_RE.match(line)
    if inline is None:
        return None
    label_match = _score_header(inline.group(1))
    if label_match is None:
        return None
    if label_match.coverage < get_scoring_float("segmentation.inline_label_min_coverage", 1.0):
        return None
    return HeaderMatch(
        section=label_match.section,
        coverage=label_match.coverage,
        inline_content=inline.group(2).strip(),
    )


def segment_document(text: str) -> DocumentSegments:
    """Partition a document's lines into explicit section ranges.

    Every header opens a new segment that runs until the next header of any
    section. Inline header content becomes the first line of its segment.
    """
    lines: list[str] = []
    segments: list[SectionSegment] = []
    open_section: str | None = None
    open_header = ""
    open_start = 0

    def close(end: int) -> None:
        if open_section is not None:
            segments.append(SectionSegment(section=open_section, header=open_header, start=open_start, end=end))

    for line in split_lines(text):
        match = classify_header(line)
        if match is None:
            lines.append(line)
            continue

        close(len(lines))
        lines.append(line)
        open_section = match.section
        open_header = line
        open_start = len(lines)
        if match.inline_content:
            lines.append(match.inline_content)

    close(len(lines))
    return DocumentSegments(lines=tuple(lines), segments=tuple(segments))
