from __future__ import annotations

import re

from app.core.config.scoring import get_scoring_int
from app.schemas.resume import Education
from app.segmentation.segmenter import DocumentSegments
from app.taxonomy.vocabulary import (
    DEFAULT_DEGREE,
    DEFAULT_FIELD,
    DEGREE_KEYWORDS,
    EDUCATION_KEYWORDS,
    FIELD_KEYWORDS,
)

from .utils import contains_any, first_year

_GPA_RE = re.compile(r"gpa[:\s]*(\d+\.?\d*)", re.IGNORECASE)


def _degree_pattern(keyword: str) -> re.Pattern[str]:
    # Short abbreviations need both word boundaries ("ms" must not fire inside
    # "systems"); full words keep plurals such as "Masters".
    suffix = r"\b" if len(keyword) <= 3 else ""
    return re.compile(rf"\b{re.escape(keyword)}{suffix}", re.IGNORECASE)


_DEGREE_PATTERNS = tuple((keyword, _degree_pattern(keyword)) for keyword in DEGREE_KEYWORDS)


def extract_degree(line: str) -> str:
    for keyword, pattern in _DEGREE_PATTERNS:
        if pattern.search(line):
            return keyword.capitalize()
    return DEFAULT_DEGREE


def extract_field(line: str) -> str:
    lowered = line.lower()
    for field_name in FIELD_KEYWORDS:
        if field_name in lowered:
            return field_name
    return DEFAULT_FIELD


def extract_gpa(line: str) -> str:
    match = _GPA_RE.search(line)
    return match.group(1) if match else ""


def build_education(line: str) -> Education:
    institution = line.split(",")[0].strip() or line
    return Education(
        institution=institution,
        degree=extract_degree(line),
        field=extract_field(line),
        graduation_year=first_year(line),
        gpa=extract_gpa(line),
    )


def extract_education(segments: DocumentSegments) -> list[Education]:
    """Education records from the education sections plus any line that names
    a degree or institution, wherever it sits in the document."""
    min_chars = get_scoring_int("extraction.education_min_chars", 10)
    header_indices = {segment.start - 1 for segment in segments.segments}
    education_indices: set[int] = set()
    for segment in segments.segments:
        if segment.section == "education":
            education_indices.update(range(segment.start, segment.end))

    records: list[Education] = []
    for index, line in enumerate(segments.lines):
        if index in header_indices:
            continue
        if index not in education_indices and not contains_any(line, EDUCATION_KEYWORDS):
            continue
        if len(line) <= min_chars:
            continue
        records.append(build_education(line))
    return records
