from __future__ import annotations

from app.core.config.scoring import get_scoring_int
from app.segmentation.segmenter import DocumentSegments


def extract_certifications(segments: DocumentSegments) -> list[str]:
    min_chars = get_scoring_int("extraction.certification_min_chars", 5)
    return [line for line in segments.lines_for("certifications") if len(line) > min_chars]
