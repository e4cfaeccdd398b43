from __future__ import annotations

import re

from app.segmentation.segmenter import DocumentSegments
from app.taxonomy.vocabulary import SKILL_VOCABULARY

from .utils import keywords_in, strip_bullet_prefix, strip_inline_label

_SKILL_DELIMITER_RE = re.compile(r"[,;•·|]")


def vocabulary_skills(text: str) -> list[str]:
    return keywords_in(text, SKILL_VOCABULARY)


def section_skills(lines: list[str]) -> list[str]:
    tokens: list[str] = []
    for line in lines:
        cleaned = strip_inline_label(strip_bullet_prefix(line))
        for token in _SKILL_DELIMITER_RE.split(cleaned):
            token = token.strip()
            if len(token) > 1:
                tokens.append(token)
    return tokens


def extract_skills(text: str, segments: DocumentSegments) -> list[str]:
    """Vocabulary hits anywhere in the text plus every listed skills-section token.

    Duplicates are dropped (case-sensitive), first occurrence wins.
    """
    combined = vocabulary_skills(text) + section_skills(segments.lines_for("skills"))
    return list(dict.fromkeys(combined))
