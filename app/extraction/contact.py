from __future__ import annotations

import re

from app.core.config.scoring import get_scoring_int
from app.segmentation.segmenter import split_lines
from app.taxonomy.vocabulary import NAME_NOT_FOUND

EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
PHONE_RE = re.compile(r"(\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
_DIGIT_RUN_RE = re.compile(r"\d{3}")


def extract_name(text: str) -> str:
    """First plausible name among the opening lines, else the sentinel."""
    scan_lines = get_scoring_int("extraction.name_scan_lines", 5)
    min_chars = get_scoring_int("extraction.name_min_chars", 3)
    for line in split_lines(text)[:scan_lines]:
        lowered = line.lower()
        if len(line) <= min_chars:
            continue
        if "@" in line or _DIGIT_RUN_RE.search(line):
            continue
        if "resume" in lowered or "cv" in lowered:
            continue
        return line
    return NAME_NOT_FOUND


def extract_email(text: str) -> str:
    match = EMAIL_RE.search(text or "")
    return match.group(0) if match else ""


def extract_phone(text: str) -> str:
    match = PHONE_RE.search(text or "")
    return match.group(0) if match else ""
