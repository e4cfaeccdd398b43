from __future__ import annotations

import re

from app.segmentation.segmenter import BULLET_RE as _BULLET_PATTERN

_INLINE_LABEL_PATTERN = re.compile(r"^\s*([A-Za-z][A-Za-z /&]{0,30}):\s*")
_YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")


def is_bullet_like(line: str) -> bool:
    return bool(_BULLET_PATTERN.match(line))


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PATTERN.sub("", line, count=1).strip()


def strip_inline_label(line: str, *, max_words: int = 3) -> str:
    """Drop a short leading "Label:" such as "Languages: Python, Go"."""
    match = _INLINE_LABEL_PATTERN.match(line)
    if match is None or len(match.group(1).split()) > max_words:
        return line
    return line[match.end():]


def contains_any(text: str, markers: tuple[str, ...]) -> bool:
    lowered = text.lower()
    return any(marker in lowered for marker in markers)


def first_year(text: str) -> str:
    match = _YEAR_RE.search(text)
    return match.group(0) if match else ""


def has_year(text: str) -> bool:
    return bool(_YEAR_RE.search(text))


def keywords_in(text: str, vocabulary: tuple[str, ...]) -> list[str]:
    lowered = text.lower()
    return [keyword for keyword in vocabulary if keyword in lowered]
