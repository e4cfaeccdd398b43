from __future__ import annotations

import re
from typing import Any

from app.core.config.scoring import get_scoring_int
from app.schemas.resume import WorkExperience
from app.segmentation.segmenter import DocumentSegments

from .utils import has_year, is_bullet_like, strip_bullet_prefix

DEFAULT_COMPANY = "Company"
DEFAULT_POSITION = "Position"

_HEADER_SPLIT_RE = re.compile(r"[-–—|,]")
_HEADER_MARK_RE = re.compile(r"[-–—|]")
_TO_WORD_RE = re.compile(r"\bto\b", re.IGNORECASE)
_DURATION_RE = re.compile(
    r"\b(?:19|20)\d{2}\b.*?\b(?:19|20)\d{2}\b|\b(?:19|20)\d{2}\b\s*(?:-|–|—|to)\s*(?:present|current)",
    re.IGNORECASE,
)
_MONTH = r"(?:jan|feb|mar|apr|may|jun|jul|aug|sep|sept|oct|nov|dec)[a-z]*\.?"
_DATE_POINT = rf"(?:{_MONTH}\s+)?(?:19|20)\d{{2}}"
_DATE_ONLY_RE = re.compile(
    rf"^\(?\s*{_DATE_POINT}(?:\s*(?:-|–|—|to)\s*(?:{_DATE_POINT}|present|current|now))?\s*\)?$",
    re.IGNORECASE,
)


def extract_duration(line: str) -> str:
    match = _DURATION_RE.search(line)
    return match.group(0) if match else ""


def is_date_only(line: str) -> bool:
    return bool(_DATE_ONLY_RE.match(line.strip()))


def looks_like_job_header(line: str) -> bool:
    return bool(
        has_year(line)
        or _HEADER_MARK_RE.search(line)
        or _TO_WORD_RE.search(line)
    )


def parse_job_header(line: str) -> dict[str, Any]:
    parts = _HEADER_SPLIT_RE.split(line)
    company = parts[0].strip() if parts else ""
    position = parts[1].strip() if len(parts) > 1 else ""
    return {
        "company": company or DEFAULT_COMPANY,
        "position": position or DEFAULT_POSITION,
        "duration": extract_duration(line),
        "responsibilities": [],
    }


def _walk_segment(lines: list[str], min_chars: int) -> list[WorkExperience]:
    jobs: list[WorkExperience] = []
    draft: dict[str, Any] | None = None
    # A date line printed above its job title waits here for the next header.
    pending_duration = ""

    def flush() -> None:
        nonlocal draft
        if draft is not None and draft["company"] and draft["position"]:
            jobs.append(WorkExperience(**draft))
        draft = None

    for line in lines:
        if is_bullet_like(line):
            if draft is not None:
                draft["responsibilities"].append(strip_bullet_prefix(line))
            continue

        if is_date_only(line):
            duration = line.strip().strip("()").strip()
            if draft is not None and not draft["duration"]:
                draft["duration"] = duration
            else:
                pending_duration = duration
            continue

        if looks_like_job_header(line):
            flush()
            draft = parse_job_header(line)
            if not draft["duration"] and pending_duration:
                draft["duration"] = pending_duration
            pending_duration = ""
            continue

        if draft is not None and len(line) > min_chars:
            draft["responsibilities"].append(line)

    flush()
    return jobs


def extract_work_experience(segments: DocumentSegments) -> list[WorkExperience]:
    """Jobs from the experience sections.

    Within a section: bullets attach to the open job, a bare date range fills
    the open job's duration, a line with a year, a dash, a pipe or the word
    "to" opens a new job, and other long lines are responsibilities.
    """
    min_chars = get_scoring_int("extraction.responsibility_min_chars", 20)
    jobs: list[WorkExperience] = []
    for lines in segments.segments_for("experience"):
        jobs.extend(_walk_segment(lines, min_chars))
    return jobs
