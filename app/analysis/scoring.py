from __future__ import annotations

import math
import re

from app.core.config.scoring import get_scoring_int
from app.schemas.resume import ParsedResume, ScoreBreakdown
from app.taxonomy.vocabulary import ACTION_VERBS, PASSIVE_INDICATORS

_ACRONYM_RE = re.compile(r"\b[A-Z]{2,}\b")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_PASSIVE_RE = re.compile(r"\b(?:" + "|".join(PASSIVE_INDICATORS) + r")\b")


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value: float, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, round_half_up(value)))


def structure_score(resume: ParsedResume) -> int:
    score = 0
    if resume.has_name:
        score += get_scoring_int("structure.points.name", 15)
    if resume.email:
        score += get_scoring_int("structure.points.email", 15)
    if resume.work_experience:
        score += get_scoring_int("structure.points.work_experience", 25)
    if resume.education:
        score += get_scoring_int("structure.points.education", 20)
    if resume.skills:
        score += get_scoring_int("structure.points.skills", 25)
    return min(score, get_scoring_int("structure.max_score", 100))


def content_score(resume: ParsedResume) -> int:
    score = 0
    min_responsibilities = get_scoring_int("content.detailed_experience_min_responsibilities", 2)
    if any(len(job.responsibilities) > min_responsibilities for job in resume.work_experience):
        score += get_scoring_int("content.points.detailed_experience", 30)

    skill_count = len(resume.skills)
    if skill_count >= get_scoring_int("content.skills_tier1_min", 5):
        score += get_scoring_int("content.points.skills_tier1", 25)
    if skill_count >= get_scoring_int("content.skills_tier2_min", 10):
        score += get_scoring_int("content.points.skills_tier2", 10)

    if any(edu.institution and edu.degree and edu.field for edu in resume.education):
        score += get_scoring_int("content.points.complete_education", 20)

    if resume.projects:
        score += get_scoring_int("content.points.projects", 15)
    return min(score, get_scoring_int("content.max_score", 100))


def keyword_score(resume: ParsedResume) -> float:
    """Share of action verbs present, kept fractional until the overall mean."""
    lowered = resume.raw_text.lower()
    found = [verb for verb in ACTION_VERBS if verb in lowered]
    return len(found) / len(ACTION_VERBS) * 100


def readability_score(resume: ParsedResume) -> int:
    text = resume.raw_text
    score = get_scoring_int("readability.base_score", 100)

    if len(_ACRONYM_RE.findall(text)) > get_scoring_int("readability.acronym_max", 20):
        score -= get_scoring_int("readability.acronym_penalty", 15)

    sentences = [chunk for chunk in _SENTENCE_SPLIT_RE.split(text) if chunk.strip()]
    if sentences:
        avg_sentence_words = len(text.split()) / len(sentences)
        if avg_sentence_words > get_scoring_int("readability.avg_sentence_words_max", 25):
            score -= get_scoring_int("readability.sentence_length_penalty", 10)

    if len(_PASSIVE_RE.findall(text.lower())) > get_scoring_int("readability.passive_max", 10):
        score -= get_scoring_int("readability.passive_penalty", 15)

    return _clamp(score)


def calculate_scores(resume: ParsedResume) -> ScoreBreakdown:
    return ScoreBreakdown(
        structure=structure_score(resume),
        content=content_score(resume),
        keywords=keyword_score(resume),
        readability=readability_score(resume),
    )


def overall_score(scores: ScoreBreakdown) -> int:
    mean = (scores.structure + scores.content + scores.keywords + scores.readability) / 4
    return _clamp(mean)
