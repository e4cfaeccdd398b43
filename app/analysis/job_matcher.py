from __future__ import annotations

import logging
import random
import re
from collections.abc import Iterable
from urllib.parse import quote

from app.core.config.scoring import get_scoring_float, get_scoring_int
from app.core.config.settings import DEFAULT_JOB_SEARCH_URL_TEMPLATE
from app.schemas.resume import JobMatch, ParsedResume
from app.taxonomy.roles import TECH_STACKS

from .role_classifier import RoleClassifier
from .scoring import round_half_up

logger = logging.getLogger(__name__)

# Longer digit runs are not a plausible career length and are ignored.
_YEARS_RE = re.compile(r"(?<!\d)(\d{1,3})\s*(?:years?|yrs?)", re.IGNORECASE)
# Characters encodeURIComponent leaves alone besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def estimate_years(resume: ParsedResume) -> float:
    stated = max((int(match.group(1)) for match in _YEARS_RE.finditer(resume.raw_text)), default=0)
    per_position = get_scoring_float("job_matching.years_per_position", 1.5)
    return max(float(stated), len(resume.work_experience) * per_position)


def estimate_seniority(resume: ParsedResume) -> str:
    years = estimate_years(resume)
    if years < get_scoring_int("job_matching.seniority.junior_min_years", 1):
        return "Entry Level"
    if years < get_scoring_int("job_matching.seniority.mid_min_years", 3):
        return "Junior"
    if years < get_scoring_int("job_matching.seniority.senior_min_years", 6):
        return "Mid Level"
    if years < get_scoring_int("job_matching.seniority.lead_min_years", 10):
        return "Senior"
    return "Lead/Principal"


def match_score(matched: int, required: int, rng: random.Random | None = None) -> int:
    """Coverage percentage clamped to the display band.

    Without an rng the score is a pure function of its inputs; with one a
    uniform jitter is added before rounding.
    """
    base = matched / max(required, 1) * 100
    if rng is not None:
        spread = get_scoring_float("job_matching.jitter", 5)
        base += rng.uniform(-spread, spread)
    floor = get_scoring_int("job_matching.score_floor", 50)
    ceiling = get_scoring_int("job_matching.score_ceiling", 95)
    return min(max(round_half_up(base), floor), ceiling)


def build_search_url(title: str, template: str | None = None) -> str:
    return (template or DEFAULT_JOB_SEARCH_URL_TEMPLATE).format(query=quote(title, safe=_URI_COMPONENT_SAFE))


def _matching(candidates: Iterable[str], skills: list[str]) -> list[str]:
    return [candidate for candidate in candidates if any(candidate.lower() in skill for skill in skills)]


def _role_matches(
    profile_skills: tuple[str, ...],
    variations: tuple[str, ...],
    level: str,
    skills: list[str],
    rng: random.Random | None,
    template: str | None,
) -> list[JobMatch]:
    matched = _matching(profile_skills, skills)
    keywords_limit = get_scoring_int("job_matching.keywords_limit", 6)
    decay = get_scoring_int("job_matching.variation_decay", 5)
    floor = get_scoring_int("job_matching.variation_floor", 60)
    limit = get_scoring_int("job_matching.variation_limit", 5)

    matches: list[JobMatch] = []
    for index, variation in enumerate(variations[:limit]):
        title = f"{level} {variation}"
        score = match_score(len(matched), len(profile_skills), rng)
        matches.append(
            JobMatch(
                title=title,
                level=level,
                keywords=matched[:keywords_limit],
                external_search_url=build_search_url(title, template),
                match_score=max(score - index * decay, floor),
            )
        )
    return matches


def _stack_matches(
    level: str,
    skills: list[str],
    rng: random.Random | None,
    template: str | None,
) -> list[JobMatch]:
    min_matches = get_scoring_int("job_matching.stack_min_matches", 2)
    matches: list[JobMatch] = []
    for stack_title, stack_skills in TECH_STACKS.items():
        matched = _matching(stack_skills, skills)
        if len(matched) < min_matches:
            continue
        title = f"{level} {stack_title}"
        matches.append(
            JobMatch(
                title=title,
                level=level,
                keywords=matched,
                external_search_url=build_search_url(title, template),
                match_score=match_score(len(matched), len(stack_skills), rng),
            )
        )
    return matches


def generate_job_matches(
    resume: ParsedResume,
    *,
    rng: random.Random | None = None,
    classifier: RoleClassifier | None = None,
    url_template: str | None = None,
) -> list[JobMatch]:
    """Ranked job titles for the résumé's detected role and technology stacks.

    Never empty: the detected role always contributes its title variations.
    """
    classifier = classifier or RoleClassifier()
    role = classifier.detect_role(resume)
    profile = classifier.profile_for(role)
    level = estimate_seniority(resume)
    skills = [skill.lower() for skill in resume.skills]

    candidates = _role_matches(profile.core_skills, profile.title_variations, level, skills, rng, url_template)
    candidates.extend(_stack_matches(level, skills, rng, url_template))

    # sorted() is stable, so equal scores keep role variations ahead of stacks.
    ranked = sorted(candidates, key=lambda match: match.match_score, reverse=True)
    top = ranked[: get_scoring_int("job_matching.max_results", 6)]
    logger.info(
        "job_matches_generated role=%s level=%s candidates=%d returned=%d",
        role,
        level,
        len(candidates),
        len(top),
    )
    return top
