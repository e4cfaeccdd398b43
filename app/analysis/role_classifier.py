from __future__ import annotations

from pydantic import BaseModel, Field

from app.core.config.scoring import get_scoring_int
from app.schemas.resume import ParsedResume
from app.taxonomy.roles import ROLE_PROFILES, RoleProfile, get_role_profile


class RoleClassification(BaseModel):
    role: str
    scores: dict[str, int] = Field(default_factory=dict)


class RoleClassifier:
    """Keyword-voting role detector shared by feedback and job matching.

    An indicator found inside any listed skill is worth the skill weight, one
    found in the raw text the text weight; both can apply. The best total
    wins, ties go to the earlier profile, and a résumé with no hits gets the
    first profile.
    """

    def __init__(
        self,
        profiles: tuple[RoleProfile, ...] = ROLE_PROFILES,
        *,
        skill_weight: int | None = None,
        text_weight: int | None = None,
    ) -> None:
        if not profiles:
            raise ValueError("RoleClassifier needs at least one role profile.")
        self._profiles = profiles
        self._skill_weight = (
            skill_weight if skill_weight is not None else get_scoring_int("roles.weights.skill_match", 2)
        )
        self._text_weight = (
            text_weight if text_weight is not None else get_scoring_int("roles.weights.text_match", 1)
        )

    @property
    def profiles(self) -> tuple[RoleProfile, ...]:
        return self._profiles

    def _score(self, profile: RoleProfile, skills: list[str], text: str) -> int:
        score = 0
        for indicator in profile.indicators:
            if any(indicator in skill for skill in skills):
                score += self._skill_weight
            if indicator in text:
                score += self._text_weight
        return score

    def classify(self, resume: ParsedResume) -> RoleClassification:
        skills = [skill.lower() for skill in resume.skills]
        text = resume.raw_text.lower()
        scores = {profile.name: self._score(profile, skills, text) for profile in self._profiles}

        best = self._profiles[0].name
        best_score = 0
        for profile in self._profiles:
            if scores[profile.name] > best_score:
                best = profile.name
                best_score = scores[profile.name]
        return RoleClassification(role=best, scores=scores)

    def detect_role(self, resume: ParsedResume) -> str:
        return self.classify(resume).role

    def profile_for(self, role: str) -> RoleProfile:
        return get_role_profile(role, self._profiles) or self._profiles[0]


def detect_role(resume: ParsedResume, classifier: RoleClassifier | None = None) -> str:
    return (classifier or RoleClassifier()).detect_role(resume)
