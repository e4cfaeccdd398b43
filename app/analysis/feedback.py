from __future__ import annotations

import re

from app.core.config.scoring import get_scoring_int
from app.schemas.resume import ParsedResume, ScoreBreakdown, Suggestion
from app.taxonomy.roles import RoleProfile
from app.taxonomy.vocabulary import GENERIC_PHRASES

ACHIEVEMENT_RE = re.compile(r"\d+%|\$\d+|\d+\+")
QUANTIFIED_IMPACT_RE = re.compile(r"\d+%|\$\d+|\d+ (?:users|projects|team)")


def identify_strengths(resume: ParsedResume, scores: ScoreBreakdown) -> list[str]:
    strengths: list[str] = []

    if scores.structure >= get_scoring_int("feedback.strengths.structure_min", 80):
        strengths.append("Well-structured resume with all essential sections")

    if len(resume.skills) >= get_scoring_int("feedback.strengths.skills_min", 10):
        strengths.append("Diverse skill set demonstrates versatility")

    if len(resume.work_experience) >= get_scoring_int("feedback.strengths.work_experience_min", 3):
        strengths.append("Substantial work experience shows career progression")

    if resume.projects:
        strengths.append("Portfolio projects demonstrate practical application of skills")

    if resume.certifications:
        strengths.append("Professional certifications show commitment to continuous learning")

    if ACHIEVEMENT_RE.search(resume.raw_text):
        strengths.append("Includes quantifiable achievements and metrics")

    return strengths


def identify_weaknesses(resume: ParsedResume, scores: ScoreBreakdown) -> list[str]:
    weaknesses: list[str] = []

    if not resume.phone:
        weaknesses.append("Missing phone number in contact information")

    if not resume.work_experience:
        weaknesses.append("No work experience listed")

    if len(resume.skills) < get_scoring_int("feedback.weaknesses.skills_min", 5):
        weaknesses.append("Limited skills section - consider adding more relevant skills")

    if scores.keywords < get_scoring_int("feedback.weaknesses.keywords_min", 50):
        weaknesses.append("Lacks action verbs and impactful keywords")

    if not resume.projects:
        weaknesses.append("No projects listed - consider adding relevant work")

    lowered = resume.raw_text.lower()
    if any(phrase in lowered for phrase in GENERIC_PHRASES):
        weaknesses.append("Contains generic phrases that could be more specific")

    return weaknesses


def generate_suggestions(resume: ParsedResume, scores: ScoreBreakdown) -> list[Suggestion]:
    suggestions: list[Suggestion] = []

    if scores.structure < get_scoring_int("feedback.suggestions.structure_min", 70):
        suggestions.append(
            Suggestion(
                section="Structure",
                issue="Missing key resume sections",
                recommendation=(
                    "Ensure your resume includes contact info, work experience, education, and skills sections"
                ),
                priority="high",
            )
        )

    if len(resume.skills) < get_scoring_int("feedback.suggestions.skills_min", 8):
        suggestions.append(
            Suggestion(
                section="Skills",
                issue="Limited skills listed",
                recommendation=(
                    "Add more relevant technical and soft skills. Include programming languages, tools, and frameworks"
                ),
                priority="medium",
            )
        )

    if scores.keywords < get_scoring_int("feedback.suggestions.keywords_min", 60):
        suggestions.append(
            Suggestion(
                section="Content",
                issue="Lacks impactful action verbs",
                recommendation=(
                    'Use strong action verbs like "developed", "implemented", "optimized", "led" '
                    "instead of passive language"
                ),
                priority="high",
            )
        )

    if not QUANTIFIED_IMPACT_RE.search(resume.raw_text):
        suggestions.append(
            Suggestion(
                section="Experience",
                issue="Missing quantifiable achievements",
                recommendation=(
                    "Add specific numbers, percentages, and metrics to demonstrate impact "
                    '(e.g., "Improved performance by 25%")'
                ),
                priority="high",
            )
        )

    if not resume.projects:
        suggestions.append(
            Suggestion(
                section="Projects",
                issue="No projects section",
                recommendation=(
                    "Add a projects section showcasing relevant work, personal projects, or open-source contributions"
                ),
                priority="medium",
            )
        )

    return suggestions


def identify_skill_gaps(resume: ParsedResume, profile: RoleProfile) -> list[str]:
    """Required skills of the role that no listed skill mentions."""
    resume_skills = [skill.lower() for skill in resume.skills]
    return [
        required
        for required in profile.required_skills
        if not any(required.lower() in skill for skill in resume_skills)
    ]
