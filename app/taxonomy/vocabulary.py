"""Fixed keyword vocabularies used by extraction and scoring.

Everything here is immutable process-wide data. Extend coverage by editing these
tables; the extractors and scorers only ever read them.
"""

from __future__ import annotations

from types import MappingProxyType

NAME_NOT_FOUND = "Name not found"

SKILL_VOCABULARY: tuple[str, ...] = (
    "javascript",
    "python",
    "java",
    "react",
    "node.js",
    "html",
    "css",
    "sql",
    "git",
    "aws",
    "docker",
    "kubernetes",
    "mongodb",
    "postgresql",
    "redis",
    "typescript",
    "angular",
    "vue",
    "express",
    "django",
    "flask",
    "spring",
    "hibernate",
    "machine learning",
    "data analysis",
    "project management",
    "agile",
    "scrum",
)

PROJECT_TECH_VOCABULARY: tuple[str, ...] = (
    "react",
    "node",
    "python",
    "java",
    "javascript",
    "html",
    "css",
    "sql",
)

EDUCATION_KEYWORDS: tuple[str, ...] = (
    "university",
    "college",
    "school",
    "bachelor",
    "master",
    "phd",
    "degree",
    "diploma",
)

# Order matters: the first hit wins.
DEGREE_KEYWORDS: tuple[str, ...] = (
    "bachelor",
    "master",
    "phd",
    "mba",
    "bs",
    "ba",
    "ms",
    "ma",
    "bsc",
    "msc",
)

FIELD_KEYWORDS: tuple[str, ...] = (
    "computer science",
    "engineering",
    "business",
    "marketing",
    "finance",
    "economics",
)

DEFAULT_DEGREE = "Degree"
DEFAULT_FIELD = "Field of Study"

ACTION_VERBS: tuple[str, ...] = (
    "manage",
    "lead",
    "develop",
    "implement",
    "design",
    "optimize",
    "improve",
    "collaborate",
    "analyze",
    "create",
    "build",
    "maintain",
    "support",
)

PASSIVE_INDICATORS: tuple[str, ...] = ("was", "were", "been", "being")

GENERIC_PHRASES: tuple[str, ...] = ("team player", "hard worker")

# Section families recognised by the segmenter. Tokens match by prefix, so
# "skill" covers "skills" and "technolog" covers "technologies".
SECTION_HEADER_KEYWORDS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "education": ("education", "academic", "qualification"),
        "experience": ("experience", "work", "employment", "career", "internship"),
        "skills": ("skill", "technolog", "competenc", "proficienc", "expertise"),
        "projects": ("project", "portfolio"),
        "certifications": ("certification", "certificate", "license", "licence"),
        "summary": ("summary", "objective", "profile", "about"),
        "contact": ("contact",),
        "awards": ("award", "honor", "honour", "achievement"),
        "interests": ("interest", "hobbies", "hobby"),
        "languages": ("language",),
        "references": ("reference",),
        "publications": ("publication",),
        "volunteer": ("volunteer",),
    }
)

SECTION_HEADER_MODIFIERS: frozenset[str] = frozenset(
    {
        "&",
        "and",
        "of",
        "my",
        "me",
        "the",
        "technical",
        "professional",
        "relevant",
        "key",
        "core",
        "personal",
        "selected",
        "additional",
        "other",
        "history",
        "background",
        "information",
        "highlights",
    }
)
