from __future__ import annotations

from app.core.config.scoring import get_scoring_int
from app.schemas.resume import Project
from app.segmentation.segmenter import DocumentSegments
from app.taxonomy.vocabulary import PROJECT_TECH_VOCABULARY

from .utils import keywords_in, strip_bullet_prefix


def build_project(line: str) -> Project:
    cleaned = strip_bullet_prefix(line)
    name = cleaned.split("-")[0].strip() or cleaned
    return Project(
        name=name,
        description=line,
        technologies=keywords_in(line, PROJECT_TECH_VOCABULARY),
    )


def extract_projects(segments: DocumentSegments) -> list[Project]:
    min_chars = get_scoring_int("extraction.project_min_chars", 10)
    return [build_project(line) for line in segments.lines_for("projects") if len(line) > min_chars]
