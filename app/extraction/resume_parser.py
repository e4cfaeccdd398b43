from __future__ import annotations

import logging

from app.schemas.resume import ParsedResume
from app.segmentation.segmenter import segment_document

from .certifications import extract_certifications
from .contact import extract_email, extract_name, extract_phone
from .education import extract_education
from .experience import extract_work_experience
from .projects import extract_projects
from .skills import extract_skills

logger = logging.getLogger(__name__)


def parse_resume_text(text: str) -> ParsedResume:
    """Run every extractor over one document's text.

    Never raises for odd input: anything that cannot be found comes back as an
    empty string, an empty list or the name sentinel.
    """
    raw_text = text or ""
    segments = segment_document(raw_text)
    resume = ParsedResume(
        name=extract_name(raw_text),
        email=extract_email(raw_text),
        phone=extract_phone(raw_text),
        education=extract_education(segments),
        work_experience=extract_work_experience(segments),
        projects=extract_projects(segments),
        certifications=extract_certifications(segments),
        skills=extract_skills(raw_text, segments),
        raw_text=raw_text,
    )
    logger.info(
        "resume_parsed sections=%s name_found=%s jobs=%d education=%d skills=%d projects=%d",
        sorted({segment.section for segment in segments.segments}),
        resume.has_name,
        len(resume.work_experience),
        len(resume.education),
        len(resume.skills),
        len(resume.projects),
    )
    return resume
