from __future__ import annotations

import logging
import random
from datetime import datetime, timezone

from app.analysis.analyzer import analyze_resume
from app.analysis.job_matcher import estimate_seniority, generate_job_matches
from app.analysis.role_classifier import RoleClassifier
from app.core.config import settings
from app.extraction.resume_parser import parse_resume_text
from app.parsing.parse import extract_document_text
from app.schemas.resume import JobMatchesResponse, ParsedResume, ResumeAnalysisResponse

logger = logging.getLogger(__name__)


def _analyze(resume: ParsedResume) -> ResumeAnalysisResponse:
    analysis = analyze_resume(resume)
    return ResumeAnalysisResponse(
        parsed_resume=resume,
        analysis=analysis,
        generated_at=datetime.now(timezone.utc),
    )


def analyze_document(*, filename: str, content: bytes) -> ResumeAnalysisResponse:
    """Extract, parse and analyze one uploaded document.

    DocumentParseError from extraction propagates to the caller.
    """
    document = extract_document_text(filename, content)
    logger.info(
        "resume_document_received doc_id=%s type=%s pages=%d",
        document.doc_id,
        document.source_type,
        document.page_count,
    )
    return _analyze(parse_resume_text(document.text))


def analyze_text(resume_text: str) -> ResumeAnalysisResponse:
    return _analyze(parse_resume_text(resume_text))


def job_matches(resume: ParsedResume, *, rng: random.Random | None = None) -> JobMatchesResponse:
    if rng is None and settings.job_match_jitter:
        rng = random.Random()
    classifier = RoleClassifier()
    matches = generate_job_matches(
        resume,
        rng=rng,
        classifier=classifier,
        url_template=settings.job_search_url_template,
    )
    return JobMatchesResponse(
        detected_role=classifier.detect_role(resume),
        level=estimate_seniority(resume),
        matches=matches,
    )
