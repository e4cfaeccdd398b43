from __future__ import annotations

import logging

from app.schemas.resume import AnalysisResult, ParsedResume

from .feedback import generate_suggestions, identify_skill_gaps, identify_strengths, identify_weaknesses
from .role_classifier import RoleClassifier
from .scoring import calculate_scores, overall_score

logger = logging.getLogger(__name__)


def analyze_resume(resume: ParsedResume, classifier: RoleClassifier | None = None) -> AnalysisResult:
    """Score a parsed résumé and derive its feedback.

    Pure and total: any ParsedResume, including an empty one, yields a
    well-formed result, and the same input always yields the same result.
    """
    classifier = classifier or RoleClassifier()
    scores = calculate_scores(resume)
    role = classifier.detect_role(resume)

    result = AnalysisResult(
        overall_score=overall_score(scores),
        scores=scores,
        strengths=identify_strengths(resume, scores),
        weaknesses=identify_weaknesses(resume, scores),
        suggestions=generate_suggestions(resume, scores),
        skill_gaps=identify_skill_gaps(resume, classifier.profile_for(role)),
        detected_role=role,
    )
    logger.info(
        "resume_analyzed overall=%d structure=%d content=%d keywords=%.1f readability=%d role=%s",
        result.overall_score,
        scores.structure,
        scores.content,
        scores.keywords,
        scores.readability,
        role,
    )
    return result
