from .analyzer import analyze_resume
from .job_matcher import estimate_seniority, generate_job_matches, match_score
from .role_classifier import RoleClassification, RoleClassifier, detect_role
from .scoring import calculate_scores, overall_score

__all__ = [
    "analyze_resume",
    "calculate_scores",
    "overall_score",
    "RoleClassifier",
    "RoleClassification",
    "detect_role",
    "estimate_seniority",
    "generate_job_matches",
    "match_score",
]
