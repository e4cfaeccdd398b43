from .certifications import extract_certifications
from .contact import extract_email, extract_name, extract_phone
from .education import extract_education
from .experience import extract_work_experience
from .projects import extract_projects
from .resume_parser import parse_resume_text
from .skills import extract_skills

__all__ = [
    "parse_resume_text",
    "extract_name",
    "extract_email",
    "extract_phone",
    "extract_education",
    "extract_skills",
    "extract_work_experience",
    "extract_projects",
    "extract_certifications",
]
