from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.taxonomy.vocabulary import NAME_NOT_FOUND

Priority = Literal["high", "medium", "low"]


class Education(BaseModel):
    model_config = ConfigDict(frozen=True)

    institution: str = ""
    degree: str = ""
    field: str = ""
    graduation_year: str = ""
    gpa: str = ""


class WorkExperience(BaseModel):
    model_config = ConfigDict(frozen=True)

    company: str
    position: str
    duration: str = ""
    responsibilities: list[str] = Field(default_factory=list)
    start_date: str | None = None
    end_date: str | None = None


class Project(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    technologies: list[str] = Field(default_factory=list)
    duration: str | None = None


class ParsedResume(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = NAME_NOT_FOUND
    email: str = ""
    phone: str = ""
    education: list[Education] = Field(default_factory=list)
    work_experience: list[WorkExperience] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    raw_text: str = ""

    @field_validator("skills")
    @classmethod
    def _dedupe_skills(cls, value: list[str]) -> list[str]:
        return list(dict.fromkeys(value))

    @property
    def has_name(self) -> bool:
        return bool(self.name) and self.name != NAME_NOT_FOUND


class ScoreBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    structure: int = Field(ge=0, le=100)
    content: int = Field(ge=0, le=100)
    keywords: float = Field(ge=0, le=100)
    readability: int = Field(ge=0, le=100)


class Suggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    section: str
    issue: str
    recommendation: str
    priority: Priority


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall_score: int = Field(ge=0, le=100)
    scores: ScoreBreakdown
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    suggestions: list[Suggestion] = Field(default_factory=list)
    skill_gaps: list[str] = Field(default_factory=list)
    detected_role: str


class JobMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    level: str
    keywords: list[str] = Field(default_factory=list)
    external_search_url: str
    match_score: int = Field(ge=50, le=95)


class ResumeTextRequest(BaseModel):
    resume_text: str = Field(min_length=1, max_length=50000)


class ResumeAnalysisResponse(BaseModel):
    parsed_resume: ParsedResume
    analysis: AnalysisResult
    generated_at: datetime


class JobMatchesResponse(BaseModel):
    detected_role: str
    level: str
    matches: list[JobMatch]
