from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExtractedDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    doc_id: str
    filename: str = ""
    source_type: str
    text: str
    page_count: int = Field(default=0, ge=0)

    @field_validator("source_type")
    @classmethod
    def _validate_source_type(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in {"pdf", "docx", "txt"}:
            raise ValueError("source_type must be one of: pdf, docx, txt")
        return normalized
