import asyncio
import logging

from fastapi import APIRouter, File, HTTPException, Request, UploadFile, status

from app.core.config import settings
from app.core.rate_limit import rate_limit
from app.parsing.errors import DocumentParseError
from app.schemas.resume import JobMatchesResponse, ParsedResume, ResumeAnalysisResponse, ResumeTextRequest
from app.services import resume_service
from app.services.upload_security import validate_upload_extension, validate_upload_signature

router = APIRouter()
logger = logging.getLogger(__name__)

UPLOAD_CHUNK_BYTES = 1024 * 64
UNREADABLE_DOCUMENT_DETAIL = "Could not read this file. Please upload a different PDF, DOCX or TXT file."


async def _read_upload(file: UploadFile) -> bytes:
    limit = settings.max_upload_bytes
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(UPLOAD_CHUNK_BYTES)
        if not chunk:
            break
        total += len(chunk)
        if total > limit:
            raise HTTPException(
                status_code=413,
                detail=f"File too large. Maximum allowed size is {settings.max_upload_mb} MB.",
            )
        chunks.append(chunk)
    return b"".join(chunks)


@router.post("/resume/analyze", response_model=ResumeAnalysisResponse)
@rate_limit(settings.upload_rate_limit)
async def analyze_resume_upload(request: Request, file: UploadFile = File(...)):
    filename = file.filename or "uploaded-file"
    try:
        validate_upload_extension(filename)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    payload = await _read_upload(file)
    try:
        validate_upload_signature(filename=filename, content=payload)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    try:
        return await asyncio.to_thread(resume_service.analyze_document, filename=filename, content=payload)
    except DocumentParseError as exc:
        logger.info("resume_document_rejected filename=%s reason=%s", filename, exc)
        raise HTTPException(
            status_code=422,
            detail=UNREADABLE_DOCUMENT_DETAIL,
        ) from exc


@router.post("/resume/analyze-text", response_model=ResumeAnalysisResponse)
@rate_limit()
async def analyze_resume_text(request: Request, payload: ResumeTextRequest):
    return await asyncio.to_thread(resume_service.analyze_text, payload.resume_text)


@router.post("/resume/job-matches", response_model=JobMatchesResponse)
@rate_limit()
async def resume_job_matches(request: Request, payload: ParsedResume):
    return await asyncio.to_thread(resume_service.job_matches, payload)
