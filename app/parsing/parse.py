from __future__ import annotations

import hashlib
import logging
import re
from io import BytesIO
from pathlib import Path
from typing import Any

from .errors import DocumentParseError
from .models import ExtractedDocument

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = ("pdf", "docx", "txt")

_WHITESPACE_RE = re.compile(r"\s+")


def _compute_doc_id(text: str, filename: str) -> str:
    seed = text if text.strip() else filename
    digest = hashlib.sha256(seed.encode("utf-8", errors="ignore")).hexdigest()
    return digest[:16]


def _extension(filename: str) -> str:
    return filename.rsplit(".", 1)[-1].lower() if "." in filename else ""


def _page_fragments(page: Any) -> list[str]:
    fragments: list[str] = []

    def collect(text: str, *_args: Any) -> None:
        fragment = _WHITESPACE_RE.sub(" ", text or "").strip()
        if fragment:
            fragments.append(fragment)

    page.extract_text(visitor_text=collect)
    return fragments


def _extract_pdf(content: bytes) -> tuple[str, int]:
    from pypdf import PdfReader

    reader = PdfReader(BytesIO(content))
    page_texts: list[str] = []
    for page in reader.pages:
        # One line per page: fragments are joined in content order, no layout reasoning.
        page_texts.append(" ".join(_page_fragments(page)) + "\n")
    return "".join(page_texts), len(reader.pages)


def _extract_docx(content: bytes) -> tuple[str, int]:
    from docx import Document

    document = Document(BytesIO(content))
    paragraphs = [p.text.strip() for p in document.paragraphs if p.text and p.text.strip()]
    return "\n".join(paragraphs), 1


def _extract_txt(content: bytes) -> tuple[str, int]:
    for encoding in ("utf-8", "utf-16", "latin-1"):
        try:
            return content.decode(encoding), 1
        except UnicodeDecodeError:
            continue
    raise UnicodeDecodeError("latin-1", content, 0, len(content), "undecodable text payload")


_EXTRACTORS = {
    "pdf": _extract_pdf,
    "docx": _extract_docx,
    "txt": _extract_txt,
}


def extract_document_text(filename: str, content: bytes) -> ExtractedDocument:
    """Turn an uploaded document into one linear text stream.

    Raises DocumentParseError when the type is unsupported or the bytes cannot
    be opened; nothing partial is ever returned.
    """
    ext = _extension(filename)
    extractor = _EXTRACTORS.get(ext)
    if extractor is None:
        raise DocumentParseError(
            f"Unsupported file type '.{ext}'. Supported types: {', '.join(SUPPORTED_EXTENSIONS)}.",
            filename=filename,
        )
    if not content:
        raise DocumentParseError("The uploaded document is empty.", filename=filename)

    try:
        text, page_count = extractor(content)
    except Exception as exc:
        logger.warning("document_parse_failed filename=%s type=%s error=%s", filename, ext, exc)
        raise DocumentParseError(f"Unable to read text from this .{ext} file.", filename=filename) from exc

    logger.info("document_extracted type=%s pages=%d characters=%d", ext, page_count, len(text))
    return ExtractedDocument(
        doc_id=_compute_doc_id(text, filename),
        filename=filename,
        source_type=ext,
        text=text,
        page_count=page_count,
    )


def extract_document_file(file_path: str) -> ExtractedDocument:
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Input document not found: '{path}'")
    return extract_document_text(path.name, path.read_bytes())
