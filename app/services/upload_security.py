from __future__ import annotations

from io import BytesIO
from zipfile import BadZipFile, ZipFile

from app.parsing.parse import SUPPORTED_EXTENSIONS

PDF_MAGIC = b"%PDF-"
ZIP_MAGICS = (b"PK\x03\x04", b"PK\x05\x06", b"PK\x07\x08")
UTF16_BOMS = (b"\xff\xfe", b"\xfe\xff")


def upload_extension(filename: str) -> str:
    return filename.rsplit(".", 1)[-1].lower() if "." in filename else ""


def validate_upload_extension(filename: str) -> str:
    ext = upload_extension(filename)
    if ext == "doc":
        raise ValueError("Legacy .doc is not supported. Convert to .docx.")
    if ext not in SUPPORTED_EXTENSIONS:
        raise ValueError(f"Unsupported file type '.{ext}'. Allowed: {', '.join(SUPPORTED_EXTENSIONS)}.")
    return ext


def _is_zip_payload(content: bytes) -> bool:
    return any(content.startswith(prefix) for prefix in ZIP_MAGICS)


def _zip_has_paths(content: bytes, prefixes: tuple[str, ...]) -> bool:
    try:
        with ZipFile(BytesIO(content)) as archive:
            names = archive.namelist()
    except (BadZipFile, OSError, ValueError):
        return False
    return any(name.startswith(prefixes) for name in names)


def _is_probably_text_payload(content: bytes) -> bool:
    if not content:
        return False
    if content.startswith(UTF16_BOMS):
        return True
    sample = content[:4096]
    if b"\x00" in sample:
        return False
    # Bytes >= 0x80 count as printable so UTF-8 accents pass.
    printable = sum(1 for byte in sample if byte in (9, 10, 13) or byte >= 32)
    return (printable / len(sample)) >= 0.75


def validate_upload_signature(*, filename: str, content: bytes) -> None:
    """Reject uploads whose bytes do not look like their extension."""
    ext = validate_upload_extension(filename)

    if ext == "pdf":
        if not content.startswith(PDF_MAGIC):
            raise ValueError("File signature does not match .pdf content.")
        return

    if ext == "docx":
        if not _is_zip_payload(content) or not _zip_has_paths(content, ("word/",)):
            raise ValueError("File signature does not match .docx content.")
        return

    if not _is_probably_text_payload(content):
        raise ValueError("File signature does not match .txt text content.")
