from __future__ import annotations


class DocumentParseError(ValueError):
    """Raised when an uploaded document cannot be opened or decoded into text."""

    def __init__(self, message: str, *, filename: str = "") -> None:
        super().__init__(message)
        self.filename = filename
