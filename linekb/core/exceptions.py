"""
Exception hierarchy for linekb.

Parsing itself never raises for malformed content; these exceptions are
reserved for the file boundary and for callers that hand the pipeline
something that is not a transcript at all.
"""

from typing import Optional


class LineKBError(Exception):
    """Base exception for all linekb errors."""

    def __init__(self, detail: str, error_code: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.error_code = error_code or self.__class__.__name__


class TranscriptError(LineKBError):
    """Raised when a transcript file cannot be read."""

    def __init__(self, detail: str, error_code: Optional[str] = None):
        super().__init__(detail, error_code=error_code or "TRANSCRIPT_ERROR")


class TranscriptTooLargeError(TranscriptError):
    """Raised when a transcript file exceeds the configured size limit."""

    def __init__(self, size: int, limit: int):
        super().__init__(
            f"Transcript too large: {size} bytes (limit {limit} bytes)",
            error_code="TRANSCRIPT_TOO_LARGE",
        )
        self.size = size
        self.limit = limit
