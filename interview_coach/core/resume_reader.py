"""
Resume Reader for Interview Coach

Turns an uploaded resume file into plain text for profile extraction.
"""

import io
import logging
import zipfile

import docx2txt
from pypdf import PdfReader
from pypdf.errors import PdfReadError

from interview_coach.config.settings import get_settings

logger = logging.getLogger(__name__)


class ResumeReadError(Exception):
    """Raised when a resume cannot be turned into text."""
    pass


class UnsupportedResumeError(ResumeReadError):
    """Raised for file types the reader does not handle."""
    pass


def resume_extension(filename: str) -> str:
    """Lowercase extension without the dot ("" if there is none)."""
    if "." not in filename:
        return ""
    return filename.rsplit(".", 1)[-1].lower()


def _read_pdf(data: bytes) -> str:
    reader = PdfReader(io.BytesIO(data))
    pages = [page.extract_text() or "" for page in reader.pages]
    return "\n".join(pages)


def _read_docx(data: bytes) -> str:
    return docx2txt.process(io.BytesIO(data)) or ""


def _read_text(data: bytes) -> str:
    return data.decode("utf-8", errors="ignore")


_READERS = {
    "pdf": _read_pdf,
    "docx": _read_docx,
    "txt": _read_text,
}


def read_resume(filename: str, data: bytes) -> str:
    """
    Extract plain text from an uploaded resume.

    Args:
        filename: Original file name (used to pick the reader)
        data: Raw file bytes

    Returns:
        Extracted text, stripped

    Raises:
        UnsupportedResumeError: Extension not accepted
        ResumeReadError: File is too large, unreadable or has no text
    """
    settings = get_settings()
    extension = resume_extension(filename)

    if extension not in settings.resume_extensions or extension not in _READERS:
        raise UnsupportedResumeError(
            f"Unsupported resume type '{extension or filename}'. "
            f"Please upload one of: {', '.join(settings.resume_extensions)}"
        )

    if len(data) > settings.max_resume_bytes:
        raise ResumeReadError(
            f"Resume is too large ({len(data)} bytes, limit {settings.max_resume_bytes})"
        )

    try:
        text = _READERS[extension](data)
    except (PdfReadError, zipfile.BadZipFile, ValueError, KeyError, OSError) as e:
        logger.error(f"Failed to read {extension} resume {filename}: {e}")
        raise ResumeReadError(f"Could not read resume: {e}") from e

    text = text.strip()
    if not text:
        raise ResumeReadError("No readable text found in resume")

    logger.info(f"Read {len(text)} characters from {filename}")
    return text
