"""
PDF parsing tool for resume extraction.

Extracts text content from PDF files using pypdf. Failures here are fatal
to an optimizer run, so they raise instead of returning an error string.
"""

import base64
import binascii
from io import BytesIO

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from resume_optimizer.errors import ResumeParseError


def parse_pdf(pdf_content: bytes) -> str:
    """
    Extract text from a PDF file.

    Args:
        pdf_content: Raw bytes of the PDF file

    Returns:
        Extracted text content from all pages

    Raises:
        ResumeParseError: If the bytes are not a readable PDF or hold no text
    """
    try:
        reader = PdfReader(BytesIO(pdf_content))
        text_parts = []

        for page in reader.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)

    except (PyPdfError, ValueError, OSError) as e:
        raise ResumeParseError(f"Error parsing PDF: {e}") from e

    text = "\n\n".join(text_parts)
    if not text.strip():
        raise ResumeParseError("PDF appears to be empty or unreadable")
    return text


def decode_resume(resume_b64: str) -> str:
    """
    Decode a base64 encoded PDF resume into text.

    Args:
        resume_b64: Base64 encoded PDF bytes

    Returns:
        Extracted resume text
    """
    try:
        pdf_content = base64.b64decode(resume_b64, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ResumeParseError(f"Resume is not valid base64: {e}") from e
    return parse_pdf(pdf_content)


def encode_pdf_from_path(file_path: str) -> str:
    """
    Read a PDF file and return it base64 encoded.

    Args:
        file_path: Path to the PDF file

    Returns:
        Base64 text suitable for ResumeState.resume_b64
    """
    with open(file_path, "rb") as f:
        return base64.b64encode(f.read()).decode("ascii")
