"""
Tools for the Resume Optimizer.

- pdf_parser: Decode base64 PDF resumes into text
- job_scraper: Fetch job descriptions from posting URLs
"""

from resume_optimizer.tools.job_scraper import SCRAPE_FAILURE_PREFIX, fetch_job_description
from resume_optimizer.tools.pdf_parser import decode_resume, encode_pdf_from_path, parse_pdf

__all__ = [
    "SCRAPE_FAILURE_PREFIX",
    "fetch_job_description",
    "decode_resume",
    "encode_pdf_from_path",
    "parse_pdf",
]
