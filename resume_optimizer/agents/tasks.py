"""
Task collaborators for the optimizer pipeline.

Each task reads the fields it needs from the state and returns a patch that
fills the field the router is waiting on. Tasks never talk to each other.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

import httpx

from resume_optimizer.agents.keyword_extractor import extract_keywords
from resume_optimizer.agents.llm import ChatModel
from resume_optimizer.agents.resume_rewriter import rewrite_resume
from resume_optimizer.agents.router import Step
from resume_optimizer.agents.state import ResumeState
from resume_optimizer.config import Settings
from resume_optimizer.tools.job_scraper import SCRAPE_FAILURE_PREFIX, fetch_job_description
from resume_optimizer.tools.pdf_parser import decode_resume

logger = logging.getLogger(__name__)

Task = Callable[[ResumeState], Awaitable[dict[str, Any]]]


@dataclass(frozen=True)
class ResumeTasks:
    """The four pipeline tasks, bound to their dependencies."""

    llm: ChatModel
    settings: Settings
    http_transport: httpx.AsyncBaseTransport | None = None

    async def fetch_job_description(self, state: ResumeState) -> dict[str, Any]:
        """Fetch the job description from job_url. Failures come back as text."""
        if not state.job_url:
            return {"job_description": f"{SCRAPE_FAILURE_PREFIX} no URL provided"}

        description = await fetch_job_description(
            state.job_url, self.settings, transport=self.http_transport
        )
        return {"job_description": description}

    async def parse_resume(self, state: ResumeState) -> dict[str, Any]:
        """Decode the base64 PDF resume. Raises ResumeParseError on bad input."""
        resume_text = decode_resume(state.resume_b64)
        logger.info(f"Extracted {len(resume_text)} chars from resume")
        return {"resume_text": resume_text}

    async def extract_keywords(self, state: ResumeState) -> dict[str, Any]:
        """Extract keywords from the job description. Always sets keywords."""
        keywords = await extract_keywords(
            self.llm, state.job_description, max_keywords=self.settings.max_keywords
        )
        logger.info(f"Extracted keywords: {', '.join(keywords) or '(none)'}")
        return {"keywords": keywords}

    async def rewrite_resume(self, state: ResumeState) -> dict[str, Any]:
        """Rewrite the resume. Always sets both optimized_resume and summary."""
        optimized_resume, summary = await rewrite_resume(
            self.llm,
            state.resume_text or "",
            state.keywords or [],
            state.job_description,
            max_resume_chars=self.settings.max_resume_chars,
        )
        return {"optimized_resume": optimized_resume, "summary": summary}

    def dispatch_table(self) -> dict[Step, Task]:
        """One task per step. END has no task."""
        return {
            Step.FETCH_JOB_DESCRIPTION: self.fetch_job_description,
            Step.PARSE_RESUME: self.parse_resume,
            Step.EXTRACT_KEYWORDS: self.extract_keywords,
            Step.REWRITE_RESUME: self.rewrite_resume,
        }
