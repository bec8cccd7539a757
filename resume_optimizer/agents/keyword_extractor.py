"""
Keyword Extractor.

Pulls the most important keywords and skills out of a job description.
Best effort: a model or parsing problem yields a shorter (possibly empty)
list, never a missing one.
"""

import logging

from langchain_core.messages import HumanMessage, SystemMessage

from resume_optimizer.agents.llm import ChatModel, response_text
from resume_optimizer.utils.parser import parse_keywords

logger = logging.getLogger(__name__)

KEYWORD_EXTRACTOR_PROMPT = """You extract keywords from job descriptions.

## Rules
- Return the TOP {max_keywords} most important keywords and skills
- Prefer concrete skills, tools and qualifications over soft skills
- Return them as a comma-separated list on one line
- No numbering, no explanation, no other text
"""


async def extract_keywords(llm: ChatModel, job_description: str | None, max_keywords: int) -> list[str]:
    """
    Extract the top keywords from a job description.

    Args:
        llm: Chat model to ask
        job_description: Job description text (may be missing)
        max_keywords: Maximum number of keywords to return

    Returns:
        Ordered list of keywords
    """
    if not job_description or not job_description.strip():
        logger.warning("No job description available, skipping keyword extraction")
        return []

    messages = [
        SystemMessage(content=KEYWORD_EXTRACTOR_PROMPT.format(max_keywords=max_keywords)),
        HumanMessage(content=f"Job Description:\n{job_description}"),
    ]

    try:
        response = await llm.ainvoke(messages)
    except Exception as e:
        logger.warning(f"Keyword extraction failed, continuing without keywords: {e}")
        return []

    keywords = parse_keywords(response_text(response), limit=max_keywords)
    if not keywords:
        logger.warning("Model returned no usable keywords")
    return keywords
