"""
Resume Rewriter.

Rewrites a resume for a target job and splits the model answer into the
optimized resume and a short fit summary.
"""

import logging

from langchain_core.messages import HumanMessage, SystemMessage

from resume_optimizer.agents.llm import ChatModel, response_text

logger = logging.getLogger(__name__)

SUMMARY_MARKER = "Summary:"
FALLBACK_SUMMARY = "Summary could not be generated separately."
MISSING_JOB_DESCRIPTION = "No job description was provided."

RESUME_REWRITER_PROMPT = """You are an expert resume writer. Rewrite the resume to be tailored to the target job description.

## Rules
1. Integrate these specific keywords naturally: {keywords}
2. Use strong, professional action verbs and quantify achievements where possible
3. Keep the tone professional and confident
4. Do not invent employers, degrees or dates that are not in the original
5. After the rewritten resume, write a compelling 3-sentence summary under the heading "Summary:" explaining why the candidate is an excellent fit for the role
"""


def truncate_resume(resume_text: str, max_chars: int) -> str:
    """Cut resume text down to max_chars for token efficiency."""
    if len(resume_text) <= max_chars:
        return resume_text
    return resume_text[:max_chars] + "\n[truncated]"


def split_summary(content: str) -> tuple[str, str]:
    """
    Split model output into (optimized_resume, summary).

    Splits on the first SUMMARY_MARKER. Without one, the whole text is the
    resume and the summary is FALLBACK_SUMMARY.
    """
    if SUMMARY_MARKER not in content:
        return content, FALLBACK_SUMMARY

    resume_part, summary_part = content.split(SUMMARY_MARKER, 1)
    return resume_part.strip(), summary_part.strip() or FALLBACK_SUMMARY


async def rewrite_resume(
    llm: ChatModel,
    resume_text: str,
    keywords: list[str],
    job_description: str | None,
    max_resume_chars: int,
) -> tuple[str, str]:
    """
    Rewrite a resume for a job and produce a fit summary.

    Args:
        llm: Chat model to ask
        resume_text: Original resume text
        keywords: Keywords to work into the rewrite
        job_description: Target job description (may be missing)
        max_resume_chars: Resume length sent to the model

    Returns:
        Tuple of (optimized_resume, summary)
    """
    if not job_description:
        logger.warning("Rewriting resume without a job description")
        job_description = MISSING_JOB_DESCRIPTION

    messages = [
        SystemMessage(content=RESUME_REWRITER_PROMPT.format(keywords=", ".join(keywords) or "none")),
        HumanMessage(content=(
            f"Original Resume Content:\n{truncate_resume(resume_text, max_resume_chars)}\n\n"
            f"Target Job Description:\n{job_description}"
        )),
    ]

    response = await llm.ainvoke(messages)
    content = response_text(response)

    optimized_resume, summary = split_summary(content)
    if summary == FALLBACK_SUMMARY:
        logger.warning(f"No '{SUMMARY_MARKER}' section in model output, using fallback summary")
    return optimized_resume, summary
