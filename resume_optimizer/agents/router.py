"""
Router for the optimizer pipeline.

Maps the current state to the next step to run. Holds no memory of earlier
decisions, so the same state always gets the same answer.
"""

from __future__ import annotations

import logging
from enum import Enum

from resume_optimizer.agents.state import PipelineStage, ResumeState, stage_of

logger = logging.getLogger(__name__)


class Step(str, Enum):
    """Steps the router can choose. END stops the run."""

    FETCH_JOB_DESCRIPTION = "fetch_job_description"
    PARSE_RESUME = "parse_resume"
    EXTRACT_KEYWORDS = "extract_keywords"
    REWRITE_RESUME = "rewrite_resume"
    END = "end"


STAGE_STEPS: dict[PipelineStage, Step] = {
    PipelineStage.AWAITING_JOB_DESCRIPTION: Step.FETCH_JOB_DESCRIPTION,
    PipelineStage.AWAITING_RESUME_TEXT: Step.PARSE_RESUME,
    PipelineStage.AWAITING_KEYWORDS: Step.EXTRACT_KEYWORDS,
    PipelineStage.AWAITING_REWRITE: Step.REWRITE_RESUME,
    PipelineStage.DONE: Step.END,
}

_DECISION_LOG = {
    Step.FETCH_JOB_DESCRIPTION: "Need to fetch job description from URL.",
    Step.PARSE_RESUME: "Need to parse resume.",
    Step.EXTRACT_KEYWORDS: "Need to extract keywords.",
    Step.REWRITE_RESUME: "Need to rewrite resume.",
    Step.END: "All tasks complete. Ending run.",
}


def route(state: ResumeState) -> Step:
    """Decide which step runs next for this state."""
    step = STAGE_STEPS[stage_of(state)]
    logger.info(f"Decision: {_DECISION_LOG[step]}")
    return step
