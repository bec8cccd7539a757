"""
Pipeline state for the resume optimizer.

The state is an immutable record that is only ever advanced through
merge_state(). Which fields are present decides the pipeline stage.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class ResumeState(BaseModel):
    """State threaded through one optimizer run."""

    model_config = ConfigDict(frozen=True)

    # Input
    resume_b64: str
    job_url: str | None = None

    # Intermediate
    job_description: str | None = None
    resume_text: str | None = None
    keywords: list[str] | None = None

    # Output
    optimized_resume: str | None = None
    summary: str | None = None


class PipelineStage(str, Enum):
    """Where a run currently stands, derived from field presence."""

    AWAITING_JOB_DESCRIPTION = "awaiting_job_description"
    AWAITING_RESUME_TEXT = "awaiting_resume_text"
    AWAITING_KEYWORDS = "awaiting_keywords"
    AWAITING_REWRITE = "awaiting_rewrite"
    DONE = "done"


def stage_of(state: ResumeState) -> PipelineStage:
    """Compute the pipeline stage. Checks are ordered by dependency."""
    if state.job_url is not None and state.job_description is None:
        return PipelineStage.AWAITING_JOB_DESCRIPTION
    if state.resume_text is None:
        return PipelineStage.AWAITING_RESUME_TEXT
    if state.keywords is None:
        return PipelineStage.AWAITING_KEYWORDS
    if state.optimized_resume is None:
        return PipelineStage.AWAITING_REWRITE
    return PipelineStage.DONE


def merge_state(current: ResumeState, patch: dict[str, Any]) -> ResumeState:
    """
    Return a new state with every field in patch written over current.

    Patches are expected to fill previously empty fields. Overwriting a set
    field is logged, not prevented.

    Args:
        current: State before the step ran
        patch: Partial update returned by a task collaborator

    Returns:
        The merged state (current is left untouched)
    """
    unknown = set(patch) - set(ResumeState.model_fields)
    if unknown:
        raise ValueError(f"Unknown state fields in patch: {sorted(unknown)}")

    for field, value in patch.items():
        existing = getattr(current, field)
        if existing is not None and existing != value:
            logger.warning(f"State field '{field}' overwritten during merge")

    data = current.model_dump()
    data.update(patch)
    return ResumeState.model_validate(data)
