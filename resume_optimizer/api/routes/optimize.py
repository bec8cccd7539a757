"""Resume optimization endpoint."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from resume_optimizer.agents import ResumeOptimizer, ResumeState
from resume_optimizer.api.limiter import limiter
from resume_optimizer.api.schemas import OptimizeRequest, OptimizeResponse
from resume_optimizer.config import settings
from resume_optimizer.errors import ConfigurationError, ResumeParseError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_optimizer(request: Request) -> ResumeOptimizer:
    """FastAPI dependency for the optimizer built at startup."""
    optimizer = getattr(request.app.state, "optimizer", None)
    if optimizer is None:
        # Startup could not build it (e.g. missing API key); retry per request
        try:
            optimizer = ResumeOptimizer.from_settings(settings)
        except ConfigurationError as e:
            raise HTTPException(status_code=503, detail=str(e))
        request.app.state.optimizer = optimizer
    return optimizer


@router.post("", response_model=OptimizeResponse)
@limiter.limit(settings.optimize_rate_limit)
async def optimize_resume(
    request: Request,
    data: OptimizeRequest,
    optimizer: ResumeOptimizer = Depends(get_optimizer),
):
    """Tailor a resume to a job description and summarize the fit."""
    state = ResumeState(
        resume_b64=data.resume_file_b64,
        job_url=str(data.job_url) if data.job_url else None,
        job_description=data.job_description,
    )

    logger.info("Invoking resume optimizer...")
    try:
        result = await optimizer.run(state)
    except ResumeParseError as e:
        logger.error(f"Resume could not be parsed: {e}")
        raise HTTPException(status_code=400, detail=f"Failed to parse resume: {e}")
    except Exception as e:
        logger.error(f"Error during optimization: {e}")
        raise HTTPException(status_code=500, detail=f"Optimization failed: {e}")
    logger.info(f"Optimizer finished in {len(result.steps)} steps")

    return OptimizeResponse(
        optimized_resume=result.optimized_resume or "",
        summary=result.summary or "",
    )
