"""
Agents for Resume Optimization.

- state: Pipeline state, stages and merge
- router: Picks the next step from the state
- tasks: Job fetch, resume parse, keyword extraction, resume rewrite
- orchestrator: Runs the router/task loop to completion
"""

from resume_optimizer.agents.orchestrator import OptimizationResult, ResumeOptimizer
from resume_optimizer.agents.router import Step, route
from resume_optimizer.agents.state import PipelineStage, ResumeState, merge_state, stage_of

__all__ = [
    "OptimizationResult",
    "PipelineStage",
    "ResumeOptimizer",
    "ResumeState",
    "Step",
    "merge_state",
    "route",
    "stage_of",
]
