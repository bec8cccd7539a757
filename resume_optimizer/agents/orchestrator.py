"""
Orchestrator.

Runs the optimizer pipeline as a LangGraph state graph: the router picks a
step, the step's task runs, its patch is merged, and the router is consulted
again until it answers END. One task runs at a time.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from langgraph.graph import END, START, StateGraph

from resume_optimizer.agents.llm import ChatModel, create_chat_model
from resume_optimizer.agents.router import Step, route
from resume_optimizer.agents.state import ResumeState, merge_state
from resume_optimizer.agents.tasks import ResumeTasks, Task
from resume_optimizer.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptimizationResult:
    """Final state of a run plus the steps that produced it, in order."""

    state: ResumeState
    steps: list[Step] = field(default_factory=list)

    @property
    def optimized_resume(self) -> str | None:
        return self.state.optimized_resume

    @property
    def summary(self) -> str | None:
        return self.state.summary


def _next_node(state: ResumeState) -> str:
    return route(state).value


def _as_node(step: Step, task: Task):
    async def node(state: ResumeState) -> dict:
        logger.info(f"---Executing Step: {step.value}---")
        return await task(state)

    node.__name__ = step.value
    return node


class ResumeOptimizer:
    """Drives a ResumeState to completion through the pipeline tasks."""

    def __init__(self, tasks: Mapping[Step, Task], recursion_limit: int = 25):
        missing = [step for step in Step if step is not Step.END and step not in tasks]
        if missing:
            raise ValueError(f"No task registered for steps: {[s.value for s in missing]}")
        if Step.END in tasks:
            raise ValueError("END cannot have a task")

        self.recursion_limit = recursion_limit
        self._graph = self._build_graph(tasks)

    @classmethod
    def from_settings(
        cls,
        settings: Settings = default_settings,
        llm: ChatModel | None = None,
    ) -> ResumeOptimizer:
        """Build an optimizer with the standard tasks. Creates the chat model if none is given."""
        tasks = ResumeTasks(llm=llm or create_chat_model(settings), settings=settings)
        return cls(tasks.dispatch_table(), recursion_limit=settings.graph_recursion_limit)

    @staticmethod
    def _build_graph(tasks: Mapping[Step, Task]):
        graph = StateGraph(ResumeState)
        path_map = {step.value: step.value for step in tasks}
        path_map[Step.END.value] = END

        for step, task in tasks.items():
            graph.add_node(step.value, _as_node(step, task))

        # The router is consulted on entry and after every step
        graph.add_conditional_edges(START, _next_node, path_map)
        for step in tasks:
            graph.add_conditional_edges(step.value, _next_node, path_map)

        return graph.compile()

    async def run(self, initial_state: ResumeState) -> OptimizationResult:
        """
        Run the pipeline until the router answers END.

        Task exceptions are not caught; they end the run and reach the caller
        unchanged.

        Args:
            initial_state: State holding the resume and one job source

        Returns:
            OptimizationResult with the final state and executed steps
        """
        state = initial_state
        steps: list[Step] = []

        async for update in self._graph.astream(
            initial_state.model_dump(exclude_none=True),
            config={"recursion_limit": self.recursion_limit},
            stream_mode="updates",
        ):
            for node_name, patch in update.items():
                step = Step(node_name)
                steps.append(step)
                state = merge_state(state, patch or {})

        logger.info(f"Run finished after {len(steps)} steps: {' -> '.join(s.value for s in steps)}")
        return OptimizationResult(state=state, steps=steps)
