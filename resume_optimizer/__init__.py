"""
Resume Optimizer Backend.

Core components:
- agents: Pipeline state, router, task collaborators, orchestrator
- tools: Job page scraper, PDF parser
- api: FastAPI boundary for the optimizer
"""
