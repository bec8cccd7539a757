"""FastAPI application."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from resume_optimizer.agents import ResumeOptimizer
from resume_optimizer.api.limiter import limiter
from resume_optimizer.config import configure_tracing, settings
from resume_optimizer.errors import ConfigurationError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ALLOWED_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the optimizer on startup."""
    configure_tracing(settings)
    try:
        app.state.optimizer = ResumeOptimizer.from_settings(settings)
    except ConfigurationError as e:
        logger.warning(f"Optimizer not ready: {e}")
        app.state.optimizer = None
    yield


app = FastAPI(
    title="Resume Optimizer API",
    description="Tailors a resume to a job description and summarizes the fit",
    version="0.1.0",
    lifespan=lifespan,
)

app.state.limiter = limiter


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    """Return 429 with a clear message when rate limit is exceeded."""
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded: {exc.detail}"},
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Reject malformed requests with 400 before the optimizer runs."""
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request body", "errors": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Authorization"],
)


# Import and include routers
from resume_optimizer.api.routes import optimize  # noqa: E402

app.include_router(optimize.router, prefix="/optimize", tags=["Optimize"])


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
