"""
Resume Optimizer - CLI Entry Point.

Tailors a PDF resume to a job description and prints the fit summary.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from resume_optimizer.agents import ResumeOptimizer, ResumeState
from resume_optimizer.config import configure_tracing, settings
from resume_optimizer.errors import ResumeOptimizerError
from resume_optimizer.tools.pdf_parser import encode_pdf_from_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tailor a resume to a job description")
    parser.add_argument("resume", help="Path to resume PDF")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--job-url", help="Job posting URL to fetch the description from")
    source.add_argument("--job-description", help="Job description text")
    source.add_argument("--job-file", help="Path to a text file holding the job description")
    parser.add_argument("--out", help="Write the optimized resume to this path")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the resume optimizer CLI."""
    logging.basicConfig(level=logging.INFO)
    parser = build_parser()
    args = parser.parse_args(argv)

    print("Resume Optimizer")
    print("=" * 40)

    resume_path = Path(args.resume)
    if not resume_path.exists() or resume_path.suffix.lower() != ".pdf":
        print(f"Error: {resume_path} is not a valid PDF")
        return 1

    job_description = args.job_description
    if args.job_file:
        job_description = Path(args.job_file).read_text(encoding="utf-8")
    if job_description is not None and not job_description.strip():
        parser.error("job description is empty")
    if args.job_url is not None and not args.job_url.strip():
        parser.error("job URL is empty")

    state = ResumeState(
        resume_b64=encode_pdf_from_path(str(resume_path)),
        job_url=args.job_url,
        job_description=job_description,
    )

    configure_tracing(settings)
    try:
        optimizer = ResumeOptimizer.from_settings(settings)
        result = asyncio.run(optimizer.run(state))
    except ResumeOptimizerError as e:
        print(f"Error: {e}")
        return 1
    except Exception as e:
        print(f"Error: optimization failed: {e}")
        return 1

    print(f"\nSteps: {' -> '.join(step.value for step in result.steps)}")
    print(f"Keywords: {', '.join(result.state.keywords or [])}")

    if args.out:
        out_path = Path(args.out)
        out_path.write_text(result.optimized_resume or "", encoding="utf-8")
        print(f"\nOptimized resume written to: {out_path.resolve()}")
    else:
        print("\nOptimized Resume")
        print("-" * 40)
        print(result.optimized_resume)

    print("\nSummary")
    print("-" * 40)
    print(result.summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
