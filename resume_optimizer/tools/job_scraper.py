"""
Job description scraper.

Fetches a job posting page and returns its text. Never raises: failures are
returned as a message starting with SCRAPE_FAILURE_PREFIX so the pipeline can
carry on with a degraded description.
"""

import logging

import httpx
from markdownify import markdownify

from resume_optimizer.config import Settings
from resume_optimizer.errors import ScrapeError

logger = logging.getLogger(__name__)

FIRECRAWL_API_URL = "https://api.firecrawl.dev/v1/scrape"

SCRAPE_FAILURE_PREFIX = "Failed to scrape the URL:"

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)


async def fetch_job_description(
    url: str,
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """
    Fetch the job description behind a posting URL.

    Args:
        url: URL of the job posting
        settings: Scrape timeout, Firecrawl key and length limit
        transport: Optional httpx transport (used by tests)

    Returns:
        Job description text, or a SCRAPE_FAILURE_PREFIX message on failure
    """
    try:
        async with httpx.AsyncClient(
            timeout=settings.scrape_timeout,
            follow_redirects=True,
            transport=transport,
        ) as client:
            # Try Firecrawl API first, fallback to direct fetch
            if settings.firecrawl_api_key:
                content = await _scrape_with_firecrawl(client, url, settings.firecrawl_api_key)
            else:
                content = await _scrape_direct(client, url)

    except httpx.HTTPStatusError as e:
        logger.warning(f"Scrape of {url} failed with HTTP {e.response.status_code}")
        return f"{SCRAPE_FAILURE_PREFIX} HTTP error {e.response.status_code}"
    except Exception as e:
        logger.warning(f"Scrape of {url} failed: {e}")
        return f"{SCRAPE_FAILURE_PREFIX} {e}"

    return _truncate(content, settings.max_job_description_chars)


async def _scrape_with_firecrawl(client: httpx.AsyncClient, url: str, api_key: str) -> str:
    """Scrape using Firecrawl API."""
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }
    payload = {
        "url": url,
        "formats": ["markdown"],
    }

    response = await client.post(FIRECRAWL_API_URL, headers=headers, json=payload)
    response.raise_for_status()

    body = response.json()
    data = body.get("data") if isinstance(body, dict) else None
    markdown = data.get("markdown") if isinstance(data, dict) else None
    content = markdown.strip() if isinstance(markdown, str) else ""
    if not content:
        raise ScrapeError(f"No content extracted from: {url}")
    return content


async def _scrape_direct(client: httpx.AsyncClient, url: str) -> str:
    """Fetch the page directly and convert its HTML to markdown."""
    response = await client.get(url, headers={"User-Agent": USER_AGENT})
    response.raise_for_status()

    content = markdownify(response.text).strip()
    if not content:
        raise ScrapeError(
            "Could not find job description on the page. The page structure might have changed."
        )
    return content


def _truncate(content: str, max_chars: int) -> str:
    if len(content) > max_chars:
        return content[:max_chars] + "\n\n[Content truncated...]"
    return content
