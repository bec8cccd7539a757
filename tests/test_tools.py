import asyncio
import base64

import httpx
import pytest
from conftest import RESUME_LINES, job_page_transport, make_pdf

from resume_optimizer.errors import ResumeOptimizerError, ResumeParseError, ScrapeError
from resume_optimizer.tools.job_scraper import FIRECRAWL_API_URL, SCRAPE_FAILURE_PREFIX, fetch_job_description
from resume_optimizer.tools.pdf_parser import decode_resume, encode_pdf_from_path, parse_pdf

JOB_URL = "https://www.linkedin.com/jobs/view/1"


def _fetch(settings, transport):
    return asyncio.run(fetch_job_description(JOB_URL, settings, transport=transport))


def test_parse_pdf_extracts_all_lines():
    text = parse_pdf(make_pdf(*RESUME_LINES))
    for line in RESUME_LINES:
        assert line in text


def test_decode_resume_round_trip(resume_b64):
    assert "Backend Engineer at Acme" in decode_resume(resume_b64)


def test_decode_resume_rejects_bad_base64():
    with pytest.raises(ResumeParseError, match="base64"):
        decode_resume("%%% not base64 %%%")


def test_decode_resume_rejects_non_pdf():
    with pytest.raises(ResumeParseError):
        decode_resume(base64.b64encode(b"just some text").decode())


def test_encode_pdf_from_path(tmp_path):
    pdf = make_pdf("Jane Doe")
    path = tmp_path / "resume.pdf"
    path.write_bytes(pdf)

    assert base64.b64decode(encode_pdf_from_path(str(path))) == pdf


def test_fetch_converts_page_to_text(settings):
    description = _fetch(settings, job_page_transport())

    assert "Backend Engineer" in description
    assert "<p>" not in description


def test_fetch_http_error_is_returned_as_text(settings):
    description = _fetch(settings, job_page_transport(status_code=500))
    assert description == f"{SCRAPE_FAILURE_PREFIX} HTTP error 500"


def test_fetch_empty_page_is_returned_as_text(settings):
    description = _fetch(settings, job_page_transport(html="<html><body></body></html>"))

    assert description.startswith(SCRAPE_FAILURE_PREFIX)
    assert "Could not find job description" in description


def test_fetch_network_error_is_returned_as_text(settings):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    description = _fetch(settings, httpx.MockTransport(handler))
    assert description == f"{SCRAPE_FAILURE_PREFIX} connection refused"


def test_fetch_truncates_long_pages(settings):
    settings.max_job_description_chars = 50
    description = _fetch(settings, job_page_transport(html=f"<p>{'a' * 500}</p>"))

    assert description.startswith("a" * 50)
    assert description.endswith("[Content truncated...]")


def test_fetch_uses_firecrawl_when_configured(settings):
    settings.firecrawl_api_key = "fc-key"
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["Authorization"]
        return httpx.Response(200, json={"data": {"markdown": "# Backend Engineer\nPython"}})

    description = _fetch(settings, httpx.MockTransport(handler))

    assert description == "# Backend Engineer\nPython"
    assert seen == {"url": FIRECRAWL_API_URL, "auth": "Bearer fc-key"}


def test_fetch_firecrawl_without_content_is_returned_as_text(settings):
    settings.firecrawl_api_key = "fc-key"
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"data": {}}))

    description = _fetch(settings, transport)
    assert description == f"{SCRAPE_FAILURE_PREFIX} No content extracted from: {JOB_URL}"


def test_fetch_invalid_url_is_returned_as_text(settings):
    description = asyncio.run(fetch_job_description("http://[::1", settings, transport=job_page_transport()))
    assert description.startswith(SCRAPE_FAILURE_PREFIX)


@pytest.mark.parametrize("body", [[], {"data": ["markdown"]}, {"data": {"markdown": None}}])
def test_fetch_firecrawl_unexpected_json_is_returned_as_text(settings, body):
    settings.firecrawl_api_key = "fc-key"
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=body))

    description = _fetch(settings, transport)
    assert description == f"{SCRAPE_FAILURE_PREFIX} No content extracted from: {JOB_URL}"


def test_fetch_firecrawl_non_json_is_returned_as_text(settings):
    settings.firecrawl_api_key = "fc-key"
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>oops</html>"))

    assert _fetch(settings, transport).startswith(SCRAPE_FAILURE_PREFIX)


def test_scrape_error_is_an_optimizer_error():
    assert issubclass(ScrapeError, ResumeOptimizerError)
