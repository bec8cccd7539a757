import base64

import httpx
import pytest
from langchain_core.messages import AIMessage

from resume_optimizer.config import Settings


class FakeChatModel:
    """Stands in for the chat model. Replies are matched to calls in order."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    async def ainvoke(self, messages, **kwargs):
        self.calls.append(messages)
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, Exception):
            raise reply
        return AIMessage(content=reply)


def make_pdf(*lines: str) -> bytes:
    """Build a one-page PDF holding the given lines of text."""
    text_ops = " 0 -16 Td ".join(f"({line}) Tj" for line in lines)
    stream = f"BT /F1 12 Tf 72 720 Td {text_ops} ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] /Contents 4 0 R "
        b"/Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, 1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(out)


RESUME_LINES = ("Jane Doe", "Backend Engineer at Acme", "Python FastAPI PostgreSQL")

REWRITE_REPLY = (
    "Jane Doe\nSenior Backend Engineer delivering Python and AWS services.\n\n"
    "Summary: Jane has shipped Python services on AWS for years. "
    "She knows the stack. She is a strong fit."
)


@pytest.fixture
def settings():
    return Settings(_env_file=None, deepseek_api_key="", firecrawl_api_key="")


@pytest.fixture
def resume_b64():
    return base64.b64encode(make_pdf(*RESUME_LINES)).decode("ascii")


@pytest.fixture
def fake_llm():
    return FakeChatModel("Python, AWS, Docker, Kubernetes, FastAPI", REWRITE_REPLY)


def job_page_transport(html="<html><body><h1>Backend Engineer</h1><p>Python and AWS required.</p></body></html>",
                       status_code=200):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=html, headers={"Content-Type": "text/html"})

    return httpx.MockTransport(handler)
