"""
Pytest configuration and shared fixtures.

Environment is pinned before any ``studybot`` import because settings and the
database engine are built at import time.
"""
import os
import tempfile
from pathlib import Path

_TMP = Path(tempfile.mkdtemp(prefix="studybot-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TMP / 'test.db'}"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["MODE"] = "dev"
os.environ.pop("AUTH_REQUIRED", None)
os.environ.pop("GROQ_API_KEY", None)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from studybot.modules.study.pipeline import StudyPipeline  # noqa: E402


def make_pdf(*pages: str) -> bytes:
    """Build a small but well-formed PDF with one Helvetica text line per page.

    Page text must not contain parentheses or backslashes.
    """
    objects: list[bytes] = []
    page_ids = []
    # 1: catalog, 2: pages, 3: font, then (page, content) pairs
    n_pages = len(pages)
    for i in range(n_pages):
        page_ids.append(4 + 2 * i)
    kids = " ".join(f"{pid} 0 R" for pid in page_ids)
    objects.append(b"<< /Type /Catalog /Pages 2 0 R >>")
    objects.append(f"<< /Type /Pages /Kids [{kids}] /Count {n_pages} >>".encode())
    objects.append(b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>")
    for i, text in enumerate(pages):
        content_id = page_ids[i] + 1
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {content_id} 0 R >>"
            ).encode()
        )
        stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
        objects.append(
            b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream"
        )

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"
    xref_at = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_at
    return bytes(out)


class FakeCompletionClient:
    """Stands in for the hosted model: replays canned replies and records prompts."""

    def __init__(self, *replies: str, error: Exception | None = None) -> None:
        self.replies = list(replies)
        self.error = error
        self.calls: list[dict] = []

    def queue(self, *replies: str) -> None:
        self.replies.extend(replies)

    async def complete(self, prompt: str, api_key: str | None, model: str | None = None) -> str:
        self.calls.append({"prompt": prompt, "api_key": api_key, "model": model})
        if self.error is not None:
            raise self.error
        return self.replies.pop(0)


@pytest.fixture
def sample_pdf() -> bytes:
    return make_pdf("Photosynthesis converts light energy into chemical energy.")


@pytest.fixture
def fake_client() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture
def pipeline(fake_client) -> StudyPipeline:
    return StudyPipeline(client=fake_client)


@pytest.fixture
def api(fake_client):
    from studybot.apis.deps import get_pipeline
    from studybot.main import app

    app.dependency_overrides[get_pipeline] = lambda: StudyPipeline(client=fake_client)
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_question_json() -> str:
    return '{"question":"Q?","options":["A. 1","B. 2","C. 3","D. 4"]}'
