"""
Shared fixtures: isolated environment, seed files and a recording HTTP transport.
"""

import json
import logging
from urllib.parse import unquote

import httpx
import pytest

from reindexer.logger import LOGGER_NAME

ENV_VARS = ["API_URL", "API_KEY", "API_KEY_WRITER", "REINDEX_TIMEOUT"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # setenv first so monkeypatch also removes anything a dotenv load adds later
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def fresh_logger():
    # handlers bind the sys.stdout / sys.stderr that were current when they were created
    logger = logging.getLogger(LOGGER_NAME)
    saved, level = list(logger.handlers), logger.level
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = saved
    logger.setLevel(level)


@pytest.fixture
def api_env(monkeypatch):
    monkeypatch.setenv("API_URL", "http://search.test")
    monkeypatch.setenv("API_KEY", "writer-key")


@pytest.fixture
def missing_env_file(tmp_path):
    return str(tmp_path / "does-not-exist.env")


@pytest.fixture
def seed_docs():
    return [
        {"id": "doc-1", "text": "first", "metadata": {"lang": "en"}},
        {"id": "doc-2", "text": "second"},
        {"id": "doc/3", "text": "third", "metadata": {"lang": "de"}},
    ]


@pytest.fixture
def write_seed(tmp_path):
    def _write(docs, name="seed-data.json"):
        path = tmp_path / name
        path.write_text(json.dumps(docs), encoding="utf-8")
        return str(path)

    return _write


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request and answers from per-route status tables."""

    def __init__(self, delete_status=None, index_status=None):
        self.requests = []
        self.delete_status = delete_status or {}
        self.index_status = index_status or {}
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "DELETE":
            doc_id = unquote(request.url.raw_path.decode("ascii").rsplit("/", 1)[-1])
            status = self.delete_status.get(doc_id, 204)
            return httpx.Response(status, text="" if status < 400 else f"delete failed: {status}")
        if request.method == "POST":
            doc_id = json.loads(request.content)["id"]
            status = self.index_status.get(doc_id, 201)
            return httpx.Response(status, json={"id": doc_id} if status < 400 else {"error": "boom"})
        return httpx.Response(405)

    @property
    def methods(self):
        return [r.method for r in self.requests]


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def make_transport():
    return RecordingTransport
