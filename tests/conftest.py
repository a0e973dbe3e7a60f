"""Shared test fixtures for askbridge tests."""

import json
from typing import List, Optional
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from askbridge.api import create_app
from askbridge.capability import Completed, Failed, Fragment
from askbridge.config import Settings


# ─────────────────────────────────────────────────────────────────────
# MOCK DATA
# ─────────────────────────────────────────────────────────────────────

MOCK_MODELS = ("model-a", "model-b", "model-c")
MOCK_DEFAULT_MODEL = "model-a"


class FakeCapability:
    """Scripted ask capability that records every invocation."""

    def __init__(
        self,
        answer: str = "Hello!",
        fragments: Optional[List[str]] = None,
        error: Optional[Exception] = None,
        failure: Optional[str] = None,
        raise_after_fragments: Optional[Exception] = None,
    ):
        self.answer = answer
        self.fragments = fragments if fragments is not None else ["Hel", "lo!"]
        self.error = error
        self.failure = failure
        self.raise_after_fragments = raise_after_fragments
        self.calls = []

    async def complete(self, prompt, model=None):
        self.calls.append(("complete", prompt, model))
        if self.error is not None:
            raise self.error
        return self.answer

    async def stream(self, prompt, model=None):
        self.calls.append(("stream", prompt, model))
        for text in self.fragments:
            yield Fragment(text)
        if self.raise_after_fragments is not None:
            raise self.raise_after_fragments
        if self.failure is not None:
            yield Failed(self.failure)
            return
        yield Completed("".join(self.fragments))


def parse_sse(body: str) -> List[str]:
    """Split an SSE body into the payloads of its data frames."""
    frames = [frame for frame in body.split("\n\n") if frame]
    assert all(frame.startswith("data: ") for frame in frames)
    return [frame[len("data: "):] for frame in frames]


def decode_frames(body: str) -> List[object]:
    """Parse SSE payloads, keeping the [DONE] sentinel as a string."""
    return [p if p == "[DONE]" else json.loads(p) for p in parse_sse(body)]


def chat_body(content="Hi", **extra) -> dict:
    return {"messages": [{"role": "user", "content": content}], **extra}


# ─────────────────────────────────────────────────────────────────────
# FIXTURES
# ─────────────────────────────────────────────────────────────────────

@pytest.fixture
def settings():
    return Settings(models=MOCK_MODELS, default_model=MOCK_DEFAULT_MODEL, cors_origins=())


@pytest.fixture
def capability():
    return FakeCapability()


@pytest.fixture
def shutdown():
    return MagicMock()


@pytest.fixture
def client(capability, settings, shutdown):
    app = create_app(capability, settings, shutdown=shutdown)
    return TestClient(app)
