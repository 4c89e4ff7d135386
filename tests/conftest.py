"""
Shared fixtures: the bundled resume document and a scripted stand-in for the OpenAI client,
so no test needs network access or an API key.
"""

import json
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from app.core.config import RESUME_PATH
from app.core.resume_store import load_resume
from app.main import app
from app.schemas.resume import ResumeDocument


def text_reply(content: str) -> SimpleNamespace:
    """Chat completion with a final answer and no tool calls."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content, tool_calls=None))])


def tool_reply(question: str, call_id: str = "call_1", name: str = "getResumeInfo") -> SimpleNamespace:
    """Chat completion requesting one tool call."""
    call = SimpleNamespace(
        id=call_id,
        function=SimpleNamespace(name=name, arguments=json.dumps({"question": question})),
    )
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=None, tool_calls=[call]))])


class FakeCompletions:
    """Returns scripted replies in order. A reply may be an exception (raised) or a callable(kwargs)."""

    def __init__(self, replies: list) -> None:
        self.replies = list(replies)
        self.calls: list[dict] = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            return reply(kwargs)
        return reply


class FakeOpenAI:
    def __init__(self, replies: list) -> None:
        self.chat = SimpleNamespace(completions=FakeCompletions(replies))

    @property
    def calls(self) -> list[dict]:
        return self.chat.completions.calls


@pytest.fixture
def llm() -> SimpleNamespace:
    """Helpers for scripting the fake OpenAI client: llm.client([...]), llm.text(...), llm.tool(...)."""
    return SimpleNamespace(client=FakeOpenAI, text=text_reply, tool=tool_reply)


@pytest.fixture
def resume() -> ResumeDocument:
    return load_resume(RESUME_PATH)


@pytest.fixture
def resume_json() -> dict:
    return json.loads(RESUME_PATH.read_text(encoding="utf-8"))


@pytest.fixture
def client() -> TestClient:
    # Lifespan is not run (no `with`), so tests supply the executor through dependency_overrides.
    yield TestClient(app)
    app.dependency_overrides.clear()
