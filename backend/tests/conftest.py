import httpx
import pytest
from fastapi.testclient import TestClient

from outreach.database import Store
from outreach.dependencies import get_ai_client, get_http_client
from outreach.main import app
from outreach.services.ai_service import AICompletion, clean_and_parse_json


class FakeAIClient:
    """Stands in for AIClient; replies with queued text and records prompts."""

    def __init__(self, text: str = "{}", sources: list[str] | None = None, error: Exception | None = None):
        self.text = text
        self.sources = sources or []
        self.error = error
        self.calls: list[dict] = []

    async def complete(self, prompt, system=None, json_mode=False, temperature=None, web_search=False):
        self.calls.append({
            "prompt": prompt,
            "system": system,
            "json_mode": json_mode,
            "temperature": temperature,
            "web_search": web_search,
        })
        if self.error:
            raise self.error
        return AICompletion(text=self.text, sources=list(self.sources))

    async def generate_json(self, prompt, system=None, temperature=None):
        completion = await self.complete(prompt, system=system, json_mode=True, temperature=temperature)
        return clean_and_parse_json(completion.text)


@pytest.fixture
def store(tmp_path):
    s = Store.from_url(f"sqlite:///{tmp_path / 'outreach.db'}")
    s.init_schema()
    yield s
    s.dispose()


@pytest.fixture
def db(store):
    session = store.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(store):
    app.state.store = store
    c = TestClient(app)
    yield c
    app.dependency_overrides.clear()
    app.state.store = None


@pytest.fixture
def fake_ai(client):
    fake = FakeAIClient()
    app.dependency_overrides[get_ai_client] = lambda: fake
    return fake


@pytest.fixture
def http_requests(client):
    """Route outbound HTTP to a handler; returns (captured requests, set_handler)."""
    captured: list[httpx.Request] = []
    state = {"handler": lambda request: httpx.Response(200, json={"id": "msg-1"})}

    def transport_handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return state["handler"](request)

    async def override_http_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(transport_handler)) as c:
            yield c

    app.dependency_overrides[get_http_client] = override_http_client

    def set_handler(handler):
        state["handler"] = handler

    return captured, set_handler
