# tests/conftest.py
import logging
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from healthchat.main import app as fastapi_app
from healthchat.core import config


@pytest.fixture(autouse=True)
def stable_config(monkeypatch):
    # Pin values a developer's .env or shell could override
    monkeypatch.setattr(config, "GOOGLE_GEMINI_API_KEY", "test-key")
    monkeypatch.setattr(config, "PROVIDER", "gemini")
    monkeypatch.setattr(config, "GEMINI_MODEL", "gemini-pro")
    monkeypatch.setattr(config, "GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta")
    monkeypatch.setattr(config, "TEMPERATURE", 0.7)
    monkeypatch.setattr(config, "TOP_K", 40)
    monkeypatch.setattr(config, "TOP_P", 0.95)
    monkeypatch.setattr(config, "MAX_OUTPUT_TOKENS", 1024)


@pytest_asyncio.fixture
async def app():
    return fastapi_app

@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.setattr(config, "GOOGLE_GEMINI_API_KEY", None)

@pytest.fixture
def fake_provider(monkeypatch):
    # Replaces the provider lookup; records every call it receives.
    calls = []
    state = {"reply": "hello", "error": None}

    async def fake_generate(prompt, *, model, api_key, options=None):
        calls.append({"prompt": prompt, "model": model, "api_key": api_key, "options": options})
        if state["error"] is not None:
            raise state["error"]
        return state["reply"]

    monkeypatch.setattr("healthchat.services.chat_service.get_generate", lambda: fake_generate)
    state["calls"] = calls
    return state

@pytest.fixture
def caplog_info(caplog):
    caplog.set_level(logging.INFO)
    return caplog
