"""
Shared fixtures: a fake OpenAI client and a TestClient wired to it.
"""
import json
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import app
from app.routers.compare import get_llm_service
from app.services.llm_service import LLMService
from tests.fakes import SAMPLE_ANALYSIS, completion


@pytest.fixture
def settings():
    return Settings(openai_api_key="sk-test", model_id="gpt-4o-mini")


@pytest.fixture
def openai_client():
    client = MagicMock()
    client.chat.completions.create.return_value = completion(json.dumps(SAMPLE_ANALYSIS))
    return client


@pytest.fixture
def llm_service(settings, openai_client):
    return LLMService(settings=settings, client=openai_client)


@pytest.fixture
def api_client(llm_service):
    app.dependency_overrides[get_llm_service] = lambda: llm_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
