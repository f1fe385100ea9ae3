import pytest
from fastapi.testclient import TestClient

from main import app
from settings import Settings, get_settings


@pytest.fixture
def settings():
    return Settings(
        API_KEY="test-key",
        MODEL_NAME="gemini-test",
        MAX_OUTPUT_TOKENS=300,
        TEMPERATURE=0.7,
        AIRTABLE_API_KEY="",
        AIRTABLE_BASE_ID="",
        AIRTABLE_TABLE_NAME="Chat Conversations",
        AIRTABLE_API_URL="https://api.airtable.com/v0",
        AIRTABLE_TIMEOUT=10.0,
        GA_MEASUREMENT_ID=None,
    )


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def fresh_genai_clients():
    from completion import _client_for

    _client_for.cache_clear()
    yield
    _client_for.cache_clear()
