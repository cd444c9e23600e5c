import pytest
from dotenv import load_dotenv

from search.base_provider import BaseSearchProvider
from search.contracts import SearchPolicy, SearchResultSet

# Load environment variables from .env file for tests
load_dotenv()


class RecordingProvider(BaseSearchProvider):
    """Offline provider that records calls and returns (or raises) a canned outcome."""

    name = "fake"

    def __init__(self, result: SearchResultSet | None = None, error: Exception | None = None):
        self.result = result
        self.error = error
        self.calls: list[tuple[str, SearchPolicy]] = []

    async def search(self, query: str, policy: SearchPolicy) -> SearchResultSet | None:
        self.calls.append((query, policy))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def make_provider():
    """Factory fixture building RecordingProvider instances."""

    def _make(result: SearchResultSet | None = None, error: Exception | None = None) -> RecordingProvider:
        return RecordingProvider(result=result, error=error)

    return _make


@pytest.fixture
def mock_env(monkeypatch):
    """Fixture to mock environment variables for testing."""
    env_vars = {
        "TAVILY_API_KEY": "tvly-test-key",
        "MCP_SERVER_NAME": "tavily-search-server",
        "MCP_SERVER_VERSION": "0.1.0",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars
