# tests/conftest.py
import pytest

from peerloom.config import ApiSettings, get_settings

TEST_BASE_URL = "https://peeringdb.test/api/"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep PEERLOOM_* variables of the developer machine out of the tests."""
    for name in (
        "PEERLOOM_BASE_URL",
        "PEERLOOM_API_KEY",
        "PEERLOOM_REQUEST_TIMEOUT",
        "PEERLOOM_USER_AGENT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> ApiSettings:
    """Settings built from defaults only, ignoring any .env file."""
    return ApiSettings(_env_file=None, base_url=TEST_BASE_URL)
