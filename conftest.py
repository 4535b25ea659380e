import pytest

from mirrormind.libs.schemas.settings import get_settings

_CREDENTIAL_VARS = (
    "HUGGINGFACE_API_TOKEN",
    "MIRRORMIND_HUGGINGFACE_API_TOKEN",
    "GOOGLE_AI_API_KEY",
    "MIRRORMIND_GOOGLE_AI_API_KEY",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("MIRRORMIND_ENVIRONMENT", "test")
    for var in _CREDENTIAL_VARS:
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
