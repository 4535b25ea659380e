from mirrormind.libs.schemas import get_settings


def test_get_settings_defaults():
    settings = get_settings()

    assert settings.app_name == "MirrorMind"
    assert settings.summarization_model == "facebook/bart-large-cnn"
    assert settings.sentiment_model == "distilbert-base-uncased-finetuned-sst-2-english"
    assert settings.generation_model == "gemini-pro"
    assert settings.remote_input_limit == 1024
    assert settings.min_remote_summary_length == 50
    assert settings.huggingface_api_token is None
    assert settings.remote_inference_available is False


def test_get_settings_reads_aliases(monkeypatch):
    monkeypatch.setenv("MIRRORMIND_APP_NAME", "TestMind")
    monkeypatch.setenv("HUGGINGFACE_API_TOKEN", "hf-token")
    monkeypatch.setenv("MIRRORMIND_REMOTE_INPUT_LIMIT", "512")
    get_settings.cache_clear()
    settings = get_settings()

    assert settings.app_name == "TestMind"
    assert settings.huggingface_api_token == "hf-token"
    assert settings.remote_input_limit == 512
    assert settings.remote_inference_available is True


def test_remote_inference_can_be_switched_off(monkeypatch):
    monkeypatch.setenv("HUGGINGFACE_API_TOKEN", "hf-token")
    monkeypatch.setenv("USE_REMOTE_INFERENCE", "false")
    get_settings.cache_clear()

    assert get_settings().remote_inference_available is False


def test_settings_are_cached():
    assert get_settings() is get_settings()
