from vitaspoon_core.config import get_settings


def test_defaults():
    settings = get_settings()

    assert settings.openai_api_key == ""
    assert settings.openai_model_text == "gpt-4o-mini"
    assert settings.openrouter_model == "deepseek/deepseek-chat"
    assert settings.probe_timeout_s == 3.0
    assert settings.generation_timeout_s == 30.0
    assert "CU" in settings.restricted_countries


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "g-1")
    monkeypatch.setenv("PROBE_TIMEOUT_S", "1.5")
    monkeypatch.setenv("GENERATION_TIMEOUT_S", "no-es-numero")
    monkeypatch.setenv("REGION_DETECTION", "sí")
    monkeypatch.setenv("RESTRICTED_COUNTRIES", " ve, cu ,,")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.gemini_api_key == "g-1"
    assert settings.probe_timeout_s == 1.5
    assert settings.generation_timeout_s == 30.0
    assert settings.region_detection is True
    assert settings.restricted_countries == ("VE", "CU")


def test_openrouter_key_wins_over_deepseek(monkeypatch):
    monkeypatch.setenv("DEEPSEEK_API_KEY", "ds-1")
    get_settings.cache_clear()
    assert get_settings().openrouter_api_key == "ds-1"

    monkeypatch.setenv("OPENROUTER_API_KEY", "or-1")
    get_settings.cache_clear()
    assert get_settings().openrouter_api_key == "or-1"


def test_settings_are_cached():
    assert get_settings() is get_settings()
