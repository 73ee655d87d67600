from cvgen.config import Settings, configuration_warnings
from conftest import make_settings


def test_no_warnings_when_fully_configured():
    assert configuration_warnings(make_settings()) == []


def test_warnings_for_every_missing_value():
    settings = make_settings(openai_api_key=None, gemini_api_key=None, auth_token=None)
    warnings = configuration_warnings(settings)
    assert warnings == [
        "OPENAI_API_KEY is not set. OpenAI features may not work.",
        "GEMINI_API_KEY is not set. Google AI features may not work.",
        "AUTH_TOKEN is not set or is empty. The application is insecure, and submissions will be blocked.",
    ]


def test_empty_auth_token_counts_as_unset():
    settings = make_settings(auth_token="")
    assert settings.configured_auth_token() is None
    assert any("AUTH_TOKEN" in w for w in configuration_warnings(settings))


def test_configured_auth_token():
    assert make_settings(auth_token="abc").configured_auth_token() == "abc"


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("GOOGLEAI_API_KEY", "g-env")
    monkeypatch.setenv("AUTH_TOKEN", "tok")
    monkeypatch.setenv("OPENAI_MODEL", "gpt-4o-mini")
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

    settings = Settings(_env_file=None)

    assert settings.openai_api_key.get_secret_value() == "sk-env"
    assert settings.gemini_api_key.get_secret_value() == "g-env"
    assert settings.configured_auth_token() == "tok"
    assert settings.openai_model == "gpt-4o-mini"
