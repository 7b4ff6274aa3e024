# tests/test_config.py
from app.config import DEFAULT_PORT, get_settings


def test_defaults(monkeypatch):
    for name in ("PORT", "API_KEY", "REQUIRE_API_KEY", "LOG_LEVEL", "HOST"):
        monkeypatch.delenv(name, raising=False)
    s = get_settings()
    assert s.port == DEFAULT_PORT == 3000
    assert s.api_key is None
    assert s.require_api_key is False
    assert s.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8085")
    monkeypatch.setenv("API_KEY", "k")
    monkeypatch.setenv("REQUIRE_API_KEY", "true")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = get_settings()
    assert s.port == 8085
    assert s.api_key == "k"
    assert s.require_api_key is True
    assert s.log_level == "DEBUG"


def test_bad_port_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    assert get_settings().port == DEFAULT_PORT
