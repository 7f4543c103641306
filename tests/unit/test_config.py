"""Unit tests for settings parsing."""

from quran_authz.config import Settings


def test_defaults_exempt_health_endpoints() -> None:
    settings = Settings(_env_file=None)
    assert settings.authz_exempt_path_list == ["/v1/health", "/v1/health/ready"]
    assert settings.cors_origin_list == []
    assert settings.api_prefix == "/v1"


def test_comma_separated_lists(monkeypatch) -> None:
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")
    monkeypatch.setenv("AUTHZ_EXEMPT_PATHS", "/status")
    settings = Settings(_env_file=None)
    assert settings.cors_origin_list == ["https://a.example", "https://b.example"]
    assert settings.authz_exempt_path_list == ["/status"]
