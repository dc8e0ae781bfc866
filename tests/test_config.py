from config import get_settings


def test_defaults(monkeypatch):
    for name in ("COLORKIT_HOST", "COLORKIT_PORT", "COLORKIT_LOG_LEVEL", "COLORKIT_MCP_ENABLED"):
        monkeypatch.delenv(name, raising=False)
    settings = get_settings()
    assert settings.host == "0.0.0.0"
    assert settings.port == 8973
    assert settings.log_level == "INFO"
    assert settings.mcp_enabled is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("COLORKIT_PORT", "9000")
    monkeypatch.setenv("COLORKIT_LOG_LEVEL", "debug")
    monkeypatch.setenv("COLORKIT_MCP_ENABLED", "false")
    settings = get_settings()
    assert settings.port == 9000
    assert settings.log_level == "DEBUG"
    assert settings.mcp_enabled is False
