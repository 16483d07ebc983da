import pytest

from argprep.mcp.settings import Settings


class TestSettings:
    """Test cases for Settings configuration."""

    def test_default_settings(self, default_settings: Settings) -> None:
        """Test that default settings are properly initialized."""
        assert default_settings.coerce_numbers is True
        assert default_settings.coerce_integers is True

    def test_env_prefix_configuration(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that environment variables with ARGPREP_MCP_ prefix are loaded."""
        monkeypatch.setenv("ARGPREP_MCP_COERCE_NUMBERS", "false")
        monkeypatch.setenv("ARGPREP_MCP_COERCE_INTEGERS", "false")

        settings = Settings()

        assert settings.coerce_numbers is False
        assert settings.coerce_integers is False

    def test_validate_assignment(self, default_settings: Settings) -> None:
        """Test that assigned values are validated."""
        default_settings.coerce_numbers = "no"
        assert default_settings.coerce_numbers is False
