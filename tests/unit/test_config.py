"""🧪 Tests for render settings."""

from pathlib import Path

from plugindocs.config import Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings()

        assert settings.metadata_error_policy == "abort"
        assert settings.provider_dir == Path(".")
        assert settings.verbose is False

    def test_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PLUGINDOCS_METADATA_ERROR_POLICY", "raise")
        monkeypatch.setenv("PLUGINDOCS_PROVIDER_DIR", str(tmp_path))
        monkeypatch.setenv("PLUGINDOCS_VERBOSE", "true")

        settings = Settings()

        assert settings.metadata_error_policy == "raise"
        assert settings.provider_dir == tmp_path
        assert settings.verbose is True

    def test_from_yaml(self, tmp_path):
        yaml_file = tmp_path / "plugindocs.yaml"
        yaml_file.write_text(
            """
metadata_error_policy: raise
provider_dir: ./providers/example
verbose: true
"""
        )

        settings = Settings.from_yaml(yaml_file)

        assert settings.metadata_error_policy == "raise"
        assert settings.provider_dir == Path("./providers/example")
        assert settings.verbose is True

    def test_from_empty_yaml(self, tmp_path):
        yaml_file = tmp_path / "plugindocs.yaml"
        yaml_file.write_text("")

        assert Settings.from_yaml(yaml_file).metadata_error_policy == "abort"

    def test_get_settings_is_cached(self, monkeypatch):
        monkeypatch.setenv("PLUGINDOCS_VERBOSE", "true")

        first = get_settings()
        second = get_settings()

        assert first is second
        assert first.verbose is True
