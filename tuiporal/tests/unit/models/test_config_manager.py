"""Tests for YAML settings persistence."""

from __future__ import annotations

from pathlib import Path

import pytest

from tuiporal.models.state.app_settings import (
    AppSettings,
    ConfigLoadError,
    ConfigSaveError,
    ConnectionProfile,
    TlsSettings,
)
from tuiporal.models.state.config_manager import ConfigManager


class TestLoad:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """A missing config file is not an error."""
        settings = ConfigManager.load(tmp_path / "absent.yaml")
        assert settings == AppSettings()
        assert settings.get_active_profile().address == "localhost:7233"

    def test_loads_profiles(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text(
            "active_profile: cloud\n"
            "page_size: 25\n"
            "profiles:\n"
            "  - name: local\n"
            "    address: localhost:7233\n"
            "  - name: cloud\n"
            "    address: acme.tmprl.cloud:7233\n"
            "    namespace: acme.prod\n"
            "    api_key: secret-key\n"
            "    tls:\n"
            "      cert_path: /certs/client.pem\n"
            "      key_path: /certs/client.key\n",
            encoding="utf-8",
        )
        settings = ConfigManager.load(path)
        profile = settings.get_active_profile()
        assert profile.name == "cloud"
        assert profile.namespace == "acme.prod"
        assert profile.uses_tls
        assert profile.tls.is_mutual
        assert profile.api_key.get_secret_value() == "secret-key"
        assert "secret-key" not in repr(profile)
        assert settings.page_size == 25

    def test_invalid_values_raise(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("page_size: 0\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError):
            ConfigManager.load(path)

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError, match="mapping"):
            ConfigManager.load(path)

    def test_malformed_yaml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("profiles: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError):
            ConfigManager.load(path)


class TestSave:
    def test_save_then_load_keeps_secret(self, tmp_path: Path) -> None:
        """The API key is written in clear so it survives a reload."""
        settings = AppSettings(
            profiles=[
                ConnectionProfile(
                    name="cloud",
                    address="acme.tmprl.cloud:7233",
                    api_key="secret-key",
                    tls=TlsSettings(),
                )
            ],
            active_profile="cloud",
        )
        path = ConfigManager.save(settings, tmp_path / "nested" / "config.yaml")
        assert path.exists()
        reloaded = ConfigManager.load(path)
        assert reloaded.get_active_profile().api_key.get_secret_value() == "secret-key"
        assert reloaded.get_active_profile().uses_tls

    def test_unwritable_path_raises(self, tmp_path: Path) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(ConfigSaveError):
            ConfigManager.save(AppSettings(), blocker / "config.yaml")


class TestActiveProfile:
    def test_unknown_name_resolves_to_none(self) -> None:
        settings = AppSettings(active_profile="missing")
        assert settings.get_active_profile() is None

    def test_no_name_uses_first_profile(self) -> None:
        settings = AppSettings(active_profile=None)
        assert settings.get_active_profile().name == "local"

    def test_no_profiles(self) -> None:
        settings = AppSettings(profiles=[], active_profile=None)
        assert settings.get_active_profile() is None
