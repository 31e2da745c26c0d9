"""Tests for the command line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from tuiporal import __main__ as entrypoint
from tuiporal.models.state.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the test runner's log handlers in place."""
    monkeypatch.setattr(entrypoint, "configure_logging", lambda log_file, level: None)


class TestLoadSettings:
    def test_missing_file_defaults(self, tmp_path: Path) -> None:
        settings = entrypoint.load_settings(tmp_path / "config.yaml")
        assert settings.get_active_profile().name == "local"

    def test_invalid_file_falls_back_to_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("page_size: -5\n", encoding="utf-8")
        settings = entrypoint.load_settings(path)
        assert settings.page_size == 50

    def test_namespace_override(self, tmp_path: Path) -> None:
        settings = entrypoint.load_settings(tmp_path / "config.yaml", namespace="orders")
        assert settings.get_active_profile().namespace == "orders"

    def test_profile_override(self, tmp_path: Path) -> None:
        settings = entrypoint.load_settings(tmp_path / "config.yaml", profile="staging")
        assert settings.active_profile == "staging"
        assert settings.get_active_profile() is None


class TestMain:
    def test_write_config(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "out" / "config.yaml"
        code = entrypoint.main(["--config", str(path), "--namespace", "orders", "--write-config"])
        assert code == 0
        assert "Wrote" in capsys.readouterr().out
        assert ConfigManager.load(path).get_active_profile().namespace == "orders"

    def test_write_config_failure(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")
        code = entrypoint.main(["--config", str(blocker / "config.yaml"), "--write-config"])
        assert code == 1
        assert "error:" in capsys.readouterr().err

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(SystemExit):
            entrypoint.build_parser().parse_args(["--log-level", "LOUD"])
