"""Load and save settings as YAML."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from tuiporal.models.state.app_settings import (
    AppSettings,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".tuiporal"
CONFIG_FILE = CONFIG_DIR / "config.yaml"


class ConfigManager:
    """Reads and writes ``AppSettings`` from the user's config directory."""

    @staticmethod
    def load(path: Path | None = None) -> AppSettings:
        """Load settings from ``path`` (default ``~/.tuiporal/config.yaml``).

        A missing file yields default settings.

        Raises:
            ConfigLoadError: The file exists but cannot be read or validated.
        """
        config_path = path or CONFIG_FILE
        if not config_path.exists():
            logger.info(f"Config file not found at {config_path}, using default config")
            return AppSettings()

        logger.info(f"Loading config from {config_path}")
        try:
            with config_path.open(encoding="utf-8") as handle:
                raw: Any = yaml.safe_load(handle) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"Cannot read {config_path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigLoadError(f"{config_path} must contain a mapping")

        try:
            return AppSettings.model_validate(raw)
        except ValidationError as e:
            raise ConfigLoadError(f"Invalid settings in {config_path}: {e}") from e

    @staticmethod
    def save(settings: AppSettings, path: Path | None = None) -> Path:
        """Write settings as YAML and return the path written.

        Secret values are written in clear text because the file is the
        credential store; they are never echoed to logs.

        Raises:
            ConfigSaveError: The file cannot be written.
        """
        config_path = path or CONFIG_FILE
        data = settings.model_dump(mode="json", exclude_none=True)
        for profile, model in zip(data.get("profiles", []), settings.profiles):
            if model.api_key is not None:
                profile["api_key"] = model.api_key.get_secret_value()
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with config_path.open("w", encoding="utf-8") as handle:
                yaml.safe_dump(data, handle, sort_keys=False)
        except OSError as e:
            raise ConfigSaveError(f"Cannot write {config_path}: {e}") from e
        logger.info(f"Saved config to {config_path}")
        return config_path
