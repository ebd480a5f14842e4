"""Loads the style engine configuration from file and environment."""

import json
import os
from pathlib import Path

from pydantic import ValidationError

from ..errors import ConfigurationError
from ..layout_logging import get_logger
from .models import StyleEngineConfig

logger = get_logger()

# Default configuration file name
CONFIG_FILENAME = "poke-layout.config.json"
CONFIG_PATH_ENV = "POKE_LAYOUT_CONFIG"


class StyleConfigLoader:
    """Loader for style engine configuration."""

    def __init__(self, project_path: Path | None = None):
        """Initialize the config loader.

        Args:
            project_path: Path to the project root. Defaults to current directory.
        """
        self.project_path = Path(project_path) if project_path else Path.cwd()

    def load(self, config_path: Path | None = None) -> StyleEngineConfig:
        """Load configuration.

        File precedence (highest to lowest):
        1. Explicit config_path
        2. Environment variable POKE_LAYOUT_CONFIG
        3. poke-layout.config.json in project root
        4. Defaults

        POKE_LAYOUT_* value overrides are applied on top of the file.

        Raises:
            ConfigurationError: If the file is unreadable or invalid.
        """
        path = self._resolve_path(config_path)
        data = self._read_file(path) if path else {}
        if not path:
            logger.debug("No style engine config found, using defaults")

        try:
            base = StyleEngineConfig.from_dict(data)
            overrides = StyleEngineConfig.env_overrides()
            if not overrides:
                return base
            return StyleEngineConfig(**{**base.model_dump(), **overrides})
        except ValidationError as e:
            logger.error(f"Invalid style engine config: {e}")
            raise ConfigurationError(f"Invalid style engine config: {e}") from e

    def _resolve_path(self, config_path: Path | None) -> Path | None:
        if config_path is not None:
            if not config_path.exists():
                raise ConfigurationError(f"Config file not found: {config_path}")
            return config_path

        env_path = os.environ.get(CONFIG_PATH_ENV)
        if env_path and Path(env_path).exists():
            return Path(env_path)

        project_config = self.project_path / CONFIG_FILENAME
        if project_config.exists():
            return project_config
        return None

    def _read_file(self, config_path: Path) -> dict:
        logger.debug(f"Loading style engine config from {config_path}")
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read config {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config {config_path} must be a JSON object")
        return data

    def save(self, config: StyleEngineConfig, config_path: Path | None = None) -> Path:
        """Save configuration to a file.

        Returns:
            Path where config was saved.
        """
        if config_path is None:
            config_path = self.project_path / CONFIG_FILENAME

        content = json.dumps(config.to_dict(), indent=2)
        config_path.write_text(content, encoding="utf-8")
        logger.info(f"Saved style engine config to {config_path}")
        return config_path


def load_style_config(
    project_path: Path | None = None, config_path: Path | None = None
) -> StyleEngineConfig:
    """Convenience function to load style engine configuration."""
    return StyleConfigLoader(project_path).load(config_path)
