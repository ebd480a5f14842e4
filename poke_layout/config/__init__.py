"""Configuration for the layout style engine."""

from .loader import CONFIG_FILENAME, StyleConfigLoader, load_style_config
from .models import StyleEngineConfig

__all__ = [
    "CONFIG_FILENAME",
    "StyleConfigLoader",
    "StyleEngineConfig",
    "load_style_config",
]
