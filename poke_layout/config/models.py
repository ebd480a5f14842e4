"""Configuration model for the layout style engine."""

import os
import re
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from ..layout_logging import get_logger

logger = get_logger()

ENV_PREFIX = "POKE_LAYOUT_"

_PREFIX_PATTERN = re.compile(r"^[a-z][a-z0-9-]*$")
_TRUE_VALUES = {"1", "true", "yes", "on"}


class StyleEngineConfig(BaseModel):
    """Engine-wide settings with validation."""

    # Namespace for signatures, generator keys and host attributes
    signature_prefix: str = Field(default="pc")
    signature_hash: Literal["djb2", "blake2b"] = Field(default="djb2")

    # Sanitization and registry policy
    strict_sanitization: bool = Field(default=False)
    detect_collisions: bool = Field(default=True)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: Literal["text", "json"] = Field(default="text")

    @field_validator("signature_prefix")
    @classmethod
    def validate_prefix(cls, v: Any) -> str:
        value = str(v).strip()
        if not _PREFIX_PATTERN.match(value):
            raise ValueError(
                "signature_prefix must start with a lowercase letter and contain "
                "only lowercase letters, digits and dashes"
            )
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: Any) -> str:
        value = str(v).strip().upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return value

    @classmethod
    def env_overrides(cls) -> dict[str, Any]:
        """Collect POKE_LAYOUT_* environment overrides (unset ones omitted)."""
        env_vars: dict[str, Any] = {
            "signature_prefix": os.environ.get(f"{ENV_PREFIX}SIGNATURE_PREFIX"),
            "signature_hash": os.environ.get(f"{ENV_PREFIX}SIGNATURE_HASH"),
            "log_level": os.environ.get(f"{ENV_PREFIX}LOG_LEVEL"),
            "log_format": os.environ.get(f"{ENV_PREFIX}LOG_FORMAT"),
        }
        for key in ("strict_sanitization", "detect_collisions"):
            raw = os.environ.get(f"{ENV_PREFIX}{key.upper()}")
            if raw is not None:
                env_vars[key] = raw.strip().lower() in _TRUE_VALUES
        overrides = {k: v for k, v in env_vars.items() if v is not None}
        if overrides:
            logger.debug(f"Environment overrides: {', '.join(sorted(overrides))}")
        return overrides

    @classmethod
    def from_env(cls) -> "StyleEngineConfig":
        """Create config with environment variable overrides."""
        return cls(**cls.env_overrides())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StyleEngineConfig":
        """Create from a camelCase dictionary (config file layout)."""
        return cls(
            signature_prefix=data.get("signaturePrefix", "pc"),
            signature_hash=data.get("signatureHash", "djb2"),
            strict_sanitization=data.get("strictSanitization", False),
            detect_collisions=data.get("detectCollisions", True),
            log_level=data.get("logLevel", "INFO"),
            log_format=data.get("logFormat", "text"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase config file layout."""
        return {
            "signaturePrefix": self.signature_prefix,
            "signatureHash": self.signature_hash,
            "strictSanitization": self.strict_sanitization,
            "detectCollisions": self.detect_collisions,
            "logLevel": self.log_level,
            "logFormat": self.log_format,
        }
