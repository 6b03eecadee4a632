from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from avatarstore.exceptions import ConfigurationError

# Load .env file from project root
_env_path = Path(__file__).parent.parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class AvatarSettings(BaseModel):
    base_dir: Path = Path("var/avatars")
    # 0 disables resize-on-ingest
    max_dimension: int = Field(300, ge=0)


class LoggingSettings(BaseModel):
    level: str = "INFO"
    json_format: bool = False
    log_file: Path | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> str:
        level = str(value or "INFO").upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level


def _apply_env_overrides(payload: dict[str, Any]) -> dict[str, Any]:
    avatars = dict(payload.get("avatars") or {})
    if os.getenv("AVATARSTORE_BASE_DIR"):
        avatars["base_dir"] = os.environ["AVATARSTORE_BASE_DIR"]
    if os.getenv("AVATARSTORE_MAX_DIMENSION"):
        avatars["max_dimension"] = os.environ["AVATARSTORE_MAX_DIMENSION"]
    return {**payload, "avatars": avatars}


class Settings(BaseModel):
    avatars: AvatarSettings = Field(default_factory=AvatarSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def load(cls, path: Path | None = None) -> "Settings":
        """Load settings from a YAML configuration file.

        Args:
            path: Optional path to configuration file. If not provided, uses
                AVATARSTORE_CONFIG environment variable or defaults to
                config/default.yaml.

        Returns:
            Settings instance with loaded configuration, with
            AVATARSTORE_BASE_DIR and AVATARSTORE_MAX_DIMENSION applied on top.

        Raises:
            ConfigurationError: If the file does not exist or is invalid.
        """
        config_path = path or Path(os.getenv("AVATARSTORE_CONFIG", "config/default.yaml"))
        if not config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}", {"path": str(config_path)}
            )
        with config_path.open("r", encoding="utf-8") as fp:
            try:
                payload = yaml.safe_load(fp) or {}
            except yaml.YAMLError as exc:
                raise ConfigurationError(f"Invalid configuration: {exc}", {"path": str(config_path)}) from exc
        if not isinstance(payload, dict):
            raise ConfigurationError("Invalid configuration: expected a mapping", {"path": str(config_path)})

        return cls._build(payload, source=str(config_path))

    @classmethod
    def from_environment(cls) -> "Settings":
        """Defaults with AVATARSTORE_BASE_DIR and AVATARSTORE_MAX_DIMENSION applied."""
        return cls._build({}, source="environment")

    @classmethod
    def _build(cls, payload: dict[str, Any], *, source: str) -> "Settings":
        try:
            return cls(**_apply_env_overrides(payload))
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}", {"path": source}) from exc


@lru_cache(maxsize=1)
def get_settings(path: str | None = None) -> Settings:
    return Settings.load(Path(path) if path else None)


__all__ = [
    "Settings",
    "AvatarSettings",
    "LoggingSettings",
    "LOG_LEVELS",
    "get_settings",
]
