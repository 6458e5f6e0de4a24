"""Site messages configuration settings."""

from typing import Any, List, Optional
import json
from pathlib import Path
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Shipped as package data of infrastructure.i18n; core and infrastructure are
# installed side by side, so the path holds for a checkout and an install.
DEFAULT_MESSAGES_DIR = str(
    Path(__file__).resolve().parents[1] / "infrastructure" / "i18n" / "messages"
)


class I18nSettings(BaseSettings):
    """Message catalog and locale configuration settings.

    SUPPORTED_LOCALES may be provided as a JSON list (``'["nl", "en"]'``) or
    as a comma-separated string (``nl,en``).
    """

    MESSAGES_DIR: str = Field(default=DEFAULT_MESSAGES_DIR, alias="MESSAGES_DIR")
    MESSAGES_FORMAT: str = Field(default="json", alias="MESSAGES_FORMAT")
    DEFAULT_LOCALE: str = Field(default="nl", alias="DEFAULT_LOCALE")
    SUPPORTED_LOCALES: Any = Field(
        default_factory=lambda: ["nl", "en", "fr", "de", "es", "it"],
        alias="SUPPORTED_LOCALES",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("MESSAGES_FORMAT", mode="before")
    @classmethod
    def _validate_format(cls, v: Optional[str]) -> str:
        """Normalize the message file format to ``json`` or ``yaml``."""
        if v is None:
            return "json"
        fmt = str(v).strip().lower()
        if fmt == "yml":
            fmt = "yaml"
        if fmt not in ("json", "yaml"):
            raise ValueError(f"MESSAGES_FORMAT must be 'json' or 'yaml': {v}")
        return fmt

    @field_validator("SUPPORTED_LOCALES", mode="before")
    @classmethod
    def _parse_locales(cls, v: Optional[Any]) -> List[str]:
        """Allow SUPPORTED_LOCALES as a JSON list, a comma list or a native list."""
        if v is None:
            return []

        if isinstance(v, (list, tuple)):
            return [str(item).strip() for item in v if str(item).strip()]

        if isinstance(v, str):
            s = v.strip()
            if s.startswith("["):
                try:
                    parsed = json.loads(s)
                except (json.JSONDecodeError, ValueError) as e:
                    raise ValueError(
                        f"Invalid SUPPORTED_LOCALES JSON: {e} (value: {s[:80]}...)"
                    ) from e
                if not isinstance(parsed, list):
                    raise ValueError("SUPPORTED_LOCALES JSON must be a list")
                return [str(item).strip() for item in parsed if str(item).strip()]
            return [part.strip() for part in s.split(",") if part.strip()]

        raise ValueError("SUPPORTED_LOCALES must be a list or a string")


class Settings(BaseSettings):
    """Site messages configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    # Functionality settings
    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        settings_map = {
            "i18n": I18nSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the settings instance
settings = Settings()
