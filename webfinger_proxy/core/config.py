from functools import lru_cache
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from webfinger_proxy import __version__

DEFAULT_DOMAIN = "idp.example.com"
DEFAULT_PORT = 8000
DEFAULT_APPLICATION_SLUG = "tailscale"
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class IssuerSettings(BaseSettings):
    """
    Identity provider coordinates, re-read on every WebFinger request.
    Only string fields, so building it never fails on unrelated variables.
    Empty variables are treated as unset so they fall back to the defaults.
    """
    DOMAIN: str = DEFAULT_DOMAIN
    APPLICATION_SLUG: str = DEFAULT_APPLICATION_SLUG

    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )


class Settings(IssuerSettings):
    """
    Configuration for the WebFinger proxy.
    Uses Pydantic-Settings for environment variable parsing from .env.
    """
    APP_NAME: str = "Authentik WebFinger Proxy"
    VERSION: str = __version__
    DEBUG: bool = False
    LOG_LEVEL: str = DEFAULT_LOG_LEVEL

    # Listener
    HOST: str = "0.0.0.0"
    PORT: int = DEFAULT_PORT

    @field_validator("PORT", mode="before")
    @classmethod
    def fallback_port(cls, value: Any) -> int:
        """Unparseable or out-of-range ports fall back to the default instead of failing."""
        if isinstance(value, bool):
            return DEFAULT_PORT
        if isinstance(value, int):
            port = value
        else:
            text = str(value)
            digits = text[1:] if text.startswith("+") else text
            if not digits.isascii() or not digits.isdigit():
                return DEFAULT_PORT
            port = int(digits)
        if not 0 <= port <= 65535:
            return DEFAULT_PORT
        return port

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> str:
        level = str(value).strip().upper()
        if level == "WARN":
            return "WARNING"
        if level not in LOG_LEVELS:
            return DEFAULT_LOG_LEVEL
        return level


@lru_cache
def get_settings() -> Settings:
    """Returns a singleton instance of the application settings, read once at startup."""
    return Settings()


def get_issuer_settings() -> IssuerSettings:
    """Read from the environment on every call, not from the cached settings."""
    return IssuerSettings()


def get_domain() -> str:
    """Returns the identity provider domain."""
    return get_issuer_settings().DOMAIN


def get_application_slug() -> str:
    return get_issuer_settings().APPLICATION_SLUG


def get_port() -> int:
    return get_settings().PORT
