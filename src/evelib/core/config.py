"""
evelib Centralized Configuration

Service endpoints, client defaults and logging switches, read from
EVELIB_* environment variables (or a project .env) through pydantic-settings.

Usage:
    from evelib.core.config import get_settings

    settings = get_settings()
    client_timeout = settings.timeout

Environment Variables:
    EVELIB_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    EVELIB_DEBUG: Shortcut flag (enables DEBUG level if set)
    EVELIB_LOG_JSON: Output logs as JSON
    EVELIB_CREST_PUBLIC_URI: Base URI for public CREST
    EVELIB_CREST_AUTH_URI: Base URI for authenticated CREST
    EVELIB_SSO_URI: Base URI for EVE single sign-on
    EVELIB_XML_API_URI: Base URI for the EVE XML API
    EVELIB_EMD_URI: Base URI for eve-marketdata.com
    EVELIB_EMD_CHAR_NAME: Application identifier sent to eve-marketdata.com
    EVELIB_EVECENTRAL_URI: Base URI for eve-central.com
    EVELIB_TIMEOUT: HTTP timeout in seconds
    EVELIB_USER_AGENT: User-Agent header sent with every request
    EVELIB_ALLOW_AUTOMATIC_REFRESH: Default for CREST automatic token refresh
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_AUTH_URI,
    DEFAULT_EMD_URI,
    DEFAULT_EVECENTRAL_URI,
    DEFAULT_PUBLIC_URI,
    DEFAULT_SSO_URI,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    DEFAULT_XML_API_URI,
)


def _find_project_env_file() -> Path | None:
    """
    Locate the .env next to the nearest enclosing pyproject.toml.

    Returns:
        The .env path, or None when there is no project root or no .env in it
    """
    here = Path(__file__).resolve().parent

    for directory in [here, *here.parents][:10]:
        if (directory / "pyproject.toml").is_file():
            candidate = directory / ".env"
            return candidate if candidate.is_file() else None

    return None


_ENV_FILE = _find_project_env_file()


class EveLibSettings(BaseSettings):
    """
    evelib configuration settings with validation.

    Environment variables are automatically loaded with the EVELIB_ prefix.
    Every setting has a default, so an empty environment is valid.
    """

    model_config = SettingsConfigDict(
        env_prefix="EVELIB_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # =========================================================================
    # Logging Configuration
    # =========================================================================

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Log level for evelib loggers",
    )

    debug: bool = Field(
        default=False,
        description="Shortcut flag (enables DEBUG level if set)",
    )

    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format for machine parsing",
    )

    # =========================================================================
    # Endpoints
    # =========================================================================

    crest_public_uri: str = Field(
        default=DEFAULT_PUBLIC_URI,
        description="Base URI for public CREST (with trailing slash)",
    )

    crest_auth_uri: str = Field(
        default=DEFAULT_AUTH_URI,
        description="Base URI for authenticated CREST (with trailing slash)",
    )

    sso_uri: str = Field(
        default=DEFAULT_SSO_URI,
        description="Base URI for EVE single sign-on",
    )

    xml_api_uri: str = Field(
        default=DEFAULT_XML_API_URI,
        description="Base URI for the EVE XML API",
    )

    emd_uri: str = Field(
        default=DEFAULT_EMD_URI,
        description="Base URI for eve-marketdata.com",
    )

    emd_char_name: str = Field(
        default="evelib",
        description="Application identifier required by eve-marketdata.com",
    )

    evecentral_uri: str = Field(
        default=DEFAULT_EVECENTRAL_URI,
        description="Base URI for eve-central.com",
    )

    # =========================================================================
    # HTTP
    # =========================================================================

    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        description="HTTP timeout in seconds",
    )

    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header sent with every request",
    )

    allow_automatic_refresh: bool = Field(
        default=False,
        description="Refresh the CREST access token once when a request is rejected",
    )

    # =========================================================================
    # Validators
    # =========================================================================

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator(
        "crest_public_uri",
        "crest_auth_uri",
        "sso_uri",
        "xml_api_uri",
        "emd_uri",
        "evecentral_uri",
    )
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        """Base URIs are joined with relative paths and need a trailing slash."""
        return v if v.endswith("/") else v + "/"

    # =========================================================================
    # Computed Properties
    # =========================================================================

    @property
    def effective_log_level(self) -> str:
        """
        Get effective log level, respecting EVELIB_DEBUG.

        Priority:
        1. Explicit EVELIB_LOG_LEVEL
        2. EVELIB_DEBUG=1 -> DEBUG
        3. Default: WARNING
        """
        if self.debug and self.log_level == "WARNING":
            return "DEBUG"
        return self.log_level

    @property
    def log_level_int(self) -> int:
        """Effective log level as a logging module constant."""
        return getattr(logging, self.effective_log_level)


# =============================================================================
# Singleton Accessor
# =============================================================================


@lru_cache(maxsize=1)
def get_settings() -> EveLibSettings:
    """
    Return the process-wide settings, validated on first use.
    """
    return EveLibSettings()


def reset_settings() -> None:
    """
    Drop the cached settings so the next get_settings() re-reads the environment.

    Tests call this after changing EVELIB_* variables.
    """
    get_settings.cache_clear()


def is_debug_enabled() -> bool:
    """True when the effective log level is DEBUG."""
    return get_settings().effective_log_level == "DEBUG"


def is_json_logging() -> bool:
    """True when log records are emitted as JSON."""
    return get_settings().log_json
