"""
Tests for centralized configuration module.
"""

from __future__ import annotations

import logging
import os
from unittest import mock

import pytest
from pydantic import ValidationError

from evelib.core.config import (
    EveLibSettings,
    get_settings,
    is_debug_enabled,
    is_json_logging,
    reset_settings,
)


class TestEveLibSettings:
    """Test EveLibSettings class."""

    def test_default_values(self):
        """Test that default values are correct."""
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = EveLibSettings()

            assert settings.log_level == "WARNING"
            assert settings.debug is False
            assert settings.log_json is False
            assert settings.crest_public_uri == "https://public-crest.eveonline.com/"
            assert settings.crest_auth_uri == "https://crest-tq.eveonline.com/"
            assert settings.sso_uri == "https://login.eveonline.com/"
            assert settings.emd_char_name == "evelib"
            assert settings.timeout == 30.0
            assert settings.allow_automatic_refresh is False
            assert settings.user_agent == "evelib/1.0"

    def test_log_level_from_env(self):
        """Test log level parsing from environment."""
        with mock.patch.dict(os.environ, {"EVELIB_LOG_LEVEL": "DEBUG"}, clear=True):
            settings = EveLibSettings()
            assert settings.log_level == "DEBUG"
            assert settings.effective_log_level == "DEBUG"

    def test_log_level_case_insensitive(self):
        """Test log level is case-insensitive."""
        with mock.patch.dict(os.environ, {"EVELIB_LOG_LEVEL": "info"}, clear=True):
            settings = EveLibSettings()
            assert settings.log_level == "INFO"

    def test_invalid_log_level_rejected(self):
        """Unknown log levels fail validation."""
        with mock.patch.dict(os.environ, {"EVELIB_LOG_LEVEL": "CHATTY"}, clear=True):
            with pytest.raises(ValidationError):
                EveLibSettings()

    def test_debug_flag_enables_debug(self):
        """EVELIB_DEBUG raises the default level to DEBUG."""
        with mock.patch.dict(os.environ, {"EVELIB_DEBUG": "1"}, clear=True):
            settings = EveLibSettings()
            assert settings.effective_log_level == "DEBUG"
            assert settings.log_level_int == logging.DEBUG

    def test_explicit_level_beats_debug_flag(self):
        """An explicit log level wins over EVELIB_DEBUG."""
        with mock.patch.dict(
            os.environ, {"EVELIB_DEBUG": "1", "EVELIB_LOG_LEVEL": "ERROR"}, clear=True
        ):
            settings = EveLibSettings()
            assert settings.effective_log_level == "ERROR"

    def test_base_uris_gain_trailing_slash(self):
        """Base URIs are normalized to end with a slash."""
        with mock.patch.dict(
            os.environ,
            {
                "EVELIB_CREST_PUBLIC_URI": "http://localhost:8080/crest",
                "EVELIB_XML_API_URI": "http://localhost:8080/xml/",
            },
            clear=True,
        ):
            settings = EveLibSettings()
            assert settings.crest_public_uri == "http://localhost:8080/crest/"
            assert settings.xml_api_uri == "http://localhost:8080/xml/"

    def test_timeout_must_be_positive(self):
        """A zero timeout is rejected."""
        with mock.patch.dict(os.environ, {"EVELIB_TIMEOUT": "0"}, clear=True):
            with pytest.raises(ValidationError):
                EveLibSettings()

    def test_automatic_refresh_from_env(self):
        """Automatic refresh default comes from the environment."""
        with mock.patch.dict(os.environ, {"EVELIB_ALLOW_AUTOMATIC_REFRESH": "true"}, clear=True):
            settings = EveLibSettings()
            assert settings.allow_automatic_refresh is True

    def test_user_agent_from_env(self):
        """Callers add their own contact details through EVELIB_USER_AGENT."""
        with mock.patch.dict(
            os.environ, {"EVELIB_USER_AGENT": "evelib/1.0 (ops@example.org)"}, clear=True
        ):
            settings = EveLibSettings()
            assert settings.user_agent == "evelib/1.0 (ops@example.org)"


class TestGetSettings:
    """Test the singleton accessor."""

    def test_returns_cached_instance(self):
        """get_settings returns the same object until reset."""
        first = get_settings()
        second = get_settings()

        assert first is second

    def test_reset_reloads_environment(self):
        """reset_settings picks up environment changes."""
        with mock.patch.dict(os.environ, {"EVELIB_EMD_CHAR_NAME": "first"}, clear=True):
            assert get_settings().emd_char_name == "first"

        with mock.patch.dict(os.environ, {"EVELIB_EMD_CHAR_NAME": "second"}, clear=True):
            assert get_settings().emd_char_name == "first"
            reset_settings()
            assert get_settings().emd_char_name == "second"


class TestHelpers:
    """Test convenience predicates."""

    def test_is_debug_enabled(self):
        with mock.patch.dict(os.environ, {"EVELIB_LOG_LEVEL": "DEBUG"}, clear=True):
            assert is_debug_enabled() is True

    def test_is_debug_disabled_by_default(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            assert is_debug_enabled() is False

    def test_is_json_logging(self):
        with mock.patch.dict(os.environ, {"EVELIB_LOG_JSON": "1"}, clear=True):
            assert is_json_logging() is True
