"""
evelib Test Suite - Shared Fixtures and Configuration

HTTP traffic is mocked with pytest-httpx (the httpx_mock fixture); payloads
live in tests/fixtures/ as the upstream APIs serve them.
"""

import json
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"

PUBLIC_URI = "https://public-crest.eveonline.com/"
AUTH_URI = "https://crest-tq.eveonline.com/"
SSO_TOKEN_URL = "https://login.eveonline.com/oauth/token"
SSO_VERIFY_URL = "https://login.eveonline.com/oauth/verify"
XML_API_URI = "https://api.eveonline.com/"
EMD_URI = "https://api.eve-marketdata.com/api/"
EVECENTRAL_URI = "https://api.eve-central.com/api/"


def load_json_fixture(path: str):
    """
    Load a JSON fixture.

    Args:
        path: Relative path within tests/fixtures/, e.g. "crest/root.json"
    """
    return json.loads((FIXTURES_DIR / path).read_text())


def load_text_fixture(path: str) -> str:
    """Load a fixture as text (XML documents)."""
    return (FIXTURES_DIR / path).read_text()


@pytest.fixture
def json_fixture():
    """
    Fixture providing load_json_fixture.

    Usage:
        def test_something(json_fixture):
            root = json_fixture("crest/root.json")
    """
    return load_json_fixture


@pytest.fixture
def text_fixture():
    """Fixture providing load_text_fixture."""
    return load_text_fixture


@pytest.fixture
def xml_fixture():
    """Fixture parsing an XML fixture into its root element."""

    def load(path: str) -> ET.Element:
        return ET.fromstring(load_text_fixture(path))

    return load


# =============================================================================
# Sample Rows
# =============================================================================


@pytest.fixture
def recent_upload_row() -> dict:
    """One eve-marketdata recent upload row."""
    return {
        "typeID": 34,
        "regionID": 10000002,
        "upload_type": "full",
        "updated": "2014-01-01",
    }


@pytest.fixture
def token_grant() -> dict:
    """SSO token grant body."""
    return {
        "access_token": "new_access_token",
        "token_type": "Bearer",
        "expires_in": 1200,
        "refresh_token": "new_refresh_token",
    }


# =============================================================================
# Environment
# =============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep EVELIB_* variables from the developer's shell out of tests."""
    import os

    for name in list(os.environ):
        if name.startswith("EVELIB_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_singletons():
    """
    Reset module-level state between tests.

    - Settings cache (MUST be first - other modules read from settings)
    - Logging state (affects propagation for caplog)
    """

    def do_reset():
        from evelib.core.config import reset_settings
        from evelib.core.logging import reset_logging

        reset_settings()
        reset_logging()

    do_reset()
    yield
    do_reset()
