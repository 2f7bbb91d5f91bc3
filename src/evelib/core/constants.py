"""
evelib Constants

Endpoint defaults and well-known EVE identifiers shared by the clients.
"""

# =============================================================================
# Endpoints
# =============================================================================

DEFAULT_PUBLIC_URI = "https://public-crest.eveonline.com/"
"""Public CREST. Overridable per client via base_public_uri."""

DEFAULT_AUTH_URI = "https://crest-tq.eveonline.com/"
"""Authenticated CREST. Overridable per client via base_auth_uri."""

DEFAULT_SSO_URI = "https://login.eveonline.com/"
DEFAULT_XML_API_URI = "https://api.eveonline.com/"
DEFAULT_EMD_URI = "https://api.eve-marketdata.com/api/"
DEFAULT_EVECENTRAL_URI = "https://api.eve-central.com/api/"

SSO_TOKEN_PATH = "oauth/token"
SSO_VERIFY_PATH = "oauth/verify"

# =============================================================================
# HTTP
# =============================================================================

DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "evelib/1.0"

# HTTP statuses that mean the access token was rejected
AUTH_FAILURE_STATUS_CODES = {401}

# XML API error codes in this range are authentication failures
XML_API_AUTH_ERROR_CODES = range(200, 300)

# =============================================================================
# Trade Hubs
# =============================================================================

THE_FORGE_REGION_ID = 10000002
JITA_SYSTEM_ID = 30000142
TRITANIUM_TYPE_ID = 34

TRADE_HUB_REGIONS = {
    "jita": 10000002,  # The Forge
    "amarr": 10000043,  # Domain
    "dodixie": 10000032,  # Sinq Laison
    "rens": 10000030,  # Heimatar
    "hek": 10000042,  # Metropolis
}
