"""
evelib Core Module

Shared infrastructure for the API clients: configuration, logging, errors,
row-set decoding, the resource registry, SSO authentication and the request
dispatcher.
"""

from .auth import AuthContext, AuthResponse, EveAuth, VerifyResponse
from .config import EveLibSettings, get_settings, reset_settings
from .constants import (
    DEFAULT_AUTH_URI,
    DEFAULT_EMD_URI,
    DEFAULT_EVECENTRAL_URI,
    DEFAULT_PUBLIC_URI,
    DEFAULT_SSO_URI,
    DEFAULT_XML_API_URI,
)
from .dispatch import RequestDispatcher
from .enums import WireEnum, unambiguous
from .errors import (
    AuthenticationError,
    DecodeError,
    EveLibError,
    RequestError,
    UnknownEnumToken,
)
from .formatters import format_isk, get_utc_timestamp, parse_datetime
from .logging import get_logger, reset_logging
from .registry import register_decoder, resource_type
from .rowset import decode_rows, decode_xml_rows, normalize_rows, xml_to_dict
from .sync import blocking, run_sync

__all__ = [
    # Auth
    "AuthContext",
    "AuthResponse",
    "EveAuth",
    "VerifyResponse",
    # Config
    "EveLibSettings",
    "get_settings",
    "reset_settings",
    # Endpoints
    "DEFAULT_AUTH_URI",
    "DEFAULT_EMD_URI",
    "DEFAULT_EVECENTRAL_URI",
    "DEFAULT_PUBLIC_URI",
    "DEFAULT_SSO_URI",
    "DEFAULT_XML_API_URI",
    # Dispatch
    "RequestDispatcher",
    # Enums
    "WireEnum",
    "unambiguous",
    # Errors
    "AuthenticationError",
    "DecodeError",
    "EveLibError",
    "RequestError",
    "UnknownEnumToken",
    # Formatters
    "format_isk",
    "get_utc_timestamp",
    "parse_datetime",
    # Logging
    "get_logger",
    "reset_logging",
    # Registry
    "register_decoder",
    "resource_type",
    # Row-sets
    "decode_rows",
    "decode_xml_rows",
    "normalize_rows",
    "xml_to_dict",
    # Sync bridge
    "blocking",
    "run_sync",
]
