"""
evelib - EVE Online API Client Library

Typed access to CREST, the EVE XML API, EVE SSO, eve-marketdata.com and
eve-central.com. Every operation has a blocking form and an _async form.

Usage as library:
    from evelib import EveCrest, Map

    crest = EveCrest()
    root = crest.get_root()
    alliances = root.load(root.alliances)

    jumps = await Map().get_jumps_async()

Usage as CLI:
    python -m evelib crest-root
    python -m evelib market-history 34 --region jita
    python -m evelib recent-uploads --type full

Package structure:
    evelib/
    ├── core/           # Shared infrastructure
    │   ├── config.py   # Settings (EVELIB_* environment)
    │   ├── rowset.py   # Row-set decoding
    │   ├── dispatch.py # Typed requests and token refresh
    │   └── auth.py     # EVE SSO
    ├── models/         # Typed resources per API
    ├── clients/        # One client per API
    └── commands/       # CLI command implementations
"""

__version__ = "1.0.0"

# Re-export commonly used classes for convenience
from .clients import (
    CrestMode,
    EveCentral,
    EveCentralOptions,
    EveCrest,
    EveMarketData,
    EveMarketDataOptions,
    Map,
)
from .core import (
    AuthenticationError,
    DecodeError,
    EveAuth,
    EveLibError,
    RequestError,
    UnknownEnumToken,
    get_utc_timestamp,
)
from .models import OrderType, UploadType

__all__ = [
    "__version__",
    # Clients
    "CrestMode",
    "EveAuth",
    "EveCentral",
    "EveCentralOptions",
    "EveCrest",
    "EveMarketData",
    "EveMarketDataOptions",
    "Map",
    # Enums
    "OrderType",
    "UploadType",
    # Errors
    "AuthenticationError",
    "DecodeError",
    "EveLibError",
    "RequestError",
    "UnknownEnumToken",
    "get_utc_timestamp",
]
