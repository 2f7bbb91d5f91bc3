"""
Enumerated wire fields used by the market data APIs.

Each member lists its canonical value, its numeric code, then any other
string spellings seen on the wire.
"""

from ..core.enums import WireEnum, unambiguous


@unambiguous
class UploadType(WireEnum):
    """Kind of market upload reported by eve-marketdata."""

    ORDERS = ("orders", 0, "o")
    HISTORY = ("history", 1, "h")
    FULL = ("full", 2)
    PARTIAL = ("partial", 3)


@unambiguous
class OrderType(WireEnum):
    """Side of a market order."""

    SELL = ("sell", 0, "s")
    BUY = ("buy", 1, "b")
