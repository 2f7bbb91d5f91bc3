"""
eve-marketdata.com resource models.

Responses arrive in an envelope:

    {"emd": {"version": 2, "currentTime": "...", "result": [{"row": {...}}, ...]}}

The result row set may be an array, a lone object, or rows wrapped in
{"row": ...}; every response type decodes it with decode_rows().
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from ..core.errors import DecodeError, RequestError
from ..core.registry import register_decoder
from ..core.rowset import decode_rows
from .base import EveModel, TypedResource
from .enums import OrderType, UploadType

# =============================================================================
# Rows
# =============================================================================


class RecentUploadsEntry(EveModel):
    upload_type: UploadType = Field(alias="upload_type")
    region_id: int = Field(alias="regionID")
    type_id: int = Field(alias="typeID")
    updated: str


class ItemOrderEntry(EveModel):
    order_type: OrderType = Field(alias="buysell")
    order_id: int = Field(alias="orderID")
    type_id: int = Field(alias="typeID")
    region_id: int = Field(alias="regionID")
    solar_system_id: int | None = Field(default=None, alias="solarsystemID")
    station_id: int | None = Field(default=None, alias="stationID")
    price: float
    vol_entered: int | None = Field(default=None, alias="volEntered")
    vol_remaining: int = Field(alias="volRemaining")
    min_volume: int | None = Field(default=None, alias="minVolume")
    order_range: int | None = Field(default=None, alias="range")
    issued: str | None = None
    expires: str | None = None
    created: str | None = None


class ItemPriceEntry(EveModel):
    order_type: OrderType = Field(alias="buysell")
    type_id: int = Field(alias="typeID")
    region_id: int | None = Field(default=None, alias="regionID")
    solar_system_id: int | None = Field(default=None, alias="solarsystemID")
    station_id: int | None = Field(default=None, alias="stationID")
    price: float
    updated: str | None = None


class ItemHistoryEntry(EveModel):
    type_id: int = Field(alias="typeID")
    region_id: int = Field(alias="regionID")
    date: str
    low_price: float = Field(alias="lowPrice")
    high_price: float = Field(alias="highPrice")
    avg_price: float = Field(alias="avgPrice")
    volume: int
    orders: int


# =============================================================================
# Responses
# =============================================================================


class RecentUploads(TypedResource):
    uploads: list[RecentUploadsEntry] = Field(default_factory=list)


class ItemOrders(TypedResource):
    orders: list[ItemOrderEntry] = Field(default_factory=list)


class ItemPrices(TypedResource):
    prices: list[ItemPriceEntry] = Field(default_factory=list)


class ItemHistory(TypedResource):
    history: list[ItemHistoryEntry] = Field(default_factory=list)


def emd_result(raw: Any) -> Any:
    """
    Unwrap the {"emd": {..., "result": ...}} envelope.

    Raises:
        RequestError: If the envelope carries an error message
        DecodeError: If the envelope has no result
    """
    if not isinstance(raw, dict):
        raise DecodeError(f"Expected an eve-marketdata envelope, got {type(raw).__name__}")

    envelope = raw.get("emd", raw)
    if not isinstance(envelope, dict):
        raise DecodeError("Malformed eve-marketdata envelope", field="emd")
    if envelope.get("error"):
        raise RequestError(f"eve-marketdata error: {envelope['error']}")
    if "result" not in envelope:
        raise DecodeError("eve-marketdata envelope has no result", field="result")
    return envelope["result"]


def _rowset_decoder(resource_cls: type[TypedResource], field: str, row_cls: type[BaseModel]):
    @register_decoder(resource_cls)
    def decode(raw: Any) -> TypedResource:
        rows = decode_rows(emd_result(raw), row_cls)
        return resource_cls(**{field: rows})

    return decode


_rowset_decoder(RecentUploads, "uploads", RecentUploadsEntry)
_rowset_decoder(ItemOrders, "orders", ItemOrderEntry)
_rowset_decoder(ItemPrices, "prices", ItemPriceEntry)
_rowset_decoder(ItemHistory, "history", ItemHistoryEntry)
