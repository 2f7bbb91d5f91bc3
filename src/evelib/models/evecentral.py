"""
eve-central.com resource models.

marketstat answers with a JSON row set of {buy, all, sell} statistics, one
row per requested type. quicklook answers with an XML document listing
individual buy and sell orders.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any, ClassVar

from pydantic import Field

from ..core.errors import DecodeError
from ..core.registry import register_decoder
from ..core.rowset import as_list, decode_rows, xml_to_dict
from .base import EveModel, TypedResource, WireFormat

# =============================================================================
# Market Statistics
# =============================================================================


class MarketStatQuery(EveModel):
    bid: bool | None = None
    types: list[int] = Field(default_factory=list)
    regions: list[int] = Field(default_factory=list)
    systems: list[int] = Field(default_factory=list)
    hours: int | None = None
    minq: int | None = None


class MarketStatEntry(EveModel):
    """Price statistics for one side (buy, sell or all) of the market."""

    for_query: MarketStatQuery
    volume: int = 0
    wavg: float = 0.0
    avg: float = 0.0
    variance: float = 0.0
    std_dev: float = 0.0
    median: float = 0.0
    five_percent: float = 0.0
    max: float = 0.0
    min: float = 0.0
    high_to_low: bool = False
    generated: int | None = None

    @property
    def percentile(self) -> float:
        """Five percent percentile price."""
        return self.five_percent


class MarketStat(EveModel):
    buy: MarketStatEntry
    all: MarketStatEntry
    sell: MarketStatEntry

    @property
    def type_id(self) -> int | None:
        """Type the statistics were computed for."""
        types = self.all.for_query.types
        return types[0] if types else None


class MarketStatResponse(TypedResource):
    result: list[MarketStat] = Field(default_factory=list)


@register_decoder(MarketStatResponse)
def _decode_market_stat(raw: Any) -> MarketStatResponse:
    return MarketStatResponse(result=decode_rows(raw, MarketStat))


# =============================================================================
# Quicklook
# =============================================================================


class QuicklookOrder(EveModel):
    order_id: int = Field(alias="id")
    region_id: int = Field(alias="region")
    station_id: int = Field(alias="station")
    station_name: str = Field(alias="station_name")
    security_rating: float = Field(alias="security")
    order_range: int | None = Field(default=None, alias="range")
    price: float
    vol_remaining: int = Field(alias="vol_remain")
    min_volume: int = Field(alias="min_volume")
    expires: str
    reported_time: str = Field(alias="reported_time")


class Quicklook(EveModel):
    type_id: int = Field(alias="item")
    type_name: str = Field(alias="itemname")
    regions: list[str] = Field(default_factory=list)
    hour_limit: int = Field(alias="hours")
    min_quantity: int = Field(alias="minqty")
    sell_orders: list[QuicklookOrder] = Field(default_factory=list)
    buy_orders: list[QuicklookOrder] = Field(default_factory=list)


class QuicklookResponse(TypedResource):
    wire_format: ClassVar[WireFormat] = "xml"

    result: Quicklook


def _children(data: dict[str, Any], container: str, child: str) -> list[Any]:
    """Items of <container><child/>...</container>, for zero, one or many children."""
    value = data.get(container)
    if not isinstance(value, dict):
        return []
    return as_list(value.get(child))


@register_decoder(QuicklookResponse)
def _decode_quicklook(root: ET.Element) -> QuicklookResponse:
    element = root if root.tag == "quicklook" else root.find("quicklook")
    if element is None:
        raise DecodeError("Quicklook document has no <quicklook> element", field="quicklook")

    data = xml_to_dict(element)
    if not isinstance(data, dict):
        raise DecodeError("Quicklook element is empty", field="quicklook")

    quicklook = Quicklook.model_validate(
        {
            "item": data.get("item"),
            "itemname": data.get("itemname"),
            "hours": data.get("hours"),
            "minqty": data.get("minqty"),
            "regions": _children(data, "regions", "region"),
            "sell_orders": decode_rows(_children(data, "sell_orders", "order"), QuicklookOrder),
            "buy_orders": decode_rows(_children(data, "buy_orders", "order"), QuicklookOrder),
        }
    )
    return QuicklookResponse(result=quicklook)
