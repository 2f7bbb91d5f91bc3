"""
evelib eve-marketdata.com Client

Every request identifies the caller with char_name (EVELIB_EMD_CHAR_NAME by
default). Responses are JSON row sets wrapped in the {"emd": ...} envelope.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from ..core.config import get_settings
from ..core.dispatch import RequestDispatcher
from ..core.logging import get_logger
from ..core.sync import blocking
from ..models.base import TypedResource
from ..models.enums import OrderType, UploadType
from ..models.marketdata import ItemHistory, ItemOrders, ItemPrices, RecentUploads

logger = get_logger(__name__)


def _join(ids: list[int]) -> str:
    return ",".join(str(i) for i in ids)


@dataclass
class EveMarketDataOptions:
    """Item, region, solar system and station filters for a query."""

    items: list[int] = field(default_factory=list)
    regions: list[int] = field(default_factory=list)
    solar_systems: list[int] = field(default_factory=list)
    stations: list[int] = field(default_factory=list)

    def to_params(self) -> dict[str, str]:
        params = {
            "type_ids": _join(self.items),
            "region_ids": _join(self.regions),
            "solarsystem_ids": _join(self.solar_systems),
            "station_ids": _join(self.stations),
        }
        return {key: value for key, value in params.items() if value}


class EveMarketData:
    """eve-marketdata.com API client."""

    def __init__(
        self,
        char_name: Optional[str] = None,
        base_uri: Optional[str] = None,
        dispatcher: Optional[RequestDispatcher] = None,
    ) -> None:
        settings = get_settings()
        self.char_name: str = char_name or settings.emd_char_name
        self.base_uri: str = base_uri or settings.emd_uri
        self.dispatcher: RequestDispatcher = dispatcher or RequestDispatcher()

    async def _request_async(
        self, resource_type: type[TypedResource], path: str, params: dict[str, Any]
    ) -> Any:
        query = {"char_name": self.char_name}
        query.update(params)
        return await self.dispatcher.fetch(
            resource_type, self.base_uri + path, params=query, owner=self
        )

    async def get_recent_uploads_async(
        self,
        upload_type: Union[UploadType, str, int, None] = None,
        minutes: Optional[int] = None,
    ) -> RecentUploads:
        """
        Latest market uploads received by the site.

        Args:
            upload_type: Only report this kind of upload (any wire spelling)
            minutes: Only report uploads from the last N minutes
        """
        params: dict[str, Any] = {}
        if upload_type is not None:
            params["upload_type"] = UploadType.from_wire(upload_type).wire_token
        if minutes is not None:
            params["minutes"] = minutes
        return await self._request_async(RecentUploads, "recent_uploads2.json", params)

    async def get_item_orders_async(
        self,
        options: EveMarketDataOptions,
        order_type: Union[OrderType, str, int, None] = None,
    ) -> ItemOrders:
        """Individual buy and/or sell orders matching the filters."""
        params: dict[str, Any] = options.to_params()
        if order_type is not None:
            params["buysell"] = OrderType.from_wire(order_type).wire_token
        return await self._request_async(ItemOrders, "item_orders2.json", params)

    async def get_item_prices_async(
        self,
        options: EveMarketDataOptions,
        order_type: Union[OrderType, str, int] = OrderType.SELL,
    ) -> ItemPrices:
        """Best price per item for one side of the market."""
        params: dict[str, Any] = options.to_params()
        params["buysell"] = OrderType.from_wire(order_type).wire_token
        return await self._request_async(ItemPrices, "item_prices2.json", params)

    async def get_item_history_async(
        self, options: EveMarketDataOptions, days: Optional[int] = None
    ) -> ItemHistory:
        """Daily price history per item and region."""
        params: dict[str, Any] = options.to_params()
        if days is not None:
            params["days"] = days
        return await self._request_async(ItemHistory, "item_history2.json", params)

    get_recent_uploads = blocking(get_recent_uploads_async)
    get_item_orders = blocking(get_item_orders_async)
    get_item_prices = blocking(get_item_prices_async)
    get_item_history = blocking(get_item_history_async)
