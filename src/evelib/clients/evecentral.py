"""
evelib eve-central.com Client

marketstat returns JSON statistics per type; quicklook returns the
individual orders behind them as XML.
"""

from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import quote

from ..core.config import get_settings
from ..core.dispatch import RequestDispatcher
from ..core.sync import blocking
from ..models.base import TypedResource
from ..models.evecentral import MarketStatResponse, QuicklookResponse


@dataclass
class EveCentralOptions:
    """Query filters shared by marketstat and quicklook."""

    items: list[int] = field(default_factory=list)
    regions: list[int] = field(default_factory=list)
    system: Optional[int] = None
    hour_limit: Optional[int] = None
    min_quantity: Optional[int] = None

    def to_params(self, hours_key: str = "hours", min_quantity_key: str = "minQ") -> dict[str, Any]:
        """
        Build query parameters; repeated filters become repeated keys.

        quicklook names the hour and quantity limits sethours and setminQ.
        """
        params: dict[str, Any] = {}
        if self.items:
            params["typeid"] = list(self.items)
        if self.regions:
            params["regionlimit"] = list(self.regions)
        if self.system is not None:
            params["usesystem"] = self.system
        if self.hour_limit is not None:
            params[hours_key] = self.hour_limit
        if self.min_quantity is not None:
            params[min_quantity_key] = self.min_quantity
        return params

    def to_quicklook_params(self) -> dict[str, Any]:
        return self.to_params(hours_key="sethours", min_quantity_key="setminQ")


class EveCentral:
    """eve-central.com API client."""

    def __init__(
        self,
        base_uri: Optional[str] = None,
        dispatcher: Optional[RequestDispatcher] = None,
    ) -> None:
        self.base_uri: str = base_uri or get_settings().evecentral_uri
        self.dispatcher: RequestDispatcher = dispatcher or RequestDispatcher()

    async def _request_async(
        self, resource_type: type[TypedResource], path: str, params: dict[str, Any]
    ) -> Any:
        return await self.dispatcher.fetch(
            resource_type, self.base_uri + path, params=params, owner=self
        )

    async def get_market_stat_async(self, options: EveCentralOptions) -> MarketStatResponse:
        """Aggregate buy, sell and overall statistics per requested type."""
        return await self._request_async(
            MarketStatResponse, "marketstat/json", options.to_params()
        )

    async def get_quicklook_async(self, options: EveCentralOptions) -> QuicklookResponse:
        """Individual orders for the first requested type."""
        return await self._request_async(
            QuicklookResponse, "quicklook", options.to_quicklook_params()
        )

    async def get_quicklook_path_async(
        self,
        from_system: str,
        to_system: str,
        type_id: int,
        options: Optional[EveCentralOptions] = None,
    ) -> QuicklookResponse:
        """Orders for one type along the route between two systems."""
        params = (options or EveCentralOptions()).to_quicklook_params()
        params.pop("typeid", None)
        path = (
            f"quicklook/onpath/from/{quote(from_system)}"
            f"/to/{quote(to_system)}/fortype/{type_id}"
        )
        return await self._request_async(QuicklookResponse, path, params)

    get_market_stat = blocking(get_market_stat_async)
    get_quicklook = blocking(get_quicklook_async)
    get_quicklook_path = blocking(get_quicklook_path_async)
