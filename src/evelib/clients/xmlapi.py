"""
evelib XML API Client

Map endpoints of the EVE XML API. Each returns the solarSystems row set of
its document together with the document's currentTime and cachedUntil.
"""

from typing import Optional

from ..core.config import get_settings
from ..core.dispatch import RequestDispatcher
from ..core.sync import blocking
from ..models.xmlapi import FactionWarSystems, Jumps, Kills, Sovereignty, XmlApiResource


class Map:
    """XML API map endpoints."""

    def __init__(
        self,
        base_uri: Optional[str] = None,
        dispatcher: Optional[RequestDispatcher] = None,
    ) -> None:
        self.base_uri: str = base_uri or get_settings().xml_api_uri
        self.dispatcher: RequestDispatcher = dispatcher or RequestDispatcher()

    async def _request_async(self, resource_type: type[XmlApiResource], path: str):
        return await self.dispatcher.fetch(resource_type, self.base_uri + path, owner=self)

    async def get_faction_war_systems_async(self) -> FactionWarSystems:
        """Contested systems in faction warfare and who holds them."""
        return await self._request_async(FactionWarSystems, "map/FacWarSystems.xml.aspx")

    async def get_jumps_async(self) -> Jumps:
        """Ship jumps per system over the last hour."""
        return await self._request_async(Jumps, "map/Jumps.xml.aspx")

    async def get_kills_async(self) -> Kills:
        """Ship, pod and NPC kills per system over the last hour."""
        return await self._request_async(Kills, "map/Kills.xml.aspx")

    async def get_sovereignty_async(self) -> Sovereignty:
        return await self._request_async(Sovereignty, "map/Sovereignty.xml.aspx")

    get_faction_war_systems = blocking(get_faction_war_systems_async)
    get_jumps = blocking(get_jumps_async)
    get_kills = blocking(get_kills_async)
    get_sovereignty = blocking(get_sovereignty_async)
