"""
evelib Models

Typed resources returned by the API clients. Importing this package
registers every resource type and its decoder.
"""

from evelib.models.base import (
    EveModel,
    Href,
    Link,
    LinkedEntity,
    PagedCollection,
    TypedResource,
    wrap,
)
from evelib.models.crest import (
    Alliance,
    AllianceCollection,
    CrestRoot,
    Incursion,
    IncursionCollection,
    IndustryFacility,
    IndustryFacilityCollection,
    IndustrySpeciality,
    IndustrySpecialityCollection,
    IndustrySystem,
    IndustrySystemCollection,
    IndustryTeam,
    IndustryTeamCollection,
    Killmail,
    KillmailCollection,
    MarketHistory,
    MarketHistoryEntry,
    MarketTypePrice,
    MarketTypePriceCollection,
    War,
    WarCollection,
)
from evelib.models.enums import OrderType, UploadType
from evelib.models.evecentral import (
    MarketStat,
    MarketStatEntry,
    MarketStatResponse,
    Quicklook,
    QuicklookOrder,
    QuicklookResponse,
)
from evelib.models.marketdata import (
    ItemHistory,
    ItemHistoryEntry,
    ItemOrderEntry,
    ItemOrders,
    ItemPriceEntry,
    ItemPrices,
    RecentUploads,
    RecentUploadsEntry,
)
from evelib.models.xmlapi import (
    FactionWarSystem,
    FactionWarSystems,
    Jumps,
    Kills,
    Sovereignty,
    SovereigntySystem,
    SystemJumps,
    SystemKills,
    XmlApiResource,
)

__all__ = [
    # Base
    "EveModel",
    "Href",
    "Link",
    "LinkedEntity",
    "PagedCollection",
    "TypedResource",
    "wrap",
    # Enums
    "OrderType",
    "UploadType",
    # CREST
    "Alliance",
    "AllianceCollection",
    "CrestRoot",
    "Incursion",
    "IncursionCollection",
    "IndustryFacility",
    "IndustryFacilityCollection",
    "IndustrySpeciality",
    "IndustrySpecialityCollection",
    "IndustrySystem",
    "IndustrySystemCollection",
    "IndustryTeam",
    "IndustryTeamCollection",
    "Killmail",
    "KillmailCollection",
    "MarketHistory",
    "MarketHistoryEntry",
    "MarketTypePrice",
    "MarketTypePriceCollection",
    "War",
    "WarCollection",
    # eve-marketdata
    "ItemHistory",
    "ItemHistoryEntry",
    "ItemOrderEntry",
    "ItemOrders",
    "ItemPriceEntry",
    "ItemPrices",
    "RecentUploads",
    "RecentUploadsEntry",
    # eve-central
    "MarketStat",
    "MarketStatEntry",
    "MarketStatResponse",
    "Quicklook",
    "QuicklookOrder",
    "QuicklookResponse",
    # XML API
    "FactionWarSystem",
    "FactionWarSystems",
    "Jumps",
    "Kills",
    "Sovereignty",
    "SovereigntySystem",
    "SystemJumps",
    "SystemKills",
    "XmlApiResource",
]
