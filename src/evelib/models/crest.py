"""
CREST resource models.

CREST documents are camelCase JSON; links are {"href": ...} objects and may
carry the target's id and name inline. Collections page with totalCount,
pageCount, next and previous.
"""

from __future__ import annotations

from pydantic import Field

from .base import EveModel, Href, LinkedEntity, PagedCollection, TypedResource

# =============================================================================
# Link Types
# =============================================================================

AllianceLink = LinkedEntity.to("Alliance")
WarLink = LinkedEntity.to("War")
KillmailLink = LinkedEntity.to("Killmail")
SpecialityLink = LinkedEntity.to("IndustrySpeciality")
IndustryTeamLink = LinkedEntity.to("IndustryTeam")

AllianceCollectionHref = Href.to("AllianceCollection")
WarCollectionHref = Href.to("WarCollection")
KillmailCollectionHref = Href.to("KillmailCollection")
IncursionCollectionHref = Href.to("IncursionCollection")
MarketTypePriceCollectionHref = Href.to("MarketTypePriceCollection")
IndustryFacilityCollectionHref = Href.to("IndustryFacilityCollection")
IndustrySpecialityCollectionHref = Href.to("IndustrySpecialityCollection")
IndustryTeamCollectionHref = Href.to("IndustryTeamCollection")
IndustrySystemCollectionHref = Href.to("IndustrySystemCollection")


# =============================================================================
# Root
# =============================================================================


class UserCounts(EveModel):
    eve: int = 0
    dust: int = 0


class IndustryLinks(EveModel):
    facilities: IndustryFacilityCollectionHref | None = None
    specialities: IndustrySpecialityCollectionHref | None = None
    teams: IndustryTeamCollectionHref | None = None
    teams_in_auction: IndustryTeamCollectionHref | None = None
    systems: IndustrySystemCollectionHref | None = None


class CrestRoot(TypedResource):
    """CREST entry point listing the top-level collections."""

    server_name: str | None = None
    server_version: str | None = None
    service_status: dict[str, str] = Field(default_factory=dict)
    user_counts: UserCounts | None = None
    crest_endpoint: Href | None = None
    alliances: AllianceCollectionHref | None = None
    wars: WarCollectionHref | None = None
    incursions: IncursionCollectionHref | None = None
    market_prices: MarketTypePriceCollectionHref | None = None
    industry: IndustryLinks | None = None


# =============================================================================
# Alliances
# =============================================================================


class AllianceCollection(PagedCollection):
    items: list[AllianceLink] = Field(default_factory=list)


class Alliance(TypedResource):
    id: int
    name: str
    short_name: str | None = None
    description: str | None = None
    url: str | None = None
    start_date: str | None = None
    deleted: bool = False
    corporations_count: int = 0
    executor_corporation: LinkedEntity | None = None
    creator_corporation: LinkedEntity | None = None
    creator_character: LinkedEntity | None = None
    corporations: list[LinkedEntity] = Field(default_factory=list)


# =============================================================================
# Market
# =============================================================================


class MarketHistoryEntry(EveModel):
    date: str
    volume: int
    order_count: int
    low_price: float
    high_price: float
    avg_price: float


class MarketHistory(PagedCollection):
    """Daily price history for one type in one region."""

    items: list[MarketHistoryEntry] = Field(default_factory=list)


class MarketTypePrice(EveModel):
    item_type: LinkedEntity = Field(alias="type")
    adjusted_price: float | None = None
    average_price: float | None = None


class MarketTypePriceCollection(PagedCollection):
    items: list[MarketTypePrice] = Field(default_factory=list)


# =============================================================================
# Wars & Killmails
# =============================================================================


class WarParty(EveModel):
    id: int | None = None
    name: str | None = None
    href: str | None = None
    ships_killed: int = 0
    isk_killed: float = 0.0


class WarCollection(PagedCollection):
    items: list[WarLink] = Field(default_factory=list)


class War(TypedResource):
    id: int
    time_declared: str | None = None
    time_started: str | None = None
    time_finished: str | None = None
    open_for_allies: bool = False
    mutual: bool = False
    ally_count: int = 0
    aggressor: WarParty | None = None
    defender: WarParty | None = None
    allies: list[WarParty] = Field(default_factory=list)
    killmails: KillmailCollectionHref | None = None


class KillmailCollection(PagedCollection):
    items: list[KillmailLink] = Field(default_factory=list)


class KillmailVictim(EveModel):
    character: LinkedEntity | None = None
    corporation: LinkedEntity | None = None
    alliance: LinkedEntity | None = None
    ship_type: LinkedEntity | None = None
    damage_taken: int = 0


class KillmailAttacker(EveModel):
    character: LinkedEntity | None = None
    corporation: LinkedEntity | None = None
    alliance: LinkedEntity | None = None
    ship_type: LinkedEntity | None = None
    weapon_type: LinkedEntity | None = None
    damage_done: int = 0
    final_blow: bool = False
    security_status: float | None = None


class Killmail(TypedResource):
    kill_id: int = Field(alias="killID")
    kill_time: str
    solar_system: LinkedEntity
    victim: KillmailVictim
    attackers: list[KillmailAttacker] = Field(default_factory=list)
    attacker_count: int = 0
    war: LinkedEntity | None = None


# =============================================================================
# Incursions
# =============================================================================


class Incursion(EveModel):
    state: str
    influence: float = 0.0
    has_boss: bool = False
    incursion_type: str | None = None
    staging_solar_system: LinkedEntity | None = None
    constellation: LinkedEntity | None = None
    aggressor_faction: LinkedEntity | None = None
    infested_solar_systems: list[LinkedEntity] = Field(default_factory=list)


class IncursionCollection(PagedCollection):
    items: list[Incursion] = Field(default_factory=list)


# =============================================================================
# Industry
# =============================================================================


class IndustrySpeciality(TypedResource):
    id: int
    name: str
    groups: list[LinkedEntity] = Field(default_factory=list)


class IndustrySpecialityCollection(PagedCollection):
    items: list[SpecialityLink] = Field(default_factory=list)


class IndustryWorker(EveModel):
    bonus_type: int | None = None
    bonus_value: float | None = None
    specialization: LinkedEntity | None = None


class IndustryTeam(TypedResource):
    id: int
    name: str
    activity: int | None = None
    creation_time: str | None = None
    expiry_time: str | None = None
    cost_modifier: float | None = None
    solar_system: LinkedEntity | None = None
    speciality: SpecialityLink | None = None
    workers: list[IndustryWorker] = Field(default_factory=list)


class IndustryTeamCollection(PagedCollection):
    items: list[IndustryTeamLink] = Field(default_factory=list)


class SystemCostIndex(EveModel):
    activity_id: int = Field(alias="activityID")
    activity_name: str | None = None
    cost_index: float


class IndustrySystem(EveModel):
    solar_system: LinkedEntity
    system_cost_indices: list[SystemCostIndex] = Field(default_factory=list)


class IndustrySystemCollection(PagedCollection):
    items: list[IndustrySystem] = Field(default_factory=list)


class IndustryFacility(EveModel):
    facility_id: int = Field(alias="facilityID")
    name: str
    tax: float | None = None
    solar_system: LinkedEntity | None = None
    region: LinkedEntity | None = None
    owner: LinkedEntity | None = None
    facility_type: LinkedEntity | None = Field(default=None, alias="type")


class IndustryFacilityCollection(PagedCollection):
    items: list[IndustryFacility] = Field(default_factory=list)
