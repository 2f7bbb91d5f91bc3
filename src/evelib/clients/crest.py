"""
evelib CREST Client

Client for the CREST API. Public mode reads from the public endpoint
without credentials; authenticated mode sends a bearer token to the
authenticated endpoint and can refresh it automatically.

Usage:
    crest = EveCrest()
    root = crest.get_root()
    alliances = root.load(root.alliances)

    # Authenticated, with automatic refresh on a rejected token
    crest = EveCrest(access_token, refresh_token=refresh_token,
                     encoded_key=EveAuth.encode_key(client_id, secret),
                     allow_automatic_refresh=True)
    war = crest.get_war(1)
"""

from enum import Enum
from typing import Optional, TypeVar
from urllib.parse import urljoin

from ..core.auth import AuthContext, AuthResponse, EveAuth
from ..core.config import get_settings
from ..core.dispatch import RequestDispatcher
from ..core.errors import AuthenticationError, EveLibError
from ..core.logging import get_logger
from ..core.sync import blocking
from ..models.base import Link, TypedResource
from ..models.crest import (
    Alliance,
    AllianceCollection,
    CrestRoot,
    IncursionCollection,
    IndustryFacilityCollection,
    IndustrySpeciality,
    IndustrySpecialityCollection,
    IndustrySystemCollection,
    IndustryTeam,
    IndustryTeamCollection,
    Killmail,
    KillmailCollection,
    MarketHistory,
    MarketTypePriceCollection,
    War,
    WarCollection,
)

logger = get_logger(__name__)

ResourceT = TypeVar("ResourceT", bound=TypedResource)


class CrestMode(str, Enum):
    PUBLIC = "public"
    AUTHENTICATED = "authenticated"


class EveCrest:
    """
    CREST API client.

    The mode defaults to AUTHENTICATED when an access token or refresh token
    is supplied and PUBLIC otherwise. Requests go to base_auth_uri in
    authenticated mode and to base_public_uri in public mode.
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        refresh_token: Optional[str] = None,
        encoded_key: Optional[str] = None,
        allow_automatic_refresh: Optional[bool] = None,
        mode: Optional[CrestMode] = None,
        base_public_uri: Optional[str] = None,
        base_auth_uri: Optional[str] = None,
        api_path: str = "",
        eve_auth: Optional[EveAuth] = None,
        dispatcher: Optional[RequestDispatcher] = None,
    ) -> None:
        settings = get_settings()
        if allow_automatic_refresh is None:
            allow_automatic_refresh = settings.allow_automatic_refresh

        self.base_public_uri: str = base_public_uri or settings.crest_public_uri
        self.base_auth_uri: str = base_auth_uri or settings.crest_auth_uri
        self.api_path: str = api_path
        self.context = AuthContext(
            access_token=access_token,
            refresh_token=refresh_token,
            encoded_key=encoded_key,
            allow_automatic_refresh=allow_automatic_refresh,
        )
        if mode is None:
            has_credentials = bool(access_token or refresh_token)
            mode = CrestMode.AUTHENTICATED if has_credentials else CrestMode.PUBLIC
        self.mode: CrestMode = mode
        self.eve_auth: EveAuth = eve_auth or EveAuth()
        self.dispatcher: RequestDispatcher = dispatcher or RequestDispatcher()

    # -------------------------------------------------------------------------
    # Token state
    # -------------------------------------------------------------------------

    @property
    def access_token(self) -> Optional[str]:
        return self.context.access_token

    @access_token.setter
    def access_token(self, value: Optional[str]) -> None:
        self.context.access_token = value

    @property
    def refresh_token(self) -> Optional[str]:
        return self.context.refresh_token

    @refresh_token.setter
    def refresh_token(self, value: Optional[str]) -> None:
        self.context.refresh_token = value

    @property
    def encoded_key(self) -> Optional[str]:
        return self.context.encoded_key

    @encoded_key.setter
    def encoded_key(self, value: Optional[str]) -> None:
        self.context.encoded_key = value

    @property
    def allow_automatic_refresh(self) -> bool:
        return self.context.allow_automatic_refresh

    @allow_automatic_refresh.setter
    def allow_automatic_refresh(self, value: bool) -> None:
        self.context.allow_automatic_refresh = value

    @property
    def base_uri(self) -> str:
        """Endpoint for the current mode."""
        if self.mode is CrestMode.AUTHENTICATED:
            return self.base_auth_uri
        return self.base_public_uri

    async def refresh_access_token_async(self) -> AuthResponse:
        """
        Exchange the refresh token for a new access token.

        Updates the token state in place, so every later request made with
        this client uses the new token.

        Raises:
            AuthenticationError: If no refresh token or encoded key is set,
                or the SSO service rejects them
        """
        if not self.context.can_refresh:
            raise AuthenticationError("Token refresh requires a refresh token and encoded key")
        response = await self.eve_auth.refresh_async(
            self.context.encoded_key, self.context.refresh_token
        )
        self.context.update(response)
        return response

    # -------------------------------------------------------------------------
    # Requests
    # -------------------------------------------------------------------------

    def _url(self, rel_path: str) -> str:
        return self.base_uri + self.api_path + rel_path.lstrip("/")

    async def _request_async(self, resource_type: type[ResourceT], url: str) -> ResourceT:
        if self.mode is CrestMode.AUTHENTICATED:
            return await self.dispatcher.fetch(
                resource_type,
                url,
                context=self.context,
                refresh=self.refresh_access_token_async,
                owner=self,
            )
        return await self.dispatcher.fetch(resource_type, url, owner=self)

    async def load_async(
        self, link: Link, resource_type: Optional[type[TypedResource]] = None
    ) -> TypedResource:
        """
        Follow a link to the resource it points at.

        Args:
            link: Href or LinkedEntity from a previously fetched resource
            resource_type: Override the link's declared target type

        Raises:
            EveLibError: If the target type cannot be determined
        """
        if not isinstance(link, Link):
            raise EveLibError(f"Cannot load {type(link).__name__}: not a link")
        target = resource_type or link.resource_type()
        url = urljoin(self.base_uri, link.href)
        logger.debug("Following link to %s", target.__name__)
        return await self._request_async(target, url)

    # -------------------------------------------------------------------------
    # Endpoints
    # -------------------------------------------------------------------------

    async def get_root_async(self) -> CrestRoot:
        return await self._request_async(CrestRoot, self._url(""))

    async def get_killmail_async(self, killmail_id: int, killmail_hash: str) -> Killmail:
        return await self._request_async(
            Killmail, self._url(f"killmails/{killmail_id}/{killmail_hash}/")
        )

    async def get_incursions_async(self) -> IncursionCollection:
        return await self._request_async(IncursionCollection, self._url("incursions/"))

    async def get_alliances_async(self, page: int = 1) -> AllianceCollection:
        return await self._request_async(AllianceCollection, self._url(f"alliances/?page={page}"))

    async def get_alliance_async(self, alliance_id: int) -> Alliance:
        return await self._request_async(Alliance, self._url(f"alliances/{alliance_id}/"))

    async def get_market_history_async(self, region_id: int, type_id: int) -> MarketHistory:
        """Daily history for one type in one region."""
        return await self._request_async(
            MarketHistory, self._url(f"market/{region_id}/types/{type_id}/history/")
        )

    async def get_market_prices_async(self) -> MarketTypePriceCollection:
        """Adjusted and average prices for every market type."""
        return await self._request_async(MarketTypePriceCollection, self._url("market/prices/"))

    async def get_wars_async(self, page: int = 1) -> WarCollection:
        return await self._request_async(WarCollection, self._url(f"wars/?page={page}"))

    async def get_war_async(self, war_id: int) -> War:
        return await self._request_async(War, self._url(f"wars/{war_id}/"))

    async def get_war_killmails_async(self, war_id: int) -> KillmailCollection:
        return await self._request_async(
            KillmailCollection, self._url(f"wars/{war_id}/killmails/all/")
        )

    async def get_specialities_async(self) -> IndustrySpecialityCollection:
        return await self._request_async(
            IndustrySpecialityCollection, self._url("industry/specialities/")
        )

    async def get_speciality_async(self, speciality_id: int) -> IndustrySpeciality:
        return await self._request_async(
            IndustrySpeciality, self._url(f"industry/specialities/{speciality_id}/")
        )

    async def get_industry_teams_async(self) -> IndustryTeamCollection:
        return await self._request_async(IndustryTeamCollection, self._url("industry/teams/"))

    async def get_industry_team_async(self, team_id: int) -> IndustryTeam:
        return await self._request_async(IndustryTeam, self._url(f"industry/teams/{team_id}/"))

    async def get_industry_systems_async(self) -> IndustrySystemCollection:
        return await self._request_async(IndustrySystemCollection, self._url("industry/systems/"))

    async def get_industry_team_auctions_async(self) -> IndustryTeamCollection:
        return await self._request_async(
            IndustryTeamCollection, self._url("industry/teams/auction/")
        )

    async def get_industry_facilities_async(self) -> IndustryFacilityCollection:
        return await self._request_async(
            IndustryFacilityCollection, self._url("industry/facilities/")
        )

    refresh_access_token = blocking(refresh_access_token_async)
    load = blocking(load_async)
    get_root = blocking(get_root_async)
    get_killmail = blocking(get_killmail_async)
    get_incursions = blocking(get_incursions_async)
    get_alliances = blocking(get_alliances_async)
    get_alliance = blocking(get_alliance_async)
    get_market_history = blocking(get_market_history_async)
    get_market_prices = blocking(get_market_prices_async)
    get_wars = blocking(get_wars_async)
    get_war = blocking(get_war_async)
    get_war_killmails = blocking(get_war_killmails_async)
    get_specialities = blocking(get_specialities_async)
    get_speciality = blocking(get_speciality_async)
    get_industry_teams = blocking(get_industry_teams_async)
    get_industry_team = blocking(get_industry_team_async)
    get_industry_systems = blocking(get_industry_systems_async)
    get_industry_team_auctions = blocking(get_industry_team_auctions_async)
    get_industry_facilities = blocking(get_industry_facilities_async)

    def __repr__(self) -> str:
        return f"EveCrest(mode={self.mode.value!r}, base_uri={self.base_uri!r})"
