"""
evelib SSO Authentication

Client for the EVE single sign-on token service, plus the mutable token
state a CREST client carries between requests.

Usage:
    key = EveAuth.encode_key(client_id, secret_key)
    auth = EveAuth()
    tokens = auth.authenticate(key, code)
    crest = EveCrest(tokens.access_token, refresh_token=tokens.refresh_token,
                     encoded_key=key, allow_automatic_refresh=True)
"""

import base64
from dataclasses import dataclass
from typing import Any, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field

from .config import get_settings
from .constants import SSO_TOKEN_PATH, SSO_VERIFY_PATH
from .errors import AuthenticationError, RequestError, classify_httpx_error
from .logging import get_logger
from .sync import blocking

logger = get_logger(__name__)


# =============================================================================
# Token Service Responses
# =============================================================================


class AuthResponse(BaseModel):
    """Token grant returned by oauth/token."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    access_token: str
    token_type: str = "Bearer"
    expires_in: int = 0
    refresh_token: Optional[str] = None


class VerifyResponse(BaseModel):
    """Character identity returned by oauth/verify."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    character_id: int = Field(alias="CharacterID")
    character_name: str = Field(alias="CharacterName")
    expires_on: Optional[str] = Field(default=None, alias="ExpiresOn")
    scopes: str = Field(default="", alias="Scopes")
    token_type: Optional[str] = Field(default=None, alias="TokenType")
    character_owner_hash: Optional[str] = Field(default=None, alias="CharacterOwnerHash")


# =============================================================================
# Token State
# =============================================================================


@dataclass
class AuthContext:
    """
    Token state for authenticated requests.

    Mutated in place by a successful refresh; every later request made
    through the same client uses the new access token.
    """

    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    encoded_key: Optional[str] = None
    allow_automatic_refresh: bool = False

    @property
    def can_refresh(self) -> bool:
        return bool(self.refresh_token and self.encoded_key)

    def update(self, response: AuthResponse) -> None:
        """Apply a token grant, keeping the old refresh token if none is issued."""
        self.access_token = response.access_token
        if response.refresh_token:
            self.refresh_token = response.refresh_token


# =============================================================================
# SSO Client
# =============================================================================


class EveAuth:
    """
    EVE SSO client.

    Exchanges authorization codes and refresh tokens for access tokens and
    verifies which character a token belongs to. Each method has a blocking
    and an _async variant.
    """

    def __init__(
        self,
        base_uri: Optional[str] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
    ) -> None:
        settings = get_settings()
        self.base_uri: str = base_uri or settings.sso_uri
        self.timeout: float = timeout or settings.timeout
        self.user_agent: str = user_agent or settings.user_agent

    @staticmethod
    def encode_key(client_id: str, secret_key: str) -> str:
        """Base64-encode "client_id:secret_key" for HTTP Basic auth."""
        raw = f"{client_id}:{secret_key}".encode()
        return base64.b64encode(raw).decode("ascii")

    async def _send(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send one request to the SSO service and return the JSON body."""
        url = self.base_uri + path
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        headers.update(kwargs.pop("headers", {}))

        logger.debug("%s %s", method, url)
        try:
            async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout)) as client:
                response = await client.request(method, url, headers=headers, **kwargs)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            error = classify_httpx_error(e)
            # The token endpoint answers a bad grant with 400
            if path == SSO_TOKEN_PATH and e.response.status_code == 400:
                raise AuthenticationError(
                    error.message, status_code=error.status_code, url=error.url
                ) from e
            raise error from e
        except httpx.RequestError as e:
            raise RequestError(f"Network error: {e}", url=url) from e

        try:
            return response.json()
        except ValueError as e:
            raise RequestError(f"Invalid JSON response: {e}", url=url) from e

    async def _grant(self, encoded_key: str, data: dict[str, str]) -> AuthResponse:
        body = await self._send(
            "POST",
            SSO_TOKEN_PATH,
            headers={"Authorization": f"Basic {encoded_key}"},
            data=data,
        )
        return AuthResponse.model_validate(body)

    async def authenticate_async(self, encoded_key: str, code: str) -> AuthResponse:
        """
        Exchange an authorization code for tokens.

        Args:
            encoded_key: Output of encode_key()
            code: Authorization code from the SSO redirect

        Returns:
            AuthResponse with access and refresh tokens
        """
        logger.info("Exchanging authorization code for tokens")
        return await self._grant(
            encoded_key, {"grant_type": "authorization_code", "code": code}
        )

    async def refresh_async(
        self, encoded_key: Optional[str], refresh_token: Optional[str]
    ) -> AuthResponse:
        """
        Obtain a new access token from a refresh token.

        Raises:
            AuthenticationError: If credentials are missing or rejected
        """
        if not encoded_key or not refresh_token:
            raise AuthenticationError("Token refresh requires a refresh token and encoded key")

        logger.info("Refreshing access token")
        return await self._grant(
            encoded_key, {"grant_type": "refresh_token", "refresh_token": refresh_token}
        )

    async def verify_async(self, access_token: str) -> VerifyResponse:
        """Look up the character an access token was issued to."""
        body = await self._send(
            "GET",
            SSO_VERIFY_PATH,
            headers={"Authorization": f"Bearer {access_token}"},
        )
        return VerifyResponse.model_validate(body)

    authenticate = blocking(authenticate_async)
    refresh = blocking(refresh_async)
    verify = blocking(verify_async)
