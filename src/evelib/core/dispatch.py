"""
evelib Request Dispatcher

Performs one typed GET: fetch the document, decode it into the requested
resource type and bind the result to the client that asked for it.

Authenticated requests follow a single refresh policy:

1. Send the request with the current access token.
2. If the API rejects the token and automatic refresh is enabled, refresh
   the token once and resend the request once.
3. Any failure after that is raised to the caller unchanged.

No other retries are made.
"""

from collections.abc import Awaitable, Callable
from typing import Any, Optional, TypeVar

import httpx

from .auth import AuthContext
from .config import get_settings
from .errors import AuthenticationError, DecodeError, RequestError, classify_httpx_error
from .logging import get_logger
from .registry import decode_document
from .rowset import parse_xml

logger = get_logger(__name__)

T = TypeVar("T")

RefreshCallback = Callable[[], Awaitable[Any]]

_ACCEPT = {
    "json": "application/json",
    "xml": "application/xml",
}


def parse_body(response: httpx.Response, wire_format: str) -> Any:
    """
    Parse a response body according to its wire format.

    Raises:
        DecodeError: If the body is not valid JSON or XML
    """
    if wire_format == "xml":
        return parse_xml(response.content)
    try:
        return response.json()
    except ValueError as e:
        raise DecodeError(f"Invalid JSON response: {e}") from e


class RequestDispatcher:
    """
    Issues typed GET requests for the API clients.

    Each request uses its own short-lived httpx.AsyncClient, so a dispatcher
    can be shared by blocking callers that each run their own event loop.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
    ) -> None:
        settings = get_settings()
        self.timeout: float = timeout or settings.timeout
        self.user_agent: str = user_agent or settings.user_agent

    async def request(
        self,
        url: str,
        params: Optional[dict[str, Any]] = None,
        token: Optional[str] = None,
        wire_format: str = "json",
    ) -> Any:
        """
        Send one GET request and return the parsed body.

        Args:
            url: Absolute request URL
            params: Query parameters (list values repeat the key)
            token: Bearer access token, if the request is authenticated
            wire_format: "json" or "xml"

        Returns:
            Parsed JSON value or XML root element

        Raises:
            AuthenticationError: If the API rejects the token
            RequestError: On transport failure or non-success status
            DecodeError: If the body cannot be parsed
        """
        headers = {
            "User-Agent": self.user_agent,
            "Accept": _ACCEPT.get(wire_format, "*/*"),
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"

        logger.debug("GET %s", url)
        try:
            async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout)) as client:
                response = await client.get(url, params=params, headers=headers)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise classify_httpx_error(e) from e
        except httpx.RequestError as e:
            raise RequestError(f"Network error: {e}", url=url) from e

        return parse_body(response, wire_format)

    async def _request_authenticated(
        self,
        url: str,
        params: Optional[dict[str, Any]],
        wire_format: str,
        context: AuthContext,
        refresh: Optional[RefreshCallback],
    ) -> Any:
        auto_refresh = context.allow_automatic_refresh and refresh is not None

        if not context.access_token:
            if not auto_refresh:
                raise AuthenticationError(
                    "Authenticated request requires an access token", url=url
                )
            logger.info("No access token available, refreshing before request")
            await refresh()
            return await self.request(url, params, context.access_token, wire_format)

        if not auto_refresh:
            return await self.request(url, params, context.access_token, wire_format)

        try:
            return await self.request(url, params, context.access_token, wire_format)
        except AuthenticationError as e:
            logger.info("Access token rejected (HTTP %s), attempting refresh", e.status_code)

        await refresh()
        logger.info("Access token refreshed, retrying %s", url)
        return await self.request(url, params, context.access_token, wire_format)

    async def fetch(
        self,
        resource_type: type[T],
        url: str,
        params: Optional[dict[str, Any]] = None,
        context: Optional[AuthContext] = None,
        refresh: Optional[RefreshCallback] = None,
        owner: Any = None,
    ) -> T:
        """
        Fetch and decode a typed resource.

        Args:
            resource_type: Resource class to decode into
            url: Absolute request URL
            params: Query parameters
            context: Token state; None for a public request
            refresh: Coroutine function that refreshes context in place
            owner: Client to bind the decoded resource to

        Returns:
            Decoded resource, bound to owner when one is given
        """
        wire_format = getattr(resource_type, "wire_format", "json")

        if context is None:
            raw = await self.request(url, params, None, wire_format)
        else:
            raw = await self._request_authenticated(url, params, wire_format, context, refresh)

        resource = decode_document(resource_type, raw)
        if owner is not None:
            from ..models.base import wrap

            wrap(resource, owner)
        return resource
