"""
Base models for API resources.

- EveModel: frozen pydantic base for every decoded record
- TypedResource: a top-level API document that remembers which client
  fetched it, so links it contains can be followed with that client
- Href / LinkedEntity: typed links to other resources, resolved through the
  resource registry by target type name
"""

from __future__ import annotations

import weakref
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator
from pydantic.alias_generators import to_camel

from ..core.errors import EveLibError
from ..core.registry import register_resource, resource_type
from ..core.sync import run_sync

WireFormat = Literal["json", "xml"]


class EveModel(BaseModel):
    """
    Base model for decoded API data.

    Configuration:
    - frozen: decoded resources are immutable
    - extra="ignore": upstream APIs add fields without notice
    - alias_generator=to_camel: CREST uses camelCase keys; models declare
      explicit aliases where a wire name differs (typeID, solarSystemID)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )


# =============================================================================
# Typed Resources
# =============================================================================


class TypedResource(EveModel):
    """
    A top-level API document bound to the client that fetched it.

    The binding is a weak reference: a resource never keeps its client
    alive, and client is None once the client has been collected.
    """

    wire_format: ClassVar[WireFormat] = "json"

    _client_ref: weakref.ReferenceType[Any] | None = PrivateAttr(default=None)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        register_resource(cls)

    @property
    def client(self) -> Any:
        """The client this resource was fetched with, or None."""
        if self._client_ref is None:
            return None
        return self._client_ref()

    @property
    def is_bound(self) -> bool:
        return self._client_ref is not None

    def bind(self, client: Any) -> TypedResource:
        """
        Attach the issuing client.

        Raises:
            EveLibError: If the resource is already bound
        """
        if self._client_ref is not None:
            raise EveLibError(f"{type(self).__name__} is already bound to a client")
        self._client_ref = weakref.ref(client)
        return self

    def _require_client(self) -> Any:
        client = self.client
        if client is None:
            raise EveLibError(
                f"{type(self).__name__} has no client; fetch it through a client to follow links"
            )
        return client

    async def load_async(self, link: Link) -> TypedResource:
        """Fetch a linked resource using the issuing client."""
        return await self._require_client().load_async(link)

    def load(self, link: Link) -> TypedResource:
        return run_sync(self.load_async(link))


def wrap(payload: TypedResource, issuing_context: Any) -> TypedResource:
    """
    Bind a freshly decoded resource to the client that requested it.

    Raises:
        EveLibError: If payload is not a TypedResource or is already bound
    """
    if not isinstance(payload, TypedResource):
        raise EveLibError(f"Cannot wrap {type(payload).__name__}: not a typed resource")
    return payload.bind(issuing_context)


# =============================================================================
# Links
# =============================================================================

_LINK_TYPES: dict[tuple[type, str], type] = {}


class Link(EveModel):
    """
    Reference to another resource by URL.

    Subclass per target with Href.to("AllianceCollection"); the target name
    is looked up in the resource registry when the link is followed.
    """

    href: str
    target: ClassVar[str | None] = None

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_url(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"href": data}
        return data

    @classmethod
    def to(cls, target: str) -> type[Link]:
        """Return the link subclass pointing at resource type `target`."""
        key = (cls, target)
        link_type = _LINK_TYPES.get(key)
        if link_type is None:
            namespace = {
                "target": target,
                "__module__": cls.__module__,
                "__qualname__": f"{cls.__qualname__}[{target}]",
            }
            link_type = type(cls)(f"{cls.__name__}[{target}]", (cls,), namespace)
            _LINK_TYPES[key] = link_type
        return link_type

    def resource_type(self) -> type[TypedResource]:
        """
        Resolve the target resource type.

        Raises:
            EveLibError: If the link has no target or the target is unknown
        """
        if self.target is None:
            raise EveLibError(f"{type(self).__name__} has no target resource type")
        return resource_type(self.target)


class Href(Link):
    """A bare link: {"href": "..."}."""


class LinkedEntity(Link):
    """A link carrying the target's id and name inline."""

    id: int | None = None
    name: str | None = None


class PagedCollection(TypedResource):
    """CREST collection page with navigation links."""

    total_count: int = 0
    page_count: int = 1
    next: Href | None = Field(default=None)
    previous: Href | None = Field(default=None)

    async def _page_async(self, link: Href | None) -> PagedCollection | None:
        if link is None:
            return None
        return await self._require_client().load_async(link, type(self))

    async def next_page_async(self) -> PagedCollection | None:
        """Fetch the next page of this collection, or None on the last page."""
        return await self._page_async(self.next)

    async def previous_page_async(self) -> PagedCollection | None:
        """Fetch the previous page of this collection, or None on the first page."""
        return await self._page_async(self.previous)

    def next_page(self) -> PagedCollection | None:
        return run_sync(self.next_page_async())

    def previous_page(self) -> PagedCollection | None:
        return run_sync(self.previous_page_async())
