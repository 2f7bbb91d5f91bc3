"""
Resource type registry.

Every TypedResource subclass registers itself here by class name. Links
carry the name of their target type, and the dispatcher looks up how to
decode a raw document for a given type:

- JSON resources default to model_validate() on the decoded body
- XML resources default to model_validate() on xml_to_dict() of the root
- register_decoder() overrides the default for a type whose document
  shape differs from its model (row-sets, envelopes, API error documents)
"""

import xml.etree.ElementTree as ET
from collections.abc import Callable
from typing import Any, TypeVar, Union

from pydantic import BaseModel, ValidationError

from .errors import DecodeError, EveLibError
from .logging import get_logger
from .rowset import decode_error_from_validation, xml_to_dict

logger = get_logger(__name__)

ResourceT = TypeVar("ResourceT", bound=BaseModel)
Decoder = Callable[[Any], Any]

_RESOURCE_TYPES: dict[str, type[BaseModel]] = {}
_DECODERS: dict[str, Decoder] = {}


def register_resource(resource_type: type[BaseModel]) -> None:
    """Register a resource type under its class name."""
    name = resource_type.__name__
    previous = _RESOURCE_TYPES.get(name)
    if previous is not None and previous is not resource_type:
        logger.debug("Resource type %s re-registered from %s", name, resource_type.__module__)
    _RESOURCE_TYPES[name] = resource_type


def resource_type(name: str) -> type[BaseModel]:
    """
    Look up a registered resource type by name.

    Raises:
        EveLibError: If no type is registered under that name
    """
    try:
        return _RESOURCE_TYPES[name]
    except KeyError:
        raise EveLibError(f"Unknown resource type: {name}") from None


def registered_names() -> list[str]:
    """Names of all registered resource types, sorted."""
    return sorted(_RESOURCE_TYPES)


def register_decoder(
    target: Union[str, type[BaseModel]],
) -> Callable[[Decoder], Decoder]:
    """
    Decorator registering a custom decoder for a resource type.

        @register_decoder(RecentUploads)
        def _decode_recent_uploads(raw: Any) -> RecentUploads:
            ...
    """
    name = target if isinstance(target, str) else target.__name__

    def decorator(func: Decoder) -> Decoder:
        _DECODERS[name] = func
        return func

    return decorator


def get_decoder(resource_cls: type[ResourceT]) -> Callable[[Any], ResourceT]:
    """Return the decoder for a resource type (custom or default)."""
    custom = _DECODERS.get(resource_cls.__name__)
    if custom is not None:
        return custom

    if getattr(resource_cls, "wire_format", "json") == "xml":

        def decode_xml(raw: Any) -> ResourceT:
            data = xml_to_dict(raw) if isinstance(raw, ET.Element) else raw
            return resource_cls.model_validate(data)

        return decode_xml

    return resource_cls.model_validate


def decode_document(resource_cls: type[ResourceT], raw: Any) -> ResourceT:
    """
    Decode a parsed document into an instance of resource_cls.

    Raises:
        DecodeError: If the document does not match the declared type
    """
    decoder = get_decoder(resource_cls)
    try:
        return decoder(raw)
    except ValidationError as e:
        raise decode_error_from_validation(e, resource_cls) from e
    except DecodeError:
        raise
    except (TypeError, AttributeError, KeyError) as e:
        raise DecodeError(f"Malformed {resource_cls.__name__} document: {e}") from e
