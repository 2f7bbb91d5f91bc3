"""
EVE XML API resource models (map endpoints).

    <eveapi version="2">
      <currentTime>2014-01-01 12:00:00</currentTime>
      <result>
        <rowset name="solarSystems" key="solarSystemID" columns="...">
          <row solarSystemID="30000142" shipJumps="12345"/>
        </rowset>
        <dataTime>2014-01-01 11:00:00</dataTime>
      </result>
      <cachedUntil>2014-01-01 13:00:00</cachedUntil>
    </eveapi>

Failures come back as <error code="...">message</error> in place of <result>.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import ClassVar

from pydantic import BaseModel, Field

from ..core.constants import XML_API_AUTH_ERROR_CODES
from ..core.errors import AuthenticationError, DecodeError, RequestError
from ..core.registry import register_decoder
from ..core.rowset import decode_xml_rows
from .base import EveModel, TypedResource, WireFormat

# =============================================================================
# Rows
# =============================================================================


class FactionWarSystem(EveModel):
    solar_system_id: int = Field(alias="solarSystemID")
    solar_system_name: str = Field(alias="solarSystemName")
    occupying_faction_id: int = Field(alias="occupyingFactionID")
    occupying_faction_name: str | None = Field(default=None, alias="occupyingFactionName")
    owning_faction_id: int | None = Field(default=None, alias="owningFactionID")
    owning_faction_name: str | None = Field(default=None, alias="owningFactionName")
    contested: bool = False
    victory_points: int | None = Field(default=None, alias="victoryPoints")
    victory_point_threshold: int | None = Field(default=None, alias="victoryPointThreshold")


class SystemJumps(EveModel):
    solar_system_id: int = Field(alias="solarSystemID")
    ship_jumps: int = Field(alias="shipJumps")


class SystemKills(EveModel):
    solar_system_id: int = Field(alias="solarSystemID")
    ship_kills: int = Field(alias="shipKills")
    faction_kills: int = Field(alias="factionKills")
    pod_kills: int = Field(alias="podKills")


class SovereigntySystem(EveModel):
    solar_system_id: int = Field(alias="solarSystemID")
    solar_system_name: str | None = Field(default=None, alias="solarSystemName")
    alliance_id: int = Field(default=0, alias="allianceID")
    faction_id: int = Field(default=0, alias="factionID")
    corporation_id: int = Field(default=0, alias="corporationID")


# =============================================================================
# Responses
# =============================================================================


class XmlApiResource(TypedResource):
    """Common envelope of an XML API document."""

    wire_format: ClassVar[WireFormat] = "xml"

    current_time: str
    cached_until: str
    data_time: str | None = None


class FactionWarSystems(XmlApiResource):
    solar_systems: list[FactionWarSystem] = Field(default_factory=list)


class Jumps(XmlApiResource):
    solar_systems: list[SystemJumps] = Field(default_factory=list)


class Kills(XmlApiResource):
    solar_systems: list[SystemKills] = Field(default_factory=list)


class Sovereignty(XmlApiResource):
    solar_systems: list[SovereigntySystem] = Field(default_factory=list)


def raise_for_api_error(root: ET.Element) -> None:
    """
    Raise the error carried by an XML API error document, if any.

    Raises:
        AuthenticationError: For error codes in the authentication range
        RequestError: For any other error code
    """
    error = root.find("error")
    if error is None:
        return

    code_text = error.get("code", "")
    code = int(code_text) if code_text.isdigit() else None
    message = (error.text or "").strip() or "XML API error"

    if code is not None and code in XML_API_AUTH_ERROR_CODES:
        raise AuthenticationError(message, api_code=code)
    raise RequestError(message, api_code=code)


def _solar_system_decoder(resource_cls: type[XmlApiResource], row_cls: type[BaseModel]):
    @register_decoder(resource_cls)
    def decode(root: ET.Element) -> XmlApiResource:
        raise_for_api_error(root)
        result = root.find("result")
        if result is None:
            raise DecodeError("XML API document has no <result>", field="result")

        return resource_cls(
            current_time=root.findtext("currentTime"),
            cached_until=root.findtext("cachedUntil"),
            data_time=result.findtext("dataTime"),
            solar_systems=decode_xml_rows(result, row_cls, rowset_name="solarSystems"),
        )

    return decode


_solar_system_decoder(FactionWarSystems, FactionWarSystem)
_solar_system_decoder(Jumps, SystemJumps)
_solar_system_decoder(Kills, SystemKills)
_solar_system_decoder(Sovereignty, SovereigntySystem)
