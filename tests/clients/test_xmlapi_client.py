"""
Tests for the XML API map client.
"""

from __future__ import annotations

import asyncio

import pytest

from tests.conftest import XML_API_URI


class TestMap:
    """Test the map endpoints."""

    @pytest.mark.parametrize(
        "method,path,fixture",
        [
            ("get_jumps", "map/Jumps.xml.aspx", "xmlapi/jumps.xml"),
            ("get_kills", "map/Kills.xml.aspx", "xmlapi/kills.xml"),
            ("get_sovereignty", "map/Sovereignty.xml.aspx", "xmlapi/sovereignty.xml"),
            ("get_faction_war_systems", "map/FacWarSystems.xml.aspx", "xmlapi/fw_systems.xml"),
        ],
    )
    def test_endpoints(self, httpx_mock, text_fixture, method, path, fixture):
        from evelib.clients.xmlapi import Map

        httpx_mock.add_response(url=XML_API_URI + path, text=text_fixture(fixture))
        client = Map()

        document = getattr(client, method)()

        assert document.current_time == "2014-01-01 12:00:00"
        assert len(document.solar_systems) >= 2
        assert document.client is client

    def test_custom_base_uri(self, httpx_mock, text_fixture):
        from evelib.clients.xmlapi import Map

        httpx_mock.add_response(
            url="https://api.testeveonline.com/map/Jumps.xml.aspx",
            text=text_fixture("xmlapi/jumps.xml"),
        )

        jumps = Map(base_uri="https://api.testeveonline.com/").get_jumps()

        assert jumps.solar_systems[0].ship_jumps == 12345

    def test_auth_error_document(self, httpx_mock, text_fixture):
        from evelib.clients.xmlapi import Map
        from evelib.core.errors import AuthenticationError

        httpx_mock.add_response(
            url=XML_API_URI + "map/Kills.xml.aspx", text=text_fixture("xmlapi/error_auth.xml")
        )

        with pytest.raises(AuthenticationError) as exc_info:
            Map().get_kills()

        assert exc_info.value.api_code == 203

    def test_generic_error_document(self, httpx_mock, text_fixture):
        from evelib.clients.xmlapi import Map
        from evelib.core.errors import RequestError

        httpx_mock.add_response(
            url=XML_API_URI + "map/Kills.xml.aspx",
            text=text_fixture("xmlapi/error_generic.xml"),
        )

        with pytest.raises(RequestError, match="Unexpected failure"):
            Map().get_kills()

    def test_sync_and_async_equal(self, httpx_mock, text_fixture):
        from evelib.clients.xmlapi import Map

        for _ in range(2):
            httpx_mock.add_response(
                url=XML_API_URI + "map/Jumps.xml.aspx", text=text_fixture("xmlapi/jumps.xml")
            )
        client = Map()

        assert client.get_jumps() == asyncio.run(client.get_jumps_async())
