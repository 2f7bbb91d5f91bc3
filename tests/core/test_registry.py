"""
Tests for the resource type registry and document decoding.
"""

import xml.etree.ElementTree as ET

import pytest


class TestRegistration:
    """Typed resources register themselves by class name."""

    def test_models_registered_on_import(self):
        from evelib.core.registry import registered_names, resource_type
        from evelib.models.crest import Alliance, CrestRoot
        from evelib.models.xmlapi import Jumps

        names = registered_names()

        assert {"Alliance", "CrestRoot", "Jumps"} <= set(names)
        assert resource_type("Alliance") is Alliance
        assert resource_type("CrestRoot") is CrestRoot
        assert resource_type("Jumps") is Jumps

    def test_unknown_name_raises(self):
        from evelib.core.errors import EveLibError
        from evelib.core.registry import resource_type

        with pytest.raises(EveLibError, match="Unknown resource type"):
            resource_type("NoSuchResource")

    def test_new_subclass_registered(self):
        from evelib.core.registry import resource_type
        from evelib.models.base import TypedResource

        class ServerStatus(TypedResource):
            players: int = 0

        assert resource_type("ServerStatus") is ServerStatus


class TestDecoders:
    """Test decoder lookup and decode_document."""

    def test_json_default_decoder(self, json_fixture):
        from evelib.core.registry import decode_document
        from evelib.models.crest import CrestRoot

        root = decode_document(CrestRoot, json_fixture("crest/root.json"))

        assert isinstance(root, CrestRoot)
        assert root.server_name == "TRANQUILITY"

    def test_xml_default_decoder(self):
        from typing import ClassVar

        from evelib.core.registry import decode_document
        from evelib.models.base import TypedResource, WireFormat

        class CharacterName(TypedResource):
            wire_format: ClassVar[WireFormat] = "xml"

            name: str
            character_id: int

        element = ET.fromstring(
            "<character><name>CCP Bartender</name><characterId>90000001</characterId></character>"
        )

        decoded = decode_document(CharacterName, element)

        assert decoded.name == "CCP Bartender"
        assert decoded.character_id == 90000001

    def test_custom_decoder_used(self):
        from evelib.core.registry import decode_document, register_decoder
        from evelib.models.base import TypedResource

        class Counted(TypedResource):
            count: int

        @register_decoder(Counted)
        def _decode(raw):
            return Counted(count=len(raw))

        assert decode_document(Counted, [1, 2, 3]).count == 3

    def test_custom_decoder_by_name(self):
        from evelib.core.registry import get_decoder, register_decoder

        @register_decoder("Named")
        def _decode(raw):
            return raw

        class Named:
            pass

        assert get_decoder(Named) is _decode

    def test_validation_error_becomes_decode_error(self):
        from evelib.core.errors import DecodeError
        from evelib.core.registry import decode_document
        from evelib.models.crest import Alliance

        with pytest.raises(DecodeError) as exc_info:
            decode_document(Alliance, {"id": 99000006})

        assert exc_info.value.field == "name"

    def test_malformed_document_becomes_decode_error(self):
        from evelib.core.errors import DecodeError
        from evelib.core.registry import decode_document
        from evelib.models.crest import CrestRoot

        with pytest.raises(DecodeError):
            decode_document(CrestRoot, ["not", "an", "object"])
