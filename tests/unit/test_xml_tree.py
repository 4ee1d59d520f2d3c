"""
Tests for the XML -> tree decoder.

Covers:
1. The always-list rule for child elements (singletons included)
2. Attributes, empty elements and text cleanup
3. Malformed and unsafe documents raising SteamParseError
"""

from __future__ import annotations

import pytest

from steamid_resolver.core.errors import ErrorCode, SteamParseError
from steamid_resolver.core.xml_tree import ATTRIBUTES_KEY, decode_xml
from tests.samples import GROUP_XML, PUBLIC_PROFILE_XML, PUBLIC_STEAM_ID64


class TestAlwaysList:
    def test_root_is_keyed_by_tag(self) -> None:
        tree = decode_xml(PUBLIC_PROFILE_XML)
        assert list(tree) == ["profile"]

    def test_every_profile_field_is_a_list(self) -> None:
        profile = decode_xml(PUBLIC_PROFILE_XML)["profile"]
        for key, value in profile.items():
            assert isinstance(value, list), f"{key} decoded as {type(value).__name__}"

    def test_singleton_text_field_is_one_element_list(self) -> None:
        profile = decode_xml(PUBLIC_PROFILE_XML)["profile"]
        assert profile["steamID64"] == [PUBLIC_STEAM_ID64]
        assert profile["steamID"] == ["3urobeat"]

    def test_nested_blocks_are_lists_of_mappings(self) -> None:
        profile = decode_xml(PUBLIC_PROFILE_XML)["profile"]
        games = profile["mostPlayedGames"][0]["mostPlayedGame"]
        assert len(games) == 1
        assert games[0]["gameName"] == ["Counter-Strike 2"]

    def test_repeated_elements_keep_document_order(self) -> None:
        members = decode_xml(GROUP_XML)["memberList"]["members"][0]["steamID64"]
        assert members == [PUBLIC_STEAM_ID64, "76561198086714410"]


class TestNodeShapes:
    def test_attributes_under_reserved_key(self) -> None:
        groups = decode_xml(PUBLIC_PROFILE_XML)["profile"]["groups"][0]["group"]
        assert groups[0][ATTRIBUTES_KEY] == {"isPrimary": "1"}
        assert groups[1][ATTRIBUTES_KEY] == {"isPrimary": "0"}
        assert groups[0]["groupID64"] == ["103582791464712227"]

    def test_empty_element_decodes_to_empty_string(self) -> None:
        assert decode_xml("<a><b/><c></c></a>") == {"a": {"b": [""], "c": [""]}}

    def test_empty_cdata_is_empty_string(self) -> None:
        profile = decode_xml(PUBLIC_PROFILE_XML)["profile"]
        assert profile["headline"] == [""]

    def test_text_only_root(self) -> None:
        assert decode_xml("<response>  busy  </response>") == {"response": "busy"}

    def test_text_next_to_attributes(self) -> None:
        tree = decode_xml('<a><b kind="x">value</b></a>')
        assert tree == {"a": {"b": [{"$": {"kind": "x"}, "_": "value"}]}}

    def test_leading_whitespace_before_declaration(self) -> None:
        tree = decode_xml("\n  " + PUBLIC_PROFILE_XML)
        assert tree["profile"]["steamID64"] == [PUBLIC_STEAM_ID64]


class TestTextCleanup:
    def test_values_are_trimmed(self) -> None:
        profile = decode_xml(PUBLIC_PROFILE_XML)["profile"]
        assert profile["realname"] == ["Tomg"]

    def test_whitespace_runs_collapse(self) -> None:
        profile = decode_xml(PUBLIC_PROFILE_XML)["profile"]
        assert profile["summary"] == ["Hello there"]

    def test_unicode_is_nfc_normalized(self) -> None:
        tree = decode_xml("<a><name>Café</name></a>")
        assert tree["a"]["name"] == ["Café"]


class TestDecodeFailures:
    def test_malformed_xml_raises_parse_error(self) -> None:
        with pytest.raises(SteamParseError) as excinfo:
            decode_xml("<profile><steamID64>1</profile>")
        assert excinfo.value.code is ErrorCode.PARSE_ERROR
        assert "XML parsing failed" in str(excinfo.value)

    def test_entity_expansion_is_rejected(self) -> None:
        payload = (
            '<?xml version="1.0"?>'
            '<!DOCTYPE lolz [<!ENTITY lol "lol"><!ENTITY lol2 "&lol;&lol;&lol;">]>'
            "<profile><steamID>&lol2;</steamID></profile>"
        )
        with pytest.raises(SteamParseError):
            decode_xml(payload)
