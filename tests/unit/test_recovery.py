"""
Tests for customURL recovery on non-public profiles.

Covers:
1. Public profiles and profiles that already carry a customURL are untouched
2. `/id/<vanity>` requests: vanity taken from the request URL
3. `/profiles/<id>` requests: vanity taken from the redirect `Location`
4. Best-effort failures leave customURL absent
"""

from __future__ import annotations

import pytest

from steamid_resolver.core.classifier import classify
from steamid_resolver.core.errors import SteamNetworkError
from steamid_resolver.core.interfaces.http import FetchResult
from steamid_resolver.core.recovery import (
    custom_url_from_request,
    recover_custom_url,
    resolve_custom_url_from_redirect,
)
from steamid_resolver.core.xml_tree import decode_xml
from tests.samples import PRIVATE_PROFILE_XML, PRIVATE_STEAM_ID64, PUBLIC_PROFILE_XML

PROFILES_URL = f"https://steamcommunity.com/profiles/{PRIVATE_STEAM_ID64}?xml=1"
VANITY_URL = "https://steamcommunity.com/id/hiddenvanity?xml=1"


def _profile(xml: str):
    return classify(decode_xml(xml)).profile


def _redirect(location: str | None) -> FetchResult:
    headers = {"Location": location} if location is not None else {}
    return FetchResult(status_code=302, headers=headers)


class TestCustomUrlFromRequest:
    def test_vanity_segment(self) -> None:
        assert custom_url_from_request(VANITY_URL) == "hiddenvanity"

    def test_without_xml_suffix(self) -> None:
        assert custom_url_from_request("https://steamcommunity.com/id/abc") == "abc"

    def test_trailing_slash_yields_nothing(self) -> None:
        assert custom_url_from_request("https://steamcommunity.com/id/") is None


class TestResolveFromRedirect:
    @pytest.mark.asyncio
    async def test_location_with_vanity(self, make_fetcher) -> None:
        fetcher = make_fetcher(_redirect("https://steamcommunity.com/id/hiddenvanity/"))

        assert await resolve_custom_url_from_redirect(PROFILES_URL, fetcher) == "hiddenvanity"
        assert fetcher.calls == [(PROFILES_URL, False)]

    @pytest.mark.asyncio
    async def test_location_query_is_dropped(self, make_fetcher) -> None:
        fetcher = make_fetcher(_redirect("https://steamcommunity.com/id/hiddenvanity?xml=1"))
        assert await resolve_custom_url_from_redirect(PROFILES_URL, fetcher) == "hiddenvanity"

    @pytest.mark.asyncio
    async def test_lowercase_location_header(self, make_fetcher) -> None:
        fetcher = make_fetcher(
            FetchResult(status_code=302, headers={"location": "/id/hiddenvanity"})
        )
        assert await resolve_custom_url_from_redirect(PROFILES_URL, fetcher) == "hiddenvanity"

    @pytest.mark.asyncio
    async def test_no_location(self, make_fetcher) -> None:
        fetcher = make_fetcher(FetchResult(status_code=200, text=PRIVATE_PROFILE_XML))
        assert await resolve_custom_url_from_redirect(PROFILES_URL, fetcher) is None

    @pytest.mark.asyncio
    async def test_location_without_vanity_path(self, make_fetcher) -> None:
        fetcher = make_fetcher(_redirect("https://steamcommunity.com/login/home/"))
        assert await resolve_custom_url_from_redirect(PROFILES_URL, fetcher) is None

    @pytest.mark.asyncio
    async def test_transport_failure_is_swallowed(self, make_fetcher) -> None:
        fetcher = make_fetcher(SteamNetworkError("connection reset"))
        assert await resolve_custom_url_from_redirect(PROFILES_URL, fetcher) is None


class TestRecoverCustomUrl:
    @pytest.mark.asyncio
    async def test_public_profile_untouched(self, make_fetcher) -> None:
        fetcher = make_fetcher(_redirect("https://steamcommunity.com/id/other/"))
        profile = _profile(PUBLIC_PROFILE_XML)

        result = await recover_custom_url(profile, PROFILES_URL, fetcher)

        assert result is profile
        assert fetcher.calls == []

    @pytest.mark.asyncio
    async def test_vanity_request(self, make_fetcher) -> None:
        fetcher = make_fetcher(_redirect("unused"))
        profile = _profile(PRIVATE_PROFILE_XML)

        result = await recover_custom_url(profile, VANITY_URL, fetcher)

        assert result.custom_url == ["hiddenvanity"]
        assert fetcher.calls == []

    @pytest.mark.asyncio
    async def test_profiles_request_uses_redirect(self, make_fetcher) -> None:
        fetcher = make_fetcher(_redirect("https://steamcommunity.com/id/hiddenvanity/"))
        profile = _profile(PRIVATE_PROFILE_XML)

        result = await recover_custom_url(profile, PROFILES_URL, fetcher)

        assert result.custom_url == ["hiddenvanity"]
        assert result.steam_id64 == [PRIVATE_STEAM_ID64]

    @pytest.mark.asyncio
    async def test_original_record_is_not_mutated(self, make_fetcher) -> None:
        fetcher = make_fetcher(_redirect("https://steamcommunity.com/id/hiddenvanity/"))
        profile = _profile(PRIVATE_PROFILE_XML)

        await recover_custom_url(profile, PROFILES_URL, fetcher)

        assert profile.custom_url is None

    @pytest.mark.asyncio
    async def test_unrecoverable_leaves_field_absent(self, make_fetcher) -> None:
        fetcher = make_fetcher(FetchResult(status_code=200, text=PRIVATE_PROFILE_XML))
        profile = _profile(PRIVATE_PROFILE_XML)

        result = await recover_custom_url(profile, PROFILES_URL, fetcher)

        assert result.custom_url is None

    @pytest.mark.asyncio
    async def test_existing_custom_url_is_kept(self, make_fetcher) -> None:
        xml = PRIVATE_PROFILE_XML.replace(
            "</profile>", "<customURL><![CDATA[kept]]></customURL></profile>"
        )
        fetcher = make_fetcher(_redirect("https://steamcommunity.com/id/other/"))
        profile = _profile(xml)

        result = await recover_custom_url(profile, PROFILES_URL, fetcher)

        assert result.custom_url == ["kept"]
        assert fetcher.calls == []
