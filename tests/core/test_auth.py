"""
Tests for the EVE SSO client and token state.
"""

from __future__ import annotations

from urllib.parse import parse_qs

import pytest

from tests.conftest import SSO_TOKEN_URL, SSO_VERIFY_URL


class TestEncodeKey:
    """Test EveAuth.encode_key."""

    def test_base64_of_id_and_secret(self):
        from evelib.core.auth import EveAuth

        assert EveAuth.encode_key("client", "secret") == "Y2xpZW50OnNlY3JldA=="


class TestAuthContext:
    """Test token state updates."""

    def test_can_refresh_requires_both_credentials(self):
        from evelib.core.auth import AuthContext

        assert AuthContext(refresh_token="r", encoded_key="k").can_refresh is True
        assert AuthContext(refresh_token="r").can_refresh is False
        assert AuthContext(encoded_key="k").can_refresh is False

    def test_update_replaces_tokens(self, token_grant):
        from evelib.core.auth import AuthContext, AuthResponse

        context = AuthContext(access_token="old", refresh_token="old_refresh")

        context.update(AuthResponse.model_validate(token_grant))

        assert context.access_token == "new_access_token"
        assert context.refresh_token == "new_refresh_token"

    def test_update_keeps_refresh_token_when_not_reissued(self):
        from evelib.core.auth import AuthContext, AuthResponse

        context = AuthContext(access_token="old", refresh_token="keep_me")

        context.update(AuthResponse(access_token="fresh"))

        assert context.access_token == "fresh"
        assert context.refresh_token == "keep_me"


class TestEveAuth:
    """Test SSO requests."""

    def test_authenticate(self, httpx_mock, token_grant):
        from evelib.core.auth import EveAuth

        httpx_mock.add_response(
            method="POST",
            url=SSO_TOKEN_URL,
            json=token_grant,
            match_headers={"Authorization": "Basic a2V5"},
        )

        response = EveAuth().authenticate("a2V5", "auth_code")

        assert response.access_token == "new_access_token"
        assert response.refresh_token == "new_refresh_token"
        assert response.expires_in == 1200

        form = parse_qs(httpx_mock.get_request().content.decode())
        assert form == {"grant_type": ["authorization_code"], "code": ["auth_code"]}

    async def test_refresh_async(self, httpx_mock, token_grant):
        from evelib.core.auth import EveAuth

        httpx_mock.add_response(method="POST", url=SSO_TOKEN_URL, json=token_grant)

        response = await EveAuth().refresh_async("a2V5", "old_refresh")

        assert response.access_token == "new_access_token"
        form = parse_qs(httpx_mock.get_request().content.decode())
        assert form == {"grant_type": ["refresh_token"], "refresh_token": ["old_refresh"]}

    async def test_refresh_without_credentials(self, httpx_mock):
        """No request is made when credentials are missing."""
        from evelib.core.auth import EveAuth
        from evelib.core.errors import AuthenticationError

        with pytest.raises(AuthenticationError):
            await EveAuth().refresh_async(None, "old_refresh")

        with pytest.raises(AuthenticationError):
            await EveAuth().refresh_async("a2V5", None)

    def test_rejected_grant_is_authentication_error(self, httpx_mock):
        from evelib.core.auth import EveAuth
        from evelib.core.errors import AuthenticationError

        httpx_mock.add_response(
            method="POST",
            url=SSO_TOKEN_URL,
            status_code=400,
            json={"error": "invalid_grant", "error_description": "Refresh token expired"},
        )

        with pytest.raises(AuthenticationError, match="Refresh token expired") as exc_info:
            EveAuth().refresh("a2V5", "stale")

        assert exc_info.value.status_code == 400

    def test_server_error_is_request_error(self, httpx_mock):
        from evelib.core.auth import EveAuth
        from evelib.core.errors import AuthenticationError, RequestError

        httpx_mock.add_response(method="POST", url=SSO_TOKEN_URL, status_code=503)

        with pytest.raises(RequestError) as exc_info:
            EveAuth().refresh("a2V5", "token")

        assert not isinstance(exc_info.value, AuthenticationError)
        assert exc_info.value.status_code == 503

    def test_verify(self, httpx_mock):
        from evelib.core.auth import EveAuth

        httpx_mock.add_response(
            method="GET",
            url=SSO_VERIFY_URL,
            json={
                "CharacterID": 90000001,
                "CharacterName": "CCP Bartender",
                "ExpiresOn": "2015-07-07T12:00:00",
                "Scopes": "publicData",
                "TokenType": "Character",
                "CharacterOwnerHash": "abc",
            },
            match_headers={"Authorization": "Bearer access"},
        )

        identity = EveAuth().verify("access")

        assert identity.character_id == 90000001
        assert identity.character_name == "CCP Bartender"
        assert identity.scopes == "publicData"

    def test_custom_base_uri(self, httpx_mock, token_grant):
        from evelib.core.auth import EveAuth

        httpx_mock.add_response(
            method="POST", url="https://sisilogin.testeveonline.com/oauth/token", json=token_grant
        )

        response = EveAuth(base_uri="https://sisilogin.testeveonline.com/").refresh("k", "r")

        assert response.access_token == "new_access_token"
