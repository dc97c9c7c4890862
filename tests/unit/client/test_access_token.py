"""Unit tests for sign-in and the access token lifecycle."""

import json

import pytest

from paraclient import AuthState
from tests.fake import FakeParaServer
from tests.harness import build_client


@pytest.fixture
def alice(server):
    """Register a user who can sign in."""
    return server.add_user("fb-token", name="Alice")


class TestSignIn:
    """Tests for sign_in."""

    def test_signs_in_and_remembers_token(self, client, server, alice):
        """Should return the user and use the issued token afterwards."""
        user = client.sign_in("facebook", "fb-token")

        assert user.id == alice["id"]
        assert user.name == "Alice"
        assert client.get_access_token()
        assert client.auth_state == AuthState.BEARER_ACTIVE

        body = json.loads(server.requests[-1].content)
        assert body == {"appid": "app:myapp", "provider": "facebook", "token": "fb-token"}
        assert server.requests[-1].url.path == "/jwt_auth"

        assert client.me().id == alice["id"]
        assert server.requests[-1].headers["Authorization"].startswith("Bearer ")

    def test_sign_in_without_remembering(self, client, alice):
        """Should return the user but keep the current credentials."""
        user = client.sign_in("facebook", "fb-token", remember_jwt=False)

        assert user.id == alice["id"]
        assert client.get_access_token() is None
        assert client.auth_state == AuthState.SIGNED

    def test_failed_sign_in_clears_token(self, client, server, alice):
        """Should return None and forget any previous token."""
        client.sign_in("facebook", "fb-token")

        assert client.sign_in("facebook", "wrong-token") is None
        assert client.get_access_token() is None

    def test_blank_credentials_are_not_sent(self, client, server):
        """Should return None without a request."""
        assert client.sign_in("", "fb-token") is None
        assert client.sign_in("facebook", None) is None
        assert server.requests == []


class TestSignOut:
    """Tests for sign_out and revoke_all_tokens."""

    def test_sign_out_forgets_token(self, client, alice):
        """Should go back to signing requests with the app's keys."""
        client.sign_in("facebook", "fb-token")

        client.sign_out()

        assert client.get_access_token() is None
        assert client.auth_state == AuthState.SIGNED
        assert client.me().type == "app"

    def test_revoked_token_is_rejected(self, client, alice):
        """Should make bearer calls with the revoked token fail."""
        client.sign_in("facebook", "fb-token")

        assert client.revoke_all_tokens() is True
        assert client.me() is None

    def test_revoke_without_token_fails(self, client, server):
        """Should report failure when the server refuses."""
        assert client.revoke_all_tokens() is False
        assert server.requests[-1].method == "DELETE"


class TestRefresh:
    """Tests for automatic token refresh."""

    def test_refreshes_token_before_request(self):
        """Should replace a token whose refresh window is open."""
        server = FakeParaServer(refresh_after_ms=-1000)
        server.add_user("fb-token", name="Alice")
        client = build_client(server)
        client.sign_in("facebook", "fb-token")
        old_token = client.get_access_token()

        me = client.me()

        assert me.name == "Alice"
        assert client.get_access_token() != old_token
        assert [(r.method, r.url.path) for r in server.requests[-2:]] == [
            ("GET", "/jwt_auth"),
            ("GET", "/v1/_me"),
        ]
        assert server.requests[-1].headers["Authorization"] == (
            f"Bearer {client.get_access_token()}"
        )

    def test_does_not_refresh_fresh_token(self, client, server, alice):
        """Should not refresh before the refresh window opens."""
        client.sign_in("facebook", "fb-token")

        assert client.refresh_token() is False
        client.me()

        assert ("GET", "/jwt_auth") not in [(r.method, r.url.path) for r in server.requests]

    def test_failed_refresh_clears_token(self):
        """Should drop a token the server no longer accepts."""
        server = FakeParaServer(refresh_after_ms=-1000)
        server.add_user("fb-token")
        client = build_client(server)
        client.sign_in("facebook", "fb-token")
        client.revoke_all_tokens()

        me = client.me()

        assert client.get_access_token() is None
        assert client.auth_state == AuthState.SIGNED
        assert me.type == "app"

    def test_expired_token_is_not_refreshed(self):
        """Should send an expired token as is and let the server reject it."""
        server = FakeParaServer(token_ttl_ms=-1000, refresh_after_ms=-2000)
        server.add_user("fb-token")
        client = build_client(server)
        client.sign_in("facebook", "fb-token")

        assert client.auth_state == AuthState.BEARER_EXPIRED
        assert client.me() is None
        assert server.requests[-1].url.path == "/v1/_me"
        assert server.requests[-2].url.path == "/jwt_auth"
        assert server.requests[-2].method == "POST"

    def test_set_access_token_reads_claims(self, client, server, alice):
        """Should use a token obtained elsewhere, with its own timing."""
        jwt_data = server.issue_token(alice["id"])

        client.set_access_token(jwt_data["access_token"])

        assert client.me().id == alice["id"]
        assert client.auth_state == AuthState.BEARER_ACTIVE
