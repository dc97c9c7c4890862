"""Sign-in with an identity provider and the JWT access token lifecycle."""

import logging

import logfire

from paraclient.adapter.auth import TokenState
from paraclient.client.base import JWT_PATH, BaseClient
from paraclient.domain.model import ParaObject

logger = logging.getLogger(__name__)


class AccessTokenMixin(BaseClient):
    """Exchange provider tokens for server JWTs."""

    def sign_in(
        self, provider: str | None, provider_token: str | None, remember_jwt: bool = True
    ) -> ParaObject | None:
        """Sign in a user with a token from an identity provider.

        The user is created on the server if it does not exist yet. Twitter
        tokens must be given as ``{oauth_token}:{oauth_token_secret}``.

        Args:
            provider: Provider name, e.g. "facebook", "google", "password"
            provider_token: Access token issued by the provider
            remember_jwt: Authenticate following requests with the issued JWT

        Returns:
            The signed-in user, None if authentication failed
        """
        if not provider or not provider_token:
            return None

        credentials = {
            "appid": self.access_key,
            "provider": provider,
            "token": provider_token,
        }
        with logfire.span("paraclient.sign_in", provider=provider):
            result = self._entity_json(self.invoke_post(JWT_PATH, credentials))
            if isinstance(result, dict) and "user" in result and "jwt" in result:
                if remember_jwt:
                    self._set_token_state(TokenState.from_jwt_payload(result["jwt"]))
                logfire.info("Signed in", provider=provider)
                return ParaObject.from_dict(result["user"])

            self._set_token_state(TokenState.cleared())
            logger.warning(f"Sign-in with provider '{provider}' failed")
        return None

    def sign_out(self) -> None:
        """Forget the access token.

        The token itself stays valid on the server until it expires, use
        ``revoke_all_tokens()`` to invalidate it.
        """
        self._set_token_state(TokenState.cleared())
        logfire.info("Signed out")

    def revoke_all_tokens(self) -> bool:
        """Invalidate every token issued to the signed-in user.

        Returns:
            True if the server accepted the request
        """
        with logfire.span("paraclient.revoke_all_tokens"):
            return self.get_entity(self.invoke_delete(JWT_PATH)) is not None
