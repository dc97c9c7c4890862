"""Request pipeline shared by all API client methods.

Every call goes through ``invoke_signed_request``:

1. the resource path is resolved against the API path (``/v1/`` by default)
2. query parameters are normalized (None dropped, lists repeated, booleans
   lowercased) and the entity is encoded as JSON
3. a bearer token due for refresh is refreshed first
4. the current authentication strategy is applied
5. the request is sent; transport failures yield None

A client instance is not safe for concurrent use from several threads: token
refresh, sign-in and sign-out replace its token state without locking.
"""

import logging
from typing import Any, Mapping

import httpx
import logfire

from paraclient.adapter.auth import (
    AnonymousAuth,
    AuthStrategy,
    BearerAuth,
    SignedAuth,
    TokenState,
)
from paraclient.adapter.error import SigningError
from paraclient.adapter.http import (
    deserialize,
    get_entity,
    get_items,
    get_items_from_list,
)
from paraclient.config import (
    DEFAULT_ENDPOINT,
    DEFAULT_PATH,
    ClientSettings,
    SigningSettings,
    normalize_api_path,
)
from paraclient.domain.model import Pager, ParaObject
from paraclient.domain.value import AuthState
from paraclient.util.error import ConfigurationError

logger = logging.getLogger(__name__)

JWT_PATH = "/jwt_auth"

QueryParams = Mapping[str, Any]


class BaseClient:
    """Connection settings, credentials and the request pipeline."""

    def __init__(
        self,
        access_key: str,
        secret_key: str | None = None,
        endpoint: str = DEFAULT_ENDPOINT,
        api_path: str = DEFAULT_PATH,
        *,
        timeout: float = 30.0,
        signing: SigningSettings | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize client.

        Args:
            access_key: App access key (the app id, e.g. "app:myapp")
            secret_key: App secret key; without it requests are anonymous
                until a user signs in
            endpoint: Server URL, e.g. "http://localhost:8080"
            api_path: API path prefix
            timeout: Request timeout in seconds
            signing: Signature scope (service name and region)
            http_client: Transport to use instead of a new httpx.Client
        """
        self._access_key = access_key
        self._secret_key = secret_key
        self._signing = signing or SigningSettings()
        self._token = TokenState.cleared()
        self._auth: AuthStrategy = self._select_auth()
        self.set_endpoint(endpoint)
        self.set_api_path(api_path)
        self._http = http_client or httpx.Client(timeout=timeout)

        if not secret_key or len(secret_key) < 6:
            logger.warning(
                "Secret key appears to be invalid. Make sure you call 'sign_in()' first."
            )

    @classmethod
    def from_settings(
        cls, settings: ClientSettings, http_client: httpx.Client | None = None
    ):
        """Create a client from settings (usually loaded from PARA_* env vars)."""
        return cls(
            settings.access_key,
            settings.secret_key,
            settings.endpoint,
            settings.api_path,
            timeout=settings.timeout,
            signing=settings.signing,
            http_client=http_client,
        )

    def close(self) -> None:
        """Close the underlying HTTP transport."""
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # Connection settings

    def set_endpoint(self, endpoint: str | None) -> None:
        self._endpoint = endpoint

    def get_endpoint(self) -> str:
        """Server URL without a trailing slash."""
        return (self._endpoint or DEFAULT_ENDPOINT).rstrip("/")

    def set_api_path(self, path: str | None) -> None:
        self._path = path

    def get_api_path(self) -> str:
        """API path prefix, always ending with a slash."""
        return normalize_api_path(self._path)

    def get_full_path(self, resource_path: str | None) -> str:
        """Full request path for a resource, e.g. "/v1/cats/123".

        The JWT endpoint lives outside the API path and is returned as is.
        """
        if resource_path and resource_path.startswith(JWT_PATH):
            return resource_path
        if not resource_path:
            resource_path = ""
        elif resource_path.startswith("/"):
            resource_path = resource_path[1:]
        return self.get_api_path() + resource_path

    # Credentials

    @property
    def access_key(self) -> str:
        return self._access_key

    @property
    def auth_state(self) -> AuthState:
        """How the next request will be authenticated."""
        if self._token.present:
            if self._token.is_expired():
                return AuthState.BEARER_EXPIRED
            return AuthState.BEARER_ACTIVE
        if self._secret_key:
            return AuthState.SIGNED
        return AuthState.ANONYMOUS

    def get_access_token(self) -> str | None:
        """The JWT access token, or None if not signed in."""
        return self._token.token

    def set_access_token(self, token: str | None) -> None:
        """Use a JWT access token for all following requests.

        Expiry and refresh times are read from the token's claims.
        """
        self._set_token_state(TokenState.from_token(token))

    def _set_token_state(self, state: TokenState) -> None:
        self._token = state
        self._auth = self._select_auth()

    def _set_secret_key(self, secret_key: str | None) -> None:
        self._secret_key = secret_key
        self._auth = self._select_auth()

    def _select_auth(self) -> AuthStrategy:
        if self._token.present:
            return BearerAuth(self._token.token)
        if self._secret_key:
            return SignedAuth(
                self._access_key,
                self._secret_key,
                service_name=self._signing.service_name,
                region=self._signing.region,
            )
        return AnonymousAuth(self._access_key)

    def refresh_token(self) -> bool:
        """Refresh the JWT access token if it is due for refresh.

        Requires a valid existing token, call ``sign_in()`` first. A failed
        refresh clears the token.

        Returns:
            True if the token was replaced
        """
        if not self._token.refresh_due():
            return False

        with logfire.span("paraclient.refresh_token"):
            result = self._entity_json(self.invoke_get(JWT_PATH))
            if isinstance(result, dict) and "user" in result and "jwt" in result:
                self._set_token_state(TokenState.from_jwt_payload(result["jwt"]))
                logfire.info("Access token refreshed", expires=self._token.expires)
                return True

            self._set_token_state(TokenState.cleared())
            logfire.warn("Access token refresh failed, token cleared")
        return False

    # Request pipeline

    def invoke_signed_request(
        self,
        method: str,
        resource_path: str | None,
        params: QueryParams | None = None,
        entity: Any = None,
        auth: AuthStrategy | None = None,
    ) -> httpx.Response | None:
        """Build, authenticate and send one request.

        Args:
            method: HTTP method
            resource_path: Path relative to the API path
            params: Query parameters
            entity: JSON-serializable request body
            auth: Strategy overriding the client's own credentials

        Returns:
            The response, or None if the request could not be signed or sent

        Raises:
            ConfigurationError: If no access key is configured
        """
        if not self._access_key:
            raise ConfigurationError(f"Blank access key: {method} {resource_path}")

        path = self.get_full_path(resource_path)

        if auth is None:
            # The refresh call itself must not trigger another refresh
            if self._token.present and not (method == "GET" and path == JWT_PATH):
                self.refresh_token()
            auth = self._auth

        request = self._http.build_request(
            method,
            self.get_endpoint() + path,
            params=self._query_params(params),
            json=entity,
        )

        try:
            auth.authenticate(request)
        except SigningError as e:
            logger.error(str(e))
            return None

        try:
            return self._http.send(request)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            return None

    def invoke_get(
        self, resource_path: str | None, params: QueryParams | None = None
    ) -> httpx.Response | None:
        """Invoke a GET request to the API."""
        return self.invoke_signed_request("GET", resource_path, params)

    def invoke_post(
        self, resource_path: str | None, entity: Any = None
    ) -> httpx.Response | None:
        """Invoke a POST request to the API."""
        return self.invoke_signed_request("POST", resource_path, entity=entity)

    def invoke_put(
        self, resource_path: str | None, entity: Any = None
    ) -> httpx.Response | None:
        """Invoke a PUT request to the API."""
        return self.invoke_signed_request("PUT", resource_path, entity=entity)

    def invoke_patch(
        self, resource_path: str | None, entity: Any = None
    ) -> httpx.Response | None:
        """Invoke a PATCH request to the API."""
        return self.invoke_signed_request("PATCH", resource_path, entity=entity)

    def invoke_delete(
        self, resource_path: str | None, params: QueryParams | None = None
    ) -> httpx.Response | None:
        """Invoke a DELETE request to the API."""
        return self.invoke_signed_request("DELETE", resource_path, params)

    @staticmethod
    def _query_params(params: QueryParams | None) -> list[tuple[str, str]]:
        query: list[tuple[str, str]] = []
        for key, value in (params or {}).items():
            if value is None:
                continue
            values = value if isinstance(value, (list, tuple, set)) else [value]
            for v in values:
                if v is None:
                    continue
                if isinstance(v, bool):
                    v = "true" if v else "false"
                query.append((key, str(v)))
        return query

    # Response mapping

    def get_entity(
        self, response: httpx.Response | None, return_raw_json: bool = True
    ) -> str | ParaObject | None:
        """Map a response to its body text (or ParaObject), None on failure."""
        return get_entity(response, return_raw_json)

    def _entity_json(self, response: httpx.Response | None) -> Any:
        return deserialize(self.get_entity(response))

    def _json_dict(self, response: httpx.Response | None) -> dict[str, Any]:
        result = self._entity_json(response)
        return result if isinstance(result, dict) else {}

    def _entity_object(self, response: httpx.Response | None) -> ParaObject | None:
        return self.get_entity(response, return_raw_json=False)

    def get_items_from_list(self, result: Any) -> list[ParaObject]:
        """Decode a JSON array of objects."""
        return get_items_from_list(result)

    def get_items(
        self, result: Any, at: str = "items", pager: Pager | None = None
    ) -> list[ParaObject]:
        """Decode a search envelope, updating the pager with its metadata."""
        return get_items(result, at, pager)

    @staticmethod
    def pager_to_params(pager: Pager | None = None) -> dict[str, str]:
        """Query parameters for a pager, empty when there is none."""
        return pager.to_params() if pager is not None else {}
