"""Bearer token state and its transitions.

A client holds at most one access token issued by the API server. The token
comes with two timestamps (epoch milliseconds):

- ``expires``: the token is valid while ``now < expires``
- ``next_refresh``: the server accepts a refresh once ``now >= next_refresh``

A value of -1 means the timestamp is unknown. The state is immutable; sign-in,
refresh and sign-out replace it through the constructors below.
"""

import time
from typing import Any, Mapping

from paraclient.domain.value.common import ValueObject
from paraclient.util.jwt import JWTError, decode_token_claims

UNKNOWN = -1


def now_millis() -> int:
    """Current time in epoch milliseconds."""
    return int(time.time() * 1000)


class TokenState(ValueObject):
    """Access token plus its expiry and refresh timestamps."""

    token: str | None = None
    expires: int = UNKNOWN
    next_refresh: int = UNKNOWN

    @classmethod
    def cleared(cls) -> "TokenState":
        """State after sign-out or a failed sign-in/refresh."""
        return cls()

    @classmethod
    def from_token(cls, token: str | None) -> "TokenState":
        """State for a token set directly by the caller.

        Timing is read from the token's ``exp`` and ``refresh`` claims
        (seconds). A token whose claims cannot be read is kept, with unknown
        timestamps.
        """
        if not token:
            return cls.cleared()
        try:
            claims = decode_token_claims(token)
        except JWTError:
            return cls(token=token)
        refresh = claims.refresh * 1000 if claims.refresh is not None else UNKNOWN
        return cls(token=token, expires=claims.exp * 1000, next_refresh=refresh)

    @classmethod
    def from_jwt_payload(cls, jwt_data: Mapping[str, Any]) -> "TokenState":
        """State from the ``jwt`` object returned by sign-in and refresh.

        The server reports ``expires`` and ``refresh`` in milliseconds.
        """
        expires = jwt_data.get("expires")
        refresh = jwt_data.get("refresh")
        return cls(
            token=jwt_data.get("access_token"),
            expires=int(expires) if expires is not None else UNKNOWN,
            next_refresh=int(refresh) if refresh is not None else UNKNOWN,
        )

    @property
    def present(self) -> bool:
        return bool(self.token)

    def is_expired(self, now: int | None = None) -> bool:
        """True once the expiry time has passed. Unknown expiry never expires."""
        if self.expires <= 0:
            return False
        now = now_millis() if now is None else now
        return now >= self.expires

    def can_refresh(self, now: int | None = None) -> bool:
        """True once the server is willing to issue a replacement token."""
        if self.next_refresh <= 0:
            return False
        now = now_millis() if now is None else now
        return now >= self.next_refresh

    def refresh_due(self, now: int | None = None) -> bool:
        """True when a refresh should be attempted before the next request.

        Requires a token with a known expiry that has not passed yet, and a
        refresh window that has opened.
        """
        now = now_millis() if now is None else now
        return (
            self.present
            and self.expires > 0
            and not self.is_expired(now)
            and self.can_refresh(now)
        )
