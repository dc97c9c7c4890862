"""JWT token utilities."""

import jwt
from pydantic import BaseModel, ValidationError


class TokenClaims(BaseModel):
    """Timing claims carried by an API server access token.

    Both values are seconds since the epoch, as issued by the server.
    """

    exp: int
    refresh: int | None = None


class JWTError(Exception):
    """JWT-related error."""

    pass


def decode_token_claims(token: str) -> TokenClaims:
    """Read the timing claims of an access token.

    The signature is not verified: the token is signed with the app's secret,
    which a client signed in with a bearer token does not hold. Expiry is not
    enforced here either, the caller decides what an expired token means.

    Args:
        token: Encoded JWT access token

    Returns:
        Decoded timing claims

    Raises:
        JWTError: If the token is malformed or carries no expiry
    """
    try:
        payload = jwt.decode(
            token,
            options={"verify_signature": False, "verify_exp": False},
        )
        return TokenClaims(**payload)
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    except ValidationError:
        raise JWTError("Token carries no expiry claim")
