"""Request authentication for the API client."""

from .strategy import AnonymousAuth, AuthStrategy, BearerAuth, SignedAuth
from .token import TokenState

__all__ = [
    "AuthStrategy",
    "AnonymousAuth",
    "SignedAuth",
    "BearerAuth",
    "TokenState",
]
