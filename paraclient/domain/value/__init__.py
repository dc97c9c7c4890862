"""Domain value objects for the Para client."""

from paraclient.domain.value.common import ValueObject
from paraclient.domain.value.types import (
    DEFAULT_TYPE,
    GUEST_ACCESS,
    WILDCARD,
    AuthState,
    HttpMethod,
)

__all__ = [
    "ValueObject",
    "DEFAULT_TYPE",
    "GUEST_ACCESS",
    "WILDCARD",
    "AuthState",
    "HttpMethod",
]
