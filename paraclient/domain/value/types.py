"""Domain value types shared by the client and its models."""

from enum import Enum

# Type assigned to objects created without one
DEFAULT_TYPE = "sysprop"

# Method token appended to a wildcard permission to let unauthenticated
# requests through
GUEST_ACCESS = "?"

# Subject or resource matching everything in a permission grant
WILDCARD = "*"


class AuthState(str, Enum):
    """How requests from a client are currently authenticated."""

    ANONYMOUS = "anonymous"
    SIGNED = "signed"
    BEARER_ACTIVE = "bearer_active"
    BEARER_EXPIRED = "bearer_expired"


class HttpMethod(str, Enum):
    """HTTP methods accepted by resource permissions."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @classmethod
    def all(cls) -> list["HttpMethod"]:
        """Return every method, for granting full access to a resource."""
        return list(cls)

    @classmethod
    def read_only(cls) -> list["HttpMethod"]:
        """Return the methods that do not modify a resource."""
        return [cls.GET]

    @classmethod
    def write_only(cls) -> list["HttpMethod"]:
        """Return the methods that modify a resource."""
        return [cls.POST, cls.PUT, cls.PATCH, cls.DELETE]
