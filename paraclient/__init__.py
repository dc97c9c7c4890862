"""Python client for the Para API server."""

from paraclient.client import ParaClient
from paraclient.config import ClientSettings
from paraclient.domain.model import Constraint, Pager, ParaObject
from paraclient.domain.value import AuthState, HttpMethod

__all__ = [
    "AuthState",
    "ClientSettings",
    "Constraint",
    "HttpMethod",
    "Pager",
    "ParaClient",
    "ParaObject",
]
