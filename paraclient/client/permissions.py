"""Resource permissions.

A permission allows a subject (user id, or ``*`` for everyone) to call a set
of HTTP methods on a resource path. Resource paths are sent percent-encoded
as a single path segment.
"""

from typing import Iterable
from urllib.parse import quote

from paraclient.adapter.http import parse_bool
from paraclient.client.base import BaseClient
from paraclient.domain.value import GUEST_ACCESS, WILDCARD, HttpMethod

Permissions = dict[str, dict[str, list[str]]]


def _encode_resource(resource: str) -> str:
    return quote(resource, safe=WILDCARD)


def _method_name(method: HttpMethod | str) -> str:
    return method.value if isinstance(method, HttpMethod) else str(method)


class PermissionsMixin(BaseClient):
    """Grant, revoke and check resource permissions."""

    def resource_permissions(self, subjectid: str | None = None) -> Permissions:
        """Permissions of every subject, or of a single subject when given.

        Returns:
            Subject ids mapped to resource paths to allowed methods
        """
        path = f"_permissions/{subjectid}" if subjectid else "_permissions"
        return self._json_dict(self.invoke_get(path))

    def grant_resource_permission(
        self,
        subjectid: str | None,
        resource: str | None,
        methods: Iterable[HttpMethod | str] | None,
        allow_guest_access: bool = False,
    ) -> Permissions:
        """Allow a subject to call the given methods on a resource.

        Args:
            subjectid: User id, or "*" for all users
            resource: Resource path or object type
            methods: Allowed HTTP methods
            allow_guest_access: Also let unauthenticated requests through; only
                honored for the "*" subject

        Returns:
            Permissions of the subject after the change
        """
        if not subjectid or not resource or methods is None:
            return {}
        allowed = [_method_name(m) for m in methods]
        if allow_guest_access and subjectid == WILDCARD:
            allowed.append(GUEST_ACCESS)
        path = f"_permissions/{subjectid}/{_encode_resource(resource)}"
        return self._json_dict(self.invoke_put(path, allowed))

    def revoke_resource_permission(
        self, subjectid: str | None, resource: str | None
    ) -> Permissions:
        """Remove a subject's permission on a resource."""
        if not subjectid or not resource:
            return {}
        path = f"_permissions/{subjectid}/{_encode_resource(resource)}"
        return self._json_dict(self.invoke_delete(path))

    def revoke_all_resource_permissions(self, subjectid: str | None) -> Permissions:
        """Remove every permission of a subject."""
        if not subjectid:
            return {}
        return self._json_dict(self.invoke_delete(f"_permissions/{subjectid}"))

    def is_allowed_to(
        self,
        subjectid: str | None,
        resource: str | None,
        method: HttpMethod | str | None,
    ) -> bool:
        """Check whether a subject may call a method on a resource."""
        if not subjectid or not resource or not method:
            return False
        path = (
            f"_permissions/{subjectid}/{_encode_resource(resource)}"
            f"/{_method_name(method)}"
        )
        return parse_bool(self.get_entity(self.invoke_get(path)))

