"""Validation constraints enforced by the server on object fields."""

from typing import Any

from paraclient.client.base import BaseClient
from paraclient.domain.model import Constraint


class ConstraintsMixin(BaseClient):
    """Read and edit the validation constraints of the app's types.

    Results map type names to fields to constraint names to payloads:

        {"cat": {"name": {"required": {"message": "messages.required"}}}}
    """

    def validation_constraints(self, type: str | None = None) -> dict[str, Any]:
        """Constraints of every type, or of a single type when given."""
        path = f"_constraints/{type}" if type else "_constraints"
        return self._json_dict(self.invoke_get(path))

    def add_validation_constraint(
        self, type: str | None, field: str | None, constraint: Constraint | None
    ) -> dict[str, Any]:
        """Add a constraint to a field, replacing one with the same name.

        Returns:
            Constraints of the type after the change
        """
        if not type or not field or constraint is None:
            return {}
        path = f"_constraints/{type}/{field}/{constraint.name}"
        return self._json_dict(self.invoke_put(path, constraint.payload))

    def remove_validation_constraint(
        self, type: str | None, field: str | None, constraint_name: str | None
    ) -> dict[str, Any]:
        """Remove a named constraint from a field.

        Returns:
            Constraints of the type after the change
        """
        if not type or not field or not constraint_name:
            return {}
        path = f"_constraints/{type}/{field}/{constraint_name}"
        return self._json_dict(self.invoke_delete(path))
