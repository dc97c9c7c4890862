"""Object persistence: single and batch CRUD, listing by type."""

from typing import Iterable

from paraclient.client.base import BaseClient
from paraclient.domain.model import Pager, ParaObject


class PersistenceMixin(BaseClient):
    """CRUD calls against ``{type}/{id}`` and ``_batch``."""

    def create(self, obj: ParaObject | None) -> ParaObject | None:
        """Persist an object.

        With both a type and an id the request is a PUT, overwriting any
        existing object. Otherwise it is a POST and the server assigns the id.

        Args:
            obj: Object to persist

        Returns:
            The stored object with its assigned id, None if not created
        """
        if obj is None:
            return None
        if not obj.id or not obj.type:
            return self._entity_object(self.invoke_post(obj.type, obj.to_dict()))
        return self._entity_object(
            self.invoke_put(f"{obj.type}/{obj.id}", obj.to_dict())
        )

    def read(self, type: str | None, id: str | None) -> ParaObject | None:
        """Retrieve an object by type and id, None if not found."""
        if not type or not id:
            return None
        return self._entity_object(self.invoke_get(f"{type}/{id}"))

    def read_by_id(self, id: str | None) -> ParaObject | None:
        """Retrieve an object by id alone, None if not found."""
        if not id:
            return None
        return self._entity_object(self.invoke_get(f"_id/{id}"))

    def update(self, obj: ParaObject | None) -> ParaObject | None:
        """Update an object partially.

        Only the fields set on ``obj`` are sent, other stored properties are
        left as they are.

        Returns:
            The updated object, None if it does not exist
        """
        if obj is None:
            return None
        return self._entity_object(
            self.invoke_patch(obj.get_object_uri(), obj.to_patch_dict())
        )

    def delete(self, obj: ParaObject | None) -> None:
        """Delete an object permanently."""
        if obj is None:
            return
        self.invoke_delete(obj.get_object_uri())

    def create_all(self, objects: list[ParaObject] | None) -> list[ParaObject]:
        """Persist several objects in one request."""
        if not objects or objects[0] is None:
            return []
        body = [o.to_dict() for o in objects if o is not None]
        return self.get_items_from_list(self.get_entity(self.invoke_post("_batch", body)))

    def read_all(self, keys: Iterable[str] | None) -> list[ParaObject]:
        """Retrieve several objects by id in one request."""
        ids = list(keys or [])
        if not ids:
            return []
        return self.get_items_from_list(
            self.get_entity(self.invoke_get("_batch", {"ids": ids}))
        )

    def update_all(self, objects: list[ParaObject] | None) -> list[ParaObject]:
        """Partially update several objects in one request."""
        if not objects:
            return []
        body = [o.to_patch_dict() for o in objects if o is not None]
        return self.get_items_from_list(
            self.get_entity(self.invoke_patch("_batch", body))
        )

    def delete_all(self, keys: Iterable[str] | None) -> None:
        """Delete several objects by id in one request."""
        ids = list(keys or [])
        if not ids:
            return
        self.invoke_delete("_batch", {"ids": ids})

    def list(self, type: str | None, pager: Pager | None = None) -> list[ParaObject]:
        """List one page of objects of a type.

        Args:
            type: Object type
            pager: Paging state, updated with the total count and cursor

        Returns:
            Objects on the requested page
        """
        if not type:
            return []
        return self.get_items(
            self.get_entity(self.invoke_get(type, self.pager_to_params(pager))),
            pager=pager,
        )
