"""Relations between objects.

Links are many-to-many relations stored by the server as separate linker
objects. Children are objects whose ``parentid`` points at a parent, a
one-to-many relation. Both are addressed under ``{objectURI}/links``, the
``childrenonly`` flag selecting the children.
"""

from paraclient.adapter.http import parse_bool
from paraclient.client.base import BaseClient
from paraclient.domain.model import Pager, ParaObject


def _links_uri(obj: ParaObject, type2: str | None = None, id2: str | None = None) -> str:
    uri = f"{obj.get_object_uri()}/links"
    if type2 is not None:
        uri += f"/{type2}"
    if id2 is not None:
        uri += f"/{id2}"
    return uri


class LinksMixin(BaseClient):
    """Many-to-many links and one-to-many children."""

    def count_links(self, obj: ParaObject | None, type2: str | None) -> int:
        """Count the objects of type ``type2`` linked to ``obj``."""
        if obj is None or obj.id is None or type2 is None:
            return 0
        pager = Pager()
        response = self.invoke_get(_links_uri(obj, type2), {"count": "true"})
        self.get_items(self.get_entity(response), pager=pager)
        return pager.count

    def get_linked_objects(
        self, obj: ParaObject | None, type2: str | None, pager: Pager | None = None
    ) -> list[ParaObject]:
        """Return the objects of type ``type2`` linked to ``obj``."""
        if obj is None or obj.id is None or type2 is None:
            return []
        response = self.invoke_get(_links_uri(obj, type2), self.pager_to_params(pager))
        return self.get_items(self.get_entity(response), pager=pager)

    def find_linked_objects(
        self,
        obj: ParaObject | None,
        type2: str | None,
        field: str | None,
        query: str | None = None,
        pager: Pager | None = None,
    ) -> list[ParaObject]:
        """Search the objects of type ``type2`` linked to ``obj``.

        Args:
            obj: Object whose links are searched
            type2: Type of the linked objects
            field: Field to target (within the nested field "nstd")
            query: Query string, everything when blank
            pager: Paging state
        """
        if obj is None or obj.id is None or type2 is None:
            return []
        params = {"field": field, "q": query or "*", **self.pager_to_params(pager)}
        response = self.invoke_get(_links_uri(obj, type2), params)
        return self.get_items(self.get_entity(response), pager=pager)

    def is_linked(
        self, obj: ParaObject | None, type2: str | None, id2: str | None
    ) -> bool:
        """Check whether ``obj`` is linked to the object ``type2``/``id2``."""
        if obj is None or obj.id is None or type2 is None or id2 is None:
            return False
        result = self.get_entity(self.invoke_get(_links_uri(obj, type2, id2)))
        return parse_bool(result)

    def is_linked_to(self, obj: ParaObject | None, to_obj: ParaObject | None) -> bool:
        """Check whether two objects are linked."""
        if obj is None or obj.id is None or to_obj is None or to_obj.id is None:
            return False
        return self.is_linked(obj, to_obj.type, to_obj.id)

    def link(self, obj: ParaObject | None, id2: str | None) -> str | None:
        """Link the object with id ``id2`` to ``obj``.

        Only the link is created, both objects are left untouched. The type
        of the second object is resolved by the server.

        Returns:
            Id of the linker object, None on failure
        """
        if obj is None or obj.id is None or id2 is None:
            return None
        return self.get_entity(self.invoke_post(_links_uri(obj, id2)))

    def unlink(self, obj: ParaObject | None, type2: str | None, id2: str | None) -> None:
        """Remove the link between ``obj`` and ``type2``/``id2``."""
        if obj is None or obj.id is None or type2 is None or id2 is None:
            return
        self.invoke_delete(_links_uri(obj, type2, id2))

    def unlink_all(self, obj: ParaObject | None) -> None:
        """Remove every link of ``obj``. Linked objects are left untouched."""
        if obj is None or obj.id is None:
            return
        self.invoke_delete(_links_uri(obj))

    def count_children(self, obj: ParaObject | None, type2: str | None) -> int:
        """Count the children of type ``type2`` of ``obj``."""
        if obj is None or obj.id is None or type2 is None:
            return 0
        pager = Pager()
        params = {"count": "true", "childrenonly": "true"}
        response = self.invoke_get(_links_uri(obj, type2), params)
        self.get_items(self.get_entity(response), pager=pager)
        return pager.count

    def get_children(
        self,
        obj: ParaObject | None,
        type2: str | None,
        field: str | None = None,
        term: str | None = None,
        pager: Pager | None = None,
    ) -> list[ParaObject]:
        """Return the children of type ``type2`` of ``obj``.

        Args:
            obj: Parent object
            type2: Type of the children
            field: Field to filter children by
            term: Value ``field`` must have
            pager: Paging state
        """
        if obj is None or obj.id is None or type2 is None:
            return []
        params = {"childrenonly": "true", **self.pager_to_params(pager)}
        if field is not None:
            params["field"] = field
            params["term"] = term
        response = self.invoke_get(_links_uri(obj, type2), params)
        return self.get_items(self.get_entity(response), pager=pager)

    def find_children(
        self,
        obj: ParaObject | None,
        type2: str | None,
        query: str | None = None,
        pager: Pager | None = None,
    ) -> list[ParaObject]:
        """Search the children of type ``type2`` of ``obj``."""
        if obj is None or obj.id is None or type2 is None:
            return []
        params = {
            "childrenonly": "true",
            "q": query or "*",
            **self.pager_to_params(pager),
        }
        response = self.invoke_get(_links_uri(obj, type2), params)
        return self.get_items(self.get_entity(response), pager=pager)

    def delete_children(self, obj: ParaObject | None, type2: str | None) -> None:
        """Delete every child of type ``type2`` of ``obj`` permanently."""
        if obj is None or obj.id is None or type2 is None:
            return
        self.invoke_delete(_links_uri(obj, type2), {"childrenonly": "true"})
