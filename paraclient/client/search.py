"""Search calls.

All variants go through ``find()``, which sends
``GET [{type}/]search/{queryType}`` and returns the raw result envelope.
"""

from typing import Any, Iterable, Mapping

from paraclient.client.base import BaseClient
from paraclient.domain.model import Pager, ParaObject

# Joins field and value in term queries, e.g. "name:Joe"
SEPARATOR = ":"


class SearchMixin(BaseClient):
    """Query-string, term, tag, geo and similarity searches."""

    def find(self, query_type: str | None, params: Mapping[str, Any] | None) -> Any:
        """Run a search of the given kind.

        Args:
            query_type: Query kind ("id", "tagged", "terms"...); blank for the
                default query-string search
            params: Query parameters; ``type`` restricts the object type

        Returns:
            The result envelope (text), or an empty envelope for no params
        """
        if not params:
            return {"items": [], "totalHits": 0}
        q_type = f"/{query_type}" if query_type else "/default"
        object_type = params.get("type")
        if not object_type:
            return self.get_entity(self.invoke_get(f"search{q_type}", params))
        return self.get_entity(self.invoke_get(f"{object_type}/search{q_type}", params))

    def _search(
        self, query_type: str, params: dict[str, Any], pager: Pager | None
    ) -> list[ParaObject]:
        params.update(self.pager_to_params(pager))
        return self.get_items(self.find(query_type, params), pager=pager)

    def find_by_id(self, id: str | None) -> ParaObject | None:
        """Find an object by id through the search index."""
        if not id:
            return None
        items = self.get_items(self.find("id", {"id": id}))
        return items[0] if items else None

    def find_by_ids(self, ids: Iterable[str] | None) -> list[ParaObject]:
        """Find several objects by id through the search index."""
        ids = list(ids or [])
        if not ids:
            return []
        return self.get_items(self.find("ids", {"ids": ids}))

    def find_nearby(
        self,
        type: str | None,
        query: str | None,
        radius: int,
        lat: float,
        lng: float,
        pager: Pager | None = None,
    ) -> list[ParaObject]:
        """Find objects within ``radius`` km of a point.

        Args:
            type: Object type (objects must carry a "latlng" property)
            query: Query string
            radius: Search radius in kilometers
            lat: Latitude of the center
            lng: Longitude of the center
            pager: Paging state
        """
        params = {
            "latlng": f"{lat},{lng}",
            "radius": str(radius),
            "q": query,
            "type": type,
        }
        return self._search("nearby", params, pager)

    def find_prefix(
        self,
        type: str | None,
        field: str | None,
        prefix: str | None,
        pager: Pager | None = None,
    ) -> list[ParaObject]:
        """Find objects whose ``field`` starts with ``prefix``."""
        params = {"field": field, "prefix": prefix, "type": type}
        return self._search("prefix", params, pager)

    def find_query(
        self, type: str | None, query: str | None, pager: Pager | None = None
    ) -> list[ParaObject]:
        """Simple query string search. This is the basic search method."""
        params = {"q": query, "type": type}
        return self._search("", params, pager)

    def find_nested_query(
        self,
        type: str | None,
        field: str | None,
        query: str | None,
        pager: Pager | None = None,
    ) -> list[ParaObject]:
        """Search within a nested field ("nstd") of objects of a type."""
        params = {"q": query, "field": field, "type": type}
        return self._search("nested", params, pager)

    def find_similar(
        self,
        type: str | None,
        filter_key: str | None,
        fields: Iterable[str] | None,
        liketext: str | None,
        pager: Pager | None = None,
    ) -> list[ParaObject]:
        """Find objects with property values similar to a text.

        Args:
            type: Object type
            filter_key: Id of an object to exclude from the results
            fields: Properties to compare
            liketext: Text to compare against
            pager: Paging state
        """
        params = {
            "fields": list(fields) if fields is not None else None,
            "filterid": filter_key,
            "like": liketext,
            "type": type,
        }
        return self._search("similar", params, pager)

    def find_tagged(
        self,
        type: str | None,
        tags: Iterable[str] | None,
        pager: Pager | None = None,
    ) -> list[ParaObject]:
        """Find objects carrying all of the given tags."""
        params = {"tags": list(tags) if tags is not None else None, "type": type}
        return self._search("tagged", params, pager)

    def find_tags(
        self, keyword: str | None, pager: Pager | None = None
    ) -> list[ParaObject]:
        """Find tag objects starting with a keyword."""
        keyword = "*" if keyword is None else f"{keyword}*"
        return self.find_wildcard("tag", "tag", keyword, pager)

    def find_term_in_list(
        self,
        type: str | None,
        field: str | None,
        terms: Iterable[str] | None,
        pager: Pager | None = None,
    ) -> list[ParaObject]:
        """Find objects whose ``field`` equals one of the given terms."""
        params = {
            "field": field,
            "terms": list(terms) if terms is not None else None,
            "type": type,
        }
        return self._search("in", params, pager)

    def find_terms(
        self,
        type: str | None,
        terms: Mapping[str, Any] | None,
        match_all: bool,
        pager: Pager | None = None,
    ) -> list[ParaObject]:
        """Find objects whose properties match the given values.

        Args:
            type: Object type
            terms: Property names mapped to values
            match_all: AND all terms together if True, OR them otherwise
            pager: Paging state
        """
        if terms is None:
            return []
        params: dict[str, Any] = {"matchall": match_all, "type": type}
        if terms:
            params["terms"] = self._terms_to_list(terms)
        return self._search("terms", params, pager)

    def find_wildcard(
        self,
        type: str | None,
        field: str | None,
        wildcard: str | None,
        pager: Pager | None = None,
    ) -> list[ParaObject]:
        """Find objects whose ``field`` matches a wildcard query like "cat*"."""
        params = {"field": field, "q": wildcard, "type": type}
        return self._search("wildcard", params, pager)

    def get_count(
        self, type: str | None, terms: Mapping[str, Any] | None = None
    ) -> int:
        """Count indexed objects of a type, optionally matching terms.

        Returns:
            Number of matching objects
        """
        pager = Pager()
        if terms is None:
            self.get_items(self.find("count", {"type": type}), pager=pager)
            return pager.count
        params: dict[str, Any] = {"type": type, "count": "true"}
        if terms:
            params["terms"] = self._terms_to_list(terms)
        self.get_items(self.find("terms", params), pager=pager)
        return pager.count

    @staticmethod
    def _terms_to_list(terms: Mapping[str, Any]) -> list[str]:
        return [
            f"{key}{SEPARATOR}{value}"
            for key, value in terms.items()
            if value is not None
        ]
