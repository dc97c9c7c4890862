"""Unit tests for search calls."""

import pytest

from paraclient import Pager, ParaObject


@pytest.fixture
def cats(client):
    """Store a few tagged cats."""
    return client.create_all(
        [
            ParaObject("c1", "cat", name="Tom", color="grey", tags=["one", "two", "three"]),
            ParaObject("c2", "cat", name="Felix", color="black", tags=["two", "five"]),
            ParaObject("c3", "cat", name="Garfield", color="orange", tags=["one"]),
        ]
    )


class TestFind:
    """Tests for the generic find call."""

    def test_empty_params_are_not_sent(self, client, server):
        """Should return an empty envelope without a request."""
        assert client.find("terms", {}) == {"items": [], "totalHits": 0}
        assert client.find("terms", None) == {"items": [], "totalHits": 0}
        assert server.requests == []

    def test_type_scoped_path(self, client, server):
        """Should search under the type when one is given."""
        client.find_query("cat", "Tom")

        assert server.requests[-1].url.path == "/v1/cat/search/default"

    def test_unscoped_path(self, client, server):
        """Should search across types without one."""
        client.find_query(None, "Tom")

        assert server.requests[-1].url.path == "/v1/search/default"

    def test_sends_pager_params(self, client, server):
        """Should merge paging parameters into the query."""
        client.find_query("cat", "*", Pager(page=2, limit=1, sortby="name"))

        params = server.requests[-1].url.params
        assert params["page"] == "2"
        assert params["limit"] == "1"
        assert params["sort"] == "name"
        assert params["q"] == "*"


class TestSearchVariants:
    """Tests for the search variants against stored objects."""

    def test_find_by_id(self, client, cats):
        """Should find a single object by id."""
        assert client.find_by_id("c2").name == "Felix"
        assert client.find_by_id("nope") is None

    def test_find_by_ids(self, client, cats):
        """Should find several objects by id."""
        found = client.find_by_ids(["c1", "c3"])

        assert {c.id for c in found} == {"c1", "c3"}

    def test_find_by_id_without_ids(self, client, server):
        """Should not search when there is nothing to look up."""
        assert client.find_by_id(None) is None
        assert client.find_by_id("") is None
        assert client.find_by_ids(None) == []
        assert client.find_by_ids([]) == []
        assert server.requests == []

    def test_find_query_with_spaces(self, client, server):
        """Should sign multi-word queries so the server accepts them."""
        client.create(ParaObject("c4", "cat", name="Big Tom"))

        found = client.find_query("cat", "big tom")

        assert server.requests[-1].url.params["q"] == "big tom"
        assert server.verify_signature(server.requests[-1])
        assert [c.id for c in found] == ["c4"]

    def test_find_query_pages_results(self, client, cats):
        """Should report the total and return at most one page."""
        pager = Pager(limit=2)

        found = client.find_query("cat", "*", pager)

        assert len(found) == 2
        assert pager.count == 3
        assert pager.last_key == found[-1].id

    def test_find_tagged_matches_all_tags(self, client, cats):
        """Should require every given tag."""
        assert [c.id for c in client.find_tagged("cat", ["one", "two"])] == ["c1"]
        assert client.find_tagged("cat", ["two", "five", "one"]) == []
        assert {c.id for c in client.find_tagged("cat", ["two"])} == {"c1", "c2"}

    def test_find_terms_all_or_any(self, client, cats):
        """Should AND or OR the terms."""
        terms = {"color": "grey", "name": "Felix"}

        assert client.find_terms("cat", terms, True) == []
        assert {c.id for c in client.find_terms("cat", terms, False)} == {"c1", "c2"}

    def test_find_terms_without_terms(self, client, server):
        """Should return nothing for missing terms."""
        assert client.find_terms("cat", None, True) == []
        assert server.requests == []

    def test_find_wildcard(self, client, cats):
        """Should match a wildcard on a field."""
        assert [c.id for c in client.find_wildcard("cat", "name", "Gar*")] == ["c3"]

    def test_find_prefix(self, client, cats):
        """Should match a prefix on a field."""
        assert [c.id for c in client.find_prefix("cat", "name", "Fe")] == ["c2"]

    def test_find_term_in_list(self, client, cats):
        """Should match any of the listed values."""
        found = client.find_term_in_list("cat", "color", ["grey", "orange"])

        assert {c.id for c in found} == {"c1", "c3"}

    def test_find_similar_excludes_filtered_object(self, client, cats):
        """Should not return the object used as the filter."""
        found = client.find_similar("cat", "c1", ["name"], "e")

        assert {c.id for c in found} == {"c2", "c3"}

    def test_find_nearby(self, client, server):
        """Should send the location and radius."""
        client.create(ParaObject("p1", "place", latlng="42.0,23.0"))

        found = client.find_nearby("place", "*", 10, 42.0, 23.0)

        params = server.requests[-1].url.params
        assert params["latlng"] == "42.0,23.0"
        assert params["radius"] == "10"
        assert [p.id for p in found] == ["p1"]

    def test_find_nested_query(self, client, server, cats):
        """Should target the nested field."""
        client.find_nested_query("cat", "nstd.name", "Tom")

        params = server.requests[-1].url.params
        assert server.requests[-1].url.path == "/v1/cat/search/nested"
        assert params["field"] == "nstd.name"

    def test_find_tags(self, client, server):
        """Should search tag objects by keyword prefix."""
        client.create_all(
            [ParaObject(f"tag:{t}", "tag", tag=t) for t in ("java", "javascript", "python")]
        )

        found = client.find_tags("java")

        assert {t["tag"] for t in found} == {"java", "javascript"}
        assert server.requests[-1].url.params["q"] == "java*"


class TestGetCount:
    """Tests for get_count."""

    def test_counts_type(self, client, cats):
        """Should count all objects of a type."""
        assert client.get_count("cat") == 3
        assert client.get_count("dog") == 0

    def test_counts_matching_terms(self, client, server, cats):
        """Should count objects matching the terms."""
        assert client.get_count("cat", {"color": "black"}) == 1
        assert server.requests[-1].url.params["count"] == "true"
        assert server.requests[-1].url.params.get_list("terms") == ["color:black"]
