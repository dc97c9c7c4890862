"""Unit tests for Pager."""

import pytest
from pydantic import ValidationError

from paraclient.domain.model import Pager


class TestPager:
    """Tests for pager defaults and query parameters."""

    def test_defaults(self):
        """Should default to the first page of 30, descending."""
        pager = Pager()

        assert pager.page == 1
        assert pager.limit == 30
        assert pager.desc is True
        assert pager.sortby is None
        assert pager.last_key is None
        assert pager.count == 0

    def test_default_params(self):
        """Should send page, order and limit only."""
        assert Pager().to_params() == {"page": "1", "desc": "true", "limit": "30"}

    def test_all_params(self):
        """Should send sorting, cursor and field selection when set."""
        pager = Pager(
            page=2,
            limit=5,
            sortby="name",
            desc=False,
            last_key="abc",
            select=["name", "id"],
        )

        assert pager.to_params() == {
            "page": "2",
            "desc": "false",
            "limit": "5",
            "lastKey": "abc",
            "sort": "name",
            "select": "name,id",
        }

    def test_accepts_wire_name_for_cursor(self):
        """Should populate the cursor from its JSON name."""
        assert Pager(lastKey="xyz").last_key == "xyz"

    def test_rejects_negative_page(self):
        """Should not accept a negative page number."""
        with pytest.raises(ValidationError):
            Pager(page=-1)
