"""Pagination descriptor for list and search calls."""

from pydantic import Field

from paraclient.domain.model.common import DomainModel


class Pager(DomainModel):
    """Pagination, sorting and cursor state for a list or search call.

    The caller fills in the request side (page, limit, sorting, cursor). After
    the call the client writes the total number of hits to ``count`` and the
    cursor for the next page to ``last_key``, so the same pager can be passed
    again to fetch the following page.
    """

    page: int = Field(default=1, ge=0)
    limit: int = Field(default=30, ge=0)
    sortby: str | None = None
    desc: bool = True
    last_key: str | None = Field(default=None, alias="lastKey")
    count: int = 0
    name: str | None = None
    select: list[str] | None = None

    def to_params(self) -> dict[str, str]:
        """Query parameters understood by list and search endpoints."""
        params = {
            "page": str(self.page),
            "desc": "true" if self.desc else "false",
            "limit": str(self.limit),
        }
        if self.last_key is not None:
            params["lastKey"] = self.last_key
        if self.sortby is not None:
            params["sort"] = self.sortby
        if self.select:
            params["select"] = ",".join(self.select)
        return params
