"""Utility endpoints computed by the server."""

from paraclient.client.base import BaseClient


class UtilsMixin(BaseClient):
    """Passthroughs to ``utils/*``. No logic runs client-side."""

    def new_id(self) -> str:
        """Generate a new unique id, empty on failure."""
        return self.get_entity(self.invoke_get("utils/newid")) or ""

    def get_timestamp(self) -> int:
        """Current server time in epoch milliseconds, 0 on failure."""
        result = self.get_entity(self.invoke_get("utils/timestamp"))
        try:
            return int(result) if result else 0
        except ValueError:
            return 0

    def format_date(self, format: str | None, locale: str | None = None) -> str | None:
        """Format the current date.

        Args:
            format: Date pattern, e.g. "dd MM yyyy"
            locale: Locale tag, e.g. "en_US"
        """
        params = {"format": format, "locale": locale or None}
        return self.get_entity(self.invoke_get("utils/formatdate", params))

    def no_spaces(self, string: str | None, replace_with: str | None = None) -> str | None:
        """Replace the spaces in a string (with dashes by default on the server)."""
        params = {"string": string, "replacement": replace_with}
        return self.get_entity(self.invoke_get("utils/nospaces", params))

    def strip_and_trim(self, string: str | None) -> str | None:
        """Strip symbols, punctuation, whitespace and control characters."""
        return self.get_entity(self.invoke_get("utils/nosymbols", {"string": string}))

    def markdown_to_html(self, markdown: str | None) -> str | None:
        """Convert Markdown to HTML."""
        return self.get_entity(self.invoke_get("utils/md2html", {"md": markdown}))

    def approximately(self, delta: int) -> str | None:
        """Human-readable elapsed time for a delta in milliseconds, e.g. "5m"."""
        return self.get_entity(self.invoke_get("utils/timeago", {"delta": str(delta)}))
