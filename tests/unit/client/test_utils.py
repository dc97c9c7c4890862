"""Unit tests for server-side utility calls."""

from datetime import datetime, timezone

import httpx
import pytest

from paraclient import ParaClient
from tests.harness import ENDPOINT


class TestUtils:
    """Tests for the utils passthroughs."""

    def test_new_id(self, client, server):
        """Should return a fresh id each time."""
        first, second = client.new_id(), client.new_id()

        assert first and second and first != second
        assert server.requests[-1].url.path == "/v1/utils/newid"

    def test_timestamp(self, client):
        """Should return the server time in milliseconds."""
        assert client.get_timestamp() > 1_600_000_000_000

    def test_format_date(self, client, server):
        """Should pass format and locale."""
        year = client.format_date("yyyy", "en_US")

        assert year == str(datetime.now(timezone.utc).year)
        assert server.requests[-1].url.params["locale"] == "en_US"

    def test_format_date_with_spaces(self, client, server):
        """Should send a pattern containing spaces as a signed request."""
        today = datetime.now(timezone.utc)

        formatted = client.format_date("dd MM yyyy")

        assert formatted == today.strftime("%d %m %Y")
        assert server.verify_signature(server.requests[-1])

    def test_no_spaces(self, client):
        """Should replace spaces."""
        assert client.no_spaces("a b c", "-") == "a-b-c"

    def test_strip_and_trim(self, client):
        """Should remove symbols and extra whitespace."""
        assert client.strip_and_trim(" hello,   world! ") == "hello world"

    def test_markdown_to_html(self, client, server):
        """Should convert Markdown."""
        assert client.markdown_to_html("# Hello") == "<h1>Hello</h1>"
        assert server.requests[-1].url.params["md"] == "# Hello"

    def test_approximately(self, client):
        """Should describe a time delta."""
        assert client.approximately(5 * 60_000) == "5m"


class TestUtilsFailures:
    """Tests for utility calls when the server cannot be reached."""

    @pytest.fixture
    def offline_client(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        return ParaClient(
            "app:myapp",
            "s3cr3t-k3y",
            ENDPOINT,
            http_client=httpx.Client(transport=httpx.MockTransport(refuse)),
        )

    def test_defaults(self, offline_client):
        """Should fall back to empty values."""
        assert offline_client.new_id() == ""
        assert offline_client.get_timestamp() == 0
        assert offline_client.markdown_to_html("# x") is None
