"""Test configuration and fixtures."""

import pytest

from tests.fake import FakeParaServer
from tests.harness import build_client


@pytest.fixture
def server():
    """Create an empty in-memory API server."""
    return FakeParaServer()


@pytest.fixture
def client(server):
    """Create a client signing its requests with the app's keys."""
    with build_client(server) as client:
        yield client


@pytest.fixture
def anonymous_client(server):
    """Create a client that knows only the app's access key."""
    with build_client(server, signed=False) as client:
        yield client
