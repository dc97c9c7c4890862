"""In-memory fakes for tests."""

from tests.fake.para_server import FakeParaServer

__all__ = ["FakeParaServer"]
