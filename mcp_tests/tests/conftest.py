import httpx
import pytest

from core.models import FetchConfiguration


class DummyMCP:
    """Minimal FastMCP stand-in to capture tool registration."""

    def __init__(self) -> None:
        self.tools = {}

    def tool(self, *, name: str):
        def _decorator(fn):
            self.tools[name] = fn
            return fn
        return _decorator


@pytest.fixture
def dummy_mcp():
    return DummyMCP()


@pytest.fixture
def make_config():
    """Build a FetchConfiguration for owner/myrepo at /path/to/file@sha1."""
    def _make(**overrides):
        values = dict(
            base_api_url="http://github.test",
            owner="owner",
            repository="myrepo",
            filepath="/path/to/file",
            branch_or_tag="sha1",
            timeout_ms=1_000,
        )
        values.update(overrides)
        return FetchConfiguration(**values)
    return _make


class ClientRecorder(list):
    """Clients opened during a test; `kwargs` holds each one's constructor arguments."""

    def __init__(self) -> None:
        super().__init__()
        self.kwargs = []


@pytest.fixture
def mock_transport(monkeypatch):
    """
    Patch httpx.AsyncClient so the exchanger's real client factory runs over
    httpx.MockTransport.

    Usage: created = mock_transport(handler). `created` lists the clients
    opened (so tests can check they were all closed) and `created.kwargs`
    the arguments the exchanger built them with.
    """
    def _patch(handler):
        transport = httpx.MockTransport(handler)
        created = ClientRecorder()
        orig = httpx.AsyncClient

        def patched_async_client(*args, **kwargs):
            created.kwargs.append(dict(kwargs))
            # A proxy mount would take precedence over the mock transport
            kwargs.pop("proxy", None)
            kwargs["transport"] = transport
            client = orig(*args, **kwargs)
            created.append(client)
            return client

        monkeypatch.setattr(httpx, "AsyncClient", patched_async_client)
        return created

    return _patch
