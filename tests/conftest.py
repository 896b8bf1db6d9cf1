import httpx
import pytest

from morning.config import Settings


@pytest.fixture
def settings():
    return Settings(
        discord_token="Bot test-token",
        channel_id="42",
        members_raw="Alice,123,Bob,456",
        recipients=(("Alice", 123), ("Bob", 456)),
    )


@pytest.fixture
def make_client():
    """Build an httpx.AsyncClient whose requests go to `handler` and are recorded."""
    clients = []

    def _make(handler):
        requests = []

        def _record(request):
            requests.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(_record))
        client.requests = requests
        clients.append(client)
        return client

    return _make
