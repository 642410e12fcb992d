import os


os.environ.update(
    {
        "ALLOWED_ORIGIN": "https://example.com",
        "EMAIL_FROM": "Contact Form <contact@example.com>",
        "EMAIL_TO": "team@example.com, support@example.com",
        "EMAIL_API_ENDPOINT": "https://email.example.net/emails",
        "EMAIL_API_KEY": "re_test_key",
        "DAILY_LIMIT": "3",
    }
)
os.environ.pop("REDIS_URL", None)

from typing import Any, Iterator  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from pytest_mock import MockerFixture  # noqa: E402

from contact_relay.app import app  # noqa: E402
from contact_relay.counter_store import get_counter_store  # noqa: E402


class FakeCounterStore:
    def __init__(self) -> None:
        self.values: dict[str, str] = {}
        self.ttls: dict[str, int] = {}

    async def get(self, key: str) -> str | None:
        return self.values.get(key)

    async def put(self, key: str, value: str, ttl: int) -> None:
        self.values[key] = value
        self.ttls[key] = ttl


class EmailApi:
    """Records outbound email API requests and answers with a configurable response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: Any = {"id": "49a3999c-0ce1-4ea6-ab68-afcd6dc2e794"}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)


@pytest.fixture
def store() -> Iterator[FakeCounterStore]:
    fake = FakeCounterStore()
    app.dependency_overrides[get_counter_store] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_counter_store, None)


@pytest.fixture
def email_api(mocker: MockerFixture) -> EmailApi:
    api = EmailApi()
    transport = httpx.MockTransport(api.handler)

    def client_factory(**kwargs: Any) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=transport, **kwargs)

    mocker.patch("contact_relay.utils.email.AsyncClient", client_factory)
    return api


@pytest.fixture
def client(store: FakeCounterStore, email_api: EmailApi) -> TestClient:
    test_client = TestClient(app)
    test_client.headers.update({"Origin": "https://example.com", "CF-Connecting-IP": "203.0.113.7"})
    return test_client
