import pytest
from pytest_mock import MockerFixture
from starlette.requests import Request

from contact_relay.exceptions.contact import RateLimitExceededError
from contact_relay.utils.rate_limit import WINDOW_TTL, Quota, consume_quota, counter_key, get_client_ip
from contact_relay.utils.utc import utcfromtimestamp
from tests.conftest import FakeCounterStore


def make_request(headers: dict[str, str]) -> Request:
    raw_headers = [(key.lower().encode(), value.encode()) for key, value in headers.items()]
    return Request({"type": "http", "method": "POST", "path": "/", "headers": raw_headers})


@pytest.mark.parametrize(
    "headers,expected",
    [
        ({"CF-Connecting-IP": "203.0.113.7", "X-Real-IP": "198.51.100.1"}, "203.0.113.7"),
        ({"X-Real-IP": "198.51.100.1"}, "198.51.100.1"),
        ({"CF-Connecting-IP": "", "X-Real-IP": "198.51.100.1"}, "198.51.100.1"),
        ({}, "unknown"),
    ],
)
async def test__get_client_ip(headers: dict[str, str], expected: str) -> None:
    assert get_client_ip(make_request(headers)) == expected


async def test__counter_key() -> None:
    assert counter_key("203.0.113.7") == "daily-requests:203.0.113.7"


async def test__consume_quota__counts_up(mocker: MockerFixture) -> None:
    mocker.patch("contact_relay.utils.rate_limit.utcnow", lambda: utcfromtimestamp(1000.5))
    store = FakeCounterStore()

    quotas = [await consume_quota(store, "203.0.113.7", 3) for _ in range(3)]

    assert [quota.count for quota in quotas] == [1, 2, 3]
    assert [quota.remaining for quota in quotas] == [2, 1, 0]
    assert all(quota.reset == 1000 + WINDOW_TTL for quota in quotas)
    assert store.values == {"daily-requests:203.0.113.7": "3"}
    assert store.ttls == {"daily-requests:203.0.113.7": 86400}


async def test__consume_quota__exhausted() -> None:
    store = FakeCounterStore()
    store.values["daily-requests:203.0.113.7"] = "3"

    with pytest.raises(RateLimitExceededError):
        await consume_quota(store, "203.0.113.7", 3)

    assert store.values["daily-requests:203.0.113.7"] == "3"
    assert store.ttls == {}


async def test__consume_quota__separate_clients() -> None:
    store = FakeCounterStore()

    await consume_quota(store, "203.0.113.7", 1)
    quota = await consume_quota(store, "198.51.100.1", 1)

    assert quota.count == 1
    with pytest.raises(RateLimitExceededError):
        await consume_quota(store, "203.0.113.7", 1)


async def test__consume_quota__zero_limit() -> None:
    with pytest.raises(RateLimitExceededError):
        await consume_quota(FakeCounterStore(), "203.0.113.7", 0)


async def test__quota_headers() -> None:
    quota = Quota(limit=5, count=2, reset=1337)

    assert quota.headers == {"X-RateLimit-Limit": "5", "X-RateLimit-Remaining": "3", "X-RateLimit-Reset": "1337"}
