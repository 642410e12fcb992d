"""
Daily submission quota per client IP.

The counter is read and then written back without a lock, so concurrent requests from the same
client may both pass with the same count. The quota is consumed before the submission is
validated or forwarded and is not given back if a later stage fails.
"""

from dataclasses import dataclass

from fastapi import Request

from .utc import utcnow
from ..counter_store import CounterStore
from ..exceptions.contact import RateLimitExceededError
from ..logger import get_logger


logger = get_logger(__name__)

WINDOW_TTL = 86400
UNKNOWN_CLIENT = "unknown"


@dataclass
class Quota:
    limit: int
    count: int
    reset: int

    @property
    def remaining(self) -> int:
        return max(self.limit - self.count, 0)

    @property
    def headers(self) -> dict[str, str]:
        return {
            "X-RateLimit-Limit": str(self.limit),
            "X-RateLimit-Remaining": str(self.remaining),
            "X-RateLimit-Reset": str(self.reset),
        }


def get_client_ip(request: Request) -> str:
    return request.headers.get("CF-Connecting-IP") or request.headers.get("X-Real-IP") or UNKNOWN_CLIENT


def counter_key(client_ip: str) -> str:
    return f"daily-requests:{client_ip}"


async def consume_quota(store: CounterStore, client_ip: str, limit: int) -> Quota:
    key = counter_key(client_ip)
    count = int(await store.get(key) or 0)
    if count >= limit:
        logger.info(f"Daily limit of {limit} reached for {client_ip}")
        raise RateLimitExceededError

    await store.put(key, str(count + 1), WINDOW_TTL)
    return Quota(limit=limit, count=count + 1, reset=int(utcnow().timestamp()) + WINDOW_TTL)
