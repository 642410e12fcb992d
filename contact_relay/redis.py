from redis.asyncio import Redis

from .logger import get_logger
from .settings import settings


logger = get_logger(__name__)


def create_redis_connection() -> Redis | None:
    if not settings.redis_url:
        logger.warning("No redis url configured, rate limiting is disabled")
        return None

    return Redis.from_url(settings.redis_url, encoding="utf-8", decode_responses=True)


redis: Redis | None = create_redis_connection()
