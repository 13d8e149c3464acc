import json
import logging
from typing import Optional

import redis

from pvtracker.config import CACHE_TTL_SECONDS, REDIS_URL

logger = logging.getLogger(__name__)

# None when REDIS_URL is not configured; every lookup then misses
redis_client = redis.Redis.from_url(REDIS_URL, decode_responses=True) if REDIS_URL else None


def _generation_key(installation_id: int) -> str:
    return f"installation:{installation_id}:generation"


def installation_key(installation_id: int, *parts) -> Optional[str]:
    """Cache key tied to the installation's current generation, or None if caching is off."""
    if redis_client is None:
        return None
    try:
        generation = redis_client.get(_generation_key(installation_id)) or "0"
    except redis.RedisError as e:
        logger.warning("Redis unavailable, skipping cache: %s", e)
        return None
    return ":".join(["installation", str(installation_id), f"g{generation}", *(str(p) for p in parts)])


def set_cache(key: str, value, ex: int = CACHE_TTL_SECONDS):
    if key is None or redis_client is None:
        return
    try:
        redis_client.set(key, json.dumps(value), ex=ex)
    except redis.RedisError as e:
        logger.warning("Redis caching error for %s: %s", key, e)


def get_cache(key: str):
    if key is None or redis_client is None:
        return None
    try:
        v = redis_client.get(key)
    except redis.RedisError as e:
        logger.warning("Redis read error for %s: %s", key, e)
        return None
    if v is None:
        return None
    return json.loads(v)


def invalidate_installation(installation_id: int):
    """Bump the generation so every cached read of this installation is skipped."""
    if redis_client is None:
        return
    try:
        redis_client.incr(_generation_key(installation_id))
    except redis.RedisError as e:
        logger.warning("Redis invalidation error for installation %s: %s", installation_id, e)


def ping() -> str:
    if redis_client is None:
        return "disabled"
    try:
        if not redis_client.ping():
            return "error: cannot ping Redis"
    except redis.RedisError as e:
        return f"error: {str(e)}"
    return "ok"
