import json
import logging
from typing import Any, Optional

import redis

from ..core.settings import settings

logger = logging.getLogger(__name__)

_REDIS = redis.from_url(settings.REDIS_URL, decode_responses=True) if settings.REDIS_URL else None

def cache_key(namespace: str, ident: str) -> str:
    return f"{namespace}:{ident}"

def cache_set(key: str, data: Any, ttl: int) -> None:
    if not _REDIS:
        return
    try:
        _REDIS.setex(key, ttl, json.dumps(data))
    except redis.RedisError as e:
        logger.warning("cache write failed for %s: %s", key, e)

def cache_get(key: str) -> Optional[Any]:
    if not _REDIS:
        return None
    try:
        raw = _REDIS.get(key)
    except redis.RedisError as e:
        logger.warning("cache read failed for %s: %s", key, e)
        return None
    return json.loads(raw) if raw else None
