# fittrack/services/exercise_service.py
import logging
from typing import List

import httpx

from ..core.settings import settings
from ..errors import AuthError, ConfigError, RateLimitError, UpstreamError, UpstreamTimeoutError
from .cache_service import cache_get, cache_key, cache_set

logger = logging.getLogger(__name__)


def _secure_gif_urls(exercises: List[dict]) -> List[dict]:
    for exercise in exercises:
        url = exercise.get("gifUrl")
        if isinstance(url, str) and url.startswith("http:"):
            exercise["gifUrl"] = "https:" + url[len("http:"):]
    return exercises


async def fetch_exercises_by_body_part(client: httpx.AsyncClient, body_part: str) -> List[dict]:
    """
    Exercises for one body part from the RapidAPI ExerciseDB.

    Served from Redis when cached; the RapidAPI key never leaves the server.
    """
    body_part = body_part.strip().lower()
    key = cache_key("exercises:bodyPart", body_part)
    cached = cache_get(key)
    if cached is not None:
        return cached

    if not settings.RAPIDAPI_KEY:
        raise ConfigError("RAPIDAPI_KEY not configured on server")

    url = f"https://{settings.RAPIDAPI_HOST}/exercises/bodyPart/{body_part}"
    headers = {
        "x-rapidapi-key": settings.RAPIDAPI_KEY,
        "x-rapidapi-host": settings.RAPIDAPI_HOST,
    }
    try:
        resp = await client.get(url, headers=headers, timeout=settings.EXERCISE_TIMEOUT_SECONDS)
    except httpx.TimeoutException:
        logger.error("ExerciseDB timed out for %s", body_part)
        raise UpstreamTimeoutError()
    except httpx.HTTPError as e:
        logger.error("ExerciseDB request failed: %s", e)
        raise UpstreamError("Failed to fetch exercises")

    if resp.status_code in (401, 403):
        raise AuthError("Exercise API authentication failed. Check RAPIDAPI_KEY.")
    if resp.status_code == 429:
        raise RateLimitError()
    if resp.is_error:
        logger.error("ExerciseDB returned %s: %s", resp.status_code, resp.text[:500])
        raise UpstreamError("Failed to fetch exercises", details=resp.text[:500] or "No additional details")

    payload = resp.json()
    if not isinstance(payload, list):
        raise UpstreamError("Unexpected response from exercise API", details=payload)
    exercises = _secure_gif_urls(payload)
    cache_set(key, exercises, settings.EXERCISE_CACHE_TTL_SECONDS)
    return exercises
