# fittrack/services/image_service.py
"""
Exercise image resolution.

The free-exercise-db repository names its files after a slug of the
exercise name, but the slug convention is not uniform, so a handful of
variants are tried one after another against the raw GitHub host.
"""
import logging
import re
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import quote

import httpx

from ..core.settings import settings
from ..errors import NotFoundError

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "image/gif"
CACHE_CONTROL = "public, max-age=86400"

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class ImageHit:
    variant: str
    content: bytes
    content_type: str


def slug_variants(name: str) -> List[str]:
    """Candidate file slugs for ``name``, in probe order."""
    lowered = name.strip().lower()
    return [
        _WHITESPACE.sub("-", lowered),
        _WHITESPACE.sub("_", lowered),
        lowered.split(" ")[0],
        _WHITESPACE.sub("", lowered),
    ]


def image_url(variant: str) -> str:
    return f"{settings.IMAGE_BASE_URL.rstrip('/')}/{quote(variant, safe='')}.gif"


async def probe_variant(client: httpx.AsyncClient, variant: str) -> Optional[ImageHit]:
    url = image_url(variant)
    logger.debug("[IMG] trying %s", url)
    try:
        resp = await client.get(url, timeout=settings.IMAGE_TIMEOUT_SECONDS)
        resp.raise_for_status()
    except httpx.HTTPError as e:
        logger.info("[IMG] not found as %s (%s)", variant, e.__class__.__name__)
        return None
    return ImageHit(
        variant=variant,
        content=resp.content,
        content_type=resp.headers.get("content-type") or DEFAULT_CONTENT_TYPE,
    )


async def resolve_image(client: httpx.AsyncClient, name: str) -> ImageHit:
    for variant in slug_variants(name):
        hit = await probe_variant(client, variant)
        if hit is not None:
            logger.info("[IMG] image found for %r as %s", name, variant)
            return hit
    logger.warning("[IMG] image not found for %r", name)
    raise NotFoundError("Image not found")
