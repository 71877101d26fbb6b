# fittrack/routers/images.py
import logging
from typing import Annotated, Optional

import httpx
from fastapi import APIRouter, Depends, Query, Response

from ..errors import AppError, UpstreamError, ValidationError
from ..services.http_client import get_http_client
from ..services.image_service import CACHE_CONTROL, resolve_image

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["images"])

@router.get("/proxy-image")
async def proxy_image(
    client: Annotated[httpx.AsyncClient, Depends(get_http_client)],
    name: Optional[str] = Query(default=None),
):
    if not name or not name.strip():
        raise ValidationError("Name parameter required")

    logger.info("[IMG] fetching image for %r", name)
    try:
        hit = await resolve_image(client, name)
    except AppError:
        raise
    except Exception:
        logger.exception("[IMG] image proxy error")
        raise UpstreamError("Failed to fetch image")

    return Response(
        content=hit.content,
        media_type=hit.content_type,
        headers={"Cache-Control": CACHE_CONTROL},
    )
