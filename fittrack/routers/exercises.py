from typing import Annotated

import httpx
from fastapi import APIRouter, Depends

from ..services.exercise_service import fetch_exercises_by_body_part
from ..services.http_client import get_http_client

router = APIRouter(prefix="/api/exercises", tags=["exercises"])

@router.get("/bodyPart/{body_part}")
async def list_exercises_by_body_part(body_part: str, client: Annotated[httpx.AsyncClient, Depends(get_http_client)]):
    return await fetch_exercises_by_body_part(client, body_part)
