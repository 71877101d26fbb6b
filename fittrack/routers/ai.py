# fittrack/routers/ai.py
from typing import Annotated, Optional

from fastapi import APIRouter, Depends
from openai import OpenAI

from ..schemas.ai_schemas import AskAIRequest, AskAIResponse
from ..services.ai_service import answer_conversation, get_chat_client

router = APIRouter(prefix="/api", tags=["ai"])

@router.post("/askAI", response_model=AskAIResponse)
def ask_ai(body: AskAIRequest, client: Annotated[Optional[OpenAI], Depends(get_chat_client)]):
    # canned answers short-circuit before the key is checked
    answer = answer_conversation(body.messages, body.temperature, client)
    return {"response": answer}
