from pydantic import BaseModel, Field
from typing import List

from ..enums import ChatRoleEnum

class ChatMessage(BaseModel):
    role: ChatRoleEnum
    content: str

class AskAIRequest(BaseModel):
    messages: List[ChatMessage] = Field(min_length=1)
    temperature: float = 0.7

class AskAIResponse(BaseModel):
    response: str
