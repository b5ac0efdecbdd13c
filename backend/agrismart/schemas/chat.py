# backend/agrismart/schemas/chat.py

from typing import List, Literal
from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    role: Literal["user", "assistant", "system"]
    content: str


class ChatRequest(BaseModel):
    messages: List[ChatMessage] = Field(min_length=1)


class ChatResponse(BaseModel):
    response: str


# ---- OpenAI-compatible completion payload ----

class CompletionMessage(BaseModel):
    content: str


class CompletionChoice(BaseModel):
    message: CompletionMessage


class ChatCompletionPayload(BaseModel):
    choices: List[CompletionChoice] = Field(min_length=1)
