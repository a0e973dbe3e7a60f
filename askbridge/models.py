"""
Data models for the OpenAI-compatible API
"""

import time
import uuid
from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field


def new_completion_id() -> str:
    return f"chatcmpl-{uuid.uuid4().hex}"


def unix_now() -> int:
    return int(time.time())


class ChatMessage(BaseModel):
    """One entry of a chat request's messages; only content is interpreted"""
    model_config = ConfigDict(extra="allow")

    role: Any = None
    content: Any = None


class PromptRequest(BaseModel):
    """Translated chat request: everything the ask capability needs"""
    prompt: str
    model: str
    stream: bool = False


class AssistantMessage(BaseModel):
    role: Literal["assistant"] = "assistant"
    content: str


class Choice(BaseModel):
    index: int = 0
    message: AssistantMessage
    finish_reason: Literal["stop"] = "stop"


class ChatCompletionResponse(BaseModel):
    """OpenAI-compatible non-streaming chat completion"""
    id: str = Field(default_factory=new_completion_id)
    object: Literal["chat.completion"] = "chat.completion"
    created: int = Field(default_factory=unix_now)
    model: str
    choices: List[Choice]
    usage: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_answer(cls, answer: str, model: str) -> "ChatCompletionResponse":
        return cls(model=model, choices=[Choice(message=AssistantMessage(content=answer))])


class ModelEntry(BaseModel):
    """One entry of the /v1/models listing"""
    id: int
    name: str


class ErrorBody(BaseModel):
    error: str
