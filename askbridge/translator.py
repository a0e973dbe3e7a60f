"""
Translate an OpenAI-shaped chat request body into a single prompt
"""

import json
from typing import Any, Optional

from .exceptions import MalformedBody, MissingContent, MissingMessages
from .models import ChatMessage, PromptRequest


def parse_body(raw: bytes) -> Any:
    """Decode the raw request body as JSON"""
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedBody(str(e)) from e


def content_text(content: Any) -> Optional[str]:
    """
    Extract text from a message content value.

    Plain strings are returned as-is. A list of OpenAI content parts is
    reduced to its text parts joined by newlines. Anything else yields None.
    """
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        texts = [
            part["text"] for part in content
            if isinstance(part, dict) and part.get("type") == "text" and isinstance(part.get("text"), str)
        ]
        return "\n".join(t for t in texts if t)
    return None


def get_last_message_content(messages: Any) -> str:
    """Return the prompt text carried by the last message"""
    if not isinstance(messages, list) or not messages:
        raise MissingMessages()

    last = messages[-1]
    if not isinstance(last, dict):
        raise MissingContent()

    text = content_text(ChatMessage.model_validate(last).content)
    if not text:
        raise MissingContent()
    return text


def resolve_model(value: Any, default_model: str) -> str:
    if value is None or value == "":
        return default_model
    return value if isinstance(value, str) else str(value)


def translate_body(raw: bytes, default_model: str) -> PromptRequest:
    """
    Validate a chat completion request body and extract the prompt.

    Args:
        raw: request body bytes
        default_model: model used when the request names none

    Raises:
        MalformedBody: body is not valid JSON
        MissingMessages: 'messages' absent, empty or not a list
        MissingContent: last message has no non-empty content
    """
    data = parse_body(raw)
    if not isinstance(data, dict):
        raise MissingMessages()

    prompt = get_last_message_content(data.get("messages"))

    return PromptRequest(
        prompt=prompt,
        model=resolve_model(data.get("model"), default_model),
        # Only a literal JSON true enables streaming.
        stream=data.get("stream") is True,
    )
