"""
Server-Sent Events (SSE) framing of capability events
"""

import json
import logging
from typing import Any, AsyncIterator, Dict, Optional

from .capability import CapabilityEvent, Completed, Failed, Fragment
from .models import new_completion_id, unix_now

logger = logging.getLogger(__name__)

DONE_FRAME = "data: [DONE]\n\n"


def sse_frame(payload: Dict[str, Any]) -> str:
    return f"data: {json.dumps(payload)}\n\n"


def create_sse_chunk(
    chat_id: str,
    model: str,
    content: str,
    finish_reason: Optional[str] = None
) -> str:
    """Generate a single chat.completion.chunk frame in OpenAI format"""
    chunk = {
        "id": chat_id,
        "object": "chat.completion.chunk",
        "created": unix_now(),
        "model": model,
        "choices": [{
            "index": 0,
            "delta": {"content": content},
            "finish_reason": finish_reason
        }]
    }
    if finish_reason is not None:
        chunk["finish_reason"] = finish_reason
    return sse_frame(chunk)


def error_frame(message: str) -> str:
    return sse_frame({"error": message})


async def stream_events(events: AsyncIterator[CapabilityEvent], model: str) -> AsyncIterator[str]:
    """
    Turn capability events into SSE frames.

    Fragments are forwarded in order, one frame each. Completion emits an
    empty-delta stop frame followed by [DONE]; failure emits a single
    error frame. Nothing is emitted after either terminal frame.
    """
    chat_id = new_completion_id()
    count = 0

    try:
        async for event in events:
            if isinstance(event, Fragment):
                count += 1
                yield create_sse_chunk(chat_id, model, event.text)
            elif isinstance(event, Failed):
                logger.error(f"Stream {chat_id} failed after {count} fragments: {event.message}")
                yield error_frame(event.message)
                return
            elif isinstance(event, Completed):
                break
    except Exception as e:
        logger.exception(f"Stream {chat_id} failed after {count} fragments: {e}")
        yield error_frame(str(e))
        return

    logger.debug(f"Stream {chat_id} completed with {count} fragments")
    yield create_sse_chunk(chat_id, model, "", "stop")
    yield DONE_FRAME
