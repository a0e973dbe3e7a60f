"""
Invoke the ask capability and shape its result as an HTTP response
"""

import logging

from fastapi.responses import JSONResponse, StreamingResponse

from .capability import AskCapability
from .exceptions import CapabilityError
from .models import ChatCompletionResponse, PromptRequest
from .streaming import stream_events

logger = logging.getLogger(__name__)

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
}


async def complete_response(capability: AskCapability, request: PromptRequest) -> JSONResponse:
    """
    Await the final answer and return one chat completion.

    Raises:
        CapabilityError: the capability failed
    """
    try:
        answer = await capability.complete(request.prompt, model=request.model)
    except Exception as e:
        logger.exception(f"Capability failed: {e}")
        raise CapabilityError(str(e)) from e

    response = ChatCompletionResponse.from_answer(answer, request.model)
    return JSONResponse(status_code=200, content=response.model_dump())


def streaming_response(capability: AskCapability, request: PromptRequest) -> StreamingResponse:
    """
    Open an SSE channel fed by the capability's event stream.

    Headers are committed with status 200 before the first event, so
    failures from here on are reported in-band.
    """
    events = capability.stream(request.prompt, model=request.model)
    return StreamingResponse(
        stream_events(events, request.model),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )


async def respond(capability: AskCapability, request: PromptRequest):
    if request.stream:
        return streaming_response(capability, request)
    return await complete_response(capability, request)
