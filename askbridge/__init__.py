"""
askbridge: OpenAI-compatible HTTP bridge for an ask capability

Translates chat completion requests into a single prompt and returns the
answer as a chat completion or an SSE stream.
"""

__version__ = "1.0.0"
__author__ = "askbridge Contributors"

from .exceptions import (
    AskBridgeError,
    CapabilityError,
    ConfigurationError,
    MalformedBody,
    MissingContent,
    MissingMessages,
)
from .capability import AskCapability, Completed, Failed, Fragment
from .models import ChatCompletionResponse, PromptRequest

__all__ = [
    "AskBridgeError",
    "AskCapability",
    "CapabilityError",
    "ChatCompletionResponse",
    "Completed",
    "ConfigurationError",
    "Failed",
    "Fragment",
    "MalformedBody",
    "MissingContent",
    "MissingMessages",
    "PromptRequest",
    "__version__",
]
