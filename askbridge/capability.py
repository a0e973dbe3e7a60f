"""
Ask capability contract and the events it streams
"""

from dataclasses import dataclass
from typing import AsyncIterator, Optional, Protocol, Union


@dataclass(frozen=True)
class Fragment:
    """One incremental piece of the answer"""
    text: str


@dataclass(frozen=True)
class Completed:
    """The answer finished; carries the full text"""
    text: str


@dataclass(frozen=True)
class Failed:
    """The answer failed; no further events follow"""
    message: str


CapabilityEvent = Union[Fragment, Completed, Failed]


class AskCapability(Protocol):
    """
    Contract for the assistant backend.

    Implementations must provide:
    - One-shot answers (complete)
    - Incremental answers (stream)
    """

    async def complete(self, prompt: str, model: Optional[str] = None) -> str:
        """
        Return the final answer for a prompt.

        Raises:
            Exception on failure; the message is reported to the client
        """
        ...

    def stream(self, prompt: str, model: Optional[str] = None) -> AsyncIterator[CapabilityEvent]:
        """
        Yield Fragment events in emission order, then exactly one
        Completed or Failed event.
        """
        ...
