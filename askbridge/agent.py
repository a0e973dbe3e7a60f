"""
Ask capability backed by a llama.cpp server through llama_cpp_agent
"""

import logging
from typing import AsyncIterator, Iterator, Optional

from llama_cpp_agent import LlamaCppAgent, MessagesFormatterType
from llama_cpp_agent.providers import LlamaCppServerProvider
from starlette.concurrency import iterate_in_threadpool, run_in_threadpool

from .capability import CapabilityEvent, Completed, Failed, Fragment
from .config import DEFAULT_SYSTEM_PROMPT, Settings

logger = logging.getLogger(__name__)


class LlamaCppCapability:
    """
    Answers prompts with a LlamaCppAgent.

    The agent API is blocking, so calls run in the threadpool. Each call
    gets its own agent: an agent's chat history is seeded with the system
    prompt on first use and must not be shared between concurrent requests.
    The requested model is logged only: a llama.cpp server serves whatever
    model it was started with.
    """

    def __init__(self, provider: LlamaCppServerProvider, system_prompt: str = DEFAULT_SYSTEM_PROMPT):
        self.provider = provider
        self.system_prompt = system_prompt

    @classmethod
    def from_settings(cls, settings: Settings) -> "LlamaCppCapability":
        logger.info(f"llama.cpp server: {settings.llama_cpp_server_url}")

        provider = LlamaCppServerProvider(server_address=settings.llama_cpp_server_url)
        return cls(provider, settings.system_prompt)

    def create_agent(self) -> LlamaCppAgent:
        return LlamaCppAgent(
            self.provider,
            system_prompt=self.system_prompt,
            predefined_messages_formatter_type=MessagesFormatterType.CHATML,
            debug_output=False
        )

    def _ask(self, prompt: str, streaming: bool):
        sampling_settings = self.provider.get_provider_default_settings()
        sampling_settings.stream = streaming
        return self.create_agent().get_chat_response(
            prompt,
            add_message_to_chat_history=False,
            add_response_to_chat_history=False,
            llm_sampling_settings=sampling_settings,
            returns_streaming_generator=streaming,
        )

    async def complete(self, prompt: str, model: Optional[str] = None) -> str:
        logger.debug(f"complete (model={model})")
        return await run_in_threadpool(self._ask, prompt, False)

    async def stream(self, prompt: str, model: Optional[str] = None) -> AsyncIterator[CapabilityEvent]:
        """Failures become a Failed event; the SSE layer reports and logs them"""
        logger.debug(f"stream (model={model})")
        parts = []
        try:
            generator: Iterator[str] = await run_in_threadpool(self._ask, prompt, True)
            async for text in iterate_in_threadpool(generator):
                if not text:
                    continue
                parts.append(text)
                yield Fragment(text)
        except Exception as e:
            yield Failed(str(e))
            return

        yield Completed("".join(parts))
