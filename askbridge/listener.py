"""
HTTP listener lifecycle around uvicorn
"""

import asyncio
import logging
from enum import Enum
from typing import Optional, Union

import uvicorn
from fastapi import FastAPI

from .config import parse_port

logger = logging.getLogger(__name__)


class ListenerState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPING = "stopping"
    STOPPED = "stopped"


class Listener:
    """
    Owns the uvicorn server bound to one port.

    stop() asks the server to exit gracefully: no new connections are
    accepted and in-flight requests are allowed to finish.
    """

    def __init__(self, host: str, port: Union[int, str], log_level: str = "info"):
        self.host = host
        self.port = parse_port(port)
        self.log_level = log_level.lower()
        self.state = ListenerState.IDLE
        self.server: Optional[uvicorn.Server] = None

    @property
    def is_running(self) -> bool:
        return self.state == ListenerState.RUNNING

    async def serve(self, app: FastAPI) -> None:
        if self.state == ListenerState.STOPPING:
            # stop() arrived before we ever bound the port
            self.state = ListenerState.STOPPED
            return
        if self.state != ListenerState.IDLE:
            raise RuntimeError(f"Listener cannot start from state {self.state.value}")

        config = uvicorn.Config(
            app,
            host=self.host,
            port=self.port,
            log_level=self.log_level,
            log_config=None,
        )
        self.server = uvicorn.Server(config)
        self.state = ListenerState.RUNNING
        logger.info(f"Listening on http://{self.host}:{self.port}")

        try:
            await self.server.serve()
        finally:
            self.state = ListenerState.STOPPED
            logger.info("Listener stopped")

    def run(self, app: FastAPI) -> None:
        asyncio.run(self.serve(app))

    def stop(self) -> None:
        if self.state in (ListenerState.STOPPING, ListenerState.STOPPED):
            return
        if self.server is not None:
            self.server.should_exit = True
        self.state = ListenerState.STOPPING
        logger.info("Listener stopping")
