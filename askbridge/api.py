"""
FastAPI application and endpoints
"""

import logging
from typing import Callable, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.background import BackgroundTask
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .bridge import respond
from .capability import AskCapability
from .config import Settings
from .exceptions import AskBridgeError
from .models import ErrorBody, ModelEntry
from .translator import translate_body

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Endpoint not found"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorBody(error=message).model_dump())


def register_error_handlers(app: FastAPI) -> None:
    """Render every failure as {"error": message}"""

    @app.exception_handler(AskBridgeError)
    async def askbridge_error_handler(request: Request, exc: AskBridgeError):
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # Unrouted paths and unsupported methods are both "not found"
        if exc.status_code in (404, 405):
            return error_response(404, NOT_FOUND_MESSAGE)
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error: {exc}")
        return error_response(500, str(exc))


def create_app(
    capability: AskCapability,
    settings: Optional[Settings] = None,
    shutdown: Optional[Callable[[], None]] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        capability: backend answering prompts
        settings: runtime settings (defaults apply when omitted)
        shutdown: called after /kill has been acknowledged
    """
    settings = settings or Settings()

    app = FastAPI(title="askbridge", version=__version__)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_origins),
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_error_handlers(app)

    @app.post("/kill")
    async def kill():
        """Acknowledge, then stop accepting connections"""
        logger.info("Shutdown requested")
        background = BackgroundTask(shutdown) if shutdown is not None else None
        return JSONResponse(status_code=200, content={"message": "Server shutting down"}, background=background)

    @app.get("/v1/models")
    async def list_models():
        return [ModelEntry(id=index, name=name).model_dump() for index, name in enumerate(settings.models)]

    @app.post("/v1/chat/completions")
    async def chat_completions(request: Request):
        """OpenAI-compatible chat completion endpoint"""
        body = await request.body()

        try:
            parsed = translate_body(body, settings.default_model)
        except AskBridgeError as e:
            logger.warning(f"Rejected chat request ({e.status_code}): {e.message}")
            raise

        logger.info(f"Chat request: model={parsed.model} stream={parsed.stream}")
        logger.debug(f"Prompt: {parsed.prompt[:50]}...")

        try:
            return await respond(capability, parsed)
        except (AskBridgeError, HTTPException):
            raise
        except Exception as e:
            logger.exception(f"Error: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    return app
