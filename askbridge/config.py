"""
Environment-driven configuration
"""

import logging
import os
from typing import Mapping, Optional, Tuple, Union

from pydantic import BaseModel

from .exceptions import ConfigurationError

DEFAULT_PORT = "8000"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_MODELS = "llama-3.1-8b-instruct,qwen2.5-7b-instruct,mistral-7b-instruct"
DEFAULT_LLAMA_CPP_SERVER_URL = "http://localhost:8080"
DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant."

MAX_PORT = 65535


class Settings(BaseModel):
    """Resolved runtime settings"""
    host: str = DEFAULT_HOST
    port: int = int(DEFAULT_PORT)
    models: Tuple[str, ...] = tuple(DEFAULT_MODELS.split(","))
    default_model: str = DEFAULT_MODELS.split(",")[0]
    log_level: str = "INFO"
    cors_origins: Tuple[str, ...] = ("*",)
    llama_cpp_server_url: str = DEFAULT_LLAMA_CPP_SERVER_URL
    system_prompt: str = DEFAULT_SYSTEM_PROMPT


def parse_port(value: Union[str, int, None]) -> int:
    """
    Validate a port number.

    Accepts an int or a decimal string; anything else, or a value outside
    1..65535, raises ConfigurationError.
    """
    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid port: {value!r}")
    if isinstance(value, int):
        port = value
    elif isinstance(value, str) and value.strip().isdigit():
        port = int(value.strip())
    else:
        raise ConfigurationError(f"Invalid port: {value!r}")

    if not 0 < port <= MAX_PORT:
        raise ConfigurationError(f"Invalid port: {value!r} (must be between 1 and {MAX_PORT})")
    return port


def split_list(value: str) -> Tuple[str, ...]:
    """Split a comma-separated value, dropping blanks"""
    return tuple(item.strip() for item in value.split(",") if item.strip())


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        environ: mapping to read from (defaults to os.environ)

    Raises:
        ConfigurationError: on an invalid port, empty model list or unknown log level
    """
    env = os.environ if environ is None else environ

    port = parse_port(env.get("ASKBRIDGE_PORT", DEFAULT_PORT))

    models = split_list(env.get("ASKBRIDGE_MODELS", DEFAULT_MODELS))
    if not models:
        raise ConfigurationError("ASKBRIDGE_MODELS must name at least one model")

    default_model = env.get("ASKBRIDGE_DEFAULT_MODEL", "").strip() or models[0]

    log_level = env.get("ASKBRIDGE_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError(f"Unknown log level: {log_level}")

    return Settings(
        host=env.get("ASKBRIDGE_HOST", DEFAULT_HOST),
        port=port,
        models=models,
        default_model=default_model,
        log_level=log_level,
        cors_origins=split_list(env.get("ASKBRIDGE_CORS_ORIGINS", "*")),
        llama_cpp_server_url=env.get("LLAMA_CPP_SERVER_URL", DEFAULT_LLAMA_CPP_SERVER_URL),
        system_prompt=env.get("ASKBRIDGE_SYSTEM_PROMPT", DEFAULT_SYSTEM_PROMPT),
    )
