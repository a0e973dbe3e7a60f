"""
askbridge: OpenAI-compatible HTTP bridge for an ask capability

Main entry point for the application.
"""

import sys

from askbridge.logging_config import setup_logging
from askbridge.config import load_settings
from askbridge.exceptions import ConfigurationError
from askbridge.agent import LlamaCppCapability
from askbridge.listener import Listener
from askbridge.api import create_app


def main() -> int:
    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger = setup_logging()
        logger.error(f"Configuration error: {e.message}")
        return 1

    logger = setup_logging(settings.log_level)
    logger.info(f"Known models: {', '.join(settings.models)} (default: {settings.default_model})")

    try:
        capability = LlamaCppCapability.from_settings(settings)
    except Exception as e:
        logger.error(f"Failed to initialize capability: {e}")
        logger.info("Please check your llama.cpp server configuration")
        raise

    listener = Listener(settings.host, settings.port, settings.log_level)
    app = create_app(capability, settings, shutdown=listener.stop)
    listener.run(app)
    return 0


if __name__ == "__main__":
    sys.exit(main())
