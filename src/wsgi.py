"""WSGI entry point for running under a production WSGI server.

Point the server at the factory, e.g. ``src.wsgi:create_wsgi_app()``.
"""

import logging

from flask import Flask

from src.app import create_app
from src.config import Config
from src.services.logger import setup_logging


logger = logging.getLogger(__name__)


def create_wsgi_app() -> Flask:
    """Load configuration, configure logging and build the application.

    Returns:
        Flask: Configured application.

    Raises:
        ValueError: If configuration is invalid.
    """
    config = Config.from_env()
    setup_logging(verbose=config.verbose)
    logger.info(f"Googlebot Verifier WSGI app ready, resolver {config.resolver_url}")
    return create_app(config)
