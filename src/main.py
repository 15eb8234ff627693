"""Main entry point for Googlebot Verifier."""

import logging
import sys

from src.app import create_app
from src.config import Config
from src.services.logger import setup_logging


logger = logging.getLogger(__name__)


def main() -> int:
    """Main execution function.

    Returns:
        int: Exit code (0 for clean shutdown, 1 for fatal error).
    """
    setup_logging()

    try:
        config = Config.from_env()
        if config.verbose:
            setup_logging(verbose=True)
        logger.info(
            f"Starting Googlebot Verifier on {config.listen_host}:{config.listen_port}, "
            f"resolver {config.resolver_url}"
        )

        app = create_app(config)
        # Development server, one thread per inbound request.
        # Production deployments serve src.wsgi:create_wsgi_app() instead.
        app.run(host=config.listen_host, port=config.listen_port, threaded=True)
        return 0

    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
