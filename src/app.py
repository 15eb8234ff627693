"""Flask application serving the /verify endpoint."""

import logging
import time

from flask import Flask, jsonify, request
from werkzeug.exceptions import MethodNotAllowed, NotFound

from src.config import Config
from src.models.outcome import render_outcome
from src.services.doh_client import DohResolver
from src.services.logger import log_verification
from src.services.verifier import BotVerifier


logger = logging.getLogger(__name__)

NOT_FOUND_BODY = (
    "Either the page you requested could not be found or the HTTP method is not GET.\n"
)
PLAIN_TEXT = {"Content-Type": "text/plain; charset=utf-8"}


def create_app(config: Config, verifier: BotVerifier | None = None) -> Flask:
    """Build the Flask application.

    Args:
        config: Application configuration.
        verifier: Optional verifier (injected in tests). Built from config
            when omitted.

    Returns:
        Flask: Configured application.
    """
    if verifier is None:
        resolver = DohResolver(config.resolver_url, timeout=config.resolver_timeout)
        verifier = BotVerifier(resolver)

    app = Flask(__name__)

    def not_found(_error=None):
        return NOT_FOUND_BODY, 404, PLAIN_TEXT

    app.register_error_handler(NotFound, not_found)
    app.register_error_handler(MethodNotAllowed, not_found)

    @app.route("/verify", methods=["GET"], provide_automatic_options=False)
    def verify():
        # Flask adds HEAD to GET routes
        if request.method != "GET":
            return not_found()

        start = time.time()
        # Last value wins for repeated parameters
        ip_values = request.args.getlist("ip")
        ip = ip_values[-1] if ip_values else None

        try:
            rendered = render_outcome(verifier.verify(ip))
        except Exception as e:
            logger.error(f"Verification failed for ip={ip!r}: {e}", exc_info=True)
            return f"ERROR: {e}", 400, PLAIN_TEXT

        log_verification(
            ip=ip,
            result=rendered.result,
            reason=rendered.reason,
            status=rendered.status,
            duration_ms=int((time.time() - start) * 1000),
        )

        response = jsonify(rendered.to_json())
        response.status_code = rendered.status
        response.headers["x-googlebot-verified"] = rendered.result
        return response

    return app
