"""DNS-over-HTTPS client for PTR lookups."""

import logging
from http import cookiejar
from typing import Any

import requests


logger = logging.getLogger(__name__)


class UpstreamResolutionError(Exception):
    """Raised when the DNS-over-HTTPS resolver cannot produce an answer."""


class BlockAllCookies(cookiejar.CookiePolicy):
    """Cookie policy that never stores or sends cookies."""

    return_ok = set_ok = domain_return_ok = path_return_ok = (
        lambda self, *args, **kwargs: False
    )
    netscape = True
    rfc2965 = hide_cookie2 = False


class DohResolver:
    """Client for a JSON DNS-over-HTTPS endpoint (e.g. dns.google.com/resolve).

    Performs exactly one GET per lookup. Retries are left to the caller.
    The session is shared across request threads, so cookies are disabled.
    """

    def __init__(
        self,
        resolver_url: str,
        timeout: int = 5,
        session: requests.Session | None = None,
    ):
        """Initialize resolver client.

        Args:
            resolver_url: Base URL of the JSON resolve endpoint. May carry
                its own query string.
            timeout: Request timeout in seconds.
            session: Optional requests session (injected in tests).
        """
        self.resolver_url = resolver_url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.cookies.set_policy(BlockAllCookies())

    @staticmethod
    def query_params(name: str) -> dict:
        """Query parameters requesting a PTR record for name."""
        return {"name": name, "type": "PTR"}

    def build_query_url(self, name: str) -> str:
        """Build the full lookup URL requesting a PTR record for name.

        Args:
            name: Reverse lookup name (e.g., "4.3.2.1.in-addr.arpa").

        Returns:
            str: Lookup URL (e.g., "https://dns.google.com/resolve?name=4.3.2.1.in-addr.arpa&type=PTR").
        """
        request = requests.Request(
            "GET", self.resolver_url, params=self.query_params(name)
        )
        return request.prepare().url

    def lookup_ptr(self, name: str) -> Any:
        """Resolve PTR records for a reverse lookup name.

        Args:
            name: Reverse lookup name.

        Returns:
            Any: Decoded JSON payload from the resolver.

        Raises:
            UpstreamResolutionError: On transport errors, non-2xx statuses or
                a body that is not valid JSON.
        """
        try:
            r = self.session.get(
                self.resolver_url,
                params=self.query_params(name),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning(f"PTR lookup for {name} failed: {e}")
            raise UpstreamResolutionError(f"Resolver request failed: {e}") from e

        if not 200 <= r.status_code < 300:
            logger.warning(f"PTR lookup for {name} returned HTTP {r.status_code}")
            raise UpstreamResolutionError(f"Resolver returned HTTP {r.status_code}")

        try:
            return r.json()
        except ValueError as e:
            logger.warning(f"PTR lookup for {name} returned malformed JSON: {e}")
            raise UpstreamResolutionError(f"Resolver returned malformed JSON: {e}") from e
