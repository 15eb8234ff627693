"""Googlebot verification via reverse DNS."""

import logging
from typing import Any

from src.models.outcome import (
    InvalidQueryString,
    MissingQueryString,
    NoPtrRecord,
    Outcome,
    UnverifiedBot,
    UpstreamResolutionFailed,
    VerifiedBot,
)
from src.services.doh_client import DohResolver, UpstreamResolutionError
from src.utils.ip_utils import build_reverse_query_name


logger = logging.getLogger(__name__)

# Trailing dots included: resolver answers are fully qualified.
GOOGLEBOT_SUFFIXES = (".google.com.", ".googlebot.com.")


def is_verified_hostname(hostname: str) -> bool:
    """Check if a PTR hostname belongs to Google's crawler domains.

    Exact, case-sensitive string suffix match. "sub.evilgoogle.com." does not
    match because its suffix is "evilgoogle.com.", not ".google.com.".

    Args:
        hostname: PTR hostname with trailing dot.

    Returns:
        bool: True if hostname ends with .google.com. or .googlebot.com.
    """
    return hostname.endswith(GOOGLEBOT_SUFFIXES)


def classify_ptr_answer(payload: Any) -> Outcome:
    """Classify a resolver payload into a verification outcome.

    Only the first Answer entry is inspected.

    Args:
        payload: Decoded JSON from the resolver.

    Returns:
        Outcome: VerifiedBot, UnverifiedBot or NoPtrRecord.
    """
    answers = payload.get("Answer") if isinstance(payload, dict) else None
    if not isinstance(answers, list) or not answers:
        return NoPtrRecord()

    first = answers[0]
    hostname = first.get("data") if isinstance(first, dict) else None
    if not isinstance(hostname, str):
        return NoPtrRecord()

    if is_verified_hostname(hostname):
        return VerifiedBot(hostname=hostname)
    return UnverifiedBot(hostname=hostname)


class BotVerifier:
    """Verifies claimed Googlebot addresses against a DNS-over-HTTPS resolver."""

    def __init__(self, resolver: DohResolver):
        """Initialize verifier.

        Args:
            resolver: Resolver client used for PTR lookups.
        """
        self.resolver = resolver

    def verify(self, ip: str | None) -> Outcome:
        """Verify a single IPv4 address.

        Args:
            ip: Value of the ip query parameter, or None if absent.

        Returns:
            Outcome: Terminal result of the verification attempt.
        """
        if ip is None:
            return MissingQueryString()

        try:
            name = build_reverse_query_name(ip)
        except ValueError:
            logger.debug(f"Rejected invalid IPv4 address: {ip!r}")
            return InvalidQueryString()

        try:
            payload = self.resolver.lookup_ptr(name)
        except UpstreamResolutionError as e:
            logger.error(f"Reverse lookup for {ip} failed: {e}")
            return UpstreamResolutionFailed()

        return classify_ptr_answer(payload)
