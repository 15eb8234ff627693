"""Verification outcome models.

Each request produces exactly one outcome variant, which is rendered once
into the HTTP status, result tag and reason returned to the caller.
"""

from dataclasses import dataclass
from typing import Union, assert_never


@dataclass(frozen=True)
class MissingQueryString:
    """The request had no ip query parameter."""


@dataclass(frozen=True)
class InvalidQueryString:
    """The ip query parameter is not a dotted-quad IPv4 address."""


@dataclass(frozen=True)
class UpstreamResolutionFailed:
    """The DNS-over-HTTPS resolver could not be reached or returned an error."""


@dataclass(frozen=True)
class VerifiedBot:
    """The PTR hostname belongs to Google's crawler domains."""

    hostname: str


@dataclass(frozen=True)
class UnverifiedBot:
    """The PTR hostname is outside Google's crawler domains."""

    hostname: str


@dataclass(frozen=True)
class NoPtrRecord:
    """The resolver returned no PTR answer for the reverse lookup."""


Outcome = Union[
    MissingQueryString,
    InvalidQueryString,
    UpstreamResolutionFailed,
    VerifiedBot,
    UnverifiedBot,
    NoPtrRecord,
]


@dataclass(frozen=True)
class RenderedOutcome:
    """HTTP-facing form of an outcome.

    Attributes:
        status: HTTP status code.
        result: Machine-readable tag ("yes", "no" or "error"), also sent in
            the x-googlebot-verified header.
        reason: Human-readable explanation.
    """

    status: int
    result: str
    reason: str

    def to_json(self) -> dict:
        """Convert to the JSON response body.

        Returns:
            dict: Body with result and reason keys.
        """
        return {"result": self.result, "reason": self.reason}


def render_outcome(outcome: Outcome) -> RenderedOutcome:
    """Map an outcome to its status, result tag and reason.

    Args:
        outcome: Verification outcome.

    Returns:
        RenderedOutcome: Response triple for the outcome.

    Examples:
        >>> render_outcome(VerifiedBot("crawl-66-249-66-1.googlebot.com."))
        RenderedOutcome(status=200, result='yes', reason='Reverse lookup is crawl-66-249-66-1.googlebot.com.')
    """
    match outcome:
        case MissingQueryString():
            return RenderedOutcome(400, "error", "Missing query string ?ip=a.b.c.d")
        case InvalidQueryString():
            return RenderedOutcome(400, "error", "Invalid query string ?ip=a.b.c.d")
        case UpstreamResolutionFailed():
            return RenderedOutcome(502, "error", "Google DNS failed")
        case VerifiedBot(hostname=hostname):
            return RenderedOutcome(200, "yes", f"Reverse lookup is {hostname}")
        case UnverifiedBot(hostname=hostname):
            return RenderedOutcome(
                200,
                "no",
                f"Reverse lookup is {hostname}, not an *.google.com or *.googlebot.com domain.",
            )
        case NoPtrRecord():
            return RenderedOutcome(200, "no", "No PTR Answer for this reverse lookup.")
        case _:
            assert_never(outcome)
