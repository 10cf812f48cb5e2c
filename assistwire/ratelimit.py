"""Rate limit information carried in API response headers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from fractions import Fraction
from typing import Any, Mapping

_NANOSECONDS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "μs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60_000_000_000,
    "h": 3_600_000_000_000,
}
_COMPONENT = re.compile(r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h)")
_MAX_NANOSECONDS = 2**63 - 1
_INTEGER = re.compile(r"[+-]?\d+")


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as ``"1h2m3.5s"`` or ``"300ms"``.

    Raises ValueError for empty input, missing units or unknown units.
    """
    rest = text
    sign = 1
    if rest and rest[0] in "+-":
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    if rest == "0":
        return timedelta(0)
    if not rest:
        raise ValueError(f"invalid duration {text!r}")

    total = Fraction(0)
    position = 0
    while position < len(rest):
        match = _COMPONENT.match(rest, position)
        if match is None:
            raise ValueError(f"invalid duration {text!r}")
        number = match.group(1)
        if number.endswith("."):
            number += "0"
        total += Fraction(number) * _NANOSECONDS[match.group(2)]
        position = match.end()

    nanoseconds = int(total)
    if nanoseconds > _MAX_NANOSECONDS:
        raise ValueError(f"invalid duration {text!r}")
    return sign * timedelta(microseconds=int(Fraction(nanoseconds, 1000)))


class ResetTime(str):
    """A reset interval as sent by the server, e.g. ``"6m0s"``."""

    def time(self) -> datetime:
        """Return the moment of reset; an unparsable value means now."""
        try:
            delay = parse_duration(str(self))
        except ValueError:
            delay = timedelta(0)
        return datetime.now() + delay


@dataclass(frozen=True)
class RateLimitHeaders:
    """The ``x-ratelimit-*`` response headers."""

    limit_requests: int = 0
    limit_tokens: int = 0
    remaining_requests: int = 0
    remaining_tokens: int = 0
    reset_requests: ResetTime = ResetTime("")
    reset_tokens: ResetTime = ResetTime("")


def _to_int(value: str) -> int:
    return int(value) if _INTEGER.fullmatch(value) else 0


def new_rate_limit_headers(headers: Mapping[str, Any]) -> RateLimitHeaders:
    """Read rate limit values from a header mapping; absent or invalid numbers give 0."""
    lowered: dict[str, str] = {}
    for key, value in headers.items():
        if isinstance(value, (list, tuple)):
            value = value[0] if value else ""
        lowered.setdefault(str(key).lower(), str(value))

    return RateLimitHeaders(
        limit_requests=_to_int(lowered.get("x-ratelimit-limit-requests", "")),
        limit_tokens=_to_int(lowered.get("x-ratelimit-limit-tokens", "")),
        remaining_requests=_to_int(lowered.get("x-ratelimit-remaining-requests", "")),
        remaining_tokens=_to_int(lowered.get("x-ratelimit-remaining-tokens", "")),
        reset_requests=ResetTime(lowered.get("x-ratelimit-reset-requests", "")),
        reset_tokens=ResetTime(lowered.get("x-ratelimit-reset-tokens", "")),
    )