"""Parser for connection and request rate limit annotations."""

from __future__ import annotations

from dataclasses import dataclass, field

from .parser import AnnotationError, AnnotationParser, Ingress, get_int_annotation

LIMIT_IP = "ingress.kubernetes.io/limit-connections"
LIMIT_RPS = "ingress.kubernetes.io/limit-rps"

# burst allowance is this many times the configured limit
DEF_BURST = 5
# shared memory for each zone, in megabytes
DEF_SHARED_SIZE = 5


@dataclass
class Zone:
    """A rate limiting zone."""

    name: str = ""
    limit: int = 0
    burst: int = 0
    shared_size: int = 0


@dataclass
class RateLimit:
    """Limits on connections per address and requests per second."""

    connections: Zone = field(default_factory=Zone)
    rps: Zone = field(default_factory=Zone)


def _int_or_zero(name: str, ing: Ingress) -> int:
    try:
        return get_int_annotation(name, ing)
    except AnnotationError:
        return 0


class RateLimitParser(AnnotationParser):
    """Reads the rate limit annotations of an Ingress."""

    def parse(self, ing: Ingress) -> RateLimit:
        """Return the rate limit configuration; empty zones when unset."""
        rps = _int_or_zero(LIMIT_RPS, ing)
        conn = _int_or_zero(LIMIT_IP, ing)

        if rps == 0 and conn == 0:
            return RateLimit()

        zone_name = f"{ing.namespace}_{ing.name}"
        return RateLimit(
            connections=Zone(
                name=f"{zone_name}_conn",
                limit=conn,
                burst=conn * DEF_BURST,
                shared_size=DEF_SHARED_SIZE,
            ),
            rps=Zone(
                name=f"{zone_name}_rps",
                limit=rps,
                burst=rps * DEF_BURST,
                shared_size=DEF_SHARED_SIZE,
            ),
        )