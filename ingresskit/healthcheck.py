"""Parser for upstream health-check annotations."""

from __future__ import annotations

from dataclasses import dataclass

from .parser import (
    AnnotationError,
    AnnotationParser,
    DefaultBackendResolver,
    Ingress,
    get_int_annotation,
)

UPS_MAX_FAILS = "ingress.kubernetes.io/upstream-max-fails"
UPS_FAIL_TIMEOUT = "ingress.kubernetes.io/upstream-fail-timeout"


@dataclass
class Upstream:
    """Failure limits applied to upstream servers."""

    max_fails: int = 0
    fail_timeout: int = 0


class HealthCheckParser(AnnotationParser):
    """Reads upstream failure limits, falling back to the default backend."""

    def __init__(self, resolver: DefaultBackendResolver) -> None:
        self.resolver = resolver

    def parse(self, ing: Ingress) -> Upstream:
        """Return the upstream check parameters."""
        defaults = self.resolver.get_default_backend()
        if ing.annotations is None:
            return Upstream(defaults.upstream_max_fails, defaults.upstream_fail_timeout)

        try:
            max_fails = get_int_annotation(UPS_MAX_FAILS, ing)
        except AnnotationError:
            max_fails = defaults.upstream_max_fails

        try:
            fail_timeout = get_int_annotation(UPS_FAIL_TIMEOUT, ing)
        except AnnotationError:
            fail_timeout = defaults.upstream_fail_timeout

        return Upstream(max_fails, fail_timeout)