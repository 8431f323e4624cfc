"""Parser for the use-port-in-redirects annotation."""

from __future__ import annotations

from .parser import (
    AnnotationError,
    AnnotationParser,
    DefaultBackendResolver,
    Ingress,
    get_bool_annotation,
)

ANNOTATION = "ingress.kubernetes.io/use-port-in-redirects"


class PortInRedirectParser(AnnotationParser):
    """Reads whether redirects should include the port, with a default fallback."""

    def __init__(self, resolver: DefaultBackendResolver) -> None:
        self.resolver = resolver

    def parse(self, ing: Ingress) -> bool:
        """Return the flag, or the default backend's value if unusable."""
        try:
            return get_bool_annotation(ANNOTATION, ing)
        except AnnotationError:
            return self.resolver.get_default_backend().use_port_in_redirects