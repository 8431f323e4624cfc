"""Parser for the ssl-passthrough annotation."""

from __future__ import annotations

from .parser import AnnotationParser, Ingress, MissingAnnotationsError, get_bool_annotation

PASSTHROUGH = "ingress.kubernetes.io/ssl-passthrough"


class SSLPassthroughParser(AnnotationParser):
    """Reads whether TLS should be passed through to the backend."""

    def parse(self, ing: Ingress) -> bool:
        """Return the ssl-passthrough flag."""
        if ing.annotations is None:
            raise MissingAnnotationsError()
        return get_bool_annotation(PASSTHROUGH, ing)