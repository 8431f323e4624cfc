"""Parser for the service-upstream annotation."""

from __future__ import annotations

from .parser import AnnotationParser, Ingress, get_bool_annotation

ANNOTATION_SERVICE_UPSTREAM = "ingress.kubernetes.io/service-upstream"


class ServiceUpstreamParser(AnnotationParser):
    """Reads whether the service cluster IP should be used as the upstream."""

    def parse(self, ing: Ingress) -> bool:
        """Return the service-upstream flag."""
        return get_bool_annotation(ANNOTATION_SERVICE_UPSTREAM, ing)