"""Parser for the enable-cors annotation."""

from __future__ import annotations

from .parser import AnnotationParser, Ingress, get_bool_annotation

ANNOTATION = "ingress.kubernetes.io/enable-cors"


class CorsParser(AnnotationParser):
    """Reads whether the locations should allow CORS."""

    def parse(self, ing: Ingress) -> bool:
        """Return the enable-cors flag."""
        return get_bool_annotation(ANNOTATION, ing)