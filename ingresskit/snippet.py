"""Parser for the configuration-snippet annotation."""

from __future__ import annotations

from .parser import AnnotationParser, Ingress, get_string_annotation

ANNOTATION = "ingress.kubernetes.io/configuration-snippet"


class SnippetParser(AnnotationParser):
    """Reads a configuration fragment to include inside the rule's locations."""

    def parse(self, ing: Ingress) -> str:
        """Return the configuration snippet."""
        return get_string_annotation(ANNOTATION, ing)