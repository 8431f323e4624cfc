"""Decides whether an Ingress belongs to this controller's class."""

from __future__ import annotations

import logging

from .parser import (
    AnnotationError,
    Ingress,
    MissingAnnotationsError,
    get_string_annotation,
)

INGRESS_KEY = "kubernetes.io/ingress.class"

_log = logging.getLogger(__name__)


def is_valid(ing: Ingress, controller: str, default_class: str) -> bool:
    """Return True if the Ingress should be handled by the given controller class."""
    try:
        ingress_class = get_string_annotation(INGRESS_KEY, ing)
    except MissingAnnotationsError:
        ingress_class = ""
    except AnnotationError as exc:
        _log.warning("unexpected error reading ingress annotation: %s", exc)
        ingress_class = ""

    if ingress_class == "" and controller == default_class:
        return True
    return ingress_class == controller