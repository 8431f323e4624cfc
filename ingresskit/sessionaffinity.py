"""Parser for session affinity annotations."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from .parser import AnnotationError, AnnotationParser, Ingress, get_string_annotation

ANNOTATION_AFFINITY_TYPE = "ingress.kubernetes.io/affinity"
ANNOTATION_AFFINITY_COOKIE_NAME = "ingress.kubernetes.io/session-cookie-name"
DEFAULT_AFFINITY_COOKIE_NAME = "INGRESSCOOKIE"
ANNOTATION_AFFINITY_COOKIE_HASH = "ingress.kubernetes.io/session-cookie-hash"
DEFAULT_AFFINITY_COOKIE_HASH = "md5"

_COOKIE_HASH = re.compile(r"index|md5|sha1")

_log = logging.getLogger(__name__)


@dataclass
class CookieConfig:
    """Settings of cookie based affinity."""

    name: str = ""
    hash: str = ""


@dataclass
class AffinityConfig:
    """Session affinity settings of an Ingress."""

    affinity_type: str = ""
    cookie_config: CookieConfig = field(default_factory=CookieConfig)


def cookie_affinity_parse(ing: Ingress) -> CookieConfig:
    """Return the cookie settings, using defaults for missing or invalid values."""
    try:
        name = get_string_annotation(ANNOTATION_AFFINITY_COOKIE_NAME, ing)
    except AnnotationError:
        name = ""
    if not name:
        _log.debug("Ingress %s: no cookie name, using %s", ing.name, DEFAULT_AFFINITY_COOKIE_NAME)
        name = DEFAULT_AFFINITY_COOKIE_NAME

    try:
        hash_name = get_string_annotation(ANNOTATION_AFFINITY_COOKIE_HASH, ing)
    except AnnotationError:
        hash_name = ""
    if not _COOKIE_HASH.fullmatch(hash_name):
        _log.debug("Ingress %s: invalid cookie hash, using %s", ing.name, DEFAULT_AFFINITY_COOKIE_HASH)
        hash_name = DEFAULT_AFFINITY_COOKIE_HASH

    return CookieConfig(name=name, hash=hash_name)


class AffinityParser(AnnotationParser):
    """Reads the affinity directives of an Ingress."""

    def parse(self, ing: Ingress) -> AffinityConfig:
        """Return the affinity configuration; empty when no affinity is set."""
        try:
            affinity_type = get_string_annotation(ANNOTATION_AFFINITY_TYPE, ing)
        except AnnotationError:
            affinity_type = ""

        if affinity_type == "cookie":
            cookie = cookie_affinity_parse(ing)
        else:
            _log.debug("no affinity configured for Ingress %s", ing.name)
            cookie = CookieConfig()
        return AffinityConfig(affinity_type=affinity_type, cookie_config=cookie)