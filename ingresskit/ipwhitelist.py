"""Parser for the whitelist-source-range annotation."""

from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass, field

from .parser import (
    AnnotationParser,
    DefaultBackendResolver,
    Ingress,
    LocationDeniedError,
    MissingAnnotationsError,
    get_string_annotation,
)

WHITELIST = "ingress.kubernetes.io/whitelist-source-range"

_PREFIX = re.compile(r"[0-9]+")


@dataclass(eq=False)
class SourceRange:
    """The client networks allowed to reach a location."""

    cidr: list[str] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SourceRange):
            return NotImplemented
        if len(self.cidr) != len(other.cidr):
            return False
        return all(entry in other.cidr for entry in self.cidr)


def _parse_cidr(text: str) -> str:
    _, sep, prefix = text.partition("/")
    if not sep or not _PREFIX.fullmatch(prefix):
        raise ValueError(f"invalid CIDR address: {text}")
    try:
        network = ipaddress.ip_network(text, strict=False)
    except ValueError:
        raise ValueError(f"invalid CIDR address: {text}") from None
    return str(network)


class WhitelistParser(AnnotationParser):
    """Reads comma separated CIDRs, e.g. ``18.0.0.0/8,56.0.0.0/8``."""

    def __init__(self, resolver: DefaultBackendResolver) -> None:
        self.resolver = resolver

    def parse(self, ing: Ingress) -> SourceRange:
        """Return the allowed networks, sorted; the default list when unset."""
        default_range = sorted(self.resolver.get_default_backend().whitelist_source_range)

        try:
            value = get_string_annotation(WHITELIST, ing)
        except MissingAnnotationsError:
            return SourceRange(cidr=default_range)

        try:
            networks = {_parse_cidr(entry) for entry in value.split(",")}
        except ValueError as exc:
            raise LocationDeniedError(
                f"the annotation does not contain a valid IP address or network: {exc}"
            ) from exc

        return SourceRange(cidr=sorted(networks))