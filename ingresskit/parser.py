"""Ingress model, default-backend settings and typed annotation lookups."""

from __future__ import annotations

import abc
import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class AnnotationError(Exception):
    """Base class for errors raised while reading Ingress annotations."""


class MissingAnnotationsError(AnnotationError):
    """The Ingress has no annotations, or not the one requested."""

    def __init__(self, message: str = "ingress rule without annotations") -> None:
        super().__init__(message)


class InvalidAnnotationNameError(AnnotationError):
    """An empty annotation name was requested."""

    def __init__(self, message: str = "invalid annotation name") -> None:
        super().__init__(message)


class InvalidAnnotationContentError(AnnotationError):
    """The annotation exists but its value cannot be converted."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(
            f"the annotation {name} does not contain a valid value ({value})"
        )
        self.name = name
        self.value = value


class LocationDeniedError(AnnotationError):
    """The annotation content means the location must be denied."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


@dataclass
class Ingress:
    """The parts of an Ingress resource that annotation parsers look at."""

    name: str = ""
    namespace: str = ""
    annotations: Optional[dict[str, str]] = None


@dataclass
class DefaultBackend:
    """Controller-wide defaults used when an annotation is absent."""

    upstream_max_fails: int = 0
    upstream_fail_timeout: int = 0
    use_port_in_redirects: bool = False
    ssl_redirect: bool = False
    force_ssl_redirect: bool = False
    proxy_body_size: str = ""
    proxy_connect_timeout: int = 0
    proxy_send_timeout: int = 0
    proxy_read_timeout: int = 0
    proxy_buffer_size: str = ""
    proxy_cookie_domain: str = ""
    proxy_cookie_path: str = ""
    proxy_next_upstream: str = ""
    whitelist_source_range: list[str] = field(default_factory=list)


@dataclass
class DefaultBackendResolver:
    """Supplies the default backend settings to annotation parsers."""

    backend: DefaultBackend = field(default_factory=DefaultBackend)

    def get_default_backend(self) -> DefaultBackend:
        """Return the default backend settings."""
        return self.backend


class AnnotationParser(abc.ABC):
    """Reads one kind of configuration from an Ingress's annotations."""

    @abc.abstractmethod
    def parse(self, ing: Ingress) -> Any:
        """Return the parsed value, raising AnnotationError on failure."""


def _checked_annotations(name: str, ing: Optional[Ingress]) -> Mapping[str, str]:
    if ing is None or not ing.annotations:
        raise MissingAnnotationsError()
    if name == "":
        raise InvalidAnnotationNameError()
    return ing.annotations


def _lookup(name: str, ing: Optional[Ingress]) -> str:
    annotations = _checked_annotations(name, ing)
    try:
        return annotations[name]
    except KeyError:
        raise MissingAnnotationsError() from None


def get_bool_annotation(name: str, ing: Optional[Ingress]) -> bool:
    """Return the named annotation as a boolean."""
    value = _lookup(name, ing)
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise InvalidAnnotationContentError(name, value)


def get_string_annotation(name: str, ing: Optional[Ingress]) -> str:
    """Return the named annotation as a string."""
    return _lookup(name, ing)


def get_int_annotation(name: str, ing: Optional[Ingress]) -> int:
    """Return the named annotation as a decimal integer."""
    value = _lookup(name, ing)
    if not _INT_PATTERN.fullmatch(value):
        raise InvalidAnnotationContentError(name, value)
    number = int(value)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise InvalidAnnotationContentError(name, value)
    return number