"""Parser for reverse proxy tuning annotations."""

from __future__ import annotations

from dataclasses import dataclass

from .parser import (
    AnnotationError,
    AnnotationParser,
    DefaultBackendResolver,
    Ingress,
    get_int_annotation,
    get_string_annotation,
)

BODY_SIZE = "ingress.kubernetes.io/proxy-body-size"
CONNECT = "ingress.kubernetes.io/proxy-connect-timeout"
SEND = "ingress.kubernetes.io/proxy-send-timeout"
READ = "ingress.kubernetes.io/proxy-read-timeout"
BUFFER_SIZE = "ingress.kubernetes.io/proxy-buffer-size"
COOKIE_PATH = "ingress.kubernetes.io/proxy-cookie-path"
COOKIE_DOMAIN = "ingress.kubernetes.io/proxy-cookie-domain"
NEXT_UPSTREAM = "ingress.kubernetes.io/proxy-next-upstream"


@dataclass
class ProxyConfiguration:
    """Timeouts and buffer settings used when proxying to the upstream servers."""

    body_size: str = ""
    connect_timeout: int = 0
    send_timeout: int = 0
    read_timeout: int = 0
    buffer_size: str = ""
    cookie_domain: str = ""
    cookie_path: str = ""
    next_upstream: str = ""


def _int_or(name: str, ing: Ingress, default: int) -> int:
    try:
        return get_int_annotation(name, ing)
    except AnnotationError:
        return default


def _string_or(name: str, ing: Ingress, default: str) -> str:
    try:
        value = get_string_annotation(name, ing)
    except AnnotationError:
        return default
    return value or default


class ProxyParser(AnnotationParser):
    """Reads proxy settings, falling back to the default backend for each one."""

    def __init__(self, resolver: DefaultBackendResolver) -> None:
        self.resolver = resolver

    def parse(self, ing: Ingress) -> ProxyConfiguration:
        """Return the proxy configuration of the Ingress."""
        defaults = self.resolver.get_default_backend()
        return ProxyConfiguration(
            body_size=_string_or(BODY_SIZE, ing, defaults.proxy_body_size),
            connect_timeout=_int_or(CONNECT, ing, defaults.proxy_connect_timeout),
            send_timeout=_int_or(SEND, ing, defaults.proxy_send_timeout),
            read_timeout=_int_or(READ, ing, defaults.proxy_read_timeout),
            buffer_size=_string_or(BUFFER_SIZE, ing, defaults.proxy_buffer_size),
            cookie_domain=_string_or(COOKIE_DOMAIN, ing, defaults.proxy_cookie_domain),
            cookie_path=_string_or(COOKIE_PATH, ing, defaults.proxy_cookie_path),
            next_upstream=_string_or(NEXT_UPSTREAM, ing, defaults.proxy_next_upstream),
        )