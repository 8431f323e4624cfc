"""Parser for external authentication annotations."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from urllib.parse import urlsplit

from .parser import (
    AnnotationError,
    AnnotationParser,
    Ingress,
    LocationDeniedError,
    get_bool_annotation,
    get_string_annotation,
)

AUTH_URL = "ingress.kubernetes.io/auth-url"
AUTH_SIGNIN_URL = "ingress.kubernetes.io/auth-signin"
AUTH_METHOD = "ingress.kubernetes.io/auth-method"
AUTH_BODY = "ingress.kubernetes.io/auth-send-body"
AUTH_HEADERS = "ingress.kubernetes.io/auth-response-headers"

METHODS = ("GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "CONNECT", "OPTIONS", "TRACE")
_HEADER = re.compile(r"[a-zA-Z0-9\-_]+")
_PORT = re.compile(r"[0-9]*")


@dataclass(eq=False)
class External:
    """External authentication settings for an Ingress rule."""

    url: str = ""
    host: str = ""
    signin_url: str = ""
    method: str = ""
    send_body: bool = False
    response_headers: list[str] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, External):
            return NotImplemented
        return (
            self.url == other.url
            and self.host == other.host
            and self.signin_url == other.signin_url
            and self.method == other.method
            and self.send_body == other.send_body
            and all(h in other.response_headers for h in self.response_headers)
        )


def valid_method(method: str) -> bool:
    """Return True if method is a known HTTP method name."""
    return method in METHODS


def valid_header(header: str) -> bool:
    """Return True if header is a plausible header name."""
    return _HEADER.fullmatch(header) is not None


def _hostname(url: str) -> tuple[str, str]:
    """Return the host (with port) and bare hostname of an absolute URL."""
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise AnnotationError(str(exc)) from exc
    host = parts.netloc.rpartition("@")[2]
    if host.startswith("["):
        end = host.find("]")
        if end == -1:
            raise AnnotationError(f"missing ']' in host: {host}")
        if not host[end + 1:] == "" and not (
            host[end + 1] == ":" and _PORT.fullmatch(host[end + 2:])
        ):
            raise AnnotationError(f"invalid port in host: {host}")
        return host, host[1:end]
    name, colon, port = host.rpartition(":")
    if not colon:
        return host, host
    if not _PORT.fullmatch(port):
        raise AnnotationError(f"invalid port {colon}{port} after host")
    return host, name


class ExternalAuthParser(AnnotationParser):
    """Reads the settings for authenticating through an external URL."""

    def parse(self, ing: Ingress) -> External:
        """Return the external authentication configuration."""
        url = get_string_annotation(AUTH_URL, ing)
        if url == "":
            raise LocationDeniedError("an empty string is not a valid URL")

        try:
            signin = get_string_annotation(AUTH_SIGNIN_URL, ing)
        except AnnotationError:
            signin = ""

        host, hostname = _hostname(url)
        if urlsplit(url).scheme == "":
            raise LocationDeniedError("url scheme is empty")
        if host == "":
            raise LocationDeniedError("url host is empty")
        if ".." in host:
            raise LocationDeniedError("invalid url host")

        try:
            method = get_string_annotation(AUTH_METHOD, ing)
        except AnnotationError:
            method = ""
        if method and not valid_method(method):
            raise LocationDeniedError("invalid HTTP method")

        headers: list[str] = []
        try:
            header_list = get_string_annotation(AUTH_HEADERS, ing)
        except AnnotationError:
            header_list = ""
        for raw in header_list.split(",") if header_list else ():
            header = raw.strip()
            if not header:
                continue
            if not valid_header(header):
                raise LocationDeniedError("invalid headers list")
            headers.append(header)

        try:
            send_body = get_bool_annotation(AUTH_BODY, ing)
        except AnnotationError:
            send_body = False

        return External(
            url=url,
            host=hostname,
            signin_url=signin,
            method=method,
            send_body=send_body,
            response_headers=headers,
        )