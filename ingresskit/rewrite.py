"""Parser for rewrite and redirect annotations."""

from __future__ import annotations

from dataclasses import dataclass

from .parser import (
    AnnotationError,
    AnnotationParser,
    DefaultBackendResolver,
    Ingress,
    get_bool_annotation,
    get_string_annotation,
)

REWRITE_TO = "ingress.kubernetes.io/rewrite-target"
ADD_BASE_URL = "ingress.kubernetes.io/add-base-url"
SSL_REDIRECT = "ingress.kubernetes.io/ssl-redirect"
FORCE_SSL_REDIRECT = "ingress.kubernetes.io/force-ssl-redirect"
APP_ROOT = "ingress.kubernetes.io/app-root"


@dataclass
class Redirect:
    """Per-location redirect configuration."""

    target: str = ""
    add_base_url: bool = False
    ssl_redirect: bool = False
    force_ssl_redirect: bool = False
    app_root: str = ""


class RewriteParser(AnnotationParser):
    """Reads the redirect settings of an Ingress."""

    def __init__(self, resolver: DefaultBackendResolver) -> None:
        self.resolver = resolver

    def parse(self, ing: Ingress) -> Redirect:
        """Return the redirect configuration."""
        try:
            target = get_string_annotation(REWRITE_TO, ing)
        except AnnotationError:
            target = ""
        try:
            ssl_redirect = get_bool_annotation(SSL_REDIRECT, ing)
        except AnnotationError:
            ssl_redirect = self.resolver.get_default_backend().ssl_redirect
        try:
            force_ssl_redirect = get_bool_annotation(FORCE_SSL_REDIRECT, ing)
        except AnnotationError:
            force_ssl_redirect = self.resolver.get_default_backend().force_ssl_redirect
        try:
            add_base_url = get_bool_annotation(ADD_BASE_URL, ing)
        except AnnotationError:
            add_base_url = False
        try:
            app_root = get_string_annotation(APP_ROOT, ing)
        except AnnotationError:
            app_root = ""
        return Redirect(
            target=target,
            add_base_url=add_base_url,
            ssl_redirect=ssl_redirect,
            force_ssl_redirect=force_ssl_redirect,
            app_root=app_root,
        )