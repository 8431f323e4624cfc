"""Runs every annotation parser over an Ingress and collects the results."""

from __future__ import annotations

import logging
from typing import Any

from .authreq import ExternalAuthParser
from .cors import CorsParser
from .healthcheck import HealthCheckParser, Upstream
from .ipwhitelist import WhitelistParser
from .parser import (
    AnnotationError,
    AnnotationParser,
    DefaultBackendResolver,
    Ingress,
    MissingAnnotationsError,
)
from .portinredirect import PortInRedirectParser
from .proxy import ProxyParser
from .ratelimit import RateLimitParser
from .rewrite import RewriteParser
from .serviceupstream import ServiceUpstreamParser
from .sessionaffinity import AffinityConfig, AffinityParser
from .snippet import SnippetParser
from .sslpassthrough import SSLPassthroughParser

DENIED_KEY_NAME = "Denied"

EXTERNAL_AUTH = "ExternalAuth"
ENABLE_CORS = "EnableCORS"
HEALTH_CHECK = "HealthCheck"
WHITELIST = "Whitelist"
USE_PORT_IN_REDIRECTS = "UsePortInRedirects"
PROXY = "Proxy"
RATE_LIMIT = "RateLimit"
REDIRECT = "Redirect"
SERVICE_UPSTREAM = "ServiceUpstream"
SESSION_AFFINITY = "SessionAffinity"
SSL_PASSTHROUGH = "SSLPassthrough"
CONFIGURATION_SNIPPET = "ConfigurationSnippet"

_log = logging.getLogger(__name__)


class AnnotationExtractor:
    """Holds one parser per kind of annotation and applies them to Ingresses."""

    def __init__(self, resolver: DefaultBackendResolver) -> None:
        self.resolver = resolver
        self.parsers: dict[str, AnnotationParser] = {
            EXTERNAL_AUTH: ExternalAuthParser(),
            ENABLE_CORS: CorsParser(),
            HEALTH_CHECK: HealthCheckParser(resolver),
            WHITELIST: WhitelistParser(resolver),
            USE_PORT_IN_REDIRECTS: PortInRedirectParser(resolver),
            PROXY: ProxyParser(resolver),
            RATE_LIMIT: RateLimitParser(),
            REDIRECT: RewriteParser(resolver),
            SERVICE_UPSTREAM: ServiceUpstreamParser(),
            SESSION_AFFINITY: AffinityParser(),
            SSL_PASSTHROUGH: SSLPassthroughParser(),
            CONFIGURATION_SNIPPET: SnippetParser(),
        }

    def extract(self, ing: Ingress) -> dict[str, Any]:
        """Return the parsed value of every annotation present on the Ingress.

        Missing annotations are left out. The first parse failure is stored
        under ``DENIED_KEY_NAME``; later failures are only logged.
        """
        result: dict[str, Any] = {}
        for name, parser in self.parsers.items():
            try:
                value = parser.parse(ing)
            except MissingAnnotationsError:
                continue
            except AnnotationError as exc:
                if DENIED_KEY_NAME not in result:
                    result[DENIED_KEY_NAME] = exc
                    _log.error(
                        "error reading %s annotation in Ingress %s/%s: %s",
                        name, ing.namespace, ing.name, exc,
                    )
                else:
                    _log.debug(
                        "error reading %s annotation in Ingress %s/%s: %s",
                        name, ing.namespace, ing.name, exc,
                    )
                continue
            _log.debug(
                "annotation %s in Ingress %s/%s: %r", name, ing.namespace, ing.name, value
            )
            if value is not None:
                result[name] = value
        return result

    def service_upstream(self, ing: Ingress) -> bool:
        """Return whether the service cluster IP is used as upstream."""
        try:
            return self.parsers[SERVICE_UPSTREAM].parse(ing)
        except AnnotationError:
            return False

    def health_check(self, ing: Ingress) -> Upstream:
        """Return the upstream failure limits of the Ingress."""
        return self.parsers[HEALTH_CHECK].parse(ing)

    def ssl_passthrough(self, ing: Ingress) -> bool:
        """Return whether TLS is passed through to the backend."""
        try:
            return self.parsers[SSL_PASSTHROUGH].parse(ing)
        except AnnotationError:
            return False

    def session_affinity(self, ing: Ingress) -> AffinityConfig:
        """Return the session affinity configuration of the Ingress."""
        return self.parsers[SESSION_AFFINITY].parse(ing)