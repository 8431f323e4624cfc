# ingresskit

ingresskit reads the annotations on an ingress resource and turns them into typed
configuration objects for a reverse proxy or load balancer. Each annotation family
has its own parser. An `AnnotationExtractor` runs all of them over one ingress and
collects the results. The package uses only the standard library.

## Installation

```
pip install ingresskit
```

To install the test dependencies as well:

```
pip install "ingresskit[test]"
```

## Modules

### `ingresskit.parser`

This module holds the shared building blocks:

- `Ingress`: a dataclass with `name`, `namespace` and `annotations`. The
  annotations are a dict, or `None`.
- `DefaultBackend`: the controller-wide defaults that parsers fall back to.
- `DefaultBackendResolver`: wraps a `DefaultBackend`, which `get_default_backend()`
  returns.
- `AnnotationParser`: the abstract base class. Each parser implements `parse(ing)`.
- The helpers `get_bool_annotation`, `get_string_annotation` and
  `get_int_annotation`.

The helpers raise errors as follows:

- `MissingAnnotationsError` when the ingress has no annotations or lacks the
  requested one.
- `InvalidAnnotationNameError` when the name is empty.
- `InvalidAnnotationContentError` when the value cannot be converted.

Booleans accept `1`, `t`, `T`, `TRUE`, `true` and `True`, and the matching false
forms. Integers are decimal and must fit in 64 bits. All of these errors, and
`LocationDeniedError`, derive from `AnnotationError`.

### `ingresskit.ingress_class`

`is_valid(ing, controller, default_class)` decides whether the controller should
handle an ingress, based on `kubernetes.io/ingress.class`. The ingress is accepted
in two cases:

- its class matches `controller`;
- it has no class, and `controller` equals `default_class`.

### Annotation parsers

Each parser has a `parse(ing)` method.

| Parser | Module | Result |
| --- | --- | --- |
| `CorsParser` | `ingresskit.cors` | `bool` |
| `ServiceUpstreamParser` | `ingresskit.serviceupstream` | `bool` |
| `SnippetParser` | `ingresskit.snippet` | `str` |
| `SSLPassthroughParser` | `ingresskit.sslpassthrough` | `bool` |
| `PortInRedirectParser(resolver)` | `ingresskit.portinredirect` | `bool`, default on failure |
| `HealthCheckParser(resolver)` | `ingresskit.healthcheck` | `Upstream` |
| `RateLimitParser` | `ingresskit.ratelimit` | `RateLimit` of two `Zone` values |
| `RewriteParser(resolver)` | `ingresskit.rewrite` | `Redirect` |
| `ProxyParser(resolver)` | `ingresskit.proxy` | `ProxyConfiguration` |
| `WhitelistParser(resolver)` | `ingresskit.ipwhitelist` | `SourceRange` with sorted CIDRs |
| `ExternalAuthParser` | `ingresskit.authreq` | `External` |
| `AffinityParser` | `ingresskit.sessionaffinity` | `AffinityConfig` holding a `CookieConfig` |

`ingresskit.authreq` also provides `valid_method` and `valid_header`.
`ingresskit.sessionaffinity` also provides `cookie_affinity_parse`, which falls back
to the cookie name `INGRESSCOOKIE` and the hash `md5`.

### `ingresskit.hostmatch`

- `is_host_valid(host, common_names)` reports whether any certificate name covers
  the host.
- `match_hostnames(pattern, host)` supports `*` as the first label of the pattern.
- `to_lower_ascii(value)` lower-cases ASCII letters only.

### `ingresskit.extractor`

`AnnotationExtractor(resolver)` runs every parser over an ingress.

`extract(ing)` returns a dict keyed by these names:

- `ExternalAuth`
- `EnableCORS`
- `HealthCheck`
- `Whitelist`
- `UsePortInRedirects`
- `Proxy`
- `RateLimit`
- `Redirect`
- `ServiceUpstream`
- `SessionAffinity`
- `SSLPassthrough`
- `ConfigurationSnippet`

Annotations that are missing are left out. The first parse error is stored under
`"Denied"` instead of being raised, and later errors are only logged.

The extractor also has shortcuts that each return a single value:

- `service_upstream(ing)`
- `health_check(ing)`
- `ssl_passthrough(ing)`
- `session_affinity(ing)`

## Example

```python
from ingresskit.parser import DefaultBackend, DefaultBackendResolver, Ingress, get_int_annotation
from ingresskit.proxy import ProxyParser
from ingresskit.ratelimit import RateLimitParser

ing = Ingress(
    name="foo",
    namespace="default",
    annotations={"ingress.kubernetes.io/limit-rps": "100"},
)

print(get_int_annotation("ingress.kubernetes.io/limit-rps", ing))  # 100

limits = RateLimitParser().parse(ing)
print(limits.rps.name, limits.rps.limit, limits.rps.burst)  # default_foo_rps 100 500

resolver = DefaultBackendResolver(
    DefaultBackend(proxy_connect_timeout=10, proxy_body_size="1m")
)
config = ProxyParser(resolver).parse(ing)
print(config.connect_timeout, config.body_size)  # 10 1m
```

An annotation that is present but unacceptable raises an error:

- A malformed whitelist CIDR raises `LocationDeniedError`.
- An external-auth URL that has no scheme, has no host, or contains `..` in the
  host also raises `LocationDeniedError`.

## What it does not do

ingresskit only parses annotations. The following are outside its scope:

- It does not connect to a cluster or watch resources.
- It does not build or reload proxy configuration.
- It does not manage TLS certificates or secrets.
- It has no command-line tool and no HTTP endpoints.
- It has no parsers for basic/digest authentication, client-certificate
  authentication or secure-upstream annotations.

## Running the tests

```
pytest
```