from ingresskit.healthcheck import UPS_FAIL_TIMEOUT, UPS_MAX_FAILS, HealthCheckParser, Upstream
from ingresskit.parser import DefaultBackend, DefaultBackendResolver, Ingress


def make_parser():
    return HealthCheckParser(DefaultBackendResolver(DefaultBackend(upstream_fail_timeout=1)))


def test_ingress_health_check():
    ing = Ingress(name="foo", namespace="default", annotations={UPS_MAX_FAILS: "2"})
    result = make_parser().parse(ing)
    assert result.max_fails == 2
    assert result.fail_timeout == 1


def test_no_annotations_uses_defaults():
    ing = Ingress(name="foo", namespace="default")
    assert make_parser().parse(ing) == Upstream(max_fails=0, fail_timeout=1)


def test_both_annotations():
    ing = Ingress(
        name="foo",
        namespace="default",
        annotations={UPS_MAX_FAILS: "3", UPS_FAIL_TIMEOUT: "10"},
    )
    assert make_parser().parse(ing) == Upstream(3, 10)


def test_invalid_value_uses_default():
    ing = Ingress(name="foo", namespace="default", annotations={UPS_FAIL_TIMEOUT: "x"})
    assert make_parser().parse(ing) == Upstream(0, 1)