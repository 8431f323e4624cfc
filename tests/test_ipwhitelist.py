import pytest

from ingresskit.ipwhitelist import WHITELIST, SourceRange, WhitelistParser
from ingresskit.parser import DefaultBackend, DefaultBackendResolver, Ingress, LocationDeniedError


def make_ingress(annotations):
    return Ingress(name="foo", namespace="default", annotations=annotations)


def test_parse_annotations():
    parser = WhitelistParser(DefaultBackendResolver())
    data = {WHITELIST: "10.0.0.0/24"}
    ing = make_ingress(data)

    assert parser.parse(ing).cidr == ["10.0.0.0/24"]

    data[WHITELIST] = "www"
    with pytest.raises(LocationDeniedError):
        parser.parse(ing)

    del data[WHITELIST]
    assert parser.parse(ing).cidr == []

    assert parser.parse(Ingress()).cidr == []

    data[WHITELIST] = "2.2.2.2/32,1.1.1.1/32,3.3.3.0/24"
    assert parser.parse(ing).cidr == ["1.1.1.1/32", "2.2.2.2/32", "3.3.3.0/24"]


def test_parse_annotations_with_default_config():
    defaults = ["4.4.4.0/24", "1.2.3.4/32"]
    parser = WhitelistParser(
        DefaultBackendResolver(DefaultBackend(whitelist_source_range=list(defaults)))
    )
    data = {WHITELIST: "10.0.0.0/24"}
    ing = make_ingress(data)

    assert parser.parse(ing).cidr == ["10.0.0.0/24"]

    data[WHITELIST] = "www"
    with pytest.raises(LocationDeniedError):
        parser.parse(ing)

    del data[WHITELIST]
    assert parser.parse(ing).cidr == sorted(defaults)
    assert parser.parse(Ingress()).cidr == sorted(defaults)

    data[WHITELIST] = "2.2.2.2/32,1.1.1.1/32,3.3.3.0/24"
    assert parser.parse(ing).cidr == ["1.1.1.1/32", "2.2.2.2/32", "3.3.3.0/24"]


def test_host_bits_are_masked_and_duplicates_removed():
    parser = WhitelistParser(DefaultBackendResolver())
    ing = make_ingress({WHITELIST: "10.0.0.7/24,10.0.0.0/24"})
    assert parser.parse(ing).cidr == ["10.0.0.0/24"]


@pytest.mark.parametrize("value", ["10.0.0.1", "", "10.0.0.0/33", "1.1.1.1/32,"])
def test_invalid_values_are_denied(value):
    parser = WhitelistParser(DefaultBackendResolver())
    with pytest.raises(LocationDeniedError):
        parser.parse(make_ingress({WHITELIST: value}))


def test_source_range_equality_ignores_order():
    assert SourceRange(["a", "b"]) == SourceRange(["b", "a"])
    assert not SourceRange(["a"]) == SourceRange(["a", "b"])
    assert not SourceRange(["a", "c"]) == SourceRange(["a", "b"])