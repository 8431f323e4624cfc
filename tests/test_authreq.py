import pytest

from ingresskit.authreq import (
    AUTH_BODY,
    AUTH_HEADERS,
    AUTH_METHOD,
    AUTH_SIGNIN_URL,
    AUTH_URL,
    External,
    ExternalAuthParser,
    valid_header,
    valid_method,
)
from ingresskit.parser import Ingress, LocationDeniedError, MissingAnnotationsError


def make_ingress(annotations):
    return Ingress(name="foo", namespace="default", annotations=annotations)


@pytest.mark.parametrize(
    "title,url,signin,method,send_body,exp_err",
    [
        ("empty", "", "", "", False, True),
        ("no scheme", "bar", "bar", "", False, True),
        ("invalid host", "http://", "http://", "", False, True),
        ("invalid host (multiple dots)", "http://foo..bar.com", "http://foo..bar.com", "", False, True),
        ("valid URL", "http://bar.foo.com/external-auth", "http://bar.foo.com/external-auth", "", False, False),
        ("valid URL - send body", "http://foo.com/external-auth", "http://foo.com/external-auth", "POST", True, False),
        ("valid URL - send body", "http://foo.com/external-auth", "http://foo.com/external-auth", "GET", True, False),
    ],
)
def test_annotations(title, url, signin, method, send_body, exp_err):
    ing = make_ingress(
        {
            AUTH_URL: url,
            AUTH_SIGNIN_URL: signin,
            AUTH_BODY: "true" if send_body else "false",
            AUTH_METHOD: method,
        }
    )
    if exp_err:
        with pytest.raises(LocationDeniedError):
            ExternalAuthParser().parse(ing)
        return
    u = ExternalAuthParser().parse(ing)
    assert u.url == url
    assert u.signin_url == signin
    assert u.method == method
    assert u.send_body == send_body


@pytest.mark.parametrize(
    "title,headers,parsed,exp_err",
    [
        ("single header", "h1", ["h1"], False),
        ("nothing", "", [], False),
        ("spaces", "  ", [], False),
        ("two headers", "1,2", ["1", "2"], False),
        ("two headers and empty entries", ",1,,2,", ["1", "2"], False),
        ("header with spaces", "1 2", [], True),
        ("header with other bad symbols", "1+2", [], True),
    ],
)
def test_header_annotations(title, headers, parsed, exp_err):
    ing = make_ingress({AUTH_URL: "http://goog.url", AUTH_HEADERS: headers, AUTH_METHOD: "GET"})
    if exp_err:
        with pytest.raises(LocationDeniedError):
            ExternalAuthParser().parse(ing)
        return
    assert ExternalAuthParser().parse(ing).response_headers == parsed


def test_host_is_extracted_without_port():
    ing = make_ingress({AUTH_URL: "https://Auth.Example.com:8443/check"})
    assert ExternalAuthParser().parse(ing).host == "Auth.Example.com"


def test_missing_url_raises():
    with pytest.raises(MissingAnnotationsError):
        ExternalAuthParser().parse(make_ingress({AUTH_METHOD: "GET"}))


def test_invalid_method_denied():
    ing = make_ingress({AUTH_URL: "http://foo.com/auth", AUTH_METHOD: "FETCH"})
    with pytest.raises(LocationDeniedError):
        ExternalAuthParser().parse(ing)


def test_valid_method_and_header():
    assert valid_method("PATCH") is True
    assert valid_method("") is False
    assert valid_method("get") is False
    assert valid_header("X-Auth_User1") is True
    assert valid_header("X Auth") is False
    assert valid_header("") is False


def test_external_equality_checks_headers_subset():
    a = External(url="u", response_headers=["a"])
    b = External(url="u", response_headers=["a", "b"])
    assert a == b
    assert not b == a
    assert not External(url="u") == External(url="v")