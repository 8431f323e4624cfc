import pytest

from ingresskit.ingress_class import INGRESS_KEY, is_valid
from ingresskit.parser import Ingress


@pytest.mark.parametrize(
    "ingress,controller,default_class,expected",
    [
        ("", "", "nginx", True),
        ("", "nginx", "nginx", True),
        ("nginx", "nginx", "nginx", True),
        ("custom", "custom", "nginx", True),
        ("", "killer", "nginx", False),
        ("", "", "nginx", True),
        ("custom", "nginx", "nginx", False),
    ],
)
def test_is_valid_class(ingress, controller, default_class, expected):
    ing = Ingress(name="foo", namespace="default", annotations={INGRESS_KEY: ingress})
    assert is_valid(ing, controller, default_class) is expected


def test_no_annotations_uses_default():
    ing = Ingress(name="foo", namespace="default")
    assert is_valid(ing, "nginx", "nginx") is True
    assert is_valid(ing, "custom", "nginx") is False