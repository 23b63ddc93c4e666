import math

import pytest

from sigma.errors import SigmaInternalError
from sigma.types import Nil, ValueKind, kind_of, format_value


@pytest.mark.parametrize(
    "value,kind",
    [
        (1.0, ValueKind.NUMBER),
        (-0.5, ValueKind.NUMBER),
        (True, ValueKind.BOOLEAN),
        (False, ValueKind.BOOLEAN),
        (Nil, ValueKind.NIL),
    ]
)
def test_kind_of(value, kind):
    assert kind_of(value) is kind


@pytest.mark.parametrize("value", [1, "1", None, [1.0]])
def test_kind_of_foreign_object(value):
    with pytest.raises(SigmaInternalError):
        kind_of(value)


@pytest.mark.parametrize(
    "value,text",
    [
        (2.0, "2.000000"),
        (-1.5, "-1.500000"),
        (1 / 3, "0.333333"),
        (math.inf, "inf"),
        (True, "true"),
        (False, "false"),
        (Nil, "nil"),
    ]
)
def test_format_value(value, text):
    assert format_value(value) == text


def test_nil_is_falsy_and_only_equal_to_itself():
    assert not Nil
    assert Nil == Nil
    assert Nil != 0.0
    assert repr(Nil) == "nil"
