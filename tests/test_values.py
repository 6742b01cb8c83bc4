import math

import pytest

from values import format_number, is_number, stringify


@pytest.mark.parametrize(
    "value, text",
    [
        (7.0, "7"),
        (2.5, "2.5"),
        (-0.5, "-0.5"),
        (0.1 + 0.2, "0.30000000000000004"),
        (1e21, "1000000000000000000000"),
        (1e-7, "0.0000001"),
        (-0.0, "-0"),
        (math.inf, "inf"),
        (-math.inf, "-inf"),
        (math.nan, "NaN"),
    ],
)
def test_format_number(value, text):
    assert format_number(value) == text


def test_stringify_non_numbers():
    assert stringify(None) == "nil"
    assert stringify(True) == "true"
    assert stringify(False) == "false"
    assert stringify("verbatim \"text\"") == 'verbatim "text"'


def test_booleans_are_not_numbers():
    assert is_number(1.0)
    assert not is_number(True)
    assert not is_number("1")
    assert not is_number(None)
