import math

import pytest

from money_parser.utils.numeric_tools import parse_float_literal


@pytest.mark.parametrize(
    "text, expected",
    [
        ("100", 100.0),
        ("42.4", 42.4),
        ("-3.5", -3.5),
        ("+2", 2.0),
        (".5", 0.5),
        ("10.", 10.0),
        ("1e3", 1000.0),
        ("2.5E-2", 0.025),
        ("inf", math.inf),
        ("-Infinity", -math.inf),
    ],
)
def test_parse_float_literal_accepts(text, expected):
    assert parse_float_literal(text) == expected


def test_parse_float_literal_accepts_nan():
    assert math.isnan(parse_float_literal("NaN"))


@pytest.mark.parametrize("text", ["abc", "1,000", "1_000", " 1", "1 ", "0x10", "1e", ".", "-", "++1", "1.2.3"])
def test_parse_float_literal_rejects(text):
    with pytest.raises(ValueError, match="invalid float literal"):
        parse_float_literal(text)


def test_parse_float_literal_rejects_empty_string():
    with pytest.raises(ValueError, match="empty string"):
        parse_float_literal("")
