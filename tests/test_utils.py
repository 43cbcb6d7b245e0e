import pytest

from hyper_wire.utils import (
    float_to_wire,
    format_decimal,
    round_order_price,
    round_order_size,
    trim_decimal_zeros,
)


def test_format_decimal_strips_trailing_zeros():
    assert format_decimal(1.5, 3) == "1.5"
    assert format_decimal(2.0, 4) == "2"
    assert format_decimal(100.0, 2) == "100"
    assert format_decimal(1.23456, 3) == "1.235"
    assert format_decimal(-1.23456, 3) == "-1.235"


def test_format_decimal_zero_digits_uses_shortest_repr():
    assert format_decimal(1.5, 0) == "1.5"
    assert format_decimal(123456.0, 0) == "123456"
    assert format_decimal(0.00001, 0) == "0.00001"
    assert format_decimal(1e16, 0) == "10000000000000000"


def test_format_decimal_empty_result_is_zero():
    assert format_decimal(0.0, 4) == "0"
    assert format_decimal(0.00001, 4) == "0"
    # no "-0" after rounding a tiny negative value away
    assert format_decimal(-0.00001, 2) == "0"
    assert format_decimal(-0.0, 0) == "0"


def test_format_decimal_rejects_non_finite():
    with pytest.raises(ValueError):
        format_decimal(float("nan"), 2)
    with pytest.raises(ValueError):
        format_decimal(float("inf"), 0)


VALUES = [0.0, 1.0, 1.5, 0.1 + 0.2, 3.14159265, 1234.5678, 0.000123456, 99999.99999, -42.4242, 1e-9]


@pytest.mark.parametrize("digits", [0, 1, 2, 4, 6, 8])
def test_format_decimal_output_is_canonical_and_idempotent(digits: int):
    for value in VALUES:
        text = format_decimal(value, digits)
        assert not text.endswith(".")
        if "." in text:
            assert not text.endswith("0")
        assert format_decimal(float(text), digits) == text


def test_round_order_size():
    assert round_order_size(1.23456, 3) == "1.235"
    assert round_order_size(0.001234567, 5) == "0.00123"
    assert round_order_size(10.0, 2) == "10"
    # szDecimals=0 keeps the value as-is (shortest representation)
    assert round_order_size(0.123456, 0) == "0.123456"
    assert round_order_size(5.0, 0) == "5"


def test_round_order_price_large_integer_part_drops_decimals():
    assert round_order_price(123456, 2, 6) == "123456"
    assert round_order_price(123456.7, 2, 6) == "123457"
    assert round_order_price(12345.0, 0, 6) == "12345"


def test_round_order_price_limits_significant_figures():
    assert round_order_price(1234.56, 2, 6) == "1234.6"
    assert round_order_price(12.3456, 1, 6) == "12.346"
    assert round_order_price(1.23456789, 0, 6) == "1.2346"


def test_round_order_price_keeps_one_zero_decimal():
    # unlike round_order_size, integral prices keep a ".0" marker
    assert round_order_price(3, 0, 6) == "3.0"
    assert round_order_size(3, 0) == "3"
    assert round_order_price(1.0, 0, 6) == "1.0"
    assert round_order_price(0.99999, 2, 6) == "1.0"


def test_round_order_price_no_decimal_budget_rounds_to_integer():
    assert round_order_price(12.345, 6, 6) == "12.0"


def test_round_order_price_no_decimal_budget_below_one_keeps_value():
    # szDecimals == max_decimals: sub-one prices keep their shortest form, cut to 4 significant digits
    assert round_order_price(0.5, 6, 6) == "0.5"
    assert round_order_price(0.123456789, 6, 6) == "0.1234"
    assert round_order_price(0.00012, 8, 8) == "0.00012"


def test_round_order_price_below_one_truncates_significant_digits():
    # rounded to 6 decimals first, then cut to 4 significant digits without rounding
    assert round_order_price(0.123456, 0, 6) == "0.1234"
    assert round_order_price(0.00001234, 0, 8) == "0.00001234"
    assert round_order_price(0.000123456, 0, 8) == "0.0001234"
    assert round_order_price(0.000123456, 0, 6) == "0.000123"


def test_round_order_price_below_one_respects_decimal_ceiling():
    # szDecimals=2 on a perp leaves only 4 fractional digits
    assert round_order_price(0.00001234, 2, 6) == "0.0"
    assert round_order_price(0.0, 2, 6) == "0.0"


def test_round_order_price_negative_values():
    assert round_order_price(-12.3456, 1, 6) == "-12.346"
    assert round_order_price(-0.00000001, 2, 6) == "0.0"


def test_trim_decimal_zeros():
    assert trim_decimal_zeros("3.00") == "3.0"
    assert trim_decimal_zeros("3") == "3.0"
    assert trim_decimal_zeros("0.1230") == "0.123"
    assert trim_decimal_zeros("12.5") == "12.5"


def test_float_to_wire():
    assert float_to_wire(1234.5678, 6) == "1234.57"
    assert float_to_wire(0.000012345, 8) == "0.0000123"
    assert float_to_wire(123456789.0, 6) == "123456789"
    assert float_to_wire(2.5, 6) == "2.5"
