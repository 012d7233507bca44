from display_format.folding import (
    format_fold_decimal,
    format_fold_decimal_curly,
    format_fold_decimal_for_curly_bracket,
    format_fold_decimal_for_subscript,
    format_fold_decimal_subscript,
)


def test_curly_marker_counts_leading_zeros():
    assert format_fold_decimal_curly(0.0000000123, 4) == "0.0{7}123"
    assert format_fold_decimal_curly("12.000005", 3) == "12.0{5}5"
    assert format_fold_decimal_for_curly_bracket(0.0000000123, 4) == "0.0{7}123"


def test_subscript_marker_uses_subscript_digits():
    assert format_fold_decimal_subscript(0.0000000123, 4) == "0.0₇123"
    assert format_fold_decimal_for_subscript(0.0000000123, 4) == "0.0₇123"


def test_subscript_marker_converts_every_digit_of_the_count():
    assert format_fold_decimal_subscript("0.00000000000045", 4) == "0.0₁₂45"
    assert format_fold_decimal_subscript("0." + "0" * 100 + "7", 4) == "0.0₁₀₀7"


def test_short_runs_are_left_alone():
    assert format_fold_decimal_curly(0.00123, 4) == "0.00123"
    assert format_fold_decimal_curly("1.50000", 2) == "1.50000"
    assert format_fold_decimal_curly(42, 1) == "42"
    assert format_fold_decimal_curly("0.000001x", 2) == "0.000001x"


def test_custom_renderer_and_negative_values():
    assert format_fold_decimal(-0.00001, 3, lambda count: f"<{count}>") == "-0.0<4>1"


def test_input_is_not_mutated():
    value = "0.000009"
    format_fold_decimal_curly(value, 2)
    assert value == "0.000009"
