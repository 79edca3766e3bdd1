"""Tests for quantity normalization."""

import pytest

from cookview.recipe.quantity import (
    NO_QTY_NAME,
    Quantity,
    normalize_quantity,
    try_parse_qty,
)


class TestTryParseQty:
    """Tests for numeric quantity parsing."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1/2", 0.5),
            ("2/1", 2.0),
            ("10/10", 1.0),
            ("500/1000", 0.5),
            ("3 / 4", 0.75),
            ("1.5", 1.5),
            ("100.084", 100.084),
            ("0.084", 0.084),
            (".084", 0.084),
            ("5", 5.0),
            ("840", 840.0),
        ],
    )
    def test_parses_numbers_and_fractions(self, text, expected):
        assert try_parse_qty(text) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "text",
        ["0/1", "1/0", "01/10", "10/01", "01.0", "1.0/1", "-1", "-1.0", "NaN", "inf", "2-3", "a pinch"],
    )
    def test_rejects_non_numbers(self, text):
        assert try_parse_qty(text) is None

    def test_surrounding_whitespace_ignored(self):
        assert try_parse_qty(" 2 ") == 2.0

    def test_none_or_empty(self):
        assert try_parse_qty(None) is None
        assert try_parse_qty("") is None

    def test_overflowing_number_has_no_value(self):
        assert try_parse_qty("9" * 400) is None
        assert try_parse_qty("9" * 400 + "/" + "9" * 400) is None


class TestNormalizeQuantity:
    """Tests for the (qty, qty_val, unit) triple."""

    def test_sentinel_is_some(self):
        assert NO_QTY_NAME == "some"

    @pytest.mark.parametrize("amount", [None, "", "   "])
    def test_missing_amount_uses_sentinel(self, amount):
        result = normalize_quantity(amount, "g")
        assert result.qty == NO_QTY_NAME
        assert result.qty_val is None
        assert result.unit == "g"

    def test_numeric_amount_kept_verbatim(self):
        result = normalize_quantity("2.50", "cups")
        assert result == Quantity(qty="2.50", qty_val=2.5, unit="cups")

    def test_padded_amount_kept_verbatim(self):
        result = normalize_quantity(" 2 ", "cups")
        assert result.qty == " 2 "
        assert result.qty_val == 2.0

    def test_overflowing_amount_kept_as_text(self):
        result = normalize_quantity("9" * 400)
        assert result.qty == "9" * 400
        assert result.qty_val is None

    def test_fraction_kept_as_text(self):
        result = normalize_quantity("1/2", "tsp")
        assert result.qty == "1/2"
        assert result.qty_val == 0.5

    def test_word_amount_has_no_value(self):
        result = normalize_quantity("equal parts")
        assert result.qty == "equal parts"
        assert result.qty_val is None

    def test_range_has_no_value(self):
        assert normalize_quantity("2-3").qty_val is None

    def test_missing_unit_is_empty_string(self):
        assert normalize_quantity("2").unit == ""
        assert normalize_quantity("2", None).unit == ""
        assert normalize_quantity(None, None).unit == ""

    def test_numeric_input(self):
        assert normalize_quantity(2) == Quantity(qty="2", qty_val=2.0, unit="")
        assert normalize_quantity(0.5, "kg") == Quantity(qty="0.5", qty_val=0.5, unit="kg")

    def test_zero_is_a_value_not_missing(self):
        result = normalize_quantity(0)
        assert result.qty == "0"
        assert result.qty_val == 0.0

    def test_non_finite_number_treated_as_missing(self):
        result = normalize_quantity(float("nan"))
        assert result.qty == NO_QTY_NAME
        assert result.qty_val is None
