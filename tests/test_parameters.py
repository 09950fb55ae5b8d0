"""Tests for parameter coercion."""

import sys

import pytest

from soroswap_node.exceptions import ParameterError
from soroswap_node.models.enums import AssetListName, Protocol, TradeType
from soroswap_node.operations import parameters as p


class TestDecimalInteger:

    def test_large_decimal_string_is_exact(self):
        value = p.coerce_decimal_integer("amount", "123456789012345678901234567890")
        assert value == 123456789012345678901234567890
        assert isinstance(value, int)

    def test_surrounding_whitespace_and_sign(self):
        assert p.coerce_decimal_integer("amount", "  42 ") == 42
        assert p.coerce_decimal_integer("amount", "-7") == -7

    @pytest.mark.parametrize("raw", ["abc", "", "1.5", "0x10", "1_000", "1e6", True])
    def test_malformed_values_name_the_parameter(self, raw):
        with pytest.raises(ParameterError) as exc_info:
            p.coerce_decimal_integer("amount", raw)
        assert exc_info.value.parameter == "amount"
        assert "amount" in str(exc_info.value)

    @pytest.mark.skipif(not hasattr(sys, "set_int_max_str_digits"),
                        reason="interpreter has no integer digit limit")
    def test_oversized_value_names_the_parameter(self):
        previous = sys.get_int_max_str_digits()
        sys.set_int_max_str_digits(4300)
        try:
            with pytest.raises(ParameterError) as exc_info:
                p.coerce_decimal_integer("amount", "9" * 5000)
        finally:
            sys.set_int_max_str_digits(previous)

        assert exc_info.value.parameter == "amount"
        assert exc_info.value.code == "INVALID_PARAMETER"


class TestCommaList:

    def test_segments_are_trimmed(self):
        assert p.coerce_comma_list("assets", "A, B ,C") == ["A", "B", "C"]

    def test_single_value(self):
        assert p.coerce_comma_list("assets", "XLM") == ["XLM"]

    def test_empty_segments_dropped(self):
        assert p.coerce_comma_list("assets", "A,,B, ") == ["A", "B"]

    def test_nothing_left_fails(self):
        with pytest.raises(ParameterError):
            p.coerce_comma_list("assets", " , ")


class TestEnums:

    def test_accepts_name_and_value(self):
        coerce = p.enum_coercion(Protocol)
        assert coerce("protocols", "SOROSWAP") is Protocol.SOROSWAP
        assert coerce("protocols", "aqua") is Protocol.AQUA

    def test_unrecognized_value_fails(self):
        coerce = p.enum_coercion(TradeType)
        with pytest.raises(ParameterError) as exc_info:
            coerce("tradeType", "EXACT_SIDEWAYS")
        assert "EXACT_IN" in exc_info.value.reason

    def test_empty_allowed_when_declared(self):
        coerce = p.enum_coercion(AssetListName, allow_empty=True)
        assert coerce("assetListName", "") is None
        assert coerce("assetListName", "LOBSTR") is AssetListName.LOBSTR


class TestProtocols:

    def test_list_is_deduplicated_in_order(self):
        assert p.coerce_protocols("protocols", ["AQUA", "SOROSWAP", "AQUA"]) == (
            Protocol.AQUA,
            Protocol.SOROSWAP,
        )

    def test_comma_string_accepted(self):
        assert p.coerce_protocols("protocols", "SOROSWAP, SDEX") == (Protocol.SOROSWAP, Protocol.SDEX)

    def test_empty_selection_fails(self):
        with pytest.raises(ParameterError) as exc_info:
            p.coerce_protocols("protocols", [])
        assert "at least one protocol" in exc_info.value.reason

    def test_unknown_protocol_fails(self):
        with pytest.raises(ParameterError):
            p.coerce_protocols("protocols", ["UNISWAP"])


class TestOtherCoercions:

    @pytest.mark.parametrize("raw,expected", [(True, True), ("false", False), ("YES", True), ("0", False)])
    def test_boolean(self, raw, expected):
        assert p.coerce_boolean("launchtube", raw) is expected

    def test_boolean_rejects_garbage(self):
        with pytest.raises(ParameterError):
            p.coerce_boolean("launchtube", "maybe")

    def test_json_string_and_object(self):
        assert p.coerce_json("quote", '{"amountIn": "10"}') == {"amountIn": "10"}
        assert p.coerce_json("quote", {"amountIn": "10"}) == {"amountIn": "10"}

    def test_malformed_json_fails(self):
        with pytest.raises(ParameterError) as exc_info:
            p.coerce_json("quote", "{not json")
        assert exc_info.value.parameter == "quote"

    def test_required_string_rejects_blank(self):
        with pytest.raises(ParameterError):
            p.coerce_string("assetIn", "   ")

    def test_optional_string_blank_is_none(self):
        assert p.coerce_optional_string("from", "") is None
        assert p.coerce_optional_string("from", " GABC ") == "GABC"


class TestParameterSpec:

    def test_default_applies_when_missing(self):
        spec = p.option("tradeType", TradeType, default="EXACT_IN")
        assert spec.resolve() is TradeType.EXACT_IN

    def test_required_without_default_fails(self):
        with pytest.raises(ParameterError) as exc_info:
            p.string("assetIn").resolve()
        assert exc_info.value.parameter == "assetIn"

    def test_none_treated_as_missing(self):
        assert p.decimal_integer("amountAMin", default="0").resolve(None) == 0
