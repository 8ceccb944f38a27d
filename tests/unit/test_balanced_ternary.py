"""
Тесты для сбалансированной троичной системы

Проверяет:
1. Trit: веса, разбор символа
2. Parse / value / from_int / render
3. Ноль и отрицательные значения
4. Overflow в домене INT64
"""

import pytest

from src.core.domain import (
    BalancedTernary,
    InvalidNumeralText,
    NotASymbol,
    NumeralOverflow,
    Trit,
    decode_ternary,
    decode_ternary_checked,
    encode_ternary,
    parse_ternary,
    render_ternary,
)
from src.core.math import INT64


class TestTrit:
    """Тесты Trit"""

    def test_weights(self) -> None:
        assert Trit.MINUS.weight == -1
        assert Trit.ZERO.weight == 0
        assert Trit.PLUS.weight == 1

    @pytest.mark.parametrize(
        "character, trit", [("-", Trit.MINUS), ("0", Trit.ZERO), ("+", Trit.PLUS)]
    )
    def test_from_char(self, character: str, trit: Trit) -> None:
        assert Trit.from_char(character) is trit

    @pytest.mark.parametrize("character", ["1", "x", " ", ""])
    def test_not_a_symbol(self, character: str) -> None:
        with pytest.raises(NotASymbol):
            Trit.from_char(character)


class TestParseAndValue:
    """Тесты parse / value"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("", 0),
            ("0", 0),
            ("+", 1),
            ("-", -1),
            ("+0", 3),
            ("+-", 2),
            ("+-0", 6),
            ("+--", 5),
            ("-++", -5),
            ("00+", 1),
        ],
    )
    def test_values(self, text: str, expected: int) -> None:
        ternary = parse_ternary(text)
        assert decode_ternary(ternary) == expected
        assert decode_ternary_checked(ternary) == expected

    def test_invalid_character_position(self) -> None:
        with pytest.raises(InvalidNumeralText) as exc_info:
            parse_ternary("+0-2+")

        assert exc_info.value.position == 3
        assert exc_info.value.character == "2"

    def test_overflow(self) -> None:
        """(3^41 - 1) / 2 > 2^63 - 1"""
        ternary = parse_ternary("+" * 41)
        assert ternary.value_checked() is None
        with pytest.raises(NumeralOverflow, match="int64"):
            ternary.value()

    def test_largest_all_plus_fits(self) -> None:
        assert parse_ternary("+" * 40).value() == (3**40 - 1) // 2


class TestFromInt:
    """Тесты from_int"""

    def test_zero_is_empty(self) -> None:
        assert encode_ternary(0).trits == ()
        assert render_ternary(encode_ternary(0)) == ""

    @pytest.mark.parametrize(
        "number, text", [(1, "+"), (-1, "-"), (2, "+-"), (5, "+--"), (6, "+-0"), (-6, "-+0")]
    )
    def test_known_encodings(self, number: int, text: str) -> None:
        assert str(encode_ternary(number)) == text

    def test_no_leading_zero(self) -> None:
        for n in range(-100, 101):
            if n != 0:
                assert encode_ternary(n).trits[0] != Trit.ZERO

    def test_negation_flips_trits(self) -> None:
        flip = {"+": "-", "-": "+", "0": "0"}
        for n in range(1, 200):
            positive = render_ternary(encode_ternary(n))
            negative = render_ternary(encode_ternary(-n))
            assert negative == "".join(flip[c] for c in positive)

    def test_roundtrip(self) -> None:
        for n in range(-4321, 4322):
            assert BalancedTernary.from_int(n).value() == n

    def test_int64_bounds_roundtrip(self) -> None:
        assert encode_ternary(INT64.max_value).value() == INT64.max_value
        assert encode_ternary(INT64.min_value).value() == INT64.min_value

    def test_outside_int64_rejected(self) -> None:
        with pytest.raises(NumeralOverflow):
            encode_ternary(INT64.max_value + 1)

    @pytest.mark.parametrize("number", [True, 1.0, "1"])
    def test_non_int_rejected(self, number) -> None:
        with pytest.raises(TypeError):
            encode_ternary(number)


class TestRender:
    """Тесты render"""

    def test_parse_render_identity(self) -> None:
        for text in ("+-0", "-", "+0-+", ""):
            assert render_ternary(parse_ternary(text)) == text

    def test_model_is_frozen_and_comparable(self) -> None:
        assert parse_ternary("+-0") == encode_ternary(6)
        assert len(parse_ternary("+-0")) == 3
