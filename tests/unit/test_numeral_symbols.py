"""
Тесты для таблицы символов римской нотации

Проверяет:
1. Фиксированные веса символов
2. Регистронезависимый разбор символа
3. Рендеринг в обоих регистрах
4. Отказ для символов вне алфавита
"""

import pytest

from src.core.domain import (
    NUMERAL_WEIGHTS,
    LetterCase,
    Numeral,
    NotASymbol,
    NumeralError,
    from_char,
    to_char,
    weight,
)


class TestWeights:
    """Тесты весов"""

    @pytest.mark.parametrize(
        "numeral, expected",
        [
            (Numeral.I, 1),
            (Numeral.V, 5),
            (Numeral.X, 10),
            (Numeral.L, 50),
            (Numeral.C, 100),
            (Numeral.D, 500),
            (Numeral.M, 1000),
        ],
    )
    def test_fixed_weight(self, numeral: Numeral, expected: int) -> None:
        assert weight(numeral) == expected
        assert numeral.weight == expected

    def test_table_is_complete(self) -> None:
        """Каждый символ имеет вес"""
        assert set(NUMERAL_WEIGHTS) == set(Numeral)

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            NUMERAL_WEIGHTS[Numeral.I] = 2  # type: ignore[index]


class TestFromChar:
    """Тесты from_char"""

    @pytest.mark.parametrize("character", list("IVXLCDM"))
    def test_uppercase(self, character: str) -> None:
        assert from_char(character) == Numeral(character)

    @pytest.mark.parametrize("character", list("ivxlcdm"))
    def test_lowercase(self, character: str) -> None:
        assert from_char(character) == Numeral(character.upper())

    def test_classmethod_alias(self) -> None:
        assert Numeral.from_char("d") is Numeral.D

    @pytest.mark.parametrize("character", ["A", "z", "0", " ", "-", "Ⅻ"])
    def test_not_a_symbol(self, character: str) -> None:
        with pytest.raises(NotASymbol) as exc_info:
            from_char(character)

        assert exc_info.value.character == character

    @pytest.mark.parametrize("character", ["", "XI"])
    def test_requires_single_character(self, character: str) -> None:
        with pytest.raises(NotASymbol):
            from_char(character)

    def test_not_a_symbol_is_numeral_error(self) -> None:
        with pytest.raises(NumeralError):
            from_char("Q")


class TestToChar:
    """Тесты to_char"""

    def test_upper_by_default(self) -> None:
        assert to_char(Numeral.X) == "X"

    def test_lower(self) -> None:
        assert to_char(Numeral.X, LetterCase.LOWER) == "x"
        assert Numeral.M.to_char(LetterCase.LOWER) == "m"

    def test_roundtrip_through_both_cases(self) -> None:
        """from_char(to_char(n, case)) == n для обоих регистров"""
        for numeral in Numeral:
            for case in LetterCase:
                assert from_char(to_char(numeral, case)) is numeral
