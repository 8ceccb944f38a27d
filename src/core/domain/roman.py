"""
Roman — Конвертер римских чисел

Двунаправленная конверсия между последовательностью символов и целым числом
в домене INT16 (-32768..32767):

- parse:   текст -> Roman (регистронезависимо, ошибка на первом невалидном символе)
- value:   Roman -> int (переполнение -> NumeralOverflow, всегда, без wrap-around)
- value_checked: Roman -> int | None (переполнение -> None)
- from_int: int -> Roman (канонический greedy-алгоритм с субтрактивными парами)
- to_upper / to_lower: Roman -> текст

Декодирование работает на ЛЮБОЙ последовательности символов, а не только на
канонической. Для неканонических входов результат определяется алгоритмом
механически (и может быть отрицательным), грамматика не проверяется.
"""

from typing import Any, Final

from pydantic import BaseModel, Field

from src.core.domain.errors import (
    InvalidNumeralText,
    NonPositiveInput,
    NotASymbol,
    NumeralOverflow,
)
from src.core.domain.numeral import LetterCase, Numeral, from_char, to_char
from src.core.domain.record import NOTATION_ROMAN, make_record
from src.core.math.int_domain import (
    INT16,
    checked_add,
    checked_sub,
    is_domain_int,
)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ROMAN_DOMAIN: Final = INT16

# (secondary, primary): secondary перед primary означает primary - secondary
SUBTRACTIVE_PAIRS: Final[tuple[tuple[Numeral, Numeral], ...]] = (
    (Numeral.C, Numeral.M),
    (Numeral.C, Numeral.D),
    (Numeral.X, Numeral.C),
    (Numeral.X, Numeral.L),
    (Numeral.I, Numeral.X),
    (Numeral.I, Numeral.V),
)


# =============================================================================
# ROMAN MODEL
# =============================================================================


class Roman(BaseModel):
    """
    Упорядоченная последовательность римских символов.

    Immutable модель (frozen=True). Порядок символов и есть позиционная
    запись. Пустая последовательность допустима и декодируется в 0.
    """

    numerals: tuple[Numeral, ...] = Field(
        default=(), description="Символы слева направо"
    )

    model_config = {"frozen": True}

    # -------------------------------------------------------------------------
    # Parse / encode
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "Roman":
        """
        Разбор текста в последовательность символов.

        Args:
            text: Текст из букв I, V, X, L, C, D, M (любой регистр)

        Returns:
            Roman с символами в исходном порядке (пустой для пустого текста)

        Raises:
            InvalidNumeralText: На первом символе без отображения

        Examples:
            >>> Roman.parse("xiv").to_upper()
            'XIV'
        """
        numerals = []
        for position, character in enumerate(text):
            try:
                numerals.append(from_char(character))
            except NotASymbol:
                raise InvalidNumeralText(text, position, character) from None

        return cls(numerals=tuple(numerals))

    @classmethod
    def from_int(cls, number: int) -> "Roman":
        """
        Каноническая запись положительного целого.

        Алгоритм: для каждой пары (secondary, primary) от больших к меньшим
        1. пока остаток >= primary: добавить primary
        2. если остаток >= primary - secondary: добавить secondary, primary
        Остаток (< 4) добавляется как повторы I.

        Args:
            number: Целое в диапазоне 1..32767

        Returns:
            Каноническая последовательность (например, 1994 -> MCMXCIV)

        Raises:
            TypeError: Если number не int
            NonPositiveInput: Если number <= 0
            NumeralOverflow: Если number вне домена INT16
        """
        if not is_domain_int(number):
            raise TypeError(f"number must be an int, got {type(number).__name__}")

        if number <= 0:
            raise NonPositiveInput(number)

        if not ROMAN_DOMAIN.contains(number):
            raise NumeralOverflow(
                f"{number} is outside the {ROMAN_DOMAIN.name} domain "
                f"(max {ROMAN_DOMAIN.max_value})"
            )

        remaining = number
        numerals: list[Numeral] = []

        for secondary, primary in SUBTRACTIVE_PAIRS:
            while remaining >= primary.weight:
                remaining -= primary.weight
                numerals.append(primary)

            difference = primary.weight - secondary.weight
            if remaining >= difference:
                remaining -= difference
                numerals.append(secondary)
                numerals.append(primary)

        numerals.extend([Numeral.I] * remaining)

        return cls(numerals=tuple(numerals))

    # -------------------------------------------------------------------------
    # Decode
    # -------------------------------------------------------------------------

    def value_checked(self) -> int | None:
        """
        Значение последовательности с проверкой переполнения.

        Обход справа налево: вес >= максимума, встреченного правее,
        прибавляется, иначе вычитается.

        Returns:
            Значение, либо None если промежуточная сумма вышла за INT16

        Examples:
            >>> Roman.parse("IV").value_checked()
            4
            >>> Roman.parse("M" * 54).value_checked() is None
            True
        """
        total = 0
        max_seen = 0

        for numeral in reversed(self.numerals):
            w = numeral.weight
            if w >= max_seen:
                total = checked_add(total, w, ROMAN_DOMAIN)
            else:
                total = checked_sub(total, w, ROMAN_DOMAIN)

            if total is None:
                return None

            max_seen = max(max_seen, w)

        return total

    def value(self) -> int:
        """
        Значение последовательности.

        Тот же алгоритм, что value_checked(), но переполнение всегда
        выбрасывает NumeralOverflow (никогда не wrap-around).

        Raises:
            NumeralOverflow: Если промежуточная сумма вышла за INT16
        """
        total = self.value_checked()
        if total is None:
            raise NumeralOverflow(
                f"Roman numeral {self.to_upper()!r} overflows the {ROMAN_DOMAIN.name} domain"
            )
        return total

    # -------------------------------------------------------------------------
    # Render
    # -------------------------------------------------------------------------

    def render(self, case: LetterCase = LetterCase.UPPER) -> str:
        return "".join(to_char(n, case) for n in self.numerals)

    def to_upper(self) -> str:
        """Текст в верхнем регистре (без разделителей)"""
        return self.render(LetterCase.UPPER)

    def to_lower(self) -> str:
        """Текст в нижнем регистре (без разделителей)"""
        return self.render(LetterCase.LOWER)

    def to_record(self, case: LetterCase = LetterCase.UPPER) -> dict[str, Any]:
        """
        Сериализация в numeral_record контракт.

        Raises:
            NumeralOverflow: Если значение не помещается в INT16
        """
        return make_record(NOTATION_ROMAN, self.render(case), self.value())

    def __str__(self) -> str:
        return self.to_upper()

    def __len__(self) -> int:
        return len(self.numerals)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def parse(text: str) -> Roman:
    """Текст -> Roman. Raises InvalidNumeralText."""
    return Roman.parse(text)


def decode(roman: Roman) -> int:
    """Roman -> int. Raises NumeralOverflow."""
    return roman.value()


def decode_checked(roman: Roman) -> int | None:
    """Roman -> int | None (None при переполнении)"""
    return roman.value_checked()


def encode(number: int) -> Roman:
    """int -> Roman. Raises NonPositiveInput / NumeralOverflow."""
    return Roman.from_int(number)


def render_upper(roman: Roman) -> str:
    return roman.to_upper()


def render_lower(roman: Roman) -> str:
    return roman.to_lower()
