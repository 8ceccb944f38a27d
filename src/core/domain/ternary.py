"""
BalancedTernary — Сбалансированная троичная система

Позиционная система по основанию 3 с цифрами {-1, 0, +1}, записываемыми как
'-', '0', '+'. Та же схема, что у Roman (parse / value / from_int / render),
но без субтрактивных пар. Домен значений INT64.

Любое целое (включая 0 и отрицательные) представимо: 0 -> пустая запись.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Final, Mapping

from pydantic import BaseModel, Field

from src.core.domain.errors import InvalidNumeralText, NotASymbol, NumeralOverflow
from src.core.domain.record import NOTATION_BALANCED_TERNARY, make_record
from src.core.math.int_domain import (
    INT64,
    IntegerOverflow,
    checked_add,
    strict_add,
    validate_in_domain,
)


# =============================================================================
# ENUMS
# =============================================================================


class Trit(str, Enum):
    """Троичная цифра (значение enum — её символ)"""

    MINUS = "-"
    ZERO = "0"
    PLUS = "+"

    @property
    def weight(self) -> int:
        return TRIT_WEIGHTS[self]

    @classmethod
    def from_char(cls, character: str) -> "Trit":
        """
        Raises:
            NotASymbol: Для символов кроме '-', '0', '+'
        """
        try:
            return cls(character)
        except ValueError:
            raise NotASymbol(character) from None


TRIT_WEIGHTS: Final[Mapping[Trit, int]] = MappingProxyType(
    {Trit.MINUS: -1, Trit.ZERO: 0, Trit.PLUS: 1}
)

TERNARY_DOMAIN: Final = INT64


# =============================================================================
# BALANCED TERNARY MODEL
# =============================================================================


class BalancedTernary(BaseModel):
    """
    Последовательность трит, старший разряд первым.

    Immutable модель (frozen=True).
    """

    trits: tuple[Trit, ...] = Field(default=(), description="Триты, старший первым")

    model_config = {"frozen": True}

    @classmethod
    def parse(cls, text: str) -> "BalancedTernary":
        """
        Разбор текста из '-', '0', '+'.

        Raises:
            InvalidNumeralText: На первом символе вне алфавита
        """
        trits = []
        for position, character in enumerate(text):
            try:
                trits.append(Trit.from_char(character))
            except NotASymbol:
                raise InvalidNumeralText(text, position, character) from None

        return cls(trits=tuple(trits))

    @classmethod
    def from_int(cls, number: int) -> "BalancedTernary":
        """
        Запись целого числа.

        На каждом шаге берётся остаток от деления на 3:
        0 -> '0', 1 -> '+', 2 -> '-' (с переносом +1 в старший разряд).

        Raises:
            TypeError: Если number не int
            NumeralOverflow: Если number вне INT64

        Examples:
            >>> str(BalancedTernary.from_int(6))
            '+-0'
            >>> str(BalancedTernary.from_int(-1))
            '-'
        """
        try:
            validate_in_domain(number, "number", TERNARY_DOMAIN)
        except IntegerOverflow as e:
            raise NumeralOverflow(str(e)) from e

        remaining = number
        trits: list[Trit] = []

        # Python % всегда неотрицателен для положительного делителя
        while remaining != 0:
            digit = remaining % 3
            if digit == 0:
                trits.append(Trit.ZERO)
            elif digit == 1:
                trits.append(Trit.PLUS)
            else:
                trits.append(Trit.MINUS)
                remaining += 1
            remaining //= 3

        trits.reverse()

        return cls(trits=tuple(trits))

    def value_checked(self) -> int | None:
        """
        Значение (total * 3 + trit слева направо), None при выходе за INT64.

        Проверяется результат каждого шага целиком: total * 3 может на
        мгновение выйти за домен (например, для -2^63), а total * 3 + trit нет.
        """
        total = 0
        for trit in self.trits:
            total = checked_add(total * 3, trit.weight, TERNARY_DOMAIN)
            if total is None:
                return None
        return total

    def value(self) -> int:
        """
        Значение записи.

        Raises:
            NumeralOverflow: Если значение вне INT64
        """
        total = 0
        try:
            for trit in self.trits:
                total = strict_add(total * 3, trit.weight, TERNARY_DOMAIN)
        except IntegerOverflow as e:
            raise NumeralOverflow(
                f"Balanced ternary {str(self)!r} overflows the {TERNARY_DOMAIN.name} domain"
            ) from e
        return total

    def render(self) -> str:
        return "".join(t.value for t in self.trits)

    def to_record(self) -> dict[str, Any]:
        return make_record(NOTATION_BALANCED_TERNARY, self.render(), self.value())

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self.trits)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def parse_ternary(text: str) -> BalancedTernary:
    return BalancedTernary.parse(text)


def decode_ternary(ternary: BalancedTernary) -> int:
    return ternary.value()


def decode_ternary_checked(ternary: BalancedTernary) -> int | None:
    return ternary.value_checked()


def encode_ternary(number: int) -> BalancedTernary:
    return BalancedTernary.from_int(number)


def render_ternary(ternary: BalancedTernary) -> str:
    return ternary.render()
