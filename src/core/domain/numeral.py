"""
Numeral — Таблица символов римской нотации

Семь атомарных символов (I, V, X, L, C, D, M) и их фиксированные веса.
Ввод регистронезависим, регистр вывода выбирается через LetterCase.
"""

from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping

from src.core.domain.errors import NotASymbol


# =============================================================================
# ENUMS
# =============================================================================


class LetterCase(str, Enum):
    """Регистр при рендеринге"""

    UPPER = "upper"
    LOWER = "lower"


class Numeral(str, Enum):
    """
    Символ римской нотации.

    Значение enum — каноническая (uppercase) буква. Порядок объявления
    НЕ задаёт порядок по весу: вес берётся только из NUMERAL_WEIGHTS.
    """

    I = "I"  # noqa: E741
    V = "V"
    X = "X"
    L = "L"
    C = "C"
    D = "D"
    M = "M"

    @property
    def weight(self) -> int:
        """Фиксированный вес символа"""
        return NUMERAL_WEIGHTS[self]

    def to_char(self, case: LetterCase = LetterCase.UPPER) -> str:
        return to_char(self, case)

    @classmethod
    def from_char(cls, character: str) -> "Numeral":
        return from_char(character)


# =============================================================================
# ТАБЛИЦЫ
# =============================================================================

NUMERAL_WEIGHTS: Final[Mapping[Numeral, int]] = MappingProxyType(
    {
        Numeral.I: 1,
        Numeral.V: 5,
        Numeral.X: 10,
        Numeral.L: 50,
        Numeral.C: 100,
        Numeral.D: 500,
        Numeral.M: 1000,
    }
)

# Оба регистра -> символ
_CHAR_TO_NUMERAL: Final[Mapping[str, Numeral]] = MappingProxyType(
    {
        **{n.value: n for n in Numeral},
        **{n.value.lower(): n for n in Numeral},
    }
)


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


def weight(numeral: Numeral) -> int:
    """
    Вес символа.

    Examples:
        >>> weight(Numeral.X)
        10
        >>> weight(Numeral.M)
        1000
    """
    return NUMERAL_WEIGHTS[numeral]


def from_char(character: str) -> Numeral:
    """
    Символ по букве (регистронезависимо).

    Args:
        character: Ровно один символ

    Returns:
        Numeral для букв I, V, X, L, C, D, M в любом регистре

    Raises:
        NotASymbol: Для любого другого символа (включая строки длины != 1)

    Examples:
        >>> from_char("x")
        <Numeral.X: 'X'>
    """
    numeral = _CHAR_TO_NUMERAL.get(character) if isinstance(character, str) else None
    if numeral is None:
        raise NotASymbol(character)
    return numeral


def to_char(numeral: Numeral, case: LetterCase = LetterCase.UPPER) -> str:
    """Буква символа в заданном регистре"""
    if case == LetterCase.LOWER:
        return numeral.value.lower()
    return numeral.value
