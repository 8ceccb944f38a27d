"""Numeral Converter — конверсия текст <-> целое без исключений.

Порядок проверок при text_to_int:
1. Тип входа (str)
2. Нормализация (strip whitespace, если включено)
3. Пустой ввод (если allow_empty=False)
4. Parse (InvalidNumeralText -> invalid_numeral_text + позиция)
5. Decode (NumeralOverflow -> overflow)

Порядок проверок при int_to_text:
1. Тип входа (int, не bool)
2. Encode (NonPositiveInput -> non_positive_input, NumeralOverflow -> overflow)
3. Render в заданном регистре
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from src.core.domain.errors import InvalidNumeralText, NonPositiveInput, NumeralOverflow
from src.core.domain.numeral import LetterCase
from src.core.domain.roman import Roman
from src.core.domain.ternary import BalancedTernary
from src.core.math.int_domain import is_domain_int

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class Notation(str, Enum):
    """Поддерживаемые нотации"""

    ROMAN = "roman"
    BALANCED_TERNARY = "balanced_ternary"


class BlockReason(str, Enum):
    """Причины отказа в конверсии"""

    INVALID_NUMERAL_TEXT = "invalid_numeral_text"
    NON_POSITIVE_INPUT = "non_positive_input"
    OVERFLOW = "overflow"
    EMPTY_INPUT = "empty_input"
    INVALID_TYPE = "invalid_type"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class NumeralConverterConfig:
    """Конфигурация конвертера."""

    notation: Notation = Notation.ROMAN

    # Регистр вывода (для Roman; на ternary не влияет)
    letter_case: LetterCase = LetterCase.UPPER

    # Нормализация ввода
    strip_whitespace: bool = True

    # Пустой текст -> 0 (True) или empty_input (False)
    allow_empty: bool = True


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ConversionResult:
    """Результат конверсии."""

    ok: bool
    block_reason: str

    notation: Notation
    value: Optional[int]
    text: Optional[str]

    # Позиция первого невалидного символа (только invalid_numeral_text)
    error_position: Optional[int]

    # Детали
    details: str


# =============================================================================
# CONVERTER
# =============================================================================


class NumeralConverter:
    """Конвертер текст <-> целое для выбранной нотации.

    Никогда не выбрасывает исключения на невалидном вводе: все ошибки
    домена превращаются в ConversionResult(ok=False, block_reason=...).
    """

    def __init__(self, config: Optional[NumeralConverterConfig] = None):
        """
        Args:
            config: Конфигурация (default: NumeralConverterConfig())
        """
        self.config = config or NumeralConverterConfig()

    def text_to_int(self, text: str) -> ConversionResult:
        """Текст -> целое.

        Args:
            text: Запись числа в нотации config.notation

        Returns:
            ConversionResult с value (при ok=True) и нормализованным text
        """
        if not isinstance(text, str):
            return self._blocked(
                BlockReason.INVALID_TYPE,
                details=f"Expected str, got {type(text).__name__}",
            )

        normalized = text.strip() if self.config.strip_whitespace else text

        if not normalized and not self.config.allow_empty:
            return self._blocked(BlockReason.EMPTY_INPUT, details="Empty numeral text")

        try:
            numeral = self._parse(normalized)
        except InvalidNumeralText as e:
            return self._blocked(
                BlockReason.INVALID_NUMERAL_TEXT,
                text=normalized,
                error_position=e.position,
                details=str(e),
            )

        try:
            value = numeral.value()
        except NumeralOverflow as e:
            return self._blocked(BlockReason.OVERFLOW, text=normalized, details=str(e))

        return ConversionResult(
            ok=True,
            block_reason="",
            notation=self.config.notation,
            value=value,
            text=self._render(numeral),
            error_position=None,
            details=f"PASS: {normalized!r} -> {value}",
        )

    def int_to_text(self, number: int) -> ConversionResult:
        """Целое -> текст.

        Args:
            number: Целое (для Roman строго положительное)

        Returns:
            ConversionResult с text (при ok=True)
        """
        if not is_domain_int(number):
            return self._blocked(
                BlockReason.INVALID_TYPE,
                details=f"Expected int, got {type(number).__name__}",
            )

        try:
            numeral = self._encode(number)
        except NonPositiveInput as e:
            return self._blocked(BlockReason.NON_POSITIVE_INPUT, value=number, details=str(e))
        except NumeralOverflow as e:
            return self._blocked(BlockReason.OVERFLOW, value=number, details=str(e))

        text = self._render(numeral)

        return ConversionResult(
            ok=True,
            block_reason="",
            notation=self.config.notation,
            value=number,
            text=text,
            error_position=None,
            details=f"PASS: {number} -> {text!r}",
        )

    def _parse(self, text: str) -> Union[Roman, BalancedTernary]:
        if self.config.notation == Notation.BALANCED_TERNARY:
            return BalancedTernary.parse(text)
        return Roman.parse(text)

    def _encode(self, number: int) -> Union[Roman, BalancedTernary]:
        if self.config.notation == Notation.BALANCED_TERNARY:
            return BalancedTernary.from_int(number)
        return Roman.from_int(number)

    def _render(self, numeral: Union[Roman, BalancedTernary]) -> str:
        if isinstance(numeral, Roman):
            return numeral.render(self.config.letter_case)
        return numeral.render()

    def _blocked(
        self,
        reason: BlockReason,
        details: str,
        text: Optional[str] = None,
        value: Optional[int] = None,
        error_position: Optional[int] = None,
    ) -> ConversionResult:
        logger.debug("%s conversion blocked (%s): %s", self.config.notation.value, reason.value, details)
        return ConversionResult(
            ok=False,
            block_reason=reason.value,
            notation=self.config.notation,
            value=value,
            text=text,
            error_position=error_position,
            details=details,
        )
