"""Converter — фасад конверсии текст <-> целое для всех нотаций.

- Конфигурируемая нотация (Roman / Balanced ternary) и регистр вывода
- Ошибки возвращаются как block_reason, а не исключения
"""

from .numeral_converter import (
    BlockReason,
    ConversionResult,
    Notation,
    NumeralConverter,
    NumeralConverterConfig,
)

__all__ = [
    "BlockReason",
    "ConversionResult",
    "Notation",
    "NumeralConverter",
    "NumeralConverterConfig",
]
