"""
Record — Сериализованная запись числа (numeral_record контракт)

Общая для всех нотаций форма: schema_version, notation, text, value.
Соответствует схеме src/core/contracts/schema/numeral_record.json.
"""

from typing import Any, Final

RECORD_SCHEMA_VERSION: Final[str] = "1"

NOTATION_ROMAN: Final[str] = "roman"
NOTATION_BALANCED_TERNARY: Final[str] = "balanced_ternary"


def make_record(notation: str, text: str, value: int) -> dict[str, Any]:
    """
    Сборка numeral_record.

    Args:
        notation: NOTATION_ROMAN или NOTATION_BALANCED_TERNARY
        text: Текстовая запись числа
        value: Значение записи

    Returns:
        dict, проходящий validate_numeral_record
    """
    return {
        "schema_version": RECORD_SCHEMA_VERSION,
        "notation": notation,
        "text": text,
        "value": value,
    }
