"""
Numeral Errors — Таксономия ошибок конверсии

Все ошибки наследуются от NumeralError (ValueError), поэтому вызывающий код
может перехватить их одним except. Ошибки локальны и синхронны: ни одна
операция не возвращает частичный результат.
"""


class NumeralError(ValueError):
    """Базовая ошибка конверсии числовых нотаций"""


class NotASymbol(NumeralError):
    """Символ не является цифрой нотации"""

    def __init__(self, character: str):
        self.character = character
        super().__init__(f"{character!r} is not a numeral symbol")


class InvalidNumeralText(NumeralError):
    """
    Текст содержит символ, не являющийся цифрой нотации.

    Атрибуты:
        text: Исходный текст
        position: Индекс (0-based) первого невалидного символа
        character: Сам невалидный символ
    """

    def __init__(self, text: str, position: int, character: str):
        self.text = text
        self.position = position
        self.character = character
        super().__init__(
            f"Invalid numeral character {character!r} at position {position} in {text!r}"
        )


class NonPositiveInput(NumeralError):
    """
    Римская нотация не имеет представления для нуля и отрицательных чисел.

    Нарушение контракта вызывающей стороны, но восстанавливаемое.
    """

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Roman numerals require a positive integer, got {value}")


class NumeralOverflow(NumeralError, OverflowError):
    """Значение вышло за пределы целочисленного домена нотации"""
