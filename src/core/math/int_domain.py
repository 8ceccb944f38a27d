"""
Integer Domain — Checked Fixed-Width Integer Arithmetic

Модуль обеспечивает детерминированную работу с целыми фиксированной ширины:
- Описание знакового домена (INT16, INT64) через IntegerDomain
- Checked-операции (add/sub), возвращающие None при переполнении
- strict_add, выбрасывающий IntegerOverflow при переполнении
- Валидация принадлежности значения домену

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат никогда не "заворачивается" (no silent wrap-around)
2. Поведение не зависит от режима запуска (assert/-O и т.п.)
3. bool не считается целым числом домена
"""

from dataclasses import dataclass
from typing import Final


# =============================================================================
# DOMAIN
# =============================================================================


@dataclass(frozen=True)
class IntegerDomain:
    """
    Знаковый целочисленный домен фиксированной ширины.

    Диапазон: [-2^(bits-1), 2^(bits-1) - 1]
    """

    bits: int

    def __post_init__(self) -> None:
        if self.bits < 2:
            raise ValueError(f"bits must be >= 2, got {self.bits}")

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1

    @property
    def name(self) -> str:
        return f"int{self.bits}"

    def contains(self, value: int) -> bool:
        """Проверка, что value лежит в [min_value, max_value]"""
        return self.min_value <= value <= self.max_value


# Домен римских чисел (-32768..32767)
INT16: Final[IntegerDomain] = IntegerDomain(bits=16)

# Домен сбалансированной троичной системы
INT64: Final[IntegerDomain] = IntegerDomain(bits=64)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class IntegerOverflow(OverflowError):
    """
    Результат операции вышел за пределы целочисленного домена.

    Атрибуты:
        operation: Имя операции ("add", "validate")
        operands: Операнды операции
        domain: Домен, в котором выполнялась проверка
    """

    def __init__(self, operation: str, operands: tuple[int, ...], domain: IntegerDomain):
        self.operation = operation
        self.operands = operands
        self.domain = domain
        super().__init__(
            f"{domain.name} overflow in {operation}{operands}: "
            f"result outside [{domain.min_value}, {domain.max_value}]"
        )


# =============================================================================
# CHECKED ОПЕРАЦИИ
# =============================================================================


def _narrow(result: int, domain: IntegerDomain) -> int | None:
    if domain.contains(result):
        return result
    return None


def checked_add(a: int, b: int, domain: IntegerDomain = INT16) -> int | None:
    """
    Сложение с проверкой переполнения.

    Returns:
        a + b, либо None если результат вне домена

    Examples:
        >>> checked_add(32766, 1)
        32767
        >>> checked_add(32767, 1) is None
        True
    """
    return _narrow(a + b, domain)


def checked_sub(a: int, b: int, domain: IntegerDomain = INT16) -> int | None:
    """
    Вычитание с проверкой переполнения.

    Examples:
        >>> checked_sub(-32767, 1)
        -32768
        >>> checked_sub(-32768, 1) is None
        True
    """
    return _narrow(a - b, domain)


# =============================================================================
# STRICT ОПЕРАЦИИ
# =============================================================================


def strict_add(a: int, b: int, domain: IntegerDomain = INT16) -> int:
    """
    Сложение, выбрасывающее исключение при переполнении.

    Raises:
        IntegerOverflow: Если a + b вне домена
    """
    result = checked_add(a, b, domain)
    if result is None:
        raise IntegerOverflow("add", (a, b), domain)
    return result


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_domain_int(value: object) -> bool:
    """True для int, но не для bool"""
    return isinstance(value, int) and not isinstance(value, bool)


def validate_in_domain(value: int, name: str, domain: IntegerDomain = INT16) -> None:
    """
    Валидация, что значение является целым числом домена.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        domain: Целочисленный домен

    Raises:
        TypeError: Если value не int (bool не допускается)
        IntegerOverflow: Если value вне домена
    """
    if not is_domain_int(value):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if not domain.contains(value):
        raise IntegerOverflow("validate", (value,), domain)
