"""
Core math modules for numerals

Целочисленные примитивы с детерминированной проверкой переполнения.
"""

# Integer Domain
from src.core.math.int_domain import (
    # Domains
    INT16,
    INT64,
    IntegerDomain,
    # Exceptions
    IntegerOverflow,
    # Checked arithmetic
    checked_add,
    checked_sub,
    # Strict arithmetic
    strict_add,
    # Validation
    is_domain_int,
    validate_in_domain,
)

__all__ = [
    # Integer Domain — Domains
    "INT16",
    "INT64",
    "IntegerDomain",
    # Integer Domain — Exceptions
    "IntegerOverflow",
    # Integer Domain — Checked arithmetic
    "checked_add",
    "checked_sub",
    # Integer Domain — Strict arithmetic
    "strict_add",
    # Integer Domain — Validation
    "is_domain_int",
    "validate_in_domain",
]
