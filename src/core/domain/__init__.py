"""
Domain models and value objects.

Contains the numeral notations: Roman numerals (Numeral, Roman) and
balanced ternary (Trit, BalancedTernary), plus the shared error taxonomy.
"""

from src.core.domain.errors import (
    InvalidNumeralText,
    NonPositiveInput,
    NotASymbol,
    NumeralError,
    NumeralOverflow,
)
from src.core.domain.numeral import (
    NUMERAL_WEIGHTS,
    LetterCase,
    Numeral,
    from_char,
    to_char,
    weight,
)
from src.core.domain.record import (
    NOTATION_BALANCED_TERNARY,
    NOTATION_ROMAN,
    RECORD_SCHEMA_VERSION,
    make_record,
)
from src.core.domain.roman import (
    ROMAN_DOMAIN,
    SUBTRACTIVE_PAIRS,
    Roman,
    decode,
    decode_checked,
    encode,
    parse,
    render_lower,
    render_upper,
)
from src.core.domain.ternary import (
    TERNARY_DOMAIN,
    TRIT_WEIGHTS,
    BalancedTernary,
    Trit,
    decode_ternary,
    decode_ternary_checked,
    encode_ternary,
    parse_ternary,
    render_ternary,
)

__all__ = [
    # Errors
    "NumeralError",
    "NotASymbol",
    "InvalidNumeralText",
    "NonPositiveInput",
    "NumeralOverflow",
    # Symbol table
    "NUMERAL_WEIGHTS",
    "LetterCase",
    "Numeral",
    "weight",
    "from_char",
    "to_char",
    # Records
    "RECORD_SCHEMA_VERSION",
    "NOTATION_ROMAN",
    "NOTATION_BALANCED_TERNARY",
    "make_record",
    # Roman
    "ROMAN_DOMAIN",
    "SUBTRACTIVE_PAIRS",
    "Roman",
    "parse",
    "decode",
    "decode_checked",
    "encode",
    "render_upper",
    "render_lower",
    # Balanced ternary
    "TERNARY_DOMAIN",
    "TRIT_WEIGHTS",
    "Trit",
    "BalancedTernary",
    "parse_ternary",
    "decode_ternary",
    "decode_ternary_checked",
    "encode_ternary",
    "render_ternary",
]
