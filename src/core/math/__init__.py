"""
Core math modules

Целочисленные примитивы с гарантией проверки диапазона.
"""

# Checked Uint128
from src.core.math.checked_uint import (
    # Range constants
    INT64_MAX,
    INT64_MIN,
    UINT128_BITS,
    UINT128_BYTES,
    UINT128_MAX,
    UINT128_MAX_DECIMAL_DIGITS,
    UINT128_MIN,
    # Exceptions
    Uint128DivisionByZero,
    Uint128Error,
    Uint128ErrorKind,
    Uint128InvalidBytesSize,
    Uint128InvalidString,
    Uint128Overflow,
    Uint128Underflow,
    error_for_kind,
    # Validation
    is_valid_uint128,
    require_int,
    uint128_error_kind,
    validate_uint128,
    # Checked arithmetic
    checked_add,
    checked_div,
    checked_mul,
    checked_pow,
    checked_sub,
    # Decimal text
    format_uint128,
    parse_uint128,
    # Byte codec
    decode_uint128,
    encode_uint128,
)

__all__ = [
    # Checked Uint128 — Range constants
    "INT64_MAX",
    "INT64_MIN",
    "UINT128_BITS",
    "UINT128_BYTES",
    "UINT128_MAX",
    "UINT128_MAX_DECIMAL_DIGITS",
    "UINT128_MIN",
    # Checked Uint128 — Exceptions
    "Uint128DivisionByZero",
    "Uint128Error",
    "Uint128ErrorKind",
    "Uint128InvalidBytesSize",
    "Uint128InvalidString",
    "Uint128Overflow",
    "Uint128Underflow",
    "error_for_kind",
    # Checked Uint128 — Validation
    "is_valid_uint128",
    "require_int",
    "uint128_error_kind",
    "validate_uint128",
    # Checked Uint128 — Arithmetic
    "checked_add",
    "checked_div",
    "checked_mul",
    "checked_pow",
    "checked_sub",
    # Checked Uint128 — Decimal text
    "format_uint128",
    "parse_uint128",
    # Checked Uint128 — Byte codec
    "decode_uint128",
    "encode_uint128",
]
