"""
Checked Uint128 — Bounded Unsigned Integer Primitives

Модуль обеспечивает точную целочисленную арифметику в диапазоне [0, 2^128 − 1]:
- Проверка диапазона (validate) после каждой операции
- Checked-операции: add / sub / mul / div / pow без clamp, wrap и truncation
- Каноническое десятичное представление (parse / format)
- Фиксированный 16-байтовый big-endian кодек

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна операция не возвращает значение вне диапазона без ошибки
2. Промежуточные значения: обычный int (неограниченная точность)
3. Кодирование всегда ровно 16 байт, каждое значение имеет одно представление
4. Все ошибки детерминированы и классифицированы через Uint128ErrorKind
"""

import logging
import re
from enum import Enum
from typing import Final, Iterable, Optional, Union

import structlog

# Через stdlib logging: без настройки хоста debug-события не выводятся
logger = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)


# =============================================================================
# ПАРАМЕТРЫ ДИАПАЗОНА
# =============================================================================

# Разрядность типа
UINT128_BITS: Final[int] = 128

# Размер канонического бинарного представления (байт)
UINT128_BYTES: Final[int] = 16

UINT128_MIN: Final[int] = 0
UINT128_MAX: Final[int] = (1 << UINT128_BITS) - 1

# len(str(UINT128_MAX)); длиннее значит вне диапазона
UINT128_MAX_DECIMAL_DIGITS: Final[int] = 39

# Диапазон native signed 64-bit
INT64_MIN: Final[int] = -(1 << 63)
INT64_MAX: Final[int] = (1 << 63) - 1

# Base-10 литерал: необязательный знак и ASCII-цифры (без пробелов и "_")
_DECIMAL_LITERAL = re.compile(r"([+-]?)([0-9]+)")

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class Uint128ErrorKind(str, Enum):
    """Классификация ошибок Uint128"""

    OVERFLOW = "overflow"
    UNDERFLOW = "underflow"
    INVALID_BYTES_SIZE = "invalid_bytes_size"
    INVALID_STRING = "invalid_string"
    DIVISION_BY_ZERO = "division_by_zero"


class Uint128Error(ValueError):
    """
    Базовая ошибка Uint128.

    Каждый экземпляр создаётся заново и не несёт изменяемого состояния;
    классификация доступна через атрибут kind.
    """

    kind: Uint128ErrorKind
    default_message: str = "uint128: error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class Uint128Overflow(Uint128Error):
    """Значение больше UINT128_MAX"""

    kind = Uint128ErrorKind.OVERFLOW
    default_message = "uint128: overflow"


class Uint128Underflow(Uint128Error):
    """Значение меньше нуля"""

    kind = Uint128ErrorKind.UNDERFLOW
    default_message = "uint128: underflow"


class Uint128InvalidBytesSize(Uint128Error):
    """Размер буфера не равен UINT128_BYTES"""

    kind = Uint128ErrorKind.INVALID_BYTES_SIZE
    default_message = "uint128: invalid bytes"


class Uint128InvalidString(Uint128Error):
    """Строка не является base-10 целым литералом"""

    kind = Uint128ErrorKind.INVALID_STRING
    default_message = "uint128: invalid string to uint128"


class Uint128DivisionByZero(Uint128Error, ZeroDivisionError):
    """Деление на ноль (восстановимая ошибка, а не падение процесса)"""

    kind = Uint128ErrorKind.DIVISION_BY_ZERO
    default_message = "uint128: division by zero"


_ERRORS_BY_KIND: Final[dict] = {
    Uint128ErrorKind.OVERFLOW: Uint128Overflow,
    Uint128ErrorKind.UNDERFLOW: Uint128Underflow,
    Uint128ErrorKind.INVALID_BYTES_SIZE: Uint128InvalidBytesSize,
    Uint128ErrorKind.INVALID_STRING: Uint128InvalidString,
    Uint128ErrorKind.DIVISION_BY_ZERO: Uint128DivisionByZero,
}


def error_for_kind(kind: Uint128ErrorKind) -> Uint128Error:
    """
    Новый экземпляр исключения для заданного вида ошибки.

    Args:
        kind: Вид ошибки

    Returns:
        Свежий экземпляр соответствующего подкласса Uint128Error
    """
    return _ERRORS_BY_KIND[Uint128ErrorKind(kind)]()


# =============================================================================
# ВАЛИДАЦИЯ ДИАПАЗОНА
# =============================================================================


def uint128_error_kind(value: int) -> Optional[Uint128ErrorKind]:
    """
    Классификация значения без исключения.

    Значение валидно тогда и только тогда, когда value >= 0
    и value.bit_length() <= 128.

    Args:
        value: Проверяемое целое (может быть вне диапазона)

    Returns:
        None если значение валидно, иначе UNDERFLOW или OVERFLOW

    Examples:
        >>> uint128_error_kind(0) is None
        True
        >>> uint128_error_kind(-1)
        <Uint128ErrorKind.UNDERFLOW: 'underflow'>
        >>> uint128_error_kind(1 << 128)
        <Uint128ErrorKind.OVERFLOW: 'overflow'>
    """
    if value < 0:
        return Uint128ErrorKind.UNDERFLOW
    if value.bit_length() > UINT128_BITS:
        return Uint128ErrorKind.OVERFLOW
    return None


def is_valid_uint128(value: int) -> bool:
    """True если value есть int (не bool) в диапазоне [0, UINT128_MAX]"""
    if not _is_plain_int(value):
        return False
    return uint128_error_kind(value) is None


def validate_uint128(value: int) -> int:
    """
    Проверка диапазона с исключением.

    Args:
        value: Проверяемое целое

    Returns:
        value без изменений

    Raises:
        Uint128Underflow: Если value < 0
        Uint128Overflow: Если value.bit_length() > 128
    """
    kind = uint128_error_kind(value)
    if kind is not None:
        logger.debug(
            "uint128_range_violation",
            kind=kind.value,
            bit_length=value.bit_length(),
            negative=value < 0,
        )
        raise error_for_kind(kind)
    return value


def require_int(value: object, name: str = "value") -> int:
    """
    Проверка типа: только int, bool отклоняется.

    Raises:
        TypeError: Если value не int
    """
    if not _is_plain_int(value):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def _is_plain_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# =============================================================================
# CHECKED ARITHMETIC
# =============================================================================


def checked_add(a: int, b: int) -> int:
    """a + b с проверкой результата (Uint128Overflow при >= 2^128)"""
    return validate_uint128(a + b)


def checked_sub(a: int, b: int) -> int:
    """a - b с проверкой результата (Uint128Underflow при < 0)"""
    return validate_uint128(a - b)


def checked_mul(a: int, b: int) -> int:
    """a * b с проверкой результата (Uint128Overflow при >= 2^128)"""
    return validate_uint128(a * b)


def checked_div(a: int, b: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Для неотрицательных операндов совпадает с floor division (//).

    Args:
        a: Делимое
        b: Делитель

    Returns:
        Частное, прошедшее проверку диапазона

    Raises:
        Uint128DivisionByZero: Если b == 0
    """
    if b == 0:
        logger.debug("uint128_division_by_zero", dividend_bits=a.bit_length())
        raise Uint128DivisionByZero()
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return validate_uint128(quotient)


def checked_pow(base: int, exponent: int) -> int:
    """
    base ** exponent без модуля, с проверкой результата.

    Результат совпадает с точным вычислением и последующей проверкой
    диапазона. Для |base| >= 2 и exponent >= 128 модуль результата не меньше
    2^128, поэтому ошибка возникает без вычисления степени.

    Отрицательный exponent даёт 1 (как x ** 0).

    Args:
        base: Основание
        exponent: Показатель

    Returns:
        Степень, прошедшая проверку диапазона

    Raises:
        Uint128Overflow: Если результат >= 2^128
        Uint128Underflow: Если результат < 0

    Examples:
        >>> checked_pow(2, 127) == 1 << 127
        True
        >>> checked_pow(0, 0)
        1
    """
    if exponent <= 0:
        return 1
    if abs(base) >= 2 and exponent >= UINT128_BITS:
        if base < 0 and exponent % 2 == 1:
            kind = Uint128ErrorKind.UNDERFLOW
        else:
            kind = Uint128ErrorKind.OVERFLOW
        logger.debug(
            "uint128_range_violation",
            kind=kind.value,
            base_bits=base.bit_length(),
            exponent=exponent,
        )
        raise error_for_kind(kind)
    return validate_uint128(base**exponent)


# =============================================================================
# DECIMAL TEXT
# =============================================================================


def parse_uint128(text: str) -> int:
    """
    Разбор base-10 строки в значение Uint128.

    Грамматика: необязательный "+" или "-", затем одна или более ASCII-цифр.
    Ведущие нули допускаются ("007" → 7, "-0" → 0).

    Args:
        text: Десятичная строка

    Returns:
        Значение в диапазоне [0, UINT128_MAX]

    Raises:
        Uint128InvalidString: Если строка не является base-10 литералом
        Uint128Underflow: Если значение отрицательное
        Uint128Overflow: Если значение больше UINT128_MAX
    """
    if not isinstance(text, str):
        raise Uint128InvalidString()

    match = _DECIMAL_LITERAL.fullmatch(text)
    if match is None:
        logger.debug("uint128_invalid_string", length=len(text))
        raise Uint128InvalidString()

    sign, digits = match.groups()
    significant = digits.lstrip("0")
    if not significant:
        return 0

    if len(significant) > UINT128_MAX_DECIMAL_DIGITS:
        # Заведомо вне диапазона: int() на таких строках не вызываем
        kind = Uint128ErrorKind.UNDERFLOW if sign == "-" else Uint128ErrorKind.OVERFLOW
        logger.debug("uint128_range_violation", kind=kind.value, digits=len(significant))
        raise error_for_kind(kind)

    value = int(significant)
    if sign == "-":
        value = -value
    return validate_uint128(value)


def format_uint128(value: int) -> str:
    """
    Каноническая десятичная строка: без ведущих нулей, без знака,
    без группировки. Ноль → "0".

    Raises:
        Uint128Underflow / Uint128Overflow: Если value вне диапазона
    """
    return str(validate_uint128(value))


# =============================================================================
# FIXED-SIZE BYTE CODEC
# =============================================================================


def encode_uint128(value: int) -> bytes:
    """
    Кодирование в ровно 16 байт big-endian, с нулевым дополнением слева.

    Сначала выполняется проверка диапазона; при ошибке вывод не формируется.

    Args:
        value: Значение для кодирования

    Returns:
        16 байт канонического представления

    Raises:
        Uint128Underflow / Uint128Overflow: Если value вне диапазона

    Examples:
        >>> encode_uint128(1).hex()
        '00000000000000000000000000000001'
    """
    return validate_uint128(value).to_bytes(UINT128_BYTES, "big")


def decode_uint128(data: BytesLike) -> int:
    """
    Декодирование ровно 16 байт big-endian.

    Ведущие нулевые байты пропускаются, оставшийся суффикс читается как
    big-endian величина; все нули → 0. Любой 16-байтовый шаблон валиден.

    Args:
        data: bytes, bytearray, memoryview или последовательность байтов

    Returns:
        Значение в диапазоне [0, UINT128_MAX]

    Raises:
        Uint128InvalidBytesSize: Если длина не равна 16
        TypeError: Если data является int или str
    """
    if isinstance(data, (int, str)):
        # bytes(16) дал бы 16 нулевых байт
        raise TypeError(f"data must be bytes-like, got {type(data).__name__}")
    raw = bytes(data)

    if len(raw) != UINT128_BYTES:
        logger.debug("uint128_invalid_bytes_size", length=len(raw), expected=UINT128_BYTES)
        raise Uint128InvalidBytesSize()

    significant = raw.lstrip(b"\x00")
    if not significant:
        return 0
    return int.from_bytes(significant, "big")
