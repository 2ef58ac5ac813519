"""
Uint128 — Модель беззнакового 128-битного целого

Immutable Pydantic модель (frozen=True), оборачивающая int в диапазоне
[0, 2^128 − 1]. Используется там, где значения протокола или леджера
требуют точности шире машинного слова, но должны проходить через
фиксированный 16-байтовый wire-формат.

Все арифметические операции возвращают новый экземпляр; проверка диапазона
выполняется явно после каждого конструктора и каждой операции.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_serializer, field_validator

from src.core.math.checked_uint import (
    INT64_MAX,
    INT64_MIN,
    BytesLike,
    checked_add,
    checked_div,
    checked_mul,
    checked_pow,
    checked_sub,
    decode_uint128,
    encode_uint128,
    format_uint128,
    is_valid_uint128,
    parse_uint128,
    require_int,
    validate_uint128,
)


Operand = Union["Uint128", int]


# =============================================================================
# UINT128 MODEL
# =============================================================================


class Uint128(BaseModel):
    """
    Беззнаковое 128-битное целое.

    Конструкторы:
        Uint128() / zero()     — значение 0
        from_string(text)      — base-10 строка
        from_int64(i)          — native signed 64-bit
        from_big_int(i)        — произвольный int
        from_fixed_bytes(data) — 16 байт big-endian
        from_bytes(data)       — произвольный буфер, только если длина == 16

    Арифметика (add / sub / mul / div / exp) и операторы + - * // **
    возвращают новый Uint128 или поднимают Uint128Error.
    """

    value: int = Field(default=0, strict=True, description="Значение в диапазоне [0, 2^128 − 1]")

    model_config = {"frozen": True}  # Immutable

    @field_validator("value", mode="before")
    @classmethod
    def coerce_wire_forms(cls, v: Any) -> Any:
        """
        Приём текстовой и бинарной форм.

        str → разбор десятичной строки, bytes → 16-байтовый кодек.
        """
        if isinstance(v, str):
            return parse_uint128(v)
        if isinstance(v, (bytes, bytearray, memoryview)):
            return decode_uint128(v)
        return v

    @field_validator("value")
    @classmethod
    def check_range(cls, v: int) -> int:
        """Проверка инварианта 0 <= value <= 2^128 − 1"""
        return validate_uint128(v)

    @field_serializer("value", when_used="json")
    def serialize_value(self, v: int) -> str:
        """В JSON значение пишется канонической строкой (без потери точности)"""
        return format_uint128(v)

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def _checked(cls, value: int) -> "Uint128":
        return cls.model_construct(value=validate_uint128(value))

    @classmethod
    def zero(cls) -> "Uint128":
        return cls.model_construct(value=0)

    @classmethod
    def from_string(cls, text: str) -> "Uint128":
        """
        Конструктор из base-10 строки.

        Raises:
            Uint128InvalidString: Если строка не является base-10 литералом
            Uint128Underflow / Uint128Overflow: Если значение вне диапазона
        """
        return cls._checked(parse_uint128(text))

    @classmethod
    def from_int64(cls, i: int) -> "Uint128":
        """
        Конструктор из native signed 64-bit целого.

        Raises:
            TypeError: Если i не int
            ValueError: Если i вне диапазона signed 64-bit
            Uint128Underflow: Если i отрицательное
        """
        require_int(i, "i")
        if not INT64_MIN <= i <= INT64_MAX:
            raise ValueError(f"{i} is outside the signed 64-bit range")
        return cls._checked(i)

    @classmethod
    def from_big_int(cls, i: int) -> "Uint128":
        """
        Конструктор из произвольного int.

        Raises:
            TypeError: Если i не int
            Uint128Underflow: Если i < 0
            Uint128Overflow: Если i.bit_length() > 128
        """
        return cls._checked(require_int(i, "i"))

    @classmethod
    def from_fixed_bytes(cls, data: bytes) -> "Uint128":
        """
        Конструктор из 16-байтового big-endian буфера.

        Любой 16-байтовый шаблон находится в диапазоне. Буфер другой длины:
        ошибка вызывающего (Uint128InvalidBytesSize).
        """
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError(f"data must be bytes, got {type(data).__name__}")
        return cls.model_construct(value=decode_uint128(data))

    @classmethod
    def from_bytes(cls, data: BytesLike) -> "Uint128":
        """
        Конструктор из буфера переменной длины.

        Raises:
            Uint128InvalidBytesSize: Если длина не равна 16
        """
        return cls.model_construct(value=decode_uint128(data))

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate(self) -> "Uint128":
        """
        Повторная проверка инварианта.

        Экземпляры, созданные через model_construct, pydantic не проверяет.

        Returns:
            self

        Raises:
            Uint128Underflow / Uint128Overflow: Если значение вне диапазона
        """
        validate_uint128(self.value)
        return self

    def is_valid(self) -> bool:
        return is_valid_uint128(self.value)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, x: Operand) -> "Uint128":
        """self + x (Uint128Overflow при результате >= 2^128)"""
        return self._checked(checked_add(self.value, _operand(x)))

    def sub(self, x: Operand) -> "Uint128":
        """self - x (Uint128Underflow при отрицательном результате)"""
        return self._checked(checked_sub(self.value, _operand(x)))

    def mul(self, x: Operand) -> "Uint128":
        """self * x (Uint128Overflow при результате >= 2^128)"""
        return self._checked(checked_mul(self.value, _operand(x)))

    def div(self, x: Operand) -> "Uint128":
        """
        self / x с усечением к нулю.

        Raises:
            Uint128DivisionByZero: Если x == 0
        """
        return self._checked(checked_div(self.value, _operand(x)))

    def exp(self, x: Operand) -> "Uint128":
        """
        self ** x без модуля.

        Стоимость вычисления ограничена: при self >= 2 и x >= 128 результат
        заведомо вне диапазона (Uint128Overflow).
        """
        return self._checked(checked_pow(self.value, _operand(x)))

    def __add__(self, other: Any) -> "Uint128":
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> "Uint128":
        if not _is_operand(other):
            return NotImplemented
        return self._checked(_operand(other)).add(self)

    def __sub__(self, other: Any) -> "Uint128":
        if not _is_operand(other):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other: Any) -> "Uint128":
        if not _is_operand(other):
            return NotImplemented
        return self._checked(_operand(other)).sub(self)

    def __mul__(self, other: Any) -> "Uint128":
        if not _is_operand(other):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other: Any) -> "Uint128":
        if not _is_operand(other):
            return NotImplemented
        return self._checked(_operand(other)).mul(self)

    def __floordiv__(self, other: Any) -> "Uint128":
        if not _is_operand(other):
            return NotImplemented
        return self.div(other)

    def __rfloordiv__(self, other: Any) -> "Uint128":
        if not _is_operand(other):
            return NotImplemented
        return self._checked(_operand(other)).div(self)

    def __pow__(self, other: Any, modulo: Any = None) -> "Uint128":
        if modulo is not None:
            raise TypeError("Uint128 exponentiation does not take a modulus")
        if not _is_operand(other):
            return NotImplemented
        return self.exp(other)

    def __rpow__(self, other: Any) -> "Uint128":
        if not _is_operand(other):
            return NotImplemented
        return self._checked(_operand(other)).exp(self)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def cmp(self, x: Operand) -> int:
        """
        Трёхзначное сравнение.

        int-операнд сравнивается как есть, без проверки диапазона, так же
        как в __eq__: u(5) > -1 и u(5) < 2**129 истинны.

        Returns:
            -1 если self <  x
             0 если self == x
            +1 если self >  x
        """
        other = _comparable(x)
        if self.value < other:
            return -1
        if self.value > other:
            return 1
        return 0

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Uint128):
            return self.value == other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.cmp(other) < 0

    def __le__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.cmp(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.cmp(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.cmp(other) >= 0

    # -------------------------------------------------------------------------
    # Copy & conversion
    # -------------------------------------------------------------------------

    def deep_copy(self) -> "Uint128":
        """Независимый экземпляр с тем же значением"""
        return self.model_copy(deep=True)

    def model_copy(
        self, *, update: Optional[Dict[str, Any]] = None, deep: bool = False
    ) -> "Uint128":
        """
        Копия с заменой полей.

        В отличие от BaseModel.model_copy, update проходит полную валидацию
        (включая строковую и байтовую формы), поэтому копия всегда в диапазоне.

        Raises:
            ValidationError: Если новое значение не является uint128
        """
        if update:
            return type(self).model_validate({"value": self.value, **update})
        return super().model_copy(deep=deep)

    def to_string(self) -> str:
        """Каноническая десятичная строка ("0" для нуля)"""
        return format_uint128(self.value)

    def to_fixed_bytes(self) -> bytes:
        """
        16 байт big-endian, с нулевым дополнением слева.

        Raises:
            Uint128Underflow / Uint128Overflow: Если значение вне диапазона
        """
        return encode_uint128(self.value)

    def to_byte_list(self) -> List[int]:
        """Каноническое представление как список из 16 байтов"""
        return list(self.to_fixed_bytes())

    def __str__(self) -> str:
        return self.to_string()

    def __bytes__(self) -> bytes:
        return self.to_fixed_bytes()

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0


# =============================================================================
# OPERAND HELPERS
# =============================================================================


def _is_operand(x: Any) -> bool:
    return isinstance(x, Uint128) or (isinstance(x, int) and not isinstance(x, bool))


def _operand(x: Operand) -> int:
    """Значение операнда; int проверяется на диапазон как Uint128"""
    if isinstance(x, Uint128):
        return x.value
    return validate_uint128(require_int(x, "operand"))


def _comparable(x: Operand) -> int:
    """Значение для сравнения; int берётся без проверки диапазона"""
    if isinstance(x, Uint128):
        return x.value
    return require_int(x, "operand")
