"""
DigitVectorInteger — Неотрицательное целое произвольной точности

Immutable value-объект: десятичные цифры, старшая первая.
Все операторы делегируют в src.core.math.digit_arithmetic и возвращают
новый нормализованный экземпляр.

Поддерживаемые операторы: ==, <, >, <=, >=, -, *, //, %.
Сложения нет (не требуется протоколу шифрования).
"""

from typing import Sequence

from src.core.math.digit_arithmetic import (
    ONE_DIGITS,
    TWO_DIGITS,
    ZERO_DIGITS,
    Digits,
    divide,
    equals,
    greater_than,
    is_odd,
    is_zero,
    less_than,
    modulus,
    multiply,
    normalize,
    parse_digits,
    subtract,
)


class DigitVectorInteger:
    """
    Неотрицательное целое как вектор десятичных цифр.

    Инвариант: вектор не пуст и не имеет ведущих нулей (кроме самого нуля).
    Экземпляры неизменяемы и хешируемы.

    Examples:
        >>> DigitVectorInteger("0042")
        DigitVectorInteger('42')
        >>> str(DigitVectorInteger("12") * DigitVectorInteger("12"))
        '144'
    """

    __slots__ = ("_digits",)

    def __init__(self, value: str = "0"):
        """
        Args:
            value: Десятичная строка; ведущие нули отбрасываются

        Raises:
            MalformedDigitStringError: Пустая строка или не-цифровые символы
        """
        self._digits: Digits = parse_digits(value)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_digits(cls, digits: Sequence[int]) -> "DigitVectorInteger":
        """
        Создание из уже посчитанных цифр (результаты арифметики).

        Цифры нормализуются, но не проверяются на диапазон [0, 9].
        """
        instance = cls.__new__(cls)
        instance._digits = normalize(digits)
        return instance

    @classmethod
    def from_int(cls, value: int) -> "DigitVectorInteger":
        """Создание из неотрицательного Python int."""
        if value < 0:
            raise ValueError(f"DigitVectorInteger is non-negative, got {value}")
        return cls(str(value))

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    @property
    def digits(self) -> Digits:
        """Цифры, старшая первая."""
        return self._digits

    def to_string(self) -> str:
        """Десятичная строка без ведущих нулей."""
        return "".join(map(str, self._digits))

    def is_zero(self) -> bool:
        return is_zero(self._digits)

    def is_odd(self) -> bool:
        return is_odd(self._digits)

    def __len__(self) -> int:
        return len(self._digits)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"DigitVectorInteger({self.to_string()!r})"

    def __int__(self) -> int:
        return int(self.to_string())

    def __hash__(self) -> int:
        return hash(self._digits)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitVectorInteger):
            return NotImplemented
        return equals(self._digits, other._digits)

    def __lt__(self, other: "DigitVectorInteger") -> bool:
        if not isinstance(other, DigitVectorInteger):
            return NotImplemented
        return less_than(self._digits, other._digits)

    def __gt__(self, other: "DigitVectorInteger") -> bool:
        if not isinstance(other, DigitVectorInteger):
            return NotImplemented
        return greater_than(self._digits, other._digits)

    def __le__(self, other: "DigitVectorInteger") -> bool:
        if not isinstance(other, DigitVectorInteger):
            return NotImplemented
        return not greater_than(self._digits, other._digits)

    def __ge__(self, other: "DigitVectorInteger") -> bool:
        if not isinstance(other, DigitVectorInteger):
            return NotImplemented
        return not less_than(self._digits, other._digits)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __sub__(self, other: "DigitVectorInteger") -> "DigitVectorInteger":
        if not isinstance(other, DigitVectorInteger):
            return NotImplemented
        return DigitVectorInteger.from_digits(subtract(self._digits, other._digits))

    def __mul__(self, other: "DigitVectorInteger") -> "DigitVectorInteger":
        if not isinstance(other, DigitVectorInteger):
            return NotImplemented
        return DigitVectorInteger.from_digits(multiply(self._digits, other._digits))

    def __floordiv__(self, other: "DigitVectorInteger") -> "DigitVectorInteger":
        if not isinstance(other, DigitVectorInteger):
            return NotImplemented
        return DigitVectorInteger.from_digits(divide(self._digits, other._digits))

    def __mod__(self, other: "DigitVectorInteger") -> "DigitVectorInteger":
        if not isinstance(other, DigitVectorInteger):
            return NotImplemented
        return DigitVectorInteger.from_digits(modulus(self._digits, other._digits))


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO = DigitVectorInteger.from_digits(ZERO_DIGITS)
ONE = DigitVectorInteger.from_digits(ONE_DIGITS)
TWO = DigitVectorInteger.from_digits(TWO_DIGITS)
