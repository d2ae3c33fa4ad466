"""
Byte/Integer Codec — bytes ↔ DigitVectorInteger

Каждый байт (0-255) кодируется группой из 3 десятичных цифр с ведущими
нулями; группы склеиваются по порядку.

    b"Hi" → "072" + "105" → DigitVectorInteger("72105")

Конструктор DigitVectorInteger отбрасывает ведущие нули всего числа,
поэтому decode дополняет строку нулями слева до кратной 3 длины.
Ведущие NUL-байты при этом теряются (значение 000 неотличимо от отсутствия).
"""

from typing import Final

from src.core.domain.bignum import DigitVectorInteger
from src.core.math.digit_arithmetic import BignumError

# Ширина десятичной группы одного байта
BYTE_GROUP_WIDTH: Final[int] = 3

# Максимальное значение байта
MAX_BYTE_VALUE: Final[int] = 255


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ByteOutOfRangeError(BignumError, ValueError):
    """Декодированная 3-цифровая группа вне диапазона 0-255."""

    pass


# =============================================================================
# ENCODE / DECODE
# =============================================================================


def encode(data: bytes) -> DigitVectorInteger:
    """
    Кодирование байтовой строки в целое.

    Args:
        data: Байты (пустая строка → 0)

    Returns:
        DigitVectorInteger с 3 цифрами на байт

    Examples:
        >>> str(encode(b"Hi"))
        '72105'
    """
    if not data:
        return DigitVectorInteger("0")

    return DigitVectorInteger("".join(f"{byte:03d}" for byte in data))


def decode(value: DigitVectorInteger) -> bytes:
    """
    Декодирование целого в байтовую строку.

    Args:
        value: Результат encode (или расшифрованный блок)

    Returns:
        Байты, по одному на 3-цифровую группу

    Raises:
        ByteOutOfRangeError: Если группа > 255

    Examples:
        >>> decode(DigitVectorInteger("72105"))
        b'Hi'
    """
    text = value.to_string()

    remainder = len(text) % BYTE_GROUP_WIDTH
    if remainder:
        text = "0" * (BYTE_GROUP_WIDTH - remainder) + text

    out = bytearray()
    for offset in range(0, len(text), BYTE_GROUP_WIDTH):
        group = text[offset : offset + BYTE_GROUP_WIDTH]
        byte = int(group)
        if byte > MAX_BYTE_VALUE:
            raise ByteOutOfRangeError(
                f"Decoded group {group!r} at offset {offset} exceeds {MAX_BYTE_VALUE}"
            )
        out.append(byte)

    return bytes(out)
