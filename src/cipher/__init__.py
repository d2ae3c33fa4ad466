"""Cipher — построчный RSA шифр поверх DigitVectorInteger.

- codec: bytes ↔ DigitVectorInteger (3 цифры на байт)
- chunking: 102-байтовые записи, шифрование/расшифрование строк
"""

from .chunking import (
    BlockOverflowError,
    LineCipher,
    LineNumberMismatchError,
    large_decrypt,
    large_encrypt,
    padding,
    split_lines,
)
from .codec import ByteOutOfRangeError, decode, encode

__all__ = [
    "ByteOutOfRangeError",
    "encode",
    "decode",
    "BlockOverflowError",
    "LineNumberMismatchError",
    "LineCipher",
    "large_encrypt",
    "large_decrypt",
    "padding",
    "split_lines",
]
