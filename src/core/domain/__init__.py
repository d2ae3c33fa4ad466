"""
Domain models and value objects.

Contains the DigitVectorInteger value object, RSA key material and the
padded line / encrypted line records.
"""

from src.core.domain.bignum import ONE, TWO, ZERO, DigitVectorInteger
from src.core.domain.key_material import (
    ENV_MODULUS,
    ENV_PRIVATE_EXPONENT,
    ENV_PUBLIC_EXPONENT,
    KeyMaterial,
    load_key_material,
)
from src.core.domain.records import (
    HALF_LENGTH,
    LINE_NUMBER_WIDTH,
    MAX_CHARS_PER_CHUNK,
    RECORD_LENGTH,
    EncryptedLine,
    PaddedLineRecord,
    RecordLengthError,
    format_line_number,
    strip_record,
)

__all__ = [
    # Bignum
    "DigitVectorInteger",
    "ZERO",
    "ONE",
    "TWO",
    # Key material
    "KeyMaterial",
    "load_key_material",
    "ENV_MODULUS",
    "ENV_PUBLIC_EXPONENT",
    "ENV_PRIVATE_EXPONENT",
    # Records
    "MAX_CHARS_PER_CHUNK",
    "LINE_NUMBER_WIDTH",
    "RECORD_LENGTH",
    "HALF_LENGTH",
    "PaddedLineRecord",
    "EncryptedLine",
    "RecordLengthError",
    "format_line_number",
    "strip_record",
]
