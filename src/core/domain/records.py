"""
Records — Модели записей протокола построчного шифрования

PaddedLineRecord: фиксированная 102-байтовая обёртка строки
    [номер строки:3][содержимое + пробелы:96][номер строки:3]
EncryptedLine: пара десятичных шифротекстов двух 51-байтовых половин.
"""

from typing import Final

from pydantic import BaseModel, Field

from src.core.math.digit_arithmetic import BignumError

# =============================================================================
# ПАРАМЕТРЫ ФРЕЙМИНГА
# =============================================================================

# Максимальная длина содержимого строки (байт); длиннее → усечение
MAX_CHARS_PER_CHUNK: Final[int] = 96

# Ширина поля номера строки (заголовок и хвост)
LINE_NUMBER_WIDTH: Final[int] = 3

# Полная длина записи: 3 + 96 + 3
RECORD_LENGTH: Final[int] = MAX_CHARS_PER_CHUNK + 2 * LINE_NUMBER_WIDTH

# Длина половины записи (один RSA блок)
HALF_LENGTH: Final[int] = RECORD_LENGTH // 2

# Номера строк записываются по модулю 1000, чтобы поле оставалось 3 байта
LINE_NUMBER_MODULO: Final[int] = 10**LINE_NUMBER_WIDTH

FILLER: Final[bytes] = b" "


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RecordLengthError(BignumError, ValueError):
    """Запись не имеет длину RECORD_LENGTH."""

    pass


# =============================================================================
# PADDED LINE RECORD
# =============================================================================


def format_line_number(line_number: int) -> bytes:
    """
    Номер строки, выровненный пробелами вправо до 3 байт.

    Examples:
        >>> format_line_number(7)
        b'  7'
        >>> format_line_number(1001)
        b'  1'
    """
    return str(line_number % LINE_NUMBER_MODULO).rjust(LINE_NUMBER_WIDTH).encode("ascii")


class PaddedLineRecord(BaseModel):
    """
    Запись одной строки перед разбиением на RSA блоки.

    Immutable модель (frozen=True). content хранится без пробелов-заполнителей
    и уже усечённым до MAX_CHARS_PER_CHUNK байт.
    """

    line_number: int = Field(..., ge=1, description="Номер строки (1-based)")
    content: bytes = Field(
        ..., max_length=MAX_CHARS_PER_CHUNK, description="Содержимое строки (≤ 96 байт)"
    )

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def from_line(cls, line: bytes, line_number: int) -> "PaddedLineRecord":
        """Усечение строки до MAX_CHARS_PER_CHUNK байт и создание записи."""
        return cls(line_number=line_number, content=line[:MAX_CHARS_PER_CHUNK])

    def header(self) -> bytes:
        return format_line_number(self.line_number)

    def to_bytes(self) -> bytes:
        """
        Сборка 102-байтовой записи.

        Длина заполнителя = 96 - len(content), поэтому длина записи постоянна.
        """
        header = self.header()
        filler = FILLER * (MAX_CHARS_PER_CHUNK - len(self.content))
        return header + self.content + filler + header

    def halves(self) -> tuple[bytes, bytes]:
        """Разбиение записи на две половины по 51 байт."""
        raw = self.to_bytes()
        return raw[:HALF_LENGTH], raw[HALF_LENGTH:]


def strip_record(raw: bytes) -> tuple[bytes, bytes, bytes]:
    """
    Разбор 102-байтовой записи.

    Args:
        raw: Склеенные расшифрованные половины

    Returns:
        (header, body, trailer): body — 96 байт содержимого с заполнителем
        и удалёнными хвостовыми пробелами

    Raises:
        RecordLengthError: Если длина записи != RECORD_LENGTH
    """
    if len(raw) != RECORD_LENGTH:
        raise RecordLengthError(
            f"Padded record must be {RECORD_LENGTH} bytes, got {len(raw)}"
        )

    header = raw[:LINE_NUMBER_WIDTH]
    trailer = raw[-LINE_NUMBER_WIDTH:]
    # Хвостовые пробелы содержимого тоже удаляются (протокол их не различает)
    body = raw[LINE_NUMBER_WIDTH:-LINE_NUMBER_WIDTH].rstrip(FILLER)
    return header, body, trailer


# =============================================================================
# ENCRYPTED LINE
# =============================================================================


class EncryptedLine(BaseModel):
    """
    Зашифрованная строка: шифротексты первой и второй половин записи.

    Обе строки содержат только цифры '0'-'9'.
    """

    first: str = Field(..., min_length=1, pattern=r"^[0-9]+$", description="Шифротекст байт 0-50")
    second: str = Field(..., min_length=1, pattern=r"^[0-9]+$", description="Шифротекст байт 51-101")

    model_config = {"frozen": True}

    def as_pair(self) -> tuple[str, str]:
        return self.first, self.second
