"""
Line Chunking Protocol — построчное RSA шифрование текста

Состояния обработки строки:
    Read → Truncate → Pad → Split → Transform → Join → Strip → Emit

Шифрование:
    строка → усечение до 96 байт → PaddedLineRecord (102 байта)
    → две половины по 51 байт → codec.encode → mod_exponent(E, N)
    → EncryptedLine(first, second)

Расшифрование:
    (first, second) → mod_exponent(D, N) для обеих половин параллельно
    → codec.decode → склейка 102 байт → проверка номера строки
    → удаление заголовка/хвоста → удаление хвостовых пробелов

Параллелизм:
- Шифрование: одна задача на строку, результаты собираются в порядке строк
- Расшифрование: две половины одной строки параллельно, строки по очереди

Ограничения протокола (сохраняются намеренно):
- Строка длиннее 96 байт молча усекается
- Пустая строка всё равно получает номер и полный заполнитель
- Хвостовые пробелы содержимого теряются при расшифровании
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Final, Iterable, Optional

from src.cipher.codec import decode, encode
from src.core.domain.bignum import DigitVectorInteger
from src.core.domain.key_material import KeyMaterial
from src.core.domain.records import (
    HALF_LENGTH,
    EncryptedLine,
    PaddedLineRecord,
    strip_record,
)
from src.core.math.digit_arithmetic import BignumError
from src.core.math.mod_exponent import mod_exponent

logger = logging.getLogger(__name__)

# Кодировка текста по умолчанию (байты строки → блоки)
DEFAULT_TEXT_ENCODING: Final[str] = "utf-8"

# Половины одной строки при расшифровании
DECRYPT_WORKERS: Final[int] = 2


# =============================================================================
# EXCEPTIONS
# =============================================================================


class LineNumberMismatchError(BignumError):
    """
    Номер строки в заголовке и хвосте записи не совпадает.

    Признак подмены: половины взяты из разных строк или шифротекст изменён.
    """

    pass


class BlockOverflowError(BignumError):
    """
    Закодированная половина записи не меньше модуля N.

    Такой блок нельзя восстановить после расшифрования.
    """

    pass


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def split_lines(text: str) -> list[str]:
    """
    Разбиение текста на строки по '\\n'.

    Завершающий перевод строки не порождает пустую строку, как при чтении
    построчно; пустой текст → пустой список.

    Examples:
        >>> split_lines("a\\nb\\n")
        ['a', 'b']
        >>> split_lines("\\n")
        ['']
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


# =============================================================================
# LINE CIPHER
# =============================================================================


class LineCipher:
    """
    Построчный RSA шифр с явным ключевым контекстом.

    Каждый экземпляр привязан к одному KeyMaterial; глобальных ключей нет.
    """

    def __init__(
        self,
        key_material: KeyMaterial,
        encoding: str = DEFAULT_TEXT_ENCODING,
        max_workers: Optional[int] = None,
        verify_line_numbers: bool = True,
    ):
        """
        Args:
            key_material: Ключ (N, E, D)
            encoding: Кодировка текста строк
            max_workers: Ограничение пула шифрования (None → по задаче на строку)
            verify_line_numbers: Проверять совпадение заголовка и хвоста записи
        """
        self.key_material = key_material
        self.encoding = encoding
        self.max_workers = max_workers
        self.verify_line_numbers = verify_line_numbers

        self._n = key_material.n
        self._e = key_material.e
        self._d = key_material.d

    # -------------------------------------------------------------------------
    # Шифрование
    # -------------------------------------------------------------------------

    def _encrypt_half(self, half: bytes) -> str:
        block = encode(half)
        if not block < self._n:
            raise BlockOverflowError(
                f"Encoded block of {len(block)} digits is not smaller than "
                f"modulus of {len(self._n)} digits"
            )
        return mod_exponent(block, self._e, self._n).to_string()

    def encrypt_record(self, record: PaddedLineRecord) -> EncryptedLine:
        """Шифрование готовой записи: Split → Transform."""
        first_half, second_half = record.halves()
        return EncryptedLine(
            first=self._encrypt_half(first_half),
            second=self._encrypt_half(second_half),
        )

    def encrypt_line(self, line: str, line_number: int) -> EncryptedLine:
        """
        Шифрование одной строки: Truncate → Pad → Split → Transform.

        Args:
            line: Строка без перевода строки
            line_number: Номер строки (1-based)

        Returns:
            EncryptedLine
        """
        record = PaddedLineRecord.from_line(line.encode(self.encoding), line_number)
        logger.debug("encrypting line %d (%d bytes)", line_number, len(record.content))
        return self.encrypt_record(record)

    def encrypt_text(self, text: str) -> list[EncryptedLine]:
        """
        Шифрование многострочного текста.

        Одна задача на строку; результаты собираются в порядке строк,
        независимо от порядка завершения.

        Args:
            text: Текст, строки разделены '\\n'

        Returns:
            Список EncryptedLine, по одному на строку
        """
        lines = split_lines(text)
        if not lines:
            return []

        workers = self.max_workers or len(lines)
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="encrypt-line") as pool:
            futures = [
                pool.submit(self.encrypt_line, line, line_number)
                for line_number, line in enumerate(lines, start=1)
            ]
            encrypted = [future.result() for future in futures]

        logger.info("encrypted %d lines", len(encrypted))
        return encrypted

    # -------------------------------------------------------------------------
    # Расшифрование
    # -------------------------------------------------------------------------

    def _decrypt_half(self, ciphertext: str) -> bytes:
        block = mod_exponent(DigitVectorInteger(ciphertext), self._d, self._n)
        # Ведущие NUL-байты половины теряются в целом числе
        return decode(block).rjust(HALF_LENGTH, b"\x00")

    def decrypt_record(self, first: str, second: str) -> bytes:
        """
        Расшифрование пары в 102-байтовую запись: Transform → Join.

        Половины расшифровываются параллельно, обе должны завершиться.

        Raises:
            MalformedDigitStringError: Шифротекст содержит не-цифры
            ByteOutOfRangeError: Расшифрованный блок не является байтами
        """
        with ThreadPoolExecutor(
            max_workers=DECRYPT_WORKERS, thread_name_prefix="decrypt-half"
        ) as pool:
            first_future = pool.submit(self._decrypt_half, first)
            second_future = pool.submit(self._decrypt_half, second)
            first_plain = first_future.result()
            second_plain = second_future.result()

        return first_plain + second_plain

    def decrypt_line(self, first: str, second: str) -> str:
        """
        Расшифрование одной строки: Transform → Join → Strip → Emit.

        Args:
            first: Шифротекст первой половины
            second: Шифротекст второй половины

        Returns:
            Исходная строка (усечённая до 96 байт, без хвостовых пробелов)

        Raises:
            LineNumberMismatchError: Заголовок и хвост записи различаются
            RecordLengthError: Расшифрованная запись не 102 байта
        """
        raw = self.decrypt_record(first, second)
        header, body, trailer = strip_record(raw)

        if self.verify_line_numbers and header != trailer:
            raise LineNumberMismatchError(
                f"Line number header {header!r} does not match trailer {trailer!r}"
            )

        logger.debug("decrypted line %r", header.strip().decode("ascii", errors="replace"))
        # Усечение по 96 байтам может разрезать многобайтовый символ
        return body.decode(self.encoding, errors="replace")

    def decrypt_lines(self, pairs: Iterable[tuple[str, str]]) -> list[str]:
        """Расшифрование пар по очереди (без параллелизма между строками)."""
        return [self.decrypt_line(first, second) for first, second in pairs]


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def padding(line: str, line_number: int, encoding: str = DEFAULT_TEXT_ENCODING) -> bytes:
    """
    102-байтовая запись строки: номер + содержимое + пробелы + номер.

    Examples:
        >>> padding("hi", 1)[:5]
        b'  1hi'
    """
    return PaddedLineRecord.from_line(line.encode(encoding), line_number).to_bytes()


def large_encrypt(text: str, key_material: KeyMaterial) -> list[tuple[str, str]]:
    """
    Шифрование текста в список пар десятичных строк.

    Args:
        text: Текст (строки через '\\n')
        key_material: Ключ

    Returns:
        [(first, second), ...] по одной паре на строку
    """
    return [line.as_pair() for line in LineCipher(key_material).encrypt_text(text)]


def large_decrypt(first: str, second: str, key_material: KeyMaterial) -> str:
    """
    Расшифрование одной пары в строку.

    Args:
        first: Шифротекст первой половины
        second: Шифротекст второй половины
        key_material: Ключ

    Returns:
        Расшифрованная строка
    """
    return LineCipher(key_material).decrypt_line(first, second)

