"""
Тесты для Line Chunking Protocol

Проверяемые свойства:
1. Каждая строка → одна пара шифротекстов, порядок сохраняется
2. Шифротексты состоят только из десятичных цифр
3. Расшифрование восстанавливает строку (усечение до 96 байт, без хвостовых пробелов)
4. Пустая строка шифруется и расшифровывается в пустую
5. Перестановка половин между строками обнаруживается по номеру строки
6. Ошибки шифротекста и переполнение блока пробрасываются
7. NUL-байт в начале второй половины не теряется

Шифрование и расшифрование на большом ключе выполняются один раз на модуль.
"""

import pytest

from src.cipher.chunking import (
    DEFAULT_TEXT_ENCODING,
    BlockOverflowError,
    LineCipher,
    LineNumberMismatchError,
    large_decrypt,
    large_encrypt,
    padding,
    split_lines,
)
from src.core.domain.records import RECORD_LENGTH, PaddedLineRecord, RecordLengthError
from src.core.math.digit_arithmetic import MalformedDigitStringError

PLAINTEXT_LINES = [
    "hello",
    "a" * 96,
    "b" * 97,
    "",
    "tail   ",
    "привет мир",
    "x" * 48 + "\x00" + "tail",
]


@pytest.fixture(scope="module")
def cipher(key_material) -> LineCipher:
    return LineCipher(key_material)


@pytest.fixture(scope="module")
def encrypted(cipher):
    return cipher.encrypt_text("\n".join(PLAINTEXT_LINES) + "\n")


@pytest.fixture(scope="module")
def decrypted(cipher, encrypted):
    return cipher.decrypt_lines(line.as_pair() for line in encrypted)


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


class TestSplitLines:
    def test_trailing_newline_ignored(self):
        assert split_lines("a\nb\n") == ["a", "b"]

    def test_no_trailing_newline(self):
        assert split_lines("a\nb") == ["a", "b"]

    def test_empty_text(self):
        assert split_lines("") == []

    def test_single_newline_is_one_empty_line(self):
        assert split_lines("\n") == [""]

    def test_inner_empty_lines_kept(self):
        assert split_lines("a\n\nb\n") == ["a", "", "b"]


class TestPadding:
    def test_record_layout(self):
        assert padding("hi", 1) == b"  1hi" + b" " * 94 + b"  1"

    def test_multibyte_counts_bytes(self):
        raw = padding("й" * 60, 2)
        assert len(raw) == RECORD_LENGTH
        # 48 двухбайтовых символов заполняют 96 байт
        assert raw[3:99] == ("й" * 48).encode(DEFAULT_TEXT_ENCODING)

    def test_default_encoding_is_utf8(self):
        assert padding("й", 1) == padding("й", 1, DEFAULT_TEXT_ENCODING)
        assert padding("й", 1)[3:5] == "й".encode("utf-8")

    def test_custom_encoding(self):
        assert padding("й", 1, "cp1251")[3:5] == "й".encode("cp1251") + b" "


# =============================================================================
# ШИФРОВАНИЕ
# =============================================================================


class TestEncryptText:
    def test_one_pair_per_line(self, encrypted):
        assert len(encrypted) == len(PLAINTEXT_LINES)

    def test_ciphertexts_are_digits(self, encrypted):
        for line in encrypted:
            assert line.first.isdigit() and line.first.isascii()
            assert line.second.isdigit() and line.second.isascii()

    def test_ciphertexts_below_modulus(self, encrypted, key_numbers):
        n, _, _ = key_numbers
        for line in encrypted:
            assert int(line.first) < n
            assert int(line.second) < n

    def test_order_preserved(self, cipher, encrypted):
        """Результат пула совпадает с шифрованием строки по её номеру."""
        assert cipher.encrypt_line(PLAINTEXT_LINES[2], 3) == encrypted[2]

    def test_ciphertext_depends_on_line_number(self, encrypted):
        # Одинаковое содержимое, разные номера → разные записи
        assert encrypted[0].first != encrypted[1].first

    def test_matches_textbook_rsa(self, encrypted, key_numbers):
        """Первая половина = int(encode(bytes))^E mod N."""
        n, e, _ = key_numbers
        first_half, _ = PaddedLineRecord.from_line(b"hello", 1).halves()
        expected = pow(int("".join(f"{b:03d}" for b in first_half)), e, n)
        assert int(encrypted[0].first) == expected

    def test_empty_text_gives_no_lines(self, cipher):
        assert cipher.encrypt_text("") == []

    def test_block_overflow_with_small_modulus(self, small_key):
        with pytest.raises(BlockOverflowError, match="not smaller than modulus"):
            LineCipher(small_key).encrypt_text("hello\n")


# =============================================================================
# РАСШИФРОВАНИЕ
# =============================================================================


class TestDecrypt:
    def test_short_line(self, decrypted):
        assert decrypted[0] == "hello"

    def test_full_line(self, decrypted):
        assert decrypted[1] == "a" * 96

    def test_long_line_truncated(self, decrypted):
        assert decrypted[2] == "b" * 96

    def test_empty_line(self, decrypted):
        assert decrypted[3] == ""

    def test_trailing_spaces_lost(self, decrypted):
        assert decrypted[4] == "tail"

    def test_multibyte_text(self, decrypted):
        assert decrypted[5] == "привет мир"

    def test_swapped_halves_detected(self, cipher, encrypted):
        with pytest.raises(LineNumberMismatchError, match="does not match"):
            cipher.decrypt_line(encrypted[0].first, encrypted[1].second)

    def test_swapped_halves_without_verification(self, key_material, encrypted):
        lenient = LineCipher(key_material, verify_line_numbers=False)
        text = lenient.decrypt_line(encrypted[0].first, encrypted[1].second)
        # Первая половина строки 1 + вторая половина строки 2
        assert text == "hello" + " " * 43 + "a" * 48

    def test_malformed_ciphertext(self, small_key):
        with pytest.raises(MalformedDigitStringError):
            LineCipher(small_key).decrypt_line("12x", "5")

    def test_nul_at_start_of_second_half(self, decrypted):
        """NUL-байт 51 записи сохраняется при расшифровании."""
        assert decrypted[6] == "x" * 48 + "\x00" + "tail"

    def test_short_halves_padded_with_nul(self, small_key):
        """1^D = 1 → половины дополняются до 51 байта, номер строки не совпадает."""
        with pytest.raises(LineNumberMismatchError):
            LineCipher(small_key).decrypt_line("1", "1")

    def test_oversized_half_rejected(self, key_material, key_numbers):
        """Половина, расшифрованная в 52 байта, даёт запись длиннее 102 байт."""
        n, e, _ = key_numbers
        oversized = pow(int("001" * 52), e, n)
        with pytest.raises(RecordLengthError):
            LineCipher(key_material).decrypt_line(str(oversized), "1")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


class TestConvenienceFunctions:
    def test_large_encrypt_returns_pairs(self, key_material, encrypted):
        assert large_encrypt("hello", key_material) == [encrypted[0].as_pair()]

    def test_large_decrypt(self, key_material, encrypted):
        first, second = encrypted[4].as_pair()
        assert large_decrypt(first, second, key_material) == "tail"
