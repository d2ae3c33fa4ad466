"""
Digit Arithmetic — школьная арифметика над десятичными векторами цифр

Модуль реализует арифметику неотрицательных целых произвольной точности,
представленных последовательностью десятичных цифр (старшая цифра первая):
- Нормализация и разбор десятичных строк
- Сравнение (equals / less_than / greater_than)
- Вычитание с явным контролем underflow
- Умножение в столбик
- Деление в столбик и остаток от деления

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат любой операции нормализован: не пустой, без ведущих нулей
   (ноль представлен одной цифрой 0)
2. Знака нет: a - b при a < b → NegativeResultError
3. Деление на ноль никогда не входит в цикл: DivisionByZeroError
4. Входные последовательности не мутируются, результат — новый tuple
"""

from typing import Final, Sequence

Digits = tuple[int, ...]

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления
BASE: Final[int] = 10

ZERO_DIGITS: Final[Digits] = (0,)
ONE_DIGITS: Final[Digits] = (1,)
TWO_DIGITS: Final[Digits] = (2,)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BignumError(Exception):
    """Базовое исключение арифметики над векторами цифр."""

    pass


class NegativeResultError(BignumError):
    """
    Вычитание с уменьшаемым меньше вычитаемого.

    Тип не имеет знака, поэтому отрицательный результат непредставим.
    """

    pass


class DivisionByZeroError(BignumError, ZeroDivisionError):
    """Делитель равен нулю (divide / modulus / mod_exponent)."""

    pass


class MalformedDigitStringError(BignumError, ValueError):
    """Строка для конструктора пуста или содержит не-цифровые символы."""

    pass


# =============================================================================
# НОРМАЛИЗАЦИЯ И РАЗБОР
# =============================================================================


def normalize(digits: Sequence[int]) -> Digits:
    """
    Удаление ведущих нулей.

    Args:
        digits: Последовательность цифр (может быть пустой)

    Returns:
        Нормализованный tuple; пустой вход и все нули → (0,)

    Examples:
        >>> normalize([0, 0, 4, 2])
        (4, 2)
        >>> normalize([0, 0])
        (0,)
    """
    start = 0
    last = len(digits) - 1
    while start < last and digits[start] == 0:
        start += 1

    if last < 0:
        return ZERO_DIGITS

    return tuple(digits[start:])


def parse_digits(text: str) -> Digits:
    """
    Разбор десятичной строки: каждый символ → одна цифра.

    Args:
        text: Десятичная строка (только '0'-'9')

    Returns:
        Нормализованный tuple цифр

    Raises:
        MalformedDigitStringError: Если строка пуста или содержит не-цифры

    Examples:
        >>> parse_digits("00123")
        (1, 2, 3)
    """
    if not isinstance(text, str):
        raise MalformedDigitStringError(f"Digit string must be str, got {type(text).__name__}")

    if not text:
        raise MalformedDigitStringError("Digit string cannot be empty")

    digits = []
    for position, ch in enumerate(text):
        # str.isdigit() пропускает не-ASCII цифры ('²', '٣'), поэтому явный диапазон
        if not "0" <= ch <= "9":
            raise MalformedDigitStringError(
                f"Invalid digit {ch!r} at position {position} in {text!r}"
            )
        digits.append(ord(ch) - ord("0"))

    return normalize(digits)


def is_zero(digits: Sequence[int]) -> bool:
    """True если нормализованное значение равно нулю."""
    return len(digits) == 1 and digits[0] == 0


def is_odd(digits: Sequence[int]) -> bool:
    """
    Чётность по последней цифре.

    Десятичная чётность совпадает с чётностью младшей цифры.
    """
    return digits[-1] % 2 != 0


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def equals(a: Sequence[int], b: Sequence[int]) -> bool:
    """Структурное равенство нормализованных последовательностей."""
    return tuple(a) == tuple(b)


def less_than(a: Sequence[int], b: Sequence[int]) -> bool:
    """
    Сравнение a < b.

    Алгоритм:
        1. Разная длина → меньше то, что короче
        2. Равная длина → первая различающаяся цифра слева решает

    Ожидает нормализованные входы (ведущие нули исказят сравнение по длине).
    """
    if len(a) != len(b):
        return len(a) < len(b)

    for x, y in zip(a, b):
        if x != y:
            return x < y

    return False


def greater_than(a: Sequence[int], b: Sequence[int]) -> bool:
    """Сравнение a > b (обратное less_than)."""
    return less_than(b, a)


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def subtract(a: Sequence[int], b: Sequence[int]) -> Digits:
    """
    Вычитание в столбик a - b.

    Цифры вычитаются справа налево, при отрицательной разности занимается
    десяток из следующего разряда. Длина результата до нормализации
    равна max(len(a), len(b)).

    Args:
        a: Уменьшаемое
        b: Вычитаемое

    Returns:
        Нормализованная разность

    Raises:
        NegativeResultError: Если a < b

    Examples:
        >>> subtract((1, 0, 0), (1,))
        (9, 9)
    """
    if less_than(a, b):
        raise NegativeResultError(
            f"Cannot subtract larger value from smaller: "
            f"{_digits_str(a)} - {_digits_str(b)}"
        )

    size = max(len(a), len(b))
    difference = [0] * size
    borrow = 0

    i = len(a) - 1
    j = len(b) - 1
    for k in range(size - 1, -1, -1):
        first_dig = a[i] if i >= 0 else 0
        second_dig = b[j] if j >= 0 else 0
        curr_diff = first_dig - second_dig - borrow

        if curr_diff < 0:
            curr_diff += BASE
            borrow = 1
        else:
            borrow = 0

        difference[k] = curr_diff
        i -= 1
        j -= 1

    return normalize(difference)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply(a: Sequence[int], b: Sequence[int]) -> Digits:
    """
    Умножение в столбик.

    Буфер результата длиной len(a) + len(b) заполнен нулями; произведение
    a[i] * b[j] накапливается в позиции i + j + 1 с переносом десятков.
    Нулевые цифры a пропускаются.

    Examples:
        >>> multiply((1, 2), (1, 2))
        (1, 4, 4)
    """
    product = [0] * (len(a) + len(b))

    for i in range(len(a) - 1, -1, -1):
        a_dig = a[i]
        if a_dig == 0:
            continue

        carry_over = 0
        for j in range(len(b) - 1, -1, -1):
            curr_product = a_dig * b[j] + product[i + j + 1] + carry_over
            product[i + j + 1] = curr_product % BASE
            carry_over = curr_product // BASE

        product[i] += carry_over

    return normalize(product)


# =============================================================================
# ДЕЛЕНИЕ И ОСТАТОК
# =============================================================================


def divide(a: Sequence[int], b: Sequence[int]) -> Digits:
    """
    Деление в столбик (целая часть a / b).

    Цифры делимого по одной дописываются к текущему остатку; пока
    остаток >= b, из него вычитается b. Число вычитаний (0-9) — очередная
    цифра частного.

    Args:
        a: Делимое
        b: Делитель

    Returns:
        Нормализованное частное

    Raises:
        DivisionByZeroError: Если b == 0 (до входа в цикл)

    Examples:
        >>> divide((1, 0, 0), (7,))
        (1, 4)
    """
    if is_zero(b):
        raise DivisionByZeroError(f"Division by zero: {_digits_str(a)} / 0")

    quotient = []
    remainder: list[int] = []

    for digit in a:
        remainder.append(digit)

        # Ведущие нули удаляются полностью: пустой остаток < любого b
        lead = 0
        while lead < len(remainder) and remainder[lead] == 0:
            lead += 1
        if lead:
            del remainder[:lead]

        curr_div = 0
        while not less_than(remainder, b):
            remainder = list(subtract(remainder, b))
            curr_div += 1

        quotient.append(curr_div)

    return normalize(quotient)


def modulus(a: Sequence[int], b: Sequence[int]) -> Digits:
    """
    Остаток от деления: a - (a / b) * b.

    Raises:
        DivisionByZeroError: Если b == 0
    """
    return subtract(a, multiply(divide(a, b), b))


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def _digits_str(digits: Sequence[int]) -> str:
    """Десятичная строка для сообщений об ошибках."""
    return "".join(str(d) for d in digits) or "<empty>"
