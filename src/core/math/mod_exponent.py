"""
Modular Exponentiation — base^exponent mod modulus над DigitVectorInteger

Бинарное возведение в степень справа налево, выраженное в десятичной записи:
- Чётность экспоненты определяется по последней цифре
- Экспонента делится на 2 делением в столбик
- Умножение аккумулятора и возведение основания в квадрат внутри одной
  итерации независимы и выполняются параллельно (ThreadPoolExecutor)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Итерации строго последовательны, параллельны только две подзадачи итерации
2. Подзадачи возвращают значения, слияние происходит в точке join между
   итерациями; общего изменяемого состояния нет
3. Ошибка любой подзадачи пробрасывается в цикл после завершения обеих
   (приоритет у подзадачи умножения)
4. modulus == 0 → DivisionByZeroError до входа в цикл
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Final, Optional

from src.core.domain.bignum import ONE, TWO, DigitVectorInteger
from src.core.math.digit_arithmetic import DivisionByZeroError

logger = logging.getLogger(__name__)

# Подзадачи одной итерации: условное умножение + безусловное возведение в квадрат
MOD_EXP_WORKERS: Final[int] = 2


def _mul_mod(
    a: DigitVectorInteger, b: DigitVectorInteger, modulus: DigitVectorInteger
) -> DigitVectorInteger:
    """(a * b) mod modulus."""
    return (a * b) % modulus


def mod_exponent(
    base: DigitVectorInteger,
    exponent: DigitVectorInteger,
    modulus: DigitVectorInteger,
) -> DigitVectorInteger:
    """
    Модульное возведение в степень.

    Алгоритм:
        result = 1, curr_base = base mod modulus, curr_exp = exponent
        пока curr_exp != 0:
            если curr_exp нечётна → result' = (result * curr_base) mod modulus
            параллельно           → curr_base' = (curr_base^2) mod modulus
            curr_exp = curr_exp / 2

    Нулевая экспонента возвращает 1 без редукции по модулю.

    Args:
        base: Основание
        exponent: Показатель степени
        modulus: Модуль (> 0)

    Returns:
        base^exponent mod modulus

    Raises:
        DivisionByZeroError: Если modulus == 0

    Examples:
        >>> str(mod_exponent(DigitVectorInteger("4"), DigitVectorInteger("13"), DigitVectorInteger("497")))
        '445'
    """
    if modulus.is_zero():
        raise DivisionByZeroError("mod_exponent modulus cannot be zero")

    result = ONE
    curr_base = base % modulus
    curr_exponent = exponent
    iterations = 0

    with ThreadPoolExecutor(
        max_workers=MOD_EXP_WORKERS, thread_name_prefix="mod-exp"
    ) as pool:
        while not curr_exponent.is_zero():
            multiply_future: Optional[Future] = None

            if curr_exponent.is_odd():
                multiply_future = pool.submit(_mul_mod, result, curr_base, modulus)

            square_future = pool.submit(_mul_mod, curr_base, curr_base, modulus)

            pending = [square_future]
            if multiply_future is not None:
                pending.append(multiply_future)
            wait(pending)

            # .result() пробрасывает исключение подзадачи
            if multiply_future is not None:
                result = multiply_future.result()
            curr_base = square_future.result()

            curr_exponent = curr_exponent // TWO
            iterations += 1

    logger.debug(
        "mod_exponent finished: %d iterations, modulus has %d digits",
        iterations,
        len(modulus),
    )
    return result
