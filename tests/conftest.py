"""
Общие фикстуры: тестовый RSA ключ.

Модуль N — произведение различных простых p, у которых (p - 1) делит 720720.
Для square-free N равенство m^(E*D) ≡ m (mod N) выполняется при
E*D ≡ 1 (mod λ), где λ = lcm(p - 1) делит 720720. Поэтому D < 720720 и
расшифрование укладывается в ~20 итераций даже при N > 10^156,
что нужно для 51-байтовых блоков (153 цифры).
"""

import math
from functools import reduce

import pytest

from src.core.domain.key_material import KeyMaterial

CARMICHAEL_BOUND = 720720
MODULUS_FLOOR = 10**156
PUBLIC_EXPONENT = 17


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True


def build_test_key_numbers() -> tuple[int, int, int]:
    """(N, E, D) для тестов; детерминировано."""
    primes = sorted(
        (
            divisor + 1
            for divisor in range(1, CARMICHAEL_BOUND + 1)
            if CARMICHAEL_BOUND % divisor == 0 and _is_prime(divisor + 1)
        ),
        reverse=True,
    )

    modulus = 1
    chosen = []
    for p in primes:
        modulus *= p
        chosen.append(p)
        if modulus > MODULUS_FLOOR:
            break

    assert modulus > MODULUS_FLOOR
    carmichael = reduce(math.lcm, (p - 1 for p in chosen))
    private_exponent = pow(PUBLIC_EXPONENT, -1, carmichael)
    return modulus, PUBLIC_EXPONENT, private_exponent


@pytest.fixture(scope="session")
def key_numbers() -> tuple[int, int, int]:
    return build_test_key_numbers()


@pytest.fixture(scope="session")
def key_material(key_numbers) -> KeyMaterial:
    n, e, d = key_numbers
    return KeyMaterial(modulus=str(n), public_exponent=str(e), private_exponent=str(d))


@pytest.fixture
def small_key() -> KeyMaterial:
    """Учебный ключ p=61, q=53 (для проверок, не требующих 153-цифровых блоков)."""
    return KeyMaterial(modulus="3233", public_exponent="17", private_exponent="2753")
