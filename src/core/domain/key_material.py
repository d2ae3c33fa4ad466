"""
KeyMaterial — Модель RSA ключевого материала

Immutable Pydantic модель: модуль N, публичная экспонента E,
приватная экспонента D в виде десятичных строк.

Ключ создаётся один раз и передаётся явно в каждый вызов шифра;
глобального состояния нет.
"""

import json
import os
from pathlib import Path
from typing import Any, Final, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

from src.core.contracts.validators import validate_key_material

from .bignum import DigitVectorInteger

# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================

DIGIT_STRING_PATTERN: Final[str] = r"^[0-9]+$"

# Переменные окружения для загрузки ключа без файла
ENV_MODULUS: Final[str] = "BIGNUM_RSA_N"
ENV_PUBLIC_EXPONENT: Final[str] = "BIGNUM_RSA_E"
ENV_PRIVATE_EXPONENT: Final[str] = "BIGNUM_RSA_D"


# =============================================================================
# KEY MATERIAL MODEL
# =============================================================================


class KeyMaterial(BaseModel):
    """
    RSA ключевой материал (N, E, D).

    Immutable модель (frozen=True): после создания ключ не меняется.
    Значения хранятся десятичными строками, DigitVectorInteger строятся
    по запросу через свойства n / e / d.
    """

    modulus: str = Field(
        ..., min_length=1, pattern=DIGIT_STRING_PATTERN, description="Модуль N"
    )
    public_exponent: str = Field(
        ..., min_length=1, pattern=DIGIT_STRING_PATTERN, description="Публичная экспонента E"
    )
    private_exponent: str = Field(
        ..., min_length=1, pattern=DIGIT_STRING_PATTERN, description="Приватная экспонента D"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("modulus")
    @classmethod
    def validate_modulus_above_one(cls, v: str) -> str:
        """
        Модуль должен быть > 1.

        N == 0 приводит к делению на ноль, N == 1 отображает всё в ноль.
        """
        if DigitVectorInteger(v) <= DigitVectorInteger("1"):
            raise ValueError(f"modulus must be greater than 1, got {v}")
        return v

    @property
    def n(self) -> DigitVectorInteger:
        return DigitVectorInteger(self.modulus)

    @property
    def e(self) -> DigitVectorInteger:
        return DigitVectorInteger(self.public_exponent)

    @property
    def d(self) -> DigitVectorInteger:
        return DigitVectorInteger(self.private_exponent)

    # -------------------------------------------------------------------------
    # Загрузка
    # -------------------------------------------------------------------------

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "KeyMaterial":
        """
        Загрузка из переменных окружения BIGNUM_RSA_N / _E / _D.

        Raises:
            KeyError: Если переменная не задана
            pydantic.ValidationError: Если значения невалидны
        """
        env = os.environ if environ is None else environ
        missing = [
            name
            for name in (ENV_MODULUS, ENV_PUBLIC_EXPONENT, ENV_PRIVATE_EXPONENT)
            if not env.get(name)
        ]
        if missing:
            raise KeyError(f"Key material environment variables not set: {', '.join(missing)}")

        return cls(
            modulus=env[ENV_MODULUS].strip(),
            public_exponent=env[ENV_PUBLIC_EXPONENT].strip(),
            private_exponent=env[ENV_PRIVATE_EXPONENT].strip(),
        )


def load_key_material(path: str | Path) -> KeyMaterial:
    """
    Загрузка ключа из JSON файла.

    Файл проверяется по контракту key_material (JSON Schema), затем
    валидируется моделью.

    Args:
        path: Путь к JSON файлу ключа

    Returns:
        KeyMaterial

    Raises:
        FileNotFoundError: Если файл не найден
        json.JSONDecodeError: Если файл не является валидным JSON
        jsonschema.ValidationError: Если данные не соответствуют контракту
    """
    with open(path, "r", encoding="utf-8") as f:
        data: Any = json.load(f)

    validate_key_material(data)
    return KeyMaterial.model_validate(data)
