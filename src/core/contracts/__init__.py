"""
Contract Validation Module

Модуль для валидации JSON контрактов: файл ключа и зашифрованные строки.
"""

from .validators import (
    ContractValidator,
    EncryptedLineValidator,
    KeyMaterialValidator,
    SchemaLoader,
    validate_encrypted_line,
    validate_encrypted_lines,
    validate_key_material,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "KeyMaterialValidator",
    "EncryptedLineValidator",
    # Functions
    "validate_key_material",
    "validate_encrypted_line",
    "validate_encrypted_lines",
]
