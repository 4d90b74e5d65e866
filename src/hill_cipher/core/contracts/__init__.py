"""
Contract Validation Module

JSON Schema контракты ключевой матрицы и результата шифрования.
"""

from .validators import (
    CONTRACT_NAMES,
    load_schema,
    validate_cipher_result,
    validate_key_matrix,
)

__all__ = [
    "CONTRACT_NAMES",
    "load_schema",
    "validate_key_matrix",
    "validate_cipher_result",
]
