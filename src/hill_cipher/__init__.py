"""
Hill cipher engine.

Classical Hill cipher over Z/26 with 2x2 and 3x3 key matrices:
key validation and inversion, random key generation, and block
encryption/decryption with a per-block trace.
"""

from hill_cipher.core.domain import BlockStep, CipherDirection, KeyMatrix, MatrixOrder, PolicyError
from hill_cipher.core.math import MOD, ModularInverseNotFound
from hill_cipher.keys import (
    KeyVerdict,
    evaluate_key,
    is_invertible,
    key_inverse,
    random_invertible_key,
)
from hill_cipher.pipeline import (
    CipherResult,
    decrypt,
    decrypt_with_key,
    encrypt,
    pad_and_normalize,
)

__all__ = [
    # Constants
    "MOD",
    # Exceptions
    "ModularInverseNotFound",
    # Domain
    "BlockStep",
    "CipherDirection",
    "KeyMatrix",
    "MatrixOrder",
    "PolicyError",
    # Keys
    "KeyVerdict",
    "evaluate_key",
    "is_invertible",
    "key_inverse",
    "random_invertible_key",
    # Pipeline
    "CipherResult",
    "encrypt",
    "decrypt",
    "decrypt_with_key",
    "pad_and_normalize",
]
