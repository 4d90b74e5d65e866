"""
Domain models and value objects.

Contains the key matrix model and the per-block trace entry.
"""

from hill_cipher.core.domain.block_step import BlockStep, CipherDirection, PolicyError
from hill_cipher.core.domain.key_matrix import KeyMatrix, MatrixOrder, as_key_matrix

__all__ = [
    # Key matrix
    "KeyMatrix",
    "MatrixOrder",
    "as_key_matrix",
    # Trace
    "BlockStep",
    "CipherDirection",
    "PolicyError",
]
