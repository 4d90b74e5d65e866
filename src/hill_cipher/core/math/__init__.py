"""
Core math modules для Hill cipher

Модульная арифметика и матричная алгебра над Z/26.
"""

# Modular Arithmetic
from hill_cipher.core.math.modular import (
    MOD,
    ModularInverseNotFound,
    gcd,
    is_unit,
    mod,
    mod_inverse,
    require_mod_inverse,
)

# Matrix Algebra
from hill_cipher.core.math.matrix import (
    SUPPORTED_ORDERS,
    Matrix,
    MatrixLike,
    Vector,
    adjugate,
    cofactor_minor,
    determinant,
    determinant_raw,
    format_matrix,
    identity_matrix,
    matrix_multiply,
    matrix_order,
    matrix_vector_product,
    reduce_matrix,
    scalar_multiply,
    zero_matrix,
)

__all__ = [
    # Modular Arithmetic — Constants
    "MOD",
    # Modular Arithmetic — Exceptions
    "ModularInverseNotFound",
    # Modular Arithmetic — Functions
    "gcd",
    "is_unit",
    "mod",
    "mod_inverse",
    "require_mod_inverse",
    # Matrix Algebra — Constants
    "SUPPORTED_ORDERS",
    # Matrix Algebra — Types
    "Matrix",
    "MatrixLike",
    "Vector",
    # Matrix Algebra — Functions
    "adjugate",
    "cofactor_minor",
    "determinant",
    "determinant_raw",
    "format_matrix",
    "identity_matrix",
    "matrix_multiply",
    "matrix_order",
    "matrix_vector_product",
    "reduce_matrix",
    "scalar_multiply",
    "zero_matrix",
]
