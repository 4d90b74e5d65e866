"""Key Validator & Inverter — проверка обратимости ключа и вычисление K⁻¹.

Контракт для ключевой матрицы K порядка N:
1. d = det(K) mod 26
2. g = gcd(d, 26)
3. K обратима ⇔ g == 1
4. Если обратима: inv_det = d⁻¹ mod 26, A = adj(K), K⁻¹ = inv_det · A (mod 26)
5. Если нет: обратная матрица не строится, вердикт несёт только d и g

Вердикт пересчитывается при каждом вызове: кэша "последнего проверенного"
ключа нет, проверяется текущий ключ в момент вызова.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from hill_cipher.core.domain.key_matrix import KeyMatrix, MatrixOrder, as_key_matrix
from hill_cipher.core.math.matrix import (
    Matrix,
    adjugate,
    determinant,
    determinant_raw,
    scalar_multiply,
)
from hill_cipher.core.math.modular import MOD, gcd, is_unit, require_mod_inverse


@dataclass(frozen=True)
class KeyVerdict:
    """Вердикт обратимости ключевой матрицы."""

    order: MatrixOrder
    invertible: bool

    # Определитель приведённой матрицы: сырой и по модулю 26
    raw_determinant: int
    determinant: int
    gcd: int

    # Присутствуют только для обратимого ключа
    inverse_determinant: Optional[int]
    adjugate: Optional[Matrix]
    inverse: Optional[Matrix]

    # Детали
    details: str


def evaluate_key(matrix: KeyMatrix | Sequence[Sequence[int]]) -> KeyVerdict:
    """Полная проверка ключа: определитель, gcd, обратимость, K⁻¹.

    Args:
        matrix: ключевая матрица (KeyMatrix или вложенные списки)

    Returns:
        KeyVerdict с вердиктом и (для обратимого ключа) обратной матрицей

    Raises:
        pydantic.ValidationError: если матрица не квадратная порядка 2/3
        ModularInverseNotFound: нарушение инварианта (g == 1, но обратного нет)
    """
    key = as_key_matrix(matrix).reduced()
    rows = key.as_lists()

    raw_det = determinant_raw(rows)
    det = determinant(rows)
    g = gcd(det, MOD)

    if not is_unit(det, MOD):
        return KeyVerdict(
            order=key.order,
            invertible=False,
            raw_determinant=raw_det,
            determinant=det,
            gcd=g,
            inverse_determinant=None,
            adjugate=None,
            inverse=None,
            details=f"NOT INVERTIBLE: det={det} (mod {MOD}), gcd(det, {MOD})={g} != 1",
        )

    # det — единица кольца Z/26, обратный существует
    inv_det = require_mod_inverse(det, MOD)
    adj = adjugate(rows)
    inverse = scalar_multiply(adj, inv_det)

    return KeyVerdict(
        order=key.order,
        invertible=True,
        raw_determinant=raw_det,
        determinant=det,
        gcd=g,
        inverse_determinant=inv_det,
        adjugate=adj,
        inverse=inverse,
        details=f"INVERTIBLE: det={det} (mod {MOD}), det^-1={inv_det}",
    )


def is_invertible(matrix: KeyMatrix | Sequence[Sequence[int]]) -> bool:
    """True если gcd(det(K) mod 26, 26) == 1."""
    return evaluate_key(matrix).invertible


def key_inverse(matrix: KeyMatrix | Sequence[Sequence[int]]) -> Optional[Matrix]:
    """Обратная ключевая матрица по модулю 26, либо None для необратимого ключа."""
    return evaluate_key(matrix).inverse
