"""GATE 0: Key Invertibility

Первый gate в цепочке конвейера:
- Проверяет текущую ключевую матрицу через валидатор ключа
- Блокирует операцию при gcd(det, 26) != 1 (PolicyError.NON_INVERTIBLE_KEY)
- Отказ происходит до обработки блоков: частичного вывода нет

Ключ проверяется при каждом вызове, результаты прошлых проверок не используются.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from hill_cipher.core.domain.block_step import PolicyError
from hill_cipher.core.domain.key_matrix import KeyMatrix
from hill_cipher.keys.validator import KeyVerdict, evaluate_key


@dataclass(frozen=True)
class Gate00Result:
    """Результат GATE 0."""

    operation_allowed: bool
    block_reason: Optional[PolicyError]

    # Полный вердикт для диагностики
    verdict: KeyVerdict

    # Детали
    details: str


class Gate00KeyInvertibility:
    """GATE 0: проверка обратимости ключа по модулю 26."""

    def __init__(self):
        """GATE 0 не требует зависимостей (stateless)."""
        pass

    def evaluate(self, key: KeyMatrix | Sequence[Sequence[int]]) -> Gate00Result:
        """Оценка GATE 0.

        Args:
            key: матрица, которую конвейер применит к блокам

        Returns:
            Gate00Result с решением о допуске и вердиктом ключа
        """
        verdict = evaluate_key(key)

        if not verdict.invertible:
            return Gate00Result(
                operation_allowed=False,
                block_reason=PolicyError.NON_INVERTIBLE_KEY,
                verdict=verdict,
                details=f"Key rejected: gcd(det, 26)={verdict.gcd} != 1 (det mod 26 = {verdict.determinant})",
            )

        return Gate00Result(
            operation_allowed=True,
            block_reason=None,
            verdict=verdict,
            details=f"PASS: det mod 26 = {verdict.determinant}, det^-1 = {verdict.inverse_determinant}",
        )
