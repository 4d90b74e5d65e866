"""Random Key Generator — случайная обратимая ключевая матрица.

Ограниченный перебор с детерминированным fallback:
- до RANDOM_KEY_ATTEMPTS попыток, элементы равномерно из [0, 26)
- каждая попытка проверяется валидатором ключа (gcd(det, 26) == 1)
- если обратимая матрица не найдена, возвращается единичная матрица

С заданным seed источника случайности результат воспроизводим.
"""

import logging
import random
from typing import Final

from hill_cipher.core.domain.key_matrix import KeyMatrix
from hill_cipher.core.math.matrix import SUPPORTED_ORDERS
from hill_cipher.core.math.modular import MOD
from hill_cipher.keys.validator import is_invertible

logger = logging.getLogger(__name__)

# Бюджет попыток случайного поиска
RANDOM_KEY_ATTEMPTS: Final[int] = 500


def random_invertible_key(
    order: int,
    rng: random.Random | None = None,
    attempts: int = RANDOM_KEY_ATTEMPTS,
) -> KeyMatrix:
    """Случайная обратимая по модулю 26 матрица порядка order.

    Args:
        order: порядок матрицы (2 или 3)
        rng: источник случайности (default: модуль random)
        attempts: бюджет попыток (default: RANDOM_KEY_ATTEMPTS)

    Returns:
        Обратимая KeyMatrix; единичная матрица, если бюджет исчерпан

    Raises:
        ValueError: если order не 2/3 или attempts < 0
    """
    if order not in SUPPORTED_ORDERS:
        raise ValueError(f"order must be one of {SUPPORTED_ORDERS}, got {order}")
    if attempts < 0:
        raise ValueError(f"attempts must be non-negative, got {attempts}")

    source = rng if rng is not None else random

    for attempt in range(attempts):
        candidate = KeyMatrix(
            rows=[[source.randrange(MOD) for _ in range(order)] for _ in range(order)]
        )
        if is_invertible(candidate):
            logger.debug("Random invertible %dx%d key found on attempt %d", order, order, attempt + 1)
            return candidate

    logger.warning(
        "No invertible %dx%d key found in %d attempts, falling back to identity",
        order, order, attempts,
    )
    return KeyMatrix.identity(order)
