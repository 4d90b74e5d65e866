"""Keys — проверка обратимости, обращение и генерация ключевых матриц."""

from .generator import RANDOM_KEY_ATTEMPTS, random_invertible_key
from .validator import KeyVerdict, evaluate_key, is_invertible, key_inverse

__all__ = [
    "RANDOM_KEY_ATTEMPTS",
    "random_invertible_key",
    "KeyVerdict",
    "evaluate_key",
    "is_invertible",
    "key_inverse",
]
