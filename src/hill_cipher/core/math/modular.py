"""
Modular Arithmetic — примитивы арифметики по модулю 26

Листовой слой движка, без зависимостей:
- gcd по алгоритму Евклида (на абсолютных значениях)
- Каноническая положительная вычетная форма mod(a, m) ∈ [0, m)
- Модульный мультипликативный обратный (расширенный алгоритм Евклида)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все результаты, отдаваемые наружу, лежат в [0, m)
2. Отрицательные промежуточные значения корректно приводятся в [0, m)
3. Для a ≡ 0 (mod m) обратного не существует, цикл Евклида не запускается
4. Все операции детерминированы и не имеют состояния
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Модуль арифметики = размер латинского алфавита (A-Z)
MOD: Final[int] = 26


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ModularInverseNotFound(Exception):
    """
    Обратный элемент потребован там, где его нет: gcd(a, m) != 1.

    После того как валидатор ключа подтвердил gcd(det, 26) == 1, это
    исключение означает нарушение инварианта (ошибку программы), а не
    ошибку пользовательского ввода.
    """
    pass


# =============================================================================
# БАЗОВЫЕ ОПЕРАЦИИ
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида).

    Работает на абсолютных значениях, результат всегда >= 0.

    Examples:
        >>> gcd(9, 26)
        1
        >>> gcd(-4, 26)
        2
        >>> gcd(0, 0)
        0
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def mod(a: int, m: int = MOD) -> int:
    """
    Каноническая положительная вычетная форма.

    Args:
        a: Любое целое (в том числе отрицательное)
        m: Модуль (default: MOD = 26)

    Returns:
        r такое, что 0 <= r < m и r ≡ a (mod m)

    Raises:
        ValueError: Если m <= 0

    Examples:
        >>> mod(-1)
        25
        >>> mod(97)
        19
    """
    if m <= 0:
        raise ValueError(f"modulus must be positive, got {m}")

    # Для m > 0 оператор % в Python возвращает остаток со знаком делителя
    return a % m


def mod_inverse(a: int, m: int = MOD) -> int | None:
    """
    Модульный мультипликативный обратный (расширенный алгоритм Евклида).

    Вычисляет коэффициент Безу t: a*t ≡ gcd(a, m) (mod m).

    Args:
        a: Число, для которого ищется обратный (сначала приводится через mod)
        m: Модуль (default: MOD = 26)

    Returns:
        mod(t, m) если gcd(a, m) == 1, иначе None

    Examples:
        >>> mod_inverse(9)
        3
        >>> mod_inverse(13) is None
        True
        >>> mod_inverse(0) is None
        True
    """
    a = mod(a, m)

    # 0 не имеет обратного, в цикл не входим
    if a == 0:
        return None

    t, new_t = 0, 1
    r, new_r = m, a
    while new_r != 0:
        q = r // new_r
        t, new_t = new_t, t - q * new_t
        r, new_r = new_r, r - q * new_r

    if r != 1:
        return None

    return mod(t, m)


def require_mod_inverse(a: int, m: int = MOD) -> int:
    """
    Модульный обратный, который обязан существовать.

    Используется после проверки gcd(a, m) == 1.

    Raises:
        ModularInverseNotFound: Если обратного нет (нарушение инварианта)
    """
    inverse = mod_inverse(a, m)
    if inverse is None:
        raise ModularInverseNotFound(
            f"No modular inverse for a={a} mod {m}: gcd={gcd(mod(a, m), m)} != 1. "
            f"Invertibility must be confirmed before inversion."
        )
    return inverse


def is_unit(a: int, m: int = MOD) -> bool:
    """True если a обратим по модулю m (gcd(mod(a, m), m) == 1)."""
    return gcd(mod(a, m), m) == 1
