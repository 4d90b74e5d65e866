"""
Matrix Algebra — матричные операции по модулю 26

Замкнутые формулы для квадратных матриц порядка 2 и 3:
- Определитель (разложение по первой строке), сырой и по модулю 26
- Минор 2×2 для матрицы 3×3 (удаление строки и столбца)
- Присоединённая матрица (adjugate): транспонированная матрица алгебраических дополнений
- Умножение матрицы на скаляр, на вектор и на матрицу (по модулю 26)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Функции никогда не изменяют входные матрицы, всегда возвращают новые
2. Все результаты "mod 26" лежат в [0, 26)
3. Порядок матрицы ∈ {2, 3}, иначе ValueError (ошибка программы)

ФОРМУЛЫ:
    det([[a, b], [c, d]]) = a*d - b*c
    det3 = a(ei - fh) - b(di - fg) + c(dh - eg)

    adj([[a, b], [c, d]]) = [[d, -b], [-c, a]]
    adj3[i][j] = (-1)^(i+j) * minor(M, j, i)
"""

from typing import Callable, Final, Sequence

from hill_cipher.core.math.modular import MOD, mod

# =============================================================================
# ТИПЫ
# =============================================================================

Matrix = list[list[int]]
Vector = list[int]
MatrixLike = Sequence[Sequence[int]]

# Поддерживаемые порядки ключевой матрицы
SUPPORTED_ORDERS: Final[tuple[int, ...]] = (2, 3)


# =============================================================================
# ФОРМА МАТРИЦЫ
# =============================================================================


def matrix_order(matrix: MatrixLike) -> int:
    """
    Порядок квадратной матрицы с проверкой формы.

    Raises:
        ValueError: Если матрица не квадратная или порядок не 2/3
    """
    order = len(matrix)
    if order not in SUPPORTED_ORDERS:
        raise ValueError(f"matrix order must be one of {SUPPORTED_ORDERS}, got {order}")
    for i, row in enumerate(matrix):
        if len(row) != order:
            raise ValueError(
                f"matrix must be square: row {i} has {len(row)} entries, expected {order}"
            )
    return order


def reduce_matrix(matrix: MatrixLike, m: int = MOD) -> Matrix:
    """Новая матрица с каждым элементом, приведённым в [0, m)."""
    return [[mod(x, m) for x in row] for row in matrix]


def identity_matrix(order: int) -> Matrix:
    """Единичная матрица порядка order (det = 1, всегда обратима)."""
    if order not in SUPPORTED_ORDERS:
        raise ValueError(f"order must be one of {SUPPORTED_ORDERS}, got {order}")
    return [[1 if i == j else 0 for j in range(order)] for i in range(order)]


def zero_matrix(order: int) -> Matrix:
    """Нулевая матрица порядка order."""
    if order not in SUPPORTED_ORDERS:
        raise ValueError(f"order must be one of {SUPPORTED_ORDERS}, got {order}")
    return [[0] * order for _ in range(order)]


# =============================================================================
# ОПРЕДЕЛИТЕЛЬ
# =============================================================================


def _determinant_2x2(matrix: MatrixLike) -> int:
    (a, b), (c, d) = matrix
    return a * d - b * c


def _determinant_3x3(matrix: MatrixLike) -> int:
    (a, b, c), (d, e, f), (g, h, i) = matrix
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


_DETERMINANT_BY_ORDER: Final[dict[int, Callable[[MatrixLike], int]]] = {
    2: _determinant_2x2,
    3: _determinant_3x3,
}


def determinant_raw(matrix: MatrixLike) -> int:
    """
    Сырой (нередуцированный) целочисленный определитель.

    Для отображения значения до приведения по модулю.

    Examples:
        >>> determinant_raw([[3, 3], [2, 5]])
        9
        >>> determinant_raw([[25, 0], [0, 25]])
        625
    """
    order = matrix_order(matrix)
    return _DETERMINANT_BY_ORDER[order](matrix)


def determinant(matrix: MatrixLike, m: int = MOD) -> int:
    """
    Определитель по модулю m.

    Returns:
        determinant_raw(matrix) mod m ∈ [0, m)
    """
    return mod(determinant_raw(matrix), m)


# =============================================================================
# МИНОРЫ И ПРИСОЕДИНЁННАЯ МАТРИЦА
# =============================================================================


def cofactor_minor(matrix: MatrixLike, row: int, col: int) -> int:
    """
    Минор 3×3 матрицы: определитель 2×2 после удаления строки row и столбца col.

    Args:
        matrix: Матрица порядка 3
        row: Удаляемая строка (0..2)
        col: Удаляемый столбец (0..2)

    Returns:
        Определитель подматрицы 2×2 (без приведения по модулю)

    Raises:
        ValueError: Если матрица не 3×3 или индексы вне диапазона
    """
    if matrix_order(matrix) != 3:
        raise ValueError("cofactor_minor is defined for order-3 matrices only")
    if not (0 <= row < 3 and 0 <= col < 3):
        raise ValueError(f"row/col must be in [0, 3), got row={row}, col={col}")

    sub = [
        [matrix[r][c] for c in range(3) if c != col]
        for r in range(3)
        if r != row
    ]
    return _determinant_2x2(sub)


def _adjugate_2x2(matrix: MatrixLike, m: int) -> Matrix:
    (a, b), (c, d) = matrix
    return [
        [mod(d, m), mod(-b, m)],
        [mod(-c, m), mod(a, m)],
    ]


def _adjugate_3x3(matrix: MatrixLike, m: int) -> Matrix:
    cofactors = [
        [mod((-1) ** (i + j) * cofactor_minor(matrix, i, j), m) for j in range(3)]
        for i in range(3)
    ]
    # Транспонирование матрицы алгебраических дополнений
    return [[cofactors[j][i] for j in range(3)] for i in range(3)]


_ADJUGATE_BY_ORDER: Final[dict[int, Callable[[MatrixLike, int], Matrix]]] = {
    2: _adjugate_2x2,
    3: _adjugate_3x3,
}


def adjugate(matrix: MatrixLike, m: int = MOD) -> Matrix:
    """
    Присоединённая матрица (classical adjoint) по модулю m.

    - Порядок 2: [[d, -b], [-c, a]]
    - Порядок 3: транспонированная матрица алгебраических дополнений

    Свойство: M · adj(M) ≡ det(M) · I (mod m)
    """
    order = matrix_order(matrix)
    return _ADJUGATE_BY_ORDER[order](matrix, m)


# =============================================================================
# ПРОИЗВЕДЕНИЯ
# =============================================================================


def scalar_multiply(matrix: MatrixLike, k: int, m: int = MOD) -> Matrix:
    """Каждый элемент умножается на k и приводится по модулю m."""
    return [[mod(x * k, m) for x in row] for row in matrix]


def matrix_vector_product(matrix: MatrixLike, vector: Sequence[int], m: int = MOD) -> Vector:
    """
    Произведение матрицы на вектор-столбец по модулю m.

    Raises:
        ValueError: Если len(vector) != порядок матрицы (ошибка программы:
            конвейер гарантирует длину блока через padding)

    Examples:
        >>> matrix_vector_product([[3, 3], [2, 5]], [7, 4])
        [7, 8]
    """
    order = matrix_order(matrix)
    if len(vector) != order:
        raise ValueError(
            f"vector length {len(vector)} does not match matrix order {order}"
        )
    return [
        mod(sum(matrix[i][j] * vector[j] for j in range(order)), m)
        for i in range(order)
    ]


def matrix_multiply(left: MatrixLike, right: MatrixLike, m: int = MOD) -> Matrix:
    """
    Произведение матриц одного порядка по модулю m.

    Raises:
        ValueError: Если порядки матриц различаются
    """
    order = matrix_order(left)
    if matrix_order(right) != order:
        raise ValueError(
            f"matrix orders differ: {order} vs {len(right)}"
        )
    return [
        [mod(sum(left[i][k] * right[k][j] for k in range(order)), m) for j in range(order)]
        for i in range(order)
    ]


# =============================================================================
# ОТОБРАЖЕНИЕ
# =============================================================================


def format_matrix(matrix: MatrixLike | None, m: int = MOD) -> str:
    """
    Текстовое представление матрицы для отображения.

    Элементы приводятся по модулю m, выравниваются вправо на 2 символа,
    разделяются двумя пробелами. Отсутствующая матрица (None) → "-".

    Examples:
        >>> print(format_matrix([[3, 3], [2, 5]]))
         3   3
         2   5
    """
    if matrix is None:
        return "-"
    return "\n".join(
        "  ".join(str(mod(x, m)).rjust(2) for x in row)
        for row in matrix
    )
