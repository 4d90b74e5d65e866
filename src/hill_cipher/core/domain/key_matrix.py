"""
KeyMatrix — Модель ключевой матрицы Hill cipher

Immutable Pydantic модель квадратной целочисленной матрицы порядка 2 или 3.

Элементы — знаковые целые произвольной величины (как введены пользователем).
Перед любыми алгебраическими операциями матрица приводится к каноническим
вычетам [0, 26) через reduced(). Движок никогда не изменяет матрицу:
все операции возвращают новые значения.
"""

from enum import Enum
from typing import Any, Dict, Sequence

from pydantic import BaseModel, Field, field_validator

from hill_cipher.core.contracts import validate_key_matrix
from hill_cipher.core.math.matrix import (
    SUPPORTED_ORDERS,
    Matrix,
    identity_matrix,
    reduce_matrix,
    zero_matrix,
)


# =============================================================================
# ENUMS
# =============================================================================


class MatrixOrder(int, Enum):
    """Порядок ключевой матрицы (размер блока)"""

    ORDER_2 = 2
    ORDER_3 = 3


# =============================================================================
# KEY MATRIX MODEL
# =============================================================================


class KeyMatrix(BaseModel):
    """
    Ключевая матрица Hill cipher.

    Immutable модель (frozen=True). Форма проверяется при создании:
    - число строк ∈ {2, 3}
    - каждая строка той же длины (квадратная матрица)
    """

    rows: tuple[tuple[int, ...], ...] = Field(
        ..., description="Строки матрицы (знаковые целые, до приведения по модулю)"
    )

    model_config = {"frozen": True}

    @field_validator("rows")
    @classmethod
    def validate_square_shape(cls, v: tuple[tuple[int, ...], ...]) -> tuple[tuple[int, ...], ...]:
        """Проверка, что матрица квадратная порядка 2 или 3"""
        order = len(v)
        if order not in SUPPORTED_ORDERS:
            raise ValueError(f"key matrix order must be one of {SUPPORTED_ORDERS}, got {order}")
        for i, row in enumerate(v):
            if len(row) != order:
                raise ValueError(
                    f"key matrix must be square: row {i} has {len(row)} entries, expected {order}"
                )
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def identity(cls, order: int) -> "KeyMatrix":
        """Единичная матрица (всегда обратима, det = 1)."""
        return cls(rows=identity_matrix(order))

    @classmethod
    def zeros(cls, order: int) -> "KeyMatrix":
        """Нулевая матрица (очищенный ключ, необратима)."""
        return cls(rows=zero_matrix(order))

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "KeyMatrix":
        """
        Создание из данных key_matrix контракта.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют контракту
                (схема, квадратная форма, order == числу строк)
        """
        validate_key_matrix(data)
        return cls(rows=data["rows"])

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def order(self) -> MatrixOrder:
        """Порядок матрицы (= размер блока N)."""
        return MatrixOrder(len(self.rows))

    def as_lists(self) -> Matrix:
        """Копия элементов как list[list[int]] (без приведения)."""
        return [list(row) for row in self.rows]

    def reduced(self) -> "KeyMatrix":
        """Новая матрица с элементами, приведёнными в [0, 26)."""
        return KeyMatrix(rows=reduce_matrix(self.rows))

    def to_contract(self) -> Dict[str, Any]:
        """Сериализация в формат key_matrix контракта (с валидацией)."""
        data = {"order": int(self.order), "rows": self.as_lists()}
        validate_key_matrix(data)
        return data


def as_key_matrix(matrix: KeyMatrix | Sequence[Sequence[int]]) -> KeyMatrix:
    """
    Приведение входа к KeyMatrix.

    Точки входа принимают как KeyMatrix, так и вложенные последовательности.

    Raises:
        pydantic.ValidationError: Если форма матрицы некорректна
    """
    if isinstance(matrix, KeyMatrix):
        return matrix
    return KeyMatrix(rows=matrix)
