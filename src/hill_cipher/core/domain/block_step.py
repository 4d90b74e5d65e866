"""
BlockStep — Запись трассы преобразования одного блока

Одна запись на блок: индекс блока, входной и выходной векторы.
Трасса служит только для наблюдаемости (аудит, пояснительный вывод)
и не влияет на корректность шифрования.
"""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from hill_cipher.core.math.modular import MOD


# =============================================================================
# ENUMS
# =============================================================================


class CipherDirection(str, Enum):
    """Направление работы конвейера"""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class PolicyError(str, Enum):
    """Причина отказа конвейера (структурированный результат, не exception)"""

    NON_INVERTIBLE_KEY = "non_invertible_key"
    INPUT_TOO_LONG = "input_too_long"


# Метки векторов в строке трассы: (вход, выход)
_TRACE_LABELS: Dict[CipherDirection, tuple[str, str]] = {
    CipherDirection.ENCRYPT: ("P", "C"),
    CipherDirection.DECRYPT: ("C", "P"),
}


# =============================================================================
# BLOCK STEP MODEL
# =============================================================================


class BlockStep(BaseModel):
    """
    Преобразование одного блока: output = M · input (mod 26).

    Immutable модель (frozen=True).
    """

    index: int = Field(..., ge=0, description="Порядковый номер блока (с нуля)")
    input: tuple[int, ...] = Field(..., description="Входной вектор блока")
    output: tuple[int, ...] = Field(..., description="Выходной вектор блока")
    direction: CipherDirection = Field(..., description="Направление (encrypt/decrypt)")

    model_config = {"frozen": True}

    @field_validator("input", "output")
    @classmethod
    def validate_residues(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Проверка, что все компоненты — вычеты в [0, 26)"""
        for x in v:
            if not 0 <= x < MOD:
                raise ValueError(f"vector component {x} is outside [0, {MOD})")
        return v

    @field_validator("output")
    @classmethod
    def validate_same_length(cls, v: tuple[int, ...], info) -> tuple[int, ...]:
        """Проверка, что выходной вектор той же длины, что и входной"""
        if "input" in info.data and len(v) != len(info.data["input"]):
            raise ValueError(
                f"output length {len(v)} must equal input length {len(info.data['input'])}"
            )
        return v

    def format_line(self) -> str:
        """
        Строка трассы для отображения.

        Examples:
            "1) P=[7, 4]  ->  C=[7, 8]"  (encrypt)
            "1) C=[7, 8]  ->  P=[7, 4]"  (decrypt)
        """
        in_label, out_label = _TRACE_LABELS[self.direction]
        return (
            f"{self.index + 1}) {in_label}={list(self.input)}  ->  "
            f"{out_label}={list(self.output)}"
        )

    def to_contract(self) -> Dict[str, Any]:
        """Сериализация в формат block_step (cipher_result контракт)."""
        return {
            "index": self.index,
            "input": list(self.input),
            "output": list(self.output),
        }
