"""GATE 1: Input Length Guard

Второй gate в цепочке (после GATE 0):
- Блокирует операцию, если дополненная последовательность длиннее
  max_padded_elements (PolicyError.INPUT_TOO_LONG)
- Пропускает блокировку GATE 0 дальше

Сырой ввод уже усечён до 10 000 символов, а padding добавляет не более N-1
элементов. При лимитах по умолчанию gate срабатывает только для N=3, когда
в тексте больше 9 999 букв (10 000 → 10 002 после padding). Для N=2 длина
10 000 уже чётная, и gate не срабатывает.
"""

from dataclasses import dataclass
from typing import Final, Optional

from hill_cipher.core.domain.block_step import PolicyError
from hill_cipher.gatekeeper.gates.gate_00_key_invertibility import Gate00Result

# Лимит длины дополненной числовой последовательности
MAX_PADDED_ELEMENTS: Final[int] = 10_000


@dataclass(frozen=True)
class Gate01Result:
    """Результат GATE 1."""

    operation_allowed: bool
    block_reason: Optional[PolicyError]

    # Входные параметры для диагностики
    padded_length: int
    max_padded_elements: int

    # Детали
    details: str


@dataclass(frozen=True)
class Gate01Config:
    """Конфигурация GATE 1."""

    max_padded_elements: int = MAX_PADDED_ELEMENTS


class Gate01InputLength:
    """GATE 1: ограничение длины дополненной последовательности."""

    def __init__(self, config: Gate01Config | None = None):
        """Инициализация GATE 1.

        Args:
            config: конфигурация gate (опционально, используется default)
        """
        self.config = config or Gate01Config()

    def evaluate(self, gate00_result: Gate00Result, padded_length: int) -> Gate01Result:
        """Оценка GATE 1.

        Args:
            gate00_result: результат GATE 0 (обратимость ключа)
            padded_length: длина последовательности после padding

        Returns:
            Gate01Result с решением о допуске
        """
        limit = self.config.max_padded_elements

        if not gate00_result.operation_allowed:
            return Gate01Result(
                operation_allowed=False,
                block_reason=gate00_result.block_reason,
                padded_length=padded_length,
                max_padded_elements=limit,
                details=f"GATE 0 blocked: {gate00_result.details}",
            )

        if padded_length > limit:
            return Gate01Result(
                operation_allowed=False,
                block_reason=PolicyError.INPUT_TOO_LONG,
                padded_length=padded_length,
                max_padded_elements=limit,
                details=f"Input too long: {padded_length} > {limit} elements",
            )

        return Gate01Result(
            operation_allowed=True,
            block_reason=None,
            padded_length=padded_length,
            max_padded_elements=limit,
            details=f"PASS: {padded_length} <= {limit} elements",
        )
