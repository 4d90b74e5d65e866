"""Block Cipher Pipeline — шифрование и расшифрование блоками.

Один конвейер для обоих направлений, различается только применяемая матрица:
- encrypt: K
- decrypt: K⁻¹ (передаётся вызывающим, например key_inverse(K))

Порядок шагов:
1. GATE 0: обратимость применяемой матрицы (NON_INVERTIBLE_KEY)
2. Усечение сырого текста до max_raw_input_chars
3. Текст → индексы букв, padding 'X' до длины, кратной N
4. GATE 1: длина дополненной последовательности (INPUT_TOO_LONG)
5. Разбиение на блоки, c = M · b (mod 26) для каждого блока, запись трассы
6. Индексы → текст

Отказ любого gate — CipherResult(success=False) без частичного вывода.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from hill_cipher.core.contracts import validate_cipher_result
from hill_cipher.core.domain.block_step import BlockStep, CipherDirection, PolicyError
from hill_cipher.core.domain.key_matrix import KeyMatrix, as_key_matrix
from hill_cipher.core.math.matrix import Matrix, matrix_vector_product
from hill_cipher.gatekeeper.gates.gate_00_key_invertibility import (
    Gate00KeyInvertibility,
    Gate00Result,
)
from hill_cipher.gatekeeper.gates.gate_01_input_length import (
    MAX_PADDED_ELEMENTS,
    Gate01Config,
    Gate01InputLength,
)
from hill_cipher.pipeline.text import (
    MAX_RAW_INPUT_CHARS,
    chunk_blocks,
    from_letter_sequence,
    pad_blocks,
    to_letter_sequence,
    truncate_raw,
)

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class CipherResult:
    """Результат encrypt/decrypt."""

    direction: CipherDirection
    success: bool
    block_reason: Optional[PolicyError]

    # Выходной текст (пустой при отказе)
    text: str

    # Трасса преобразований по блокам
    trace: tuple[BlockStep, ...]

    # Детали
    details: str

    @property
    def log(self) -> str:
        """Трасса в виде текста, одна строка на блок."""
        return "\n".join(step.format_line() for step in self.trace)

    def to_contract(self) -> Dict[str, Any]:
        """Сериализация в формат cipher_result контракта.

        Raises:
            jsonschema.ValidationError: Если результат не соответствует контракту
        """
        data = {
            "direction": self.direction.value,
            "success": self.success,
            "block_reason": self.block_reason.value if self.block_reason else None,
            "text": self.text,
            "trace": [step.to_contract() for step in self.trace],
            "details": self.details,
        }
        validate_cipher_result(data)
        return data


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PipelineConfig:
    """Конфигурация конвейера.

    Значения по умолчанию фиксированы; точки входа encrypt/decrypt
    всегда используют конфигурацию по умолчанию.
    """

    max_raw_input_chars: int = MAX_RAW_INPUT_CHARS
    max_padded_elements: int = MAX_PADDED_ELEMENTS


# =============================================================================
# PIPELINE
# =============================================================================


class BlockCipherPipeline:
    """Конвейер Hill cipher: gates → нормализация → блоки → текст."""

    def __init__(self, config: PipelineConfig | None = None):
        """Инициализация конвейера.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or PipelineConfig()
        self._gate00 = Gate00KeyInvertibility()
        self._gate01 = Gate01InputLength(
            Gate01Config(max_padded_elements=self.config.max_padded_elements)
        )

    def run(
        self,
        matrix: KeyMatrix | Sequence[Sequence[int]],
        text: str,
        direction: CipherDirection,
        invert: bool = False,
    ) -> CipherResult:
        """Прогон конвейера.

        Args:
            matrix: ключевая матрица
            text: сырой входной текст
            direction: направление (влияет только на метки трассы)
            invert: применить K⁻¹ вместо самой матрицы

        Returns:
            CipherResult с текстом и трассой либо с причиной отказа
        """
        gate00_result = self._gate00.evaluate(matrix)
        if not gate00_result.operation_allowed:
            return self._blocked_result(direction, gate00_result.block_reason, gate00_result.details)

        applied = self._applied_matrix(matrix, gate00_result, invert)
        block_size = len(applied)

        limited = truncate_raw(text, self.config.max_raw_input_chars)
        padded = pad_blocks(to_letter_sequence(limited), block_size)

        gate01_result = self._gate01.evaluate(gate00_result, len(padded))
        if not gate01_result.operation_allowed:
            return self._blocked_result(direction, gate01_result.block_reason, gate01_result.details)

        output: list[int] = []
        trace: list[BlockStep] = []
        for index, block in enumerate(chunk_blocks(padded, block_size)):
            transformed = matrix_vector_product(applied, block)
            output.extend(transformed)
            trace.append(
                BlockStep(index=index, input=block, output=transformed, direction=direction)
            )

        logger.debug(
            "%s: %d chars -> %d blocks of %d", direction.value, len(limited), len(trace), block_size
        )
        return CipherResult(
            direction=direction,
            success=True,
            block_reason=None,
            text=from_letter_sequence(output),
            trace=tuple(trace),
            details=f"PASS: {len(trace)} blocks of {block_size}",
        )

    @staticmethod
    def _applied_matrix(
        matrix: KeyMatrix | Sequence[Sequence[int]],
        gate00_result: Gate00Result,
        invert: bool,
    ) -> Matrix:
        if invert:
            # GATE 0 пропускает только обратимые ключи, inverse задан
            return gate00_result.verdict.inverse
        return as_key_matrix(matrix).reduced().as_lists()

    @staticmethod
    def _blocked_result(
        direction: CipherDirection,
        reason: Optional[PolicyError],
        details: str,
    ) -> CipherResult:
        logger.info("%s refused: %s", direction.value, details)
        return CipherResult(
            direction=direction,
            success=False,
            block_reason=reason,
            text="",
            trace=(),
            details=details,
        )


# =============================================================================
# ТОЧКИ ВХОДА
# =============================================================================

_DEFAULT_PIPELINE = BlockCipherPipeline()


def encrypt(matrix: KeyMatrix | Sequence[Sequence[int]], plaintext: str) -> CipherResult:
    """Шифрование: каждый блок умножается на ключ K.

    Examples:
        >>> encrypt([[3, 3], [2, 5]], "HELP").text
        'HIAT'
    """
    return _DEFAULT_PIPELINE.run(matrix, plaintext, CipherDirection.ENCRYPT)


def decrypt(matrix: KeyMatrix | Sequence[Sequence[int]], ciphertext: str) -> CipherResult:
    """Расшифрование переданной матрицей (обычно key_inverse(K)).

    Examples:
        >>> decrypt([[15, 17], [20, 9]], "HIAT").text
        'HELP'
    """
    return _DEFAULT_PIPELINE.run(matrix, ciphertext, CipherDirection.DECRYPT)


def decrypt_with_key(key: KeyMatrix | Sequence[Sequence[int]], ciphertext: str) -> CipherResult:
    """Расшифрование по ключу шифрования K: K⁻¹ вычисляется внутри."""
    return _DEFAULT_PIPELINE.run(key, ciphertext, CipherDirection.DECRYPT, invert=True)
