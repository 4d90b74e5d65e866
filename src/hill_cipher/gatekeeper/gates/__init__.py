"""Gates — проверки политики перед обработкой блоков.

- GATE 0: Key Invertibility (gcd(det, 26) == 1)
- GATE 1: Input Length Guard (длина дополненной последовательности)
"""

from .gate_00_key_invertibility import Gate00KeyInvertibility, Gate00Result
from .gate_01_input_length import (
    MAX_PADDED_ELEMENTS,
    Gate01Config,
    Gate01InputLength,
    Gate01Result,
)

__all__ = [
    "Gate00KeyInvertibility",
    "Gate00Result",
    "Gate01InputLength",
    "Gate01Result",
    "Gate01Config",
    "MAX_PADDED_ELEMENTS",
]
