"""Gatekeeper — система гейтов для допуска операций encrypt/decrypt.

Gates выполняются в фиксированном порядке до обработки блоков.
Отказ любого gate — структурированный результат, а не exception.
"""

from .gates import Gate00KeyInvertibility, Gate00Result, Gate01InputLength, Gate01Result

__all__ = [
    "Gate00KeyInvertibility",
    "Gate00Result",
    "Gate01InputLength",
    "Gate01Result",
]
