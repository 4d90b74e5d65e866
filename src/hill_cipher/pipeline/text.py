"""
Text Codec — преобразование текста ⇄ последовательности букв

Шаги конвейера до и после матричного преобразования:
- Усечение сырого ввода до MAX_RAW_INPUT_CHARS (защита от DoS: усечение, не отказ)
- Нормализация: верхний регистр, только A-Z, буква → индекс (A=0 ... Z=25)
- Padding индексом 'X' (23) до длины, кратной N
- Разбиение на блоки длины N с сохранением порядка
- Обратное отображение индекс → буква

Все функции возвращают новые списки и не изменяют вход.
"""

import string
from typing import Final, Sequence

from hill_cipher.core.math.modular import MOD, mod

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Лимит длины сырого текста (символов), применяется до нормализации
MAX_RAW_INPUT_CHARS: Final[int] = 10_000

# Индекс буквы-заполнителя 'X'
PAD_LETTER_INDEX: Final[int] = 23

ALPHABET: Final[str] = string.ascii_uppercase

_LETTER_TO_INDEX: Final[dict[str, int]] = {ch: i for i, ch in enumerate(ALPHABET)}


# =============================================================================
# ТЕКСТ ⇄ ИНДЕКСЫ
# =============================================================================


def truncate_raw(text: str, limit: int = MAX_RAW_INPUT_CHARS) -> str:
    """
    Усечение сырого текста до limit символов.

    Raises:
        ValueError: Если limit < 0
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    return text[:limit]


def to_letter_sequence(text: str) -> list[int]:
    """
    Текст → последовательность индексов букв.

    Верхний регистр, всё вне A-Z отбрасывается.

    Examples:
        >>> to_letter_sequence("Help!")
        [7, 4, 11, 15]
    """
    return [_LETTER_TO_INDEX[ch] for ch in text.upper() if ch in _LETTER_TO_INDEX]


def from_letter_sequence(letters: Sequence[int]) -> str:
    """
    Последовательность индексов → текст из заглавных букв.

    Индексы приводятся по модулю 26.

    Examples:
        >>> from_letter_sequence([7, 8, 0, 19])
        'HIAT'
    """
    return "".join(ALPHABET[mod(n, MOD)] for n in letters)


# =============================================================================
# PADDING И БЛОКИ
# =============================================================================


def pad_blocks(letters: Sequence[int], block_size: int, pad: int = PAD_LETTER_INDEX) -> list[int]:
    """
    Дополнение индексом pad до длины, кратной block_size.

    Пустая последовательность остаётся пустой (0 кратно любому N).

    Raises:
        ValueError: Если block_size <= 0
    """
    if block_size <= 0:
        raise ValueError(f"block_size must be positive, got {block_size}")

    padded = list(letters)
    remainder = len(padded) % block_size
    if remainder:
        padded.extend([pad] * (block_size - remainder))
    return padded


def chunk_blocks(letters: Sequence[int], block_size: int) -> list[list[int]]:
    """
    Разбиение на последовательные блоки длины block_size.

    Последний блок может быть короче, если вход не дополнен через pad_blocks.

    Raises:
        ValueError: Если block_size <= 0
    """
    if block_size <= 0:
        raise ValueError(f"block_size must be positive, got {block_size}")
    return [list(letters[i:i + block_size]) for i in range(0, len(letters), block_size)]


def pad_and_normalize(text: str, block_size: int, limit: int = MAX_RAW_INPUT_CHARS) -> str:
    """
    Обработанный открытый текст: усечение, нормализация, padding.

    Именно эту форму восстанавливает расшифрование.

    Examples:
        >>> pad_and_normalize("a", 3)
        'AXX'
    """
    return from_letter_sequence(pad_blocks(to_letter_sequence(truncate_raw(text, limit)), block_size))
