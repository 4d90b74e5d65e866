"""Pipeline — кодек текста и блочный конвейер Hill cipher."""

from .block_cipher import (
    BlockCipherPipeline,
    CipherResult,
    PipelineConfig,
    decrypt,
    decrypt_with_key,
    encrypt,
)
from .text import (
    ALPHABET,
    MAX_RAW_INPUT_CHARS,
    PAD_LETTER_INDEX,
    chunk_blocks,
    from_letter_sequence,
    pad_and_normalize,
    pad_blocks,
    to_letter_sequence,
    truncate_raw,
)

__all__ = [
    # Block cipher
    "BlockCipherPipeline",
    "CipherResult",
    "PipelineConfig",
    "encrypt",
    "decrypt",
    "decrypt_with_key",
    # Text codec
    "ALPHABET",
    "MAX_RAW_INPUT_CHARS",
    "PAD_LETTER_INDEX",
    "chunk_blocks",
    "from_letter_sequence",
    "pad_and_normalize",
    "pad_blocks",
    "to_letter_sequence",
    "truncate_raw",
]
