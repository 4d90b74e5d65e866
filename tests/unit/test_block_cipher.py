"""Unit тесты для Block Cipher Pipeline.

Coverage:
- Сценарии: HELP → HIAT, необратимый ключ, пустой текст, "A" с ключом 3×3
- Трасса блоков и её текстовое представление
- Round-trip: decrypt(K⁻¹, encrypt(K, T)) == pad_and_normalize(T)
- decrypt_with_key: обращение ключа внутри конвейера
- Лимиты: усечение сырого текста и INPUT_TOO_LONG для дополненной последовательности
- Порядок gates: NON_INVERTIBLE_KEY раньше INPUT_TOO_LONG
"""

import dataclasses
import logging
import random
import string

import pytest
from pydantic import ValidationError

from hill_cipher.core.domain import BlockStep, CipherDirection, KeyMatrix, PolicyError
from hill_cipher.keys import key_inverse, random_invertible_key
from hill_cipher.pipeline import (
    BlockCipherPipeline,
    CipherResult,
    PipelineConfig,
    decrypt,
    decrypt_with_key,
    encrypt,
    pad_and_normalize,
)

KEY_2X2 = [[3, 3], [2, 5]]
KEY_2X2_INVERSE = [[15, 17], [20, 9]]
KEY_3X3 = [[6, 24, 1], [13, 16, 10], [20, 17, 15]]
SINGULAR_KEY = [[2, 4], [1, 2]]


# =============================================================================
# СЦЕНАРИИ
# =============================================================================


class TestEncryptScenarios:
    """Базовые сценарии шифрования"""

    def test_help_to_hiat(self) -> None:
        """K = [[3, 3], [2, 5]]: HELP → HIAT"""
        result = encrypt(KEY_2X2, "HELP")

        assert isinstance(result, CipherResult)
        assert result.success is True
        assert result.block_reason is None
        assert result.direction == CipherDirection.ENCRYPT
        assert result.text == "HIAT"

    def test_help_trace(self) -> None:
        """Трасса: по записи на блок, в порядке блоков"""
        result = encrypt(KEY_2X2, "HELP")

        assert len(result.trace) == 2
        assert result.trace[0] == BlockStep(
            index=0, input=[7, 4], output=[7, 8], direction=CipherDirection.ENCRYPT
        )
        assert result.trace[1].input == (11, 15)
        assert result.trace[1].output == (0, 19)
        assert result.log == "1) P=[7, 4]  ->  C=[7, 8]\n2) P=[11, 15]  ->  C=[0, 19]"

    def test_non_invertible_key(self) -> None:
        """det = 0 → NON_INVERTIBLE_KEY, без частичного вывода"""
        for text in ["HELP", "", "A" * 20_000]:
            result = encrypt(SINGULAR_KEY, text)
            assert result.success is False
            assert result.block_reason == PolicyError.NON_INVERTIBLE_KEY
            assert result.text == ""
            assert result.trace == ()
            assert result.log == ""

    def test_empty_text(self) -> None:
        """Пустой текст → пустой шифртекст, пустая трасса"""
        result = encrypt(KEY_2X2, "")

        assert result.success is True
        assert result.text == ""
        assert result.trace == ()

    def test_text_without_letters(self) -> None:
        """Текст без букв ведёт себя как пустой"""
        result = encrypt(KEY_3X3, "1234 !?")
        assert result.success is True
        assert result.text == ""

    def test_single_letter_order_3(self) -> None:
        """"A" с ключом 3×3 → [0, 23, 23], один блок"""
        result = encrypt(KEY_3X3, "A")

        assert result.success is True
        assert len(result.trace) == 1
        assert result.trace[0].input == (0, 23, 23)
        assert result.text == "DAI"

    def test_act_to_poh(self) -> None:
        """Классический пример 3×3: ACT → POH"""
        assert encrypt(KEY_3X3, "act").text == "POH"

    def test_normalization(self) -> None:
        """Регистр и не-буквы не влияют на результат"""
        assert encrypt(KEY_2X2, "h-e l.p").text == "HIAT"

    def test_unreduced_key_entries(self) -> None:
        """Ключ приводится по модулю до применения"""
        assert encrypt([[-23, 29], [-24, 5]], "HELP").text == "HIAT"

    def test_key_matrix_model_accepted(self) -> None:
        """KeyMatrix принимается наравне со списками"""
        assert encrypt(KeyMatrix(rows=KEY_2X2), "HELP").text == "HIAT"

    def test_identity_key(self) -> None:
        """Единичный ключ сохраняет нормализованный текст"""
        assert encrypt(KeyMatrix.identity(3), "Hello").text == "HELLOX"

    def test_malformed_key_raises(self) -> None:
        """Неквадратная матрица — ошибка программы, а не PolicyError"""
        with pytest.raises(ValidationError):
            encrypt([[1, 2, 3], [4, 5, 6]], "HELP")


class TestDecrypt:
    """Расшифрование"""

    def test_decrypt_with_inverse(self) -> None:
        """decrypt(K⁻¹, HIAT) → HELP"""
        result = decrypt(KEY_2X2_INVERSE, "HIAT")

        assert result.success is True
        assert result.direction == CipherDirection.DECRYPT
        assert result.text == "HELP"
        assert result.log == "1) C=[7, 8]  ->  P=[7, 4]\n2) C=[0, 19]  ->  P=[11, 15]"

    def test_decrypt_with_key(self) -> None:
        """decrypt_with_key(K, HIAT) → HELP (K⁻¹ внутри)"""
        result = decrypt_with_key(KEY_2X2, "HIAT")

        assert result.success is True
        assert result.text == "HELP"
        assert result.trace == decrypt(KEY_2X2_INVERSE, "HIAT").trace

    def test_decrypt_poh(self) -> None:
        """POH → ACT"""
        assert decrypt_with_key(KEY_3X3, "POH").text == "ACT"
        assert decrypt(key_inverse(KEY_3X3), "POH").text == "ACT"

    def test_padding_exposed(self) -> None:
        """Padding 'X' после расшифрования остаётся в тексте"""
        ciphertext = encrypt(KEY_3X3, "A").text
        assert decrypt_with_key(KEY_3X3, ciphertext).text == "AXX"

    def test_decrypt_non_invertible(self) -> None:
        """Необратимая матрица → NON_INVERTIBLE_KEY"""
        for result in (decrypt(SINGULAR_KEY, "HIAT"), decrypt_with_key(SINGULAR_KEY, "HIAT")):
            assert result.success is False
            assert result.block_reason == PolicyError.NON_INVERTIBLE_KEY
            assert result.direction == CipherDirection.DECRYPT
            assert result.text == ""

    def test_odd_ciphertext_padded(self) -> None:
        """Шифртекст нечётной длины дополняется перед расшифрованием"""
        result = decrypt(KEY_2X2_INVERSE, "HIA")
        assert result.success is True
        assert result.trace[-1].input == (0, 23)


# =============================================================================
# ROUND-TRIP
# =============================================================================


class TestRoundTrip:
    """decrypt(K⁻¹, encrypt(K, T)) == pad_and_normalize(T)"""

    @pytest.mark.parametrize("order", [2, 3])
    def test_random_keys_and_texts(self, order: int) -> None:
        """Случайные ключи и тексты с пунктуацией и разным регистром"""
        rng = random.Random(300 + order)
        alphabet = string.ascii_letters + " .,!?0123"
        for _ in range(30):
            key = random_invertible_key(order, rng=rng)
            text = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 40)))

            ciphertext = encrypt(key, text).text
            expected = pad_and_normalize(text, order)

            assert decrypt(key_inverse(key), ciphertext).text == expected
            assert decrypt_with_key(key, ciphertext).text == expected

    def test_ciphertext_length_multiple_of_order(self) -> None:
        """Длина шифртекста кратна N"""
        for text in ["A", "AB", "ABC", "ABCD"]:
            assert len(encrypt(KEY_3X3, text).text) % 3 == 0
            assert len(encrypt(KEY_2X2, text).text) % 2 == 0


# =============================================================================
# ЛИМИТЫ
# =============================================================================


class TestLimits:
    """Усечение сырого ввода и guard длины"""

    def test_raw_input_truncated_order_2(self) -> None:
        """10 001 буква с ключом 2×2 → усечение до 10 000, успех"""
        result = encrypt(KeyMatrix.identity(2), "A" * 10_001)

        assert result.success is True
        assert len(result.text) == 10_000
        assert len(result.trace) == 5_000

    def test_padded_length_guard_order_3(self) -> None:
        """10 000 букв с ключом 3×3 → 10 002 после padding → INPUT_TOO_LONG"""
        result = encrypt(KeyMatrix.identity(3), "A" * 10_000)

        assert result.success is False
        assert result.block_reason == PolicyError.INPUT_TOO_LONG
        assert result.text == ""
        assert result.trace == ()

    def test_order_3_just_under_limit(self) -> None:
        """9 999 букв с ключом 3×3 проходят"""
        result = encrypt(KeyMatrix.identity(3), "A" * 9_999)
        assert result.success is True
        assert len(result.trace) == 3_333

    def test_truncation_counts_raw_characters(self) -> None:
        """Лимит на сырые символы: буквы после лимита отбрасываются"""
        result = encrypt(KeyMatrix.identity(2), "1" * 10_000 + "AB")
        assert result.success is True
        assert result.text == ""

    def test_custom_padded_limit(self) -> None:
        """Кастомный лимит дополненной последовательности"""
        pipeline = BlockCipherPipeline(PipelineConfig(max_padded_elements=4))

        result = pipeline.run(KEY_2X2, "ABCDE", CipherDirection.ENCRYPT)
        assert result.block_reason == PolicyError.INPUT_TOO_LONG
        assert "6 > 4" in result.details

        assert pipeline.run(KEY_2X2, "ABCD", CipherDirection.ENCRYPT).success is True

    def test_custom_raw_limit(self) -> None:
        """Кастомный лимит сырого текста"""
        pipeline = BlockCipherPipeline(PipelineConfig(max_raw_input_chars=3))
        result = pipeline.run(KeyMatrix.identity(2), "HELP", CipherDirection.ENCRYPT)
        assert result.text == "HELX"

    def test_config_has_only_length_caps(self) -> None:
        """PipelineConfig настраивает только два лимита, padding всегда 'X'"""
        names = {f.name for f in dataclasses.fields(PipelineConfig)}
        assert names == {"max_raw_input_chars", "max_padded_elements"}

        pipeline = BlockCipherPipeline(PipelineConfig(max_raw_input_chars=5))
        result = pipeline.run(KeyMatrix.identity(3), "HELLO", CipherDirection.ENCRYPT)
        assert result.text == "HELLOX"

    def test_key_checked_before_length(self) -> None:
        """NON_INVERTIBLE_KEY имеет приоритет над INPUT_TOO_LONG"""
        pipeline = BlockCipherPipeline(PipelineConfig(max_padded_elements=2))
        result = pipeline.run(SINGULAR_KEY, "ABCDEF", CipherDirection.ENCRYPT)
        assert result.block_reason == PolicyError.NON_INVERTIBLE_KEY


# =============================================================================
# НАБЛЮДАЕМОСТЬ
# =============================================================================


class TestLogging:
    """Логирование отказов"""

    def test_refusal_logged(self, caplog) -> None:
        """Отказ пишется в лог на уровне INFO"""
        with caplog.at_level(logging.INFO, logger="hill_cipher.pipeline.block_cipher"):
            encrypt(SINGULAR_KEY, "HELP")
        assert "encrypt refused" in caplog.text

    def test_result_is_immutable(self) -> None:
        """CipherResult неизменяем"""
        result = encrypt(KEY_2X2, "HELP")
        with pytest.raises(AttributeError):
            result.text = "XXXX"
