"""
Cipher Contracts — JSON Schema контракты ключа и результата

Контракты (каталог schema/ рядом с модулем):
- key_matrix.json: ключевая матрица {order, rows}
- cipher_result.json: результат encrypt/decrypt с трассой блоков

JSON Schema проверяет типы и диапазоны. Инварианты, которые схема выразить
не может, проверяются здесь же после схемы:
- key_matrix: матрица квадратная, число строк == order
- cipher_result: индексы трассы 0..n-1 по порядку, все векторы длины N,
  success ⇔ block_reason is None, отказ без текста и трассы,
  длина текста == сумме длин выходных векторов

Нарушение любого из них → jsonschema.ValidationError.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

# Имена поставляемых контрактов
CONTRACT_NAMES: Final[tuple[str, ...]] = ("key_matrix", "cipher_result")

_SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

# Кэш скомпилированных валидаторов по имени контракта
_VALIDATORS: Dict[str, Draft202012Validator] = {}


# =============================================================================
# SCHEMA LOADING
# =============================================================================


def load_schema(contract_name: str) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация схемы контракта.

    Raises:
        ValueError: Если контракт неизвестен или схема невалидна
    """
    if contract_name not in CONTRACT_NAMES:
        raise ValueError(f"unknown contract {contract_name!r}, expected one of {CONTRACT_NAMES}")

    with open(_SCHEMA_DIR / f"{contract_name}.json", "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {contract_name}.json: {e}") from e

    return schema


def _validator(contract_name: str) -> Draft202012Validator:
    if contract_name not in _VALIDATORS:
        _VALIDATORS[contract_name] = Draft202012Validator(load_schema(contract_name))
    return _VALIDATORS[contract_name]


# =============================================================================
# KEY MATRIX
# =============================================================================


def validate_key_matrix(data: Dict[str, Any]) -> None:
    """
    Валидация key_matrix: схема + квадратная форма заявленного порядка.

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    _validator("key_matrix").validate(data)

    order = data["order"]
    rows = data["rows"]
    if len(rows) != order:
        raise ValidationError(f"declared order {order} but matrix has {len(rows)} rows")
    for i, row in enumerate(rows):
        if len(row) != order:
            raise ValidationError(
                f"key matrix must be square: row {i} has {len(row)} entries, expected {order}"
            )


# =============================================================================
# CIPHER RESULT
# =============================================================================


def validate_cipher_result(data: Dict[str, Any]) -> None:
    """
    Валидация cipher_result: схема + согласованность результата и трассы.

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    _validator("cipher_result").validate(data)

    trace = data["trace"]
    text = data["text"]

    if data["success"] != (data["block_reason"] is None):
        raise ValidationError(
            f"success={data['success']} inconsistent with block_reason={data['block_reason']!r}"
        )

    # Отказ: без частичного вывода
    if not data["success"]:
        if text or trace:
            raise ValidationError("refused result must carry no text and no trace")
        return

    block_sizes = {len(step["input"]) for step in trace} | {len(step["output"]) for step in trace}
    if len(block_sizes) > 1:
        raise ValidationError(f"trace vectors have mixed lengths {sorted(block_sizes)}")

    for position, step in enumerate(trace):
        if step["index"] != position:
            raise ValidationError(f"trace index {step['index']} at position {position}")

    emitted = sum(len(step["output"]) for step in trace)
    if len(text) != emitted:
        raise ValidationError(f"text length {len(text)} != {emitted} trace output components")
