"""
JSON Schema Contract Validators

Модуль для валидации сериализованных данных согласно JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- canonical_number.json (CanonicalNumber.model_dump(mode="json"))
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from num2english.core.domain.canonical_number import CanonicalNumber


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'canonical_number')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class CanonicalNumberValidator(ContractValidator):
    """Валидатор для canonical_number контракта."""

    def __init__(self):
        super().__init__("canonical_number")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_canonical_number(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного CanonicalNumber.

    Args:
        data: Данные для валидации (dict)

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CanonicalNumberValidator().validate(data)


# =============================================================================
# ROUND-TRIP
# =============================================================================


def dump_canonical_number(number: CanonicalNumber) -> Dict[str, Any]:
    """
    JSON-сериализация CanonicalNumber с проверкой контракта.

    Args:
        number: Каноническое число

    Returns:
        dict, пригодный для json.dumps

    Raises:
        ValidationError: Если сериализация нарушает контракт
    """
    data = number.model_dump(mode="json")
    validate_canonical_number(data)
    return data


def load_canonical_number(data: Dict[str, Any]) -> CanonicalNumber:
    """
    Построение CanonicalNumber из сериализованных данных.

    Сначала проверяется JSON Schema, затем инварианты модели, которые
    схема выразить не может (padding, согласованность знака и цифр).

    Args:
        data: Сериализованный CanonicalNumber (dict)

    Returns:
        CanonicalNumber (frozen)

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
        pydantic.ValidationError: Если нарушены инварианты модели
    """
    validate_canonical_number(data)
    return CanonicalNumber.model_validate(data)
