"""
JSON Schema Contract Validators

Модуль для валидации внешних представлений Uint128 согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы:
- uint128_decimal.json (каноническая десятичная строка)
- uint128.json (JSON-форма модели Uint128)

Регулярное выражение не выражает верхнюю границу 2^128 − 1 для 39-значных
строк; числовой диапазон проверяет сам тип Uint128.
"""

import json
from importlib.resources import files
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются как package data в src/core/contracts/schema/.
    """

    def __init__(self):
        self._schema_dir = files(__package__) / "schema"
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self):
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'uint128')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER: Optional[SchemaLoader] = None


def get_schema_loader() -> SchemaLoader:
    """Общий загрузчик; создаётся при первом обращении, а не при импорте"""
    global _SCHEMA_LOADER
    if _SCHEMA_LOADER is None:
        _SCHEMA_LOADER = SchemaLoader()
    return _SCHEMA_LOADER


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = get_schema_loader().load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        """Итератор по всем ошибкам валидации"""
        return self.validator.iter_errors(data)


class Uint128DecimalValidator(ContractValidator):
    """Валидатор канонической десятичной строки Uint128"""

    def __init__(self):
        super().__init__("uint128_decimal")


class Uint128ModelValidator(ContractValidator):
    """Валидатор JSON-формы модели Uint128 ({"value": "<decimal>"})"""

    def __init__(self):
        super().__init__("uint128")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_uint128_decimal(data: Any) -> None:
    """
    Валидация канонической десятичной строки.

    Raises:
        ValidationError: Если строка не в канонической форме
    """
    Uint128DecimalValidator().validate(data)


def validate_uint128_model(data: Dict[str, Any]) -> None:
    """
    Валидация JSON-формы Uint128 (результат model_dump(mode="json")).

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    Uint128ModelValidator().validate(data)
