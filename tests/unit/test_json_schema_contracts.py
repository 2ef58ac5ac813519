"""
Tests for JSON Schema contracts

Проверяет:
1. Загрузку и кеширование схем
2. Контракт канонической десятичной строки (uint128_decimal.json)
3. Контракт JSON-формы модели (uint128.json)
"""

import subprocess
import sys
from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    SchemaLoader,
    Uint128DecimalValidator,
    Uint128ModelValidator,
    get_schema_loader,
    validate_uint128_decimal,
    validate_uint128_model,
)
from src.core.domain import Uint128
from src.core.math import UINT128_MAX

import src.core.contracts as contracts_package

PROJECT_ROOT = Path(__file__).resolve().parents[2]


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_load_schema(self) -> None:
        schema = SchemaLoader().load_schema("uint128_decimal")
        assert schema["type"] == "string"
        assert schema["maxLength"] == 39

    def test_schema_cached(self) -> None:
        """Повторная загрузка возвращает тот же объект"""
        loader = SchemaLoader()
        assert loader.load_schema("uint128") is loader.load_schema("uint128")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_schemas_live_inside_package(self) -> None:
        """Схемы читаются из package data, а не из корня репозитория"""
        package_dir = Path(contracts_package.__file__).parent
        assert Path(str(SchemaLoader().schema_dir)) == package_dir / "schema"
        assert (package_dir / "schema" / "uint128.json").is_file()
        assert (package_dir / "schema" / "uint128_decimal.json").is_file()

    def test_shared_loader_reused(self) -> None:
        assert get_schema_loader() is get_schema_loader()

    def test_import_does_not_load_schemas(self) -> None:
        """Импорт модуля не создаёт загрузчик"""
        code = (
            "import src.core.contracts.validators as v; "
            "assert v._SCHEMA_LOADER is None"
        )
        result = subprocess.run(
            [sys.executable, "-c", code],
            cwd=PROJECT_ROOT,
            capture_output=True,
            text=True,
        )
        assert result.returncode == 0, result.stderr


# =============================================================================
# DECIMAL CONTRACT
# =============================================================================


class TestDecimalContract:
    """Тесты контракта канонической строки"""

    @pytest.mark.parametrize("text", ["0", "1", "42", str(UINT128_MAX)])
    def test_canonical_strings_accepted(self, text: str) -> None:
        validate_uint128_decimal(text)

    @pytest.mark.parametrize("text", ["", "007", "-1", "+1", "1 ", "1_000", "1" * 40])
    def test_non_canonical_strings_rejected(self, text: str) -> None:
        """Ведущие нули, знак и пробелы не канонические"""
        with pytest.raises(ValidationError):
            validate_uint128_decimal(text)

    def test_number_rejected(self) -> None:
        """Число вместо строки не соответствует контракту"""
        assert not Uint128DecimalValidator().is_valid(123)

    def test_uint128_text_matches_contract(self) -> None:
        """to_string() всегда канонический"""
        validator = Uint128DecimalValidator()
        for value in (0, 1, 10, 2**64, UINT128_MAX):
            assert validator.is_valid(Uint128.from_big_int(value).to_string())


# =============================================================================
# MODEL CONTRACT
# =============================================================================


class TestModelContract:
    """Тесты контракта JSON-формы Uint128"""

    def test_dump_accepted(self) -> None:
        validate_uint128_model(Uint128.from_string("12345").model_dump(mode="json"))

    def test_integer_value_rejected(self) -> None:
        """Python-форма (int) не является JSON контрактом"""
        with pytest.raises(ValidationError):
            validate_uint128_model({"value": 5})

    def test_missing_value_rejected(self) -> None:
        with pytest.raises(ValidationError):
            validate_uint128_model({})

    def test_extra_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            validate_uint128_model({"value": "1", "extra": 1})

    def test_iter_errors(self) -> None:
        """Все ошибки доступны через iter_errors"""
        errors = list(Uint128ModelValidator().iter_errors({"value": "01", "extra": 1}))
        assert len(errors) == 2
