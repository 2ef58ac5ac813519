"""
Contract Validation Module

Модуль для валидации JSON контрактов внешних представлений Uint128.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    Uint128DecimalValidator,
    Uint128ModelValidator,
    get_schema_loader,
    validate_uint128_decimal,
    validate_uint128_model,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "Uint128DecimalValidator",
    "Uint128ModelValidator",
    # Functions
    "get_schema_loader",
    "validate_uint128_decimal",
    "validate_uint128_model",
]
