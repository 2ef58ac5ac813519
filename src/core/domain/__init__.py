"""
Domain models and value objects.

Contains the bounded 128-bit unsigned integer value type.
"""

from src.core.domain.uint128 import Operand, Uint128

__all__ = [
    # Uint128 model
    "Uint128",
    "Operand",
]
