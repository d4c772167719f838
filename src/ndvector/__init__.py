"""
ndvector — минималистичная N-мерная векторная арифметика над double

Value type Vector и его операции: построение, поэлементные операции,
скалярное/векторное произведение, норма и нормализация.
"""

import logging

# Errors
from ndvector.errors import (
    DimensionMismatchError,
    InvalidDimensionError,
    VectorError,
)

# Tolerance
from ndvector.tolerance import (
    DEFAULT_TOLERANCE,
    EPSILON,
    ToleranceConfig,
    is_close,
    vectors_close,
)

# Vector
from ndvector.vector import (
    CROSS_DIMENSION,
    Vector,
    new,
    new_with_values,
    unit,
)

# Библиотека не навязывает конфигурацию логирования приложению
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "VectorError",
    "DimensionMismatchError",
    "InvalidDimensionError",
    # Tolerance — Constants
    "EPSILON",
    "DEFAULT_TOLERANCE",
    # Tolerance — Types
    "ToleranceConfig",
    # Tolerance — Functions
    "is_close",
    "vectors_close",
    # Vector — Constants
    "CROSS_DIMENSION",
    # Vector — Types
    "Vector",
    # Vector — Functions
    "new",
    "new_with_values",
    "unit",
]
