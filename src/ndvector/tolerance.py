"""
Tolerance — Машинный epsilon и приближённые сравнения

Модуль задаёт машинную точность и конфигурацию толерантности для
приближённых сравнений float и векторов:
- EPSILON: машинный epsilon для double (1.0 + EPSILON != 1.0)
- ToleranceConfig: immutable Pydantic конфигурация толерантности
- is_close / vectors_close: сравнения с учётом толерантности

ВАЖНО: core-операции Vector НЕ используют эти толерантности.
Они нужны вызывающему коду и тестам.
"""

import math
from typing import TYPE_CHECKING, Final, Iterable

from pydantic import BaseModel, Field, field_validator

if TYPE_CHECKING:
    from ndvector.vector import Vector


# =============================================================================
# МАШИННАЯ ТОЧНОСТЬ
# =============================================================================

# Наименьшее положительное приращение над 1.0 для double.
# Вычисляется один раз при импорте, не изменяется.
EPSILON: Final[float] = math.nextafter(1.0, 2.0) - 1.0


# =============================================================================
# КОНФИГУРАЦИЯ ТОЛЕРАНТНОСТИ
# =============================================================================


class ToleranceConfig(BaseModel):
    """
    Толерантность для приближённых сравнений.

    Семантика как у math.isclose:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Immutable модель (frozen=True). Для изменения используйте scaled()
    или model_copy(update=...).
    """

    rel_tol: float = Field(
        default=EPSILON, ge=0, description="Относительная толерантность"
    )
    abs_tol: float = Field(
        default=0.0, ge=0, description="Абсолютная толерантность (сравнения около нуля)"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("rel_tol", "abs_tol")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        """Толерантность должна быть конечной (не NaN/Inf)."""
        if not math.isfinite(v):
            raise ValueError(f"tolerance must be finite, got {v}")
        return v

    def scaled(self, factor: float) -> "ToleranceConfig":
        """
        Новая конфигурация с толерантностями, умноженными на factor.

        Удобно для EPSILON-масштабированных проверок, где ошибка
        округления накапливается по нескольким операциям.

        Args:
            factor: Множитель (>= 0)

        Returns:
            Новый ToleranceConfig

        Raises:
            ValueError: Если factor < 0 или NaN/Inf
        """
        if not math.isfinite(factor) or factor < 0:
            raise ValueError(f"factor must be a non-negative finite float, got {factor}")

        return ToleranceConfig(
            rel_tol=self.rel_tol * factor,
            abs_tol=self.abs_tol * factor,
        )


DEFAULT_TOLERANCE: Final[ToleranceConfig] = ToleranceConfig()


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def is_close(
    a: float,
    b: float,
    tolerance: ToleranceConfig = DEFAULT_TOLERANCE,
) -> bool:
    """
    Сравнение float с учётом толерантности.

    Args:
        a: Первое значение
        b: Второе значение
        tolerance: Конфигурация толерантности (default: rel_tol=EPSILON)

    Returns:
        True если значения близки

    Examples:
        >>> is_close(0.6, 3.0 * 0.2)
        True
        >>> is_close(0.0, 1e-300)
        False
        >>> is_close(0.0, 1e-13, ToleranceConfig(abs_tol=1e-12))
        True
    """
    return math.isclose(a, b, rel_tol=tolerance.rel_tol, abs_tol=tolerance.abs_tol)


def vectors_close(
    v1: "Vector | Iterable[float]",
    v2: "Vector | Iterable[float]",
    tolerance: ToleranceConfig = DEFAULT_TOLERANCE,
) -> bool:
    """
    Поэлементное приближённое сравнение двух векторов.

    Args:
        v1: Первый вектор (Vector или последовательность float)
        v2: Второй вектор
        tolerance: Конфигурация толерантности

    Returns:
        False при разной длине, иначе True если все пары элементов близки
    """
    left = list(v1)
    right = list(v2)

    if len(left) != len(right):
        return False

    return all(is_close(a, b, tolerance) for a, b in zip(left, right))
