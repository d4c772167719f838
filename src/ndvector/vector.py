"""
Vector — N-мерный вектор над double

Единственный value type библиотеки и его набор операций:
- Construction: new, new_with_values, clone
- Mutation (in-place): set, scale, zero, do, do_with_index
- Binary operations (новый вектор): add, sub, dot, cross, hadamard
- Derived metrics: magnitude, unit

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Длина фиксируется при создании; in-place операции никогда не меняют длину
2. Vector владеет своим хранилищем эксклюзивно; результат бинарной операции
   никогда не разделяет хранилище с операндами
3. add/sub усекают до min(len), dot/hadamard/cross сообщают об ошибке
4. NaN/Inf не отклоняются, распространяются по правилам IEEE-754
"""

import logging
import math
from typing import Callable, Iterable, Iterator, overload

from ndvector.errors import DimensionMismatchError, InvalidDimensionError

logger = logging.getLogger(__name__)

# Размерность, для которой определено векторное произведение
CROSS_DIMENSION = 3


class Vector:
    """
    Упорядоченная mutable последовательность float фиксированной длины.

    Конструктор копирует values (deep copy), поэтому изменение источника
    после создания не влияет на вектор, и наоборот.

    Examples:
        >>> v = Vector([3.0, 4.0])
        >>> v.magnitude()
        5.0
        >>> v.add(Vector([1.0]))
        Vector([4.0])
    """

    __slots__ = ("_data",)

    def __init__(self, values: Iterable[float] = ()) -> None:
        self._data: list[float] = [float(e) for e in values]

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    @overload
    def __getitem__(self, index: int) -> float: ...

    @overload
    def __getitem__(self, index: slice) -> "Vector": ...

    def __getitem__(self, index: int | slice) -> "float | Vector":
        if isinstance(index, slice):
            return Vector(self._data[index])
        return self._data[index]

    def __setitem__(self, index: int, value: float) -> None:
        if isinstance(index, slice):
            raise TypeError("Vector does not support slice assignment, use set()")
        self._data[index] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector({self._data!r})"

    def __copy__(self) -> "Vector":
        return self.clone()

    def __deepcopy__(self, memo: dict) -> "Vector":
        return self.clone()

    def to_list(self) -> list[float]:
        """Новый list[float] с элементами вектора."""
        return list(self._data)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def clone(self) -> "Vector":
        """Копия вектора с независимым хранилищем."""
        return new_with_values(self._data)

    # -------------------------------------------------------------------------
    # Mutation (in-place)
    # -------------------------------------------------------------------------

    def set(self, values: Iterable[float]) -> None:
        """
        Перезапись элементов начиная с индекса 0.

        Копируется min(len(self), len(values)) элементов. Длина вектора
        не меняется; элементы за пределами len(values) остаются прежними.

        Args:
            values: Источник значений
        """
        source = list(values)
        copy_count = min(len(self._data), len(source))
        for i in range(copy_count):
            self._data[i] = float(source[i])

    def scale(self, factor: float) -> None:
        """Умножение каждого элемента на factor (in-place)."""
        data = self._data
        for i in range(len(data)):
            data[i] *= factor

    def zero(self) -> None:
        """Обнуление всех элементов (in-place)."""
        data = self._data
        for i in range(len(data)):
            data[i] = 0.0

    def do(self, fn: Callable[[float], float]) -> None:
        """
        Замена каждого элемента e на fn(e), в порядке индексов.

        Args:
            fn: Преобразование элемента
        """
        data = self._data
        for i, e in enumerate(data):
            data[i] = float(fn(e))

    def do_with_index(self, fn: Callable[[int, float], float]) -> None:
        """
        Замена элемента i на fn(i, e), в порядке индексов.

        Args:
            fn: Преобразование (индекс, элемент) -> элемент
        """
        data = self._data
        for i, e in enumerate(data):
            data[i] = float(fn(i, e))

    # -------------------------------------------------------------------------
    # Binary operations
    # -------------------------------------------------------------------------

    def add(self, other: "Vector") -> "Vector":
        """
        Поэлементная сумма как новый вектор.

        Длина результата = min(len(self), len(other)); лишние элементы
        более длинного операнда отбрасываются без ошибки.
        """
        return Vector([a + b for a, b in zip(self._data, other._data)])

    def sub(self, other: "Vector") -> "Vector":
        """
        Поэлементная разность self[i] - other[i] как новый вектор.

        Усечение до min(len) как у add().
        """
        return Vector([a - b for a, b in zip(self._data, other._data)])

    def dot(self, other: "Vector") -> float:
        """
        Скалярное произведение.

        Args:
            other: Вектор той же размерности

        Returns:
            sum(self[i] * other[i])

        Raises:
            DimensionMismatchError: Если длины различаются
        """
        if len(self._data) != len(other._data):
            logger.debug(
                "dot: size mismatch %d vs %d", len(self._data), len(other._data)
            )
            raise DimensionMismatchError("dot", len(self._data), len(other._data))

        result = 0.0
        for a, b in zip(self._data, other._data):
            result += a * b
        return result

    def cross(self, other: "Vector") -> "Vector":
        """
        Векторное произведение (только 3D).

        Проверка размерности выполняется до выделения результата.

        Args:
            other: 3-мерный вектор

        Returns:
            Новый 3-мерный вектор self × other

        Raises:
            InvalidDimensionError: Если хотя бы один операнд не 3-мерный
        """
        if len(self._data) != CROSS_DIMENSION or len(other._data) != CROSS_DIMENSION:
            logger.debug(
                "cross: invalid dimension %d x %d", len(self._data), len(other._data)
            )
            raise InvalidDimensionError(
                "cross", CROSS_DIMENSION, len(self._data), len(other._data)
            )

        a = self._data
        b = other._data
        return Vector(
            [
                a[1] * b[2] - a[2] * b[1],
                a[2] * b[0] - a[0] * b[2],
                a[0] * b[1] - a[1] * b[0],
            ]
        )

    def hadamard(self, other: "Vector") -> "Vector":
        """
        Произведение Адамара (поэлементное умножение) как новый вектор.

        Raises:
            DimensionMismatchError: Если длины различаются
        """
        if len(self._data) != len(other._data):
            logger.debug(
                "hadamard: size mismatch %d vs %d", len(self._data), len(other._data)
            )
            raise DimensionMismatchError("hadamard", len(self._data), len(other._data))

        return Vector([a * b for a, b in zip(self._data, other._data)])

    # -------------------------------------------------------------------------
    # Derived metrics
    # -------------------------------------------------------------------------

    def magnitude(self) -> float:
        """
        Евклидова норма (L2): sqrt(sum(e * e)).

        Пустой вектор → 0.0. NaN/Inf в элементах распространяются.
        """
        result = 0.0
        for e in self._data:
            result += e * e
        return math.sqrt(result)

    def unit(self) -> "Vector":
        """Единичный вектор того же направления, см. unit()."""
        return unit(self)


# =============================================================================
# CONSTRUCTION
# =============================================================================


def new(size: int) -> Vector:
    """
    Вектор заданного размера, заполненный 0.0.

    Args:
        size: Размерность (>= 0)

    Returns:
        Новый нулевой вектор

    Raises:
        ValueError: Если size < 0
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")

    return Vector([0.0] * size)


def new_with_values(values: Iterable[float]) -> Vector:
    """
    Вектор с копией значений values.

    Длина равна длине values; хранилище независимо от источника.
    """
    return Vector(values)


# =============================================================================
# DERIVED METRICS
# =============================================================================


def unit(v: Vector) -> Vector:
    """
    Единичный вектор: v, умноженный на 1 / |v|. Исходный v не изменяется.

    Нулевой вектор специально не обрабатывается: обратная величина нулевой
    нормы равна +inf, поэтому нулевые элементы становятся NaN (0.0 * inf),
    а ненулевые ±inf.

    Args:
        v: Исходный вектор

    Returns:
        Новый вектор

    Examples:
        >>> unit(Vector([0.0, 2.0]))
        Vector([0.0, 1.0])
    """
    magnitude = v.magnitude()
    # 1.0 / 0.0 в Python бросает ZeroDivisionError, IEEE-754 даёт +inf
    mag_rec = math.inf if magnitude == 0.0 else 1.0 / magnitude

    result = v.clone()
    result.scale(mag_rec)
    return result
