"""
Errors — Таксономия ошибок векторных операций

Ровно два вида ошибок размерности:
- DimensionMismatchError: операнды обязаны иметь равную длину (dot, hadamard)
- InvalidDimensionError: операция с фиксированной размерностью (cross, только 3D)

add/sub НЕ входят в таксономию: несовпадение длин там разрешается
усечением до min(len), без ошибки.

Обе ошибки наследуют ValueError, поэтому код, перехватывающий ValueError,
продолжает работать.
"""


class VectorError(Exception):
    """Базовый класс ошибок векторных операций."""

    pass


class DimensionMismatchError(VectorError, ValueError):
    """
    Длины операндов не совпадают там, где требуется точное равенство.

    Attributes:
        operation: Имя операции ('dot', 'hadamard')
        left: Длина левого операнда
        right: Длина правого операнда
    """

    def __init__(self, operation: str, left: int, right: int) -> None:
        self.operation = operation
        self.left = left
        self.right = right
        super().__init__(
            f"{operation}: vectors must have the same size, got {left} and {right}"
        )


class InvalidDimensionError(VectorError, ValueError):
    """
    Операнд имеет недопустимую размерность для операции с фиксированной
    размерностью (cross определён только для 3D).

    Attributes:
        operation: Имя операции ('cross')
        expected: Требуемая размерность
        left: Длина левого операнда
        right: Длина правого операнда
    """

    def __init__(self, operation: str, expected: int, left: int, right: int) -> None:
        self.operation = operation
        self.expected = expected
        self.left = left
        self.right = right
        super().__init__(
            f"{operation}: both vectors must have dimension {expected}, "
            f"got {left} and {right}"
        )
