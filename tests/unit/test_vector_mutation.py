"""
Тесты in-place операций Vector

Проверяет:
1. set: bounded copy без изменения длины
2. scale: умножение, обратимость, IEEE-распространение
3. zero: обнуление
4. do / do_with_index: поэлементные преобразования в порядке индексов
"""

import math

import pytest

from ndvector import EPSILON, ToleranceConfig, new, new_with_values, vectors_close


class TestSet:
    """Тесты для set"""

    def test_full_overwrite(self) -> None:
        """Перезапись при равной длине"""
        v = new(4)
        v.set([10.0, 9.9, 9.8, 9.7])
        assert v.to_list() == [10.0, 9.9, 9.8, 9.7]

        v.set([1.0, 2.0, 3.0, 4.0])
        assert v.to_list() == [1.0, 2.0, 3.0, 4.0]

    def test_shorter_values_partial_overwrite(self) -> None:
        """Элементы за пределами len(values) не изменяются"""
        v = new_with_values([1.0, 2.0, 3.0, 4.0])
        v.set([7.0, 8.0])
        assert v.to_list() == [7.0, 8.0, 3.0, 4.0]

    def test_longer_values_truncated(self) -> None:
        """Лишние значения отбрасываются, длина не меняется"""
        v = new(2)
        v.set([1.0, 2.0, 3.0, 4.0])
        assert len(v) == 2
        assert v.to_list() == [1.0, 2.0]

    def test_empty_values_noop(self) -> None:
        v = new_with_values([1.0, 2.0])
        v.set([])
        assert v.to_list() == [1.0, 2.0]

    def test_returns_none(self) -> None:
        assert new(1).set([1.0]) is None

    def test_no_aliasing_with_values(self) -> None:
        """Источник копируется, а не связывается"""
        source = [1.0, 2.0]
        v = new(2)
        v.set(source)
        source[0] = 5.0
        assert v[0] == 1.0


class TestScale:
    """Тесты для scale"""

    def test_scale(self) -> None:
        v = new_with_values([0.0, 1.0, 2.0, 1.0])
        v.scale(2.5)
        assert v.to_list() == [0.0, 2.5, 5.0, 2.5]

    def test_scale_restores_with_reciprocal(self) -> None:
        """scale(k) затем scale(1/k) восстанавливает значения"""
        original = new_with_values([0.1, -3.7, 1e10, 42.0])
        for k in (3.0, -0.7, 1e-5, 123456.789):
            v = original.clone()
            v.scale(k)
            v.scale(1.0 / k)
            assert vectors_close(v, original, ToleranceConfig(rel_tol=4 * EPSILON))

    def test_scale_by_zero(self) -> None:
        v = new_with_values([1.0, -2.0])
        v.scale(0.0)
        assert v.magnitude() == 0.0

    def test_scale_by_inf_propagates(self) -> None:
        """IEEE: 0 * inf = NaN, ненулевые → ±inf"""
        v = new_with_values([0.0, 1.0, -1.0])
        v.scale(math.inf)
        assert math.isnan(v[0])
        assert v[1] == math.inf
        assert v[2] == -math.inf

    def test_scale_preserves_storage(self) -> None:
        """In-place: длина и объект не меняются"""
        v = new_with_values([1.0, 2.0])
        result = v.scale(2.0)
        assert result is None
        assert len(v) == 2


class TestZero:
    """Тесты для zero"""

    def test_zero(self) -> None:
        v = new_with_values([0.0, 1.0, 2.0, 1.0])
        v.zero()
        assert v.to_list() == [0.0, 0.0, 0.0, 0.0]

    def test_zero_then_magnitude_exact(self) -> None:
        """zero() затем magnitude() даёт ровно 0.0"""
        v = new_with_values([math.nan, math.inf, -5.0])
        v.zero()
        assert v.magnitude() == 0.0


class TestDo:
    """Тесты для do и do_with_index"""

    def test_do_with_index_then_do(self) -> None:
        v = new_with_values([0.0, 1.0, 2.0, 1.0])
        v.do_with_index(lambda i, e: e * 3.0)
        assert v.to_list() == [0.0, 3.0, 6.0, 3.0]

        v.do(lambda e: e * 2.0)
        assert v.to_list() == [0.0, 6.0, 12.0, 6.0]

    def test_do_with_index_receives_index(self) -> None:
        v = new(4)
        v.do_with_index(lambda i, e: e + i)
        assert v.to_list() == [0.0, 1.0, 2.0, 3.0]

    def test_index_order(self) -> None:
        """Преобразование применяется в порядке индексов"""
        seen: list[int] = []

        def record(i: int, e: float) -> float:
            seen.append(i)
            return e

        new(5).do_with_index(record)
        assert seen == [0, 1, 2, 3, 4]

    def test_do_on_empty_never_calls(self) -> None:
        def fail(e: float) -> float:
            raise AssertionError("must not be called")

        new(0).do(fail)

    def test_transform_error_propagates(self) -> None:
        """Исключение из преобразования не подавляется"""
        v = new_with_values([1.0, 0.0])
        with pytest.raises(ZeroDivisionError):
            v.do(lambda e: 1.0 / e)
