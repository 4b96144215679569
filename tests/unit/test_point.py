"""
Тесты для Point

Проверяет:
1. Трансляцию векторами и разность точек
2. flip и лексикографический порядок
3. Покоординатную алгебру (AND, L1-сумма, hull, intersect, enlarge)
4. Прямоугольники Point[Interval, Interval]
5. Инварианты (round-trip трансляции, симметрия расстояния)
"""

import pytest

from physdes.core.domain.interval import Interval
from physdes.core.domain.point import Point
from physdes.core.domain.vector2 import Vector2
from physdes.core.math.numerical_safeguards import DistanceOverflowError

POINTS = [Point(0, 0), Point(3, 5), Point(-4, 7), Point(12, -23), Point(7, 8)]
VECTORS = [Vector2(0, 0), Vector2(5, 6), Vector2(-3, 2), Vector2(34, -45)]


# =============================================================================
# ТРАНСЛЯЦИЯ
# =============================================================================


class TestPointTranslation:
    """Point ± Vector2, Point - Point"""

    def test_add_sub_vector(self) -> None:
        """Трансляция вектором"""
        a = Point(3, 5)
        b = Vector2(5, 7)
        assert a + b == Point(8, 12)
        assert a - b == Point(-2, -2)

    def test_point_difference_is_vector(self) -> None:
        """Разность точек — Vector2"""
        assert Point(8, 12) - Point(3, 5) == Vector2(5, 7)

    def test_round_trip(self) -> None:
        """(P + V) - V == P и (P - V) + V == P"""
        for p in POINTS:
            for v in VECTORS:
                assert (p + v) - v == p
                assert (p - v) + v == p

    def test_augmented_assignment(self) -> None:
        """+= и -= с вектором"""
        a = Point(3, 5)
        b = Vector2(5, 7)
        a += b
        assert a == Point(8, 12)
        a -= b
        assert a == Point(3, 5)

    def test_negate(self) -> None:
        """Отрицание"""
        assert -Point(3, -5) == Point(-3, 5)

    def test_rectangle_translation(self) -> None:
        """Трансляция прямоугольника"""
        r = Point(Interval(3, 4), Interval(5, 6))
        assert r + Vector2(1, 2) == Point(Interval(4, 5), Interval(7, 8))


# =============================================================================
# FLIP И ПОРЯДОК
# =============================================================================


class TestPointFlipOrder:
    """flip и лексикографический порядок"""

    def test_flip(self) -> None:
        """(x, y) -> (y, x)"""
        assert Point(3, 5).flip() == Point(5, 3)
        r = Point(Interval(1, 2), 7)
        assert r.flip() == Point(7, Interval(1, 2))
        assert r.flip().flip() == r

    def test_lexicographic(self) -> None:
        """Сравнение сначала по x, затем по y"""
        a = Point(4, 8)
        b = Point(5, 6)
        assert a < b
        assert a <= b
        assert b > a
        assert b != a
        assert Point(4, 6) < Point(4, 8)

    def test_sort(self) -> None:
        """Сортировка точек"""
        assert sorted([Point(5, 6), Point(4, 8), Point(4, 6)]) == [
            Point(4, 6),
            Point(4, 8),
            Point(5, 6),
        ]

    def test_str(self) -> None:
        """Формат (x, y)"""
        assert str(Point(3, 5)) == "(3, 5)"
        assert str(Point(Interval(3, 4), Interval(5, 6))) == "([3, 4], [5, 6])"

    def test_hashable(self) -> None:
        """Разные точки — разные элементы множества"""
        assert len({Point(0, 0), Point(1, 0), Point(0, 1), Point(0, 0)}) == 3


# =============================================================================
# АЛГЕБРА
# =============================================================================


class TestPointAlgebra:
    """Покоординатные операции"""

    def test_overlaps_and(self) -> None:
        """Пересечение — AND по осям"""
        r = Point(Interval(3, 4), Interval(5, 6))
        assert r.overlaps(Point(4, 5))
        assert not r.overlaps(Point(4, 7))
        assert r.overlaps(Point(Interval(4, 9), Interval(0, 5)))

    def test_contains_and(self) -> None:
        """Содержание — AND по осям"""
        r = Point(Interval(3, 8), Interval(5, 9))
        assert r.contains(Point(4, 5))
        assert r.contains(Point(Interval(4, 6), Interval(6, 9)))
        assert not r.contains(Point(Interval(4, 9), Interval(6, 9)))
        assert not Point(4, 5).contains(r)

    def test_min_dist_l1(self) -> None:
        """Расстояние — сумма по осям"""
        assert Point(3, 5).min_dist_with(Point(7, 8)) == 7
        r = Point(Interval(0, 2), Interval(0, 2))
        assert r.min_dist_with(Point(5, 1)) == 3
        assert r.min_dist_with(Point(5, 6)) == 7

    def test_min_dist_symmetric(self) -> None:
        """A.min_dist_with(B) == B.min_dist_with(A)"""
        for a in POINTS:
            for b in POINTS:
                assert a.min_dist_with(b) == b.min_dist_with(a)

    def test_min_dist_sum_overflow(self) -> None:
        """Сумма осей, превышающая u32, — ошибка"""
        a = Point(0, 0)
        b = Point(2**31, 2**31)
        with pytest.raises(DistanceOverflowError):
            a.min_dist_with(b)

    def test_displace(self) -> None:
        """Смещение — Vector2 (self - other)"""
        a, b, c = Point(3, 5), Point(5, 7), Point(7, 8)
        assert a.displace(b) == Vector2(-2, -2)
        assert a.displace(c) == Vector2(-4, -3)
        assert b.displace(c) == Vector2(-2, -1)

    def test_hull(self) -> None:
        """Оболочка двух точек — прямоугольник"""
        assert Point(3, 5).hull_with(Point(5, 7)) == Point(Interval(3, 5), Interval(5, 7))
        assert Point(5, 7).hull_with(Point(3, 5)) == Point(Interval(3, 5), Interval(5, 7))

    def test_hull_rectangle_with_point(self) -> None:
        """Оболочка прямоугольника и точки"""
        r = Point(Interval(3, 4), Interval(5, 6))
        assert r.hull_with(Point(8, 1)) == Point(Interval(3, 8), Interval(1, 6))

    def test_intersect(self) -> None:
        """Пересечение прямоугольника и точки"""
        r = Point(Interval(3, 4), Interval(5, 6))
        assert r.intersect_with(Point(4, 5)) == Point(Interval(4, 4), Interval(5, 5))

    def test_intersect_empty_iff_disjoint(self) -> None:
        """Пустое пересечение тогда и только тогда, когда не пересекаются"""
        rects = [
            Point(Interval(0, 4), Interval(0, 4)),
            Point(Interval(4, 8), Interval(2, 3)),
            Point(Interval(5, 6), Interval(5, 6)),
            Point(Interval(-3, -1), Interval(0, 10)),
        ]
        for a in rects:
            for b in rects:
                assert a.intersect_with(b).is_invalid() == (not a.overlaps(b))

    def test_enlarge(self) -> None:
        """Расширение точки — квадрат"""
        assert Point(3, 5).enlarge_with(2) == Point(Interval(1, 5), Interval(3, 7))

    def test_enlarge_identity_rectangle(self) -> None:
        """Расширение прямоугольника на 0 — тождество"""
        r = Point(Interval(3, 4), Interval(5, 6))
        assert r.enlarge_with(0) == r

    def test_requires_point(self) -> None:
        """Операции требуют Point-операнд"""
        with pytest.raises(TypeError, match="expects a Point"):
            Point(3, 5).overlaps(3)


class TestRectangleCorners:
    """lower_corner / upper_corner"""

    def test_corners(self) -> None:
        """Углы прямоугольника"""
        r = Point(Interval(3, 8), Interval(5, 9))
        assert r.lower_corner() == Point(3, 5)
        assert r.upper_corner() == Point(8, 9)

    def test_corners_contained(self) -> None:
        """Углы лежат внутри прямоугольника"""
        r = Point(Interval(3, 8), Interval(5, 9))
        assert r.contains(r.lower_corner())
        assert r.contains(r.upper_corner())
