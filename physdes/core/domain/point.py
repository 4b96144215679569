"""
Point — пара координат (xcoord, ycoord) с независимыми типами

Point[int, int] — точка на плоскости.
Point[Interval, Interval] — прямоугольник, выровненный по осям.

Все алгебраические операции поднимаются покоординатно:
- overlaps / contains — AND по осям
- min_dist_with — СУММА по осям (L1-метрика)
- hull_with / intersect_with / enlarge_with — по осям
- displace — Vector2
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from physdes.core.domain.interval import enlarge, hull, intersection
from physdes.core.domain.vector2 import Vector2
from physdes.core.math.generic import contain, displacement, is_invalid, min_dist, overlap
from physdes.core.math.numerical_safeguards import SafeguardConfig, checked_distance_sum

T1 = TypeVar("T1")
T2 = TypeVar("T2")


def _require_point(other: Any, op: str) -> None:
    if not isinstance(other, Point):
        raise TypeError(f"Point.{op} expects a Point, got {type(other).__name__}")


@dataclass(frozen=True)
class Point(Generic[T1, T2]):
    """
    Точка / прямоугольник в ортогональных координатах.

    Examples:
        >>> Point(3, 5) + Vector2(5, 7)
        Point(xcoord=8, ycoord=12)
        >>> Point(3, 5).flip()
        Point(xcoord=5, ycoord=3)
        >>> str(Point(3, 5))
        '(3, 5)'
    """

    xcoord: T1
    ycoord: T2

    def __str__(self) -> str:
        return f"({self.xcoord}, {self.ycoord})"

    def flip(self) -> "Point[T2, T1]":
        """Транспонирование осей: (x, y) -> (y, x)"""
        return Point(self.ycoord, self.xcoord)

    def is_invalid(self) -> bool:
        """True если хотя бы одна ось пуста"""
        return is_invalid(self.xcoord) or is_invalid(self.ycoord)

    def lower_corner(self) -> "Point":
        """Левый нижний угол прямоугольника (lb по обеим осям)"""
        return Point(self.xcoord.lb, self.ycoord.lb)

    def upper_corner(self) -> "Point":
        """Правый верхний угол прямоугольника (ub по обеим осям)"""
        return Point(self.xcoord.ub, self.ycoord.ub)

    # -------------------------------------------------------------------------
    # Лексикографический порядок
    # -------------------------------------------------------------------------

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.xcoord, self.ycoord) < (other.xcoord, other.ycoord)

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.xcoord, self.ycoord) <= (other.xcoord, other.ycoord)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.xcoord, self.ycoord) > (other.xcoord, other.ycoord)

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.xcoord, self.ycoord) >= (other.xcoord, other.ycoord)

    # -------------------------------------------------------------------------
    # Трансляция
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "Point":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Point(self.xcoord + other.x, self.ycoord + other.y)

    def __sub__(self, other: Any) -> Any:
        # Point - Vector2 -> Point, Point - Point -> Vector2
        if isinstance(other, Vector2):
            return Point(self.xcoord - other.x, self.ycoord - other.y)
        if isinstance(other, Point):
            return Vector2(self.xcoord - other.xcoord, self.ycoord - other.ycoord)
        return NotImplemented

    def __neg__(self) -> "Point":
        return Point(-self.xcoord, -self.ycoord)

    # -------------------------------------------------------------------------
    # Алгебра
    # -------------------------------------------------------------------------

    def overlaps(self, other: Any) -> bool:
        """Пересечение по обеим осям"""
        _require_point(other, "overlaps")
        return overlap(self.xcoord, other.xcoord) and overlap(self.ycoord, other.ycoord)

    def contains(self, other: Any) -> bool:
        """
        Содержание по обеим осям.

        Examples:
            >>> from physdes.core.domain.interval import Interval
            >>> Point(Interval(3, 4), Interval(5, 6)).contains(Point(4, 5))
            True
        """
        _require_point(other, "contains")
        return contain(self.xcoord, other.xcoord) and contain(self.ycoord, other.ycoord)

    def min_dist_with(self, other: Any, config: SafeguardConfig | None = None) -> int:
        """
        Манхэттенское (L1) расстояние: сумма зазоров по осям.

        Каждая ось и итоговая сумма проверяются по ширине config.

        Examples:
            >>> Point(3, 5).min_dist_with(Point(7, 8))
            7
        """
        _require_point(other, "min_dist_with")
        return checked_distance_sum(
            (
                min_dist(self.xcoord, other.xcoord, config),
                min_dist(self.ycoord, other.ycoord, config),
            ),
            config,
        )

    def displace(self, other: Any) -> Vector2:
        """Смещение self относительно other покоординатно"""
        _require_point(other, "displace")
        return Vector2(
            displacement(self.xcoord, other.xcoord),
            displacement(self.ycoord, other.ycoord),
        )

    def hull_with(self, other: Any) -> "Point":
        """Минимальный прямоугольник, покрывающий оба операнда"""
        _require_point(other, "hull_with")
        return Point(hull(self.xcoord, other.xcoord), hull(self.ycoord, other.ycoord))

    def intersect_with(self, other: Any) -> "Point":
        """
        Пересечение по осям; пустая ось даёт невалидный Interval.

        Examples:
            >>> from physdes.core.domain.interval import Interval
            >>> Point(Interval(3, 4), Interval(5, 6)).intersect_with(Point(4, 5))
            Point(xcoord=Interval(lb=4, ub=4), ycoord=Interval(lb=5, ub=5))
        """
        _require_point(other, "intersect_with")
        return Point(
            intersection(self.xcoord, other.xcoord),
            intersection(self.ycoord, other.ycoord),
        )

    def enlarge_with(self, alpha: Any) -> "Point":
        """Расширение на alpha по обеим осям"""
        return Point(enlarge(self.xcoord, alpha), enlarge(self.ycoord, alpha))
